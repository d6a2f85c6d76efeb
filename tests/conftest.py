import matplotlib

matplotlib.use('Agg')

import pytest


class ScriptedRng:
    """Random source that replays fixed uniform and integer draws."""

    def __init__(self, uniforms=(), integers=(), uniform_default=0.0):
        self._uniforms = list(uniforms)
        self._integers = list(integers)
        self._uniform_default = uniform_default

    def random(self):
        if self._uniforms:
            return self._uniforms.pop(0)
        return self._uniform_default

    def integers(self, low, high, endpoint=False):
        value = self._integers.pop(0) if self._integers else low
        top = high if endpoint else high - 1
        assert low <= value <= top
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng
