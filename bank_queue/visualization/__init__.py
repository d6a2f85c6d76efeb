"""Visualization utilities for the bank queue simulation."""

from .plotting import (
    plot_wait_distribution,
    plot_queue_over_time,
    plot_arrival_comparison,
    plot_simulation_dashboard,
    plot_replication_summary
)

__all__ = [
    'plot_wait_distribution',
    'plot_queue_over_time',
    'plot_arrival_comparison',
    'plot_simulation_dashboard',
    'plot_replication_summary'
]
