"""
Visualization utilities for the bank queue simulation.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional, Sequence
import seaborn as sns
from scipy import stats


def plot_wait_distribution(wait_sample: Sequence[float],
                           title: str = "Customer Wait Times",
                           ax=None):
    """Histogram of wait times with mean and median markers."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    if len(wait_sample) == 0:
        ax.text(0.5, 0.5, 'No customers served',
                ha='center', va='center', transform=ax.transAxes)
        ax.set_title(title)
        return fig

    waits = np.asarray(wait_sample, dtype=float)
    # One bin per whole minute of waiting
    bins = np.arange(waits.min() - 0.5, waits.max() + 1.5, 1.0)
    sns.histplot(waits, bins=bins, ax=ax, color='steelblue')
    ax.axvline(np.mean(waits), color='red', linestyle='--', label=f'Mean {np.mean(waits):.2f}')
    ax.axvline(np.median(waits), color='green', linestyle=':', label=f'Median {np.median(waits):.2f}')
    ax.set_xlabel('Wait (minutes)')
    ax.set_ylabel('Customers')
    ax.set_title(title)
    ax.legend()
    return fig


def plot_queue_over_time(queue_lengths: Sequence[int],
                         busy_tellers: Optional[Sequence[int]] = None,
                         window_length: Optional[int] = None,
                         ax=None):
    """Plot queue length (and busy tellers) after each simulated minute."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 6))
    else:
        fig = ax.figure

    minutes = np.arange(len(queue_lengths))
    ax.step(minutes, queue_lengths, where='post', label='Queue length')
    if busy_tellers is not None:
        ax.step(minutes, busy_tellers, where='post', alpha=0.7, label='Busy tellers')
    if window_length is not None:
        ax.axvline(window_length, color='gray', linestyle='--', label='Closing time')

    ax.set_xlabel('Minute')
    ax.set_ylabel('Count')
    ax.set_title('Queue Length Over the Day')
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def plot_arrival_comparison(arrival_counts: List[int],
                            arrival_rate: float,
                            ax=None):
    """Compare simulated per-minute arrival counts with the Poisson pmf."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure

    counts = np.asarray(arrival_counts, dtype=int)
    k_max = int(counts.max()) if len(counts) else 0
    upper = int(stats.poisson.ppf(0.999, arrival_rate)) if arrival_rate > 0 else 0
    k = np.arange(0, max(k_max, upper) + 1)

    if len(counts):
        observed = np.bincount(counts, minlength=len(k))[:len(k)] / len(counts)
    else:
        observed = np.zeros(len(k))
    if arrival_rate > 0:
        theoretical = stats.poisson.pmf(k, arrival_rate)
    else:
        theoretical = (k == 0).astype(float)

    width = 0.4
    ax.bar(k - width / 2, observed, width, alpha=0.7, label='Simulated')
    ax.bar(k + width / 2, theoretical, width, alpha=0.7, label='Poisson pmf')
    ax.set_xlabel('Arrivals per minute')
    ax.set_ylabel('Probability')
    ax.set_title(f'Arrival Counts (lambda = {arrival_rate:g})')
    ax.legend()
    return fig


def plot_simulation_dashboard(simulation, title: str = "Bank Queue Simulation"):
    """Create a dashboard of a finished simulation run."""
    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 10))
    fig.suptitle(title, fontsize=16)

    plot_wait_distribution(simulation.wait_sample, ax=ax1)
    plot_queue_over_time(simulation.queue_length_history,
                         simulation.busy_tellers_history,
                         window_length=simulation.window_length,
                         ax=ax2)
    plot_arrival_comparison(simulation.arrival_history, simulation.arrival_rate, ax=ax3)

    # Customer flow
    metrics = simulation.metrics
    ax4.bar(['Arrived', 'Served'], [metrics.total_arrived, metrics.total_served])
    ax4.set_ylabel('Number of Customers')
    ax4.set_title('Customer Flow')

    plt.tight_layout()
    return fig


def plot_replication_summary(summary: dict, metric: str = 'mean'):
    """Box plot of a report field across replications."""
    values = summary['values'].get(metric, [])
    fig, ax = plt.subplots(figsize=(8, 6))
    if values:
        sns.boxplot(y=values, ax=ax)
    else:
        ax.text(0.5, 0.5, 'No data', ha='center', va='center', transform=ax.transAxes)
    ax.set_ylabel(metric)
    ax.set_title(f'{metric} across {summary["replications"]} replications')
    return fig
