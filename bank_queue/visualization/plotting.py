"""
Visualization utilities for bank counter simulations.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import List, Optional
import seaborn as sns

from bank_queue.analysis.statistics import EXTREME_WAIT, WaitTimeReport
from bank_queue.system.bank_simulation import SimulationResult


def plot_wait_time_distribution(wait_times: List[int],
                                title: str = "Customer Wait Times"):
    """Histogram of wait times with the mean and the extreme-wait line."""
    fig, ax = plt.subplots(figsize=(10, 6))

    if wait_times:
        sns.histplot(wait_times, discrete=True, ax=ax, color='steelblue')
        ax.axvline(np.mean(wait_times), color='black', linestyle='--',
                   label=f"Mean ({np.mean(wait_times):.2f} min)")
        if max(wait_times) > EXTREME_WAIT:
            ax.axvline(EXTREME_WAIT, color='red', linestyle=':',
                       label=f"{EXTREME_WAIT} min")
        ax.legend()
    else:
        ax.text(0.5, 0.5, 'No customers served',
                ha='center', va='center', transform=ax.transAxes)

    ax.set_xlabel('Wait Time (minutes)')
    ax.set_ylabel('Customers')
    ax.set_title(title)
    return fig


def plot_queue_length(result: SimulationResult):
    """Queue length sampled each minute of the horizon."""
    fig, ax = plt.subplots(figsize=(12, 6))

    minutes = np.arange(len(result.queue_length_history))
    ax.step(minutes, result.queue_length_history, where='post')
    ax.axhline(result.max_queue_size, color='red', linestyle='--', alpha=0.6,
               label=f"Max ({result.max_queue_size})")

    ax.set_xlabel('Minute')
    ax.set_ylabel('Customers Waiting')
    ax.set_title(f'Queue Length (lambda={result.arrival_rate}, '
                 f'{result.num_tellers} teller(s))')
    ax.set_xlim(0, result.horizon)
    ax.grid(True, alpha=0.3)
    ax.legend()
    return fig


def plot_teller_load(result: SimulationResult):
    """Customers served by each teller."""
    fig, ax = plt.subplots(figsize=(8, 5))

    labels = [f"Teller {i + 1}" for i in range(result.num_tellers)]
    sns.barplot(x=labels, y=result.served_per_teller, ax=ax, color='seagreen')
    ax.set_ylabel('Customers Served')
    ax.set_title(f'Teller Load (utilization {result.teller_utilization:.1%})')
    return fig


def create_performance_report(result: SimulationResult,
                              report: Optional[WaitTimeReport] = None,
                              save_path: Optional[str] = None):
    """Dashboard of one run: queue length, wait histogram and a text summary."""
    fig = plt.figure(figsize=(16, 12))
    grid = fig.add_gridspec(2, 2)

    ax_queue = fig.add_subplot(grid[0, :])
    ax_queue.step(np.arange(len(result.queue_length_history)),
                  result.queue_length_history, where='post')
    ax_queue.set_xlabel('Minute')
    ax_queue.set_ylabel('Customers Waiting')
    ax_queue.set_title('Queue Length Over the Horizon')
    ax_queue.grid(True, alpha=0.3)

    ax_wait = fig.add_subplot(grid[1, 0])
    if result.wait_times:
        sns.histplot(result.wait_times, discrete=True, ax=ax_wait, color='steelblue')
    ax_wait.set_xlabel('Wait Time (minutes)')
    ax_wait.set_title('Wait Time Distribution')

    ax_text = fig.add_subplot(grid[1, 1])
    ax_text.axis('off')

    stats_text = f"""
    Simulation Summary
    ------------------
    Total customers arrived: {result.total_arrived}
    Total customers served:  {result.total_served}
    Maximum queue size:      {result.max_queue_size}
    Extra time needed:       {result.extra_minutes} minutes
    Teller utilization:      {result.teller_utilization:.1%}
    """

    if report is not None:
        stats_text += f"""
    Mean wait:    {report.mean:.2f} min
    Median wait:  {report.median:.2f} min
    Mode wait:    {report.mode} min
    Std dev:      {report.std_dev:.2f} min
    Min / Max:    {report.minimum} / {report.maximum} min
    Staffing:     {report.staffing.value}
    """

    ax_text.text(0.05, 0.95, stats_text, transform=ax_text.transAxes,
                 fontfamily='monospace', verticalalignment='top')

    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')

    return fig
