#!/usr/bin/env python3
"""Command-line interface for running bank counter simulations."""

import argparse
import json
import logging
import sys
import numpy as np
from typing import Dict, List, Optional
from scipy import stats

from bank_queue.analysis.statistics import WaitTimeReport, summarize_wait_times
from bank_queue.config import SimulationConfig, load_config
from bank_queue.core.exceptions import InvalidParameterError
from bank_queue.system.bank_simulation import SimulationResult, run_simulation

logger = logging.getLogger(__name__)

REPLICATION_METRICS = [
    'total_arrived',
    'total_served',
    'max_queue_size',
    'extra_minutes',
    'mean_wait',
    'max_wait',
    'teller_utilization',
]


def prompt_arrival_rate() -> float:
    """Ask the user for lambda on stdin."""
    try:
        raw = input("Enter average customers per minute (lambda): ")
    except EOFError:
        raise InvalidParameterError("No arrival rate given on stdin")
    try:
        return float(raw)
    except ValueError:
        raise InvalidParameterError(f"Lambda must be a number, got {raw!r}")


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()

    if args.arrival_rate is not None:
        config.arrival_rate = args.arrival_rate
    if args.tellers is not None:
        config.num_tellers = args.tellers
    if args.horizon is not None:
        config.horizon = args.horizon
    if args.seed is not None:
        config.seed = args.seed
    if args.replications is not None:
        config.replications = args.replications

    if config.arrival_rate is None:
        config.arrival_rate = prompt_arrival_rate()

    config.validate()
    return config


def replication_metrics(result: SimulationResult) -> Dict[str, float]:
    """Flatten one run into the metrics compared across replications."""
    served = bool(result.wait_times)
    return {
        'total_arrived': result.total_arrived,
        'total_served': result.total_served,
        'max_queue_size': result.max_queue_size,
        'extra_minutes': result.extra_minutes,
        'mean_wait': float(np.mean(result.wait_times)) if served else 0.0,
        'max_wait': max(result.wait_times) if served else 0,
        'teller_utilization': result.teller_utilization,
    }


def run_replications(config: SimulationConfig,
                     confidence: float = 0.95) -> Dict:
    """Run independent replications and compute summary statistics."""
    base_seed = config.seed if config.seed is not None else 42
    results = []

    for i in range(config.replications):
        result = run_simulation(config.arrival_rate, config.num_tellers,
                                seed=base_seed + i, horizon=config.horizon)
        results.append(replication_metrics(result))

    summary = {
        'replications': config.replications,
        'arrival_rate': config.arrival_rate,
        'num_tellers': config.num_tellers,
        'horizon': config.horizon,
        'confidence': confidence,
        'metrics': {}
    }

    n = config.replications
    for key in REPLICATION_METRICS:
        values = np.array([r[key] for r in results], dtype=float)
        mean = float(np.mean(values))
        if n > 1:
            std = float(np.std(values, ddof=1))
            half_width = float(stats.t.ppf((1 + confidence) / 2, n - 1) * std / np.sqrt(n))
        else:
            std = 0.0
            half_width = 0.0
        summary['metrics'][key] = {
            'mean': mean,
            'std': std,
            'min': float(np.min(values)),
            'max': float(np.max(values)),
            'ci_low': mean - half_width,
            'ci_high': mean + half_width,
        }

    return summary


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def print_results(result: SimulationResult,
                  report: Optional[WaitTimeReport]) -> None:
    """Print a single run to the console."""
    print("\n========== SIMULATION RESULTS ==========")
    print(f"Total customers arrived: {result.total_arrived}")
    print(f"Total customers served: {result.total_served}")
    print(f"Maximum queue size: {result.max_queue_size}")
    print(f"Extra time needed: {result.extra_minutes} minutes")

    if report is None:
        return

    print("\n========================================")
    print("     WAIT TIME ANALYSIS REPORT")
    print("========================================\n")

    print("📊 Central Tendency Measures:")
    print(f"   Mean Wait Time:     {report.mean:.2f} minutes")
    print(f"   Median Wait Time:   {report.median:.2f} minutes")
    print(f"   Mode Wait Time:     {report.mode} minutes\n")

    print("📈 Dispersion Measures:")
    print(f"   Standard Deviation: {report.std_dev:.2f} minutes")
    print(f"   Variance:           {report.variance:.2f} minutes²\n")

    print("⏱️  Extreme Values:")
    print(f"   Minimum Wait Time:  {report.minimum} minutes")
    print(f"   Maximum Wait Time:  {report.maximum} minutes\n")

    print("========================================")
    print("\n💡 RECOMMENDATIONS:")
    for line in report.recommendations():
        print(f"   {line}")
    print("========================================")


def print_replication_summary(summary: Dict, detailed: bool = False) -> None:
    """Print replication statistics to the console."""
    print("\n=== Replication Results ===")
    print(f"Replications: {summary['replications']}")
    print(f"Lambda: {summary['arrival_rate']}, Tellers: {summary['num_tellers']}")

    level = int(summary['confidence'] * 100)
    for metric, values in summary['metrics'].items():
        print(f"  {metric}:")
        print(f"    Mean: {values['mean']:.4f} (±{values['std']:.4f})")
        print(f"    {level}% CI: [{values['ci_low']:.4f}, {values['ci_high']:.4f}]")
        if detailed:
            print(f"    Min: {values['min']:.4f}, Max: {values['max']:.4f}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Simulate a bank teller counter')

    parser.add_argument('-l', '--arrival-rate', type=float,
                        help='Average customers per minute (prompted if omitted)')
    parser.add_argument('-n', '--tellers', type=int,
                        help='Number of tellers (default: 1)')
    parser.add_argument('-t', '--horizon', type=int,
                        help='Minutes the bank is open (default: 480)')
    parser.add_argument('-s', '--seed', type=int,
                        help='Random seed')
    parser.add_argument('-r', '--replications', type=int,
                        help='Number of replications (default: 1)')
    parser.add_argument('--config', type=str,
                        help='JSON configuration file')

    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                        help='Show plots')
    parser.add_argument('--plot-file', type=str,
                        help='Save the performance report figure to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Show detailed replication statistics')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if not args.quiet:
        print("=== Bank Queue Simulator ===")

    try:
        config = build_config(args)
    except InvalidParameterError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if config.replications > 1:
        summary = run_replications(config)
        if not args.quiet:
            print_replication_summary(summary, args.detailed)
        if args.output:
            save_results(summary, args.output)
            if not args.quiet:
                print(f"\nResults saved to: {args.output}")
        return

    if not args.quiet:
        print(f"\nSimulating {config.horizon} minutes...")
    result = run_simulation(config.arrival_rate, config.num_tellers,
                            seed=config.seed, horizon=config.horizon)
    report = summarize_wait_times(result.wait_times) if result.wait_times else None

    if not args.quiet:
        print_results(result, report)

    if args.output:
        save_results({
            'config': config.to_dict(),
            'result': result.to_dict(),
            'report': report.to_dict() if report is not None else None,
        }, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.plot or args.plot_file:
        import matplotlib.pyplot as plt
        from bank_queue.visualization.plotting import create_performance_report

        fig = create_performance_report(result, report, save_path=args.plot_file)
        if args.plot_file and not args.quiet:
            print(f"Plot saved to: {args.plot_file}")

        if args.plot:
            plt.show()
        else:
            plt.close(fig)


if __name__ == '__main__':
    main()
