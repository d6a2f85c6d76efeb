#!/usr/bin/env python3
"""Command-line interface for running bank queue simulations."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Dict, List, Optional

import numpy as np

from bank_queue.config import SimulationConfig, SERVICE_MAX, SERVICE_MIN, WINDOW_LENGTH
from bank_queue.system import BankSimulation, NoCustomersServed, SimulationReport

# Fields every day reports, aggregated over all replications
DAY_FIELDS = [
    'total_arrived',
    'total_served',
    'closing_time',
]

# Wait-time fields, aggregated over days that served someone
WAIT_FIELDS = [
    'sample_count',
    'mean',
    'median',
    'mode',
    'stddev',
    'max_wait',
    'teller_utilization',
]


def run_simulation(config: SimulationConfig, rng=None) -> BankSimulation:
    """Run a single bank day and return the finished simulation."""
    simulation = BankSimulation.from_config(config, rng=rng)
    simulation.run()
    return simulation


def run_replications(config: SimulationConfig,
                     num_replications: int,
                     base_seed: int = 42) -> Dict:
    """Run independent bank days and compute statistics of each report field."""
    if num_replications < 1:
        raise ValueError("num_replications must be >= 1")

    reports = []
    for i in range(num_replications):
        run_config = replace(config, seed=base_seed + i)
        reports.append(run_simulation(run_config).report())

    served = [r for r in reports if isinstance(r, SimulationReport)]
    summary = {
        'replications': num_replications,
        'days_without_service': num_replications - len(served),
        'config': config.normalized().to_dict(),
        'statistics': {},
        'values': {},
    }

    for key in DAY_FIELDS + WAIT_FIELDS:
        pool = reports if key in DAY_FIELDS else served
        values = [float(getattr(r, key)) for r in pool]
        summary['values'][key] = values
        if not values:
            continue
        summary['statistics'][key] = {
            'mean': float(np.mean(values)),
            'std': float(np.std(values)),
            'min': float(np.min(values)),
            'max': float(np.max(values))
        }

    return summary


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def format_report(report) -> str:
    """Render a single-day report as console text."""
    if isinstance(report, NoCustomersServed):
        return "No customers were served during the simulation."

    hours = report.window_length / 60
    lines = [
        "",
        "===== BANK QUEUE SIMULATION REPORT =====",
        f"Simulation length           : {report.window_length} minutes ({hours:g} hours)",
        f"Lambda (arrivals / minute) : {report.arrival_rate:.3f}",
        f"Tellers                    : {report.teller_count}",
        f"Total customers arrived    : {report.total_arrived}",
        f"Total customers served     : {report.total_served}",
        f"Recorded wait samples      : {report.sample_count}",
        "-----------------------------------------",
        f"Mean wait time             : {report.mean:.2f} minutes",
        f"Median wait time           : {report.median:.2f} minutes",
        f"Mode wait time (rounded)   : {report.mode} minutes",
        f"Std. Deviation of waits    : {report.stddev:.2f} minutes",
        f"Longest wait time          : {report.max_wait:.2f} minutes",
        "=========================================",
    ]
    return "\n".join(lines)


def print_results(results, detailed: bool = False) -> None:
    """Print results to console."""
    if isinstance(results, dict):
        # Summary statistics from multiple runs
        print("\n=== Replication Results ===")
        print(f"Replications: {results['replications']}")
        print(f"Days without service: {results['days_without_service']}")
        for metric, stats in results['statistics'].items():
            print(f"  {metric}:")
            print(f"    Mean: {stats['mean']:.4f} (±{stats['std']:.4f})")
            if detailed:
                print(f"    Min: {stats['min']:.4f}, Max: {stats['max']:.4f}")
        return

    print(format_report(results))
    if detailed and isinstance(results, SimulationReport):
        print(f"Closing time               : minute {results.closing_time}")
        print(f"Teller utilization         : {results.teller_utilization:.2%}")


def prompt_parameters(config: SimulationConfig, input_func=input) -> SimulationConfig:
    """Ask for arrival rate and teller count on the console."""
    print(f"Bank Queue Simulator ({config.window_length / 60:g} hours = {config.window_length} minutes)")
    raw_rate = input_func("Enter average arrivals per minute (lambda, e.g. 0.5): ")
    try:
        arrival_rate = float(raw_rate)
    except ValueError:
        raise ValueError(f"Invalid arrival rate: {raw_rate!r}")

    raw_tellers = input_func("Enter number of tellers (e.g. 1): ")
    try:
        teller_count = int(raw_tellers)
    except ValueError:
        teller_count = 1
    return replace(config, arrival_rate=arrival_rate, teller_count=max(1, teller_count))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run bank queue simulations')

    # Simulation parameters
    parser.add_argument('--arrival-rate', type=float, default=None,
                       help='Average arrivals per minute (default: 0.5)')
    parser.add_argument('--tellers', type=int, default=None,
                       help='Number of tellers (default: 1)')
    parser.add_argument('-t', '--time', type=int, default=None,
                       help=f'Minutes the doors stay open (default: {WINDOW_LENGTH})')
    parser.add_argument('--service-min', type=int, default=None,
                       help=f'Shortest service in minutes (default: {SERVICE_MIN})')
    parser.add_argument('--service-max', type=int, default=None,
                       help=f'Longest service in minutes (default: {SERVICE_MAX})')
    parser.add_argument('-s', '--seed', type=int, default=None,
                       help='Random seed (default: fresh entropy)')
    parser.add_argument('-r', '--replications', type=int, default=1,
                       help='Number of replications (default: 1)')
    parser.add_argument('--config', type=str,
                       help='JSON configuration file')
    parser.add_argument('-i', '--interactive', action='store_true',
                       help='Prompt for arrival rate and teller count')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                       help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                       help='Generate plots')
    parser.add_argument('--plot-file', type=str,
                       help='Save plots to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                       help='Show detailed statistics')
    parser.add_argument('-q', '--quiet', action='store_true',
                       help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Log simulation progress')
    return parser


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Merge the config file (if any) with explicit command-line flags."""
    config = SimulationConfig.from_json_file(args.config) if args.config else SimulationConfig()

    overrides = {
        'arrival_rate': args.arrival_rate,
        'teller_count': args.tellers,
        'window_length': args.time,
        'service_min': args.service_min,
        'service_max': args.service_max,
        'seed': args.seed,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    return config


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    try:
        config = build_config(args)
        if args.interactive:
            config = prompt_parameters(config)
        config = config.normalized()
        if args.replications < 1:
            raise ValueError(f"replications must be >= 1, got {args.replications}")

        simulation = None
        if args.replications > 1:
            base_seed = config.seed if config.seed is not None else 42
            results = run_replications(config, args.replications, base_seed)
        else:
            simulation = run_simulation(config)
            results = simulation.report()
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except MemoryError:
        print("Error: out of memory while simulating", file=sys.stderr)
        sys.exit(1)

    # Output results
    if not args.quiet:
        print_results(results, args.detailed)

    if args.output:
        payload = results if isinstance(results, dict) else results.to_dict()
        save_results(payload, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    # Generate plots
    if args.plot or args.plot_file:
        from bank_queue.visualization import plot_replication_summary, plot_simulation_dashboard

        if simulation is not None:
            fig = plot_simulation_dashboard(simulation)
        else:
            fig = plot_replication_summary(results)

        if args.plot_file:
            fig.savefig(args.plot_file, dpi=300, bbox_inches='tight')
            if not args.quiet:
                print(f"Plot saved to: {args.plot_file}")

        if args.plot:
            import matplotlib.pyplot as plt
            plt.show()

    return results


if __name__ == '__main__':
    main()
