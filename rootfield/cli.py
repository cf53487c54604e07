"""
Command-Line Interface

Headless runs of the root growth simulation, for timing ticks and
inspecting the grown forest without a renderer.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

from hrg_policies import RootGrowthPolicy, FieldSamplingPolicy
from .analysis.forest import compute_forest_metrics, is_forest
from .ops.growth import RootGrowthSimulation
from .sampling.field import generate_field


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rootfield",
        description="Hue Root Growth - headless runs of the root growth simulation",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Grow a root forest for a number of ticks")
    run_parser.add_argument("--width", type=float, default=800.0, help="Domain width in px (default: 800)")
    run_parser.add_argument("--height", type=float, default=600.0, help="Domain height in px (default: 600)")
    run_parser.add_argument("--ticks", "-n", type=int, default=500, help="Number of ticks (default: 500)")
    run_parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    run_parser.add_argument("--tolerance", type=float, default=30.0, help="Hue tolerance in degrees (default: 30)")
    run_parser.add_argument("--drift-rate", type=float, default=2.0, help="Max hue drift per tick (default: 2)")
    run_parser.add_argument("--reach", type=float, default=50.0, help="Reach distance in px (default: 50)")
    run_parser.add_argument("--max-tips", type=int, default=10, help="Max active tips (default: 10)")
    run_parser.add_argument("--min-dist", type=float, default=35.0, help="Field point spacing in px (default: 35)")
    run_parser.add_argument(
        "--output", "-O",
        type=str,
        default=None,
        help="Write the final snapshot as JSON to this path",
    )
    run_parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    sampling_policy = FieldSamplingPolicy(min_dist=args.min_dist)
    growth_policy = RootGrowthPolicy(
        tolerance=args.tolerance,
        drift_rate=args.drift_rate,
        reach_distance=args.reach,
        max_active_tips=args.max_tips,
    )

    items, field_report = generate_field(args.width, args.height, sampling_policy, seed=args.seed)
    sim = RootGrowthSimulation(
        items,
        args.width,
        args.height,
        policy=growth_policy,
        seed=None if args.seed is None else args.seed + 1,
    )

    tick_ms = np.zeros(args.ticks)
    growth_ticks = 0
    for i in tqdm(range(args.ticks), desc="Growing", disable=args.no_progress):
        start = time.perf_counter()
        if sim.tick():
            growth_ticks += 1
        tick_ms[i] = (time.perf_counter() - start) * 1000.0

    summary = {
        "field": field_report.metadata,
        "ticks": args.ticks,
        "growth_ticks": growth_ticks,
        "target_hue": sim.target_hue,
        "active_tips": list(sim.active_tips),
        "is_forest": is_forest(sim.items),
        "forest": compute_forest_metrics(sim.items).to_dict(),
        "tick_ms": {
            "mean": float(tick_ms.mean()) if args.ticks else 0.0,
            "max": float(tick_ms.max()) if args.ticks else 0.0,
        },
    }

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(sim.get_state().to_dict(), indent=2))
        summary["output"] = str(out_path)

    print(json.dumps(summary, indent=2))
    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "run":
        return cmd_run(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
