"""
Demo argument parser.
"""

import argparse

from .tracking.config_manager import DISTRIBUTIONS


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Softmax with temperature over random samples")

    # Every flag defaults to None so that only explicitly passed values override --config.
    parser.add_argument("--config", type=str, default=None, help="JSON or YAML DemoConfig file")
    parser.add_argument("--experiment_name", type=str, default=None)
    parser.add_argument("--seed", type=int, default=None)

    # Sampling
    parser.add_argument("--distribution", type=str, default=None, choices=list(DISTRIBUTIONS))
    parser.add_argument("--count", type=int, default=None, help="number of samples (default 5)")
    parser.add_argument("--low", type=float, default=None, help="(uniform) lower bound, default -5")
    parser.add_argument("--high", type=float, default=None, help="(uniform) upper bound, default 10")
    parser.add_argument("--mean", type=float, default=None, help="(gaussian) mean, default 0")
    parser.add_argument("--std_dev", type=float, default=None, help="(gaussian) std dev, default 3")

    # Softmax sweep
    parser.add_argument(
        "--temperatures",
        type=float,
        nargs="+",
        default=None,
        help="temperatures to evaluate (default 0.5 1.0 2.0)",
    )

    parser.add_argument("--log_dir", type=str, default=None, help="write JSONL run records here")

    return parser.parse_args(argv)
