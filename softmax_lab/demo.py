"""
Demo runner: draw random scores, then show how temperature reshapes their softmax.

    python -m softmax_lab.demo --distribution gaussian --count 8 --temperatures 0.1 1 10
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from .demo_args import parse_args
from .numeric import argmax, entropy, generate, make_rng, mean_std, sample_categorical, softmax
from .tracking import ConfigManager, DemoConfig, RunLogger


def _fmt(values: List[float]) -> str:
    return "[" + ", ".join(f"{v:.4f}" for v in values) + "]"


def run_demo(config: DemoConfig) -> Dict[str, object]:
    rng = make_rng(config.seed)
    distribution = config.build_distribution()
    samples = generate(distribution, config.count, rng=rng)

    logger: Optional[RunLogger] = None
    if config.log_dir:
        logger = RunLogger(config.log_dir)
        logger.log_samples(
            samples,
            extra={"experiment_name": config.experiment_name, "distribution": config.distribution, "seed": config.seed},
        )

    mean, std = mean_std(samples)
    print(f"Distribution: {distribution}")
    print(f"Samples ({len(samples)}): {_fmt(samples)}")
    print(f"Sample mean={mean:.4f} std={std:.4f}")
    print("\n" + "=" * 50)

    sweep = []
    for t in config.temperatures:
        probs = softmax(samples, t)
        h = entropy(probs)
        best = argmax(probs) if probs else -1
        # Non-finite probabilities (zero temperature) cannot be sampled from.
        drawn = sample_categorical(probs, rng) if probs and all(math.isfinite(p) for p in probs) else -1
        print(f"T={t:<8g} entropy={h:.4f} argmax={best} draw={drawn} probs={_fmt(probs)}")
        sweep.append({"temperature": t, "probs": probs, "entropy": h, "argmax": best, "draw": drawn})
        if logger is not None:
            logger.log_softmax(t, probs, h, best, extra={"draw": drawn})

    if logger is not None:
        print(f"\nRun records: {logger.run_file}")

    return {"samples": samples, "sweep": sweep}


def main(argv=None) -> None:
    args = parse_args(argv)
    config = ConfigManager.load_config(args.config) if args.config else DemoConfig()
    overrides = {k: v for k, v in vars(args).items() if k != "config"}
    config = ConfigManager.merge_configs(config, overrides)
    run_demo(config)


if __name__ == "__main__":
    main()
