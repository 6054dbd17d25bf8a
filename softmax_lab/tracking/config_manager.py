"""
Config Manager - demo configuration loading and merging
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..errors import InvalidArgumentError
from ..numeric.sampling import Distribution, Gaussian, Uniform

DISTRIBUTIONS = ("uniform", "gaussian")


@dataclass
class DemoConfig:
    """Parameters of one softmax demo run"""
    experiment_name: str = "softmax_demo"
    description: str = ""

    # Sampling
    distribution: str = "uniform"  # "uniform" or "gaussian"
    count: int = 5
    low: float = -5.0
    high: float = 10.0
    mean: float = 0.0
    std_dev: float = 3.0
    seed: Optional[int] = 42

    # Softmax sweep
    temperatures: List[float] = field(default_factory=lambda: [0.5, 1.0, 2.0])

    # Run records; None disables them
    log_dir: Optional[str] = None

    def build_distribution(self) -> Distribution:
        if self.distribution == "uniform":
            return Uniform(low=self.low, high=self.high)
        if self.distribution == "gaussian":
            return Gaussian(mean=self.mean, std_dev=self.std_dev)
        raise InvalidArgumentError(
            f"Unknown distribution: {self.distribution!r} (expected one of {DISTRIBUTIONS})"
        )


def _build(data: Dict[str, Any]) -> DemoConfig:
    known = {f.name for f in fields(DemoConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown config keys: {unknown}")
    return DemoConfig(**data)


class ConfigManager:
    """Load, save and merge DemoConfig"""

    @staticmethod
    def load_config(path: str) -> DemoConfig:
        """Load a config from .json or .yaml/.yml"""
        path = Path(path)

        if path.suffix == '.json':
            with open(path) as f:
                data = json.load(f)
        elif path.suffix in ['.yaml', '.yml']:
            with open(path) as f:
                data = yaml.safe_load(f)
        else:
            raise InvalidArgumentError(f"Unsupported config format: {path.suffix}")

        return _build(data or {})

    @staticmethod
    def save_config(config: DemoConfig, path: str):
        """Save a config, format chosen by suffix"""
        path = Path(path)
        data = asdict(config)

        if path.suffix == '.json':
            with open(path, 'w') as f:
                json.dump(data, f, indent=2, default=str)
        elif path.suffix in ['.yaml', '.yml']:
            with open(path, 'w') as f:
                yaml.dump(data, f, default_flow_style=False)
        else:
            raise InvalidArgumentError(f"Unsupported config format: {path.suffix}")

    @staticmethod
    def merge_configs(base: DemoConfig, override: Dict[str, Any]) -> DemoConfig:
        """Apply overrides; None values leave the base untouched"""
        data = asdict(base)
        data.update({k: v for k, v in override.items() if v is not None})
        return _build(data)
