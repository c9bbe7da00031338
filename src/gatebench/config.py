"""gatebench configuration.

- BenchConfig: every knob of a benchmark run, defaulting to the standard
  measurement (1,000,000 tasks, 1000 passes, variants V1 and V2)
- load_config(): read a BenchConfig from a YAML file
"""
from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Optional, Sequence, Union

import yaml

from gatebench.benchmark.harness import BenchmarkConfig
from gatebench.exceptions import ConfigError
from gatebench.population import PopulationSpec
from gatebench.tasks.registry import DEFAULT_VARIANTS, VARIANTS


@dataclass(frozen=True)
class BenchConfig:
    """Configuration for a full benchmark run.

    Attributes:
        population_size: Tasks per population.
        gate_stride: Tasks at multiples of this index are gated.
        gate_threshold: Threshold configured on gated tasks.
        passes: Timed passes per variant.
        warmup_passes: Untimed passes per variant before timing.
        input_value: Input handed to every tick.
        variants: Variant labels to benchmark, in report order.
    """
    population_size: int = 1_000_000
    gate_stride: int = 128
    gate_threshold: int = 32
    passes: int = 1000
    warmup_passes: int = 0
    input_value: int = 0
    variants: tuple[str, ...] = DEFAULT_VARIANTS

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", parse_variants(self.variants))

        for name in ("population_size", "gate_stride", "gate_threshold",
                     "passes", "warmup_passes", "input_value"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"{name} must be an integer, got {value!r}",
                    config_key=name,
                    expected="int",
                    got=value,
                )

        # Range checks live on the component configs
        try:
            self.population_spec()
            self.benchmark_config()
        except ConfigError as e:
            key = _COMPONENT_KEYS.get(e.config_key, e.config_key)
            raise ConfigError(
                f"{key} must be {e.expected}",
                config_key=key,
                expected=e.expected,
                got=e.got,
            ) from e

        if not self.variants:
            raise ConfigError(
                "at least one variant is required",
                config_key="variants",
                expected=list(VARIANTS),
                got=[],
            )
        unknown = [v for v in self.variants if v not in VARIANTS]
        if unknown:
            raise ConfigError(
                f"unknown variants: {unknown}",
                config_key="variants",
                expected=list(VARIANTS),
                got=list(self.variants),
            )

    def merged(self, **overrides: Any) -> "BenchConfig":
        """Return a copy with non-None overrides applied.

        Args:
            **overrides: Field values, typically from the command line.

        Raises:
            ConfigError: If an override names an unknown field or is invalid.
        """
        known = {f.name for f in fields(self)}
        updates = {}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigError(f"Unknown config key: {key}", config_key=key)
            if value is not None:
                updates[key] = value
        return replace(self, **updates)

    def population_spec(self) -> PopulationSpec:
        return PopulationSpec(
            size=self.population_size,
            gate_stride=self.gate_stride,
            gate_threshold=self.gate_threshold,
        )

    def benchmark_config(self) -> BenchmarkConfig:
        return BenchmarkConfig(
            passes=self.passes,
            warmup_passes=self.warmup_passes,
            input_value=self.input_value,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["variants"] = list(self.variants)
        return data


def load_config(path: str, base: Optional[BenchConfig] = None) -> BenchConfig:
    """Load configuration from YAML file.

    Keys missing from the file keep the value from ``base``.

    Args:
        path: Path to YAML configuration file.
        base: Starting configuration. Uses defaults if None.

    Returns:
        The loaded configuration.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If config file is invalid.

    YAML format::

        population_size: 100000
        passes: 200
        warmup_passes: 5
        variants: [V1, V2, V3]
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid config file format: {path}",
            expected="mapping",
            got=type(data).__name__,
        )

    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigError(
            f"Config keys must be strings, got {bad_keys!r} in {path}",
            config_key=str(bad_keys[0]),
            expected="str",
            got=type(bad_keys[0]).__name__,
        )

    return (base or BenchConfig()).merged(**data)


def parse_variants(labels: Union[str, Sequence[str]]) -> tuple[str, ...]:
    """Normalize variant labels ("v1" -> "V1").

    A bare string is a single label.

    Raises:
        ConfigError: If ``labels`` is not a string or a list/tuple of strings.
    """
    if isinstance(labels, str):
        labels = (labels,)
    if not isinstance(labels, (list, tuple)) or not all(isinstance(label, str) for label in labels):
        raise ConfigError(
            f"variants must be a list of labels, got {labels!r}",
            config_key="variants",
            expected="list[str]",
            got=labels,
        )
    return tuple(label.strip().upper() for label in labels)


# Component config field -> BenchConfig field
_COMPONENT_KEYS = {"size": "population_size"}
