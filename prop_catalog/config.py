"""Configuration management for prop-catalog."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from prop_catalog.exceptions import ConfigurationError


@dataclass
class InputConfig:
    """Flat record file to read the catalog from."""

    csv_path: Path = field(default_factory=lambda: Path("data/property.csv"))
    has_header: bool = True
    delimiter: str = ","


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    csv_filename: str = "property.csv"

    @property
    def csv_path(self) -> Path:
        """Full path of the flattened CSV export."""
        return self.output_dir / self.csv_filename


@dataclass
class GeneratorConfig:
    """Sample catalog generation settings."""

    num_sites: int = 10
    max_depth: int = 4
    seed: int | None = None
    shuffle: bool = True


@dataclass
class CatalogConfig:
    """Main configuration for prop-catalog."""

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    log_file: Path | None = None

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Create config from environment variables."""
        input_config = InputConfig(
            csv_path=Path(os.getenv("CATALOG_CSV", "data/property.csv")),
            has_header=_env_bool("CATALOG_HAS_HEADER", True),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_bool("PRETTY_JSON", False),
        )

        max_depth = _env_int("MAX_DEPTH", 4)
        if max_depth < 2:
            raise ConfigurationError(f"MAX_DEPTH must be at least 2, got {max_depth}")

        generator = GeneratorConfig(
            num_sites=_env_int("NUM_SITES", 10),
            max_depth=max_depth,
            seed=_env_int("SEED", None),
        )

        log_file = os.getenv("LOG_FILE")

        return cls(
            input=input_config,
            output=output,
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            log_file=Path(log_file) if log_file else None,
        )


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() == "true"


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
