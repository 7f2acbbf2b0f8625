"""Configuration dataclasses and YAML loader for the Martian Robots tools."""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path
import yaml


@dataclass
class BatchConfig:
    pattern: str = "*.txt"
    workers: int = 4
    output_suffix: str = "_output"


@dataclass
class ExportConfig:
    csv: bool = True
    snapshot: bool = False
    gif: bool = False
    report: bool = True


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    batch: BatchConfig = field(default_factory=BatchConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Runtime flags (set from CLI)
    quiet: bool = False


_SECTIONS = {
    'batch': BatchConfig,
    'export': ExportConfig,
    'server': ServerConfig,
    'logging': LoggingConfig,
}


def _parse_section(name: str, raw: Optional[Dict[str, Any]]):
    """Build one config section from raw YAML data."""
    cls = _SECTIONS[name]
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    known = set(cls.__dataclass_fields__)
    unknown = set(raw) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in config section '{name}': {', '.join(sorted(unknown))}")
    return cls(**raw)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and validate YAML configuration file; defaults when no path is given."""
    if config_path is None:
        return AppConfig()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    unknown = set(raw) - set(_SECTIONS)
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    config = AppConfig(**{name: _parse_section(name, raw.get(name))
                          for name in _SECTIONS})

    if config.batch.workers < 1:
        raise ValueError("batch.workers must be at least 1")
    if not 0 < config.server.port < 65536:
        raise ValueError(f"Invalid server port: {config.server.port}")

    return config
