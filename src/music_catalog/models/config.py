"""Configuration model for music catalog."""

from pathlib import Path
from typing import Any, Dict
import json
from dataclasses import dataclass, field

from ..exceptions import ConfigurationError

DURATION_FORMATS = ("seconds", "minutes")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReportConfig:
    """Configuration for catalog reports."""
    duration_format: str = "seconds"  # "seconds" or "minutes"
    sort_albums: bool = True
    show_empty_albums: bool = True


@dataclass
class Config:
    """Main configuration model."""
    report: ReportConfig = field(default_factory=ReportConfig)
    log_level: str = "WARNING"
    strict_references: bool = False

    def __post_init__(self):
        if self.report.duration_format not in DURATION_FORMATS:
            raise ConfigurationError(
                f"Unknown duration format '{self.report.duration_format}', "
                f"expected one of {', '.join(DURATION_FORMATS)}"
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")
        self.log_level = self.log_level.upper()

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()


def _dataclass_to_dict(obj):
    """Convert dataclass to dict recursively."""
    from dataclasses import is_dataclass, asdict
    if is_dataclass(obj):
        return {key: _dataclass_to_dict(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, Path):
        return str(obj)
    elif isinstance(obj, dict):
        return {key: _dataclass_to_dict(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_dataclass_to_dict(item) for item in obj]
    else:
        return obj


def _dict_to_dataclass(data: Dict[str, Any], dataclass_type):
    """Convert dict to dataclass recursively."""
    from dataclasses import is_dataclass, fields
    if not is_dataclass(dataclass_type):
        return data
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected an object for {dataclass_type.__name__}, got {type(data).__name__}")

    kwargs = {}
    for f in fields(dataclass_type):
        if f.name not in data:
            continue
        # Nested sections are dataclasses built from their default factory
        nested_type = type(f.default_factory()) if callable(f.default_factory) else None
        if nested_type is not None and is_dataclass(nested_type):
            kwargs[f.name] = _dict_to_dataclass(data[f.name], nested_type)
        else:
            kwargs[f.name] = data[f.name]

    try:
        return dataclass_type(**kwargs)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e.msg} at line {e.lineno}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {config_path}: {e}") from e

    return _dict_to_dataclass(config_data, Config)


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = _dataclass_to_dict(config)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
