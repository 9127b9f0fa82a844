"""Data models for music catalog."""

from .config import Config, ReportConfig, load_config, save_config, create_default_config

__all__ = ["Config", "ReportConfig", "load_config", "save_config", "create_default_config"]
