"""Configuration models and loaders."""

from .config import (
    AnalysisConfig,
    Config,
    FetchConfig,
    LazyConfig,
    MonitoringConfig,
    find_config_file,
    load_config,
    settings,
)

__all__ = [
    "AnalysisConfig",
    "Config",
    "FetchConfig",
    "LazyConfig",
    "MonitoringConfig",
    "find_config_file",
    "load_config",
    "settings",
]
