"""Configuration loading."""

from .settings import LoggingConfig, OutputConfig, RankingConfig, Settings, load_settings

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "RankingConfig",
    "Settings",
    "load_settings",
]
