"""Settings loader and configuration dataclass."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from wordrank.exceptions import ConfigError

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Environment variable that overrides logging.level (also read from .env)
LOG_LEVEL_ENV = "WORDRANK_LOG_LEVEL"


@dataclass
class RankingConfig:
    """Input limits and letter ordering.

    The default 25 letter limit keeps realistic ranks within 64 bits.
    """

    alphabet: str = DEFAULT_ALPHABET
    min_letters: int = 1
    max_letters: int = 25


@dataclass
class OutputConfig:
    """Defaults for the CLI presentation flags."""

    explain: bool = False
    timing: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: str | None = None


@dataclass
class Settings:
    """Main settings container for wordrank."""

    ranking: RankingConfig = field(default_factory=RankingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        ranking_data = data.get("ranking") or {}
        output_data = data.get("output") or {}
        logging_data = data.get("logging") or {}

        try:
            settings = cls(
                ranking=RankingConfig(**_known(RankingConfig, ranking_data)),
                output=OutputConfig(**_known(OutputConfig, output_data)),
                logging=LoggingConfig(**_known(LoggingConfig, logging_data)),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        settings.validate()
        return settings

    def validate(self) -> None:
        """Check limits for consistency.

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        ranking = self.ranking
        for name in ("min_letters", "max_letters"):
            value = getattr(ranking, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"ranking.{name} must be an integer, got {value!r}")
        for name in ("explain", "timing"):
            if not isinstance(getattr(self.output, name), bool):
                raise ConfigError(f"output.{name} must be true or false")
        if not isinstance(self.logging.level, str):
            raise ConfigError("logging.level must be a string")
        if self.logging.file is not None and not isinstance(self.logging.file, str):
            raise ConfigError("logging.file must be a path string")
        if not isinstance(ranking.alphabet, str) or not ranking.alphabet:
            raise ConfigError("ranking.alphabet must be a non-empty string")
        if len(set(ranking.alphabet)) != len(ranking.alphabet):
            raise ConfigError("ranking.alphabet must not repeat symbols")
        if ranking.min_letters < 1:
            raise ConfigError("ranking.min_letters must be at least 1")
        if ranking.max_letters < ranking.min_letters:
            raise ConfigError("ranking.max_letters must not be smaller than ranking.min_letters")


def _known(config_cls: type, data: Any) -> dict[str, Any]:
    """Keep only keys that are fields of the given dataclass."""
    if not isinstance(data, dict):
        raise ConfigError(f"Section for {config_cls.__name__} must be a mapping")
    names = config_cls.__dataclass_fields__.keys()
    return {k: v for k, v in data.items() if k in names}


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML configuration file.

    Args:
        config_path: Path to configuration file. If None, uses default config.yaml

    Returns:
        Settings object with loaded configuration

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        settings = Settings()
    else:
        with open(config_path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse {config_path}: {e}") from e

        if data is None:
            settings = Settings()
        elif not isinstance(data, dict):
            raise ConfigError(f"{config_path} must contain a mapping")
        else:
            settings = Settings.from_dict(data)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        settings.logging.level = env_level

    return settings
