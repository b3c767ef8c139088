"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .types import TrainingExample

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/wordbayes/config.yaml")
DEFAULT_LOG_LEVEL = "info"
CONFIG_ENV_VAR = "WORDBAYES_CONFIG"


class ConfigError(ValueError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class LoggingConfig:
    """Logging-related configuration."""

    level: str = DEFAULT_LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class ClassifierConfig:
    """Options forwarded to the classifier constructor."""

    freeze_denominators: bool = True


@dataclass(frozen=True)
class Config:
    """Fully parsed configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    training: list[TrainingExample] = field(default_factory=list)


def load_config(path: Path | str | None = None) -> Config:
    """Load and validate configuration from YAML."""

    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return _parse_config(raw)


def resolve_config_path(explicit: Path | str | None) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def _parse_config(raw: dict[str, Any]) -> Config:
    unknown = sorted(set(raw) - {"logging", "classifier", "training"})
    if unknown:
        LOGGER.warning("Ignoring unknown configuration keys: %s", ", ".join(map(str, unknown)))
    config = Config(
        logging=_parse_logging(raw.get("logging")),
        classifier=_parse_classifier(raw.get("classifier")),
        training=_parse_training(raw.get("training")),
    )
    if not config.training:
        LOGGER.warning("No training examples configured; classification will return no categories.")
    return config


def _parse_logging(value: Any) -> LoggingConfig:
    if value is None:
        return LoggingConfig()
    if not isinstance(value, dict):
        raise ConfigError("logging must be a mapping.")
    level = str(value.get("level", DEFAULT_LOG_LEVEL)).lower()
    raw_file = value.get("file")
    if raw_file is None:
        return LoggingConfig(level=level)
    if not isinstance(raw_file, str) or not raw_file.strip():
        raise ConfigError("logging.file must be a non-empty string path.")
    return LoggingConfig(level=level, file=Path(raw_file).expanduser())


def _parse_classifier(value: Any) -> ClassifierConfig:
    if value is None:
        return ClassifierConfig()
    if not isinstance(value, dict):
        raise ConfigError("classifier must be a mapping.")
    freeze = value.get("freeze_denominators", True)
    if not isinstance(freeze, bool):
        raise ConfigError("classifier.freeze_denominators must be a boolean.")
    return ClassifierConfig(freeze_denominators=freeze)


def _parse_training(value: Any) -> list[TrainingExample]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("training must be a list.")

    examples: list[TrainingExample] = []
    for idx, entry in enumerate(value, start=1):
        if not isinstance(entry, dict):
            raise ConfigError(f"training[{idx}] must be a mapping.")
        category = entry.get("category")
        # YAML 1.1 reads bare yes/no/on/off as booleans.
        if isinstance(category, bool):
            raise ConfigError(
                f"training[{idx}].category was parsed as a boolean; quote the label, e.g. 'yes'."
            )
        if category is not None and not isinstance(category, str):
            raise ConfigError(f"training[{idx}].category must be a string; quote the label.")
        if not category or not category.strip():
            raise ConfigError(f"training[{idx}] requires a non-empty 'category'.")
        words = entry.get("words", [])
        if not isinstance(words, list) or not all(isinstance(word, str) for word in words):
            raise ConfigError(f"training[{idx}].words must be a list of strings.")
        examples.append(TrainingExample(category=category, words=tuple(words)))
    return examples


__all__ = [
    "ClassifierConfig",
    "Config",
    "ConfigError",
    "LoggingConfig",
    "load_config",
    "resolve_config_path",
]
