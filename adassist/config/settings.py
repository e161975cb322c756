"""Process configuration.

Exactly one value is required: the Gemini API credential.  It is read
once at startup; a missing credential is fatal.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

API_KEY_VARS = ("API_KEY", "GOOGLE_API_KEY")

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_LOG_LEVEL = "INFO"

_OVERRIDABLE = ("model", "temperature", "log_level")


class ConfigurationError(Exception):
    """Raised when the process cannot start with the given configuration."""


@dataclass(frozen=True)
class AppSettings:
    """Immutable process-wide settings.

    Attributes:
        api_key:     Gemini credential.  Never logged.
        model:       Model id used for every task.
        temperature: Sampling temperature.
        log_level:   Root log level name.
    """

    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    log_level: str = DEFAULT_LOG_LEVEL

    def __repr__(self) -> str:
        return (
            f"AppSettings(api_key='***', model={self.model!r}, "
            f"temperature={self.temperature!r}, log_level={self.log_level!r})"
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        """Build settings from the environment.

        Raises
        ------
        ConfigurationError
            If no credential is set, or a numeric value does not parse.
        """
        env = os.environ if environ is None else environ

        api_key = ""
        for var in API_KEY_VARS:
            api_key = (env.get(var) or "").strip()
            if api_key:
                break
        if not api_key:
            raise ConfigurationError(
                f"API key not set. Export one of: {', '.join(API_KEY_VARS)}"
            )

        raw_temp = env.get("ADASSIST_TEMPERATURE", "")
        try:
            temperature = float(raw_temp) if raw_temp else DEFAULT_TEMPERATURE
        except ValueError:
            raise ConfigurationError(
                f"ADASSIST_TEMPERATURE must be a number, got {raw_temp!r}"
            )

        return cls(
            api_key=api_key,
            model=env.get("ADASSIST_MODEL") or DEFAULT_MODEL,
            temperature=temperature,
            log_level=(env.get("ADASSIST_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(self, overrides: Dict[str, Any]) -> "AppSettings":
        """Return a copy with values from a config file applied.

        The credential cannot be overridden from a file.
        """
        unknown = set(overrides) - set(_OVERRIDABLE)
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        changes: Dict[str, Any] = {}
        if "model" in overrides:
            changes["model"] = str(overrides["model"])
        if "temperature" in overrides:
            try:
                changes["temperature"] = float(overrides["temperature"])
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"temperature must be a number, got {overrides['temperature']!r}"
                )
        if "log_level" in overrides:
            changes["log_level"] = str(overrides["log_level"]).upper()
        return replace(self, **changes)


def load_overrides(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration overrides from a YAML or JSON file."""
    if config_path is None:
        return {}
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    with open(path, encoding="utf-8") as f:
        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Config file is not valid: {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
    logger.info("Loaded config overrides from %s: %s", config_path, sorted(data))
    return data
