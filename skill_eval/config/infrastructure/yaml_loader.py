"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skill_eval.config.domain.config import HarnessConfig
from skill_eval.config.domain.observer import ConfigObserver
from skill_eval.config.domain.provider import LiteLLMProviderConfig
from skill_eval.config.infrastructure.env_interpolation import EnvInterpolator
from skill_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a HarnessConfig from a YAML file."""

    def __init__(
        self, observer: ConfigObserver, environ: Mapping[str, str] | None = None
    ) -> None:
        self._observer = observer
        self._interpolator = EnvInterpolator(environ=environ)

    def load(self, path: Path) -> HarnessConfig:
        """
        Load, interpolate, validate, and return a HarnessConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any bare ${NAME} reference is unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        unresolved = self._interpolator.unresolved(raw)
        if unresolved:
            raise MissingEnvVarsError(list(unresolved), references=unresolved)
        cfg = _build_config(resolved=self._interpolator.resolve(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, providers=list(cfg.providers))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason="not valid UTF-8") from exc
    if not isinstance(raw, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return raw


def _build_config(resolved: Any) -> HarnessConfig:
    try:
        return HarnessConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: HarnessConfig, observer: ConfigObserver) -> None:
    live = [
        name
        for name, provider in cfg.providers.items()
        if isinstance(provider, LiteLLMProviderConfig)
    ]
    if live and not cfg.toggles.integration:
        observer.config_live_providers_gated(providers=live)
