"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, Mapping, TypeVar

from dotenv import load_dotenv

from jlo.config.settings.base import Settings
from jlo.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})

# keyed by the annotation as written, so string annotations resolve too
_COERCERS: dict[Any, Callable[[str], Any]] = {
    bool: lambda raw: raw.strip().lower() in _TRUTHY,
    int: int,
    float: float,
}
_COERCERS.update({t.__name__: fn for t, fn in list(_COERCERS.items())})


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """``LoggerSettings.field_key_msg`` -> ``JLO_FIELD_KEY_MSG``."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from one external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from environment variables named by :func:`env_key`.

    *environ* defaults to ``os.environ`` at load time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            if key in environ:
                values[field.name] = self._coerce(key, environ[key], field.type)
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Could not load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(key: str, raw: str, annotation: Any) -> Any:
        coerce = _COERCERS.get(annotation)
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            type_name = getattr(annotation, "__name__", annotation)
            raise ConfigError(f"{key}={raw!r} is not a valid {type_name}", cause=exc) from exc


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        super().__init__()
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return super().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
