"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence, TypeVar

from jlo.config.settings.base import Settings
from jlo.config.settings.loaders import SettingsLoader
from jlo.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Build one settings instance from several sources.

    Each loader contributes only the fields it set away from the class
    default, so a later loader that found nothing does not erase what an
    earlier one found. Later loaders win on conflicts and *overrides* win
    over every loader. A loader that raises is skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default is still unset after all sources.
        InvalidSettingValueError
            The merged values fail ``_validate``.
        ConfigError
            Any other construction failure, unknown override keys included.
        """
        defaults = settings_cls.defaults()
        merged: dict[str, Any] = {}

        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except Exception:  # noqa: BLE001 – other sources may still cover it
                continue
            for name, default in defaults.items():
                value = getattr(loaded, name)
                if value != default:
                    merged[name] = value

        merged.update(overrides or {})

        missing = [
            name
            for name, default in defaults.items()
            if default is dataclasses.MISSING and name not in merged
        ]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Could not build {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
