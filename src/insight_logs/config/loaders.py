"""Config loaders – environment loader and the merging factory.

Settings classes are plain dataclasses.  An optional ``env_prefix`` class
variable scopes their environment variables: field ``log_ttl`` on a class
with ``env_prefix = "INSIGHT"`` is read from ``INSIGHT_LOG_TTL``.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import types
import typing
from typing import Any, Mapping, Sequence, TypeVar

from insight_logs.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T")


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


def _build(settings_cls: type[T], values: Mapping[str, Any]) -> T:
    try:
        return settings_cls(**values)
    except ConfigError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


class SettingsLoader(abc.ABC):
    """Port: produce a settings instance from some external source."""

    @abc.abstractmethod
    def load(self, settings_cls: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read settings from environment variables (``os.environ`` by default)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_cls: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_cls, "env_prefix", "")
        hints = typing.get_type_hints(settings_cls)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            env_key = "_".join(p for p in (prefix, field.name) if p).upper()
            raw = environ.get(env_key)
            if raw is None:
                if _is_required(field):
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                values[field.name] = self._coerce(raw, hints[field.name])
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        return _build(settings_cls, values)

    @staticmethod
    def _coerce(raw: str, hint: Any) -> Any:
        args = typing.get_args(hint)
        if isinstance(hint, types.UnionType) or typing.get_origin(hint) is typing.Union:
            if type(None) in args and raw.strip() == "":
                return None
            hint = next(a for a in args if a is not type(None))
        if hint is bool:
            return raw.strip().lower() in ("1", "true", "yes", "on")
        if hint in (int, float):
            return hint(raw)
        return raw


class SettingsFactory:
    """Merge loaders (later wins) and explicit overrides (highest priority).

    A loader failing with :class:`MissingRequiredSettingError` is skipped so a
    later source or an override can still supply the value.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except MissingRequiredSettingError:
                continue
            merged.update(dataclasses.asdict(loaded))  # type: ignore[call-overload]
        merged.update(overrides or {})

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name not in merged and _is_required(field):
                raise MissingRequiredSettingError(field.name)
        return _build(settings_cls, merged)


__all__ = ["EnvSettingsLoader", "SettingsFactory", "SettingsLoader"]
