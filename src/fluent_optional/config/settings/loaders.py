"""Config settings – build Settings dataclasses from the environment."""
from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any, TypeVar

from fluent_optional.config.settings.base import Settings
from fluent_optional.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class EnvSettingsLoader:
    """Read each field of a :class:`Settings` dataclass from ``<PREFIX>_<FIELD>``.

    Only ``str`` and ``bool`` fields are understood. Booleans accept
    ``1/true/yes/on`` and ``0/false/no/off`` in any case; anything else is
    an :class:`InvalidSettingValueError`. *environ* defaults to
    :data:`os.environ`, read at :meth:`load` time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        prefix = settings_class._prefix
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = self.env_key(settings_class, field.name)
            if key in environ:
                values[field.name] = self._parse(key, environ[key], field.type)
            elif field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(key)
        return settings_class(**values)

    def _parse(self, key: str, raw: str, type_hint: Any) -> str | bool:
        if type_hint in (str, "str"):
            return raw
        if type_hint in (bool, "bool"):
            flag = raw.strip().lower()
            if flag in _TRUE:
                return True
            if flag in _FALSE:
                return False
            raise InvalidSettingValueError(key, raw, "expected a boolean flag")
        raise ConfigError(f"{key}: unsupported setting type {type_hint!r}", setting=key)


__all__ = ["EnvSettingsLoader"]
