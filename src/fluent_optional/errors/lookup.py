"""Lookup errors raised when a value is read from an empty container."""

from __future__ import annotations

from fluent_optional.errors.base import OptionalError


class NoSuchElementError(OptionalError, LookupError):
    """``get()`` was called on an empty :class:`~fluent_optional.Optional`."""

    code = "no_such_element"

    def __init__(self) -> None:
        super().__init__("No value present")


__all__ = ["NoSuchElementError"]
