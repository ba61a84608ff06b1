"""Root exception shared by everything fluent-optional raises itself."""

from __future__ import annotations

from typing import Any


class OptionalError(Exception):
    """Library error with a stable ``code`` slug and structured ``detail``.

    Caller-supplied exceptions from :meth:`Optional.or_else_throw` are never
    wrapped in this type.
    """

    code: str = "optional_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.detail}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


__all__ = ["OptionalError"]
