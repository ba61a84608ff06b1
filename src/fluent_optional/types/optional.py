"""Optional[T]: a value that may be absent, with Some and Nothing variants.

Instances are created through :meth:`Optional.of` or :meth:`Optional.empty`
and are immutable: :meth:`Optional.map` always returns a new instance, so a
single Optional can be shared freely between threads.

Example::

    Optional.of(5).map(lambda x: x * 2).or_else(0)      # 10
    Optional.empty().map(lambda x: x * 2).or_else(0)    # 0
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Final, Generic, Iterator, NoReturn, TypeVar

from fluent_optional.errors import NoSuchElementError
from fluent_optional.observability.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K")


class _Missing:
    """Sentinel type for "no value was supplied"."""

    __slots__ = ()
    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def is_absent(value: object) -> bool:
    """Return ``True`` if *value* is one of the recognised absence markers."""
    return value is None or value is MISSING


class Optional(abc.ABC, Generic[T]):
    """Contract shared by :class:`Some` and :class:`Nothing`."""

    __slots__ = ()

    @staticmethod
    def of(value: T | None) -> "Optional[T]":
        """Wrap *value*, or return an empty Optional for ``None``/``MISSING``."""
        if is_absent(value):
            return Nothing(value)
        return Some(value)  # type: ignore[arg-type]

    @staticmethod
    def empty() -> "Nothing[Any]":
        return Nothing()

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], R | None]) -> "Optional[R]":
        """Apply *mapper* to the value and wrap its result.

        Empty Optionals never call *mapper*. A mapper returning ``None``
        produces an empty Optional.
        """

    @abc.abstractmethod
    def is_present(self) -> bool: ...

    @abc.abstractmethod
    def is_empty(self) -> bool: ...

    @abc.abstractmethod
    def get(self) -> T:
        """Return the value.

        Raises:
            NoSuchElementError: the Optional is empty.
        """

    @abc.abstractmethod
    def if_present(self, consumer: Callable[[T], Any]) -> "Optional[T]":
        """Call *consumer* with the value if there is one; return ``self``."""

    @abc.abstractmethod
    def or_else(self, fallback: K) -> T | K: ...

    @abc.abstractmethod
    def or_else_get(self, supplier: Callable[[], K]) -> T | K:
        """Return the value, or call *supplier* (only when empty)."""

    @abc.abstractmethod
    def or_else_throw(self, error: Callable[[], BaseException] | BaseException) -> T:
        """Return the value, or raise the error built by *error*.

        *error* is normally a zero-argument factory; an exception instance
        is accepted too. Either way the exception is raised unwrapped.
        """

    def equals(self, other: object) -> bool:
        """Same variant and contents equal under ``==``.

        Contents use their own ``__eq__``, so builtin containers compare
        structurally and plain objects by identity.

        Any two empty Optionals are equal. Non-Optionals never are.
        """
        if not isinstance(other, Optional):
            return False
        if isinstance(self, Some) and isinstance(other, Some):
            return bool(self._value == other._value)
        return self.is_empty() and other.is_empty()

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.equals(other)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Some(Optional[T]):
    """Optional holding a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if is_absent(value):
            raise ValueError(f"Some() cannot wrap {value!r}; use Optional.of()")
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def map(self, mapper: Callable[[T], R | None]) -> "Optional[R]":
        return Optional.of(mapper(self._value))

    def is_present(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return False

    def get(self) -> T:
        return self._value

    def if_present(self, consumer: Callable[[T], Any]) -> "Some[T]":
        consumer(self._value)
        return self

    def or_else(self, fallback: K) -> T:  # noqa: ARG002
        return self._value

    def or_else_get(self, supplier: Callable[[], K]) -> T:  # noqa: ARG002
        return self._value

    def or_else_throw(self, error: Callable[[], BaseException] | BaseException) -> T:  # noqa: ARG002
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (Some, (self._value,))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Optional[T]):
    """Empty Optional.

    Keeps the marker it was built from (``None`` or ``MISSING``) for
    ``repr`` only.
    """

    __slots__ = ("_marker",)

    def __init__(self, marker: object = None) -> None:
        if not is_absent(marker):
            raise ValueError(f"Nothing() marker must be None or MISSING, got {marker!r}")
        object.__setattr__(self, "_marker", marker)

    def map(self, mapper: Callable[[T], R | None]) -> "Nothing[R]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def is_present(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return True

    def get(self) -> NoReturn:
        get_logger(__name__).debug("optional.get_on_empty")
        raise NoSuchElementError()

    def if_present(self, consumer: Callable[[T], Any]) -> "Nothing[T]":  # noqa: ARG002
        return self

    def or_else(self, fallback: K) -> K:
        return fallback

    def or_else_get(self, supplier: Callable[[], K]) -> K:
        return supplier()

    def or_else_throw(self, error: Callable[[], BaseException] | BaseException) -> NoReturn:
        exc = error if isinstance(error, BaseException) else error()
        get_logger(__name__).debug("optional.or_else_throw", error_type=type(exc).__name__)
        raise exc

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __hash__(self) -> int:
        return hash(Nothing)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Nothing, (self._marker,))

    def __repr__(self) -> str:
        return "Nothing" if self._marker is None else f"Nothing({self._marker!r})"


__all__ = ["MISSING", "Nothing", "Optional", "Some", "is_absent"]
