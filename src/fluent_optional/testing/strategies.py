"""Testing – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "fluent-optional[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_optional.types import MISSING, Nothing, Optional

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy


def _require_hypothesis() -> Any:
    """Import ``hypothesis.strategies`` or fail with an install hint."""
    try:
        import hypothesis.strategies as st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use fluent_optional.testing strategies: "
            'pip install "fluent-optional[test]"'
        ) from exc
    return st


def present_values() -> "SearchStrategy[Any]":
    """Strategy drawing values that :meth:`Optional.of` wraps in ``Some``.

    Mixes scalars, strings and small containers; never ``None``.
    """
    st = _require_hypothesis()
    scalars = st.one_of(
        st.integers(),
        st.floats(allow_nan=False),
        st.text(),
        st.booleans(),
        st.binary(max_size=16),
    )
    return st.one_of(
        scalars,
        st.lists(scalars, max_size=5),
        st.tuples(scalars, scalars),
    )


def absence_markers() -> "SearchStrategy[Any]":
    """Strategy drawing each recognised absence marker."""
    return _require_hypothesis().sampled_from([None, MISSING])


def optionals(values: "SearchStrategy[Any] | None" = None) -> "SearchStrategy[Optional[Any]]":
    """Strategy drawing both variants.

    Example::

        @given(optionals())
        def test_exactly_one_state(opt):
            assert opt.is_present() != opt.is_empty()
    """
    st = _require_hypothesis()
    present = (values or present_values()).map(Optional.of)
    return st.one_of(present, absence_markers().map(Nothing))


__all__ = ["absence_markers", "optionals", "present_values"]
