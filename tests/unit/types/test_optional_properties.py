"""Property-based tests for Optional (hypothesis)."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fluent_optional import NoSuchElementError, Optional
from fluent_optional.testing.strategies import absence_markers, optionals, present_values


class TestPresentProperties:
    @given(present_values())
    def test_of_value_is_present(self, v: Any) -> None:
        opt = Optional.of(v)
        assert opt.is_present()
        assert not opt.is_empty()
        assert opt.get() is v

    @given(st.integers())
    def test_map_applies_function(self, v: int) -> None:
        def f(x: int) -> int:
            return x * 3 - 1

        assert Optional.of(v).map(f).get() == f(v)

    @given(present_values())
    def test_if_present_calls_consumer_once(self, v: Any) -> None:
        consumer = MagicMock()
        opt = Optional.of(v)
        assert opt.if_present(consumer) is opt
        consumer.assert_called_once_with(v)

    @given(present_values(), present_values())
    def test_defaults_ignored(self, v: Any, x: Any) -> None:
        supplier = MagicMock(return_value=x)
        factory = MagicMock(return_value=RuntimeError())
        opt = Optional.of(v)
        assert opt.or_else(x) is v
        assert opt.or_else_get(supplier) is v
        assert opt.or_else_throw(factory) is v
        supplier.assert_not_called()
        factory.assert_not_called()


class TestAbsentProperties:
    @given(absence_markers())
    def test_of_marker_is_empty(self, marker: Any) -> None:
        opt = Optional.of(marker)
        assert opt.is_empty()
        assert not opt.is_present()

    @given(absence_markers())
    def test_map_never_calls_mapper(self, marker: Any) -> None:
        mapper = MagicMock()
        assert Optional.of(marker).map(mapper).is_empty()
        mapper.assert_not_called()

    @given(absence_markers())
    def test_get_raises(self, marker: Any) -> None:
        with pytest.raises(NoSuchElementError):
            Optional.of(marker).get()

    @given(present_values())
    def test_defaults_used(self, x: Any) -> None:
        supplier = MagicMock(return_value=x)
        error = RuntimeError("absent")
        empty = Optional.empty()
        assert empty.or_else(x) is x
        assert empty.or_else_get(supplier) is x
        supplier.assert_called_once_with()
        with pytest.raises(RuntimeError) as exc_info:
            empty.or_else_throw(lambda: error)
        assert exc_info.value is error


class TestStateProperties:
    @given(optionals())
    def test_exactly_one_state(self, opt: Optional[Any]) -> None:
        assert opt.is_present() != opt.is_empty()

    @given(optionals())
    def test_equals_is_reflexive(self, opt: Optional[Any]) -> None:
        assert opt.equals(opt)

    @given(optionals(), optionals())
    def test_equals_is_symmetric(self, a: Optional[Any], b: Optional[Any]) -> None:
        assert a.equals(b) == b.equals(a)

    @given(optionals(st.integers()))
    def test_iter_matches_state(self, opt: Optional[int]) -> None:
        assert len(list(opt)) == (1 if opt.is_present() else 0)
