"""Unit tests for call-site resolution."""

from __future__ import annotations

import inspect

from ctxlog.observability.logging.callsite import (
    CallSite,
    resolve_caller,
    short_function_name,
    short_path,
)


def _current_line() -> int:
    frame = inspect.currentframe()
    assert frame is not None and frame.f_back is not None
    return frame.f_back.f_lineno


def _resolve_for_my_caller() -> CallSite:
    return resolve_caller(2)


class TestResolveCaller:
    def test_skip_one_is_calling_function(self) -> None:
        site = resolve_caller(1); line = _current_line()  # noqa: E702
        assert site.function == "test_skip_one_is_calling_function"
        assert site.file == "test_callsite.py"
        assert site.line == line

    def test_skip_zero_is_resolver_itself(self) -> None:
        site = resolve_caller(0)
        assert site.function == "resolve_caller"
        assert site.file == "callsite.py"

    def test_skip_two_through_helper(self) -> None:
        site = _resolve_for_my_caller(); line = _current_line()  # noqa: E702
        assert site.function == "test_skip_two_through_helper"
        assert site.line == line

    def test_nested_function_name_is_unqualified(self) -> None:
        def inner() -> CallSite:
            return resolve_caller(1)

        assert inner().function == "inner"

    def test_location_format(self) -> None:
        site = resolve_caller(1); line = _current_line()  # noqa: E702
        assert site.location == f"test_callsite.py:{line}"

    def test_unreachable_depth_degrades_to_unknown(self) -> None:
        site = resolve_caller(10_000)
        assert site == CallSite.unknown()
        assert site.location == "unknown:0"
        assert site.function == "unknown"

    def test_negative_skip_treated_as_zero(self) -> None:
        assert resolve_caller(-3).function == "resolve_caller"

    def test_with_parent_directory(self) -> None:
        site = resolve_caller(1, with_parent=True)
        assert site.file == "observability/test_callsite.py"


class TestHelpers:
    def test_short_function_name_strips_qualifier(self) -> None:
        assert short_function_name("Order.<locals>.save") == "save"
        assert short_function_name("Service.handle") == "handle"
        assert short_function_name("plain") == "plain"

    def test_short_path(self) -> None:
        assert short_path("/srv/app/orders/service.py") == "service.py"
        assert short_path("/srv/app/orders/service.py", with_parent=True) == "orders/service.py"
        assert short_path("service.py", with_parent=True) == "service.py"
