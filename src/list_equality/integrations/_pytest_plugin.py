"""pytest plugin for list-equality.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

The default strictness of the fixtures is read from the ``list_equality_strict``
ini option::

    [tool.pytest.ini_options]
    list_equality_strict = true

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from list_equality.api import assert_arrays_equal as _assert_arrays_equal
from list_equality.api import assert_lists_equal as _assert_lists_equal

STRICT_INI = "list_equality_strict"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        STRICT_INI,
        type="bool",
        default=False,
        help="Compare lists in strict mode by default (list-equality fixtures).",
    )


@pytest.fixture(scope="session")
def assert_lists_equal(pytestconfig: pytest.Config) -> Any:
    """Fixture that returns a callable order-tolerant list asserter.

    Usage in tests::

        def test_tags(assert_lists_equal):
            assert_lists_equal(["b", "a"], ["a", "b"])

        def test_missing(assert_lists_equal):
            with pytest.raises(AssertionError, match="Item missing"):
                assert_lists_equal([1, 2], [1, 3])

    Returns:
        A callable ``_assert(expected, actual, strict=None, formatter=None) -> None``.
        ``strict=None`` uses the ``list_equality_strict`` ini option.
    """
    default_strict = bool(pytestconfig.getini(STRICT_INI))

    def _assert(
        expected: Any,
        actual: Any,
        strict: bool | None = None,
        formatter: Any = None,
    ) -> None:
        __tracebackhide__ = True
        _assert_lists_equal(
            expected,
            actual,
            strict=default_strict if strict is None else strict,
            formatter=formatter,
        )

    return _assert


@pytest.fixture(scope="session")
def assert_arrays_equal(pytestconfig: pytest.Config) -> Any:
    """Fixture like ``assert_lists_equal`` that also requires list/tuple/dict inputs."""
    default_strict = bool(pytestconfig.getini(STRICT_INI))

    def _assert(
        expected: Any,
        actual: Any,
        strict: bool | None = None,
        formatter: Any = None,
    ) -> None:
        __tracebackhide__ = True
        _assert_arrays_equal(
            expected,
            actual,
            strict=default_strict if strict is None else strict,
            formatter=formatter,
        )

    return _assert
