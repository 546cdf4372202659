"""Assertion helpers for test groups.

Failures raise :class:`AssertionFailure`, the one signal the executor
classifies as ``FAILED``; every other exception becomes ``ERROR``.
"""

from __future__ import annotations

from typing import NoReturn


class AssertionFailure(AssertionError):
    pass


def assert_equals(expected: object, actual: object) -> None:
    # Strict: concrete types must match, so 1 and 1.0 or 1 and True are never equal.
    if not (type(expected) is type(actual) and expected == actual):
        raise AssertionFailure(f"Expected [{expected}] but got [{actual}]")


def assert_true(actual: object) -> None:
    if actual is None or not actual:
        raise AssertionFailure("Assertion is not true")


def fail(message: str = "Explicit failure") -> NoReturn:
    raise AssertionFailure(message)
