from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, overload

T = TypeVar("T")

TAGS_ATTR = "__suite_tags__"


class TestRole(Enum):
    # Closed set of roles a declared unit can play in a group.
    __test__ = False

    BEFORE_SUITE = "before_suite"
    AFTER_SUITE = "after_suite"
    BEFORE_EACH = "before_each"
    AFTER_EACH = "after_each"
    TEST = "test"


class Scope(Enum):
    # SUITE units run without a group instance; INSTANCE units run on a fresh one.
    SUITE = "suite"
    INSTANCE = "instance"


SUITE_ROLES = frozenset({TestRole.BEFORE_SUITE, TestRole.AFTER_SUITE})
INSTANCE_ROLES = frozenset({TestRole.BEFORE_EACH, TestRole.AFTER_EACH, TestRole.TEST})


@dataclass(frozen=True, slots=True)
class TestTag:
    __test__ = False

    name: str = ""
    order: int | None = None


@dataclass(frozen=True, slots=True)
class OrderTag:
    value: int = 0


@dataclass(frozen=True, slots=True)
class DisabledTag:
    pass


@dataclass(frozen=True, slots=True)
class HookTag:
    role: TestRole

    def __post_init__(self) -> None:
        if self.role is TestRole.TEST:
            raise ValueError("HookTag.role must be a hook role, use TestTag for tests")


def role_of(tag: object) -> TestRole | None:
    # Only TestTag and HookTag assign a role; Order/Disabled are attributes.
    if isinstance(tag, TestTag):
        return TestRole.TEST
    if isinstance(tag, HookTag):
        return tag.role
    return None


def attach_tag(target: T, tag: object) -> T:
    # Tags accumulate in application order; extension tags use this directly.
    existing = getattr(target, TAGS_ATTR, ())
    setattr(target, TAGS_ATTR, (*existing, tag))
    return target


def get_tags(target: object) -> tuple[object, ...]:
    # staticmethod/classmethod wrappers may carry tags themselves or on __func__.
    # Since 3.10 a wrapper shares __dict__ with its function, so the tuples can be one object.
    own = getattr(target, TAGS_ATTR, ())
    inner = getattr(target, "__func__", None)
    if inner is None:
        return tuple(own)
    inner_tags = getattr(inner, TAGS_ATTR, ())
    if inner_tags is own:
        return tuple(own)
    return (*inner_tags, *own)


@overload
def test(target: T) -> T: ...


@overload
def test(*, name: str = "", order: int | None = None) -> Callable[[T], T]: ...


def test(target=None, *, name: str = "", order: int | None = None):
    # Marks a unit as a test case; usable bare or with name/order attributes.
    tag = TestTag(name=name, order=order)
    if target is not None:
        return attach_tag(target, tag)

    def _decorate(fn: T) -> T:
        return attach_tag(fn, tag)

    return _decorate


test.__test__ = False  # type: ignore[attr-defined]


@overload
def order(target: T) -> T: ...


@overload
def order(value: int = 0) -> Callable[[T], T]: ...


def order(value=0):
    # Explicit order; overrides the inline order of @test.
    if callable(value) or isinstance(value, (staticmethod, classmethod)):
        return attach_tag(value, OrderTag())
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("order value must be an int")
    tag = OrderTag(value=value)

    def _decorate(fn: T) -> T:
        return attach_tag(fn, tag)

    return _decorate


def disabled(target: T) -> T:
    return attach_tag(target, DisabledTag())


def before_each(target: T) -> T:
    return attach_tag(target, HookTag(TestRole.BEFORE_EACH))


def after_each(target: T) -> T:
    return attach_tag(target, HookTag(TestRole.AFTER_EACH))


def before_suite(target: T) -> T:
    return attach_tag(target, HookTag(TestRole.BEFORE_SUITE))


def after_suite(target: T) -> T:
    return attach_tag(target, HookTag(TestRole.AFTER_SUITE))
