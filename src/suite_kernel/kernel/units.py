from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from suite_kernel.kernel.tags import Scope, TestRole


@dataclass(frozen=True, slots=True)
class DeclaredUnit:
    # A raw declared member of a group, before role classification.
    identifier: str
    target: Callable[..., object]
    scope: Scope
    tags: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("DeclaredUnit.identifier must be a non-empty string")


@dataclass(frozen=True, slots=True)
class TestUnit:
    # One Test-role unit; immutable once collected.
    __test__ = False

    display_name: str
    identifier: str
    target: Callable[..., object]
    inline_order: int | None = None
    explicit_order: int | None = None
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class HookUnit:
    role: TestRole
    identifier: str
    target: Callable[..., object]


@dataclass(frozen=True, slots=True)
class SuiteMetadata:
    # Role -> units in declaration order; rebuilt on every run.
    before_suite: tuple[HookUnit, ...] = ()
    after_suite: tuple[HookUnit, ...] = ()
    before_each: tuple[HookUnit, ...] = ()
    after_each: tuple[HookUnit, ...] = ()
    tests: tuple[TestUnit, ...] = ()


@dataclass(frozen=True, slots=True)
class TestGroup:
    # Handle for one runnable group: explicit zero-arg factory plus its declared units.
    __test__ = False

    name: str
    factory: Callable[[], object]
    units: tuple[DeclaredUnit, ...] = field(default_factory=tuple)
