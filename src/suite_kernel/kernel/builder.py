from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.tags import DisabledTag, HookTag, OrderTag, Scope, TestRole, TestTag
from suite_kernel.kernel.units import DeclaredUnit, TestGroup


@dataclass
class SuiteBuilder:
    """Explicit registry for groups that are not declared as decorated classes.

    Instance-scope callables receive the instance produced by ``factory``;
    suite-scope callables are invoked with no arguments. Units built here go
    through the same collector validation as discovered ones.
    """

    name: str
    factory: Callable[[], object]
    _units: list[DeclaredUnit] = field(default_factory=list)

    def test(
        self,
        fn: Callable[[object], object],
        *,
        name: str = "",
        order: int | None = None,
        explicit_order: int | None = None,
        disabled: bool = False,
    ) -> SuiteBuilder:
        tags: list[object] = [TestTag(name=name, order=order)]
        if explicit_order is not None:
            tags.append(OrderTag(value=explicit_order))
        if disabled:
            tags.append(DisabledTag())
        return self._add(fn, Scope.INSTANCE, tags)

    def before_each(self, fn: Callable[[object], object]) -> SuiteBuilder:
        return self._add(fn, Scope.INSTANCE, [HookTag(TestRole.BEFORE_EACH)])

    def after_each(self, fn: Callable[[object], object]) -> SuiteBuilder:
        return self._add(fn, Scope.INSTANCE, [HookTag(TestRole.AFTER_EACH)])

    def before_suite(self, fn: Callable[[], object]) -> SuiteBuilder:
        return self._add(fn, Scope.SUITE, [HookTag(TestRole.BEFORE_SUITE)])

    def after_suite(self, fn: Callable[[], object]) -> SuiteBuilder:
        return self._add(fn, Scope.SUITE, [HookTag(TestRole.AFTER_SUITE)])

    def build(self) -> TestGroup:
        if not self.name:
            raise StructuralError("Test group name must be a non-empty string")
        if not callable(self.factory):
            raise StructuralError(f"Factory of group {self.name} is not callable")
        return TestGroup(name=self.name, factory=self.factory, units=tuple(self._units))

    def _add(self, fn: Callable[..., object], scope: Scope, tags: list[object]) -> SuiteBuilder:
        if not callable(fn):
            raise StructuralError(f"Unit registered on group {self.name} is not callable")
        identifier = getattr(fn, "__name__", "") or f"unit_{len(self._units)}"
        self._units.append(DeclaredUnit(identifier=identifier, target=fn, scope=scope, tags=tuple(tags)))
        return self
