from __future__ import annotations

from collections.abc import Iterable

from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.tags import (
    INSTANCE_ROLES,
    SUITE_ROLES,
    DisabledTag,
    HookTag,
    OrderTag,
    Scope,
    TestRole,
    TestTag,
    role_of,
)
from suite_kernel.kernel.units import DeclaredUnit, HookUnit, SuiteMetadata, TestUnit
from suite_kernel.observability.logging import LogChannel, null_channel

_KNOWN_TAGS = (TestTag, OrderTag, DisabledTag, HookTag)


def collect_and_validate(units: Iterable[DeclaredUnit], *, log: LogChannel | None = None) -> SuiteMetadata:
    # Classify declared units by role and validate their shape; any violation aborts the run.
    log = log or null_channel()
    buckets: dict[TestRole, list[HookUnit | TestUnit]] = {role: [] for role in TestRole}

    for unit in units:
        known = _split_tags(unit, log)
        roles = [role for role in (role_of(tag) for tag in known) if role is not None]
        _check_duplicates(unit, known)
        if len(roles) > 1:
            names = ", ".join(role.name for role in roles)
            raise StructuralError(f"Method {unit.identifier} declares more than one role: {names}")

        test_tag = next((tag for tag in known if isinstance(tag, TestTag)), None)
        if any(isinstance(tag, DisabledTag) for tag in known) and test_tag is None:
            raise StructuralError(
                f"Test method {unit.identifier} is tagged with Disabled, but not tagged with Test"
            )
        if not roles:
            # Order without a role carries no meaning but is legal.
            continue

        role = roles[0]
        _check_scope(unit, role)
        if test_tag is not None:
            buckets[role].append(_build_test_unit(unit, test_tag, known))
        else:
            buckets[role].append(HookUnit(role=role, identifier=unit.identifier, target=unit.target))

    return SuiteMetadata(
        before_suite=tuple(buckets[TestRole.BEFORE_SUITE]),  # type: ignore[arg-type]
        after_suite=tuple(buckets[TestRole.AFTER_SUITE]),  # type: ignore[arg-type]
        before_each=tuple(buckets[TestRole.BEFORE_EACH]),  # type: ignore[arg-type]
        after_each=tuple(buckets[TestRole.AFTER_EACH]),  # type: ignore[arg-type]
        tests=tuple(buckets[TestRole.TEST]),  # type: ignore[arg-type]
    )


def _split_tags(unit: DeclaredUnit, log: LogChannel) -> list[object]:
    known: list[object] = []
    for tag in unit.tags:
        if isinstance(tag, _KNOWN_TAGS):
            known.append(tag)
            continue
        log.info(
            "Skipping unknown tag",
            unit=unit.identifier,
            tag=type(tag).__name__,
        )
    return known


def _check_duplicates(unit: DeclaredUnit, known: list[object]) -> None:
    seen: set[object] = set()
    for tag in known:
        key = tag.role if isinstance(tag, HookTag) else type(tag)
        if key in seen:
            raise StructuralError(f"Method {unit.identifier} repeats tag {type(tag).__name__}")
        seen.add(key)


def _check_scope(unit: DeclaredUnit, role: TestRole) -> None:
    if role in SUITE_ROLES:
        if unit.scope is not Scope.SUITE:
            raise StructuralError(f"{unit.identifier} should be a staticmethod or classmethod!")
        return
    if role in INSTANCE_ROLES and unit.scope is not Scope.INSTANCE:
        raise StructuralError(f"Method {unit.identifier} should not be a staticmethod or classmethod")


def _build_test_unit(unit: DeclaredUnit, test_tag: TestTag, known: list[object]) -> TestUnit:
    order_tag = next((tag for tag in known if isinstance(tag, OrderTag)), None)
    return TestUnit(
        display_name=test_tag.name or unit.identifier,
        identifier=unit.identifier,
        target=unit.target,
        inline_order=test_tag.order,
        explicit_order=order_tag.value if order_tag is not None else None,
        enabled=not any(isinstance(tag, DisabledTag) for tag in known),
    )
