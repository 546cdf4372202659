from __future__ import annotations

import inspect

from suite_kernel.kernel.errors import StructuralError
from suite_kernel.kernel.tags import Scope, get_tags
from suite_kernel.kernel.units import DeclaredUnit, TestGroup


def discover_group(cls: type) -> TestGroup:
    # Scan the members declared on the class itself, in declaration order.
    if not inspect.isclass(cls):
        raise StructuralError(f"Test group must be a class, got {type(cls).__name__}")

    units: list[DeclaredUnit] = []
    for attr_name, attr_value in cls.__dict__.items():
        tags = get_tags(attr_value)
        if not tags:
            continue
        if isinstance(attr_value, (staticmethod, classmethod)):
            # Bound through the class so classmethods receive cls.
            units.append(
                DeclaredUnit(
                    identifier=attr_name,
                    target=getattr(cls, attr_name),
                    scope=Scope.SUITE,
                    tags=tags,
                )
            )
        elif inspect.isfunction(attr_value):
            units.append(
                DeclaredUnit(
                    identifier=attr_name,
                    target=attr_value,
                    scope=Scope.INSTANCE,
                    tags=tags,
                )
            )
        else:
            raise StructuralError(f"Tagged member {attr_name} of {cls.__qualname__} is not a method")

    return TestGroup(name=cls.__qualname__, factory=cls, units=tuple(units))
