"""
Leaf specifications.

Provides the concrete predicate evaluators and a factory function that
registers each of them under its operator name.

Usage::

    from rulespec.leaves import build_default_registry

    registry = build_default_registry()
    spec = registry.create(SpecificationOperator.BETWEEN, (1, 3))
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from ..base import NotSpecification
from ..exceptions import ValidationError
from ..operators import SpecificationOperator
from ..registry import SpecificationRegistry
from .comparison import (
    EqualTo,
    GreaterThan,
    GreaterThanOrEqualTo,
    LessThan,
    LessThanOrEqualTo,
)
from .null import IsNone
from .set import Between, In
from .size import IsEmpty, LengthBetween
from .string import Contains, EndsWith, Matches, StartsWith


def _pair(operator: SpecificationOperator, value: Any) -> tuple[Any, Any]:
    """Unpack a ``(low, high)`` operand."""
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        raise ValidationError(
            f"'{operator.value}' expects a (low, high) pair, got {value!r}",
            path=operator.value,
        )
    if len(value) != 2:
        raise ValidationError(
            f"'{operator.value}' expects exactly 2 values, got {len(value)}",
            path=operator.value,
        )
    return value[0], value[1]


def build_default_registry() -> SpecificationRegistry:
    """
    Create a registry with all built-in leaves.

    Every call returns a fresh :class:`SpecificationRegistry`, so callers
    may register their own operators without affecting anyone else.

    Example:
        >>> registry = build_default_registry()
        >>> registry.create(">", 5).is_satisfied_by(7)
        True
    """
    op = SpecificationOperator
    registry = SpecificationRegistry()
    registry.register_all(
        {
            # Standard comparison
            op.EQ: EqualTo,
            op.NE: lambda v: NotSpecification(EqualTo(v)),
            op.GT: GreaterThan,
            op.LT: LessThan,
            op.GE: GreaterThanOrEqualTo,
            op.LE: LessThanOrEqualTo,
            # Set / range
            op.IN: In,
            op.NOT_IN: lambda v: NotSpecification(In(v)),
            op.BETWEEN: lambda v: Between(*_pair(op.BETWEEN, v)),
            op.NOT_BETWEEN: lambda v: NotSpecification(
                Between(*_pair(op.NOT_BETWEEN, v))
            ),
            # String
            op.CONTAINS: Contains,
            op.ICONTAINS: lambda v: Contains(v, ignore_case=True),
            op.STARTSWITH: StartsWith,
            op.ISTARTSWITH: lambda v: StartsWith(v, ignore_case=True),
            op.ENDSWITH: EndsWith,
            op.IENDSWITH: lambda v: EndsWith(v, ignore_case=True),
            op.REGEX: Matches,
            op.IREGEX: lambda v: Matches(v, re.IGNORECASE),
            # Size
            op.LENGTH_BETWEEN: lambda v: LengthBetween(*_pair(op.LENGTH_BETWEEN, v)),
            op.IS_EMPTY: lambda _: IsEmpty(),
            op.IS_NOT_EMPTY: lambda _: NotSpecification(IsEmpty()),
            # Null
            op.IS_NULL: lambda _: IsNone(),
            op.IS_NOT_NULL: lambda _: NotSpecification(IsNone()),
        }
    )
    return registry


__all__ = [
    "Between",
    "Contains",
    "EndsWith",
    "EqualTo",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "In",
    "IsEmpty",
    "IsNone",
    "LengthBetween",
    "LessThan",
    "LessThanOrEqualTo",
    "Matches",
    "StartsWith",
    "build_default_registry",
]
