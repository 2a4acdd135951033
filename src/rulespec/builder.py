"""
Fluent builder for constructing specification trees.

Example::

    spec = (
        SpecificationBuilder()
        .where(">=", 18, attr="age")
        .where("=", "active", attr="status")
        .build()
    )
    # → (age greater than or equal to 18 and status equal to 'active')

    spec = (
        SpecificationBuilder()
        .or_group()
            .where("between", (1, 3))
            .where("between", (6, 9))
        .end_group()
        .build()
    )
    # → (between 1 and 3 or between 6 and 9)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .attribute import AttributeSpecification
from .base import NotSpecification, all_of, any_of
from .exceptions import ValidationError
from .leaves import build_default_registry
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .registry import SpecificationRegistry
    from .specification import ISpecification

logger = logging.getLogger(__name__)


class SpecificationBuilder:
    """
    Fluent builder for composing specification trees.

    Conditions added at the same level are combined with AND by default.
    Use ``or_group()`` / ``and_group()`` / ``not_group()`` for explicit
    grouping, and ``end_group()`` to close the current group.
    """

    def __init__(
        self,
        registry: SpecificationRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._specs: list[ISpecification[Any]] = []
        # stack items: (group_operator, specs_list)
        self._stack: list[tuple[SpecificationOperator, list[ISpecification[Any]]]] = []

    # -- leaf conditions -----------------------------------------------------

    def where(
        self,
        op: SpecificationOperator | str,
        val: Any = None,
        *,
        attr: str | None = None,
    ) -> SpecificationBuilder:
        """
        Add a leaf built from the registry to the current group.

        When *attr* is given the leaf is applied to that attribute of the
        candidate instead of the candidate itself.
        """
        spec = self._registry.create(op, val)
        if attr is not None:
            spec = AttributeSpecification(attr, spec)
        self._current_list().append(spec)
        return self

    def add(self, spec: ISpecification[Any]) -> SpecificationBuilder:
        """Add an already-constructed specification to the current group."""
        self._current_list().append(spec)
        return self

    # -- grouping ------------------------------------------------------------

    def and_group(self) -> SpecificationBuilder:
        """Open a new AND group.  Close with ``end_group()``."""
        self._stack.append((SpecificationOperator.AND, []))
        return self

    def or_group(self) -> SpecificationBuilder:
        """Open a new OR group.  Close with ``end_group()``."""
        self._stack.append((SpecificationOperator.OR, []))
        return self

    def not_group(self) -> SpecificationBuilder:
        """Open a new NOT group (single child).  Close with ``end_group()``."""
        self._stack.append((SpecificationOperator.NOT, []))
        return self

    def end_group(self) -> SpecificationBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ValidationError("No open group to close")
        group_op, specs = self._stack.pop()
        composite = _combine(group_op, specs, path=f"group[{len(self._stack)}]")
        self._current_list().append(composite)
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> ISpecification[Any]:
        """
        Finalise and return the composed specification.

        If there is a single condition, returns it directly.
        Multiple conditions at the top level are combined with AND.

        Raises:
            ValidationError: If groups are still open or no conditions were added.
        """
        if self._stack:
            raise ValidationError(
                f"{len(self._stack)} group(s) still open; "
                f"call end_group() before build()"
            )
        if not self._specs:
            raise ValidationError("No conditions added to builder")
        spec = _combine(SpecificationOperator.AND, self._specs, path="<root>")
        logger.debug("Built specification: %s", spec.describe())
        return spec

    def reset(self) -> SpecificationBuilder:
        """Clear all conditions and return ``self`` for reuse."""
        self._specs.clear()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _current_list(self) -> list[ISpecification[Any]]:
        """Return the list that new specs should be appended to."""
        if self._stack:
            return self._stack[-1][1]
        return self._specs


def _combine(
    op: SpecificationOperator,
    specs: list[ISpecification[Any]],
    *,
    path: str,
) -> ISpecification[Any]:
    """Combine a list of specs with the given logical operator."""
    if not specs:
        raise ValidationError("Cannot create an empty group", path=path)
    if op is SpecificationOperator.AND:
        return all_of(*specs)
    if op is SpecificationOperator.OR:
        return any_of(*specs)
    if len(specs) != 1:
        raise ValidationError(
            f"NOT group must contain exactly one condition, got {len(specs)}",
            path=path,
        )
    return NotSpecification(specs[0])
