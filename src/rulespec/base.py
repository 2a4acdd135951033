"""
Composite layer: the base every specification extends, the connective
nodes it produces, and free-function combinators over any
:class:`~rulespec.specification.ISpecification`.

Combining never mutates an operand; each call allocates a new node, so a
specification can be reused as a sub-expression of several trees.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from .specification import ISpecification

T = TypeVar("T")


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def describe(self) -> str:
        return type(self).__name__

    # -- named combinators ---------------------------------------------------

    def and_(self, other: ISpecification[T]) -> AndSpecification[T]:
        return and_(self, other)

    def or_(self, other: ISpecification[T]) -> OrSpecification[T]:
        return or_(self, other)

    def not_(self) -> NotSpecification[T]:
        return not_(self)

    def and_not(self, other: ISpecification[T]) -> AndSpecification[T]:
        return and_not(self, other)

    def or_not(self, other: ISpecification[T]) -> OrSpecification[T]:
        return or_not(self, other)

    # -- operator overloads --------------------------------------------------

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return and_(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return or_(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return not_(self)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class AndSpecification(BaseSpecification[T]):
    """Logical AND; ``right`` is only evaluated when ``left`` holds."""

    left: ISpecification[T]
    right: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )

    def describe(self) -> str:
        return f"({self.left.describe()} and {self.right.describe()})"


@dataclass(frozen=True)
class OrSpecification(BaseSpecification[T]):
    """Logical OR; ``right`` is only evaluated when ``left`` fails."""

    left: ISpecification[T]
    right: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(
            candidate
        )

    def describe(self) -> str:
        return f"({self.left.describe()} or {self.right.describe()})"


@dataclass(frozen=True)
class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    specification: ISpecification[T]

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"not {self.specification.describe()}"


@dataclass(frozen=True)
class AlwaysTrue(BaseSpecification[Any]):
    """Satisfied by every candidate; identity element of :func:`all_of`."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return True

    def describe(self) -> str:
        return "always true"


@dataclass(frozen=True)
class AlwaysFalse(BaseSpecification[Any]):
    """Satisfied by no candidate; identity element of :func:`any_of`."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return False

    def describe(self) -> str:
        return "always false"


# -- free-function combinators -----------------------------------------------


def and_(left: ISpecification[T], right: ISpecification[T]) -> AndSpecification[T]:
    return AndSpecification(left, right)


def or_(left: ISpecification[T], right: ISpecification[T]) -> OrSpecification[T]:
    return OrSpecification(left, right)


def not_(specification: ISpecification[T]) -> NotSpecification[T]:
    return NotSpecification(specification)


def and_not(left: ISpecification[T], right: ISpecification[T]) -> AndSpecification[T]:
    """``left`` holds and ``right`` does not."""
    return AndSpecification(left, NotSpecification(right))


def or_not(left: ISpecification[T], right: ISpecification[T]) -> OrSpecification[T]:
    """``left`` holds or ``right`` does not."""
    return OrSpecification(left, NotSpecification(right))


def all_of(*specifications: ISpecification[T]) -> ISpecification[T]:
    """
    Fold *specifications* with AND into a left-leaning tree.

    Returns :class:`AlwaysTrue` when called without arguments and the
    single specification unchanged when given exactly one.
    """
    if not specifications:
        return AlwaysTrue()
    return reduce(and_, specifications)


def any_of(*specifications: ISpecification[T]) -> ISpecification[T]:
    """
    Fold *specifications* with OR into a left-leaning tree.

    Returns :class:`AlwaysFalse` when called without arguments and the
    single specification unchanged when given exactly one.
    """
    if not specifications:
        return AlwaysFalse()
    return reduce(or_, specifications)
