"""Specification pattern primitives."""

from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol, Generic[T]):
    """
    Protocol for the Specification pattern.

    Anything exposing these two methods can take part in a specification
    tree, whether or not it extends ``BaseSpecification``.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Decide whether *candidate* satisfies the rule.

        Must be a pure function of the candidate and the specification's
        construction-time parameters.
        """
        ...

    def describe(self) -> str:
        """
        Return a human-readable rendering of the rule.
        Used for diagnostics only; never affects evaluation.
        """
        ...
