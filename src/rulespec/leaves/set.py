"""Set and range leaves: between, in."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..base import BaseSpecification
from ..exceptions import CandidateTypeError, ValidationError
from ..parameters import Bounds, build_parameters


@dataclass(frozen=True)
class Between(BaseSpecification[Any]):
    """
    Inclusive range membership: ``low <= candidate <= high``.

    The bounds are checked when the leaf is built; inverted or mutually
    incomparable bounds raise :class:`~rulespec.exceptions.ValidationError`.
    """

    low: Any
    high: Any

    def __post_init__(self) -> None:
        build_parameters(Bounds, "Between", low=self.low, high=self.high)

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            return bool(self.low <= candidate <= self.high)
        except TypeError as exc:
            raise CandidateTypeError(
                self,
                candidate,
                f"a value orderable against {type(self.low).__name__}",
            ) from exc

    def describe(self) -> str:
        return f"between {self.low!r} and {self.high!r}"


@dataclass(frozen=True)
class In(BaseSpecification[Any]):
    """
    Equality-based membership in a fixed collection of values.

    Values are kept as a tuple, so unhashable values are allowed and
    duplicates are harmless. A bare string is rejected rather than being
    treated as a collection of characters.
    """

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if isinstance(self.values, str | bytes) or not isinstance(
            self.values, Iterable
        ):
            raise ValidationError(
                f"In expects a collection of values, got {type(self.values).__name__}",
                path="In.values",
            )
        object.__setattr__(self, "values", tuple(self.values))

    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate in self.values

    def describe(self) -> str:
        return f"one of {list(self.values)!r}"
