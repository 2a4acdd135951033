"""Size leaves: length between, is empty."""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

from ..base import BaseSpecification
from ..exceptions import CandidateTypeError
from ..parameters import LengthBounds, build_parameters


@dataclass(frozen=True)
class LengthBetween(BaseSpecification[Sized]):
    """
    Inclusive length bounds for any sized candidate (strings, sequences,
    mappings, sets).
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        build_parameters(LengthBounds, "LengthBetween", low=self.low, high=self.high)

    def is_satisfied_by(self, candidate: Sized) -> bool:
        if not isinstance(candidate, Sized):
            raise CandidateTypeError(self, candidate, "a sized value")
        return self.low <= len(candidate) <= self.high

    def describe(self) -> str:
        return f"length between {self.low} and {self.high}"


@dataclass(frozen=True)
class IsEmpty(BaseSpecification[Sized]):
    def is_satisfied_by(self, candidate: Any) -> bool:
        if not isinstance(candidate, Sized):
            raise CandidateTypeError(self, candidate, "a sized value")
        return len(candidate) == 0

    def describe(self) -> str:
        return "is empty"
