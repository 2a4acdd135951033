"""Comparison leaves: equal to, greater than, less than and their inclusive forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..base import BaseSpecification
from ..exceptions import CandidateTypeError


@dataclass(frozen=True)
class EqualTo(BaseSpecification[Any]):
    """Value equality (``==``), never identity."""

    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        return bool(candidate == self.value)

    def describe(self) -> str:
        return f"equal to {self.value!r}"


@dataclass(frozen=True)
class GreaterThan(BaseSpecification[Any]):
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            return bool(candidate > self.value)
        except TypeError as exc:
            raise CandidateTypeError(self, candidate, _orderable(self.value)) from exc

    def describe(self) -> str:
        return f"greater than {self.value!r}"


@dataclass(frozen=True)
class GreaterThanOrEqualTo(BaseSpecification[Any]):
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            return bool(candidate >= self.value)
        except TypeError as exc:
            raise CandidateTypeError(self, candidate, _orderable(self.value)) from exc

    def describe(self) -> str:
        return f"greater than or equal to {self.value!r}"


@dataclass(frozen=True)
class LessThan(BaseSpecification[Any]):
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            return bool(candidate < self.value)
        except TypeError as exc:
            raise CandidateTypeError(self, candidate, _orderable(self.value)) from exc

    def describe(self) -> str:
        return f"less than {self.value!r}"


@dataclass(frozen=True)
class LessThanOrEqualTo(BaseSpecification[Any]):
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            return bool(candidate <= self.value)
        except TypeError as exc:
            raise CandidateTypeError(self, candidate, _orderable(self.value)) from exc

    def describe(self) -> str:
        return f"less than or equal to {self.value!r}"


def _orderable(value: Any) -> str:
    return f"a value orderable against {type(value).__name__}"
