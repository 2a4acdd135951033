"""Null check leaf."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..base import BaseSpecification


@dataclass(frozen=True)
class IsNone(BaseSpecification[Any]):
    def is_satisfied_by(self, candidate: Any) -> bool:
        return candidate is None

    def describe(self) -> str:
        return "is None"
