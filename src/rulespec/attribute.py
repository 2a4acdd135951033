from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .base import BaseSpecification

if TYPE_CHECKING:
    from .specification import ISpecification


@dataclass(frozen=True)
class AttributeSpecification(BaseSpecification[Any]):
    """
    Apply a value specification to one attribute of the candidate.

    ``attr`` is a dot-separated path (``address.city``). Mappings are read
    by key, other objects by attribute; a missing part resolves to
    ``None`` and the inner specification decides what that means.
    """

    attr: str
    specification: ISpecification[Any]

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.specification.is_satisfied_by(
            self._resolve_field(candidate, self.attr)
        )

    def describe(self) -> str:
        return f"{self.attr} {self.specification.describe()}"

    @staticmethod
    def _resolve_field(obj: Any, attr_path: str) -> Any:
        for part in attr_path.split("."):
            if obj is None:
                return None
            if isinstance(obj, Mapping):
                obj = obj.get(part)
            else:
                obj = getattr(obj, part, None)
        return obj
