"""Shared fixtures for rulespec tests."""

from __future__ import annotations

from typing import Any

import pytest

from rulespec import BaseSpecification
from rulespec.leaves import build_default_registry


class Exploding(BaseSpecification[Any]):
    """Raises if evaluated; used to prove short-circuiting."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        raise AssertionError(f"evaluated with {candidate!r}")


@pytest.fixture
def registry():
    """Fresh registry with every built-in operator."""
    return build_default_registry()


@pytest.fixture
def exploding() -> Exploding:
    return Exploding()
