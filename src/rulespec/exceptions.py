"""
Specification exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(SpecificationError):
    """
    Specification parameters or builder structure are invalid.

    Raised eagerly at construction time, never during evaluation.
    ``errors`` maps a parameter location to its messages.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.errors = errors or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
            "errors": self.errors,
        }


class OperatorNotFoundError(SpecificationError):
    """
    Unknown operator specified.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class CandidateTypeError(SpecificationError, TypeError):
    """
    A candidate cannot be meaningfully evaluated by a specification.

    Example error message::

        StartsWith('Hello') cannot evaluate candidate 42 of type 'int':
        expected str.
    """

    def __init__(self, specification: object, candidate: object, expected: str) -> None:
        self.specification = specification
        self.candidate_type = type(candidate).__name__
        self.expected = expected

        message = (
            f"{specification!r} cannot evaluate candidate {candidate!r} "
            f"of type '{self.candidate_type}': expected {expected}."
        )
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CANDIDATE_TYPE_ERROR",
            "specification": repr(self.specification),
            "candidate_type": self.candidate_type,
            "expected": self.expected,
        }
