"""
String leaves: starts with, ends with, contains, regular-expression match.

Matching is case-sensitive unless ``ignore_case`` is set, in which case
both sides are compared after :meth:`str.casefold`. Non-text candidates
are rejected with :class:`~rulespec.exceptions.CandidateTypeError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..base import BaseSpecification
from ..exceptions import CandidateTypeError, ValidationError
from ..parameters import TextFragment, build_parameters


class _TextSpecification(BaseSpecification[str]):
    text: str
    ignore_case: bool

    def __post_init__(self) -> None:
        build_parameters(
            TextFragment,
            type(self).__name__,
            text=self.text,
            ignore_case=self.ignore_case,
        )

    def _normalize(self, candidate: Any) -> tuple[str, str]:
        if not isinstance(candidate, str):
            raise CandidateTypeError(self, candidate, "str")
        if self.ignore_case:
            return candidate.casefold(), self.text.casefold()
        return candidate, self.text

    def _render(self, verb: str) -> str:
        suffix = " (ignoring case)" if self.ignore_case else ""
        return f"{verb} {self.text!r}{suffix}"


@dataclass(frozen=True)
class StartsWith(_TextSpecification):
    text: str
    ignore_case: bool = False

    def is_satisfied_by(self, candidate: str) -> bool:
        value, prefix = self._normalize(candidate)
        return value.startswith(prefix)

    def describe(self) -> str:
        return self._render("starts with")


@dataclass(frozen=True)
class EndsWith(_TextSpecification):
    text: str
    ignore_case: bool = False

    def is_satisfied_by(self, candidate: str) -> bool:
        value, suffix = self._normalize(candidate)
        return value.endswith(suffix)

    def describe(self) -> str:
        return self._render("ends with")


@dataclass(frozen=True)
class Contains(_TextSpecification):
    text: str
    ignore_case: bool = False

    def is_satisfied_by(self, candidate: str) -> bool:
        value, fragment = self._normalize(candidate)
        return fragment in value

    def describe(self) -> str:
        return self._render("contains")


@dataclass(frozen=True)
class Matches(BaseSpecification[Any]):
    """
    Regular-expression search (:func:`re.search` semantics): the pattern
    may match anywhere unless it is anchored.

    The pattern is compiled when the leaf is built, so a malformed
    expression raises :class:`~rulespec.exceptions.ValidationError`
    immediately. Candidates must be of the pattern's text type
    (``str`` for ``str`` patterns, ``bytes`` for ``bytes`` patterns).
    """

    pattern: str | bytes | re.Pattern[Any]
    flags: int = 0
    compiled: re.Pattern[Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as exc:
            raise ValidationError(
                f"Invalid regular expression {self.pattern!r}: {exc}",
                path="Matches.pattern",
            ) from exc
        except (TypeError, ValueError) as exc:
            # non-text pattern, or flags given alongside a compiled pattern
            raise ValidationError(
                f"Cannot compile {self.pattern!r}: {exc}", path="Matches.pattern"
            ) from exc
        object.__setattr__(self, "compiled", compiled)

    def is_satisfied_by(self, candidate: Any) -> bool:
        expected = type(self.compiled.pattern)
        if not isinstance(candidate, expected):
            raise CandidateTypeError(self, candidate, expected.__name__)
        return self.compiled.search(candidate) is not None

    def describe(self) -> str:
        return f"matches /{self.compiled.pattern!s}/"
