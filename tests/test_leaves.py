"""Tests for leaf specifications (comparison, set, string, size, null)."""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

import pytest

from rulespec import (
    Between,
    CandidateTypeError,
    Contains,
    EndsWith,
    EqualTo,
    GreaterThan,
    GreaterThanOrEqualTo,
    In,
    IsEmpty,
    IsNone,
    LengthBetween,
    LessThan,
    LessThanOrEqualTo,
    Matches,
    StartsWith,
    ValidationError,
)

# ══════════════════════════════════════════════════════════════════════
# Comparison leaves
# ══════════════════════════════════════════════════════════════════════


class TestComparisonLeaves:
    """EqualTo and the ordering leaves."""

    def test_equal_to_uses_value_equality(self) -> None:
        assert EqualTo([1, 2]).is_satisfied_by([1, 2]) is True
        assert EqualTo(1).is_satisfied_by(1.0) is True
        assert EqualTo("test").is_satisfied_by("TEST") is False
        assert EqualTo(None).is_satisfied_by(None) is True

    def test_equal_to_never_raises_on_mismatched_types(self) -> None:
        assert EqualTo(1).is_satisfied_by("1") is False

    def test_greater_than(self) -> None:
        spec = GreaterThan(50)
        assert spec.is_satisfied_by(100) is True
        assert spec.is_satisfied_by(50) is False
        assert spec.is_satisfied_by(30) is False

    def test_greater_than_or_equal_to(self) -> None:
        spec = GreaterThanOrEqualTo(50)
        assert spec.is_satisfied_by(100) is True
        assert spec.is_satisfied_by(50) is True
        assert spec.is_satisfied_by(49) is False

    def test_less_than(self) -> None:
        spec = LessThan(50)
        assert spec.is_satisfied_by(10) is True
        assert spec.is_satisfied_by(50) is False

    def test_less_than_or_equal_to(self) -> None:
        spec = LessThanOrEqualTo(50)
        assert spec.is_satisfied_by(50) is True
        assert spec.is_satisfied_by(51) is False

    def test_ordering_works_across_native_types(self) -> None:
        assert GreaterThan(date(2024, 1, 1)).is_satisfied_by(date(2024, 6, 1)) is True
        assert LessThan("m").is_satisfied_by("apple") is True
        assert GreaterThan(Decimal("1.5")).is_satisfied_by(2) is True

    @pytest.mark.parametrize(
        "spec",
        [GreaterThan(1), GreaterThanOrEqualTo(1), LessThan(1), LessThanOrEqualTo(1)],
    )
    def test_incomparable_candidate_fails_loudly(self, spec) -> None:
        with pytest.raises(CandidateTypeError):
            spec.is_satisfied_by(None)
        with pytest.raises(TypeError):
            spec.is_satisfied_by("1")

    def test_describe(self) -> None:
        assert EqualTo("x").describe() == "equal to 'x'"
        assert GreaterThanOrEqualTo(3).describe() == "greater than or equal to 3"
        assert LessThan(3).describe() == "less than 3"


# ══════════════════════════════════════════════════════════════════════
# Set / range leaves
# ══════════════════════════════════════════════════════════════════════


class TestBetween:
    def test_inclusive_on_both_ends(self) -> None:
        spec = Between(1, 3)
        assert spec.is_satisfied_by(1) is True
        assert spec.is_satisfied_by(3) is True
        assert spec.is_satisfied_by(2) is True
        assert spec.is_satisfied_by(0) is False
        assert spec.is_satisfied_by(4) is False

    def test_degenerate_range(self) -> None:
        assert Between(5, 5).is_satisfied_by(5) is True
        assert Between(5, 5).is_satisfied_by(6) is False

    def test_dates(self) -> None:
        spec = Between(date(2024, 1, 1), date(2024, 12, 31))
        assert spec.is_satisfied_by(date(2024, 7, 4)) is True
        assert spec.is_satisfied_by(date(2025, 1, 1)) is False

    def test_inverted_bounds_rejected_at_construction(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Between(3, 1)
        assert "greater than upper bound" in str(exc_info.value)

    def test_incomparable_bounds_rejected_at_construction(self) -> None:
        with pytest.raises(ValidationError):
            Between(1, "z")

    def test_incomparable_candidate_fails_loudly(self) -> None:
        with pytest.raises(CandidateTypeError):
            Between(1, 3).is_satisfied_by("2")

    def test_describe(self) -> None:
        assert Between(1, 3).describe() == "between 1 and 3"


class TestIn:
    def test_membership(self) -> None:
        spec = In([11, 25, 31])
        assert spec.is_satisfied_by(25) is True
        assert spec.is_satisfied_by(12) is False

    def test_duplicates_are_harmless(self) -> None:
        spec = In([1, 1, 2])
        assert spec.is_satisfied_by(1) is True
        assert spec.values == (1, 1, 2)

    def test_accepts_unhashable_values(self) -> None:
        assert In([[1], [2]]).is_satisfied_by([2]) is True

    def test_accepts_any_iterable(self) -> None:
        assert In(x for x in range(3)).is_satisfied_by(2) is True
        assert In({"a", "b"}).is_satisfied_by("a") is True

    @pytest.mark.parametrize("bad", ["abc", b"abc", 42])
    def test_rejects_non_collections(self, bad) -> None:
        with pytest.raises(ValidationError):
            In(bad)

    def test_describe(self) -> None:
        assert In((1, 2)).describe() == "one of [1, 2]"


# ══════════════════════════════════════════════════════════════════════
# String leaves
# ══════════════════════════════════════════════════════════════════════


class TestStringLeaves:
    def test_starts_with_is_case_sensitive_by_default(self) -> None:
        assert StartsWith("Hello").is_satisfied_by("Hello Bob") is True
        assert StartsWith("Hello").is_satisfied_by("hello Bob") is False

    def test_starts_with_ignore_case(self) -> None:
        assert StartsWith("HELLO", ignore_case=True).is_satisfied_by("hello") is True

    def test_ends_with(self) -> None:
        assert EndsWith(".py").is_satisfied_by("main.py") is True
        assert EndsWith(".PY").is_satisfied_by("main.py") is False
        assert EndsWith(".PY", True).is_satisfied_by("main.py") is True

    def test_contains(self) -> None:
        assert Contains("world").is_satisfied_by("hello world") is True
        assert Contains("WORLD").is_satisfied_by("hello world") is False

    def test_contains_ignore_case(self) -> None:
        assert Contains("WORLD", True).is_satisfied_by("hello world") is True

    def test_ignore_case_uses_casefold(self) -> None:
        assert Contains("STRASSE", ignore_case=True).is_satisfied_by("Straße") is True

    def test_empty_fragment_matches_everything(self) -> None:
        assert StartsWith("").is_satisfied_by("anything") is True
        assert Contains("").is_satisfied_by("") is True

    @pytest.mark.parametrize("spec_cls", [StartsWith, EndsWith, Contains])
    def test_non_text_candidate_fails_loudly(self, spec_cls) -> None:
        with pytest.raises(CandidateTypeError) as exc_info:
            spec_cls("1").is_satisfied_by(1)
        assert exc_info.value.expected == "str"

    @pytest.mark.parametrize("spec_cls", [StartsWith, EndsWith, Contains])
    def test_non_text_parameter_rejected_at_construction(self, spec_cls) -> None:
        with pytest.raises(ValidationError):
            spec_cls(1)

    def test_describe(self) -> None:
        assert StartsWith("a").describe() == "starts with 'a'"
        assert EndsWith("b", True).describe() == "ends with 'b' (ignoring case)"


class TestMatches:
    def test_search_semantics(self) -> None:
        spec = Matches(r"\d+")
        assert spec.is_satisfied_by("order 42 shipped") is True
        assert spec.is_satisfied_by("no digits") is False

    def test_anchored_pattern(self) -> None:
        spec = Matches(r"^\d+$")
        assert spec.is_satisfied_by("42") is True
        assert spec.is_satisfied_by("a42") is False

    def test_flags(self) -> None:
        assert Matches("abc", re.IGNORECASE).is_satisfied_by("xABCx") is True

    def test_precompiled_pattern(self) -> None:
        assert Matches(re.compile(r"J\w+ D\w+")).is_satisfied_by("John Doe") is True

    def test_bytes_pattern(self) -> None:
        spec = Matches(rb"\x00")
        assert spec.is_satisfied_by(b"a\x00b") is True
        with pytest.raises(CandidateTypeError):
            spec.is_satisfied_by("a")

    def test_malformed_pattern_rejected_at_construction(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Matches("(unclosed")
        assert exc_info.value.path == "Matches.pattern"

    def test_flags_with_compiled_pattern_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Matches(re.compile("a"), re.IGNORECASE)

    def test_non_text_candidate_fails_loudly(self) -> None:
        with pytest.raises(CandidateTypeError):
            Matches(r"\d").is_satisfied_by(4)

    def test_equality_ignores_compiled_pattern(self) -> None:
        assert Matches("a+") == Matches("a+")
        assert Matches("a+") != Matches("a+", re.IGNORECASE)

    def test_describe(self) -> None:
        assert Matches(r"^\d+$").describe() == r"matches /^\d+$/"


# ══════════════════════════════════════════════════════════════════════
# Size / null leaves
# ══════════════════════════════════════════════════════════════════════


class TestSizeLeaves:
    def test_length_between_inclusive(self) -> None:
        spec = LengthBetween(2, 5)
        assert spec.is_satisfied_by("") is False
        assert spec.is_satisfied_by("Hi") is True
        assert spec.is_satisfied_by("Howdy") is True
        assert spec.is_satisfied_by("Howdy!") is False

    def test_length_between_sequences(self) -> None:
        spec = LengthBetween(1, 2)
        assert spec.is_satisfied_by([1]) is True
        assert spec.is_satisfied_by((1, 2, 3)) is False
        assert spec.is_satisfied_by({"a": 1}) is True

    @pytest.mark.parametrize(("low", "high"), [(3, 2), (-1, 2), (1.5, 2), ("1", 2)])
    def test_length_between_bad_bounds(self, low, high) -> None:
        with pytest.raises(ValidationError):
            LengthBetween(low, high)

    def test_length_between_unsized_candidate(self) -> None:
        with pytest.raises(CandidateTypeError) as exc_info:
            LengthBetween(0, 1).is_satisfied_by(10)
        assert exc_info.value.candidate_type == "int"

    def test_is_empty(self) -> None:
        assert IsEmpty().is_satisfied_by("") is True
        assert IsEmpty().is_satisfied_by([]) is True
        assert IsEmpty().is_satisfied_by([0]) is False
        with pytest.raises(CandidateTypeError):
            IsEmpty().is_satisfied_by(None)


class TestIsNone:
    def test_is_none(self) -> None:
        assert IsNone().is_satisfied_by(None) is True
        assert IsNone().is_satisfied_by(0) is False
        assert IsNone().not_().is_satisfied_by("") is True
