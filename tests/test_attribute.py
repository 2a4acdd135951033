"""Tests for AttributeSpecification field resolution."""

from __future__ import annotations

from types import SimpleNamespace

from rulespec import AttributeSpecification, Between, EqualTo, IsNone


def test_attribute_on_object() -> None:
    spec = AttributeSpecification("age", Between(18, 65))
    assert spec.is_satisfied_by(SimpleNamespace(age=30)) is True
    assert spec.is_satisfied_by(SimpleNamespace(age=70)) is False


def test_nested_path_through_mapping_and_object() -> None:
    spec = AttributeSpecification("address.city", EqualTo("Athens"))
    assert spec.is_satisfied_by({"address": {"city": "Athens"}}) is True
    assert spec.is_satisfied_by(SimpleNamespace(address={"city": "Paris"})) is False


def test_missing_part_resolves_to_none() -> None:
    spec = AttributeSpecification("address.city", IsNone())
    assert spec.is_satisfied_by({}) is True
    assert spec.is_satisfied_by(SimpleNamespace(address=None)) is True


def test_combines_like_any_specification() -> None:
    spec = AttributeSpecification("a", EqualTo(1)).and_not(
        AttributeSpecification("b", EqualTo(2))
    )
    assert spec.is_satisfied_by({"a": 1, "b": 3}) is True
    assert spec.is_satisfied_by({"a": 1, "b": 2}) is False


def test_describe() -> None:
    assert AttributeSpecification("age", Between(1, 2)).describe() == (
        "age between 1 and 2"
    )
