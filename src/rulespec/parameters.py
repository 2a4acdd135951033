"""
Construction-time parameter validation for leaf specifications.

Parameters are expressed as frozen pydantic value objects; pydantic
failures are translated into :class:`~rulespec.exceptions.ValidationError`
so callers only ever see the specification error hierarchy.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic import model_validator

from .exceptions import ValidationError

P = TypeVar("P", bound="ValueObject")


class ValueObject(BaseModel):
    """Immutable parameter set; equality is structural."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Bounds(ValueObject):
    """Inclusive ``[low, high]`` range over any totally ordered type."""

    low: Any
    high: Any

    @model_validator(mode="after")
    def _check_order(self) -> Bounds:
        try:
            inverted = self.high < self.low
        except TypeError as exc:
            # pydantic only reports ValueError / AssertionError
            raise ValueError(
                f"bounds {self.low!r} and {self.high!r} are not comparable"
            ) from exc
        if inverted:
            raise ValueError(
                f"lower bound {self.low!r} is greater than upper bound {self.high!r}"
            )
        return self


class LengthBounds(ValueObject):
    """Inclusive length range; both ends are non-negative integers."""

    low: StrictInt = Field(ge=0)
    high: StrictInt = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> LengthBounds:
        if self.low > self.high:
            raise ValueError(
                f"minimum length {self.low} is greater than maximum length {self.high}"
            )
        return self


class TextFragment(ValueObject):
    """Text operand of the string leaves."""

    text: StrictStr
    ignore_case: StrictBool = False


def build_parameters(model: type[P], owner: str, **values: Any) -> P:
    """
    Validate *values* through *model*.

    Raises:
        ValidationError: With a ``{location: [messages]}`` map of every
            problem pydantic found.
    """
    try:
        return model(**values)
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
            msg = error.get("msg", "validation error")
            errors.setdefault(loc, []).append(msg)
        first = next(iter(errors))
        summary = "; ".join(
            f"{loc}: {', '.join(messages)}" for loc, messages in errors.items()
        )
        raise ValidationError(
            f"Invalid parameters for {owner}: {summary}",
            path=f"{owner}.{first}",
            errors=errors,
        ) from exc
