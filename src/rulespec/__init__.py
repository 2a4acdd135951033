"""
rulespec: composable specifications (boolean business rules).

Build leaves, combine them with ``and_`` / ``or_`` / ``not_`` /
``and_not`` / ``or_not`` (or ``&``, ``|``, ``~``), then evaluate with
``is_satisfied_by``::

    from rulespec import Between

    spec = Between(1, 3).or_(Between(6, 9))
    spec.is_satisfied_by(7)  # True
"""

from .attribute import AttributeSpecification
from .base import (
    AlwaysFalse,
    AlwaysTrue,
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    all_of,
    and_,
    and_not,
    any_of,
    not_,
    or_,
    or_not,
)
from .builder import SpecificationBuilder
from .exceptions import (
    CandidateTypeError,
    OperatorNotFoundError,
    SpecificationError,
    ValidationError,
)
from .leaves import (
    Between,
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
    build_default_registry,
)
from .operators import SpecificationOperator
from .registry import SpecificationRegistry
from .specification import ISpecification

__all__ = [
    # Contract
    "ISpecification",
    "BaseSpecification",
    # Composites
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "AlwaysTrue",
    "AlwaysFalse",
    # Combinators
    "and_",
    "or_",
    "not_",
    "and_not",
    "or_not",
    "all_of",
    "any_of",
    # Leaves
    "EqualTo",
    "GreaterThan",
    "GreaterThanOrEqualTo",
    "LessThan",
    "LessThanOrEqualTo",
    "Between",
    "In",
    "StartsWith",
    "EndsWith",
    "Contains",
    "Matches",
    "LengthBetween",
    "IsEmpty",
    "IsNone",
    "AttributeSpecification",
    # Builder / registry
    "SpecificationOperator",
    "SpecificationRegistry",
    "SpecificationBuilder",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "ValidationError",
    "OperatorNotFoundError",
    "CandidateTypeError",
]
