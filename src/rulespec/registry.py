"""
Operator registry: maps operator names to leaf factories.

The registry is the configuration point of the builder. New leaf kinds
are made available by registering a factory under a new name; built-in
names can be overridden the same way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import OperatorNotFoundError
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .specification import ISpecification

    LeafFactory = Callable[[Any], ISpecification[Any]]

logger = logging.getLogger(__name__)


class SpecificationRegistry:
    """
    Registry of leaf factories keyed by operator name.

    Usage::

        registry = SpecificationRegistry()
        registry.register(SpecificationOperator.GT, GreaterThan)

        spec = registry.create(">", 18)
    """

    def __init__(self) -> None:
        self._factories: dict[str, LeafFactory] = {}

    # -- registration --------------------------------------------------------

    def register(self, name: SpecificationOperator | str, factory: LeafFactory) -> None:
        """Register *factory* under *name*, replacing any previous entry."""
        key = _key(name)
        if key in self._factories:
            logger.warning("Overriding factory for operator '%s'", key)
        self._factories[key] = factory
        logger.debug("Registered operator '%s'", key)

    def register_all(
        self, factories: Mapping[SpecificationOperator | str, LeafFactory]
    ) -> None:
        """Register multiple factories at once."""
        for name, factory in factories.items():
            self.register(name, factory)

    def unregister(self, name: SpecificationOperator | str) -> None:
        """Remove an operator from the registry."""
        self._factories.pop(_key(name), None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: SpecificationOperator | str) -> LeafFactory | None:
        """Return the registered factory or ``None``."""
        return self._factories.get(_key(name))

    def has(self, name: SpecificationOperator | str) -> bool:
        return _key(name) in self._factories

    @property
    def supported_operators(self) -> set[str]:
        return set(self._factories.keys())

    # -- construction shortcut -----------------------------------------------

    def create(
        self, name: SpecificationOperator | str, value: Any = None
    ) -> ISpecification[Any]:
        """
        Look up the factory and build a specification from *value*.

        Raises:
            OperatorNotFoundError: If the operator is not registered.
        """
        factory = self.get(name)
        if factory is None:
            raise OperatorNotFoundError(_key(name), sorted(self._factories))
        return factory(value)


def _key(name: SpecificationOperator | str) -> str:
    return name.value if isinstance(name, SpecificationOperator) else name
