from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .base import DuplicateOperatorError, ValidatorDescriptor
from .builtin import DEFAULT_VALIDATORS


class ValidatorRegistry:
    """
    Fixed, ordered mapping from operator symbol to validator descriptor.

    Code-defined: with no arguments the built-in validators are registered.
    A registry never changes after construction; `extended()` returns a new
    one, so callers can add validators without touching the parser.
    """

    def __init__(self, descriptors: Optional[Iterable[ValidatorDescriptor]] = None) -> None:
        source = DEFAULT_VALIDATORS if descriptors is None else descriptors

        registry: Dict[str, ValidatorDescriptor] = {}
        for descriptor in source:
            existing = registry.get(descriptor.operator)
            if existing is not None:
                raise DuplicateOperatorError(
                    descriptor.operator,
                    existing=existing.name,
                    duplicate=descriptor.name,
                )
            registry[descriptor.operator] = descriptor

        self._registry = registry

    def lookup(self, operator: str) -> Optional[ValidatorDescriptor]:
        """
        Exact-match lookup. None means "not an operator", which is not an error.
        """
        return self._registry.get(operator)

    def extended(self, *descriptors: ValidatorDescriptor) -> "ValidatorRegistry":
        return ValidatorRegistry([*self._registry.values(), *descriptors])

    def operators(self) -> List[str]:
        return list(self._registry.keys())

    def describe(self) -> List[Dict[str, Any]]:
        """
        Help listing for every validator, in registration order.
        """
        return [
            {
                "name": d.name,
                "operator": d.operator,
                "arity": d.arity,
                "description": d.description,
                "example": d.example,
            }
            for d in self
        ]

    def __contains__(self, operator: object) -> bool:
        return operator in self._registry

    def __iter__(self) -> Iterator[ValidatorDescriptor]:
        return iter(list(self._registry.values()))

    def __len__(self) -> int:
        return len(self._registry)


@lru_cache(maxsize=None)
def default_registry() -> ValidatorRegistry:
    """
    Process-wide registry of the built-in validators, created once.
    """
    return ValidatorRegistry()
