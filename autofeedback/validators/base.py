from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Callable, Tuple


# Annotation tokens are split on this; an operator containing it can never match.
DELIMITER = ":"

CheckFunction = Callable[..., bool]


class RegistryConfigError(ValueError):
    """
    Raised when a validator descriptor or registry is misconfigured.

    Configuration errors surface at construction time, never while parsing
    user annotations.
    """


class DuplicateOperatorError(RegistryConfigError):
    def __init__(self, operator: str, existing: str, duplicate: str) -> None:
        self.operator = operator
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Operator {operator!r} is already registered by validator "
            f"{existing!r}; cannot register {duplicate!r}."
        )


def _accepts_positional(fn: CheckFunction, count: int) -> bool:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust the declared arity.
        return True

    try:
        sig.bind(*range(count))
    except TypeError:
        return False
    return True


@dataclass(frozen=True)
class ValidatorDescriptor:
    """
    Immutable description of one annotation validator.

    `arity` counts parameters EXCLUDING the subject value, so a check that
    only looks at the subject has arity 0. The check function is called as
    check(subject, *parameters) and must return a boolean.
    """
    name: str
    operator: str               # e.g. "!=", unique within a registry
    arity: int
    check: CheckFunction = field(compare=False)
    description: str = ""
    example: str = ""

    def __post_init__(self) -> None:
        if not self.operator:
            raise RegistryConfigError(f"Validator {self.name!r} has an empty operator.")
        if DELIMITER in self.operator:
            raise RegistryConfigError(
                f"Operator {self.operator!r} of validator {self.name!r} "
                f"contains the annotation delimiter {DELIMITER!r}."
            )
        if self.arity < 0:
            raise RegistryConfigError(
                f"Validator {self.name!r} declares negative arity {self.arity}."
            )
        if not callable(self.check):
            raise RegistryConfigError(f"Validator {self.name!r} check is not callable.")
        if not _accepts_positional(self.check, self.arity + 1):
            raise RegistryConfigError(
                f"Validator {self.name!r} declares arity {self.arity} but its check "
                f"function cannot be called with the subject plus {self.arity} parameter(s)."
            )


@dataclass(frozen=True)
class ValidationRequest:
    """
    A validator bound to the parameters collected for it from an annotation.
    """
    descriptor: ValidatorDescriptor
    parameters: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class ValidationResult:
    """
    Output of one executed validation request.

    `message` is the human-facing feedback line; `validator` and
    `parameters` repeat what it encodes for structured consumers.
    """
    is_valid: bool
    message: str
    validator: str = ""
    parameters: Tuple[str, ...] = ()
