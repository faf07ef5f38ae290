"""
Annotation validators.

Validators are pure, side-effect-free boolean checks over a subject value
and the string parameters bound to them by an annotation.

They do not perform I/O and never mutate the registry they live in.
"""
from .base import (
    DELIMITER,
    DuplicateOperatorError,
    ValidationRequest,
    ValidationResult,
    RegistryConfigError,
    ValidatorDescriptor,
)
from .builtin import DEFAULT_VALIDATORS
from .registry import ValidatorRegistry, default_registry
from .runner import execute_request, format_message, run_requests

__all__ = [
    "DELIMITER",
    "DEFAULT_VALIDATORS",
    "DuplicateOperatorError",
    "ValidationRequest",
    "ValidationResult",
    "RegistryConfigError",
    "ValidatorDescriptor",
    "ValidatorRegistry",
    "default_registry",
    "execute_request",
    "format_message",
    "run_requests",
]
