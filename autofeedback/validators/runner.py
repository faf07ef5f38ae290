from __future__ import annotations

from typing import Iterable, List

from .base import ValidationRequest, ValidationResult


def format_message(name: str, is_valid: bool, parameters: Iterable[str]) -> str:
    return f"Validator {name} gave result {is_valid} for parameters {list(parameters)}."


def execute_request(subject: str, request: ValidationRequest) -> ValidationResult:
    """
    Run one bound validator against the subject value.

    A check that raises is a bug in that validator and is not caught here.
    """
    descriptor = request.descriptor
    is_valid = bool(descriptor.check(subject, *request.parameters))

    return ValidationResult(
        is_valid=is_valid,
        message=format_message(descriptor.name, is_valid, request.parameters),
        validator=descriptor.name,
        parameters=tuple(request.parameters),
    )


def run_requests(
    subject: str,
    requests: Iterable[ValidationRequest],
) -> List[ValidationResult]:
    """
    Execute requests in order against one subject.

    - No side effects
    - No I/O
    - Deterministic given (subject, requests)
    """
    results: List[ValidationResult] = []
    for request in requests:
        results.append(execute_request(subject, request))

    return results
