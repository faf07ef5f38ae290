from __future__ import annotations

from typing import List, Optional

from autofeedback.diagnostics import DiagnosticReporter, report_all
from autofeedback.parser import parse_annotation
from autofeedback.validators.base import ValidationResult
from autofeedback.validators.registry import ValidatorRegistry, default_registry
from autofeedback.validators.runner import run_requests


def parse_and_execute(
    subject_value: str,
    annotation_text: str,
    *,
    registry: Optional[ValidatorRegistry] = None,
    reporter: Optional[DiagnosticReporter] = None,
) -> List[ValidationResult]:
    """
    Parse an annotation and run every well-formed validator group against
    the subject value.

    - Results follow the order validators appear in the annotation
    - Malformed groups are skipped and reported, never raised
    - Deterministic given (subject_value, annotation_text, registry)

    Diagnostics go to `reporter`, or to the logging channel when omitted.
    """
    reg = registry if registry is not None else default_registry()

    outcome = parse_annotation(annotation_text, reg)
    report_all(outcome.diagnostics, reporter)

    return run_requests(subject_value, outcome.requests)
