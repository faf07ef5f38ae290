"""
autofeedback package

Parses inline validation annotations (e.g. "!=:1:!=:2") into validator
calls, runs them against a subject value, and produces feedback messages.

Exports only the public entry points.
No runtime wiring is performed here; see autofeedback.main for the service.
"""

from .diagnostics import (
    CollectingReporter,
    Diagnostic,
    DiagnosticKind,
    DiagnosticReporter,
    LoggingReporter,
)
from .dispatcher import parse_and_execute
from .lines import (
    AnnotatedLine,
    LineFeedback,
    render_feedback,
    split_annotated_line,
    validate_line,
    validate_lines,
)
from .parser import ParseOutcome, parse_annotation, parse_annotation_tokens, tokenize
from .validators import (
    DuplicateOperatorError,
    ValidationRequest,
    ValidationResult,
    RegistryConfigError,
    ValidatorDescriptor,
    ValidatorRegistry,
    default_registry,
)

__all__ = [
    "parse_and_execute",
    "parse_annotation",
    "parse_annotation_tokens",
    "tokenize",
    "ParseOutcome",
    "AnnotatedLine",
    "LineFeedback",
    "split_annotated_line",
    "validate_line",
    "validate_lines",
    "render_feedback",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticReporter",
    "CollectingReporter",
    "LoggingReporter",
    "DuplicateOperatorError",
    "ValidationRequest",
    "ValidationResult",
    "RegistryConfigError",
    "ValidatorDescriptor",
    "ValidatorRegistry",
    "default_registry",
]
