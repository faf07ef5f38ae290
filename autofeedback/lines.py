"""
Annotated-line front end.

A line requests validation by carrying the marker, e.g.

    # 1 !robota!=:1

The subject is everything before the marker (first "#" removed, then
stripped); the annotation is everything after the last marker.

This module performs no I/O. Reading and rewriting the surrounding
document is the host's job.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from autofeedback.config import DEFAULT_MARKER
from autofeedback.diagnostics import (
    CollectingReporter,
    Diagnostic,
    DiagnosticReporter,
    report_all,
)
from autofeedback.dispatcher import parse_and_execute
from autofeedback.validators.base import ValidationResult
from autofeedback.validators.registry import ValidatorRegistry

FEEDBACK_PREFIX = "# "


@dataclass(frozen=True)
class AnnotatedLine:
    subject: str
    annotation: str


@dataclass(frozen=True)
class LineFeedback:
    line_number: int                    # 1-based position in the input
    subject: str
    annotation: str
    results: Tuple[ValidationResult, ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = ()


def is_annotated(line: str, marker: str = DEFAULT_MARKER) -> bool:
    if not marker:
        raise ValueError("marker must not be empty")
    return marker in line


def split_annotated_line(line: str, marker: str = DEFAULT_MARKER) -> Optional[AnnotatedLine]:
    """
    Return the subject/annotation pair, or None if the line has no marker.
    """
    if not is_annotated(line, marker):
        return None

    parts = line.split(marker)
    subject = parts[0].replace("#", "", 1).strip()
    annotation = parts[-1].strip()
    return AnnotatedLine(subject=subject, annotation=annotation)


def validate_line(
    line: str,
    *,
    marker: str = DEFAULT_MARKER,
    registry: Optional[ValidatorRegistry] = None,
    reporter: Optional[DiagnosticReporter] = None,
) -> List[ValidationResult]:
    annotated = split_annotated_line(line, marker)
    if annotated is None:
        return []

    return parse_and_execute(
        annotated.subject,
        annotated.annotation,
        registry=registry,
        reporter=reporter,
    )


def validate_lines(
    lines: Iterable[str],
    *,
    marker: str = DEFAULT_MARKER,
    registry: Optional[ValidatorRegistry] = None,
    reporter: Optional[DiagnosticReporter] = None,
) -> List[LineFeedback]:
    """
    Validate every annotated line, in input order. Unannotated lines are
    skipped. Each entry keeps its own diagnostics; they are also forwarded
    to `reporter` (logging when omitted).
    """
    feedback: List[LineFeedback] = []

    for number, line in enumerate(lines, start=1):
        annotated = split_annotated_line(line, marker)
        if annotated is None:
            continue

        collector = CollectingReporter()
        results = parse_and_execute(
            annotated.subject,
            annotated.annotation,
            registry=registry,
            reporter=collector,
        )
        report_all(collector.diagnostics, reporter)

        feedback.append(
            LineFeedback(
                line_number=number,
                subject=annotated.subject,
                annotation=annotated.annotation,
                results=tuple(results),
                diagnostics=tuple(collector.diagnostics),
            )
        )

    return feedback


def render_feedback(results: Iterable[ValidationResult]) -> List[str]:
    """
    One comment line per result, in order.
    """
    return [FEEDBACK_PREFIX + r.message for r in results]
