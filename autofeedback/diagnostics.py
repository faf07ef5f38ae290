"""
Structured diagnostics for malformed annotations.

Malformed annotations are expected user input, not failures. The parser
records what it skipped as Diagnostic values; the dispatcher hands them to a
reporter. The default reporter writes to the standard logging channel;
callers that want the values themselves pass a CollectingReporter.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "autofeedback"


class DiagnosticKind(str, Enum):
    UNRECOGNIZED_LEADING_TOKEN = "UNRECOGNIZED_LEADING_TOKEN"
    ARITY_MISMATCH = "ARITY_MISMATCH"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    token: Optional[str] = None         # offending leading token; None for an empty annotation
    operator: Optional[str] = None
    validator: Optional[str] = None
    expected: Optional[int] = None
    actual: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


def unrecognized_leading_token(token: Optional[str]) -> Diagnostic:
    if token is None:
        message = "Annotation is empty; nothing to validate."
    else:
        message = f"Invalid start token {token!r}: an annotation must begin with a known operator."
    return Diagnostic(
        kind=DiagnosticKind.UNRECOGNIZED_LEADING_TOKEN,
        message=message,
        token=token,
    )


def arity_mismatch(name: str, operator: str, expected: int, actual: int) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.ARITY_MISMATCH,
        message=(
            f"{operator} ({name}) expects {expected} parameter(s), "
            f"but {actual} were found. Skipping."
        ),
        operator=operator,
        validator=name,
        expected=expected,
        actual=actual,
    )


@runtime_checkable
class DiagnosticReporter(Protocol):
    def report(self, diagnostic: Diagnostic) -> None:
        ...


class LoggingReporter:
    """
    Reports each diagnostic as a WARNING record with the structured
    diagnostic attached under `extra["diagnostic"]`.
    """

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def report(self, diagnostic: Diagnostic) -> None:
        self._log.warning(diagnostic.message, extra={"diagnostic": diagnostic.as_dict()})


@dataclass
class CollectingReporter:
    """
    Keeps every reported diagnostic, in report order.
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def kinds(self) -> List[DiagnosticKind]:
        return [d.kind for d in self.diagnostics]


def report_all(diagnostics: Iterable[Diagnostic], reporter: Optional[DiagnosticReporter] = None) -> None:
    sink = reporter if reporter is not None else LoggingReporter()
    for diagnostic in diagnostics:
        sink.report(diagnostic)


def configure_logging(level: str = "WARNING") -> None:
    """
    Set the package logger level. Unknown level names fall back to WARNING.
    """
    resolved = getattr(logging, str(level).strip().upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved)
