"""
Annotation parser.

An annotation is a ":"-delimited run of operator and parameter tokens, e.g.

    "!=:1:!=:2"  ->  different("1"), different("2")

Each operator starts a group; the non-operator tokens after it are that
group's parameters. A group is emitted only when its parameter count matches
the validator's arity. Malformed groups are dropped and recorded as
diagnostics; parsing never raises on user input.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from autofeedback.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    arity_mismatch,
    unrecognized_leading_token,
)
from autofeedback.validators.base import DELIMITER, ValidationRequest, ValidatorDescriptor
from autofeedback.validators.registry import ValidatorRegistry, default_registry


# Virtual token appended after the last real token; closes the final group.
END = None


@dataclass(frozen=True)
class ParseOutcome:
    requests: Tuple[ValidationRequest, ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def aborted(self) -> bool:
        return not self.requests and any(
            d.kind == DiagnosticKind.UNRECOGNIZED_LEADING_TOKEN for d in self.diagnostics
        )


def tokenize(annotation_text: str) -> Tuple[str, ...]:
    """
    Split on the delimiter and drop empty fragments. Tokens are not stripped,
    but a blank annotation has no tokens at all.
    """
    if not annotation_text.strip():
        return ()
    return tuple(t for t in annotation_text.split(DELIMITER) if t != "")


def parse_annotation_tokens(
    tokens: Iterable[str],
    registry: Optional[ValidatorRegistry] = None,
) -> ParseOutcome:
    """
    Fold tokens left to right into validation requests.

    States:
    - no current validator: the token must be an operator, else abort
    - current validator, parameter token: collect it
    - current validator, operator or END: close the group, then start the
      next one (or stop at END)
    """
    reg = registry if registry is not None else default_registry()

    current: Optional[ValidatorDescriptor] = None
    collected: List[str] = []
    requests: List[ValidationRequest] = []
    diagnostics: List[Diagnostic] = []

    for token in (*tokens, END):
        descriptor = reg.lookup(token) if token is not END else None

        if current is None:
            if descriptor is None:
                # Nothing usable can follow an unknown start
                return ParseOutcome(diagnostics=(unrecognized_leading_token(token),))
            current = descriptor
            continue

        if descriptor is None and token is not END:
            collected.append(token)
            continue

        if len(collected) == current.arity:
            requests.append(ValidationRequest(descriptor=current, parameters=tuple(collected)))
        else:
            diagnostics.append(
                arity_mismatch(current.name, current.operator, current.arity, len(collected))
            )

        current = descriptor
        collected = []

    return ParseOutcome(requests=tuple(requests), diagnostics=tuple(diagnostics))


def parse_annotation(
    annotation_text: str,
    registry: Optional[ValidatorRegistry] = None,
) -> ParseOutcome:
    return parse_annotation_tokens(tokenize(annotation_text), registry)
