from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import BaseModel, Field

from autofeedback.config import AutofeedbackConfig, load_config
from autofeedback.diagnostics import CollectingReporter, Diagnostic
from autofeedback.dispatcher import parse_and_execute
from autofeedback.lines import render_feedback, validate_lines
from autofeedback.validators.base import ValidationResult
from autofeedback.validators.registry import ValidatorRegistry, default_registry


def _config_from_request(request: Request) -> AutofeedbackConfig:
    # create_app() sets app.state.config; fall back to the environment.
    state = getattr(getattr(request, "app", None), "state", None)
    candidate = getattr(state, "config", None) if state else None
    return candidate if isinstance(candidate, AutofeedbackConfig) else load_config()


def _registry_from_request(request: Request) -> ValidatorRegistry:
    state = getattr(getattr(request, "app", None), "state", None)
    candidate = getattr(state, "registry", None) if state else None
    return candidate if isinstance(candidate, ValidatorRegistry) else default_registry()


def require_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
) -> None:
    """
    Header-based API key check. If no key is configured this is a no-op.
    """
    api_key = _config_from_request(request).api_key
    if not api_key:
        return

    if x_api_key != api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


router = APIRouter(
    prefix="/autofeedback",
    tags=["autofeedback"],
    dependencies=[Depends(require_api_key)],
)

# ----------------------------
# Models
# ----------------------------


class ValidatorInfo(BaseModel):
    name: str
    operator: str
    arity: int
    description: str = ""
    example: str = ""


class ValidateRequest(BaseModel):
    subject: str = Field(..., description="Value being validated")
    annotation: str = Field(..., description='Annotation suffix, e.g. "!=:1:!=:2"')


class ResultModel(BaseModel):
    is_valid: bool
    message: str
    validator: str
    parameters: List[str] = Field(default_factory=list)


class DiagnosticModel(BaseModel):
    kind: str
    message: str
    token: Optional[str] = None
    operator: Optional[str] = None
    validator: Optional[str] = None
    expected: Optional[int] = None
    actual: Optional[int] = None


class ValidateResponse(BaseModel):
    results: List[ResultModel]
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)


class LinesRequest(BaseModel):
    lines: List[str] = Field(..., description="Raw lines, annotated or not")


class LineFeedbackModel(BaseModel):
    line_number: int
    subject: str
    annotation: str
    results: List[ResultModel]
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)


class LinesResponse(BaseModel):
    annotated: List[LineFeedbackModel]
    feedback: List[str] = Field(..., description="Rendered feedback comment lines, in order")


def _result_model(result: ValidationResult) -> ResultModel:
    return ResultModel(
        is_valid=result.is_valid,
        message=result.message,
        validator=result.validator,
        parameters=list(result.parameters),
    )


def _diagnostic_model(diagnostic: Diagnostic) -> DiagnosticModel:
    return DiagnosticModel(**diagnostic.as_dict())


# ----------------------------
# API
# ----------------------------


@router.get("/validators", response_model=List[ValidatorInfo])
def list_validators(request: Request) -> List[Dict[str, Any]]:
    return _registry_from_request(request).describe()


@router.post("/validate", response_model=ValidateResponse)
def validate_annotation(payload: ValidateRequest, request: Request) -> ValidateResponse:
    collector = CollectingReporter()
    results = parse_and_execute(
        payload.subject,
        payload.annotation,
        registry=_registry_from_request(request),
        reporter=collector,
    )

    return ValidateResponse(
        results=[_result_model(r) for r in results],
        diagnostics=[_diagnostic_model(d) for d in collector.diagnostics],
    )


@router.post("/lines", response_model=LinesResponse)
def validate_annotated_lines(payload: LinesRequest, request: Request) -> LinesResponse:
    config = _config_from_request(request)

    if len(payload.lines) > config.max_lines:
        raise HTTPException(
            status_code=413,
            detail={
                "error": "TOO_MANY_LINES",
                "message": f"At most {config.max_lines} lines may be validated per request.",
                "received": len(payload.lines),
            },
        )

    entries = validate_lines(
        payload.lines,
        marker=config.marker,
        registry=_registry_from_request(request),
    )

    feedback: List[str] = []
    for entry in entries:
        feedback.extend(render_feedback(entry.results))

    return LinesResponse(
        annotated=[
            LineFeedbackModel(
                line_number=e.line_number,
                subject=e.subject,
                annotation=e.annotation,
                results=[_result_model(r) for r in e.results],
                diagnostics=[_diagnostic_model(d) for d in e.diagnostics],
            )
            for e in entries
        ],
        feedback=feedback,
    )
