from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# ----------------------------
# Environment & configuration
# ----------------------------

DEFAULT_MARKER = "!robota"
DEFAULT_MAX_LINES = 2000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AutofeedbackConfig:
    marker: str = DEFAULT_MARKER          # separates a line's subject from its annotation
    max_lines: int = DEFAULT_MAX_LINES    # per POST /autofeedback/lines request
    log_level: str = DEFAULT_LOG_LEVEL
    api_key: Optional[str] = None         # unset = open access


def _parse_positive_int(raw: Optional[str], default: int) -> int:
    raw = (raw or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_config(environ: Optional[Mapping[str, str]] = None) -> AutofeedbackConfig:
    """
    Build the configuration from environment variables.

    Blank or invalid values fall back to defaults.
    """
    env = os.environ if environ is None else environ

    marker = (env.get("AUTOFEEDBACK_MARKER") or "").strip() or DEFAULT_MARKER
    log_level = (env.get("AUTOFEEDBACK_LOG_LEVEL") or "").strip() or DEFAULT_LOG_LEVEL
    api_key = (env.get("AUTOFEEDBACK_API_KEY") or "").strip() or None

    return AutofeedbackConfig(
        marker=marker,
        max_lines=_parse_positive_int(env.get("AUTOFEEDBACK_MAX_LINES"), DEFAULT_MAX_LINES),
        log_level=log_level,
        api_key=api_key,
    )
