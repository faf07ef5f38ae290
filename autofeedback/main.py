from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from autofeedback.config import AutofeedbackConfig, load_config
from autofeedback.diagnostics import configure_logging
from autofeedback.router import router as autofeedback_router
from autofeedback.validators.registry import ValidatorRegistry, default_registry


def create_app(
    config: Optional[AutofeedbackConfig] = None,
    registry: Optional[ValidatorRegistry] = None,
) -> FastAPI:
    """
    Assemble the autofeedback service.

    Config and registry are stored on app.state so routers can read them
    per request.
    """
    cfg = config if config is not None else load_config()
    configure_logging(cfg.log_level)

    app = FastAPI(title="autofeedback")
    app.state.config = cfg
    app.state.registry = registry if registry is not None else default_registry()

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "autofeedback"}

    # ----------------------------
    # Mount routers
    # ----------------------------

    app.include_router(autofeedback_router)

    return app


app = create_app()
