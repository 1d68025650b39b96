import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .agent.exceptions import EvaluationError
from .api import (
    RequestIDMiddleware,
    evaluation_error_handler,
    health_check,
    request_validation_error_handler,
    v1_router,
)
from .core import Settings, get_settings, setup_logging
from .services import FitEvaluationService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[FitEvaluationService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    ``service`` replaces the Ollama-backed service built from settings,
    which is how tests plug in a stub provider.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings
    app.state.evaluation_service = service or FitEvaluationService.from_settings(settings)
    logger.info(
        f"Evaluation service ready: model={settings.LL_MODEL}, base_url={settings.LLM_BASE_URL}, "
        f"timeout={settings.LLM_TIMEOUT_SECONDS}s, retry_budget={settings.LLM_RETRY_BUDGET}"
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(EvaluationError, evaluation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(health_check, prefix="/api/v1")
    app.include_router(v1_router, prefix="/api/v1")

    return app
