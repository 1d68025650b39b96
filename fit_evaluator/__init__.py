from .base import create_app
from .schemas.pydantic import EvaluationResult
from .services import EvaluationError, FitEvaluationService

__all__ = ["create_app", "EvaluationResult", "EvaluationError", "FitEvaluationService"]
