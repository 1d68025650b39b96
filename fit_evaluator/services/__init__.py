from .fit_evaluation_service import FitEvaluationService
from ..agent.exceptions import (
    EvaluationError,
    InvalidInput,
    ProviderError,
    TransportTimeout,
    TransportFailure,
    StrategyError,
    EmptyResponse,
    MalformedResponse,
    InvalidShape,
)

__all__ = [
    "FitEvaluationService",
    "EvaluationError",
    "InvalidInput",
    "ProviderError",
    "TransportTimeout",
    "TransportFailure",
    "StrategyError",
    "EmptyResponse",
    "MalformedResponse",
    "InvalidShape",
]
