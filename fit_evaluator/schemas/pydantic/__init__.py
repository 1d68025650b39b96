from .fit_evaluation import EvaluationPayload, EvaluationRequest, EvaluationResult, ScoreBand

__all__ = ["EvaluationPayload", "EvaluationRequest", "EvaluationResult", "ScoreBand"]
