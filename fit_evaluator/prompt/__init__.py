from .fit_evaluation import PROMPT, build_evaluation_request

__all__ = ["PROMPT", "build_evaluation_request"]
