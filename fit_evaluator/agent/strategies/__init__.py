from .wrapper import JSONWrapper, strip_code_fences

__all__ = ["JSONWrapper", "strip_code_fences"]
