from .router import health_check, v1_router
from .middleware import RequestIDMiddleware
from .errors import evaluation_error_handler, request_validation_error_handler

__all__ = ["health_check", "v1_router", "RequestIDMiddleware", "evaluation_error_handler", "request_validation_error_handler"]
