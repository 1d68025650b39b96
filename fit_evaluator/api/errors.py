import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..agent.exceptions import EvaluationError, InvalidInput

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "InvalidInput": 422,
    "TransportTimeout": 504,
    "TransportFailure": 502,
    "EmptyResponse": 502,
    "MalformedResponse": 502,
    "InvalidShape": 502,
}


async def evaluation_error_handler(request: Request, exc: EvaluationError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.kind}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={
            "request_id": getattr(request.state, "request_id", None),
            "detail": exc.to_dict(),
        },
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Render malformed request bodies (missing or non-string fields) as InvalidInput.
    """
    errors = exc.errors()
    loc = [part for part in errors[0]["loc"] if isinstance(part, str)] if errors else []
    error = InvalidInput(loc[-1] if loc else "body")
    return await evaluation_error_handler(request, error)
