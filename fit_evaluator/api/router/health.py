import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...agent.exceptions import ProviderError

logger = logging.getLogger(__name__)

health_check = APIRouter()


@health_check.get("/health", tags=["Health"])
async def ping(request: Request):
    """
    Report whether the evaluation provider can serve requests.
    """
    service = request.app.state.evaluation_service
    try:
        await service.provider.healthcheck()
    except ProviderError as e:
        logger.warning(f"Provider healthcheck failed: {e}")
        return JSONResponse(status_code=503, content={"status": "unavailable", "detail": e.to_dict()})
    return {"status": "ok"}
