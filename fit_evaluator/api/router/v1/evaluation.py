import logging
import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ....schemas.pydantic import EvaluationPayload
from ....services import FitEvaluationService

logger = logging.getLogger(__name__)

evaluation_router = APIRouter()


def get_evaluation_service(request: Request) -> FitEvaluationService:
    return request.app.state.evaluation_service


@evaluation_router.post(
    "",
    summary="Evaluate how well a resume fits a job description",
)
async def evaluate(
    request: Request,
    payload: EvaluationPayload,
    service: FitEvaluationService = Depends(get_evaluation_service),
):
    """
    Returns fitScore, analysis, strengths, missing and scoreBand.

    Failures are rendered by the EvaluationError handler registered in
    ``create_app``.
    """
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
    result = await service.evaluate(payload.resume_text, payload.job_description_text)
    return JSONResponse(
        content={
            "request_id": request_id,
            "data": result.model_dump(by_alias=True),
        }
    )
