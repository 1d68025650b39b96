from fastapi import APIRouter

from .evaluation import evaluation_router

v1_router = APIRouter()
v1_router.include_router(evaluation_router, prefix="/evaluations", tags=["Evaluations"])

__all__ = ["v1_router"]
