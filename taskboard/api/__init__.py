"""HTTP routers"""
from fastapi import APIRouter

from taskboard.api.v1 import boards, statuses, tasks

api_router = APIRouter()
api_router.include_router(boards.router, prefix="/boards", tags=["boards"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(statuses.router, prefix="/statuses", tags=["statuses"])

__all__ = ["api_router"]
