"""Schemas for tasks"""
from datetime import datetime
from typing import Optional

from taskboard.schemas.common import CamelModel


class TaskCreate(CamelModel):
    title: str
    description: Optional[str] = None
    board_id: int
    # Either statusId or statusName; statusId wins when both are sent
    status_id: Optional[int] = None
    status_name: Optional[str] = None


class TaskUpdate(CamelModel):
    """Partial update: only fields present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    board_id: Optional[int] = None
    status_id: Optional[int] = None
    status_name: Optional[str] = None


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str]
    board_id: int
    status_id: Optional[int]
    created_at: datetime
    updated_at: datetime
