"""Schemas for statuses"""
from datetime import datetime

from taskboard.schemas.common import CamelModel


class StatusCreate(CamelModel):
    name: str


class StatusUpdate(CamelModel):
    name: str


class StatusResponse(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
