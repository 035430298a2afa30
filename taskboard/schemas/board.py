"""Schemas for boards"""
from datetime import datetime
from typing import List

from taskboard.schemas.common import CamelModel
from taskboard.schemas.task import TaskResponse


class BoardCreate(CamelModel):
    name: str


class BoardUpdate(CamelModel):
    name: str


class BoardResponse(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class BoardWithTasksResponse(BoardResponse):
    tasks: List[TaskResponse] = []
