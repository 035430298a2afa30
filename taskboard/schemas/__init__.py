"""
Pydantic schemas for request/response validation
"""
from taskboard.schemas.common import ErrorResponse, MessageResponse
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.schemas.board import BoardCreate, BoardResponse, BoardUpdate, BoardWithTasksResponse
from taskboard.schemas.status import StatusCreate, StatusResponse, StatusUpdate

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskUpdate",
    "BoardCreate",
    "BoardResponse",
    "BoardUpdate",
    "BoardWithTasksResponse",
    "StatusCreate",
    "StatusResponse",
    "StatusUpdate",
]
