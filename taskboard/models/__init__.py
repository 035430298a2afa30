"""Taskboard Database Models"""
from taskboard.models.board import Board
from taskboard.models.status import Status
from taskboard.models.task import Task

__all__ = [
    "Board",
    "Status",
    "Task",
]
