"""Stores: the referential rules for boards, statuses and tasks."""
from taskboard.stores.board_store import BoardStore
from taskboard.stores.status_store import StatusStore
from taskboard.stores.task_store import TaskStore

__all__ = [
    "BoardStore",
    "StatusStore",
    "TaskStore",
]
