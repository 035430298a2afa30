import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError

from taskboard.errors import NotFoundError, TaskboardError, ValidationError
from taskboard.models import Board, Status, Task
from taskboard.stores.base import BaseStore, clean_description, clean_text, parse_id

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "board_id", "status_id", "status_name")


class TaskStore(BaseStore):
    """Tasks. Every task belongs to one board and may carry one status.

    Board and status references are checked inside the same transaction as the
    write, so a task is never stored pointing at a missing row.
    """

    def integrity_error(self, exc: IntegrityError) -> TaskboardError:
        # A referenced board or status vanished between the check and the write
        return NotFoundError("Referenced board or status not found")

    def list(self) -> List[Task]:
        with self.reading():
            return self.db.query(Task).order_by(Task.created_at.asc(), Task.id.asc()).all()

    def get(self, task_id: Any) -> Task:
        parsed_id = parse_id(task_id, "Invalid task id")
        with self.reading():
            return self._get(parsed_id)

    def resolve_status(self, status_id: Any = None, status_name: Any = None) -> Status:
        """Find the status a request refers to.

        ``status_id`` wins when both are given. A name is matched exactly after
        trimming. Supplying neither is a ``NotFoundError``.
        """
        if status_id is not None:
            parsed = parse_id(status_id, "statusId must be a valid integer")
            status = self.db.query(Status).filter(Status.id == parsed).first()
        elif status_name is not None:
            name = clean_text(status_name, "statusName must be a non-empty string")
            status = self.db.query(Status).filter(Status.name == name).first()
        else:
            status = None

        if not status:
            raise NotFoundError("Status not found")
        return status

    def create(
        self,
        title: Any,
        board_id: Any,
        description: Any = None,
        status_id: Any = None,
        status_name: Any = None,
    ) -> Task:
        clean_title = clean_text(title, "Task title is required")
        parsed_board_id = parse_id(board_id, "Valid boardId is required")

        with self.transaction():
            self._require_board(parsed_board_id)
            status = self.resolve_status(status_id, status_name)
            task = Task(
                title=clean_title,
                description=clean_description(description) or None,
                board_id=parsed_board_id,
                status_id=status.id,
            )
            self.db.add(task)

        self.db.refresh(task)
        logger.info("Created task %s on board %s", task.id, task.board_id)
        return task

    def update(self, task_id: Any, fields: Mapping[str, Any]) -> Task:
        """Apply a partial update; keys absent from ``fields`` are left alone.

        All fields are validated before any of them is written, so a rejected
        update leaves the task untouched.
        """
        parsed_id = parse_id(task_id, "Invalid task id")
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown task field(s): {', '.join(sorted(unknown))}")

        with self.transaction():
            task = self._get(parsed_id)
            changes: Dict[str, Any] = {}

            if "title" in fields:
                changes["title"] = clean_text(
                    fields["title"], "Task title, if provided, must be a non-empty string"
                )

            if "description" in fields:
                changes["description"] = clean_description(fields["description"])

            if "board_id" in fields:
                board_id = parse_id(fields["board_id"], "boardId must be a valid integer")
                self._require_board(board_id)
                changes["board_id"] = board_id

            if "status_id" in fields or "status_name" in fields:
                changes["status_id"] = self._status_change(fields)

            for field, value in changes.items():
                setattr(task, field, value)

        self.db.refresh(task)
        logger.info("Updated task %s (%s)", task.id, ", ".join(sorted(changes)) or "no changes")
        return task

    def delete(self, task_id: Any) -> Dict[str, str]:
        parsed_id = parse_id(task_id, "Invalid task id")

        with self.transaction():
            task = self._get(parsed_id)
            self.db.delete(task)

        logger.info("Deleted task %s", parsed_id)
        return {"message": "Task deleted successfully"}

    def _status_change(self, fields: Mapping[str, Any]) -> Optional[int]:
        # An explicit null on either key disconnects the status
        if ("status_id" in fields and fields["status_id"] is None) or (
            "status_name" in fields and fields["status_name"] is None
        ):
            return None
        return self.resolve_status(fields.get("status_id"), fields.get("status_name")).id

    def _require_board(self, board_id: int) -> Board:
        board = self.db.query(Board).filter(Board.id == board_id).first()
        if not board:
            raise NotFoundError("Board not found")
        return board

    def _get(self, task_id: int) -> Task:
        task = self.db.query(Task).filter(Task.id == task_id).first()
        if not task:
            raise NotFoundError("Task not found")
        return task
