import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from taskboard.errors import ConflictError, NotFoundError, TaskboardError
from taskboard.models import Board
from taskboard.stores.base import BaseStore, clean_text, parse_id

logger = logging.getLogger(__name__)


class BoardStore(BaseStore):
    """Boards and the tasks they own. Deleting a board deletes its tasks."""

    def integrity_error(self, exc: IntegrityError) -> TaskboardError:
        return ConflictError("Board name already exists")

    def _query_with_tasks(self):
        # One joined SELECT instead of a task lookup per board
        return self.db.query(Board).options(joinedload(Board.tasks))

    def list(self) -> List[Board]:
        """Return every board, newest first, with its tasks attached."""
        with self.reading():
            return (
                self._query_with_tasks()
                .order_by(Board.created_at.desc(), Board.id.desc())
                .all()
            )

    def get(self, board_id: Any) -> Board:
        parsed_id = parse_id(board_id, "Invalid board id")
        with self.reading():
            board = self._query_with_tasks().filter(Board.id == parsed_id).first()
        if not board:
            raise NotFoundError("Board not found")
        return board

    def create(self, name: Any) -> Board:
        trimmed = clean_text(name, "Board name is required")

        with self.transaction():
            if self.db.query(Board).filter(Board.name == trimmed).first():
                raise ConflictError("Board name already exists")
            board = Board(name=trimmed)
            self.db.add(board)

        self.db.refresh(board)
        logger.info("Created board %s (%r)", board.id, board.name)
        return board

    def update(self, board_id: Any, name: Any) -> Board:
        parsed_id = parse_id(board_id, "Invalid board id")
        trimmed = clean_text(name, "Board name is required")

        with self.transaction():
            board = self._get(parsed_id)
            conflict = (
                self.db.query(Board)
                .filter(Board.name == trimmed, Board.id != parsed_id)
                .first()
            )
            if conflict:
                raise ConflictError("Another board with this name already exists")
            board.name = trimmed

        self.db.refresh(board)
        logger.info("Renamed board %s to %r", board.id, board.name)
        return board

    def delete(self, board_id: Any) -> Dict[str, str]:
        parsed_id = parse_id(board_id, "Invalid board id")

        with self.transaction():
            board = self._get(parsed_id)
            removed = len(board.tasks)
            # Owned tasks are deleted first, then the board, in this one flush
            self.db.delete(board)

        logger.info("Deleted board %s and %d task(s)", parsed_id, removed)
        return {"message": "Board and its tasks deleted successfully"}

    def _get(self, board_id: int) -> Board:
        board = self.db.query(Board).filter(Board.id == board_id).first()
        if not board:
            raise NotFoundError("Board not found")
        return board
