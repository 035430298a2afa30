import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError

from taskboard.errors import ConflictError, NotFoundError, TaskboardError
from taskboard.models import Status, Task
from taskboard.stores.base import BaseStore, clean_text, parse_id

logger = logging.getLogger(__name__)


class StatusStore(BaseStore):
    """Workflow statuses. Deleting one unlinks its tasks instead of removing them."""

    def integrity_error(self, exc: IntegrityError) -> TaskboardError:
        return ConflictError("Status name already exists")

    def list(self) -> List[Status]:
        with self.reading():
            return self.db.query(Status).order_by(Status.created_at.asc(), Status.id.asc()).all()

    def create(self, name: Any) -> Status:
        trimmed = clean_text(name, "Status name is required")

        with self.transaction():
            if self.db.query(Status).filter(Status.name == trimmed).first():
                raise ConflictError("Status name already exists")
            status = Status(name=trimmed)
            self.db.add(status)

        self.db.refresh(status)
        logger.info("Created status %s (%r)", status.id, status.name)
        return status

    def update(self, status_id: Any, name: Any) -> Status:
        parsed_id = parse_id(status_id, "Invalid status id")
        trimmed = clean_text(name, "Status name is required")

        with self.transaction():
            status = self._get(parsed_id)
            conflict = (
                self.db.query(Status)
                .filter(Status.name == trimmed, Status.id != parsed_id)
                .first()
            )
            if conflict:
                raise ConflictError("Another status with this name already exists")
            status.name = trimmed

        self.db.refresh(status)
        logger.info("Renamed status %s to %r", status.id, status.name)
        return status

    def delete(self, status_id: Any) -> Dict[str, str]:
        parsed_id = parse_id(status_id, "Invalid status id")

        with self.transaction():
            status = self._get(parsed_id)
            unlinked = (
                self.db.query(Task)
                .filter(Task.status_id == parsed_id)
                .update({Task.status_id: None})
            )
            self.db.delete(status)

        logger.info("Deleted status %s, unlinked %d task(s)", parsed_id, unlinked)
        return {"message": "Status deleted and tasks unlinked"}

    def _get(self, status_id: int) -> Status:
        status = self.db.query(Status).filter(Status.id == status_id).first()
        if not status:
            raise NotFoundError("Status not found")
        return status
