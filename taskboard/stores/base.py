"""Shared plumbing for the stores: input parsing and transaction handling."""
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.errors import StorageError, TaskboardError, ValidationError

logger = logging.getLogger(__name__)

# Largest value a BIGINT primary key column can hold
MAX_ID = 2**63 - 1


def parse_id(value: Any, message: str) -> int:
    """Return ``value`` as a positive integer or raise ``ValidationError(message)``."""
    if isinstance(value, bool):
        raise ValidationError(message)

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            raise ValidationError(message) from None
    else:
        raise ValidationError(message)

    if parsed <= 0 or parsed > MAX_ID:
        raise ValidationError(message)
    return parsed


def clean_text(value: Any, message: str) -> str:
    """Return ``value`` trimmed, rejecting anything but a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def clean_description(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip()


class BaseStore:
    """A store works on one session; each mutation is a single transaction."""

    def __init__(self, db: Session):
        self.db = db

    def integrity_error(self, exc: IntegrityError) -> TaskboardError:
        return StorageError(str(exc.orig))

    @contextmanager
    def reading(self) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Storage read failed: %s", exc)
            raise StorageError(str(getattr(exc, "orig", None) or exc)) from exc

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on success; roll back everything on any failure."""
        try:
            yield
            self.db.commit()
        except TaskboardError:
            self.db.rollback()
            raise
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Integrity violation: %s", exc.orig)
            raise self.integrity_error(exc) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Storage write failed: %s", exc)
            raise StorageError(str(getattr(exc, "orig", None) or exc)) from exc
        except Exception:
            self.db.rollback()
            raise
