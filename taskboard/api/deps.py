"""FastAPI dependencies handing each request its stores"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from taskboard.config import Settings
from taskboard.database import get_db
from taskboard.stores import BoardStore, StatusStore, TaskStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_board_store(db: Session = Depends(get_db)) -> BoardStore:
    return BoardStore(db)


def get_status_store(db: Session = Depends(get_db)) -> StatusStore:
    return StatusStore(db)


def get_task_store(db: Session = Depends(get_db)) -> TaskStore:
    return TaskStore(db)
