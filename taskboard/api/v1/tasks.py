"""Task endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import get_settings, get_task_store
from taskboard.config import Settings
from taskboard.schemas import MessageResponse, TaskCreate, TaskResponse, TaskUpdate
from taskboard.stores import TaskStore

router = APIRouter()


@router.get("", response_model=List[TaskResponse])
def list_tasks(store: TaskStore = Depends(get_task_store)):
    return store.list()


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskCreate,
    store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
):
    """Create a task on a board, tagged by statusId or statusName."""
    status_name = task_in.status_name
    if task_in.status_id is None and status_name is None:
        status_name = settings.DEFAULT_STATUS_NAME

    return store.create(
        title=task_in.title,
        board_id=task_in.board_id,
        description=task_in.description,
        status_id=task_in.status_id,
        status_name=status_name,
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    return store.get(task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: str, task_update: TaskUpdate, store: TaskStore = Depends(get_task_store)):
    """Update only the fields present in the body; a null status clears it."""
    return store.update(task_id, task_update.model_dump(exclude_unset=True))


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    return store.delete(task_id)
