"""Status endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import get_status_store
from taskboard.schemas import MessageResponse, StatusCreate, StatusResponse, StatusUpdate
from taskboard.stores import StatusStore

router = APIRouter()


@router.get("", response_model=List[StatusResponse])
def list_statuses(store: StatusStore = Depends(get_status_store)):
    return store.list()


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
def create_status(status_in: StatusCreate, store: StatusStore = Depends(get_status_store)):
    return store.create(status_in.name)


@router.put("/{status_id}", response_model=StatusResponse)
def update_status(status_id: str, status_in: StatusUpdate, store: StatusStore = Depends(get_status_store)):
    return store.update(status_id, status_in.name)


@router.delete("/{status_id}", response_model=MessageResponse)
def delete_status(status_id: str, store: StatusStore = Depends(get_status_store)):
    """Delete a status; tasks that used it are kept with no status."""
    return store.delete(status_id)
