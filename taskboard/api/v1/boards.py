"""Board endpoints"""
from typing import List

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import get_board_store
from taskboard.schemas import (
    BoardCreate,
    BoardResponse,
    BoardUpdate,
    BoardWithTasksResponse,
    MessageResponse,
)
from taskboard.stores import BoardStore

router = APIRouter()


@router.get("", response_model=List[BoardWithTasksResponse])
def list_boards(store: BoardStore = Depends(get_board_store)):
    """List all boards, newest first, each with its tasks."""
    return store.list()


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(board_in: BoardCreate, store: BoardStore = Depends(get_board_store)):
    return store.create(board_in.name)


@router.get("/{board_id}", response_model=BoardWithTasksResponse)
def get_board(board_id: str, store: BoardStore = Depends(get_board_store)):
    return store.get(board_id)


@router.put("/{board_id}", response_model=BoardResponse)
def update_board(board_id: str, board_in: BoardUpdate, store: BoardStore = Depends(get_board_store)):
    return store.update(board_id, board_in.name)


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(board_id: str, store: BoardStore = Depends(get_board_store)):
    """Delete a board together with all of its tasks."""
    return store.delete(board_id)
