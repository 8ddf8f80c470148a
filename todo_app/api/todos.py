# todo_app/api/todos.py

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from todo_app.db.store import NotFound, TodoStore, get_store
from todo_app.models.todos import Todo, TodoCreate, TodoUpdate

router = APIRouter(prefix="/todos", tags=["todos"])


def _parse_id(raw: str) -> Optional[int]:
    # ASCII digits only; int() alone would accept "1_0" and non-ASCII digits.
    if re.fullmatch(r"[+-]?[0-9]+", raw) is None:
        return None
    return int(raw)


def _todo_id_or_404(raw: str) -> int:
    # Non-numeric ids can never match a stored todo.
    todo_id = _parse_id(raw)
    if todo_id is None:
        raise NotFound(None)
    return todo_id


@router.get("", response_model=List[Todo], response_model_exclude_none=True)
def list_todos(store: TodoStore = Depends(get_store)) -> List[Todo]:
    """
    Return every todo in insertion order.
    """
    return store.list()


@router.get("/{todo_id}", response_model=Todo, response_model_exclude_none=True)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> Todo:
    return store.get(_todo_id_or_404(todo_id))


@router.post(
    "",
    response_model=Todo,
    response_model_exclude_none=True,
    status_code=201,
)
def create_todo(
    payload: Optional[TodoCreate] = None,
    store: TodoStore = Depends(get_store),
) -> Todo:
    """
    Create a todo and return it, including its server-assigned id.

    A request without a body creates a todo with every field absent.
    """
    if payload is None:
        payload = TodoCreate()
    return store.create(
        title=payload.title,
        description=payload.description,
        completed=payload.completed,
    )


@router.put("/{todo_id}", response_model=Todo, response_model_exclude_none=True)
def update_todo(
    todo_id: str,
    payload: Optional[TodoUpdate] = None,
    store: TodoStore = Depends(get_store),
) -> Todo:
    """
    Replace title and description; completed is left untouched.
    """
    if payload is None:
        payload = TodoUpdate()
    return store.update(
        _todo_id_or_404(todo_id),
        title=payload.title,
        description=payload.description,
    )


@router.delete("/{todo_id}")
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> Response:
    store.delete(_todo_id_or_404(todo_id))
    return Response(status_code=200, media_type="application/json")
