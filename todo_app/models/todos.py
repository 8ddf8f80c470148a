# todo_app/models/todos.py

from typing import Any

from pydantic import BaseModel


# Field values are stored as sent; absent fields stay None.
class Todo(BaseModel):
    id: int
    title: Any = None
    description: Any = None
    completed: Any = None


class TodoCreate(BaseModel):
    title: Any = None
    description: Any = None
    completed: Any = None


class TodoUpdate(BaseModel):
    title: Any = None
    description: Any = None
