# todo_app/db/store.py

import logging
import threading
from typing import Any, List, Optional

from fastapi import Request

from todo_app.models.todos import Todo

logger = logging.getLogger(__name__)


class NotFound(Exception):
    """Raised when an id-keyed operation targets a todo that is not stored."""

    def __init__(self, todo_id: Optional[int]):
        super().__init__(f"Todo {todo_id!r} not found")
        self.todo_id = todo_id


class TodoStore:
    """
    In-memory, insertion-ordered collection of todos.

    Every operation runs under one lock, so a create/update/delete is never
    observed half-applied by a concurrent request.
    """

    def __init__(self):
        self._todos: List[Todo] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def __contains__(self, todo_id) -> bool:
        with self._lock:
            return self._find_index(todo_id) != -1

    def _find_index(self, todo_id) -> int:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        return -1

    def _index_or_raise(self, todo_id) -> int:
        index = self._find_index(todo_id)
        if index == -1:
            logger.debug("Todo %s not found", todo_id)
            raise NotFound(todo_id)
        return index

    def list(self) -> List[Todo]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def get(self, todo_id: int) -> Todo:
        with self._lock:
            return self._todos[self._index_or_raise(todo_id)].model_copy()

    def create(
        self,
        title: Any = None,
        description: Any = None,
        completed: Any = None,
    ) -> Todo:
        with self._lock:
            todo = Todo(
                id=self._next_id,
                title=title,
                description=description,
                completed=completed,
            )
            # ids are never reused, even after a delete
            self._next_id += 1
            self._todos.append(todo)
            created = todo.model_copy()

        logger.info("Created todo %s", created.id)
        return created

    def update(
        self,
        todo_id: int,
        title: Any = None,
        description: Any = None,
    ) -> Todo:
        """
        Overwrite title and description of an existing todo.

        Absent values clear the field; id and completed are left as they are.
        """
        with self._lock:
            todo = self._todos[self._index_or_raise(todo_id)]
            todo.title = title
            todo.description = description
            updated = todo.model_copy()

        logger.info("Updated todo %s", todo_id)
        return updated

    def delete(self, todo_id: int) -> None:
        with self._lock:
            del self._todos[self._index_or_raise(todo_id)]

        logger.info("Deleted todo %s", todo_id)


def get_store(request: Request) -> TodoStore:
    return request.app.state.store
