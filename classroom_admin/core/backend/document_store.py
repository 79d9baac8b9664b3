"""Document store interface and the process-local implementation.

Architecture note:
    Services only talk to the :class:`DocumentStore` protocol. The Firestore
    adapter is used in production, while :class:`InMemoryDocumentStore` backs
    the test suite and the offline demo mode. Writes are whole-document
    overwrites; no partial-field update semantics are relied on anywhere.
"""

from __future__ import annotations

from collections.abc import Callable
import copy
from threading import RLock
from typing import Any, Protocol, TypeVar
from uuid import uuid4

Document = dict[str, Any]
T = TypeVar("T")


class DocumentView(Protocol):
    """The subset of store operations usable inside an atomic operation."""

    def get_by_key(self, collection: str, key: str) -> Document | None: ...

    def set_by_key(self, collection: str, key: str, fields: Document) -> None: ...

    def append_new(self, collection: str, fields: Document) -> str: ...


class DocumentStore(DocumentView, Protocol):
    """Key/collection document store consumed by the admin services."""

    def list_all(self, collection: str) -> list[tuple[str, Document]]: ...

    def delete_by_key(self, collection: str, key: str) -> None: ...

    def run_atomically(self, operation: Callable[[DocumentView], T]) -> T: ...


class InMemoryDocumentStore:
    """Thread-safe, insertion-ordered store kept in process memory."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}
        self._lock = RLock()

    def get_by_key(self, collection: str, key: str) -> Document | None:
        with self._lock:
            document = self._collections.get(collection, {}).get(key)
            return copy.deepcopy(document) if document is not None else None

    def set_by_key(self, collection: str, key: str, fields: Document) -> None:
        with self._lock:
            self._collections.setdefault(collection, {})[key] = copy.deepcopy(fields)

    def append_new(self, collection: str, fields: Document) -> str:
        doc_id = uuid4().hex
        with self._lock:
            self._collections.setdefault(collection, {})[doc_id] = copy.deepcopy(fields)
        return doc_id

    def list_all(self, collection: str) -> list[tuple[str, Document]]:
        with self._lock:
            return [
                (doc_id, copy.deepcopy(fields))
                for doc_id, fields in self._collections.get(collection, {}).items()
            ]

    def delete_by_key(self, collection: str, key: str) -> None:
        with self._lock:
            self._collections.get(collection, {}).pop(key, None)

    def run_atomically(self, operation: Callable[[DocumentView], T]) -> T:
        # The lock is re-entrant, so the operation can use this store as its view.
        with self._lock:
            return operation(self)
