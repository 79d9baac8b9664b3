"""Shared fixtures: fixed clock, in-memory stores and store test doubles."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.backend.document_store import Document, DocumentView, InMemoryDocumentStore
from classroom_admin.core.backend.object_store import InMemoryObjectStore
from classroom_admin.core.errors import PersistenceError

FIXED_NOW = datetime(2024, 3, 5, 14, 30, 15, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current


class RecordingDocumentStore(InMemoryDocumentStore):
    """In-memory store that logs every call and can fail chosen operations."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, ...]] = []
        self.fail_operations: set[str] = set()
        self.fail_keys: set[str] = set()

    def _check(self, operation: str, *args: str) -> None:
        self.calls.append((operation, *args))
        if operation in self.fail_operations or (args and args[-1] in self.fail_keys):
            raise PersistenceError(f"{operation} failed")

    def get_by_key(self, collection: str, key: str) -> Document | None:
        self._check("get", collection, key)
        return super().get_by_key(collection, key)

    def set_by_key(self, collection: str, key: str, fields: Document) -> None:
        self._check("set", collection, key)
        super().set_by_key(collection, key, fields)

    def append_new(self, collection: str, fields: Document) -> str:
        self._check("append", collection)
        return super().append_new(collection, fields)

    def list_all(self, collection: str) -> list[tuple[str, Document]]:
        self._check("list", collection)
        return super().list_all(collection)

    def delete_by_key(self, collection: str, key: str) -> None:
        self._check("delete", collection, key)
        super().delete_by_key(collection, key)

    def run_atomically(self, operation: Callable[[DocumentView], object]) -> object:
        # No real transaction: steps apply one by one, like a store without one.
        return operation(self)

    def writes(self) -> list[tuple[str, ...]]:
        return [call for call in self.calls if call[0] in {"set", "append", "delete"}]

    def seed(self, collection: str, key: str, fields: Document) -> None:
        super().set_by_key(collection, key, fields)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store() -> RecordingDocumentStore:
    return RecordingDocumentStore()


@pytest.fixture
def objects() -> InMemoryObjectStore:
    return InMemoryObjectStore()


@pytest.fixture
def manager(store: RecordingDocumentStore, objects: InMemoryObjectStore, clock: FixedClock) -> AdminManager:
    return AdminManager(store, objects, clock=clock, report_tz=timezone.utc)
