"""Timeout and error normalization around any store implementation.

Every call is executed on a worker thread and awaited for at most
``timeout_seconds``. A timeout or any exception raised by the backend client
is surfaced as :class:`PersistenceError`, so services only ever see the
admin error taxonomy. Admin errors raised by an atomic operation pass
through unchanged. A timed-out call is abandoned, not cancelled: the
backend may still apply it later.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
import logging
from typing import TypeVar

from classroom_admin.constants.store_constants import DEFAULT_STORE_TIMEOUT_SECONDS
from classroom_admin.core.backend.document_store import Document, DocumentStore, DocumentView
from classroom_admin.core.backend.object_store import ObjectStore
from classroom_admin.core.errors import AdminError, PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _BoundedCaller:
    def __init__(self, timeout_seconds: float, max_workers: int, thread_name_prefix: str) -> None:
        if timeout_seconds <= 0:
            raise ValueError("Store timeout must be a positive number of seconds.")
        self.timeout_seconds = timeout_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix,
        )

    def call(self, description: str, operation: Callable[..., T], *args: object) -> T:
        future = self._executor.submit(operation, *args)
        try:
            return future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError as exc:
            logger.warning("%s timed out after %.1fs", description, self.timeout_seconds)
            raise PersistenceError(
                f"{description} timed out after {self.timeout_seconds:g} seconds."
            ) from exc
        except AdminError:
            raise
        except Exception as exc:
            logger.warning("%s failed: %s", description, exc)
            raise PersistenceError(f"{description} failed: {exc}") from exc

    def set_timeout(self, timeout_seconds: float) -> None:
        if timeout_seconds <= 0:
            raise ValueError("Store timeout must be a positive number of seconds.")
        self.timeout_seconds = timeout_seconds

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)


class BoundedDocumentStore:
    """Wraps a :class:`DocumentStore` with per-call timeouts."""

    def __init__(
        self,
        inner: DocumentStore,
        timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        max_workers: int = 16,
    ) -> None:
        self._inner = inner
        self._caller = _BoundedCaller(timeout_seconds, max_workers, "document-store")

    @property
    def timeout_seconds(self) -> float:
        return self._caller.timeout_seconds

    def set_timeout(self, timeout_seconds: float) -> None:
        self._caller.set_timeout(timeout_seconds)

    def get_by_key(self, collection: str, key: str) -> Document | None:
        return self._caller.call(f"Reading {collection}/{key}", self._inner.get_by_key, collection, key)

    def set_by_key(self, collection: str, key: str, fields: Document) -> None:
        self._caller.call(f"Writing {collection}/{key}", self._inner.set_by_key, collection, key, fields)

    def append_new(self, collection: str, fields: Document) -> str:
        return self._caller.call(f"Adding to {collection}", self._inner.append_new, collection, fields)

    def list_all(self, collection: str) -> list[tuple[str, Document]]:
        return self._caller.call(f"Listing {collection}", self._inner.list_all, collection)

    def delete_by_key(self, collection: str, key: str) -> None:
        self._caller.call(f"Deleting {collection}/{key}", self._inner.delete_by_key, collection, key)

    def run_atomically(self, operation: Callable[[DocumentView], T]) -> T:
        # The timeout covers the whole operation, including its inner calls.
        return self._caller.call("Atomic operation", self._inner.run_atomically, operation)

    def shutdown(self) -> None:
        self._caller.shutdown()


class BoundedObjectStore:
    """Wraps an :class:`ObjectStore` with per-call timeouts."""

    def __init__(
        self,
        inner: ObjectStore,
        timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        max_workers: int = 4,
    ) -> None:
        self._inner = inner
        self._caller = _BoundedCaller(timeout_seconds, max_workers, "object-store")

    @property
    def timeout_seconds(self) -> float:
        return self._caller.timeout_seconds

    def set_timeout(self, timeout_seconds: float) -> None:
        self._caller.set_timeout(timeout_seconds)

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> str:
        return self._caller.call(f"Uploading {key}", self._inner.put_object, key, data, content_type)

    def public_url(self, handle: str) -> str:
        return self._caller.call(f"Resolving URL for {handle}", self._inner.public_url, handle)

    def shutdown(self) -> None:
        self._caller.shutdown()
