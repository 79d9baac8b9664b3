"""Binary object store interface and the process-local implementation."""

from __future__ import annotations

from threading import Lock
from typing import Protocol


class ObjectStore(Protocol):
    """Stores question images and hands out public URLs for them."""

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> str: ...

    def public_url(self, handle: str) -> str: ...


class InMemoryObjectStore:
    """Keeps uploaded objects in memory; URLs use the ``memory://`` scheme."""

    def __init__(self) -> None:
        self._objects: dict[str, tuple[bytes, str | None]] = {}
        self._lock = Lock()

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> str:
        with self._lock:
            self._objects[key] = (bytes(data), content_type)
        return key

    def public_url(self, handle: str) -> str:
        with self._lock:
            if handle not in self._objects:
                raise KeyError(f"Unknown object '{handle}'")
        return f"memory://{handle}"

    def get_object(self, key: str) -> bytes:
        with self._lock:
            return self._objects[key][0]

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._objects)
