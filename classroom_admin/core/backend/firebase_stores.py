"""Firestore and Cloud Storage adapters built on firebase-admin."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import firebase_admin
from firebase_admin import firestore, storage

from classroom_admin.core.backend.document_store import Document, DocumentView

T = TypeVar("T")


class FirestoreDocumentStore:
    """Document store backed by a Firestore client."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._client = firestore.client(app)

    def get_by_key(self, collection: str, key: str) -> Document | None:
        snapshot = self._client.collection(collection).document(key).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def set_by_key(self, collection: str, key: str, fields: Document) -> None:
        self._client.collection(collection).document(key).set(fields)

    def append_new(self, collection: str, fields: Document) -> str:
        doc_ref = self._client.collection(collection).document()
        doc_ref.set(fields)
        return doc_ref.id

    def list_all(self, collection: str) -> list[tuple[str, Document]]:
        return [
            (snapshot.id, snapshot.to_dict() or {})
            for snapshot in self._client.collection(collection).stream()
        ]

    def delete_by_key(self, collection: str, key: str) -> None:
        self._client.collection(collection).document(key).delete()

    def run_atomically(self, operation: Callable[[DocumentView], T]) -> T:
        """Run ``operation`` inside a Firestore transaction (retried on contention)."""
        client = self._client

        @firestore.transactional
        def _run(transaction: Any) -> T:
            return operation(_FirestoreTransactionView(client, transaction))

        return _run(client.transaction())


class _FirestoreTransactionView:
    """Reads and writes bound to one Firestore transaction.

    Firestore requires all reads before the first write; writes become visible
    together at commit.
    """

    def __init__(self, client: Any, transaction: Any) -> None:
        self._client = client
        self._transaction = transaction

    def get_by_key(self, collection: str, key: str) -> Document | None:
        doc_ref = self._client.collection(collection).document(key)
        snapshot = doc_ref.get(transaction=self._transaction)
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def set_by_key(self, collection: str, key: str, fields: Document) -> None:
        self._transaction.set(self._client.collection(collection).document(key), fields)

    def append_new(self, collection: str, fields: Document) -> str:
        doc_ref = self._client.collection(collection).document()
        self._transaction.create(doc_ref, fields)
        return doc_ref.id


class FirebaseObjectStore:
    """Object store backed by the app's default Cloud Storage bucket."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._bucket = storage.bucket(app=app)

    def put_object(self, key: str, data: bytes, content_type: str | None = None) -> str:
        blob = self._bucket.blob(key)
        blob.upload_from_string(data, content_type=content_type or "application/octet-stream")
        blob.make_public()
        return key

    def public_url(self, handle: str) -> str:
        return self._bucket.blob(handle).public_url
