"""Selection of the store implementations used by the running app."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from classroom_admin.constants.store_constants import DEFAULT_STORE_TIMEOUT_SECONDS
from classroom_admin.core.backend.bounded import BoundedDocumentStore, BoundedObjectStore
from classroom_admin.core.backend.document_store import InMemoryDocumentStore
from classroom_admin.core.backend.firebase_app import get_firebase_app, has_firebase_credentials
from classroom_admin.core.backend.firebase_stores import FirebaseObjectStore, FirestoreDocumentStore
from classroom_admin.core.backend.object_store import InMemoryObjectStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Backend:
    documents: BoundedDocumentStore
    objects: BoundedObjectStore
    description: str

    def set_timeout(self, timeout_seconds: float) -> None:
        self.documents.set_timeout(timeout_seconds)
        self.objects.set_timeout(timeout_seconds)

    def shutdown(self) -> None:
        self.documents.shutdown()
        self.objects.shutdown()


def build_backend(timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS) -> Backend:
    """Use Firebase when credentials are configured, otherwise in-memory stores."""
    if has_firebase_credentials():
        app = get_firebase_app()
        return Backend(
            documents=BoundedDocumentStore(FirestoreDocumentStore(app), timeout_seconds),
            objects=BoundedObjectStore(FirebaseObjectStore(app), timeout_seconds),
            description=f"Firebase project {app.project_id}",
        )

    logger.warning("No Firebase credentials configured; running with in-memory demo stores.")
    return Backend(
        documents=BoundedDocumentStore(InMemoryDocumentStore(), timeout_seconds),
        objects=BoundedObjectStore(InMemoryObjectStore(), timeout_seconds),
        description="Offline demo (in-memory)",
    )
