"""Business logic shared between the Qt console and the HTTP API."""

from __future__ import annotations

from datetime import tzinfo
from threading import Lock

from classroom_admin.core.backend.document_store import DocumentStore
from classroom_admin.core.backend.object_store import ObjectStore
from classroom_admin.core.clock import Clock, SystemClock
from classroom_admin.core.models import (
    ArchivedClass,
    BatchDeleteResult,
    LiveStreamState,
    QuestionAsset,
    ResultsSession,
    StudentResult,
)
from classroom_admin.core.report_renderer import ResultsReportRenderer
from classroom_admin.core.services.live_session import LiveSessionController
from classroom_admin.core.services.question_uploader import QuestionDraft, QuestionUploader
from classroom_admin.core.services.results_curator import ResultsCurator


class AdminManager:
    """Facade for the admin services: live session, results and question upload.

    The manager also owns the console's :class:`ResultsSession`. HTTP callers
    pass explicit ids instead and never touch that session.
    """

    def __init__(
        self,
        documents: DocumentStore,
        objects: ObjectStore,
        clock: Clock | None = None,
        report_tz: tzinfo | None = None,
    ) -> None:
        self._lock = Lock()
        clock = clock or SystemClock()

        # Services
        self._live = LiveSessionController(documents, clock)
        self._curator = ResultsCurator(documents)
        self._uploader = QuestionUploader(documents, objects, clock)
        self._renderer = ResultsReportRenderer(tz=report_tz)

        self._session = ResultsSession()

    # --- Live Session Delegation ---

    def start_live(self, raw_link: str) -> LiveStreamState:
        return self._live.start_live(raw_link)

    def end_live(self) -> ArchivedClass:
        return self._live.end_live()

    def get_live_state(self) -> LiveStreamState:
        return self._live.get_state()

    def get_past_classes(self) -> list[ArchivedClass]:
        return self._live.list_past_classes()

    # --- Results Session (console) ---

    def refresh_results(self) -> list[StudentResult]:
        with self._lock:
            self._curator.refresh(self._session)
            return list(self._session.results)

    def get_loaded_results(self) -> list[StudentResult]:
        with self._lock:
            return list(self._session.results)

    def toggle_result(self, result_id: str) -> None:
        with self._lock:
            self._curator.toggle_select(self._session, result_id)

    def toggle_all_results(self) -> bool:
        """Flip the select-all flag and return its new value."""
        with self._lock:
            self._curator.toggle_select_all(self._session)
            return self._session.select_all

    def get_selected_ids(self) -> set[str]:
        with self._lock:
            return set(self._session.selected)

    def is_all_selected(self) -> bool:
        with self._lock:
            return self._session.select_all

    def delete_selected_results(self) -> BatchDeleteResult:
        """Delete the console selection; the caller should refresh afterwards."""
        with self._lock:
            return self._curator.delete_session_selection(self._session)

    def build_loaded_report(self) -> str:
        with self._lock:
            results = list(self._session.results)
        return self._renderer.render_document(results)

    # --- Results (stateless, used by the API) ---

    def list_results(self) -> list[StudentResult]:
        return list(self._curator.load_results())

    def delete_results(self, ids: set[str]) -> BatchDeleteResult:
        return self._curator.delete_selected(ids)

    def build_report(self) -> str:
        return self._renderer.render_document(self._curator.load_results())

    # --- Question Upload ---

    def set_test_timer(self, hours: int, minutes: int, seconds: int) -> int:
        return self._uploader.set_test_timer(hours, minutes, seconds)

    def get_test_timer(self) -> int | None:
        return self._uploader.get_test_timer()

    def upload_questions(self, drafts: list[QuestionDraft]) -> list[QuestionAsset]:
        return self._uploader.upload_all(drafts)
