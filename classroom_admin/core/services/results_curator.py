"""Service for curating, selecting and deleting student results."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
import logging

from classroom_admin.constants.store_constants import MAX_PARALLEL_DELETES, RESULTS_COLLECTION
from classroom_admin.core.backend.document_store import DocumentStore
from classroom_admin.core.errors import EmptySelectionError, PartialDeleteFailure
from classroom_admin.core.models import (
    BatchDeleteResult,
    DeleteOutcome,
    ResultKey,
    ResultsSession,
    StudentResult,
)

logger = logging.getLogger(__name__)


def deduplicate_results(results: Iterable[StudentResult]) -> Iterator[StudentResult]:
    """Yield the first result seen for each (name, batch, phone) identity.

    Output keeps first-seen order. Which duplicate survives therefore depends
    on the order the backend returned the records in.
    """
    seen: dict[ResultKey, StudentResult] = {}
    for result in results:
        key = result.dedup_key
        if key in seen:
            continue
        seen[key] = result
        yield result


class ResultsCurator:
    """Loads a deduplicated view over stored results and deletes in bulk."""

    def __init__(self, store: DocumentStore, max_parallel_deletes: int = MAX_PARALLEL_DELETES) -> None:
        self._store = store
        self._max_parallel_deletes = max(1, max_parallel_deletes)

    def load_results(self) -> Iterator[StudentResult]:
        """Lazily list and deduplicate the result collection.

        The returned iterator is a one-shot snapshot; call again to refresh.
        """
        raw = self._store.list_all(RESULTS_COLLECTION)
        yield from deduplicate_results(
            StudentResult.from_document(doc_id, fields) for doc_id, fields in raw
        )

    def refresh(self, session: ResultsSession) -> ResultsSession:
        """Reload the snapshot into ``session`` and reset its selection."""
        session.results = list(self.load_results())
        session.selected.clear()
        session.select_all = False
        return session

    # --- Selection (no store interaction) ---

    @staticmethod
    def toggle_select(session: ResultsSession, result_id: str) -> ResultsSession:
        loaded = session.loaded_ids()
        if result_id not in loaded:
            raise ValueError(f"Result '{result_id}' is not part of the loaded results.")
        if result_id in session.selected:
            session.selected.discard(result_id)
        else:
            session.selected.add(result_id)
        session.select_all = bool(loaded) and session.selected == set(loaded)
        return session

    @staticmethod
    def toggle_select_all(session: ResultsSession) -> ResultsSession:
        if session.select_all:
            session.selected.clear()
            session.select_all = False
        else:
            session.selected = set(session.loaded_ids())
            session.select_all = True
        return session

    # --- Deletion ---

    def delete_selected(self, ids: set[str]) -> BatchDeleteResult:
        """Delete every id concurrently, best effort, without rollback.

        Raises:
            EmptySelectionError: ``ids`` is empty; no store calls are made.
            PartialDeleteFailure: at least one delete failed. Others may
                have succeeded; re-query the store to learn the real state.
        """
        if not ids:
            raise EmptySelectionError("No results selected!")

        ordered_ids = sorted(ids)
        batch = BatchDeleteResult()
        workers = min(len(ordered_ids), self._max_parallel_deletes)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="result-delete") as executor:
            futures = {
                doc_id: executor.submit(self._store.delete_by_key, RESULTS_COLLECTION, doc_id)
                for doc_id in ordered_ids
            }
            for doc_id, future in futures.items():
                try:
                    future.result()
                except Exception as exc:  # each failure becomes that id's outcome
                    batch.outcomes[doc_id] = DeleteOutcome(ok=False, error=str(exc))
                else:
                    batch.outcomes[doc_id] = DeleteOutcome(ok=True)

        failed = batch.failed_ids()
        logger.info("Deleted %d of %d selected results", len(ordered_ids) - len(failed), len(ordered_ids))
        if failed:
            logger.warning("Failed to delete results: %s", ", ".join(failed))
            raise PartialDeleteFailure(batch)
        return batch

    def delete_session_selection(self, session: ResultsSession) -> BatchDeleteResult:
        """Delete the session's selection, then clear it whatever the outcome.

        The caller must reload afterwards; the old snapshot no longer
        describes the store.
        """
        ids = set(session.selected)
        if not ids:
            raise EmptySelectionError("No results selected!")
        try:
            return self.delete_selected(ids)
        finally:
            session.selected.clear()
            session.select_all = False
