"""Service for starting and ending the live class stream."""

from __future__ import annotations

import logging

from classroom_admin.constants.store_constants import (
    LIVE_STREAM_COLLECTION,
    LIVE_STREAM_KEY,
    PAST_CLASSES_COLLECTION,
)
from classroom_admin.core.backend.document_store import DocumentStore, DocumentView
from classroom_admin.core.clock import Clock
from classroom_admin.core.errors import InvalidLinkError, NoActiveStreamError
from classroom_admin.core.models import ArchivedClass, LiveStreamState
from classroom_admin.core.timestamps import format_date
from classroom_admin.core.youtube_links import build_embed_url, extract_video_id

logger = logging.getLogger(__name__)


class LiveSessionController:
    """Moves the singleton live-stream record between idle and live.

    Starting while already live simply overwrites the record (last writer
    wins). Ending always archives the current stream before clearing it.
    """

    def __init__(self, store: DocumentStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def get_state(self) -> LiveStreamState:
        document = self._store.get_by_key(LIVE_STREAM_COLLECTION, LIVE_STREAM_KEY)
        return LiveStreamState.from_document(document)

    def start_live(self, raw_link: str) -> LiveStreamState:
        """Publish ``raw_link`` as the current live class.

        Raises:
            InvalidLinkError: no video id could be found; nothing is written.
            PersistenceError: the backend write failed.
        """
        video_id = extract_video_id(raw_link.strip() if raw_link else "")
        if video_id is None:
            raise InvalidLinkError("Please enter a valid YouTube link.")

        state = LiveStreamState(
            url=build_embed_url(video_id),
            is_live=True,
            timestamp=self._clock.now(),
        )
        self._store.set_by_key(LIVE_STREAM_COLLECTION, LIVE_STREAM_KEY, state.to_document())
        logger.info("Live class started: %s", state.url)
        return state

    def end_live(self) -> ArchivedClass:
        """Archive the current stream to past classes, then clear it.

        Runs as one atomic operation where the store supports transactions.
        Otherwise the append happens strictly before the clear, so a failed
        append leaves the live record untouched.

        Raises:
            NoActiveStreamError: there is no record or its url is empty.
            PersistenceError: the backend failed part-way.
        """
        now = self._clock.now()

        def archive_and_clear(view: DocumentView) -> ArchivedClass:
            current = view.get_by_key(LIVE_STREAM_COLLECTION, LIVE_STREAM_KEY) or {}
            url = current.get("url")
            if not url:
                raise NoActiveStreamError("No active live stream found.")

            archived = ArchivedClass(url=str(url), title=f"Class on {format_date(now)}", date=now)
            archived.id = view.append_new(PAST_CLASSES_COLLECTION, archived.to_document())
            view.set_by_key(
                LIVE_STREAM_COLLECTION,
                LIVE_STREAM_KEY,
                LiveStreamState.idle().to_document(),
            )
            return archived

        archived = self._store.run_atomically(archive_and_clear)
        logger.info("Live class ended and archived as %s (%s)", archived.id, archived.title)
        return archived

    def list_past_classes(self) -> list[ArchivedClass]:
        return [
            ArchivedClass.from_document(doc_id, fields)
            for doc_id, fields in self._store.list_all(PAST_CLASSES_COLLECTION)
        ]
