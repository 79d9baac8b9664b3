"""Service for publishing question images with their answer keys and the test timer."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import mimetypes
from pathlib import Path
from uuid import uuid4

from classroom_admin.constants.quiz_constants import (
    DEFAULT_CORRECT_OPTION,
    MARKS_PER_QUESTION,
    OPTION_LABELS,
)
from classroom_admin.constants.store_constants import (
    QUESTION_OBJECT_PREFIX,
    QUESTIONS_COLLECTION,
    SETTINGS_COLLECTION,
    TIMER_KEY,
)
from classroom_admin.core.backend.document_store import DocumentStore
from classroom_admin.core.backend.object_store import ObjectStore
from classroom_admin.core.clock import Clock
from classroom_admin.core.errors import (
    AdminError,
    InvalidTimerError,
    NothingToUploadError,
    UploadInterruptedError,
)
from classroom_admin.core.models import QuestionAsset

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class QuestionDraft:
    """A picked question image awaiting upload."""

    filename: str
    data: bytes
    correct_option: str = DEFAULT_CORRECT_OPTION

    def __post_init__(self) -> None:
        self.correct_option = normalize_option(self.correct_option)

    @classmethod
    def from_file(cls, file_path: Path, correct_option: str = DEFAULT_CORRECT_OPTION) -> "QuestionDraft":
        return cls(filename=file_path.name, data=file_path.read_bytes(), correct_option=correct_option)

    @property
    def content_type(self) -> str:
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"


def normalize_option(option: str | None) -> str:
    """Return the upper-cased option label, defaulting to the first label."""
    if option is None or not option.strip():
        return DEFAULT_CORRECT_OPTION
    label = option.strip().upper()
    if label not in OPTION_LABELS:
        raise ValueError(f"Correct option must be one of {', '.join(OPTION_LABELS)}.")
    return label


def timer_total_seconds(hours: int, minutes: int, seconds: int) -> int:
    parts = {"hours": hours, "minutes": minutes, "seconds": seconds}
    for name, value in parts.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTimerError(f"Timer {name} must be a whole number.")
        if value < 0:
            raise InvalidTimerError(f"Timer {name} cannot be negative.")
    return hours * 3600 + minutes * 60 + seconds


class QuestionUploader:
    """Uploads question images to object storage and records them."""

    def __init__(self, documents: DocumentStore, objects: ObjectStore, clock: Clock) -> None:
        self._documents = documents
        self._objects = objects
        self._clock = clock

    def set_test_timer(self, hours: int, minutes: int, seconds: int) -> int:
        """Store the test duration and return it in seconds."""
        total = timer_total_seconds(hours, minutes, seconds)
        self._documents.set_by_key(SETTINGS_COLLECTION, TIMER_KEY, {"timer": total})
        logger.info("Test timer set to %d seconds", total)
        return total

    def get_test_timer(self) -> int | None:
        document = self._documents.get_by_key(SETTINGS_COLLECTION, TIMER_KEY)
        if not document:
            return None
        value = document.get("timer")
        return value if isinstance(value, int) and not isinstance(value, bool) else None

    def upload_all(self, drafts: list[QuestionDraft]) -> list[QuestionAsset]:
        """Upload drafts one after another, in order.

        Raises:
            NothingToUploadError: ``drafts`` is empty.
            UploadInterruptedError: a step failed; carries the assets that
                were fully uploaded before the failure.
        """
        if not drafts:
            raise NothingToUploadError("Please select at least one question!")

        uploaded: list[QuestionAsset] = []
        for draft in drafts:
            try:
                uploaded.append(self._upload_one(draft))
            except AdminError as exc:
                logger.warning("Question upload stopped at %s: %s", draft.filename, exc)
                raise UploadInterruptedError(uploaded, exc) from exc
        logger.info("Uploaded %d question(s)", len(uploaded))
        return uploaded

    def _upload_one(self, draft: QuestionDraft) -> QuestionAsset:
        key = f"{QUESTION_OBJECT_PREFIX}{uuid4()}"
        handle = self._objects.put_object(key, draft.data, draft.content_type)
        asset = QuestionAsset(
            image_url=self._objects.public_url(handle),
            correct_option=draft.correct_option,
            marks=MARKS_PER_QUESTION,
            created_at=self._clock.now(),
        )
        asset.id = self._documents.append_new(QUESTIONS_COLLECTION, asset.to_document())
        return asset
