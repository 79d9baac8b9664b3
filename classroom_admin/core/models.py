"""Domain models for the admin console."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from classroom_admin.core.timestamps import to_instant

ResultKey = tuple[object, object, object]


@dataclass(slots=True)
class LiveStreamState:
    """Singleton record describing the class currently streaming."""

    url: str
    is_live: bool
    timestamp: datetime | None = None

    @classmethod
    def idle(cls) -> "LiveStreamState":
        return cls(url="", is_live=False)

    @classmethod
    def from_document(cls, fields: Mapping[str, Any] | None) -> "LiveStreamState":
        if not fields:
            return cls.idle()
        return cls(
            url=str(fields.get("url") or ""),
            is_live=bool(fields.get("isLive", False)),
            timestamp=to_instant(fields.get("timestamp")),
        )

    def to_document(self) -> dict[str, Any]:
        document: dict[str, Any] = {"url": self.url, "isLive": self.is_live}
        if self.timestamp is not None:
            document["timestamp"] = self.timestamp
        return document


@dataclass(slots=True)
class ArchivedClass:
    """Append-only record of a class that has ended."""

    url: str
    title: str
    date: datetime | None
    id: str | None = None

    @classmethod
    def from_document(cls, doc_id: str, fields: Mapping[str, Any]) -> "ArchivedClass":
        return cls(
            url=str(fields.get("url") or ""),
            title=str(fields.get("title") or ""),
            date=to_instant(fields.get("date")),
            id=doc_id,
        )

    def to_document(self) -> dict[str, Any]:
        return {"url": self.url, "title": self.title, "date": self.date}


@dataclass(slots=True)
class StudentResult:
    """One submitted attempt as stored by the student app."""

    id: str
    name: str | None
    score: float | int | str | None
    phone_number: str | None = None
    batch_time: str | None = None
    timestamp: datetime | None = None  # None means the submission time is unknown

    @classmethod
    def from_document(cls, doc_id: str, fields: Mapping[str, Any]) -> "StudentResult":
        score = fields.get("score")
        if score is not None and (isinstance(score, bool) or not isinstance(score, (int, float))):
            score = str(score)
        return cls(
            id=doc_id,
            name=_stored_text(fields.get("name")),
            score=score,
            phone_number=_stored_text(fields.get("phoneNumber")),
            batch_time=_stored_text(fields.get("batchTime")),
            timestamp=to_instant(fields.get("timestamp")),
        )

    @property
    def dedup_key(self) -> ResultKey:
        """Composite identity used to collapse duplicate submissions.

        Absent fields are ``None`` and stay distinct from empty strings.
        """
        return (self.name, self.batch_time, self.phone_number)


@dataclass(slots=True)
class QuestionAsset:
    """An uploaded question image together with its answer key."""

    image_url: str
    correct_option: str
    marks: int
    created_at: datetime
    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "imageUrl": self.image_url,
            "correctOption": self.correct_option,
            "marks": self.marks,
            "createdAt": self.created_at,
        }


@dataclass(slots=True)
class DeleteOutcome:
    """Per-id result of one delete inside a batch."""

    ok: bool
    error: str | None = None


@dataclass(slots=True)
class BatchDeleteResult:
    """Outcome of a best-effort parallel delete, keyed by result id."""

    outcomes: dict[str, DeleteOutcome] = field(default_factory=dict)

    def failed_ids(self) -> list[str]:
        return [doc_id for doc_id, outcome in self.outcomes.items() if not outcome.ok]

    def succeeded_ids(self) -> list[str]:
        return [doc_id for doc_id, outcome in self.outcomes.items() if outcome.ok]

    @property
    def all_succeeded(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes.values())


@dataclass(slots=True)
class ResultsSession:
    """Per-session view state for the results screen.

    Holds the loaded snapshot and the selection made over it. The selection
    only ever refers to ids of ``results``; it must be cleared whenever the
    snapshot is reloaded.
    """

    results: list[StudentResult] = field(default_factory=list)
    selected: set[str] = field(default_factory=set)
    select_all: bool = False

    def loaded_ids(self) -> list[str]:
        return [result.id for result in self.results]


def _stored_text(value: object) -> str | None:
    return None if value is None else str(value)
