"""Exception taxonomy raised by the admin services.

Every error derives from :class:`AdminError` so that the Qt panels and the
HTTP layer can catch a single type at the action boundary and turn it into a
user-facing message. None of them are fatal to the process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classroom_admin.core.models import BatchDeleteResult, QuestionAsset


class AdminError(Exception):
    """Base class for every failure surfaced to the admin."""


class InvalidLinkError(AdminError):
    """Raised when a pasted link does not contain a recognizable video id."""


class NoActiveStreamError(AdminError):
    """Raised when ending a class while no stream is live."""


class EmptySelectionError(AdminError):
    """Raised when a bulk delete is requested with nothing selected."""


class PersistenceError(AdminError):
    """Raised when the backend store fails, times out or is unreachable."""


class PartialDeleteFailure(AdminError):
    """Raised when some deletes in a batch failed.

    The batch result is attached so callers can report which ids failed, but
    the store must be re-queried to learn the actual post-delete state.
    """

    def __init__(self, batch: BatchDeleteResult) -> None:
        failed = batch.failed_ids()
        super().__init__(f"{len(failed)} of {len(batch.outcomes)} deletes failed.")
        self.batch = batch


class InvalidTimerError(AdminError):
    """Raised when the test timer is given negative or non-integer parts."""


class NothingToUploadError(AdminError):
    """Raised when an upload is requested without any question drafts."""


class UploadInterruptedError(AdminError):
    """Raised when a question upload stops part-way through the batch."""

    def __init__(self, uploaded: list[QuestionAsset], cause: Exception) -> None:
        super().__init__(
            f"Upload stopped after {len(uploaded)} question(s): {cause}"
        )
        self.uploaded = uploaded
        self.cause = cause
