import pytest

from classroom_admin.constants.store_constants import (
    QUESTIONS_COLLECTION,
    SETTINGS_COLLECTION,
    TIMER_KEY,
)
from classroom_admin.core.backend.object_store import InMemoryObjectStore
from classroom_admin.core.errors import (
    InvalidTimerError,
    NothingToUploadError,
    PersistenceError,
    UploadInterruptedError,
)
from classroom_admin.core.services.question_uploader import (
    QuestionDraft,
    QuestionUploader,
    normalize_option,
    timer_total_seconds,
)

from conftest import FIXED_NOW


class FlakyObjectStore(InMemoryObjectStore):
    """Fails every upload after the first ``succeed`` ones."""

    def __init__(self, succeed: int) -> None:
        super().__init__()
        self.succeed = succeed

    def put_object(self, key, data, content_type=None):
        if len(self.keys()) >= self.succeed:
            raise PersistenceError("bucket unavailable")
        return super().put_object(key, data, content_type)


@pytest.fixture
def uploader(store, objects, clock):
    return QuestionUploader(store, objects, clock)


def make_drafts(*options):
    return [
        QuestionDraft(filename=f"q{index}.png", data=b"png-bytes", correct_option=option)
        for index, option in enumerate(options, start=1)
    ]


def test_timer_is_stored_in_seconds(uploader, store):
    assert uploader.set_test_timer(1, 2, 3) == 3723
    assert store.get_by_key(SETTINGS_COLLECTION, TIMER_KEY) == {"timer": 3723}
    assert uploader.get_test_timer() == 3723


def test_timer_missing_reads_as_none(uploader):
    assert uploader.get_test_timer() is None


@pytest.mark.parametrize(
    "parts",
    [(-1, 0, 0), (0, 1.5, 0), (0, 0, "10"), (True, 0, 0)],
)
def test_invalid_timer_parts_are_rejected(uploader, store, parts):
    with pytest.raises(InvalidTimerError):
        uploader.set_test_timer(*parts)
    assert store.writes() == []


def test_timer_total_allows_zero():
    assert timer_total_seconds(0, 0, 0) == 0


def test_timer_hours_have_no_upper_bound(uploader, store):
    assert uploader.set_test_timer(48, 0, 0) == 172800
    assert store.get_by_key(SETTINGS_COLLECTION, TIMER_KEY) == {"timer": 172800}


def test_upload_stores_image_and_answer_key(uploader, store, objects):
    (asset,) = uploader.upload_all(make_drafts("c"))

    assert asset.correct_option == "C"
    assert asset.marks == 1
    assert asset.created_at == FIXED_NOW
    (key,) = objects.keys()
    assert key.startswith("questions/")
    assert objects.get_object(key) == b"png-bytes"
    assert asset.image_url == f"memory://{key}"

    (stored_id, document), = store.list_all(QUESTIONS_COLLECTION)
    assert stored_id == asset.id
    assert document == {
        "imageUrl": asset.image_url,
        "correctOption": "C",
        "marks": 1,
        "createdAt": FIXED_NOW,
    }


def test_upload_without_drafts(uploader, store):
    with pytest.raises(NothingToUploadError):
        uploader.upload_all([])
    assert store.calls == []


def test_interrupted_upload_reports_finished_assets(store, clock):
    uploader = QuestionUploader(store, FlakyObjectStore(succeed=1), clock)

    with pytest.raises(UploadInterruptedError) as excinfo:
        uploader.upload_all(make_drafts("A", "B", "C"))

    assert [asset.correct_option for asset in excinfo.value.uploaded] == ["A"]
    assert isinstance(excinfo.value.cause, PersistenceError)
    assert len(store.list_all(QUESTIONS_COLLECTION)) == 1


def test_draft_defaults_and_content_type():
    draft = QuestionDraft(filename="diagram.JPG", data=b"", correct_option=None)
    assert draft.correct_option == "A"
    assert draft.content_type == "image/jpeg"
    assert QuestionDraft(filename="blob", data=b"").content_type == "application/octet-stream"


def test_draft_from_file(tmp_path):
    image = tmp_path / "q1.png"
    image.write_bytes(b"\x89PNG")

    draft = QuestionDraft.from_file(image, correct_option="d")

    assert draft.filename == "q1.png"
    assert draft.data == b"\x89PNG"
    assert draft.correct_option == "D"


def test_normalize_option_rejects_unknown_labels():
    assert normalize_option(" b ") == "B"
    with pytest.raises(ValueError):
        normalize_option("E")
