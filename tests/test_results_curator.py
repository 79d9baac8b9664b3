import pytest

from classroom_admin.constants.store_constants import RESULTS_COLLECTION
from classroom_admin.core.errors import EmptySelectionError, PartialDeleteFailure
from classroom_admin.core.models import ResultsSession, StudentResult
from classroom_admin.core.services.results_curator import ResultsCurator, deduplicate_results


@pytest.fixture
def curator(store):
    return ResultsCurator(store)


def seed_results(store, rows):
    for doc_id, fields in rows:
        store.seed(RESULTS_COLLECTION, doc_id, fields)


SAMPLE_ROWS = [
    ("r1", {"name": "A", "batchTime": "9am", "phoneNumber": "1", "score": 5}),
    ("r2", {"name": "A", "batchTime": "9am", "phoneNumber": "1", "score": 9}),
    ("r3", {"name": "B", "batchTime": "9am", "phoneNumber": "2", "score": 7}),
]


def test_first_occurrence_wins(curator, store):
    seed_results(store, SAMPLE_ROWS)

    results = list(curator.load_results())

    assert [(r.id, r.name, r.score) for r in results] == [("r1", "A", 5), ("r3", "B", 7)]


def test_dedup_is_idempotent(curator, store):
    seed_results(store, SAMPLE_ROWS)
    assert list(curator.load_results()) == list(curator.load_results())


def test_load_results_is_lazy_and_one_shot(curator, store):
    seed_results(store, SAMPLE_ROWS)

    iterator = curator.load_results()
    assert store.calls == []
    assert len(list(iterator)) == 2
    assert list(iterator) == []
    assert store.calls == [("list", RESULTS_COLLECTION)]


def test_identity_uses_all_three_fields():
    results = [
        StudentResult(id="1", name="A", score=1, batch_time="9am", phone_number="1"),
        StudentResult(id="2", name="A", score=2, batch_time="10am", phone_number="1"),
        StudentResult(id="3", name="A", score=3, batch_time="9am", phone_number="2"),
        StudentResult(id="4", name="A", score=4, batch_time="9am", phone_number=None),
        StudentResult(id="5", name="A", score=5, batch_time="9am", phone_number=None),
    ]
    assert [r.id for r in deduplicate_results(results)] == ["1", "2", "3", "4"]


def test_missing_fields_are_normalized(curator, store):
    seed_results(store, [("r1", {"name": "C", "score": 3})])

    (result,) = curator.load_results()

    assert result.phone_number is None
    assert result.batch_time is None
    assert result.timestamp is None


def test_toggle_select_all_selects_then_deselects_without_store_calls(curator, store):
    seed_results(store, SAMPLE_ROWS + [("r4", {"name": "D", "score": 1})])
    session = curator.refresh(ResultsSession())
    store.calls.clear()

    curator.toggle_select_all(session)
    assert session.select_all is True
    assert session.selected == {"r1", "r3", "r4"}

    curator.toggle_select_all(session)
    assert session.select_all is False
    assert session.selected == set()
    assert store.calls == []


def test_toggle_select_single_keeps_flag_in_sync(curator, store):
    seed_results(store, SAMPLE_ROWS)
    session = curator.refresh(ResultsSession())

    curator.toggle_select(session, "r1")
    assert session.selected == {"r1"}
    assert session.select_all is False

    curator.toggle_select(session, "r3")
    assert session.select_all is True

    curator.toggle_select(session, "r1")
    assert session.selected == {"r3"}
    assert session.select_all is False


def test_toggle_select_rejects_ids_outside_snapshot(curator, store):
    seed_results(store, SAMPLE_ROWS)
    session = curator.refresh(ResultsSession())

    # r2 is a dropped duplicate, so it is not selectable
    with pytest.raises(ValueError):
        curator.toggle_select(session, "r2")
    assert session.selected == set()


def test_refresh_clears_selection(curator, store):
    seed_results(store, SAMPLE_ROWS)
    session = curator.refresh(ResultsSession())
    curator.toggle_select_all(session)

    curator.refresh(session)

    assert session.selected == set()
    assert session.select_all is False


def test_delete_with_empty_selection_makes_no_store_calls(curator, store):
    with pytest.raises(EmptySelectionError):
        curator.delete_selected(set())
    assert store.calls == []


def test_delete_selected_removes_every_id(curator, store):
    seed_results(store, SAMPLE_ROWS)

    batch = curator.delete_selected({"r1", "r3"})

    assert batch.all_succeeded
    assert sorted(batch.succeeded_ids()) == ["r1", "r3"]
    assert [doc_id for doc_id, _ in store.list_all(RESULTS_COLLECTION)] == ["r2"]


def test_partial_failure_reports_per_id_outcomes(curator, store):
    seed_results(store, SAMPLE_ROWS)
    store.fail_keys.add("r3")

    with pytest.raises(PartialDeleteFailure) as excinfo:
        curator.delete_selected({"r1", "r3"})

    batch = excinfo.value.batch
    assert batch.failed_ids() == ["r3"]
    assert batch.succeeded_ids() == ["r1"]
    assert "r3" in {doc_id for doc_id, _ in store.list_all(RESULTS_COLLECTION)}


def test_session_selection_cleared_even_on_partial_failure(curator, store):
    seed_results(store, SAMPLE_ROWS)
    session = curator.refresh(ResultsSession())
    curator.toggle_select_all(session)
    store.fail_keys.add("r1")

    with pytest.raises(PartialDeleteFailure):
        curator.delete_session_selection(session)

    assert session.selected == set()
    assert session.select_all is False


def test_session_delete_with_nothing_selected(curator, store):
    seed_results(store, SAMPLE_ROWS)
    session = curator.refresh(ResultsSession())
    store.calls.clear()

    with pytest.raises(EmptySelectionError):
        curator.delete_session_selection(session)
    assert store.calls == []


def test_absent_and_empty_fields_are_different_identities(curator, store):
    seed_results(store, [
        ("r1", {"name": "A", "batchTime": "9am", "score": 4}),
        ("r2", {"name": "A", "batchTime": "9am", "phoneNumber": "", "score": 6}),
        ("r3", {"batchTime": "9am", "phoneNumber": "1", "score": 2}),
        ("r4", {"name": "", "batchTime": "9am", "phoneNumber": "1", "score": 3}),
    ])

    results = list(curator.load_results())

    assert [r.id for r in results] == ["r1", "r2", "r3", "r4"]
    assert results[1].phone_number == ""
    assert results[2].name is None


def test_non_numeric_score_is_kept_as_stored(curator, store):
    seed_results(store, [("r1", {"name": "A", "score": "7"})])

    (result,) = curator.load_results()

    assert result.score == "7"
