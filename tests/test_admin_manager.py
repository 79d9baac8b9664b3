import pytest

from classroom_admin.constants.store_constants import RESULTS_COLLECTION
from classroom_admin.core.errors import EmptySelectionError, PartialDeleteFailure


@pytest.fixture
def seeded(store):
    store.seed(RESULTS_COLLECTION, "r1", {"name": "Asha", "score": 8, "phoneNumber": "98765"})
    store.seed(RESULTS_COLLECTION, "r2", {"name": "Ben", "score": 6})
    return store


def test_console_selection_flow(manager, seeded):
    loaded = manager.refresh_results()
    assert [result.id for result in loaded] == ["r1", "r2"]

    manager.toggle_result("r2")
    assert manager.get_selected_ids() == {"r2"}
    assert manager.is_all_selected() is False

    assert manager.toggle_all_results() is True
    assert manager.get_selected_ids() == {"r1", "r2"}

    batch = manager.delete_selected_results()
    assert batch.all_succeeded
    assert manager.get_selected_ids() == set()
    assert manager.refresh_results() == []


def test_delete_without_selection(manager, seeded):
    manager.refresh_results()
    with pytest.raises(EmptySelectionError):
        manager.delete_selected_results()


def test_partial_failure_then_reload_shows_remaining(manager, seeded):
    manager.refresh_results()
    manager.toggle_all_results()
    seeded.fail_keys.add("r1")

    with pytest.raises(PartialDeleteFailure) as excinfo:
        manager.delete_selected_results()

    assert str(excinfo.value) == "1 of 2 deletes failed."
    assert [result.id for result in manager.refresh_results()] == ["r1"]


def test_loaded_report_uses_snapshot(manager, seeded):
    manager.refresh_results()
    seeded.seed(RESULTS_COLLECTION, "r3", {"name": "Cara", "score": 4})

    report = manager.build_loaded_report()

    assert "<td>Asha</td>" in report
    assert "Cara" not in report
    assert "<td>Cara</td>" in manager.build_report()
