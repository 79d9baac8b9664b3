import pytest

from classroom_admin.core.backend import factory
from classroom_admin.core.backend.firebase_app import FirebaseConfigError, load_firebase_credentials


@pytest.fixture
def no_credentials(monkeypatch):
    monkeypatch.delenv("FIREBASE_CREDENTIALS_JSON", raising=False)
    monkeypatch.delenv("FIREBASE_CREDENTIALS_B64", raising=False)


def test_offline_backend_without_credentials(no_credentials):
    backend = factory.build_backend(timeout_seconds=3)
    try:
        assert backend.description == "Offline demo (in-memory)"
        assert backend.documents.timeout_seconds == 3

        backend.set_timeout(7)
        assert backend.objects.timeout_seconds == 7
        backend.documents.set_by_key("settings", "timer", {"timer": 5})
        assert backend.documents.get_by_key("settings", "timer") == {"timer": 5}
    finally:
        backend.shutdown()


def test_missing_credentials_raise_config_error(no_credentials):
    with pytest.raises(FirebaseConfigError):
        load_firebase_credentials()


def test_credentials_from_base64(monkeypatch, no_credentials):
    # base64 of {"type": "service_account"}
    monkeypatch.setenv("FIREBASE_CREDENTIALS_B64", "eyJ0eXBlIjogInNlcnZpY2VfYWNjb3VudCJ9")
    assert load_firebase_credentials() == {"type": "service_account"}


def test_invalid_base64_credentials(monkeypatch, no_credentials):
    monkeypatch.setenv("FIREBASE_CREDENTIALS_B64", "%%%not-base64%%%")
    with pytest.raises(FirebaseConfigError):
        load_firebase_credentials()
