"""Lazy Firebase Admin initialization from environment credentials."""

from __future__ import annotations

import base64
import json
import logging
import os
from threading import Lock

import firebase_admin
from firebase_admin import credentials

from classroom_admin.constants.store_constants import (
    FIREBASE_CREDENTIALS_B64_ENV,
    FIREBASE_CREDENTIALS_JSON_ENV,
    FIREBASE_STORAGE_BUCKET_ENV,
)

logger = logging.getLogger(__name__)

_init_lock = Lock()


class FirebaseConfigError(RuntimeError):
    """Raised when Firebase credentials are missing or malformed."""


def has_firebase_credentials() -> bool:
    return bool(
        os.environ.get(FIREBASE_CREDENTIALS_JSON_ENV)
        or os.environ.get(FIREBASE_CREDENTIALS_B64_ENV)
    )


def load_firebase_credentials() -> dict:
    """Load the service account from ``FIREBASE_CREDENTIALS_JSON`` or ``..._B64``."""
    raw = os.environ.get(FIREBASE_CREDENTIALS_JSON_ENV)
    if raw:
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("%s is not valid JSON; trying %s", FIREBASE_CREDENTIALS_JSON_ENV, FIREBASE_CREDENTIALS_B64_ENV)
    raw_b64 = os.environ.get(FIREBASE_CREDENTIALS_B64_ENV)
    if raw_b64:
        try:
            decoded = base64.b64decode(raw_b64).decode("utf-8")
            return json.loads(decoded)
        except (ValueError, UnicodeDecodeError) as exc:
            raise FirebaseConfigError(f"Invalid {FIREBASE_CREDENTIALS_B64_ENV}") from exc
    raise FirebaseConfigError(
        f"Set {FIREBASE_CREDENTIALS_JSON_ENV} or {FIREBASE_CREDENTIALS_B64_ENV}"
    )


def get_firebase_app() -> firebase_admin.App:
    """Initialize the default Firebase app once and return it."""
    with _init_lock:
        if firebase_admin._apps:
            return firebase_admin.get_app()
        creds = credentials.Certificate(load_firebase_credentials())
        options = {}
        bucket = os.environ.get(FIREBASE_STORAGE_BUCKET_ENV)
        if bucket:
            options["storageBucket"] = bucket
        app = firebase_admin.initialize_app(creds, options or None)
        logger.info("Firebase app initialized for project %s", app.project_id)
        return app
