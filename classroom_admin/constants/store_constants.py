"""Collection names, document keys and backend defaults shared by core services."""

LIVE_STREAM_COLLECTION: str = "liveStream"
LIVE_STREAM_KEY: str = "currentLive"
PAST_CLASSES_COLLECTION: str = "pastClasses"
RESULTS_COLLECTION: str = "studentResults"
QUESTIONS_COLLECTION: str = "questions"
SETTINGS_COLLECTION: str = "settings"
TIMER_KEY: str = "timer"

QUESTION_OBJECT_PREFIX: str = "questions/"

DEFAULT_STORE_TIMEOUT_SECONDS: float = 10.0
MAX_PARALLEL_DELETES: int = 8

FIREBASE_CREDENTIALS_JSON_ENV: str = "FIREBASE_CREDENTIALS_JSON"
FIREBASE_CREDENTIALS_B64_ENV: str = "FIREBASE_CREDENTIALS_B64"
FIREBASE_STORAGE_BUCKET_ENV: str = "FIREBASE_STORAGE_BUCKET"
