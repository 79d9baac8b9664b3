"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ClassroomAdmin Console"

MODE_BUTTON_LIVE: str = "Live Class"
MODE_BUTTON_UPLOAD: str = "Upload Questions"
MODE_BUTTON_RESULTS: str = "Student Results"

LIVE_LINK_LABEL: str = "YouTube Link:"
LIVE_LINK_PLACEHOLDER: str = "Paste any YouTube link here"
LIVE_START_BUTTON: str = "Start Live"
LIVE_END_BUTTON: str = "End Live"
LIVE_HINT: str = (
    "You can paste any valid YouTube link (e.g., watch, share, live), "
    "and it will be converted automatically."
)
LIVE_STARTED_MESSAGE: str = "Live class started!"
LIVE_ENDED_MESSAGE: str = "Live class ended and saved."
LIVE_INVALID_LINK_MESSAGE: str = "Please enter a valid YouTube link."
LIVE_NO_STREAM_MESSAGE: str = "No active live stream found."
LIVE_START_FAILED_MESSAGE: str = "Failed to start live stream. Try again."
LIVE_END_FAILED_MESSAGE: str = "Failed to end live stream."
LIVE_STATUS_IDLE: str = "No class is live right now."
LIVE_STATUS_TEMPLATE: str = "Live now: {url}"

TIMER_GROUP_TITLE: str = "Set Test Timer"
TIMER_SAVE_BUTTON: str = "Save Timer"
TIMER_SAVED_MESSAGE: str = "Timer saved successfully!"
TIMER_MAX_HOURS: int = 9999
UPLOAD_GROUP_TITLE: str = "Upload Multiple Questions"
UPLOAD_PICK_BUTTON: str = "Select question images"
UPLOAD_ALL_BUTTON: str = "Upload All Questions"
UPLOAD_CLEAR_BUTTON: str = "Clear Selection"
UPLOAD_IN_PROGRESS: str = "Uploading..."
UPLOAD_DONE_MESSAGE: str = "All questions uploaded successfully!"
UPLOAD_DIALOG_TITLE: str = "Select question images"
UPLOAD_FILE_FILTER: str = "Images (*.png *.jpg *.jpeg *.gif *.webp *.bmp);;All files (*.*)"
UPLOAD_THUMBNAIL_SIZE: int = 160

RESULTS_SELECT_ALL: str = "Select All"
RESULTS_DELETE_BUTTON: str = "Delete Selected"
RESULTS_PRINT_BUTTON: str = "Print All"
RESULTS_REFRESH_BUTTON: str = "Refresh"
RESULTS_EMPTY_STATE: str = "No results found."
RESULTS_COUNT_TEMPLATE: str = "{count} result(s), {selected} selected"
RESULTS_COLUMNS: tuple[str, ...] = ("", "Name", "Phone", "Batch", "Score", "Date")
