"""Static metadata describing ClassroomAdmin."""

APP_NAME = "ClassroomAdmin"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ClassroomAdmin is the teacher console for a live-class and quiz platform built with Qt and FastAPI. "
    "Use it to start and end live YouTube classes, upload timed question sets with answer keys, "
    "and review, print or delete student results."
)

HELP_TEXT = (
    "Live Class: paste any YouTube link (watch, share, embed or live) and press Start Live. "
    "End Live archives the class to the past classes list before clearing the stream.\n\n"
    "Upload Questions: set the test timer, then pick one or more question images and mark the "
    "correct option (A-D) for each one before pressing Upload All Questions.\n\n"
    "Student Results: duplicate submissions (same name, batch and phone number) are shown once. "
    "Tick results and press Delete Selected to remove them, or Print All for a printable report."
)
