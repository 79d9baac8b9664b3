"""Question-set constants shared across UI and core layers."""

OPTION_LABELS: tuple[str, ...] = ("A", "B", "C", "D")
DEFAULT_CORRECT_OPTION: str = OPTION_LABELS[0]
MARKS_PER_QUESTION: int = 1
