"""Printable HTML report over the curated student results.

Architecture note:
    The table is written as GitHub-flavoured markdown and converted by the
    same MarkdownIt setup the rest of the app uses, with raw HTML disabled.
    Cell text is backslash-escaped first, so names containing markdown or
    HTML syntax are printed literally. Rendering is a pure function of the
    input sequence and the time zone; it never reads the store.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import tzinfo
import html
import string

from markdown_it import MarkdownIt

from classroom_admin.core.models import StudentResult
from classroom_admin.core.timestamps import format_timestamp

REPORT_TITLE = "Student Results"
REPORT_COLUMNS: tuple[str, ...] = ("Name", "Phone", "Batch", "Score", "Date")
MISSING_VALUE = "N/A"
MISSING_TIMESTAMP = "No timestamp"

_MARKDOWN_PUNCTUATION = frozenset(string.punctuation)


@dataclass(slots=True)
class ResultsReportRenderer:
    """Turns results into an HTML table fragment or a full printable page."""

    tz: tzinfo | None = None
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False}).enable("table")

    def report_rows(self, results: Iterable[StudentResult]) -> list[tuple[str, ...]]:
        """Return the display cells of each result, in report column order."""
        return [
            (
                result.name or "",
                result.phone_number or MISSING_VALUE,
                result.batch_time or MISSING_VALUE,
                format_score(result.score),
                format_timestamp(result.timestamp, self.tz) if result.timestamp else MISSING_TIMESTAMP,
            )
            for result in results
        ]

    def render_table(self, results: Iterable[StudentResult]) -> str:
        lines = [
            _markdown_row(REPORT_COLUMNS),
            _markdown_row(("---",) * len(REPORT_COLUMNS), escape=False),
        ]
        lines.extend(_markdown_row(row) for row in self.report_rows(results))
        return self._markdown.render("\n".join(lines) + "\n")

    def render_document(self, results: Iterable[StudentResult], title: str = REPORT_TITLE) -> str:
        table_html = self.render_table(results)
        safe_title = html.escape(title)
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{safe_title}</title>
    <style>
      body {{ font-family: Arial, sans-serif; margin: 20px; }}
      table {{ width: 100%; border-collapse: collapse; }}
      th, td {{ border: 1px solid #555; padding: 8px; text-align: left; }}
      th {{ background-color: #f0f0f0; }}
      h2 {{ text-align: center; margin-bottom: 20px; }}
    </style>
  </head>
  <body>
    <h2>{safe_title}</h2>
{table_html}  </body>
</html>
"""


def render_printable_report(results: Iterable[StudentResult], tz: tzinfo | None = None) -> str:
    """Convenience wrapper returning the full printable HTML page."""
    return ResultsReportRenderer(tz=tz).render_document(results)


def format_score(score: float | int | str | None) -> str:
    if score is None:
        return MISSING_VALUE
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def _markdown_row(cells: Iterable[str], escape: bool = True) -> str:
    rendered = [_escape_cell(cell) if escape else cell for cell in cells]
    return "| " + " | ".join(rendered) + " |"


def _escape_cell(text: str) -> str:
    flattened = " ".join(text.split())
    return "".join(f"\\{char}" if char in _MARKDOWN_PUNCTUATION else char for char in flattened)
