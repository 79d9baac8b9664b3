from datetime import datetime, timezone

from classroom_admin.core.models import StudentResult
from classroom_admin.core.report_renderer import (
    ResultsReportRenderer,
    format_score,
    render_printable_report,
)


def make_results():
    return [
        StudentResult(
            id="r1",
            name="Asha",
            score=8,
            phone_number="98765",
            batch_time="9am",
            timestamp=datetime(2024, 3, 5, 14, 30, 15, tzinfo=timezone.utc),
        ),
        StudentResult(id="r2", name="Ben", score=6.5),
    ]


def test_empty_report_keeps_header_and_table():
    html = render_printable_report([], tz=timezone.utc)

    assert "<table>" in html
    for column in ("Name", "Phone", "Batch", "Score", "Date"):
        assert f"<th>{column}</th>" in html
    assert "<td>" not in html
    assert "<h2>Student Results</h2>" in html


def test_rows_use_fallback_values():
    rows = ResultsReportRenderer(tz=timezone.utc).report_rows(make_results())

    assert rows == [
        ("Asha", "98765", "9am", "8", "3/5/2024, 2:30:15 PM"),
        ("Ben", "N/A", "N/A", "6.5", "No timestamp"),
    ]


def test_report_cells_render_in_order():
    html = render_printable_report(make_results(), tz=timezone.utc)

    assert "<td>Asha</td>" in html
    assert "<td>3/5/2024, 2:30:15 PM</td>" in html
    assert "<td>No timestamp</td>" in html
    assert html.index("Asha") < html.index("Ben")


def test_report_is_deterministic():
    results = make_results()
    assert render_printable_report(results, tz=timezone.utc) == render_printable_report(results, tz=timezone.utc)


def test_names_with_markup_are_printed_literally():
    results = [StudentResult(id="x", name="<b>Zed</b> | *star*", score=1)]

    html = render_printable_report(results, tz=timezone.utc)

    assert "<b>Zed</b>" not in html
    assert "&lt;b&gt;Zed&lt;/b&gt; | *star*" in html
    assert "<em>" not in html


def test_format_score():
    assert format_score(5.0) == "5"
    assert format_score(7) == "7"
    assert format_score(7.25) == "7.25"
    assert format_score(None) == "N/A"


def test_text_scores_and_empty_fields_print_like_stored_values():
    results = [StudentResult(id="x", name=None, score="7", phone_number="", batch_time="")]

    rows = ResultsReportRenderer(tz=timezone.utc).report_rows(results)

    assert rows == [("", "N/A", "N/A", "7", "No timestamp")]
