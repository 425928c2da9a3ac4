import os

import pytest

from tpl.catalog import CanonicalLicense
from tpl.errors import ReportIOError
from tpl.inventory import parse_coordinate
from tpl.report import HTML_FILENAME, PLAINTEXT_FILENAME, render_html, render_plaintext, write_reports
from tpl.resolve import ResolvedEntry

ENTRIES = (
    ResolvedEntry(parse_coordinate("a:lib:2.0"), CanonicalLicense.MIT),
    ResolvedEntry(parse_coordinate("org.example:widget:1.2.3"), CanonicalLicense.APACHE_2_0),
)


def _rows(text):
    return [line for line in text.splitlines() if line.count(" | ") == 3]


def test_plaintext_layout():
    text = render_plaintext("Example Broker", ENTRIES, "legal@example.org")
    lines = text.splitlines()
    assert lines[0] == "Third Party Licenses"
    assert lines[1] == "=" * 30
    assert lines[3] == "Example Broker uses the following third party libraries:"
    assert lines[5].startswith(" Module ")
    assert lines[6] == "-" * 188
    assert lines[-3] == "-" * 188
    assert lines[-1] == (
        "The open source code of the libraries can be obtained by sending an email to legal@example.org."
    )
    assert text.endswith(".\n")


def test_plaintext_row_is_fixed_width():
    row = _rows(render_plaintext("Example Broker", ENTRIES, "legal@example.org"))[2]
    assert row == (
        " " + "org.example:widget".ljust(74)
        + " | " + "1.2.3".ljust(41)
        + " | " + "Apache-2.0".ljust(13)
        + " | https://spdx.org/licenses/Apache-2.0.html"
    )
    assert [cell.strip() for cell in row.split("|")] == [
        "org.example:widget",
        "1.2.3",
        "Apache-2.0",
        "https://spdx.org/licenses/Apache-2.0.html",
    ]


def test_plaintext_header_lines_up_with_rows():
    header, first = _rows(render_plaintext("Example Broker", ENTRIES, "legal@example.org"))[:2]
    assert [i for i, c in enumerate(header) if c == "|"] == [i for i, c in enumerate(first) if c == "|"]


def test_html_table():
    markup = render_html("Example Broker", ENTRIES, "legal@example.org")
    assert "<h2>Third Party Licenses</h2>" in markup
    assert "<p>Example Broker uses the following third party libraries</p>" in markup
    for heading in ("Module", "Version", "License ID", "License URL"):
        assert f"<th>{heading}</th>" in markup
    assert (
        "<a href=\"https://spdx.org/licenses/Apache-2.0.html\">https://spdx.org/licenses/Apache-2.0.html</a>"
        in markup
    )
    assert "<a href=\"mailto:legal@example.org\">legal@example.org</a>" in markup
    assert markup.count("<tr>") == 3
    assert markup.index("<td>a:lib</td>") < markup.index("<td>org.example:widget</td>")
    assert markup.endswith("</body>\n")


def test_html_escapes_product_name():
    markup = render_html("Tom & Jerry <Edition>", ENTRIES, "legal@example.org")
    assert "<p>Tom &amp; Jerry &lt;Edition&gt; uses" in markup


def test_empty_report_still_has_boilerplate():
    text = render_plaintext("Example Broker", (), "legal@example.org")
    assert _rows(text)[1:] == []
    assert "<tbody>" in render_html("Example Broker", (), "legal@example.org")


def test_write_reports_replaces_stale_files(tmp_path):
    (tmp_path / PLAINTEXT_FILENAME).write_text("stale", encoding="utf-8")
    (tmp_path / HTML_FILENAME).write_text("stale", encoding="utf-8")
    paths = write_reports(str(tmp_path), "Example Broker", ENTRIES, "legal@example.org")
    assert paths == [str(tmp_path / PLAINTEXT_FILENAME), str(tmp_path / HTML_FILENAME)]
    for path in paths:
        content = open(path, encoding="utf-8").read()
        assert "stale" not in content
        assert "org.example:widget" in content


def test_write_reports_creates_output_dir(tmp_path):
    out_dir = tmp_path / "third-party-licenses"
    write_reports(str(out_dir), "Example Broker", ENTRIES, "legal@example.org")
    assert sorted(os.listdir(out_dir)) == [PLAINTEXT_FILENAME, HTML_FILENAME]


def test_undeletable_stale_file_is_fatal(tmp_path):
    # a directory where the report file should be cannot be removed with os.remove
    (tmp_path / PLAINTEXT_FILENAME).mkdir()
    with pytest.raises(ReportIOError) as info:
        write_reports(str(tmp_path), "Example Broker", ENTRIES, "legal@example.org")
    assert "Could not delete file" in str(info.value)
    assert info.value.code == 5
    assert not (tmp_path / HTML_FILENAME).exists()


def test_output_bytes_use_unix_newlines(tmp_path):
    paths = write_reports(str(tmp_path), "Example Broker", ENTRIES, "legal@example.org")
    for path in paths:
        assert b"\r\n" not in open(path, "rb").read()
