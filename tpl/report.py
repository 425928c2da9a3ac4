"""
Render resolved entries into the two third party license artifacts.

Both layouts are a pure projection of already sorted entries; nothing is
classified or reordered here.
"""
import html
import logging
import os

from tpl.errors import ReportIOError

logger = logging.getLogger(__name__)

PLAINTEXT_FILENAME = "licenses"
HTML_FILENAME = "licenses.html"

_MODULE_WIDTH = 74
_VERSION_WIDTH = 41
_LICENSE_ID_WIDTH = 13
_RULE = "-" * 188


def _source_code_sentence(contact):
    return f"The open source code of the libraries can be obtained by sending an email to {contact}."


def _plaintext_row(module, version, license_id, url):
    return (
        f" {module:<{_MODULE_WIDTH}}"
        f" | {version:<{_VERSION_WIDTH}}"
        f" | {license_id:<{_LICENSE_ID_WIDTH}}"
        f" | {url}"
    )


def render_plaintext(product_name, entries, legal_contact):
    lines = [
        "Third Party Licenses",
        "=" * 30,
        "",
        f"{product_name} uses the following third party libraries:",
        "",
        _plaintext_row("Module", "Version", "License ID", "License URL"),
        _RULE,
    ]
    for entry in entries:
        lines.append(
            _plaintext_row(
                entry.coordinate.module_id,
                entry.coordinate.version,
                entry.license.catalog_id,
                entry.license.reference_url,
            )
        )
    lines += [
        _RULE,
        "",
        _source_code_sentence(legal_contact),
    ]
    return "\n".join(lines) + "\n"


_HTML_HEAD = """<head>
    <title>Third Party Licences</title>
    <style>
        table, th, td {
            border: 1px solid black;
            border-collapse: collapse;
            border-spacing: 0;
        }

        th, td {
            padding: 5px;
        }
    </style>
</head>
"""


def _html_row(entry):
    url = html.escape(entry.license.reference_url)
    return (
        "    <tr>\n"
        f"        <td>{html.escape(entry.coordinate.module_id)}</td>\n"
        f"        <td>{html.escape(entry.coordinate.version)}</td>\n"
        f"        <td>{html.escape(entry.license.catalog_id)}</td>\n"
        "        <td>\n"
        f"            <a href=\"{url}\">{url}</a>\n"
        "        </td>\n"
        "    </tr>\n"
    )


def render_html(product_name, entries, legal_contact):
    contact = html.escape(legal_contact)
    mail_link = f"<a href=\"mailto:{contact}\">{contact}</a>"
    parts = [
        _HTML_HEAD,
        "\n<body>\n\n",
        "<h2>Third Party Licenses</h2>\n",
        f"<p>{html.escape(product_name)} uses the following third party libraries</p>\n\n",
        "<table>\n"
        "    <tbody>\n"
        "    <tr>\n"
        "        <th>Module</th>\n"
        "        <th>Version</th>\n"
        "        <th>License ID</th>\n"
        "        <th>License URL</th>\n"
        "    </tr>\n",
    ]
    parts.extend(_html_row(entry) for entry in entries)
    parts.append(
        "    </tbody>\n"
        "</table>\n"
        f"<p>{_source_code_sentence(mail_link)}\n"
        "</p>\n"
        "</body>\n"
    )
    return "".join(parts)


def render_reports(product_name, entries, legal_contact):
    """Return {filename: content} for both artifacts."""
    return {
        PLAINTEXT_FILENAME: render_plaintext(product_name, entries, legal_contact),
        HTML_FILENAME: render_html(product_name, entries, legal_contact),
    }


def remove_stale(path):
    if not os.path.lexists(path):
        return
    try:
        os.remove(path)
    except OSError as exc:
        raise ReportIOError(f"Could not delete file '{path}': {exc}") from exc


def _write_text(path, content):
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as exc:
        raise ReportIOError(f"Could not write file '{path}': {exc}") from exc


def write_reports(out_dir, product_name, entries, legal_contact):
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as exc:
        raise ReportIOError(f"Could not create directory '{out_dir}': {exc}") from exc
    rendered = render_reports(product_name, entries, legal_contact)
    paths = [os.path.join(out_dir, name) for name in rendered]
    # both stale files go before anything is written
    for path in paths:
        remove_stale(path)
    for path, content in zip(paths, rendered.values()):
        _write_text(path, content)
        logger.info("wrote %s", path)
    return paths
