import os

import pytest

from tpl.config import build_config

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def dependency_xml(dependencies):
    """dependencies: list of (name, [(license_name, url_or_None), ...])"""
    lines = ["<?xml version=\"1.0\" encoding=\"UTF-8\"?>", "<dependencies>"]
    for name, licenses in dependencies:
        lines.append(f"  <dependency name=\"{name}\">")
        for license_name, url in licenses:
            if url is None:
                lines.append(f"    <license name=\"{license_name}\"/>")
            else:
                lines.append(f"    <license name=\"{license_name}\" url=\"{url}\"/>")
        lines.append("  </dependency>")
    lines.append("</dependencies>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def sample_inventory():
    return os.path.join(DATA_DIR, "dependency-license.xml")


@pytest.fixture
def write_inventory(tmp_path):
    def _write(dependencies):
        path = tmp_path / "dependency-license.xml"
        path.write_text(dependency_xml(dependencies), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def report_config():
    return build_config({"product_name": "Example Broker"})
