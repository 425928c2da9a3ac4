"""
End-to-end run: inventory -> exclusion -> classification -> resolution -> reports.
One linear pass; every failure propagates to the caller.
"""
import logging
import os

from tpl.config import validate_product_name
from tpl.errors import StaleReportError
from tpl.exclusion import filter_records
from tpl.inventory import load_inventory
from tpl.report import HTML_FILENAME, PLAINTEXT_FILENAME, remove_stale, render_reports, write_reports
from tpl.resolve import resolve_all

logger = logging.getLogger(__name__)


def resolve_inventory(inventory_path, config):
    records = load_inventory(inventory_path)
    kept = list(filter_records(records, config.exclusion))
    if len(kept) != len(records):
        logger.info("excluded %d first-party modules", len(records) - len(kept))
    return resolve_all(kept, config.rules, config.priority)


def generate(inventory_path, out_dir, config):
    """Write licenses and licenses.html into out_dir; returns the written paths."""
    product_name = validate_product_name(config.product_name)
    # a failed rerun must not leave the previous report behind
    for name in (PLAINTEXT_FILENAME, HTML_FILENAME):
        remove_stale(os.path.join(out_dir, name))
    entries = resolve_inventory(inventory_path, config)
    return write_reports(out_dir, product_name, entries, config.legal_contact)


def check(inventory_path, out_dir, config):
    """Raise StaleReportError unless out_dir already holds exactly what generate would write."""
    product_name = validate_product_name(config.product_name)
    entries = resolve_inventory(inventory_path, config)
    stale = []
    for name, expected in render_reports(product_name, entries, config.legal_contact).items():
        path = os.path.join(out_dir, name)
        if not os.path.isfile(path):
            stale.append(path)
            continue
        with open(path, "r", encoding="utf-8", newline="") as f:
            if f.read() != expected:
                stale.append(path)
    if stale:
        raise StaleReportError(stale)
    logger.info("third party license report is up to date (%d modules)", len(entries))
    return entries
