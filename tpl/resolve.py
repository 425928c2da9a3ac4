"""
Pick exactly one catalog license per module.

The priority ranking is both an eligibility list and a preference order: a
classified license that is not ranked is never chosen, and among ranked ones
the earliest wins. A module left with nothing is fatal, a compliance report
must not silently drop a dependency.
"""
import logging
from dataclasses import dataclass

from tpl.catalog import DEFAULT_PRIORITY, CanonicalLicense, UnknownLicense
from tpl.classify import classify_licenses
from tpl.errors import UnresolvableLicense
from tpl.inventory import ModuleCoordinate
from tpl.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedEntry:
    coordinate: ModuleCoordinate
    license: CanonicalLicense


def choose_license(classified, ranking=DEFAULT_PRIORITY):
    chosen = None
    chosen_index = len(ranking)
    for candidate in classified:
        if not isinstance(candidate, CanonicalLicense):
            continue
        try:
            index = ranking.index(candidate)
        except ValueError:
            continue
        if index < chosen_index:
            chosen = candidate
            chosen_index = index
    return chosen


def resolve_module(coordinate, classified, ranking=DEFAULT_PRIORITY):
    chosen = choose_license(classified, ranking)
    if chosen is None:
        unknown = [c for c in classified if isinstance(c, UnknownLicense)]
        raise UnresolvableLicense(coordinate, unknown)
    return ResolvedEntry(coordinate, chosen)


def resolve_all(records, rules=DEFAULT_RULES, ranking=DEFAULT_PRIORITY):
    """Classify and resolve every record; returns entries sorted by module id."""
    ranking = tuple(ranking)
    entries = {}
    for record in records:
        classified = classify_licenses(record.licenses, record.coordinate, rules)
        entry = resolve_module(record.coordinate, classified, ranking)
        entries[record.coordinate.module_id] = entry
    logger.info("resolved licenses for %d modules", len(entries))
    return tuple(entries[module_id] for module_id in sorted(entries))
