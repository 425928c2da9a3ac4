import logging

from tpl.catalog import UnknownLicense
from tpl.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


def classify_license(declared, coordinate, rules=DEFAULT_RULES):
    """Return the target of the first rule matching declared, else an UnknownLicense."""
    for rule in rules:
        if rule.matches(declared, coordinate):
            return rule.target
    logger.debug("unrecognized license for %s: %r url=%r", coordinate.module_id, declared.name, declared.url)
    return UnknownLicense(declared.name, declared.url)


def classify_licenses(licenses, coordinate, rules=DEFAULT_RULES):
    return [classify_license(declared, coordinate, rules) for declared in licenses]
