import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionRule:
    """Drops the product's own modules, except the one that ships as a distributed library."""

    namespace: str | None = None
    exception: str | None = None

    def excludes(self, coordinate):
        if not self.namespace:
            return False
        return coordinate.group.startswith(self.namespace) and coordinate.artifact != self.exception


def filter_records(records, rule):
    for record in records:
        if rule.excludes(record.coordinate):
            logger.debug("excluding first-party module %s", record.coordinate)
            continue
        yield record
