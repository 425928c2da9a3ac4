"""
Read the dependency-license.xml report written by the dependency scanner.

    <dependencies>
      <dependency name="group:artifact:version">
        <file>artifact-version.jar</file>
        <license name="..." url="..."/>
      </dependency>
    </dependencies>

Structural translation only: nothing is filtered or classified here.
"""
import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from tpl.errors import InventoryError, MalformedCoordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleCoordinate:
    group: str
    artifact: str
    version: str

    @property
    def module_id(self):
        return f"{self.group}:{self.artifact}"

    def __str__(self):
        return f"{self.group}:{self.artifact}:{self.version}"


@dataclass(frozen=True)
class DeclaredLicense:
    name: str
    url: str | None = None


@dataclass(frozen=True)
class InventoryRecord:
    coordinate: ModuleCoordinate
    licenses: tuple[DeclaredLicense, ...] = ()


def parse_coordinate(text):
    parts = (text or "").split(":")
    if len(parts) != 3 or not all(parts):
        raise MalformedCoordinate(text)
    return ModuleCoordinate(parts[0], parts[1], parts[2])


def _optional(value):
    # the scanner writes url="" when it has nothing
    if value is None or value == "":
        return None
    return value


def _declared_licenses(element):
    return tuple(
        DeclaredLicense(name=lic.get("name") or "", url=_optional(lic.get("url")))
        for lic in element.iter("license")
    )


def parse_inventory(xml_text):
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise InventoryError(f"invalid dependency license report: {exc}") from exc
    records = []
    for dependency in root.iter("dependency"):
        coordinate = parse_coordinate(dependency.get("name"))
        records.append(InventoryRecord(coordinate, _declared_licenses(dependency)))
    return records


def load_inventory(path):
    if not os.path.isfile(path):
        raise InventoryError(f"dependency license report not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        xml_text = f.read()
    records = parse_inventory(xml_text)
    logger.info("read %d dependencies from %s", len(records), path)
    return records
