"""
Report configuration: product name, legal contact, first-party exclusion,
priority ranking and the reviewed bare-BSD modules.

    product_name: Example Broker
    legal_contact: legal@hivemq.com
    exclusion:
      namespace: com.hivemq
      exception: hivemq-mqtt-client
    priority: [Apache-2.0, MIT, ...]
    bare_bsd_modules: [dk.brics:automaton, ...]
"""
import os
from dataclasses import dataclass

import yaml

from tpl.catalog import DEFAULT_PRIORITY, license_by_id
from tpl.errors import ConfigurationError
from tpl.exclusion import ExclusionRule
from tpl.rules import REVIEWED_BARE_BSD_MODULES, build_rules

DEFAULT_LEGAL_CONTACT = "legal@hivemq.com"
DEFAULT_NAMESPACE = "com.hivemq"
DEFAULT_EXCEPTION = "hivemq-mqtt-client"


@dataclass(frozen=True)
class ReportConfig:
    product_name: str | None
    legal_contact: str
    exclusion: ExclusionRule
    priority: tuple
    rules: tuple

    def with_overrides(self, product_name=None, legal_contact=None):
        return ReportConfig(
            product_name=product_name if product_name is not None else self.product_name,
            legal_contact=legal_contact if legal_contact is not None else self.legal_contact,
            exclusion=self.exclusion,
            priority=self.priority,
            rules=self.rules,
        )


def validate_product_name(name):
    if name is None or not str(name).strip():
        raise ConfigurationError("Project name is blank")
    return str(name)


def _normalize_config(payload):
    config = dict(payload or {})
    config.setdefault("product_name", None)
    config.setdefault("legal_contact", DEFAULT_LEGAL_CONTACT)
    exclusion = config.get("exclusion")
    if isinstance(exclusion, dict):
        exclusion = dict(exclusion)
        exclusion.setdefault("namespace", DEFAULT_NAMESPACE)
        exclusion.setdefault("exception", DEFAULT_EXCEPTION)
    elif exclusion is None and "exclusion" not in config:
        exclusion = {"namespace": DEFAULT_NAMESPACE, "exception": DEFAULT_EXCEPTION}
    config["exclusion"] = exclusion
    config.setdefault("priority", [member.catalog_id for member in DEFAULT_PRIORITY])
    config.setdefault("bare_bsd_modules", list(REVIEWED_BARE_BSD_MODULES))
    return config


def _validate_config(config):
    product_name = config.get("product_name")
    if product_name is not None and not isinstance(product_name, str):
        raise ConfigurationError("product_name must be a string")
    legal_contact = config.get("legal_contact")
    if not isinstance(legal_contact, str) or not legal_contact.strip():
        raise ConfigurationError("legal_contact must be a non-empty string")

    exclusion = config.get("exclusion")
    if exclusion is not None:
        if not isinstance(exclusion, dict):
            raise ConfigurationError("exclusion must be a mapping")
        for field in ("namespace", "exception"):
            value = exclusion.get(field)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"exclusion.{field} must be a string")

    priority = config.get("priority")
    if not isinstance(priority, list) or not priority:
        raise ConfigurationError("priority must be a non-empty list of license ids")
    seen = set()
    for catalog_id in priority:
        if license_by_id(catalog_id) is None:
            raise ConfigurationError(f"priority lists unknown license id: {catalog_id}")
        if catalog_id in seen:
            raise ConfigurationError(f"priority lists license id more than once: {catalog_id}")
        seen.add(catalog_id)

    modules = config.get("bare_bsd_modules")
    if not isinstance(modules, list):
        raise ConfigurationError("bare_bsd_modules must be a list")
    for module_id in modules:
        parts = str(module_id).split(":")
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(f"bare_bsd_modules entry must be group:artifact, got {module_id}")
    return config


def build_config(payload=None):
    config = _validate_config(_normalize_config(payload))
    exclusion = config["exclusion"] or {}
    return ReportConfig(
        product_name=config["product_name"],
        legal_contact=config["legal_contact"],
        exclusion=ExclusionRule(exclusion.get("namespace"), exclusion.get("exception")),
        priority=tuple(license_by_id(catalog_id) for catalog_id in config["priority"]),
        rules=build_rules(tuple(config["bare_bsd_modules"])),
    )


def load_config(path=None):
    path = path or os.environ.get("TPL_CONFIG")
    if not path:
        return build_config()
    if not os.path.isfile(path):
        raise ConfigurationError(f"config not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid config {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"config {path} must be a mapping")
    return build_config(payload)
