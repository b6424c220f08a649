"""Bootstrap registry types, registry files, questions and answers."""

from __future__ import annotations

import enum
import json
import re
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlsplit

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_OPTIONAL_PORT = re.compile(r"(:[0-9]*)?")


class RegistryType(enum.Enum):
    """A bootstrap Service Registry."""

    DNS = "dns"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    ASN = "asn"
    SERVICE_PROVIDER = "serviceprovider"

    def __str__(self) -> str:
        return self.value

    def filename(self) -> str:
        """Return the registry's JSON document filename."""
        if self is RegistryType.SERVICE_PROVIDER:
            return "serviceprovider-draft-03.json"
        return f"{self.value}.json"


class BootstrapError(Exception):
    """Raised when bootstrapping fails or a registry document is malformed."""


@dataclass
class BootstrapFile:
    """A parsed bootstrap registry file."""

    description: str = ""
    publication: str = ""
    version: str = ""
    entries: dict[str, list[str]] = field(default_factory=dict)
    """Service entries mapped to their RDAP base URLs."""
    document: bytes = b""
    """The file's raw JSON document."""


@dataclass
class Answer:
    """The result of bootstrapping a single query."""

    query: str = ""
    """The query as looked up, after any canonicalisation."""
    entry: str = ""
    """The matching service entry; empty if nothing matched."""
    urls: list[str] = field(default_factory=list)
    """The RDAP base URLs."""


@dataclass
class Question:
    """A bootstrap query."""

    registry_type: RegistryType = RegistryType.DNS
    query: str = ""
    timeout: Optional[float] = None
    """Seconds to wait for any download the lookup needs; None waits forever."""


def _member(doc: dict[str, Any], name: str) -> Any:
    value = None
    for key, item in doc.items():
        if key.lower() == name:
            value = item
    return value


def _text(doc: dict[str, Any], name: str) -> str:
    value = _member(doc, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise BootstrapError(f"Malformed bootstrap ({name} is not a string)")
    return value


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        item is None or isinstance(item, str) for item in value
    ):
        raise BootstrapError("Malformed bootstrap (expected a list of strings)")
    return [item or "" for item in value]


def _valid_url(raw: str) -> bool:
    if _CONTROL_CHARS.search(raw) or raw.startswith(":") or _BAD_ESCAPE.search(raw):
        return False
    try:
        parts = urlsplit(raw)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        close = host.find("]")
        if close == -1:
            return False
        return _OPTIONAL_PORT.fullmatch(host[close + 1 :]) is not None
    colon = host.rfind(":")
    return colon == -1 or _OPTIONAL_PORT.fullmatch(host[colon:]) is not None


def parse_file(document: bytes | str) -> BootstrapFile:
    """Parse a bootstrap registry JSON document.

    URLs that cannot be parsed are ignored; entries left without any URL
    are dropped.
    """
    raw = document.encode() if isinstance(document, str) else bytes(document)
    try:
        doc = json.loads(raw)
    except ValueError as exc:
        raise BootstrapError(f"Invalid JSON: {exc}") from exc

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise BootstrapError("Malformed bootstrap (document is not an object)")

    services = _member(doc, "services")
    if services is None:
        services = []
    if not isinstance(services, list):
        raise BootstrapError("Malformed bootstrap (bad services array)")

    entries: dict[str, list[str]] = {}
    for service in services:
        if service is None:
            service = []
        if not isinstance(service, list) or len(service) != 2:
            raise BootstrapError("Malformed bootstrap (bad services array)")
        names = _string_list(service[0])
        urls = [url for url in _string_list(service[1]) if _valid_url(url)]
        if urls:
            for name in names:
                entries[name] = list(urls)

    return BootstrapFile(
        description=_text(doc, "description"),
        publication=_text(doc, "publication"),
        version=_text(doc, "version"),
        entries=entries,
        document=raw,
    )