"""RDAP objects shared by all responses, and per-object decode data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


class DecodeData:
    """A snapshot of every field of a decoded RDAP object.

    Keeps the raw values of known and unknown fields, and minor warnings
    raised while decoding. Names are RDAP field names, e.g. "port43".
    """

    def __init__(self) -> None:
        self._known: set[str] = set()
        self._values: dict[str, Any] = {}
        self._notes: dict[str, list[str]] = {}

    def record(self, name: str, value: Any, known: bool = True) -> None:
        """Store the raw *value* of field *name*."""
        self._values[name] = value
        if known:
            self._known.add(name)
        else:
            self._known.discard(name)

    def add_note(self, name: str, note: str) -> None:
        """Attach a decoding warning to field *name*."""
        self._notes.setdefault(name, []).append(note)

    def notes(self, name: str) -> list[str]:
        """Return the warnings recorded for field *name*."""
        return list(self._notes.get(name, []))

    def value(self, name: str) -> Any:
        """Return the raw value of field *name*, or None."""
        return self._values.get(name)

    def fields(self) -> list[str]:
        """Return the names of all decoded fields, known and unknown."""
        return list(self._values)

    def unknown_fields(self) -> list[str]:
        """Return the names of decoded fields that are not known."""
        return [name for name in self._values if name not in self._known]

    def __str__(self) -> str:
        lines = "".join(
            f"\n !!!{name}: {note}"
            for name, notes in self._notes.items()
            for note in notes
        )
        return f"[{lines}\n"


@dataclass
class Link:
    """A link to another resource."""

    value: str = ""
    rel: str = ""
    href: str = ""
    hreflang: list[str] = field(default_factory=list)
    title: str = ""
    media: str = ""
    type: str = ""
    decode_data: Optional[DecodeData] = None


@dataclass
class Notice:
    """Information about an entire RDAP response."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: Optional[DecodeData] = None


@dataclass
class Remark:
    """Information about the containing RDAP object."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: Optional[DecodeData] = None


@dataclass
class Event:
    """An event that has occurred or may occur."""

    action: str = ""
    actor: str = ""
    date: str = ""
    links: list[Link] = field(default_factory=list)
    decode_data: Optional[DecodeData] = None


@dataclass
class PublicID:
    """A public identifier mapped to an object class."""

    type: str = ""
    identifier: str = ""
    decode_data: Optional[DecodeData] = None


@dataclass
class Common:
    """Fields that may appear anywhere in an RDAP response."""

    lang: str = ""