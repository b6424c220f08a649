"""Bootstrap registry of Autonomous System numbers."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field

from rdapkit.registry_file import Answer, BootstrapError, BootstrapFile, Question, parse_file

_DIGITS = re.compile(r"[0-9]+")
_MAX_ASN = 0xFFFFFFFF


@dataclass
class ASNRange:
    """A range of AS numbers and their RDAP base URLs."""

    min_asn: int
    max_asn: int
    urls: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.min_asn == self.max_asn:
            return f"AS{self.min_asn}"
        return f"AS{self.min_asn}-AS{self.max_asn}"


def _parse_number(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise BootstrapError(f'invalid AS number "{text}"')
    value = int(text)
    if value > _MAX_ASN:
        raise BootstrapError(f'AS number "{text}" out of range')
    return value


def parse_asn(asn: str) -> int:
    """Parse an AS number such as "AS1234", "as1234" or "1234"."""
    return _parse_number(asn.lower().lstrip("as"))


def parse_asn_range(text: str) -> tuple[int, int]:
    """Parse "N" or "N-M" into an ordered (minimum, maximum) pair."""
    parts = text.split("-")
    if len(parts) not in (1, 2):
        raise BootstrapError("Malformed ASN range")
    low = _parse_number(parts[0])
    high = _parse_number(parts[1]) if len(parts) == 2 else low
    return (min(low, high), max(low, high))


class ASNRegistry:
    """Looks up RDAP base URLs for AS numbers."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self._file = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing ASN registry: {exc}") from exc

        ranges = []
        for text, urls in self._file.entries.items():
            try:
                low, high = parse_asn_range(text)
            except BootstrapError:
                continue
            ranges.append(ASNRange(low, high, urls))
        ranges.sort(key=lambda r: r.min_asn)
        self._ranges = ranges
        self._maxima = [r.max_asn for r in ranges]

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the AS number in *question*."""
        asn = parse_asn(question.query)
        index = bisect.bisect_left(self._maxima, asn)
        if index < len(self._ranges):
            match = self._ranges[index]
            if match.min_asn <= asn <= match.max_asn:
                return Answer(query=str(asn), entry=str(match), urls=list(match.urls))
        return Answer(query=str(asn))

    def file(self) -> BootstrapFile:
        """Return the registry's parsed document."""
        return self._file