"""Bootstrap registry of DNS zones."""

from __future__ import annotations

from rdapkit.registry_file import Answer, BootstrapError, BootstrapFile, Question, parse_file


class DNSRegistry:
    """Looks up RDAP base URLs for domain names."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self._file = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing DNS bootstrap: {exc}") from exc
        self._zones = self._file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs of the closest enclosing zone.

        For "an.example.com" the zones "an.example.com", "example.com",
        "com" and finally the root zone "" are tried in turn.
        """
        query = question.query.removesuffix(".").lower()
        zone = query
        while True:
            urls = self._zones.get(zone)
            if urls is not None or zone == "":
                break
            zone = zone.partition(".")[2]
        return Answer(query=query, entry=zone, urls=list(urls or []))

    def file(self) -> BootstrapFile:
        """Return the registry's parsed document."""
        return self._file