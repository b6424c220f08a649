"""Bootstrap registry of service provider tags (experimental object tags)."""

from __future__ import annotations

from rdapkit.registry_file import Answer, BootstrapError, BootstrapFile, Question, parse_file


class ServiceProviderRegistry:
    """Looks up RDAP base URLs for entity handles by their service tag."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self._file = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing Service Provider bootstrap: {exc}") from exc
        self._services = self._file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the tag of an entity handle.

        For "53774930-VRSN" the URLs for "VRSN" are returned. The older
        "~VRSN" form is also accepted. Missing or unknown tags give an
        answer without URLs.
        """
        query = question.query
        offset = query.rfind("~")
        if offset == -1:
            offset = query.rfind("-")
        if offset == -1 or offset == len(query) - 1:
            return Answer(query=query)

        service = query[offset + 1 :]
        urls = self._services.get(service)
        if urls is None:
            return Answer(query=query)
        return Answer(query=query, entry=service, urls=list(urls))

    def file(self) -> BootstrapFile:
        """Return the registry's parsed document."""
        return self._file