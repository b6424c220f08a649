"""Bootstrap client: finds the RDAP servers that can answer a query.

IANA publishes Service Registry files for domain names, IP addresses and
AS numbers. The client downloads them on demand, keeps them in a cache,
and looks queries up in them.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Optional, Union
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from rdapkit.asn_registry import ASNRegistry
from rdapkit.cache import DEFAULT_TIMEOUT, CacheError, FileState, MemoryCache, RegistryCache
from rdapkit.dns_registry import DNSRegistry
from rdapkit.net_registry import NetRegistry
from rdapkit.registry_file import Answer, BootstrapError, Question, RegistryType
from rdapkit.service_provider_registry import ServiceProviderRegistry

DEFAULT_BASE_URL = "https://data.iana.org/rdap/"

Registry = Union[ASNRegistry, DNSRegistry, NetRegistry, ServiceProviderRegistry]


def new_registry(registry_type: RegistryType, document: bytes | str) -> Registry:
    """Build the registry of *registry_type* from its JSON *document*."""
    if registry_type is RegistryType.ASN:
        return ASNRegistry(document)
    if registry_type is RegistryType.DNS:
        return DNSRegistry(document)
    if registry_type is RegistryType.IPV4:
        return NetRegistry(document, 4)
    if registry_type is RegistryType.IPV6:
        return NetRegistry(document, 6)
    if registry_type is RegistryType.SERVICE_PROVIDER:
        return ServiceProviderRegistry(document)
    raise ValueError(f"Unknown registry type {registry_type!r}")


def _with_trailing_slash(url: str) -> str:
    parts = urlsplit(url)
    if parts.path and not parts.path.endswith("/"):
        parts = parts._replace(path=parts.path + "/")
    return urlunsplit(parts)


class BootstrapClient:
    """Downloads, caches and queries bootstrap Service Registry files.

    Registry files are downloaded only when missing from the cache, when the
    cache cannot be read, or when download() is called explicitly.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        cache: Optional[RegistryCache] = None,
        session: Optional[requests.Session] = None,
        verbose: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.base_url = base_url
        self.cache = cache if cache is not None else MemoryCache(DEFAULT_TIMEOUT)
        self.session = session if session is not None else requests.Session()
        self.verbose: Callable[[str], None] = verbose or (lambda text: None)
        self._registries: dict[RegistryType, Registry] = {}

    def filename_for(self, registry_type: RegistryType) -> str:
        """Return the cache filename for *registry_type*.

        Files from a non-default bootstrap service are prefixed with six
        characters of a hash of its URL, e.g. "012def_dns.json".
        """
        filename = registry_type.filename()
        if self.base_url != DEFAULT_BASE_URL:
            digest = hashlib.sha256(self.base_url.encode()).hexdigest()
            filename = f"{digest[:6]}_{filename}"
        return filename

    def download(self, registry_type: RegistryType, timeout: Optional[float] = None) -> None:
        """Download one registry file, cache it and refresh the registry."""
        url = urljoin(_with_trailing_slash(self.base_url), registry_type.filename())
        try:
            response = self.session.get(url, timeout=timeout)
        except requests.RequestException as exc:
            raise BootstrapError(f"Download of {url} failed: {exc}") from exc
        if response.status_code != 200:
            raise BootstrapError(
                f"Server returned non-200 status code: {response.status_code} {response.reason}"
            )
        document = response.content
        registry = new_registry(registry_type, document)
        try:
            self.cache.save(self.filename_for(registry_type), document)
        except CacheError as exc:
            raise BootstrapError(str(exc)) from exc
        self._registries[registry_type] = registry

    def _reload_from_cache(self, registry_type: RegistryType) -> None:
        document = self.cache.load(self.filename_for(registry_type))
        self._registries[registry_type] = new_registry(registry_type, document)

    def _freshen_from_cache(self, registry_type: RegistryType) -> None:
        if self.cache.state(self.filename_for(registry_type)) is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry_type)
            except (CacheError, BootstrapError):
                pass

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs that can answer *question*."""
        say = self.verbose
        registry_type = question.registry_type
        filename = self.filename_for(registry_type)

        say("  bootstrap: Looking up...")
        say(f"  bootstrap: Question type : {registry_type}")
        say(f"  bootstrap: Question query: {question.query}")

        state = self.cache.state(filename)
        say(f"  bootstrap: Cache state: {filename}: {state}")

        force_download = False
        if state is FileState.SHOULD_RELOAD:
            try:
                self._reload_from_cache(registry_type)
            except (CacheError, BootstrapError) as exc:
                force_download = True
                say(f"  bootstrap: Cache load error ({exc}), downloading...")

        if registry_type not in self._registries or force_download:
            say(f"  bootstrap: Downloading {registry_type.filename()}")
            self.download(registry_type, question.timeout)
        else:
            say("  bootstrap: Using cached Service Registry file")

        answer = self._registries[registry_type].lookup(question)

        say(f"  bootstrap: Looked up '{answer.query}'")
        if answer.entry:
            say(f"  bootstrap: Matching entry '{answer.entry}'")
        else:
            say("  bootstrap: No match")
        for number, url in enumerate(answer.urls, start=1):
            say(f"  bootstrap: Service URL #{number}: '{url}'")

        return answer

    def _current(self, registry_type: RegistryType) -> Optional[Registry]:
        self._freshen_from_cache(registry_type)
        return self._registries.get(registry_type)

    def asn(self) -> Optional[ASNRegistry]:
        """Return the ASN registry, or None if not downloaded. Never downloads."""
        return self._current(RegistryType.ASN)  # type: ignore[return-value]

    def dns(self) -> Optional[DNSRegistry]:
        """Return the DNS registry, or None if not downloaded. Never downloads."""
        return self._current(RegistryType.DNS)  # type: ignore[return-value]

    def ipv4(self) -> Optional[NetRegistry]:
        """Return the IPv4 registry, or None if not downloaded. Never downloads."""
        return self._current(RegistryType.IPV4)  # type: ignore[return-value]

    def ipv6(self) -> Optional[NetRegistry]:
        """Return the IPv6 registry, or None if not downloaded. Never downloads."""
        return self._current(RegistryType.IPV6)  # type: ignore[return-value]

    def service_provider(self) -> Optional[ServiceProviderRegistry]:
        """Return the Service Provider registry, or None. Never downloads."""
        return self._current(RegistryType.SERVICE_PROVIDER)  # type: ignore[return-value]