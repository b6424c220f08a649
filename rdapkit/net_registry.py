"""Bootstrap registries of IPv4 and IPv6 address blocks."""

from __future__ import annotations

import ipaddress
import re
from typing import Union

from rdapkit.registry_file import Answer, BootstrapError, BootstrapFile, Question, parse_file

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

_ADDRESS_BITS = {4: 32, 6: 128}
_DIGITS = re.compile(r"[0-9]+")


def _parse_cidr(text: str) -> IPNetwork:
    address, slash, prefix = text.partition("/")
    if not slash or not _DIGITS.fullmatch(prefix) or "%" in address:
        raise ValueError(f"invalid CIDR address: {text}")
    ip = ipaddress.ip_address(address)
    length = int(prefix)
    if length > ip.max_prefixlen:
        raise ValueError(f"invalid CIDR address: {text}")
    return ipaddress.ip_network((ip, length), strict=False)


class NetRegistry:
    """Looks up RDAP base URLs for IP addresses and CIDR ranges."""

    def __init__(self, document: bytes | str, ip_version: int) -> None:
        if ip_version not in _ADDRESS_BITS:
            raise BootstrapError(f"Unknown IP version {ip_version}")
        try:
            self._file = parse_file(document)
        except BootstrapError as exc:
            raise BootstrapError(f"Error parsing net registry file: {exc}") from exc

        self._version = ip_version
        # Prefix length -> network -> RDAP base URLs.
        self._networks: dict[int, dict[IPNetwork, list[str]]] = {}
        for cidr, urls in self._file.entries.items():
            try:
                network = _parse_cidr(cidr)
            except ValueError:
                continue
            if network.version != ip_version:
                continue
            self._networks.setdefault(network.prefixlen, {})[network] = urls

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs of the longest matching network.

        Queries look like "192.0.2.0", "192.0.2.0/25" or "2001:db8::/62".
        """
        query = question.query
        if "/" not in query:
            query = f"{query}/{_ADDRESS_BITS[self._version]}"
        try:
            wanted = _parse_cidr(query)
        except ValueError as exc:
            raise BootstrapError(str(exc)) from exc
        if wanted.version != self._version:
            raise BootstrapError("Lookup address has wrong IP protocol")

        for length in sorted(self._networks, reverse=True):
            if length > wanted.prefixlen:
                continue
            candidate = ipaddress.ip_network((wanted.network_address, length), strict=False)
            urls = self._networks[length].get(candidate)
            if urls is not None:
                return Answer(query=query, entry=str(candidate), urls=list(urls))
        return Answer(query=query)

    def file(self) -> BootstrapFile:
        """Return the registry's parsed document."""
        return self._file