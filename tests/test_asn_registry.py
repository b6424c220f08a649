import json

import pytest

from rdapkit.asn_registry import ASNRange, ASNRegistry, parse_asn, parse_asn_range
from rdapkit.registry_file import BootstrapError, Question

ASN_DOCUMENT = json.dumps(
    {
        "description": "RDAP bootstrap file for Autonomous System Number allocations",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["1-7", "9-10"], ["https://rdap.example.net/"]],
            [["287"], ["https://rdap.arin.net/registry", "http://rdap.arin.net/registry"]],
            [["1768-1769"], ["https://rdap.apnic.net/"]],
            [["1877-1901", "2043"], ["https://rdap.db.ripe.net/"]],
            [["265629-266652"], ["https://rdap.lacnic.net/rdap/"]],
            [["bogus"], ["https://rdap.example.org/"]],
        ],
    }
).encode()


@pytest.fixture
def registry():
    return ASNRegistry(ASN_DOCUMENT)


@pytest.mark.parametrize(
    "query, entry, urls",
    [
        ("as287", "AS287", ["https://rdap.arin.net/registry", "http://rdap.arin.net/registry"]),
        ("As1768", "AS1768-AS1769", ["https://rdap.apnic.net/"]),
        ("266652", "AS265629-AS266652", ["https://rdap.lacnic.net/rdap/"]),
        ("999999", "", []),
        ("2043", "AS2043", ["https://rdap.db.ripe.net/"]),
        ("8", "", []),
    ],
)
def test_lookups(registry, query, entry, urls):
    answer = registry.lookup(Question(query=query))
    assert answer.entry == entry
    assert answer.urls == urls


def test_lookup_not_a_number(registry):
    with pytest.raises(BootstrapError):
        registry.lookup(Question(query="not-a-number"))


def test_lookup_canonical_query(registry):
    assert registry.lookup(Question(query="AS0287")).query == "287"


def test_bad_range_kept_in_file(registry):
    assert "bogus" in registry.file().entries
    assert registry.file().version == "1.0"


def test_malformed_document():
    with pytest.raises(BootstrapError, match="Error parsing ASN registry"):
        ASNRegistry(b"{")


@pytest.mark.parametrize("text, value", [("AS1234", 1234), ("as1234", 1234), ("1234", 1234), ("sa12", 12)])
def test_parse_asn(text, value):
    assert parse_asn(text) == value


@pytest.mark.parametrize("text", ["AS", "4294967296", "+5", "12a", ""])
def test_parse_asn_invalid(text):
    with pytest.raises(BootstrapError):
        parse_asn(text)


def test_parse_asn_range():
    assert parse_asn_range("5") == (5, 5)
    assert parse_asn_range("5-10") == (5, 10)
    assert parse_asn_range("10-5") == (5, 10)


@pytest.mark.parametrize("text", ["1-2-3", "x", "1-", "-1"])
def test_parse_asn_range_invalid(text):
    with pytest.raises(BootstrapError):
        parse_asn_range(text)


def test_asn_range_str():
    assert str(ASNRange(5, 5)) == "AS5"
    assert str(ASNRange(5, 9)) == "AS5-AS9"