import json

import pytest

from rdapkit.registry_file import BootstrapError, Question
from rdapkit.service_provider_registry import ServiceProviderRegistry

DOCUMENT = json.dumps(
    {
        "description": "RDAP bootstrap file for service provider object tags",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["VRSN"], ["https://rdap.verisignlabs.com/rdap/v1"]],
        ],
    }
).encode()

VRSN = ["https://rdap.verisignlabs.com/rdap/v1"]


@pytest.mark.parametrize(
    "query, entry, urls",
    [
        ("", "", []),
        ("~", "", []),
        ("X~VRSN~", "", []),
        ("12345~VRSN", "VRSN", VRSN),
        ("*~VRSN", "VRSN", VRSN),
        ("~VRSN", "VRSN", VRSN),
        ("12345-VRSN", "VRSN", VRSN),
        ("*-VRSN", "VRSN", VRSN),
        ("-VRSN", "VRSN", VRSN),
        ("A-B-VRSN", "VRSN", VRSN),
        ("12345-UNKNOWN", "", []),
    ],
)
def test_lookups(query, entry, urls):
    answer = ServiceProviderRegistry(DOCUMENT).lookup(Question(query=query))
    assert answer.entry == entry
    assert answer.urls == urls
    assert answer.query == query


def test_file_exposes_entries():
    assert ServiceProviderRegistry(DOCUMENT).file().entries == {"VRSN": VRSN}


def test_malformed_document():
    with pytest.raises(BootstrapError, match="Error parsing Service Provider bootstrap"):
        ServiceProviderRegistry(b'{"services": [["VRSN"]]}')