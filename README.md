# rdapkit

Find out which RDAP servers answer for a domain name, an IP address or
network, an autonomous system number or an entity handle.

IANA publishes Service Registry files (`dns.json`, `asn.json`, `ipv4.json`,
`ipv6.json`) that map parts of the namespace to RDAP base URLs. `rdapkit`
downloads these files, caches them in memory or on disk, and looks queries
up in them.

## Looking up a server

```python
from rdapkit.bootstrap import BootstrapClient
from rdapkit.registry_file import Question, RegistryType

client = BootstrapClient()
answer = client.lookup(Question(RegistryType.DNS, "example.br"))

print(answer.query)          # the query as looked up, e.g. "example.br"
print(answer.entry)          # the matching registry entry, e.g. "br"
for url in answer.urls:
    print(url)               # RDAP base URLs (strings) for that entry
```

`BootstrapClient` takes an optional `base_url` (default
`https://data.iana.org/rdap/`), a `cache`, a `requests.Session` as `session`,
and a `verbose` callback that receives progress messages. A `Question` may
carry a `timeout` in seconds, used for any download the lookup needs.

A client downloads each registry file the first time it is needed and then
reuses it for every later lookup. `client.download(RegistryType.ASN)` forces
a fresh copy. `client.asn()`, `client.dns()`, `client.ipv4()`,
`client.ipv6()` and `client.service_provider()` return the loaded registries,
or `None`, without downloading anything.

Queries are canonicalised before lookup:

- domain names are lower-cased and lose a trailing dot; the closest
  enclosing zone wins, down to the root zone `""`;
- `AS2856`, `as2856` and `2856` are the same AS number;
- IP lookups accept an address or a CIDR range (`192.0.2.0`,
  `2001:db8::/48`), and the longest matching network wins;
- entity handles such as `12345-VRSN` (or the older `12345~VRSN`) are looked
  up by their tag, `VRSN`, in the experimental service provider registry
  (`RegistryType.SERVICE_PROVIDER`, file `serviceprovider-draft-03.json`).

A query with no match gives an `Answer` with an empty `entry` and no URLs.
Malformed queries and documents, and failed downloads (including any status
other than 200), raise `rdapkit.registry_file.BootstrapError`.

When `base_url` is not the default, cached files are named with six
characters of a hash of the URL in front, e.g. `012def_dns.json`
(see `client.filename_for()`), so files from different services never mix.

## Caching

The default cache is a `MemoryCache` with a 24-hour timeout. To keep files
on disk instead:

```python
from pathlib import Path
from rdapkit.bootstrap import BootstrapClient
from rdapkit.cache import DiskCache

cache = DiskCache(Path.home() / ".rdapkit", 3600)
client = BootstrapClient(cache=cache)
```

`DiskCache()` with no directory uses `~/.openrdap`, created as needed.
Several clients may share one directory: a file saved by one of them, and
younger than the timeout, is reloaded by the others on their next lookup.
A client starting with a missing or expired file downloads it again.

`cache.state(filename)` returns a `FileState`: `ABSENT`, `GOOD`,
`SHOULD_RELOAD` or `EXPIRED`. Expired files can still be loaded. Cache
failures raise `rdapkit.cache.CacheError`.

## Using registry files directly

```python
from rdapkit.net_registry import NetRegistry
from rdapkit.registry_file import Question

registry = NetRegistry(document_bytes, 4)
answer = registry.lookup(Question(query="41.0.0.0"))
```

`ASNRegistry`, `DNSRegistry` and `ServiceProviderRegistry` work the same way
(without the IP version argument). `parse_file()` parses a registry document
into a `BootstrapFile`; each registry's `file()` returns it. Unparsable URLs
in a document are skipped.

## Other modules

- `rdapkit.errors` holds `ClientError`, tagged with a `ClientErrorType`, and
  `is_client_error()`.
- `rdapkit.common` holds the RDAP objects `Link`, `Notice`, `Remark`,
  `Event`, `PublicID` and `Common` as dataclasses, and `DecodeData`, which
  records raw field values, unknown fields and decoding notes.

## What this package does not do

It finds RDAP servers but does not query them: there is no RDAP request
client, no decoding of RDAP responses into these objects, no WHOIS-style or
text output, and no command-line tool.

## Tests

The `test` extra installs pytest and responses; the tests live in `tests/`
and make no network requests.