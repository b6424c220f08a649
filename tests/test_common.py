from rdapkit.common import Common, DecodeData, Event, Link, Notice, PublicID, Remark


def test_values_round_trip():
    dd = DecodeData()
    dd.record("port43", "whois.example.com")
    dd.record("handle", "EXAMPLECOM")
    assert dd.value("port43") == "whois.example.com"
    assert dd.value("handle") == "EXAMPLECOM"
    assert dd.value("missing") is None


def test_fields_and_unknown_fields():
    dd = DecodeData()
    dd.record("handle", "EXAMPLECOM", known=True)
    dd.record("custom", {"a": 1}, known=False)
    assert sorted(dd.fields()) == ["custom", "handle"]
    assert dd.unknown_fields() == ["custom"]
    assert set(dd.unknown_fields()) <= set(dd.fields())


def test_rerecord_as_known():
    dd = DecodeData()
    dd.record("status", ["active"], known=False)
    dd.record("status", ["active"], known=True)
    assert dd.unknown_fields() == []
    assert dd.value("status") == ["active"]


def test_notes():
    dd = DecodeData()
    assert dd.notes("port43") == []
    dd.add_note("port43", "invalid JSON type, expecting float")
    dd.add_note("port43", "second")
    assert dd.notes("port43") == ["invalid JSON type, expecting float", "second"]
    assert dd.notes("handle") == []


def test_notes_are_copies():
    dd = DecodeData()
    dd.add_note("lang", "bad")
    dd.notes("lang").append("extra")
    assert dd.notes("lang") == ["bad"]


def test_str_lists_notes():
    dd = DecodeData()
    assert str(dd) == "[\n"
    dd.add_note("port43", "invalid JSON type, expecting float")
    assert str(dd) == "[\n !!!port43: invalid JSON type, expecting float\n"


def test_dataclass_defaults_are_independent():
    a = Notice()
    b = Notice()
    a.description.append("text")
    assert b.description == []
    r = Remark(title="t", links=[Link(href="https://example.com")])
    assert r.links[0].href == "https://example.com"
    assert Link().hreflang == []


def test_event_and_public_id_fields():
    e = Event(action="registration", date="2017-01-01T00:00:00Z")
    assert e.action == "registration"
    assert e.decode_data is None
    p = PublicID(type="IANA Registrar ID", identifier="1")
    assert p.identifier == "1"
    assert Common(lang="en").lang == "en"