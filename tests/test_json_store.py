"""Tests for JsonContactStore against files under tmp_path."""

import json
import os
import stat
import uuid

import pytest

from contactbook.application import FormatError, StoreIOError
from contactbook.domain import Contact
from contactbook.infrastructure import JsonContactStore


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_file_loads_empty(tmp_path):
    store = JsonContactStore(tmp_path / "contacts.json")
    assert store.load() == []
    assert not (tmp_path / "contacts.json").exists()


def test_add_save_load(tmp_path):
    path = tmp_path / "contacts.json"
    store = JsonContactStore(path)
    contacts = store.load()
    added = store.add(contacts, "Alice", "alice@example.com")
    store.save(contacts)

    assert JsonContactStore(path).load() == [added]
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"id": added.id, "name": "Alice", "email": "alice@example.com"}
    ]


def test_phone_is_written_only_when_present(tmp_path):
    path = tmp_path / "contacts.json"
    store = JsonContactStore(path)
    contacts = []
    store.add(contacts, "Alice", "alice@example.com", "+1 202 555 1234")
    store.add(contacts, "Bob", "bob@example.com")
    store.save(contacts)

    records = json.loads(path.read_text(encoding="utf-8"))
    assert records[0]["phone"] == "+12025551234"
    assert "phone" not in records[1]


def test_save_of_load_preserves_content(tmp_path):
    path = tmp_path / "contacts.json"
    original = [
        {"id": str(uuid.uuid4()), "name": "Zed", "email": "zed@example.com"},
        {"id": str(uuid.uuid4()), "name": "Amy", "email": "amy@example.com"},
        {
            "id": str(uuid.uuid4()),
            "name": "Bo",
            "email": "bo@example.com",
            "phone": "+12025551234",
        },
    ]
    _write(path, original)

    store = JsonContactStore(path)
    store.save(store.load())

    assert json.loads(path.read_text(encoding="utf-8")) == original


def test_null_phone_is_read_as_absent(tmp_path):
    path = tmp_path / "contacts.json"
    contact_id = str(uuid.uuid4())
    _write(path, [{"id": contact_id, "name": "A", "email": "a@x", "phone": None}])
    assert JsonContactStore(path).load() == [
        Contact(id=contact_id, name="A", email="a@x")
    ]


def test_ids_are_unique(tmp_path):
    store = JsonContactStore(tmp_path / "contacts.json")
    contacts = []
    first = store.add(contacts, "Alice", "alice@example.com")
    second = store.add(contacts, "Alice", "alice@example.com")
    assert first.id != second.id


@pytest.mark.parametrize(
    "content",
    [
        '[{"id": "',
        "",
        '{"id": "x"}',
        '["not an object"]',
        '[{"name": "A", "email": "a@x"}]',
        '[{"id": "not-a-uuid", "name": "A", "email": "a@x"}]',
        '[{"id": "3f2b8c1e-1111-4222-8333-444455556666", "name": "", "email": "a@x"}]',
        '[{"id": "3f2b8c1e-1111-4222-8333-444455556666", "name": "A", "email": 5}]',
        '[{"id": "3f2b8c1e-1111-4222-8333-444455556666", "name": "A", "email": "a@x", "phone": 7}]',
        pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
        pytest.param(
            json.dumps([{"id": str(uuid.uuid4()), "name": "n" * 201, "email": "a@x"}]),
            id="name-too-long",
        ),
        pytest.param(
            '[{"id": "3f2b8c1e-1111-4222-8333-444455556666", "name": "A", "email": "a@x"},'
            ' {"id": "3f2b8c1e-1111-4222-8333-444455556666", "name": "B", "email": "b@x"}]',
            id="repeated-id",
        ),
    ],
)
def test_malformed_content_raises_format_error(tmp_path, content):
    path = tmp_path / "contacts.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(FormatError):
        JsonContactStore(path).load()
    assert path.read_text(encoding="utf-8") == content


def test_unreadable_path_raises_store_io_error(tmp_path):
    with pytest.raises(StoreIOError):
        JsonContactStore(tmp_path).load()


def test_unwritable_path_raises_store_io_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonContactStore(blocker / "contacts.json")
    with pytest.raises(StoreIOError):
        store.save([Contact(name="A", email="a@x")])


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "contacts.json"
    JsonContactStore(path).save([])
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_save_leaves_no_temp_files(tmp_path):
    path = tmp_path / "contacts.json"
    store = JsonContactStore(path)
    store.save([Contact(name="A", email="a@x")])
    store.save([])
    assert [p.name for p in tmp_path.iterdir()] == ["contacts.json"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_saved_file_is_owner_only(tmp_path):
    path = tmp_path / "contacts.json"
    JsonContactStore(path).save([Contact(name="A", email="a@x")])
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
