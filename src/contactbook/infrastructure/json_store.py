"""JSON file implementation of ContactStore.

The file holds one JSON array of records:
    [{"id": "<uuid>", "name": "...", "email": "..."}, ...]
with an optional "phone" string per record. The whole array is read on load
and rewritten on save. There is no locking; one process per file.
"""

import json
import logging
import os
import tempfile
import uuid
from pathlib import Path

from contactbook.application.errors import FormatError, StoreIOError
from contactbook.domain import Contact
from contactbook.infrastructure.phone import phone_for_storage

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "contacts.json"


def _contact_to_record(contact: Contact) -> dict:
    record = {"id": contact.id, "name": contact.name, "email": contact.email}
    if contact.phone is not None:
        record["phone"] = contact.phone
    return record


def _record_to_contact(record: object, index: int) -> Contact:
    if not isinstance(record, dict):
        raise FormatError(f"record {index} is not an object")
    for key in ("id", "name", "email"):
        if not isinstance(record.get(key), str):
            raise FormatError(f"record {index} has no string '{key}'")
    phone = record.get("phone")
    if phone is not None and not isinstance(phone, str):
        raise FormatError(f"record {index} has a non-string 'phone'")
    try:
        uuid.UUID(record["id"])
        return Contact(
            id=record["id"],
            name=record["name"],
            email=record["email"],
            phone=phone,
        )
    except ValueError as exc:
        raise FormatError(f"record {index} is invalid: {exc}") from exc


class JsonContactStore:
    """Stores the contact collection in a JSON file at an explicit path."""

    def __init__(
        self,
        path: str | os.PathLike = DEFAULT_FILENAME,
        *,
        phone_region: str | None = None,
    ) -> None:
        self._path = Path(path)
        self._phone_region = phone_region

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Contact]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No contacts file at %s, starting empty", self._path)
            return []
        except OSError as exc:
            raise StoreIOError(f"cannot read {self._path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise FormatError(f"{self._path} is not UTF-8 text") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise FormatError(f"{self._path} is not valid JSON: {exc}") from exc
        except RecursionError as exc:
            raise FormatError(f"{self._path} is nested too deeply") from exc
        if not isinstance(data, list):
            raise FormatError(f"{self._path} does not hold a JSON array")

        contacts = []
        seen_ids: set[str] = set()
        for i, record in enumerate(data):
            contact = _record_to_contact(record, i)
            if contact.id in seen_ids:
                raise FormatError(f"record {i} repeats id {contact.id}")
            seen_ids.add(contact.id)
            contacts.append(contact)
        logger.info("Loaded %d contacts from %s", len(contacts), self._path)
        return contacts

    def save(self, contacts: list[Contact]) -> None:
        payload = json.dumps(
            [_contact_to_record(c) for c in contacts], indent=2, ensure_ascii=False
        )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # mkstemp creates the file owner read/write only (0o600).
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload + "\n")
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, self._path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StoreIOError(f"cannot write {self._path}: {exc.strerror or exc}") from exc
        logger.info("Saved %d contacts to %s", len(contacts), self._path)

    def add(
        self,
        contacts: list[Contact],
        name: str,
        email: str,
        phone: str | None = None,
    ) -> Contact:
        contact = Contact(
            name=(name or "").strip(),
            email=(email or "").strip(),
            phone=phone_for_storage(phone, self._phone_region),
        )
        contacts.append(contact)
        return contact
