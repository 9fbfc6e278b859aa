"""
Contactbook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactStore), DTOs, errors.
- infrastructure: adapters (JsonContactStore, InMemoryContactStore).
"""

from contactbook.application import (
    ContactAdded,
    ContactBookError,
    ContactService,
    ContactStore,
    FormatError,
    Invalid,
    StoreIOError,
    UsageError,
)
from contactbook.domain import Contact
from contactbook.infrastructure import InMemoryContactStore, JsonContactStore

__all__ = [
    "Contact",
    "ContactAdded",
    "ContactBookError",
    "ContactService",
    "ContactStore",
    "FormatError",
    "InMemoryContactStore",
    "Invalid",
    "JsonContactStore",
    "StoreIOError",
    "UsageError",
]
