"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.json_store import DEFAULT_FILENAME, JsonContactStore
from contactbook.infrastructure.memory_store import InMemoryContactStore
from contactbook.infrastructure.phone import normalize_phone, phone_for_storage

__all__ = [
    "DEFAULT_FILENAME",
    "InMemoryContactStore",
    "JsonContactStore",
    "normalize_phone",
    "phone_for_storage",
]
