"""Application layer: use cases, ports, DTOs and errors. Depends only on domain."""

from contactbook.application.contact_service import ContactService
from contactbook.application.dto import ContactAdded, Invalid
from contactbook.application.errors import (
    ContactBookError,
    FormatError,
    StoreIOError,
    UsageError,
)
from contactbook.application.ports import ContactStore

__all__ = [
    "ContactAdded",
    "ContactBookError",
    "ContactService",
    "ContactStore",
    "FormatError",
    "Invalid",
    "StoreIOError",
    "UsageError",
]
