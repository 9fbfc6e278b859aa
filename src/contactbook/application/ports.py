"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactStore(Protocol):
    """Loads, extends and persists the whole contact collection."""

    def load(self) -> list[Contact]:
        """Return all contacts in stored order. Empty list when nothing is stored yet."""
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Replace the stored collection with contacts."""
        ...

    def add(
        self,
        contacts: list[Contact],
        name: str,
        email: str,
        phone: str | None = None,
    ) -> Contact:
        """Create a contact with a fresh id, append it to contacts and return it."""
        ...
