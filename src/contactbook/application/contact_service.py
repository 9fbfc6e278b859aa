"""Contact creation and listing over a ContactStore."""

import logging

from contactbook.application.dto import ContactAdded, Invalid
from contactbook.application.ports import ContactStore
from contactbook.domain import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """Each call loads the collection, applies one operation and saves on mutation."""

    def __init__(self, store: ContactStore) -> None:
        self._store = store

    def add_contact(
        self, name: str, email: str, phone: str | None = None
    ) -> ContactAdded | Invalid:
        """Add a contact and save. Returns invalid (and saves nothing) on empty name or email."""
        if not (name or "").strip():
            return Invalid(reason="Name is required.")
        if not (email or "").strip():
            return Invalid(reason="Email is required.")

        contacts = self._store.load()
        try:
            contact = self._store.add(contacts, name, email, phone)
        except ValueError as exc:
            return Invalid(reason=str(exc))

        self._store.save(contacts)
        logger.info("Added contact %s (%d total)", contact.id, len(contacts))
        return ContactAdded(contact=contact)

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in stored order."""
        return list(self._store.load())
