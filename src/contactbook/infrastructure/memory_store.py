"""In-memory implementation of ContactStore (no file)."""

from contactbook.domain import Contact
from contactbook.infrastructure.phone import phone_for_storage


class InMemoryContactStore:
    """Holds the collection in memory. Order preserved by insertion.
    save_count tells tests whether a use case persisted anything.
    """

    def __init__(
        self,
        contacts: list[Contact] | None = None,
        *,
        phone_region: str | None = None,
    ) -> None:
        self._contacts: list[Contact] = list(contacts or [])
        self._phone_region = phone_region
        self.save_count = 0

    def load(self) -> list[Contact]:
        return list(self._contacts)

    def save(self, contacts: list[Contact]) -> None:
        self._contacts = list(contacts)
        self.save_count += 1

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
