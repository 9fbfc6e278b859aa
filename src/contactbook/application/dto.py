"""Result types for the add-contact use case."""

from dataclasses import dataclass

from contactbook.domain import Contact


@dataclass(frozen=True)
class ContactAdded:
    """Contact was created and the store was saved."""

    contact: Contact


@dataclass(frozen=True)
class Invalid:
    """Input was rejected (e.g. empty name or email). Nothing was saved."""

    reason: str
