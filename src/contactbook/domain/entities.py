"""Domain entities: Contact."""

import uuid
from dataclasses import dataclass, field

# Upper bounds on stored field lengths, in characters.
NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 320
PHONE_MAX_LENGTH = 50


@dataclass(frozen=True)
class Contact:
    """
    A person the user keeps an email address (and maybe a phone) for.
    The id is generated once at creation and never changes.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    email: str = field(default="")
    phone: str | None = None

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValueError("Contact id must be non-empty.")

        if not self.name or not self.name.strip():
            raise ValueError("Contact name must be non-empty.")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError(f"Contact name must be at most {NAME_MAX_LENGTH} chars.")

        if not self.email or not self.email.strip():
            raise ValueError("Contact email must be non-empty.")
        if len(self.email) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Contact email must be at most {EMAIL_MAX_LENGTH} chars.")

        if self.phone is not None and len(self.phone) > PHONE_MAX_LENGTH:
            raise ValueError(f"Contact phone must be at most {PHONE_MAX_LENGTH} chars.")
