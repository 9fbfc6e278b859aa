"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contactbook.domain.entities import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    Contact,
)

__all__ = ["Contact", "EMAIL_MAX_LENGTH", "NAME_MAX_LENGTH", "PHONE_MAX_LENGTH"]
