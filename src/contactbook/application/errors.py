"""Errors surfaced to the user. None of them is retried."""


class ContactBookError(Exception):
    """Base class for contactbook errors."""


class StoreIOError(ContactBookError):
    """The contacts file could not be read or written."""


class FormatError(ContactBookError):
    """The contacts file does not hold a valid list of contact records."""


class UsageError(ContactBookError):
    """Bad or missing command-line arguments."""
