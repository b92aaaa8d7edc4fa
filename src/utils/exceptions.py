"""Custom exception classes."""


class StoreError(Exception):
    """Raised when the registration store cannot be read or written."""
    pass
