# authserver/core/errors.py


class StorageError(Exception):
    """Raised when the credential store cannot read or persist a record."""
