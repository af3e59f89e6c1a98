"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class DecodeError(PersistenceError):
    """Raised when a stored record cannot be turned into a domain model."""

    def __init__(self, document_id: str, reason: str):
        self.document_id = document_id
        super().__init__(f"Cannot decode document {document_id}: {reason}")
