"""
Storage-layer exceptions.

Routes never see raw SQLAlchemy errors from the service layer: faults are
re-raised as StorageError after the session is rolled back, and lookups that
must hit an existing row raise RecordNotFoundError.
"""


class StorageError(Exception):
    """A database operation failed (connection, constraint, or driver error)."""

    def __init__(self, operation: str, entity: str):
        self.operation = operation
        self.entity = entity
        super().__init__(f"Failed to {operation} {entity}")


class RecordNotFoundError(Exception):
    """The record addressed by id does not exist."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class InvalidChangeError(Exception):
    """A partial update would leave the stored record inconsistent."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
