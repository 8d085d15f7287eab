"""Form store and migration exceptions."""


class FormStoreError(Exception):
    """Base exception for persistence operations."""


class CorruptRecordError(FormStoreError):
    """Raised when a stored JSON column cannot be decoded."""

    def __init__(self, table: str, record_id: int, column: str, message: str) -> None:
        self.table = table
        self.record_id = record_id
        self.column = column
        super().__init__(f"[{table}.{column} id={record_id}] {message}")


class MigrationError(FormStoreError):
    """Raised when a schema migration cannot run against the current database."""
