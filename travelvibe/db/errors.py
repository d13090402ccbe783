class StoreError(Exception):
    """Base for record store failures that are not plain database errors."""


class RecordNotFoundError(StoreError):
    def __init__(self, table: str, record_id):
        self.table = table
        self.record_id = record_id
        super().__init__(f"{table}: no record with id {record_id!r}")


class InvalidQueryError(StoreError):
    pass


class UnknownTableError(InvalidQueryError):
    def __init__(self, table: str):
        self.table = table
        super().__init__(f"unknown table {table!r}")


class UnknownFieldError(InvalidQueryError):
    def __init__(self, table: str, fields: list[str]):
        self.table = table
        self.fields = fields
        super().__init__(f"unknown field(s) for {table}: {', '.join(fields)}")


class ConstraintError(StoreError):
    """Raised by the in-memory store where the database would reject a row."""
