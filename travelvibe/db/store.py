"""Record store interface shared by the database and in-memory backends.

Records are plain dicts keyed by column name. Table and field names are
checked against the declared schema in ``travelvibe.db.tables`` before any
backend work happens, so both implementations reject the same inputs.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable

from sqlalchemy import Table

from travelvibe.db.errors import UnknownFieldError, UnknownTableError
from travelvibe.db.tables import TABLES

Record = dict[str, Any]


class RecordStore(ABC):
    mode: str = ""

    @abstractmethod
    def find_all(self, table: str) -> list[Record]:
        """Every record in ``table``, id ascending."""

    @abstractmethod
    def find_by_id(self, table: str, record_id: Any) -> Record | None:
        """The record whose id loosely equals ``record_id`` ("3" matches 3), else None."""

    @abstractmethod
    def find_where(
        self,
        table: str,
        where: dict[str, Any] | None = None,
        like: dict[str, str] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Record]:
        """Records matching every ``where`` value exactly and containing every
        ``like`` value case-insensitively. Ordered by ``order_by`` if given,
        otherwise by id."""

    @abstractmethod
    def insert(self, table: str, data: Record) -> Record:
        """Store a new record and return it with its resolved id and defaults."""

    @abstractmethod
    def update(self, table: str, record_id: Any, data: Record) -> Record:
        """Merge ``data`` into the record; RecordNotFoundError if absent."""

    @abstractmethod
    def delete(self, table: str, record_id: Any) -> bool:
        """Remove the record; RecordNotFoundError if absent."""

    def close(self) -> None:
        pass

    def _table(self, name: str) -> Table:
        try:
            return TABLES[name]
        except KeyError:
            raise UnknownTableError(name) from None

    def _check_fields(self, table: Table, fields: Iterable[str]) -> None:
        unknown = sorted(set(fields) - set(table.c.keys()))
        if unknown:
            raise UnknownFieldError(table.name, unknown)
