"""In-process fallback store, used when the database is unreachable at startup.

Collections mirror the relational tables column for column: column defaults
are applied on insert, and NOT NULL, UNIQUE and enum columns are enforced so that a
row this store accepts is one the database would accept too. Foreign keys are
not checked.
"""
import copy
import threading
from typing import Any

from sqlalchemy import Column, Table

from travelvibe.db.errors import ConstraintError, RecordNotFoundError
from travelvibe.db.store import Record, RecordStore
from travelvibe.db.tables import TABLE_NAMES


def loosely_equal(left: Any, right: Any) -> bool:
    """Equality that lets "3" match 3 and "45.0" match 45."""
    if left == right:
        return True
    if left is None or right is None:
        return False
    try:
        return float(left) == float(right)
    except (TypeError, ValueError):
        return str(left) == str(right)


def _column_default(col: Column) -> Any:
    default = col.default
    if default is None:
        return None
    if default.is_callable:
        # SQLAlchemy wraps zero-arg callables to take an execution context
        return default.arg(None)
    return default.arg


def _sort_key(field: str):
    def key(record: Record):
        value = record.get(field)
        return (value is None, value)
    return key


class MemoryStore(RecordStore):
    mode = "fallback"

    def __init__(self):
        self._collections: dict[str, list[Record]] = {name: [] for name in TABLE_NAMES}
        self._next_ids: dict[str, int] = {name: 1 for name in TABLE_NAMES}
        self._lock = threading.RLock()

    def _rows(self, table: str) -> list[Record]:
        self._table(table)
        return self._collections[table]

    def _index_of(self, rows: list[Record], record_id: Any) -> int:
        for i, row in enumerate(rows):
            if loosely_equal(row.get("id"), record_id):
                return i
        return -1

    def find_all(self, table: str) -> list[Record]:
        with self._lock:
            rows = self._rows(table)
            return [copy.copy(r) for r in sorted(rows, key=_sort_key("id"))]

    def find_by_id(self, table: str, record_id: Any) -> Record | None:
        with self._lock:
            rows = self._rows(table)
            i = self._index_of(rows, record_id)
            return copy.copy(rows[i]) if i >= 0 else None

    def find_where(self, table, where=None, like=None, order_by=None, descending=False):
        t = self._table(table)
        where = where or {}
        like = like or {}
        self._check_fields(t, list(where) + list(like) + ([order_by] if order_by else []))

        with self._lock:
            filtered = list(self._collections[table])
        for field, value in where.items():
            filtered = [r for r in filtered if loosely_equal(r.get(field), value)]
        for field, needle in like.items():
            needle = str(needle).lower()
            filtered = [r for r in filtered if r.get(field) is not None and needle in str(r[field]).lower()]

        filtered.sort(key=_sort_key("id"))
        if order_by:
            filtered.sort(key=_sort_key(order_by), reverse=descending)
        return [copy.copy(r) for r in filtered]

    def _check_row(self, t: Table, rows: list[Record], row: Record, skip: int = -1) -> None:
        for col in t.columns:
            value = row.get(col.key)
            if value is None and not col.nullable:
                raise ConstraintError(f"{t.name}.{col.key} may not be null")
            enums = getattr(col.type, "enums", None)
            if value is not None and enums and value not in enums:
                raise ConstraintError(f"{t.name}.{col.key} must be one of {', '.join(enums)}")
            if value is not None and (col.unique or col.primary_key):
                for i, other in enumerate(rows):
                    if i != skip and loosely_equal(other.get(col.key), value):
                        raise ConstraintError(f"duplicate value for {t.name}.{col.key}")

    def insert(self, table: str, data: Record) -> Record:
        t = self._table(table)
        self._check_fields(t, data)
        with self._lock:
            rows = self._collections[table]
            row = {col.key: _column_default(col) for col in t.columns}
            row.update(data)
            if row.get("id") is None:
                row["id"] = self._next_ids[table]
            self._check_row(t, rows, row)
            if isinstance(row["id"], int):
                self._next_ids[table] = max(self._next_ids[table], row["id"] + 1)
            rows.append(row)
            return copy.copy(row)

    def update(self, table: str, record_id: Any, data: Record) -> Record:
        t = self._table(table)
        self._check_fields(t, data)
        with self._lock:
            rows = self._collections[table]
            i = self._index_of(rows, record_id)
            if i < 0:
                raise RecordNotFoundError(table, record_id)
            merged = {**rows[i], **data}
            self._check_row(t, rows, merged, skip=i)
            rows[i] = merged
            return copy.copy(merged)

    def delete(self, table: str, record_id: Any) -> bool:
        with self._lock:
            rows = self._rows(table)
            i = self._index_of(rows, record_id)
            if i < 0:
                raise RecordNotFoundError(table, record_id)
            del rows[i]
            return True
