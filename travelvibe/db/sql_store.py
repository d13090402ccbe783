import logging
from typing import Any

from sqlalchemy import Table, delete, select, update
from sqlalchemy.engine import Engine

from travelvibe.db.errors import RecordNotFoundError
from travelvibe.db.store import Record, RecordStore

logger = logging.getLogger(__name__)

_NO_KEY = object()


def _int_key(value: Any):
    # "1.0" names row 1, as it does for the in-memory store; 1.5 names nothing.
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return _NO_KEY
    return int(number) if number.is_integer() else _NO_KEY


class SqlStore(RecordStore):
    mode = "backed"

    def __init__(self, engine: Engine):
        self.engine = engine

    def _key(self, table: Table, record_id: Any):
        # Path ids arrive as strings; integer keys must be coerced or the
        # comparison fails on strict backends instead of matching nothing.
        python_type = table.c.id.type.python_type
        if isinstance(record_id, python_type):
            return record_id
        if python_type is int:
            return _int_key(record_id)
        try:
            return python_type(record_id)
        except (TypeError, ValueError):
            return _NO_KEY

    def _fetch(self, conn, table: Table, key) -> Record | None:
        row = conn.execute(select(table).where(table.c.id == key)).mappings().first()
        return dict(row) if row else None

    def find_all(self, table: str) -> list[Record]:
        t = self._table(table)
        with self.engine.connect() as conn:
            rows = conn.execute(select(t).order_by(t.c.id.asc())).mappings().all()
        return [dict(r) for r in rows]

    def find_by_id(self, table: str, record_id: Any) -> Record | None:
        t = self._table(table)
        key = self._key(t, record_id)
        if key is _NO_KEY:
            return None
        with self.engine.connect() as conn:
            return self._fetch(conn, t, key)

    def find_where(self, table, where=None, like=None, order_by=None, descending=False):
        t = self._table(table)
        where = where or {}
        like = like or {}
        self._check_fields(t, list(where) + list(like) + ([order_by] if order_by else []))

        stmt = select(t)
        for field, value in where.items():
            stmt = stmt.where(t.c[field] == value)
        for field, value in like.items():
            stmt = stmt.where(t.c[field].icontains(value, autoescape=True))
        if order_by:
            col = t.c[order_by]
            stmt = stmt.order_by(col.desc() if descending else col.asc(), t.c.id.asc())
        else:
            stmt = stmt.order_by(t.c.id.asc())

        with self.engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(r) for r in rows]

    def insert(self, table: str, data: Record) -> Record:
        t = self._table(table)
        self._check_fields(t, data)
        with self.engine.begin() as conn:
            result = conn.execute(t.insert().values(**data))
            key = result.inserted_primary_key[0]
            return self._fetch(conn, t, key)

    def update(self, table: str, record_id: Any, data: Record) -> Record:
        t = self._table(table)
        self._check_fields(t, data)
        key = self._key(t, record_id)
        if key is _NO_KEY:
            raise RecordNotFoundError(table, record_id)
        with self.engine.begin() as conn:
            if data:
                result = conn.execute(update(t).where(t.c.id == key).values(**data))
                if result.rowcount == 0:
                    raise RecordNotFoundError(table, record_id)
            row = self._fetch(conn, t, key)
        if row is None:
            raise RecordNotFoundError(table, record_id)
        return row

    def delete(self, table: str, record_id: Any) -> bool:
        t = self._table(table)
        key = self._key(t, record_id)
        if key is _NO_KEY:
            raise RecordNotFoundError(table, record_id)
        with self.engine.begin() as conn:
            result = conn.execute(delete(t).where(t.c.id == key))
        if result.rowcount == 0:
            raise RecordNotFoundError(table, record_id)
        return True

    def close(self) -> None:
        logger.info("Closing database pool")
        self.engine.dispose()
