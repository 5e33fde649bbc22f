# File: swatches/db/store.py

"""
Table-level access to the relational store.

The routes only ever need four primitives per table:

  - select every row
  - select rows where one column equals a value
  - insert a row and get its generated primary key back
  - delete rows where one column equals a value, reporting how many went

Rows travel in and out as plain dicts keyed by column name. Any
SQLAlchemy failure (or a value the driver cannot bind, such as an int past
SQLite's 64-bit range) rolls the session back and is re-raised as
StoreError, carrying the driver's own message.
"""

import logging
from typing import Any, Mapping

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from swatches.core.errors import StoreError
from swatches.models.base import Base

# registers the tables on Base.metadata
from swatches.models import palette, project  # noqa: F401

logger = logging.getLogger(__name__)

# sqlite3 raises OverflowError itself, outside the DB-API error tree
STORE_FAILURES = (SQLAlchemyError, OverflowError)


class Store:
    def __init__(self, db: Session):
        self.db = db

    def select_all(self, table: str) -> list[dict[str, Any]]:
        t = self._table(table)
        stmt = select(t)
        return self._fetch(stmt, f"select {table}")

    def select_where(self, table: str, column: str, value: Any) -> list[dict[str, Any]]:
        t = self._table(table)
        stmt = select(t).where(t.c[column] == value)
        return self._fetch(stmt, f"select {table} by {column}")

    def insert_returning_id(self, table: str, row: Mapping[str, Any]) -> int:
        t = self._table(table)
        # unknown keys are left for the database to reject
        stmt = insert(t).values(**row).returning(t.c.id)
        try:
            new_id = self.db.execute(stmt).scalar_one()
            self.db.commit()
        except STORE_FAILURES as exc:
            self._fail(exc, f"insert into {table}")
        return new_id

    def delete_where(self, table: str, column: str, value: Any) -> int:
        t = self._table(table)
        stmt = delete(t).where(t.c[column] == value)
        try:
            count = self.db.execute(stmt).rowcount
            self.db.commit()
        except STORE_FAILURES as exc:
            self._fail(exc, f"delete from {table}")
        return count

    # -----------------------------
    # helpers
    # -----------------------------

    def _table(self, name: str) -> Table:
        return Base.metadata.tables[name]

    def _fetch(self, stmt, operation: str) -> list[dict[str, Any]]:
        try:
            rows = self.db.execute(stmt).mappings().all()
        except STORE_FAILURES as exc:
            self._fail(exc, operation)
        return [dict(r) for r in rows]

    def _fail(self, exc: Exception, operation: str):
        self.db.rollback()
        # the DB-API error without SQLAlchemy's statement and parameters
        message = str(getattr(exc, "orig", None) or exc)
        logger.error("Store failure during %s: %s", operation, message)
        raise StoreError(message, operation) from exc
