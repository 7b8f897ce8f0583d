"""
Generic SQLite repository.

``BaseRepository`` implements primary-key CRUD and paginated listing
for a single table.  Subclasses declare the table name, the model used
for rows, the writable columns and the columns a client may sort by.
Each method opens its own connection, so every call runs in its own
transaction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from furrymatch_api.app.core.db import SQLITE_MAX_INTEGER, get_connection

T = TypeVar("T", bound=BaseModel)

SORT_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}


@dataclass
class PageRequest:
    """Zero-based page number, page size and sort orders."""

    page: int = 0
    size: int = 20
    sort: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def offset(self) -> int:
        # Clamped to SQLite's integer range; such a page is empty anyway.
        return min(self.page * self.size, SQLITE_MAX_INTEGER)

    @classmethod
    def parse_sort(cls, values: Optional[List[str]]) -> List[Tuple[str, str]]:
        """Parse ``field[,asc|desc]`` strings into ``(field, direction)`` pairs.

        A missing or unknown direction means ascending.  Blank entries
        are dropped.
        """
        orders: List[Tuple[str, str]] = []
        for value in values or []:
            parts = [p.strip() for p in value.split(",") if p.strip()]
            if not parts:
                continue
            direction = parts[1].lower() if len(parts) > 1 else "asc"
            orders.append((parts[0], direction if direction in SORT_DIRECTIONS else "asc"))
        return orders


@dataclass
class Page(Generic[T]):
    content: List[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)


def is_storable_id(entity_id: int) -> bool:
    """Whether ``entity_id`` fits an SQLite INTEGER.  Other ids match no row."""
    return -SQLITE_MAX_INTEGER - 1 <= entity_id <= SQLITE_MAX_INTEGER


class BaseRepository(Generic[T]):
    """Primary-key CRUD over one table."""

    table: ClassVar[str]
    model: ClassVar[Type[BaseModel]]
    columns: ClassVar[Tuple[str, ...]]
    sortable: ClassVar[frozenset] = frozenset({"id"})

    def _to_entity(self, row) -> T:
        return self.model.model_validate(dict(row))

    def _to_values(self, entity: BaseModel) -> Dict[str, Any]:
        values = entity.model_dump(mode="json")
        return {column: values.get(column) for column in self.columns}

    def _order_by(self, sort: List[Tuple[str, str]]) -> str:
        clauses = [
            f"{name} {SORT_DIRECTIONS[direction]}"
            for name, direction in sort
            if name in self.sortable
        ]
        if not any(clause.startswith("id ") for clause in clauses):
            clauses.append("id ASC")
        return ", ".join(clauses)

    def exists_by_id(self, entity_id: int) -> bool:
        if not is_storable_id(entity_id):
            return False
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT 1 FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_by_id(self, entity_id: int) -> Optional[T]:
        if not is_storable_id(entity_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            return self._to_entity(row) if row else None
        finally:
            conn.close()

    def save(self, entity: BaseModel) -> Optional[T]:
        """Insert ``entity`` when it has no id, otherwise replace the stored row.

        Returns the stored entity as read back from the table, or
        ``None`` when an id was given but no such row exists any more.
        """
        values = self._to_values(entity)
        entity_id = getattr(entity, "id", None)
        if entity_id is not None and not is_storable_id(entity_id):
            return None
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if entity_id is None:
                placeholders = ", ".join("?" for _ in self.columns)
                cursor.execute(
                    f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                    tuple(values[c] for c in self.columns),
                )
                entity_id = cursor.lastrowid
            else:
                assignments = ", ".join(f"{c} = ?" for c in self.columns)
                cursor.execute(
                    f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                    tuple(values[c] for c in self.columns) + (entity_id,),
                )
                if cursor.rowcount == 0:
                    conn.rollback()
                    return None
            conn.commit()
            row = cursor.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,)
            ).fetchone()
            return self._to_entity(row)
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete a row.  Returns ``True`` if a row was removed."""
        if not is_storable_id(entity_id):
            return False
        conn = get_connection()
        try:
            cursor = conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def count(self) -> int:
        conn = get_connection()
        try:
            row = conn.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
            return row["total"]
        finally:
            conn.close()

    def find_all(self, page_request: PageRequest) -> Page[T]:
        """Return one page of rows ordered by the requested sort.

        Sort fields outside ``sortable`` are ignored; ``id`` ascending is
        always the final tie-breaker so pages are stable.
        """
        conn = get_connection()
        try:
            total = conn.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()["total"]
            rows = conn.execute(
                f"SELECT * FROM {self.table} ORDER BY {self._order_by(page_request.sort)} LIMIT ? OFFSET ?",
                (page_request.size, page_request.offset),
            ).fetchall()
            return Page(
                content=[self._to_entity(row) for row in rows],
                number=page_request.page,
                size=page_request.size,
                total_elements=total,
            )
        finally:
            conn.close()
