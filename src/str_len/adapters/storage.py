"""DuckDB column mapping for UnitRange and RangeVector.

A UnitRange is stored as a ``BIGINT[]`` pair ``[start, length]``; a
RangeVector as four such columns named after its coordinates. ``SpanStore``
keeps labelled RangeVectors per document in a small DuckDB database.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from str_len.errors import InvalidRange
from str_len.range_vector import COORDINATES, RangeVector
from str_len.unit_range import UnitRange

# Dynamic DuckDB import for pyright compatibility
_duckdb_mod = importlib.import_module("duckdb")


class UnitRangeColumn:
    """Column codec: UnitRange <-> ``[start, length]``."""

    sql_type = "BIGINT[]"

    @staticmethod
    def dump(rng: UnitRange) -> list[int]:
        return rng.as_pair()

    @staticmethod
    def load(value: Sequence[int] | Mapping[str, Any]) -> UnitRange:
        if isinstance(value, Mapping):
            return UnitRange.from_mapping(value)
        return UnitRange.from_pair(list(value))

    @classmethod
    def cast(cls, value: Any) -> UnitRange:
        """Accept a UnitRange, a pair or a ``{start, length}`` mapping."""
        if isinstance(value, UnitRange):
            return value
        if isinstance(value, Mapping | list | tuple):
            return cls.load(value)
        raise InvalidRange(f"cannot cast {type(value).__name__} to UnitRange")


class RangeVectorColumns:
    """Column codec: RangeVector <-> four ``[start, length]`` columns."""

    @staticmethod
    def ddl() -> str:
        return ",\n    ".join(
            f"\"{c}\" {UnitRangeColumn.sql_type} NOT NULL" for c in COORDINATES
        )

    @staticmethod
    def dump(rng: RangeVector) -> tuple[list[int], ...]:
        return tuple(UnitRangeColumn.dump(getattr(rng, c)) for c in COORDINATES)

    @staticmethod
    def load(row: Sequence[Any]) -> RangeVector:
        if len(row) != len(COORDINATES):
            raise InvalidRange(f"expected {len(COORDINATES)} columns, got {len(row)}")
        return RangeVector(
            **{c: UnitRangeColumn.load(v) for c, v in zip(COORDINATES, row, strict=True)}
        )


_COLUMN_LIST = ", ".join(f'"{c}"' for c in COORDINATES)

_SCHEMA_DDL = f"""
CREATE TABLE IF NOT EXISTS spans (
    doc_id VARCHAR NOT NULL,
    label VARCHAR NOT NULL,
    {RangeVectorColumns.ddl()},
    PRIMARY KEY (doc_id, label)
)
"""


class SpanStore:
    """Read/write store of labelled RangeVectors backed by DuckDB.

    ``db_path=":memory:"`` gives a throwaway in-process database.
    """

    def __init__(
        self,
        db_path: Path | str = ":memory:",
        *,
        create_if_missing: bool = True,
    ) -> None:
        self._db_path = str(db_path)
        if (
            self._db_path != ":memory:"
            and not Path(self._db_path).exists()
            and not create_if_missing
        ):
            raise FileNotFoundError(f"Span database not found: {self._db_path}")
        self._conn: Any = _duckdb_mod.connect(self._db_path)
        self._conn.execute(_SCHEMA_DDL)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> SpanStore:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def put(self, doc_id: str, label: str, rng: RangeVector) -> None:
        """Insert or overwrite the span stored under ``(doc_id, label)``."""
        self._conn.execute(
            f"INSERT OR REPLACE INTO spans (doc_id, label, {_COLUMN_LIST}) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            [doc_id, label, *RangeVectorColumns.dump(rng)],
        )

    def get(self, doc_id: str, label: str) -> RangeVector | None:
        row = self._conn.execute(
            f"SELECT {_COLUMN_LIST} FROM spans WHERE doc_id = ? AND label = ?",
            [doc_id, label],
        ).fetchone()
        if row is None:
            return None
        return RangeVectorColumns.load(row)

    def list_spans(self, doc_id: str) -> list[tuple[str, RangeVector]]:
        """All spans of a document ordered by byte start, then label."""
        rows = self._conn.execute(
            f"SELECT label, {_COLUMN_LIST} FROM spans WHERE doc_id = ? "
            "ORDER BY \"byte\"[1], label",
            [doc_id],
        ).fetchall()
        return [(row[0], RangeVectorColumns.load(row[1:])) for row in rows]

    def delete(self, doc_id: str, label: str) -> bool:
        """Remove one span; returns whether it existed."""
        existed = self.get(doc_id, label) is not None
        self._conn.execute(
            "DELETE FROM spans WHERE doc_id = ? AND label = ?", [doc_id, label]
        )
        return existed
