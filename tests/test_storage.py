"""Tests for str_len.adapters.storage: DuckDB column mapping and span store."""
from __future__ import annotations

from pathlib import Path

import duckdb
import pytest

from str_len.adapters.storage import RangeVectorColumns, SpanStore, UnitRangeColumn
from str_len.codec import parse_range
from str_len.errors import InvalidRange
from str_len.range_vector import ranges
from str_len.unit_range import UnitRange

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"


@pytest.fixture()
def store() -> SpanStore:
    s = SpanStore()
    yield s  # type: ignore[misc]
    s.close()


class TestUnitRangeColumn:
    def test_dump(self) -> None:
        assert UnitRangeColumn.dump(UnitRange.new(10, 5)) == [10, 5]

    def test_load_pair_and_mapping(self) -> None:
        assert UnitRangeColumn.load([10, 5]) == UnitRange.new(10, 5)
        assert UnitRangeColumn.load((10, 5)) == UnitRange.new(10, 5)
        assert UnitRangeColumn.load({"start": 10, "length": 5}) == UnitRange.new(10, 5)

    def test_cast(self) -> None:
        r = UnitRange.new(1, 2)
        assert UnitRangeColumn.cast(r) is r
        assert UnitRangeColumn.cast([1, 2]) == r
        with pytest.raises(InvalidRange):
            UnitRangeColumn.cast("1:2")

    def test_cast_does_not_coerce(self) -> None:
        with pytest.raises(InvalidRange):
            UnitRangeColumn.cast([3.9, "2"])
        with pytest.raises(InvalidRange):
            UnitRangeColumn.cast({"start": 1.0, "length": 2})

    def test_load_rejects_negative(self) -> None:
        with pytest.raises(InvalidRange):
            UnitRangeColumn.load([-1, 2])

    def test_duckdb_list_round_trip(self) -> None:
        conn = duckdb.connect(":memory:")
        conn.execute(f"CREATE TABLE t (r {UnitRangeColumn.sql_type})")
        conn.execute("INSERT INTO t VALUES (?)", [UnitRangeColumn.dump(UnitRange.new(7, 3))])
        row = conn.execute("SELECT r FROM t").fetchone()
        conn.close()
        assert UnitRangeColumn.load(row[0]) == UnitRange.new(7, 3)


class TestRangeVectorColumns:
    def test_dump_load(self) -> None:
        rng = parse_range("31:25|17:11|13:7|7:1")
        assert RangeVectorColumns.load(RangeVectorColumns.dump(rng)) == rng

    def test_load_wrong_width(self) -> None:
        with pytest.raises(InvalidRange):
            RangeVectorColumns.load([[0, 1], [0, 1]])


class TestSpanStore:
    def test_put_get(self, store: SpanStore) -> None:
        rng = parse_range("31:25|17:11|13:7|7:1")
        store.put("doc", "emoji", rng)
        assert store.get("doc", "emoji") == rng

    def test_offsets_beyond_int32(self, store: SpanStore) -> None:
        rng = parse_range("3000000000:5")
        store.put("big", "tail", rng)
        assert store.get("big", "tail") == rng

    def test_get_missing(self, store: SpanStore) -> None:
        assert store.get("doc", "nope") is None

    def test_put_overwrites(self, store: SpanStore) -> None:
        store.put("doc", "x", parse_range("0:1"))
        store.put("doc", "x", parse_range("5:2"))
        assert store.get("doc", "x") == parse_range("5:2")
        assert len(store.list_spans("doc")) == 1

    def test_list_spans_ordered_by_byte_start(self, store: SpanStore) -> None:
        head, word, tail = ranges([FAMILY, "family", FAMILY])
        store.put("doc", "c", tail)
        store.put("doc", "a", head)
        store.put("doc", "b", word)
        store.put("other", "z", head)
        assert store.list_spans("doc") == [("a", head), ("b", word), ("c", tail)]

    def test_delete(self, store: SpanStore) -> None:
        store.put("doc", "x", parse_range("0:1"))
        assert store.delete("doc", "x") is True
        assert store.delete("doc", "x") is False
        assert store.get("doc", "x") is None

    def test_persists_to_file(self, tmp_path: Path) -> None:
        db_path = tmp_path / "spans.duckdb"
        rng = parse_range("26:25|12:11|8:7|2:1")
        with SpanStore(db_path) as s:
            s.put("doc", "emoji", rng)
        with SpanStore(db_path, create_if_missing=False) as s:
            assert s.get("doc", "emoji") == rng

    def test_missing_file_without_create(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            SpanStore(tmp_path / "missing.duckdb", create_if_missing=False)
