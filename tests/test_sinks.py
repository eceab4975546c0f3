"""Tests for the CSV source and the output sinks."""

import json
import logging
from decimal import Decimal
from pathlib import Path

import pytest

from prop_catalog.exceptions import SinkError
from prop_catalog.hierarchy import build_forest, flatten
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import GroupUnit, LeafUnit, Status, UnitRecord
from prop_catalog.sinks import ConsoleSink, CsvFileSink, JsonFileSink, describe, render_tree
from prop_catalog.sinks.csv_file import HEADER
from prop_catalog.sources import CsvRecordSource


def write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestCsvRecordSource:
    """Tests for CsvRecordSource."""

    def test_reads_rows_as_strings(self, tmp_path: Path) -> None:
        path = write_csv(
            tmp_path / "property.csv",
            "Area,Price,Status,Address\n8000,360000,FOR_SALE,5 1\n 700 , 21000 ,SOLD, 5 1 1 \n",
        )

        records = list(CsvRecordSource(path))

        assert records == [
            UnitRecord("8000", "360000", "FOR_SALE", "5 1"),
            UnitRecord("700", "21000", "SOLD", "5 1 1"),
        ]

    def test_without_header(self, tmp_path: Path) -> None:
        path = write_csv(tmp_path / "p.csv", "450,13500,SOLD,2 3\n")
        assert len(list(CsvRecordSource(path, has_header=False))) == 1

    def test_custom_delimiter(self, tmp_path: Path) -> None:
        path = write_csv(tmp_path / "p.csv", "Area;Price;Status;Address\n450;13500;SOLD;2 3\n")
        (record,) = CsvRecordSource(path, delimiter=";")
        assert record.address == "2 3"

    def test_short_and_blank_rows_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = write_csv(
            tmp_path / "p.csv",
            "Area,Price,Status,Address\n450,13500\n\n1200,60000,FOR_SALE,9 9\n,,\n",
        )
        source = CsvRecordSource(path)

        with caplog.at_level(logging.WARNING, logger="prop_catalog"):
            records = list(source)

        assert [r.address for r in records] == ["9 9"]
        assert source.skipped == 1
        assert "Invalid line format" in caplog.text

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list(CsvRecordSource(tmp_path / "missing.csv"))

    def test_feeds_builder(self, tmp_path: Path) -> None:
        path = write_csv(
            tmp_path / "p.csv",
            "Area,Price,Status,Address\n8000,360000,FOR_SALE,5 1\n700,21000,FOR_SALE,5 1 1\n",
        )

        roots = build_forest(CsvRecordSource(path))

        assert len(roots) == 1
        assert roots[0].area() == 700


class TestCsvFileSink:
    """Tests for CsvFileSink."""

    def test_write_units(self, tmp_path: Path, building: GroupUnit) -> None:
        path = tmp_path / "out" / "property.csv"
        sink = CsvFileSink(path)

        assert sink.write_units([building]) == 3
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == ",".join(HEADER)
        assert lines[1] == "100,5000,FOR_SALE,3 3 1"
        assert sink.count == 3

    def test_round_trip_through_file(
        self, tmp_path: Path, building: GroupUnit, parcel: LeafUnit
    ) -> None:
        path = tmp_path / "property.csv"
        CsvFileSink(path).write_units([building, parcel])

        rebuilt = build_forest(CsvRecordSource(path))

        assert [root.address for root in rebuilt] == [Address(3, 3), Address(8, 1)]
        assert rebuilt[0].total_price() == building.total_price()
        assert [
            (Decimal(r.area), Decimal(r.total_price), r.status, r.address)
            for r in flatten(rebuilt)
        ] == [
            (Decimal(r.area), Decimal(r.total_price), r.status, r.address)
            for r in flatten([building, parcel])
        ]

    def test_saved_prices_match_loaded_prices(self, tmp_path: Path) -> None:
        source = write_csv(
            tmp_path / "in.csv",
            "Area,Price,Status,Address\n3,100,FOR_SALE,1 1\n7,1000,SOLD,2 2 1\n",
        )
        target = tmp_path / "out.csv"

        CsvFileSink(target).write_units(build_forest(CsvRecordSource(source)))

        assert target.read_text(encoding="utf-8").splitlines()[1:] == [
            "3,100,FOR_SALE,1 1",
            "7,1000,SOLD,2 2 1",
        ]

    def test_empty_group_survives_file_round_trip(self, tmp_path: Path) -> None:
        root = GroupUnit(1, Address(1, 1))
        root.add(LeafUnit(2, Address(1, 1, 1), Status.FOR_SALE, 1, 1))
        root.add(GroupUnit(3, Address(1, 1, 2)))
        path = tmp_path / "property.csv"
        CsvFileSink(path).write_units([root])

        (rebuilt,) = build_forest(CsvRecordSource(path))

        assert path.read_text(encoding="utf-8").splitlines()[2] == "0,0,FOR_SALE,1 1 2"
        assert rebuilt.find_by_address("1 1 2") is not None

    def test_write_records(self, tmp_path: Path) -> None:
        path = tmp_path / "property.csv"
        record = UnitRecord(Decimal("450"), Decimal("13500"), "SOLD", "2 3")

        CsvFileSink(path, delimiter=";").write_records([record])

        assert path.read_text(encoding="utf-8").splitlines()[1] == "450;13500;SOLD;2 3"

    def test_unwritable_path(self, tmp_path: Path, parcel: LeafUnit) -> None:
        with pytest.raises(SinkError):
            CsvFileSink(tmp_path).write_units([parcel])


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_write_units(self, tmp_path: Path, building: GroupUnit) -> None:
        sink = JsonFileSink(tmp_path)
        path = sink.write_units("catalog", [building])

        data = json.loads(path.read_text(encoding="utf-8"))
        assert path.name == "catalog.json"
        assert data[0]["address"] == "3 3"
        assert data[0]["area"] == "200"
        assert data[0]["children"][1]["children"][0]["status"] == "SOLD"

    def test_pretty(self, tmp_path: Path, parcel: LeafUnit) -> None:
        path = JsonFileSink(tmp_path, pretty=True).write_units("catalog", [parcel])
        assert "\n  " in path.read_text(encoding="utf-8")

    def test_write_batch_of_records(self, tmp_path: Path, building: GroupUnit) -> None:
        path = JsonFileSink(tmp_path).write_batch("records", flatten([building]))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0] == {
            "area": "100",
            "total_price": "5000",
            "status": "FOR_SALE",
            "address": "3 3 1",
        }

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        JsonFileSink(tmp_path / "a" / "b")
        assert (tmp_path / "a" / "b").is_dir()

    def test_unwritable_name(self, tmp_path: Path, parcel: LeafUnit) -> None:
        (tmp_path / "catalog.json").mkdir()
        with pytest.raises(SinkError):
            JsonFileSink(tmp_path).write_units("catalog", [parcel])

    def test_close_prints_summary(
        self, tmp_path: Path, parcel: LeafUnit, capsys: pytest.CaptureFixture
    ) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_units("catalog", [parcel])
        sink.close()

        assert "catalog: 1 entries" in capsys.readouterr().out


class TestConsole:
    """Tests for tree rendering and ConsoleSink."""

    def test_render_tree(self, building: GroupUnit) -> None:
        lines = render_tree(building).splitlines()

        assert len(lines) == 5
        assert lines[0] == (
            "+ Group #1 at (3,3) | Total Area: 200 sqm | Total Price: 7500 $ | For sale"
        )
        assert lines[1] == "  - Unit #2 at (3,3,1) | 100 sqm | 5000 $ | For sale"
        assert lines[2].startswith("  + Group #3 at (3,3,2)")
        assert lines[3].startswith("    - Unit #4 at (3,3,2,1)")

    def test_render_tree_reports_failures(self) -> None:
        text = render_tree(GroupUnit(7, Address(9, 9)))
        assert "n/a (EmptyAggregate)" in text

    def test_describe(self, parcel: LeafUnit) -> None:
        assert describe(parcel) == parcel.display_info()

    def test_write_units(self, building: GroupUnit, parcel: LeafUnit, capsys) -> None:
        sink = ConsoleSink()
        sink.write_units([building, parcel])

        out = capsys.readouterr().out
        assert "Catalog (2 top-level units)" in out
        assert "- Unit #6 at (8,1)" in out

    def test_max_units(self, building: GroupUnit, parcel: LeafUnit, capsys) -> None:
        ConsoleSink(max_units=1).write_units([building, parcel])

        out = capsys.readouterr().out
        assert "(8,1)" not in out
        assert "... and 1 more units" in out

    def test_write_records(self, building: GroupUnit, capsys) -> None:
        sink = ConsoleSink()
        sink.write_records(flatten([building]))
        sink.close()

        out = capsys.readouterr().out
        assert "Records (3 records)" in out
        assert '"address": "3 3 2 2"' in out
        assert "records: 3" in out

    def test_status_label(self) -> None:
        leaf = LeafUnit(1, Address(1, 1), Status.SOLD, 1, 1)
        assert render_tree(leaf).rstrip().endswith("| Sold")
