"""Tests for the append-only record store."""

import dataclasses
import json
from pathlib import Path

import pytest

from serial_catalog.core.errors import OutputError
from serial_catalog.core.models import FileRecord
from serial_catalog.core.records import RecordStore, read_records

RECORD = FileRecord(
    file="e01.mkv",
    title_original="Serial X",
    title_translated="Сериал Х",
    kinopoisk_id="12345",
    season=1,
    number=1,
)


def test_append_writes_one_json_object_per_line(tmp_path: Path) -> None:
    path = tmp_path / "files.json"

    with RecordStore(path) as store:
        store.append(RECORD)
        store.append(dataclasses.replace(RECORD, file="e02.mkv", number=2))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0]) == {
        "File": "e01.mkv",
        "TitleOriginal": "Serial X",
        "TitleTranslated": "Сериал Х",
        "KinopoiskID": "12345",
        "Season": 1,
        "Number": 1,
    }
    assert "Сериал" in lines[0]
    assert store.written == 2


def test_store_is_never_truncated(tmp_path: Path) -> None:
    path = tmp_path / "files.json"
    path.write_text('{"File":"old.mkv"}\n', encoding="utf-8")

    with RecordStore(path) as store:
        store.append(RECORD)
    with RecordStore(path) as store:
        store.append(RECORD)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == '{"File":"old.mkv"}'
    assert len(lines) == 3


def test_read_records_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "files.json"

    with RecordStore(path) as store:
        store.append(RECORD)

    assert list(read_records(path)) == [RECORD]


def test_handle_is_released_on_error(tmp_path: Path) -> None:
    store = RecordStore(tmp_path / "files.json")

    with pytest.raises(RuntimeError), store:
        store.append(RECORD)
        raise RuntimeError("boom")

    with pytest.raises(OutputError, match="not open"):
        store.append(RECORD)


def test_unwritable_store_raises_output_error(tmp_path: Path) -> None:
    with pytest.raises(OutputError):
        RecordStore(tmp_path).open()
