"""Tests for loading the IMDb to Kinopoisk crosswalk."""

import json
from pathlib import Path

import pytest

from serial_catalog.core.crosswalk import Crosswalk, load_crosswalk
from serial_catalog.core.errors import CrosswalkError


def test_missing_file_gives_empty_crosswalk(tmp_path: Path) -> None:
    crosswalk = load_crosswalk(tmp_path / "imdbToKP.json")

    assert len(crosswalk) == 0
    assert not crosswalk


def test_load_crosswalk_reads_mapping(tmp_path: Path) -> None:
    path = tmp_path / "imdbToKP.json"
    path.write_text(json.dumps({"tt0944947": "464963", "": "999"}), encoding="utf-8")

    crosswalk = load_crosswalk(path)

    assert crosswalk["tt0944947"] == "464963"
    assert crosswalk.get("") == "999"
    assert "tt0000000" not in crosswalk
    assert dict(crosswalk) == {"tt0944947": "464963", "": "999"}


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2]", '{"tt1": 464963}', '{"tt1": null}', ""],
)
def test_unparsable_crosswalk_is_fatal(tmp_path: Path, content: str) -> None:
    path = tmp_path / "imdbToKP.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CrosswalkError, match="imdbToKP.json"):
        load_crosswalk(path)


def test_null_crosswalk_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "imdbToKP.json"
    path.write_text("null\n", encoding="utf-8")

    crosswalk = load_crosswalk(path)

    assert len(crosswalk) == 0


def test_crosswalk_is_read_only() -> None:
    crosswalk = Crosswalk({"a": "1"})

    with pytest.raises(TypeError):
        crosswalk["b"] = "2"  # type: ignore[index]
