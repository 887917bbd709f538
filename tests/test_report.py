"""Tests for the text report layout."""

from conftest import SERIAL_X, catalog_xml

from serial_catalog.core.models import Episode, Season, Series
from serial_catalog.core.projector import CatalogProjector
from serial_catalog.core.report import ReportStyle, render_season, render_series
from serial_catalog.sources.catalog_xml import parse_catalog


def _series() -> Series:
    (series,) = CatalogProjector().iter_series(parse_catalog(catalog_xml(SERIAL_X)))
    return series


def test_render_series_full_layout() -> None:
    assert render_series(_series()) == (
        "Сериал Х (Serial X) [12345 2020 16+ Acme]\n"
        "\ts01 2020\n"
        "\t\ts01e01\te01.mkv\t2020-01-01\tПилот (Pilot)\n"
        "\t\ts01e02\te02.mkv\t2020-01-08\tВторая (Second)\n"
        "\n"
    )


def test_render_series_brief_layout() -> None:
    assert render_series(_series(), ReportStyle.BRIEF) == (
        "Сериал Х (Serial X) [2020 16+]\n"
        "\ts01 2020\n"
        "\t\ts01e01\te01.mkv\t2020-01-01\n"
        "\t\ts01e02\te02.mkv\t2020-01-08\n"
        "\n"
    )


def test_render_is_reproducible() -> None:
    assert render_series(_series()) == render_series(_series())


def test_render_season_pads_numbers_to_two_digits() -> None:
    season = Season(number=3, year=2021, episodes=[Episode(number=12, file="x.mkv")])

    assert render_season(season) == "\ts03 2021\n\t\ts03e12\tx.mkv\t\t ()\n\n"


def test_render_series_keeps_empty_identity_fields() -> None:
    series = Series(
        title_original="O", title_translated="T", kinopoisk_id="", year=1999
    )

    assert render_series(series) == "T (O) [ 1999  ]\n"


def test_render_series_separates_seasons_with_blank_lines() -> None:
    series = Series(
        title_original="O",
        title_translated="T",
        kinopoisk_id="42",
        year=2020,
        restriction="18+",
        studio="S",
        seasons=[
            Season(
                number=1,
                year=2020,
                episodes=[
                    Episode(number=1, file="a.mkv", available="2020-01-01"),
                    Episode(number=2, file="b.mkv", title_original="B"),
                ],
            ),
            Season(number=2, year=2021, episodes=[Episode(number=1, file="c.mkv")]),
        ],
    )

    assert render_series(series) == (
        "T (O) [42 2020 18+ S]\n"
        "\ts01 2020\n"
        "\t\ts01e01\ta.mkv\t2020-01-01\t ()\n"
        "\t\ts01e02\tb.mkv\t\t (B)\n"
        "\n"
        "\ts02 2021\n"
        "\t\ts02e01\tc.mkv\t\t ()\n"
        "\n"
    )
