"""Shared pytest fixtures: catalog XML builders and run settings."""

from pathlib import Path

import pytest

from serial_catalog.core.settings import Settings

SERIAL_X = """
  <group type="serial" guid="s-1">
    <meta-info>
      <title type="original">Serial X</title>
      <title type="translated">Сериал Х</title>
      <description type="short">Про сериал</description>
      <restriction>16+</restriction>
      <category>drama</category>
      <year>2020</year>
      <imdb_id>tt0000001</imdb_id>
      <kinopoisk_id> 12345 </kinopoisk_id>
      <credits>
        <credit role="director">Someone</credit>
        <credit role="studio"> Acme <award type="emmy" year="2021">Best</award></credit>
      </credits>
      <quote author="Narrator">Quote</quote>
      <slogan type="main">Slogan</slogan>
    </meta-info>
    <group type="season" number="1">
      <meta-info>
        <title type="original">Season 1</title>
        <available start="2020-01-01">yes</available>
        <year>2020</year>
      </meta-info>
      <video number="1" src="/media/serial_x/s01/e01.mkv" multilang="1" start="0" end="100">
        <meta-info>
          <title type="original">Pilot</title>
          <title type="translated">Пилот</title>
          <available start="2020-01-01" end="2030-01-01"/>
          <duration>2700</duration>
        </meta-info>
        <logo src="/logos/e01.png"/>
        <subtitles src="/subs/e01.srt"/>
      </video>
      <video number="2" src="/media/serial_x/s01/e02.mkv ">
        <meta-info>
          <title type="original">Second</title>
          <title type="translated">Вторая</title>
          <available start="2020-01-08"/>
        </meta-info>
      </video>
    </group>
  </group>
"""

SERIAL_Y = """
  <group type="serial" guid="s-2">
    <meta-info>
      <title>Serial Y</title>
      <title>Сериал Игрек</title>
      <restriction>12+</restriction>
      <year>2018</year>
      <credits>
        <credit role="originabroadcaster">Beta TV</credit>
      </credits>
    </meta-info>
    <group type="season" number="1">
      <meta-info><year>2018</year></meta-info>
      <video number="1" src="y/s1/e1.mp4">
        <meta-info><title>One</title><title>Один</title></meta-info>
      </video>
    </group>
    <group type="season" number="2">
      <meta-info><year>2019</year></meta-info>
      <video number="1" src="y/s2/e1.mp4">
        <meta-info><title>Two</title><title>Два</title></meta-info>
      </video>
      <video number="2" src="y/s2/e2.mp4">
        <meta-info><title>Three</title><title>Три</title></meta-info>
      </video>
    </group>
  </group>
"""


def catalog_xml(*groups: str, encoding: str = "utf-8") -> bytes:
    """Wrap series groups in a ``video-data`` document encoded as `encoding`."""
    body = "".join(groups)
    text = (
        f'<?xml version="1.0" encoding="{encoding}"?>\n'
        f"<video-data><title>Catalog</title>{body}</video-data>\n"
    )
    return text.encode(encoding)


@pytest.fixture
def sample_xml() -> bytes:
    return catalog_xml(SERIAL_X, SERIAL_Y)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing every artifact into `tmp_path`."""
    return Settings(
        input_path=tmp_path / "amedia_tv_series.xml",
        output_path=tmp_path / "output.txt",
        crosswalk_path=tmp_path / "imdbToKP.json",
        record_store_path=tmp_path / "files.json",
        console=False,
    )
