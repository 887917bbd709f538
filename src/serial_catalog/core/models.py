"""Domain structures produced by the catalog projector."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Episode:
    """A single episode of a season."""

    number: int
    file: str
    title_original: str = ""
    title_translated: str = ""
    available: str = ""


@dataclass(slots=True)
class Season:
    """A season and its episodes in document order."""

    number: int
    year: int
    episodes: list[Episode] = field(default_factory=list)


@dataclass(slots=True)
class Series:
    """A series with its resolved identity and seasons."""

    title_original: str
    title_translated: str
    kinopoisk_id: str
    year: int
    restriction: str = ""
    studio: str = ""
    seasons: list[Season] = field(default_factory=list)

    def episode_count(self) -> int:
        """Return the number of episodes across all seasons.

        Returns:
            int: Episode count.
        """
        return sum(len(season.episodes) for season in self.seasons)


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Flat record linking a media file to its series and position."""

    file: str
    title_original: str
    title_translated: str
    kinopoisk_id: str
    season: int
    number: int

    # Key names of the record store, shared with existing consumers.
    KEYS = (
        ("file", "File"),
        ("title_original", "TitleOriginal"),
        ("title_translated", "TitleTranslated"),
        ("kinopoisk_id", "KinopoiskID"),
        ("season", "Season"),
        ("number", "Number"),
    )

    @classmethod
    def for_episode(
        cls, series: Series, season: Season, episode: Episode
    ) -> FileRecord:
        """Build the record for `episode` of `season` in `series`.

        Args:
            series (Series): Owning series; only its identity fields are used.
            season (Season): Owning season.
            episode (Episode): Episode being recorded.

        Returns:
            FileRecord: The flat record.
        """
        return cls(
            file=episode.file,
            title_original=series.title_original,
            title_translated=series.title_translated,
            kinopoisk_id=series.kinopoisk_id,
            season=season.number,
            number=episode.number,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record using the record store key names.

        Returns:
            dict[str, Any]: JSON-friendly record.
        """
        return {key: getattr(self, attr) for attr, key in self.KEYS}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> FileRecord:
        """Deserialize a record stored with `to_dict`.

        Args:
            payload (Mapping[str, Any]): Serialized record.

        Returns:
            FileRecord: Parsed record.
        """
        return cls(**{attr: payload[key] for attr, key in cls.KEYS})
