"""Projection of the catalog document into the series domain model."""

from collections.abc import Callable, Iterator, Mapping, Sequence
from logging import getLogger

from serial_catalog.core.document import (
    CatalogDocument,
    Credit,
    SeasonGroup,
    SeriesGroup,
    SeriesMetaInfo,
    TypedText,
    Video,
)
from serial_catalog.core.errors import MissingTitleError
from serial_catalog.core.models import Episode, FileRecord, Season, Series
from serial_catalog.utils.text import clean, media_basename, node_path, parse_int

log = getLogger(__name__)

STUDIO_ROLE = "studio"
BROADCASTER_ROLES = frozenset(
    {"originabroadcaster", "originalbroadcaster", "original broadcaster"}
)

ORIGINAL = "original"
TRANSLATED = "translated"
_TITLE_VARIANTS = (ORIGINAL, TRANSLATED)

RecordCallback = Callable[[FileRecord], None]


def resolve_titles(titles: Sequence[TypedText], *, path: str) -> tuple[str, str]:
    """Return the trimmed (original, translated) title pair.

    Titles tagged ``original`` or ``translated`` through their ``type``
    attribute are matched by tag. Untagged titles fill the variants still
    missing by position: index 0 is the original, index 1 the translation.

    Args:
        titles (Sequence[TypedText]): Title list of a series or video.
        path (str): Node location used in error messages.

    Returns:
        tuple[str, str]: Original and translated titles.

    Raises:
        MissingTitleError: If a variant cannot be found.
    """
    keyed: dict[str, str] = {}
    for title in titles:
        tag = clean(title.type).lower()
        if tag in _TITLE_VARIANTS and tag not in keyed:
            keyed[tag] = clean(title.text)

    for position, title in enumerate(titles):
        if position >= len(_TITLE_VARIANTS):
            break
        if clean(title.type).lower() in _TITLE_VARIANTS:
            continue
        keyed.setdefault(_TITLE_VARIANTS[position], clean(title.text))

    for variant in _TITLE_VARIANTS:
        if variant not in keyed:
            raise MissingTitleError(
                f"missing {variant} title ({len(titles)} title(s) present)",
                path=path,
                field=f"title[{variant}]",
            )
    return keyed[ORIGINAL], keyed[TRANSLATED]


def resolve_studio(credits: Sequence[Credit]) -> str:
    """Return the studio of a series from its credits.

    The first ``studio`` credit wins, then the first original broadcaster.

    Args:
        credits (Sequence[Credit]): Credits of the series.

    Returns:
        str: Trimmed studio name, empty when neither role is credited.
    """
    for credit in credits:
        if credit.role == STUDIO_ROLE:
            return clean(credit.text)
    for credit in credits:
        if credit.role in BROADCASTER_ROLES:
            return clean(credit.text)
    return ""


def resolve_kinopoisk_id(
    meta: SeriesMetaInfo, crosswalk: Mapping[str, str] | None = None
) -> tuple[str, bool]:
    """Return the internal id of a series and whether the crosswalk supplied it.

    The Kinopoisk id in the metadata is authoritative. The crosswalk is only
    consulted when both the Kinopoisk and the IMDb ids are empty, and it is
    keyed by that empty IMDb id.

    Args:
        meta (SeriesMetaInfo): Series metadata.
        crosswalk (Mapping[str, str] | None): IMDb to Kinopoisk lookup table.

    Returns:
        tuple[str, bool]: Resolved id and a crosswalk hit flag.
    """
    kinopoisk_id = clean(meta.kinopoisk_id)
    imdb_id = clean(meta.imdb_id)
    # TODO: key the lookup by a populated imdb_id once the export is confirmed
    # to carry IMDb ids without Kinopoisk ones.
    if not kinopoisk_id and not imdb_id and crosswalk and imdb_id in crosswalk:
        return crosswalk[imdb_id], True
    return kinopoisk_id, False


class CatalogProjector:
    """Build `Series` objects from catalog nodes, emitting a record per episode."""

    def __init__(
        self,
        *,
        crosswalk: Mapping[str, str] | None = None,
        on_episode: RecordCallback | None = None,
    ) -> None:
        """Initialize the projector.

        Args:
            crosswalk (Mapping[str, str] | None): Optional IMDb to Kinopoisk table.
            on_episode (RecordCallback | None): Called with the record of every
                episode as soon as it is projected.
        """
        self._crosswalk = crosswalk
        self._on_episode = on_episode
        self.crosswalk_hits = 0

    def iter_series(self, document: CatalogDocument) -> Iterator[Series]:
        """Yield each fully projected series in document order.

        Args:
            document (CatalogDocument): Parsed catalog.

        Yields:
            Series: Projected series with all seasons and episodes.
        """
        for index, node in enumerate(document.series):
            yield self.project_series(node, index)

    def project_series(self, node: SeriesGroup, index: int = 0) -> Series:
        """Project a series group including its seasons and episodes.

        Args:
            node (SeriesGroup): Raw series group.
            index (int): Position of the group in the document.

        Returns:
            Series: The projected series.

        Raises:
            FieldError: On the first malformed field.
        """
        path = node_path(None, "series", index)
        series = self.project_series_header(node, path)
        for season_index, season_node in enumerate(node.seasons):
            season_path = node_path(path, "season", season_index)
            season = self.project_season_header(season_node, season_path)
            for episode_index, video in enumerate(season_node.videos):
                episode = self.project_episode(
                    video, node_path(season_path, "episode", episode_index)
                )
                season.episodes.append(episode)
                if self._on_episode is not None:
                    self._on_episode(FileRecord.for_episode(series, season, episode))
            series.seasons.append(season)

        log.debug(
            "Projected %s: %d season(s), %d episode(s)",
            path,
            len(series.seasons),
            series.episode_count(),
        )
        return series

    def project_series_header(self, node: SeriesGroup, path: str) -> Series:
        """Project the series fields without its seasons.

        Args:
            node (SeriesGroup): Raw series group.
            path (str): Node location.

        Returns:
            Series: Series with an empty season list.
        """
        meta = node.meta_info
        year = parse_int(meta.year, field="year", path=path)
        title_original, title_translated = resolve_titles(meta.titles, path=path)
        kinopoisk_id, from_crosswalk = resolve_kinopoisk_id(meta, self._crosswalk)
        if from_crosswalk:
            self.crosswalk_hits += 1
            log.debug("Resolved %s id %r through the crosswalk", path, kinopoisk_id)

        return Series(
            title_original=title_original,
            title_translated=title_translated,
            kinopoisk_id=kinopoisk_id,
            year=year,
            restriction=clean(meta.restriction),
            studio=resolve_studio(meta.credits),
        )

    def project_season_header(self, node: SeasonGroup, path: str) -> Season:
        """Project the season fields without its episodes.

        Args:
            node (SeasonGroup): Raw season group.
            path (str): Node location.

        Returns:
            Season: Season with an empty episode list.
        """
        return Season(
            number=parse_int(node.number, field="number", path=path),
            year=parse_int(node.meta_info.year, field="year", path=path),
        )

    def project_episode(self, node: Video, path: str) -> Episode:
        """Project a video element.

        Args:
            node (Video): Raw video element.
            path (str): Node location.

        Returns:
            Episode: The projected episode.
        """
        number = parse_int(node.number, field="number", path=path)
        title_original, title_translated = resolve_titles(
            node.meta_info.titles, path=path
        )
        return Episode(
            number=number,
            file=media_basename(node.src),
            title_original=title_original,
            title_translated=title_translated,
            available=clean(node.meta_info.available.start),
        )
