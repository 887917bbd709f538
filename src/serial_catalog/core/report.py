"""Plain-text rendering of projected series."""

from enum import StrEnum

from serial_catalog.core.models import Season, Series


class ReportStyle(StrEnum):
    """Layouts of the text report."""

    FULL = "full"
    BRIEF = "brief"


def render_series(series: Series, style: ReportStyle = ReportStyle.FULL) -> str:
    """Render a series block: a header line, then its seasons.

    Args:
        series (Series): Series to render.
        style (ReportStyle): ``full`` includes the id, studio and episode titles.

    Returns:
        str: Newline-terminated report block.
    """
    if style is ReportStyle.FULL:
        header = (
            f"{series.title_translated} ({series.title_original}) "
            f"[{series.kinopoisk_id} {series.year} {series.restriction} "
            f"{series.studio}]\n"
        )
    else:
        header = (
            f"{series.title_translated} ({series.title_original}) "
            f"[{series.year} {series.restriction}]\n"
        )
    return header + "".join(render_season(season, style) for season in series.seasons)


def render_season(season: Season, style: ReportStyle = ReportStyle.FULL) -> str:
    """Render a season header, one line per episode, then a blank line."""
    lines = [f"\ts{season.number:02d} {season.year}\n"]
    for episode in season.episodes:
        line = (
            f"\t\ts{season.number:02d}e{episode.number:02d}"
            f"\t{episode.file}\t{episode.available}"
        )
        if style is ReportStyle.FULL:
            line += f"\t{episode.title_translated} ({episode.title_original})"
        lines.append(line + "\n")
    lines.append("\n")
    return "".join(lines)
