"""Stats building for a catalog run."""

import importlib.metadata
from datetime import UTC, datetime
from typing import Any

from serial_catalog.core.pipeline import RunArtifacts


def build_stats(
    artifacts: RunArtifacts, *, generated_on: datetime | None = None
) -> dict[str, Any]:
    """Build a stats payload from run artifacts.

    Args:
        artifacts (RunArtifacts): Run results.
        generated_on (datetime | None): Timestamp of the run, now when omitted.

    Returns:
        dict[str, Any]: Stats payload.
    """
    if generated_on is None:
        generated_on = datetime.now(UTC)

    seasons = sum(len(series.seasons) for series in artifacts.series)
    episodes = sum(series.episode_count() for series in artifacts.series)
    missing_studio = sum(1 for series in artifacts.series if not series.studio)
    missing_id = sum(1 for series in artifacts.series if not series.kinopoisk_id)

    return {
        "meta": {
            "version": importlib.metadata.version("serial-catalog"),
            "generated_on": generated_on.astimezone(UTC).isoformat(),
        },
        "summary": {
            "series": len(artifacts.series),
            "seasons": seasons,
            "episodes": episodes,
            "records_written": artifacts.records_written,
        },
        "identity": {
            "crosswalk_entries": artifacts.crosswalk_entries,
            "crosswalk_hits": artifacts.crosswalk_hits,
            "series_without_id": missing_id,
            "series_without_studio": missing_studio,
        },
    }
