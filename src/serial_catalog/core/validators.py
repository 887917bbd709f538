"""Validation helpers reporting every bad field of a catalog."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from serial_catalog.core.document import CatalogDocument
from serial_catalog.core.errors import FieldError
from serial_catalog.core.projector import CatalogProjector
from serial_catalog.utils.text import node_path


@dataclass(slots=True)
class ValidationIssue:
    """Represents a validation finding."""

    validator: str
    message: str
    path: str
    field: str


class FieldValidator:
    """Walk the whole document and collect field errors instead of raising.

    Each node is projected on its own, so one bad season does not hide the
    errors of its episodes or of the following series.
    """

    name: str = "fields"

    def __init__(self, crosswalk: Mapping[str, str] | None = None) -> None:
        """Initialize the validator.

        Args:
            crosswalk (Mapping[str, str] | None): Lookup table used by the projector.
        """
        self._projector = CatalogProjector(crosswalk=crosswalk)

    def validate(self, document: CatalogDocument) -> list[ValidationIssue]:
        """Return validation issues for `document`.

        Args:
            document (CatalogDocument): Parsed catalog.

        Returns:
            list[ValidationIssue]: Issues in document order.
        """
        issues: list[ValidationIssue] = []
        for index, series in enumerate(document.series):
            path = node_path(None, "series", index)
            self._check(issues, self._projector.project_series_header, series, path)
            for season_index, season in enumerate(series.seasons):
                season_path = node_path(path, "season", season_index)
                self._check(
                    issues, self._projector.project_season_header, season, season_path
                )
                for episode_index, video in enumerate(season.videos):
                    self._check(
                        issues,
                        self._projector.project_episode,
                        video,
                        node_path(season_path, "episode", episode_index),
                    )
        return issues

    def _check(
        self,
        issues: list[ValidationIssue],
        step: Callable[[Any, str], object],
        node: Any,
        path: str,
    ) -> None:
        """Run one projection step, recording every field error it raises."""
        try:
            step(node, path)
        except FieldError as exc:
            issues.append(self.issue(exc))

    def issue(self, error: FieldError) -> ValidationIssue:
        """Build a standardized validation issue from a field error."""
        return ValidationIssue(
            validator=self.name,
            message=error.detail,
            path=error.path,
            field=error.field,
        )


def collect_issues(
    document: CatalogDocument, crosswalk: Mapping[str, str] | None = None
) -> list[ValidationIssue]:
    """Return every field issue of `document`.

    Args:
        document (CatalogDocument): Parsed catalog.
        crosswalk (Mapping[str, str] | None): Optional lookup table.

    Returns:
        list[ValidationIssue]: Issues in document order.
    """
    return FieldValidator(crosswalk).validate(document)
