"""Orchestration of a catalog run."""

import sys
from contextlib import nullcontext
from dataclasses import dataclass, field
from logging import getLogger
from typing import TextIO

from serial_catalog.core.crosswalk import Crosswalk, load_crosswalk
from serial_catalog.core.document import CatalogDocument
from serial_catalog.core.models import Series
from serial_catalog.core.projector import CatalogProjector
from serial_catalog.core.records import RecordStore
from serial_catalog.core.report import render_series
from serial_catalog.core.settings import Settings
from serial_catalog.core.sink import ReportSink
from serial_catalog.core.validators import ValidationIssue, collect_issues
from serial_catalog.sources.catalog_xml import load_catalog

log = getLogger(__name__)


@dataclass(slots=True)
class RunArtifacts:
    """Container returned after a run completes."""

    series: list[Series] = field(default_factory=list)
    crosswalk_entries: int = 0
    crosswalk_hits: int = 0
    records_written: int = 0


class CatalogPipeline:
    """Run the crosswalk, parse, project, record and report stages in order."""

    def __init__(self, settings: Settings, *, console: TextIO | None = None) -> None:
        """Initialize the pipeline.

        Args:
            settings (Settings): Paths and optional stages of the run.
            console (TextIO | None): Stream mirroring the report; defaults to
                stdout when `settings.console` is enabled.
        """
        self._settings = settings
        if console is None and settings.console:
            console = sys.stdout
        self._console = console

    def run(self) -> RunArtifacts:
        """Execute the full transform.

        The report file is removed before the first series is written. The
        record store is only ever appended to.

        Returns:
            RunArtifacts: Projected series and run counters.

        Raises:
            CatalogError: On the first fatal condition; output written before it
                stays on disk.
        """
        settings = self._settings
        crosswalk = self._load_crosswalk()
        document = self._load_document()

        sink = ReportSink(settings.output_path, console=self._console)
        if sink.reset():
            log.info("Removed previous report %s", settings.output_path)

        artifacts = RunArtifacts(crosswalk_entries=len(crosswalk))
        store_context = (
            RecordStore(settings.record_store_path)
            if settings.emit_records
            else nullcontext()
        )
        with store_context as store:
            projector = CatalogProjector(
                crosswalk=crosswalk,
                on_episode=store.append if store is not None else None,
            )
            for series in projector.iter_series(document):
                sink.write(render_series(series, settings.report_style))
                artifacts.series.append(series)
            artifacts.crosswalk_hits = projector.crosswalk_hits
            if store is not None:
                artifacts.records_written = store.written

        log.info("Wrote %d series to %s", len(artifacts.series), settings.output_path)
        if settings.emit_records:
            log.info(
                "Appended %d record(s) to %s",
                artifacts.records_written,
                settings.record_store_path,
            )
        return artifacts

    def check(self) -> list[ValidationIssue]:
        """Validate the catalog without writing any output.

        Returns:
            list[ValidationIssue]: Every field issue found in the document.
        """
        crosswalk = self._load_crosswalk()
        document = self._load_document()
        issues = collect_issues(document, crosswalk)
        if issues:
            log.warning("Validation produced %d issue(s)", len(issues))
        else:
            log.info("Validation produced no issues")
        return issues

    def _load_crosswalk(self) -> Crosswalk:
        """Load the crosswalk when the stage is enabled."""
        if not self._settings.use_crosswalk:
            return Crosswalk()
        return load_crosswalk(self._settings.crosswalk_path)

    def _load_document(self) -> CatalogDocument:
        """Parse the catalog input."""
        settings = self._settings
        document = load_catalog(settings.input_path, encoding=settings.input_encoding)
        log.info(
            "Loaded %d series from %s", len(document.series), settings.input_path
        )
        return document
