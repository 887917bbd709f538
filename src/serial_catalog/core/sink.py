"""Report file output mirrored to the console."""

from logging import getLogger
from pathlib import Path
from typing import TextIO

from serial_catalog.core.errors import OutputError

log = getLogger(__name__)


class ReportSink:
    """Text report that starts fresh on every run and grows series by series."""

    def __init__(self, path: Path | str, *, console: TextIO | None = None) -> None:
        """Initialize the sink.

        Args:
            path (Path | str): Location of the report file.
            console (TextIO | None): Stream receiving a copy of the report.
        """
        self.path = Path(path)
        self._console = console

    def reset(self) -> bool:
        """Delete a report left by a previous run.

        Returns:
            bool: Whether a previous report was removed.

        Raises:
            OutputError: If the previous report cannot be removed.
        """
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as exc:
            raise OutputError(f"Failed to remove report '{self.path}': {exc}") from exc
        log.debug("Removed previous report %s", self.path)
        return True

    def write(self, text: str) -> None:
        """Append `text` to the report and mirror it to the console.

        Args:
            text (str): Rendered report block.

        Raises:
            OutputError: If the report cannot be written.
        """
        if self._console is not None:
            self._console.write(text)
            self._console.flush()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            raise OutputError(f"Failed to write report '{self.path}': {exc}") from exc
