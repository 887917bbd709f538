"""Append-only JSON lines store of episode file records."""

from __future__ import annotations

import json
from collections.abc import Iterator
from logging import getLogger
from pathlib import Path
from types import TracebackType
from typing import TextIO

from serial_catalog.core.errors import OutputError
from serial_catalog.core.models import FileRecord

log = getLogger(__name__)


class RecordStore:
    """Single append handle on the record store, held for a run.

    The file is opened in append mode on the first record and never
    truncated, so every run adds its records after those of earlier runs.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path (Path | str): Location of the JSON lines file.
        """
        self.path = Path(path)
        self.written = 0
        self._handle: TextIO | None = None
        self._active = False

    def __enter__(self) -> RecordStore:
        self._active = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def open(self) -> TextIO:
        """Open the append handle, creating the file when absent.

        Returns:
            TextIO: The append handle, reused while the store stays open.

        Raises:
            OutputError: If the store cannot be opened.
        """
        self._active = True
        if self._handle is not None:
            return self._handle
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("a", encoding="utf-8")
        except OSError as exc:
            raise OutputError(
                f"Failed to open record store '{self.path}': {exc}"
            ) from exc
        return self._handle

    def close(self) -> None:
        """Close the append handle if open."""
        self._active = False
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()
        log.debug("Closed record store %s after %d record(s)", self.path, self.written)

    def append(self, record: FileRecord) -> None:
        """Append one record as a single JSON line.

        Args:
            record (FileRecord): Record to store.

        Raises:
            OutputError: If the store is closed or the write fails.
        """
        if not self._active:
            raise OutputError(f"Record store '{self.path}' is not open")
        handle = self.open()
        line = json.dumps(record.to_dict(), ensure_ascii=False, separators=(",", ":"))
        try:
            handle.write(line + "\n")
            handle.flush()
        except OSError as exc:
            raise OutputError(
                f"Failed to write record store '{self.path}': {exc}"
            ) from exc
        self.written += 1


def read_records(path: Path | str) -> Iterator[FileRecord]:
    """Iterate over the records of a store.

    Args:
        path (Path | str): Location of the JSON lines file.

    Yields:
        FileRecord: Stored records in file order.
    """
    with Path(path).open(encoding="utf-8") as f:
        for line in f:
            if line.strip():
                yield FileRecord.from_dict(json.loads(line))
