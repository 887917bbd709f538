"""IMDb to Kinopoisk identifier crosswalk."""

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from serial_catalog.core.errors import CrosswalkError

log = logging.getLogger(__name__)

_CROSSWALK_ADAPTER = TypeAdapter(dict[str, str])


class Crosswalk(Mapping[str, str]):
    """Read-only lookup table from external ids to internal catalog ids."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        """Initialize the crosswalk.

        Args:
            entries (Mapping[str, str] | None): External id to internal id pairs.
        """
        self._entries: dict[str, str] = dict(entries or {})

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Crosswalk({len(self._entries)} entries)"


def load_crosswalk(path: Path | str) -> Crosswalk:
    """Load a crosswalk from a JSON object file.

    A missing file is not an error; the crosswalk is simply empty. So is a
    file holding a JSON `null`.

    Args:
        path (Path | str): Path to the JSON file (e.g. imdbToKP.json).

    Returns:
        Crosswalk: The loaded lookup table.

    Raises:
        CrosswalkError: If the file exists but cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        log.info("Crosswalk file not found: %s. Continuing without it.", path)
        return Crosswalk()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        entries = _CROSSWALK_ADAPTER.validate_python(payload, strict=True)
    except (OSError, ValueError, ValidationError) as exc:
        raise CrosswalkError(f"Failed to load crosswalk file '{path}': {exc}") from exc

    log.info("Loaded %d crosswalk entries from %s", len(entries), path)
    return Crosswalk(entries)
