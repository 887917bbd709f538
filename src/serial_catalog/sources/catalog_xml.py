"""Module for the ``video-data`` catalog XML export."""

from logging import getLogger
from pathlib import Path
from typing import Any

from lxml import etree
from pydantic import ValidationError

from serial_catalog.core.document import CatalogDocument
from serial_catalog.core.errors import CatalogFileError, CatalogFormatError

log = getLogger(__name__)

ROOT_TAG = "video-data"


def load_catalog(path: Path | str, *, encoding: str | None = None) -> CatalogDocument:
    """Read and parse the catalog file at `path`.

    Args:
        path (Path | str): Location of the catalog XML file.
        encoding (str | None): Encoding overriding the document declaration.

    Returns:
        CatalogDocument: The parsed document.

    Raises:
        CatalogFileError: If the file cannot be read.
        CatalogFormatError: If the document does not decode.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CatalogFileError(f"Failed to read catalog '{path}': {exc}") from exc
    log.debug("Read %d bytes from %s", len(data), path)
    return parse_catalog(data, encoding=encoding)


def parse_catalog(data: bytes, *, encoding: str | None = None) -> CatalogDocument:
    """Decode catalog XML bytes into a `CatalogDocument`.

    The bytes go to lxml untouched so the encoding named in the XML
    declaration (or signalled by a byte order mark) is honoured; legacy
    exports are usually ``windows-1251``.

    Args:
        data (bytes): Raw XML document.
        encoding (str | None): Encoding overriding the document declaration.

    Returns:
        CatalogDocument: The parsed document.

    Raises:
        CatalogFormatError: If the markup is malformed or the root is unexpected.
    """
    try:
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            huge_tree=True,
            encoding=encoding,
        )
    except LookupError as exc:
        raise CatalogFormatError(f"Unknown catalog encoding: {encoding}") from exc

    try:
        root = etree.fromstring(data, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise CatalogFormatError(f"Malformed catalog XML: {exc}") from exc
    if root.tag != ROOT_TAG:
        raise CatalogFormatError(
            f"Unexpected root element <{root.tag}>, expected <{ROOT_TAG}>"
        )

    payload = {
        "title": _child_text(root, "title"),
        "series": [_series_payload(el) for el in root.findall("group")],
    }
    try:
        document = CatalogDocument.model_validate(payload)
    except ValidationError as exc:
        raise CatalogFormatError(f"Invalid catalog structure: {exc}") from exc
    log.debug("Decoded catalog with %d series groups", len(document.series))
    return document


def _chardata(el: etree._Element | None) -> str:
    """Return the character data directly owned by `el`.

    Text of nested elements (e.g. awards inside a credit) is excluded.
    """
    if el is None:
        return ""
    parts = [el.text or ""]
    parts.extend(child.tail or "" for child in el)
    return "".join(parts)


def _child_text(el: etree._Element | None, tag: str) -> str:
    """Return the character data of the first `tag` child of `el`."""
    if el is None:
        return ""
    return _chardata(el.find(tag))


def _attrs(el: etree._Element | None, *names: str) -> dict[str, str]:
    """Return the named attributes of `el`, missing ones as empty strings."""
    if el is None:
        return dict.fromkeys(names, "")
    return {name: el.get(name, "") for name in names}


def _typed_text(el: etree._Element | None) -> dict[str, Any]:
    """Build the payload for an element with text and a ``type`` attribute."""
    return {"text": _chardata(el), **_attrs(el, "type")}


def _series_payload(group: etree._Element) -> dict[str, Any]:
    """Build the payload for a series group."""
    meta = group.find("meta-info")
    credits = _findall(_find(meta, "credits"), "credit")
    titles = _findall(meta, "title")

    meta_payload: dict[str, Any] = {
        "titles": [_typed_text(el) for el in titles],
        "description": _typed_text(_find(meta, "description")),
        "credits": [
            {
                "text": _chardata(credit),
                **_attrs(credit, "role"),
                "awards": [
                    {"text": _chardata(award), **_attrs(award, "type", "year")}
                    for award in credit.findall("award")
                ],
            }
            for credit in credits
        ],
        "quote": {
            "text": _chardata(_find(meta, "quote")),
            **_attrs(_find(meta, "quote"), "author"),
        },
        "slogan": _typed_text(_find(meta, "slogan")),
        "studio_restrictions": {
            "episodes_allowed": _child_text(
                _find(meta, "studio_restrictions"), "episodes_allowed"
            )
        },
    }
    for tag in (
        "restriction",
        "category",
        "year",
        "location",
        "available",
        "featured",
        "priority",
        "imdb_id",
        "external_allowed",
        "kinopoisk_id",
    ):
        meta_payload[tag] = _child_text(meta, tag)

    return {
        **_attrs(group, "guid", "type"),
        "meta_info": meta_payload,
        "seasons": [_season_payload(el) for el in group.findall("group")],
    }


def _season_payload(group: etree._Element) -> dict[str, Any]:
    """Build the payload for a season group."""
    meta = group.find("meta-info")
    available = _find(meta, "available")
    return {
        **_attrs(group, "number", "type"),
        "meta_info": {
            "title": _typed_text(_find(meta, "title")),
            "available": {"text": _chardata(available), **_attrs(available, "start")},
            "year": _child_text(meta, "year"),
            "description": _typed_text(_find(meta, "description")),
        },
        "videos": [_video_payload(el) for el in group.findall("video")],
    }


def _video_payload(video: etree._Element) -> dict[str, Any]:
    """Build the payload for a video element."""
    meta = video.find("meta-info")
    available = _find(meta, "available")
    logo = video.find("logo")
    subtitles = video.find("subtitles")
    return {
        **_attrs(
            video,
            "end",
            "endtitles",
            "episodesinopsys",
            "guid",
            "multilang",
            "number",
            "src",
            "start",
        ),
        "meta_info": {
            "titles": [_typed_text(el) for el in _findall(meta, "title")],
            "available": {
                "text": _chardata(available),
                **_attrs(available, "start", "end"),
            },
            "duration": _child_text(meta, "duration"),
            "featured": _child_text(meta, "featured"),
        },
        "logo": {"text": _chardata(logo), **_attrs(logo, "src")},
        "subtitles": {"text": _chardata(subtitles), **_attrs(subtitles, "src")},
    }


def _find(el: etree._Element | None, tag: str) -> etree._Element | None:
    """Return the first `tag` child of `el`, tolerating a missing parent."""
    if el is None:
        return None
    return el.find(tag)


def _findall(el: etree._Element | None, tag: str) -> list[etree._Element]:
    """Return all `tag` children of `el`, tolerating a missing parent."""
    if el is None:
        return []
    return el.findall(tag)
