"""JSON media-type recognition."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

JSON_CONTENT_TYPE = "application/json"


def parse_media_type(content_type: str | None) -> str | None:
    """Return the lower-cased ``type/subtype`` part of a Content-Type header."""
    if not content_type:
        return None
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type or None


def is_json_media_type(
    content_type: str | None, extra_media_types: Iterable[str] = ()
) -> bool:
    """Check whether *content_type* denotes a JSON payload.

    ``application/json`` and structured-syntax ``application/*+json``
    types are always accepted; *extra_media_types* adds exact matches.
    """
    media_type = parse_media_type(content_type)
    if media_type is None:
        return False
    if media_type == JSON_CONTENT_TYPE:
        return True
    if media_type in {m.lower() for m in extra_media_types}:
        return True
    main_type, _, subtype = media_type.partition("/")
    return main_type == "application" and subtype.endswith("+json")
