"""Parsing helpers for GitHub contents API payloads.

A contents response is either a JSON list (directory listing) or a JSON
object describing one item; file objects carry a base64 `content` body.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, List, Optional

from core.models import EntryType, TreeEntry

# GitHub item type -> walkable entry type. symlink/submodule are not walked.
_TYPE_MAP: dict[str, EntryType] = {
    "file": "file",
    "dir": "directory",
}


def _to_entry(item: Any) -> Optional[TreeEntry]:
    if not isinstance(item, dict):
        return None
    path = item.get("path")
    entry_type = _TYPE_MAP.get(str(item.get("type")))
    if not isinstance(path, str) or entry_type is None:
        return None
    return TreeEntry(path=path, type=entry_type)


def parse_entries(data: Any) -> List[TreeEntry]:
    """Turn a contents payload into entries, wrapping a single item in a list."""
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and "type" in data:
        items = [data]
    else:
        return []

    out: List[TreeEntry] = []
    for item in items:
        entry = _to_entry(item)
        if entry is not None:
            out.append(entry)
    return out


def decode_file_body(data: Any) -> Optional[str]:
    """Decode a file payload to text.

    Returns None when the payload is not a base64 file body. Raises
    binascii.Error / UnicodeDecodeError when the body itself is corrupt
    or not UTF-8 text.
    """
    if not isinstance(data, dict):
        return None
    if "content" not in data or "encoding" not in data:
        return None
    if data.get("encoding") != "base64":
        return None

    # GitHub wraps the body at 60 columns; strip whitespace, then decode strictly
    body = "".join(str(data.get("content") or "").split())
    raw = base64.b64decode(body, validate=True)
    return raw.decode("utf-8")


DECODE_ERRORS = (binascii.Error, UnicodeDecodeError)
