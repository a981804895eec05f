"""Text payload builders shared by the MCP tools.

File contents are emitted in fenced blocks; the fence itself is not
escaped, so content containing ``` will break the block structure.
"""

from __future__ import annotations

from typing import Iterable

from core.models import FileContentRecord, RepositoryCoordinate

FENCE = "```"
BLOCK_SEPARATOR = "---\n\n"


def format_file_block(path: str, content: str) -> str:
    return f"File: {path}\n\n{FENCE}\n{content}\n{FENCE}"


def render_records(records: Iterable[FileContentRecord]) -> str:
    """Render fetched files as blocks joined by BLOCK_SEPARATOR.

    Records without content are skipped.
    """
    blocks = [
        format_file_block(r.path, r.content) + "\n\n"
        for r in records
        if r.content is not None
    ]
    return BLOCK_SEPARATOR.join(blocks)


def repo_context_payload(coord: RepositoryCoordinate, rendered: str) -> str:
    return f"Repository Context for {coord.full_name}:\n\n{rendered}"


def repo_structure_payload(coord: RepositoryCoordinate, paths: Iterable[str]) -> str:
    return f"Repository Structure for {coord.full_name}:\n\n" + "\n".join(sorted(paths))


def not_retrieved_payload(coord: RepositoryCoordinate, path: str) -> str:
    return f"Could not retrieve content for {path} in {coord.full_name}"


def error_payload(action: str, err: BaseException) -> str:
    return f"Error fetching {action}: {err}"
