"""Recursive walk of a remote repository tree.

- One listing call per directory, awaited strictly in sequence.
- Output is the pre-order depth-first file list; directories are recursed
  into but never emitted.
- A directory whose listing fails yields nothing; its siblings are unaffected.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from core.interfaces import ContentSource
from core.models import FlatFileRecord

logger = logging.getLogger(__name__)


class RepoTreeWalker:
    def __init__(self, *, client: ContentSource) -> None:
        self._client = client

    async def walk(
        self,
        owner: str,
        repo: str,
        path: str = "",
        *,
        ref: Optional[str] = None,
    ) -> List[FlatFileRecord]:
        out: List[FlatFileRecord] = []
        await self._walk_into(owner, repo, path, ref=ref, out=out)
        return out

    async def _walk_into(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        ref: Optional[str],
        out: List[FlatFileRecord],
    ) -> None:
        entries = await self._client.list_or_fetch(owner, repo, path, ref=ref)

        for entry in entries:
            if entry.type == "file":
                out.append(FlatFileRecord(path=entry.path))
            elif entry.type == "directory":
                # Recurse before moving to the next sibling (pre-order)
                await self._walk_into(owner, repo, entry.path, ref=ref, out=out)
            else:
                logger.debug("Skipping %s entry %s", entry.type, entry.path)
