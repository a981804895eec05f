"""Filter and aggregate pipeline behind get-repo-context.

walk output -> select (exclude, extension allow-list, truncate)
            -> fetch content per file, in order -> render.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.formatting import render_records
from core.interfaces import ContentSource
from core.models import FileContentRecord, FilterCriteria, FlatFileRecord, RepositoryCoordinate
from core.paths import file_extension, matches_any_substring

logger = logging.getLogger(__name__)


def _keep(record: FlatFileRecord, criteria: FilterCriteria) -> bool:
    if matches_any_substring(record.path, criteria.exclude_paths):
        return False

    if criteria.file_extensions:
        return file_extension(record.path) in criteria.file_extensions

    return True


def select_files(files: Iterable[FlatFileRecord], criteria: FilterCriteria) -> List[FlatFileRecord]:
    """Filter then keep the first `max_files` survivors in walk order."""
    survivors = [f for f in files if _keep(f, criteria)]
    return survivors[: criteria.max_files]


class ContextPipeline:
    def __init__(self, *, client: ContentSource) -> None:
        self._client = client

    async def fetch_contents(
        self,
        coord: RepositoryCoordinate,
        files: Iterable[FlatFileRecord],
        *,
        ref: Optional[str] = None,
    ) -> List[FileContentRecord]:
        out: List[FileContentRecord] = []
        for f in files:
            if f.type != "file":
                continue
            content = await self._client.fetch_file_content(coord.owner, coord.repo, f.path, ref=ref)
            if content is None:
                # Dropped without a marker; the client already logged why
                continue
            out.append(FileContentRecord(path=f.path, content=content))
        return out

    async def select_and_fetch(
        self,
        coord: RepositoryCoordinate,
        files: Iterable[FlatFileRecord],
        criteria: FilterCriteria,
        *,
        ref: Optional[str] = None,
    ) -> List[FileContentRecord]:
        selected = select_files(files, criteria)
        logger.info("Selected %d files after filtering", len(selected))
        return await self.fetch_contents(coord, selected, ref=ref)

    async def build_context(
        self,
        coord: RepositoryCoordinate,
        files: Iterable[FlatFileRecord],
        criteria: FilterCriteria,
        *,
        ref: Optional[str] = None,
    ) -> str:
        records = await self.select_and_fetch(coord, files, criteria, ref=ref)
        return render_records(records)
