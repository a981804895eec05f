"""Immutable dataclasses for the repository walk and context pipeline.

Includes the repository coordinate, the entries returned by a contents
listing, the flat file records produced by a walk, fetched file contents
and the per-request filter criteria used by get-repo-context.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Optional, Tuple

from config import DEFAULT_EXCLUDE_PATHS, DEFAULT_MAX_FILES
from core.errors import ValidationError


EntryType = Literal["file", "directory"]


@dataclass(frozen=True)
class RepositoryCoordinate:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class TreeEntry:
    """One item of a contents listing (path is relative to the repo root)."""

    path: str
    type: EntryType


@dataclass(frozen=True)
class FlatFileRecord:
    path: str
    type: Literal["file"] = "file"


@dataclass(frozen=True)
class FileContentRecord:
    """A fetched file. `content` is None when it could not be retrieved."""

    path: str
    content: Optional[str] = None


@dataclass(frozen=True)
class FilterCriteria:
    """Filter settings for get-repo-context.

    Field groups:
    - Truncation: max_files (prefix of the walk order)
    - Allow-list: file_extensions (empty = no extension filtering)
    - Deny-list: exclude_paths (plain substrings of the path)
    """

    max_files: int = DEFAULT_MAX_FILES
    file_extensions: Tuple[str, ...] = ()
    exclude_paths: Tuple[str, ...] = DEFAULT_EXCLUDE_PATHS

    @classmethod
    def from_params(
        cls,
        max_files: Optional[int] = None,
        file_extensions: Optional[Iterable[str]] = None,
        exclude_paths: Optional[Iterable[str]] = None,
    ) -> "FilterCriteria":
        # None means "not supplied by the caller" -> use the default
        n = DEFAULT_MAX_FILES if max_files is None else int(max_files)
        if n < 0:
            raise ValidationError("maxFiles must be zero or positive")

        return cls(
            max_files=n,
            file_extensions=tuple(file_extensions or ()),
            exclude_paths=DEFAULT_EXCLUDE_PATHS if exclude_paths is None else tuple(exclude_paths),
        )
