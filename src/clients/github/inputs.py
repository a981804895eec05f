from __future__ import annotations

from typing import Optional

from core.errors import ValidationError
from core.paths import normalize_posix_relpath


def normalize_name(value: str, *, field: str) -> str:
    # Owner and repo are single URL segments
    name = (value or "").strip()
    if not name:
        raise ValidationError(f"{field} must be non-empty")
    if "/" in name or "\\" in name:
        raise ValidationError(f"{field} must not contain path separators")
    return name


def normalize_ref(ref: Optional[str]) -> Optional[str]:
    # None or blank -> let GitHub use the default branch
    ref_clean = (ref or "").strip()
    return ref_clean or None


def normalize_dir_path(path: str) -> str:
    # Empty is allowed and means the repository root
    return normalize_posix_relpath(path)


def normalize_file_path(path: str) -> str:
    path_clean = normalize_posix_relpath(path)
    if not path_clean:
        raise ValidationError("path must be non-empty")
    return path_clean
