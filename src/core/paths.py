"""Path utilities used across the project.

Provides consistent POSIX-style normalization of repository paths and the
extension rule used by the get-repo-context allow-list.
"""

from __future__ import annotations


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading and
    trailing '/' and repeated './' markers. The repository root is ''.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Prevent accidental absolute paths.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    if s == ".":
        return ""
    return s.rstrip("/")


def file_extension(path: str) -> str:
    """Return the text after the last '.' of `path`, or '' when it has none."""
    if "." not in path:
        return ""
    return path.rsplit(".", 1)[1]


def matches_any_substring(path: str, needles) -> bool:
    # Plain substring test anywhere in the path, not a segment match
    return any(n in path for n in needles)
