"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
GITHUB_API_URL, HTTP_VERIFY, timeouts, logging level and filter defaults).
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Network / HTTP
GITHUB_API_URL = (os.environ.get("GITHUB_API_URL") or "https://api.github.com").strip().rstrip("/")
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Diagnostics (stderr only; stdout belongs to the MCP transport)
LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()

# get-repo-context filter defaults
DEFAULT_MAX_FILES = 50
DEFAULT_EXCLUDE_PATHS = ("node_modules", "dist", "build")
