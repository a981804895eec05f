"""Logging setup for the diagnostic channel.

The MCP stdio transport owns stdout, so every log record goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "github-repo-context-stderr"


def configure_logging(level: str = "INFO", *, stream: Optional[TextIO] = None) -> logging.Logger:
    root = logging.getLogger()

    # Idempotent: reuse our handler if main() runs more than once
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    resolved = logging.getLevelName((level or "INFO").upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return root
