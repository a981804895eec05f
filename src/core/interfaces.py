"""Core protocol and interface definitions.

Defines the ContentSource protocol used by the tree walker and the
context pipeline, so both can run against the GitHub client or a fake.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from core.models import TreeEntry


class ContentSource(Protocol):
    """Contract for a remote repository contents provider.

    Both calls fail soft: errors are reported on the diagnostic channel
    and surface as an empty listing or None.
    """

    async def list_or_fetch(
        self,
        owner: str,
        repo: str,
        path: str = "",
        *,
        ref: Optional[str] = None,
    ) -> List[TreeEntry]:
        ...

    async def fetch_file_content(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        ref: Optional[str] = None,
    ) -> Optional[str]:
        ...
