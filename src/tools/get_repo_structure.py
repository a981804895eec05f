"""MCP tool that lists every file path of a GitHub repository."""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_TIMEOUT, HTTP_VERIFY
from core.formatting import error_payload, repo_structure_payload
from core.models import RepositoryCoordinate
from sources.tree_walker import RepoTreeWalker

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    @mcp.tool(name="get-repo-structure")
    async def get_repo_structure(owner: str, repo: str, ref: Optional[str] = None) -> str:
        """Get the structure of a GitHub repository.

        Returns every file path (no filtering), sorted and one per line,
        under a "Repository Structure" header.
        """
        try:
            coord = RepositoryCoordinate(owner=owner, repo=repo)
            files = await RepoTreeWalker(client=client).walk(owner, repo, ref=ref)
            return repo_structure_payload(coord, (f.path for f in files))
        except Exception as e:
            logger.exception("Error fetching repository structure")
            return error_payload("repository structure", e)
