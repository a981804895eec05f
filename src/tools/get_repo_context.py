"""MCP tool that renders a whole repository as prompt context.

Registers 'get-repo-context': walks the repository, filters and truncates
the file list, fetches every retained file and returns them as one text
document of fenced blocks.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_TIMEOUT, HTTP_VERIFY
from core.formatting import error_payload, repo_context_payload
from core.models import FilterCriteria, RepositoryCoordinate
from sources.context_pipeline import ContextPipeline
from sources.tree_walker import RepoTreeWalker

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    # Parameter names below are the wire names of the tool arguments
    @mcp.tool(name="get-repo-context")
    async def get_repo_context(
        owner: str,
        repo: str,
        maxFiles: Optional[int] = None,
        fileExtensions: Optional[List[str]] = None,
        excludePaths: Optional[List[str]] = None,
        ref: Optional[str] = None,
    ) -> str:
        """Get all files from a GitHub repository to use as context.

        Params:
          - owner: repository owner/organization name.
          - repo: repository name.
          - maxFiles: maximum number of files to include (default: 50).
          - fileExtensions: extensions to include, without the dot
            (e.g. ["js", "ts", "md"]; default: all).
          - excludePaths: path substrings to exclude
            (default: ["node_modules", "dist", "build"]).
          - ref: branch, tag or commit SHA (default: the default branch).

        Returns:
          A "Repository Context" header followed by one fenced block per
          file. Files that cannot be fetched or decoded are left out.
          Failures are returned as an error message, never raised.
        """
        try:
            coord = RepositoryCoordinate(owner=owner, repo=repo)
            criteria = FilterCriteria.from_params(maxFiles, fileExtensions, excludePaths)

            logger.info("Fetching files from %s...", coord.full_name)
            files = await RepoTreeWalker(client=client).walk(owner, repo, ref=ref)
            logger.info("Found %d total files in the repository", len(files))

            rendered = await ContextPipeline(client=client).build_context(coord, files, criteria, ref=ref)
            return repo_context_payload(coord, rendered)
        except Exception as e:
            logger.exception("Error fetching repository context")
            return error_payload("repository context", e)
