"""MCP tool that reads a single file from a GitHub repository.

Registers 'get-file-content' which returns the file as a fenced block,
or a plain "could not retrieve" message when it cannot be fetched.
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_TIMEOUT, HTTP_VERIFY
from core.formatting import error_payload, format_file_block, not_retrieved_payload
from core.models import RepositoryCoordinate

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    client = github_client or GitHubClient(timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    @mcp.tool(name="get-file-content")
    async def get_file_content(
        owner: str,
        repo: str,
        path: str,
        ref: Optional[str] = None,
    ) -> str:
        """Get content of a specific file from a GitHub repository.

        Params:
          - owner: repository owner/organization name.
          - repo: repository name.
          - path: path to the file in the repository.
          - ref: branch, tag or commit SHA (default: the default branch).

        Returns:
          "File: <path>" followed by the content in a fenced block. If the
          file is missing, a directory, or not UTF-8 text, a message saying
          the content could not be retrieved.
        """
        try:
            coord = RepositoryCoordinate(owner=owner, repo=repo)
            content = await client.fetch_file_content(owner, repo, path, ref=ref)

            if content is None:
                return not_retrieved_payload(coord, path)

            return format_file_block(path, content)
        except Exception as e:
            logger.exception("Error fetching file content for %s", path)
            return error_payload("file content", e)
