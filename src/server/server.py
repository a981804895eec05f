"""Server bootstrap for the GitHub repository context MCP service.

Creates the FastMCP instance, wires the GitHub client into the tools and
starts the MCP server (stdio transport). Diagnostics go to stderr.
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_TIMEOUT, HTTP_VERIFY, LOG_LEVEL
from core.diagnostics import configure_logging

from tools.get_file_content import register as register_get_file_content
from tools.get_repo_context import register as register_get_repo_context
from tools.get_repo_structure import register as register_get_repo_structure

logger = logging.getLogger("github-repo-context")

mcp = FastMCP("github-repo-context")


def log_auth_mode(github_client: GitHubClient) -> None:
    if github_client.authenticated:
        logger.info("GitHub API: Using authentication token")
    else:
        logger.warning(
            "GitHub API: No authentication token provided. "
            "Rate limits will be restricted to 60 requests/hour."
        )
        logger.warning("Set the GITHUB_TOKEN environment variable to increase this limit to 5000 requests/hour.")


def register_tools() -> GitHubClient:
    github_client = GitHubClient(timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    register_get_repo_context(mcp, github_client=github_client)
    register_get_file_content(mcp, github_client=github_client)
    register_get_repo_structure(mcp, github_client=github_client)
    return github_client


github_client = register_tools()


def main() -> None:
    configure_logging(LOG_LEVEL)
    try:
        log_auth_mode(github_client)
        logger.info("GitHub Repository Context MCP Server running on stdio")
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
