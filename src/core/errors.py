from __future__ import annotations


class RepoContextError(Exception):
    """Base error for the repository context server."""


class ValidationError(RepoContextError):
    """Raised when user input is invalid."""


class NotFoundError(RepoContextError):
    """Raised when a requested resource is not found."""


class ExternalServiceError(RepoContextError):
    """Raised when the GitHub API fails."""
