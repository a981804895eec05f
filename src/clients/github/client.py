"""GitHub client module: list directory contents and read file bodies.

This module provides a small async client over a single GitHub endpoint,
the contents API (`GET /repos/{owner}/{repo}/contents/{path}`), which
answers with either a directory listing or a base64-encoded file body.

Remote failures never propagate: they are logged on the diagnostic
channel and collapse to an empty listing or None. Input validation
errors do propagate, since they are the caller's mistake.
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import httpx

from config import GITHUB_API_URL
from core.errors import ExternalServiceError, NotFoundError
from core.models import TreeEntry

from .contents import DECODE_ERRORS, decode_file_body, parse_entries
from .inputs import normalize_dir_path, normalize_file_path, normalize_name, normalize_ref

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async GitHub contents client.

    Purpose:
      - list_or_fetch(owner, repo, path='') -> List[TreeEntry]
      - fetch_file_content(owner, repo, path) -> Optional[str]

    Key behavior:
      - GITHUB_TOKEN (if set) is sent as a bearer token for higher rate limits.
      - No caching, no retries: every call is one GET (plus any redirects).
      - Every call uses its own httpx.AsyncClient; the instance keeps no
        per-request state and is safe to share between tools.
    """

    BASE_URL = GITHUB_API_URL
    JSON_ACCEPT = "application/vnd.github+json"
    API_VERSION = "2022-11-28"

    def __init__(
        self,
        *,
        timeout: float = 20.0,
        verify: bool = True,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._transport = transport

        # Explicit token wins over the environment
        self._token = (token if token is not None else os.environ.get("GITHUB_TOKEN") or "").strip()
        self._headers = self._build_headers()

    @property
    def authenticated(self) -> bool:
        return bool(self._token)

    async def list_or_fetch(
        self,
        owner: str,
        repo: str,
        path: str = "",
        *,
        ref: Optional[str] = None,
    ) -> List[TreeEntry]:
        """List a directory (or describe a single file) at `path`.

        Returns [] on any remote failure, so a failed listing looks the
        same as an empty directory.
        """
        owner_clean = normalize_name(owner, field="owner")
        repo_clean = normalize_name(repo, field="repo")
        path_clean = normalize_dir_path(path)
        ref_clean = normalize_ref(ref)

        try:
            data = await self._get_contents(owner_clean, repo_clean, path_clean, ref=ref_clean)
            return parse_entries(data)
        except (ExternalServiceError, NotFoundError, ValueError) as e:
            logger.error(
                "Error getting repo contents for %s/%s/%s: %s",
                owner_clean, repo_clean, path_clean, e,
            )
            return []

    async def fetch_file_content(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        ref: Optional[str] = None,
    ) -> Optional[str]:
        """Fetch and decode a file as UTF-8 text.

        Returns None when the path is not a base64 file body, or on any
        remote or decode failure.
        """
        owner_clean = normalize_name(owner, field="owner")
        repo_clean = normalize_name(repo, field="repo")
        path_clean = normalize_file_path(path)
        ref_clean = normalize_ref(ref)

        try:
            data = await self._get_contents(owner_clean, repo_clean, path_clean, ref=ref_clean)
            text = decode_file_body(data)
        except (ExternalServiceError, NotFoundError, ValueError, *DECODE_ERRORS) as e:
            logger.error(
                "Error getting file content for %s/%s/%s: %s",
                owner_clean, repo_clean, path_clean, e,
            )
            return None

        if text is None:
            logger.warning("No base64 file body for %s/%s/%s", owner_clean, repo_clean, path_clean)
        return text

    # --- HTTP helpers ---

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": "github-repo-context",
            "X-GitHub-Api-Version": self.API_VERSION,
        }
        # Authorization only when a token is present; the token is never validated
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _create_client(self, custom_headers: Optional[Mapping[str, str]] = None) -> httpx.AsyncClient:
        headers = {**self._headers, **dict(custom_headers or {})}
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            headers=headers,
            timeout=self._timeout,
            verify=self._verify,
            # Renamed or transferred repos answer with a 301 to /repositories/<id>/...
            follow_redirects=True,
            transport=self._transport,
        )

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        base = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/contents"
        if not path:
            return base
        return f"{base}/{quote(path, safe='/')}"

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"GitHub request failed ({context}): {err}")

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._external(context, e) from e

    async def _get_contents(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        ref: Optional[str] = None,
    ) -> Any:
        url = self._contents_url(owner, repo, path)
        params = {"ref": ref} if ref else {}

        async with self._create_client() as client:
            try:
                resp = await client.get(url, params=params)
            except httpx.HTTPError as e:
                raise self._external(f"GET {url}", e) from e

            if resp.status_code == 404:
                raise NotFoundError(f"Not found: {owner}/{repo}/{path}")

            self._raise_for_status(resp, context=f"GET {url}")
            # ValueError on a non-JSON body is handled by the callers
            return resp.json()
