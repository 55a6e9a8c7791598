"""
GitHub REST API client.

Implements the PlatformClient protocol over aiohttp. Every call is a
single GET with no retries; failures surface as PlatformAPIError and the
access checks decide how to treat them.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from ..config import DEFAULT_API_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, GuardConfig
from ..exceptions import PlatformAPIError
from ..protocol import (
    BranchRef,
    CollaboratorPermission,
    InstallationRecord,
    RepositoryMetadata,
    UserRecord,
)

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"

_DOT_SEGMENTS = frozenset({".", ".."})


def _segment(value: str) -> str:
    """Escape one URL path segment, including any slashes.

    Raises:
        PlatformAPIError: If the value is empty or a dot segment, which the
            URL layer would collapse into a different endpoint
    """
    if not value or value in _DOT_SEGMENTS:
        raise PlatformAPIError(repr(value), reason="invalid path segment")
    return quote(value, safe="")


def _ref_path(ref: str) -> str:
    """Escape a git ref such as ``heads/main``, keeping its slashes."""
    return "/".join(_segment(part) for part in ref.split("/"))


class GitHubClient:
    """Read-only GitHub REST client for actor access checks.

    Example:
        >>> async with GitHubClient(token=os.environ["GITHUB_TOKEN"]) as client:
        ...     allowed = await check_write_access(client, "octocat", repo)

    The client owns its aiohttp session unless one is passed in, in which
    case closing the session is left to the caller.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: API token sent as a Bearer credential (optional for public data)
            api_url: Base URL of the REST API
            timeout: Total timeout per request in seconds
            user_agent: User-Agent header value
            session: Optional externally managed aiohttp session
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(cls, config: GuardConfig) -> GitHubClient:
        """Create a client from guard configuration."""
        return cls(
            token=config.token,
            api_url=config.api_url,
            timeout=config.request_timeout,
            user_agent=config.user_agent,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    async def _get(self, path: str) -> dict[str, Any]:
        """Issue a GET request and return the decoded JSON body."""
        url = f"{self.api_url}{path}"
        session = self._get_session()
        logger.debug(f"GET {url}")

        try:
            async with session.get(url, headers=self._headers) as response:
                if response.status >= 400:
                    reason = await self._error_reason(response)
                    raise PlatformAPIError(path, status=response.status, reason=reason)
                try:
                    data = await response.json()
                except ValueError as e:
                    raise PlatformAPIError(
                        path, status=response.status, reason="invalid JSON body", cause=e
                    ) from e
        except aiohttp.ClientError as e:
            raise PlatformAPIError(path, cause=e) from e
        except TimeoutError as e:
            raise PlatformAPIError(path, reason="request timed out", cause=e) from e

        if not isinstance(data, dict):
            raise PlatformAPIError(path, status=response.status, reason="unexpected response body")
        return data

    @staticmethod
    async def _error_reason(response: aiohttp.ClientResponse) -> str:
        try:
            body = await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            return response.reason or ""
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason or ""

    # =========================================================================
    # PlatformClient protocol
    # =========================================================================

    async def lookup_user_by_username(self, username: str) -> UserRecord:
        data = await self._get(f"/users/{_segment(username)}")
        return UserRecord(kind=data.get("type", ""))

    async def get_collaborator_permission_level(
        self, owner: str, repo: str, username: str
    ) -> CollaboratorPermission:
        data = await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}"
            f"/collaborators/{_segment(username)}/permission"
        )
        return CollaboratorPermission(level=data.get("permission", "none"))

    async def get_repository_installation(self, owner: str, repo: str) -> InstallationRecord:
        data = await self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/installation")
        permissions = data.get("permissions") or {}
        return InstallationRecord(
            content_permission=permissions.get("contents"),
            installation_id=data.get("id"),
        )

    async def get_repository_metadata(self, owner: str, repo: str) -> RepositoryMetadata:
        data = await self._get(f"/repos/{_segment(owner)}/{_segment(repo)}")
        default_branch = data.get("default_branch")
        if not default_branch:
            raise PlatformAPIError(
                f"/repos/{owner}/{repo}", reason="repository has no default branch"
            )
        return RepositoryMetadata(default_branch=default_branch)

    async def get_branch_ref(self, owner: str, repo: str, ref: str) -> BranchRef:
        data = await self._get(
            f"/repos/{_segment(owner)}/{_segment(repo)}/git/ref/{_ref_path(ref)}"
        )
        return BranchRef(ref=data.get("ref", ref))
