"""
Shared test configuration and fixtures.

Provides a mocked platform client whose remote calls are AsyncMocks, so
tests can both script responses and assert on call counts.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from actor_access_guard.exceptions import PlatformAPIError
from actor_access_guard.protocol import (
    BranchRef,
    CollaboratorPermission,
    InstallationRecord,
    RepositoryMetadata,
    RepositoryRef,
    UserRecord,
)

_UNSET = object()


def api_error(endpoint: str = "/test", status: int = 404) -> PlatformAPIError:
    """Build a platform error like the GitHub adapter would raise."""
    return PlatformAPIError(endpoint, status=status, reason="Not Found")


def make_client(
    user_type: object = "User",
    permission: object = "write",
    installation: object = _UNSET,
    default_branch: object = "main",
    branch_ref: object = _UNSET,
) -> MagicMock:
    """Create a mocked PlatformClient.

    Each argument is either a value to return or an exception to raise.
    Installation and branch ref lookups fail unless configured.
    """
    client = MagicMock()

    def respond(value, wrap):
        if isinstance(value, BaseException):
            return AsyncMock(side_effect=value)
        return AsyncMock(return_value=wrap(value))

    client.lookup_user_by_username = respond(user_type, lambda v: UserRecord(kind=v))
    client.get_collaborator_permission_level = respond(
        permission, lambda v: CollaboratorPermission(level=v)
    )
    client.get_repository_installation = respond(
        api_error("/installation") if installation is _UNSET else installation,
        lambda v: InstallationRecord(content_permission=v, installation_id=42),
    )
    client.get_repository_metadata = respond(
        default_branch, lambda v: RepositoryMetadata(default_branch=v)
    )
    client.get_branch_ref = respond(
        api_error("/git/ref") if branch_ref is _UNSET else branch_ref,
        lambda v: BranchRef(ref=v),
    )
    return client


@pytest.fixture
def repository() -> RepositoryRef:
    """Target repository used across tests."""
    return RepositoryRef(owner="test-owner", name="test-repo")


@pytest.fixture
def client_factory():
    """Factory fixture for mocked platform clients."""
    return make_client
