"""
Actor Access Guard

Authorization checks for workflows triggered from a code-hosting platform.

Provides:
- Human-actor gate (reject bots unless explicitly allowed)
- Write-access resolution with a fallback chain for app/bot identities
- aiohttp GitHub REST adapter
- Structured JSON logging for CI runners

Usage:

    >>> from actor_access_guard import GitHubClient, GuardConfig, ActorGuard
    >>> config = GuardConfig.from_environment()
    >>> async with GitHubClient.from_config(config) as client:
    ...     guard = ActorGuard(client, config)
    ...     await guard.check_human_actor()
    ...     has_write = await guard.check_write_access()

Lower-level functions take any PlatformClient implementation:

    from actor_access_guard import check_human_actor, check_write_access, RepositoryRef

    await check_human_actor(client, "octocat", allow_automated_actors=False)
    await check_write_access(client, "octocat", RepositoryRef("octo-org", "octo-repo"))
"""

# Checks
from .access import (
    DEFAULT_AUTOMATED_STRATEGIES,
    AccessStrategy,
    WriteAccessResolver,
    capability_probe_strategy,
    check_human_actor,
    check_write_access,
    collaborator_permission_strategy,
    installation_permission_strategy,
)

# Configuration
from .config import GuardConfig

# Exceptions
from .exceptions import (
    ActorCheckError,
    ActorTypeUndeterminedError,
    GuardConfigError,
    GuardError,
    NonHumanActorError,
    PlatformAPIError,
    RepositoryConfigError,
    WriteAccessCheckError,
)

# Adapters
from .github import GitHubClient
from .guard import ActorGuard

# Identity
from .identity import classify_actor

# Logging
from .logging_utils import (
    GuardLoggerAdapter,
    StructuredJsonFormatter,
    configure_structured_logging,
    get_guard_logger,
)

# Types
from .protocol import (
    AccessDecision,
    AccountKind,
    ActorIdentity,
    BranchRef,
    CollaboratorPermission,
    InstallationRecord,
    PermissionLevel,
    PlatformClient,
    RepositoryMetadata,
    RepositoryRef,
    UserRecord,
)

__version__ = "0.1.0"

__all__ = [
    # Checks
    "check_human_actor",
    "check_write_access",
    "classify_actor",
    "WriteAccessResolver",
    "AccessStrategy",
    "DEFAULT_AUTOMATED_STRATEGIES",
    "installation_permission_strategy",
    "collaborator_permission_strategy",
    "capability_probe_strategy",
    "ActorGuard",
    # Types
    "AccessDecision",
    "AccountKind",
    "ActorIdentity",
    "PermissionLevel",
    "RepositoryRef",
    "PlatformClient",
    "UserRecord",
    "CollaboratorPermission",
    "InstallationRecord",
    "RepositoryMetadata",
    "BranchRef",
    # Config / adapters
    "GuardConfig",
    "GitHubClient",
    # Exceptions
    "GuardError",
    "ActorCheckError",
    "ActorTypeUndeterminedError",
    "NonHumanActorError",
    "WriteAccessCheckError",
    "RepositoryConfigError",
    "GuardConfigError",
    "PlatformAPIError",
    # Logging
    "StructuredJsonFormatter",
    "configure_structured_logging",
    "get_guard_logger",
    "GuardLoggerAdapter",
]
