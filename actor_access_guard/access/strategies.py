"""
Write-access strategies.

Each strategy is an async callable returning an AccessDecision. Strategies
absorb their own remote failures: a failed probe becomes INCONCLUSIVE (the
check could not run) or DENIED, never an exception.
"""

from collections.abc import Awaitable, Callable

from ..logging_utils import GuardLog
from ..protocol import (
    AccessDecision,
    ActorIdentity,
    PermissionLevel,
    PlatformClient,
    RepositoryRef,
)

AccessStrategy = Callable[
    [PlatformClient, ActorIdentity, RepositoryRef, GuardLog],
    Awaitable[AccessDecision],
]


async def fetch_collaborator_level(
    client: PlatformClient,
    identity: ActorIdentity,
    repository: RepositoryRef,
) -> PermissionLevel:
    """Look up the actor's collaborator permission level. Raises on failure."""
    result = await client.get_collaborator_permission_level(
        repository.owner, repository.name, identity.username
    )
    return PermissionLevel.parse(result.level)


async def installation_permission_strategy(
    client: PlatformClient,
    identity: ActorIdentity,
    repository: RepositoryRef,
    log: GuardLog,
) -> AccessDecision:
    """Check the app installation's ``contents`` scope on the repository.

    The installation endpoint usually needs app (JWT) credentials, so an
    installation token often gets an error here; that is INCONCLUSIVE.
    """
    try:
        installation = await client.get_repository_installation(
            repository.owner, repository.name
        )
    except Exception as e:
        log.warning(f"Failed to check app installation permissions (may require JWT): {e}")
        return AccessDecision.INCONCLUSIVE

    log.info(f"App installation found: {installation.installation_id}")
    log.info(f"App installation permissions -> contents:{installation.content_permission}")

    if installation.content_permission in ("write", "admin"):
        log.info("App has write-level access via installation permissions")
        return AccessDecision.GRANTED

    log.warning("App lacks write-level access via installation permissions")
    return AccessDecision.DENIED


async def collaborator_permission_strategy(
    client: PlatformClient,
    identity: ActorIdentity,
    repository: RepositoryRef,
    log: GuardLog,
) -> AccessDecision:
    """Check whether the actor is a direct collaborator with write access."""
    try:
        level = await fetch_collaborator_level(client, identity, repository)
    except Exception as e:
        log.warning(f"Could not check collaborator permissions for {identity.username}: {e}")
        return AccessDecision.INCONCLUSIVE

    log.info(f"Collaborator permission level for {identity.username}: {level.name.lower()}")
    if level.is_write_eligible:
        log.info(f"{identity.username} has write access via collaborator: {level.name.lower()}")
        return AccessDecision.GRANTED

    log.warning(f"{identity.username} lacks write access via collaborator: {level.name.lower()}")
    return AccessDecision.DENIED


async def capability_probe_strategy(
    client: PlatformClient,
    identity: ActorIdentity,
    repository: RepositoryRef,
    log: GuardLog,
) -> AccessDecision:
    """Probe access by reading the default branch ref.

    For app tokens the repository's declared ``permissions.push`` is always
    false, so reaching the git refs of the default branch is taken as
    evidence of write-tier trust instead.
    """
    try:
        metadata = await client.get_repository_metadata(repository.owner, repository.name)
    except Exception as e:
        log.warning(f"Failed to test write access: {e}")
        return AccessDecision.DENIED

    try:
        branch_ref = await client.get_branch_ref(
            repository.owner, repository.name, f"heads/{metadata.default_branch}"
        )
    except Exception as e:
        log.warning(f"Could not access git refs: {e}")
        return AccessDecision.DENIED

    log.info(f"Successfully accessed default branch ref: {branch_ref.ref}")
    log.info("App has write access based on capability test")
    return AccessDecision.GRANTED


DEFAULT_AUTOMATED_STRATEGIES: tuple[AccessStrategy, ...] = (
    installation_permission_strategy,
    collaborator_permission_strategy,
    capability_probe_strategy,
)
