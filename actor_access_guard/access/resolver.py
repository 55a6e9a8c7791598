"""Write-access resolution for the triggering actor."""

from collections.abc import Sequence

from ..exceptions import WriteAccessCheckError
from ..identity import classify_actor
from ..logging_utils import GuardLog, bind_logger
from ..protocol import AccessDecision, ActorIdentity, PlatformClient, RepositoryRef
from .strategies import DEFAULT_AUTOMATED_STRATEGIES, AccessStrategy, fetch_collaborator_level


class WriteAccessResolver:
    """Decides whether an actor holds write-level access to a repository.

    Human actors (and actors whose type could not be looked up) are checked
    against their collaborator permission level only. Bot actors get the
    ordered strategy chain, since the platform's permission signals for app
    identities are unreliable; the chain stops at the first GRANTED.

    The resolver holds no per-call state and may be shared across
    concurrent checks.
    """

    def __init__(self, strategies: Sequence[AccessStrategy] = DEFAULT_AUTOMATED_STRATEGIES):
        self.strategies = tuple(strategies)

    async def resolve(
        self,
        client: PlatformClient,
        username: str,
        repository: RepositoryRef,
        log: GuardLog | None = None,
    ) -> bool:
        """Return True if ``username`` has write access to ``repository``.

        Raises:
            RepositoryConfigError: If the repository reference is malformed
            WriteAccessCheckError: If the collaborator lookup fails for a
                non-bot actor, which has no fallback
        """
        repository.validate()
        log = bind_logger(log, "resolver", actor=username, repository=repository.full_name)

        log.info(f"Checking write permissions for actor: {username}")

        identity = await classify_actor(client, username, log)

        if identity.is_automated:
            log.info(f"GitHub App detected: {username}, checking permissions via multiple methods")
            return await self._resolve_automated(client, identity, repository, log)

        return await self._resolve_human(client, identity, repository, log)

    async def _resolve_automated(
        self,
        client: PlatformClient,
        identity: ActorIdentity,
        repository: RepositoryRef,
        log: GuardLog,
    ) -> bool:
        for strategy in self.strategies:
            decision = await strategy(client, identity, repository, log)
            name = getattr(strategy, "__name__", repr(strategy))
            log.debug(f"Strategy {name} -> {decision.value}", extra={"decision": decision.value})
            if decision == AccessDecision.GRANTED:
                return True

        log.warning("Bot lacks write permissions based on all checks")
        return False

    async def _resolve_human(
        self,
        client: PlatformClient,
        identity: ActorIdentity,
        repository: RepositoryRef,
        log: GuardLog,
    ) -> bool:
        try:
            level = await fetch_collaborator_level(client, identity, repository)
        except Exception as e:
            log.warning(f"Unable to fetch collaborator level for {identity.username}: {e}")
            raise WriteAccessCheckError(identity.username, repository.full_name, e) from e

        log.info(f"Human collaborator permission level: {level.name.lower()}")
        if level.is_write_eligible:
            log.info(f"Human has write access: {level.name.lower()}")
            return True

        log.warning(f"Human has insufficient permissions: {level.name.lower()}")
        return False


async def check_write_access(
    client: PlatformClient,
    username: str,
    repository: RepositoryRef,
    log: GuardLog | None = None,
) -> bool:
    """Determine whether ``username`` has write-level access to ``repository``.

    Uses the default strategy chain. See WriteAccessResolver.resolve.
    """
    return await WriteAccessResolver().resolve(client, username, repository, log)
