"""
Human-actor gate.

Prevents automated tools or bots from triggering privileged work unless
the caller explicitly allows automated actors.
"""

from ..exceptions import ActorTypeUndeterminedError, NonHumanActorError
from ..identity import classify_actor
from ..logging_utils import GuardLog, bind_logger
from ..protocol import AccountKind, PlatformClient


async def check_human_actor(
    client: PlatformClient,
    username: str,
    allow_automated_actors: bool = False,
    log: GuardLog | None = None,
) -> None:
    """Verify that ``username`` is a human account.

    Returns silently on success, including when the actor is a bot and
    ``allow_automated_actors`` is set.

    Args:
        client: Platform client used for the account lookup
        username: Login of the triggering actor
        allow_automated_actors: Let Bot accounts through
        log: Invocation-scoped logger

    Raises:
        ActorTypeUndeterminedError: If the account lookup failed
        NonHumanActorError: If the account is not a human (and not an allowed bot)
    """
    log = bind_logger(log, "gate", actor=username)

    identity = await classify_actor(client, username, log)

    if identity.kind == AccountKind.UNKNOWN:
        raise ActorTypeUndeterminedError(username, identity.lookup_error)

    log.info(f"Actor type: {identity.reported_type}")

    if allow_automated_actors and identity.is_automated:
        log.info(f"Bot users are allowed, skipping human actor check for: {username}")
        return

    if not identity.is_human:
        raise NonHumanActorError(username, identity.reported_type or "")

    log.info(f"Verified human actor: {username}")
