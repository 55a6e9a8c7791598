"""Account type lookup for the triggering actor."""

import logging

from ..logging_utils import GuardLog, bind_logger
from ..protocol import AccountKind, ActorIdentity, PlatformClient

logger = logging.getLogger(__name__)


async def classify_actor(
    client: PlatformClient,
    username: str,
    log: GuardLog | None = None,
) -> ActorIdentity:
    """Look up ``username`` and classify its account type.

    Never raises: a failed lookup yields an UNKNOWN identity carrying the
    error, and each caller decides how strictly to treat it.

    Args:
        client: Platform client used for the lookup
        username: Login of the triggering actor
        log: Invocation-scoped logger (defaults to one bound to the actor)

    Returns:
        ActorIdentity with kind and the raw reported type
    """
    log = bind_logger(log, "identity", actor=username)

    try:
        record = await client.lookup_user_by_username(username)
    except Exception as e:
        log.warning(f"Failed to get user data for {username}: {e}")
        return ActorIdentity(username=username, kind=AccountKind.UNKNOWN, lookup_error=e)

    kind = AccountKind.from_reported_type(record.kind)
    if kind == AccountKind.OTHER:
        log.debug(f"Actor {username} reported unrecognised account type: {record.kind}")

    return ActorIdentity(username=username, kind=kind, reported_type=record.kind)
