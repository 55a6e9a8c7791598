"""Facade running both actor checks for one configured invocation."""

import logging

from .access import WriteAccessResolver, check_human_actor
from .config import GuardConfig
from .logging_utils import GuardLoggerAdapter
from .protocol import PlatformClient

logger = logging.getLogger(__name__)


class ActorGuard:
    """Runs the human-actor gate and the write-access check for a config.

    Usage:
        async with GitHubClient.from_config(config) as client:
            guard = ActorGuard(client, config)
            if not await guard.verify():
                ...  # actor lacks write access
    """

    def __init__(
        self,
        client: PlatformClient,
        config: GuardConfig,
        resolver: WriteAccessResolver | None = None,
    ):
        self.client = client
        self.config = config
        self.resolver = resolver or WriteAccessResolver()

    def _log(self) -> GuardLoggerAdapter:
        return GuardLoggerAdapter(
            logger, {"actor": self.config.actor, "repository": self.config.repository}
        )

    async def check_human_actor(self) -> None:
        """Raise unless the actor is human (or an allowed bot)."""
        await check_human_actor(
            self.client,
            self.config.actor,
            allow_automated_actors=self.config.allow_automated_actors,
            log=self._log(),
        )

    async def check_write_access(self) -> bool:
        """Return True if the actor has write access to the repository."""
        return await self.resolver.resolve(
            self.client, self.config.actor, self.config.repository_ref, self._log()
        )

    async def verify(self) -> bool:
        """Run the human-actor gate, then the write-access check.

        Raises:
            ActorCheckError: If the gate rejects the actor
            WriteAccessCheckError: If write access cannot be decided
        """
        await self.check_human_actor()
        return await self.check_write_access()
