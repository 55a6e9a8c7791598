"""Access checks: the human-actor gate and write-access resolution."""

from ..protocol import AccessDecision, PermissionLevel
from .gate import check_human_actor
from .resolver import WriteAccessResolver, check_write_access
from .strategies import (
    DEFAULT_AUTOMATED_STRATEGIES,
    AccessStrategy,
    capability_probe_strategy,
    collaborator_permission_strategy,
    installation_permission_strategy,
)

__all__ = [
    "AccessDecision",
    "AccessStrategy",
    "DEFAULT_AUTOMATED_STRATEGIES",
    "PermissionLevel",
    "WriteAccessResolver",
    "capability_probe_strategy",
    "check_human_actor",
    "check_write_access",
    "collaborator_permission_strategy",
    "installation_permission_strategy",
]
