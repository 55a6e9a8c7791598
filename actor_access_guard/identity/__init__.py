"""
Actor identity classification.

Resolves the account kind (human, bot, other) of the triggering actor.
"""

from ..protocol import AccountKind, ActorIdentity
from .classifier import classify_actor

__all__ = ["AccountKind", "ActorIdentity", "classify_actor"]
