"""
Core types and the platform client protocol.

This module defines the data types exchanged between the checks and the
PlatformClient protocol that any hosting-platform adapter must satisfy.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol

from .exceptions import RepositoryConfigError

# =============================================================================
# Actor Identity
# =============================================================================


class AccountKind(Enum):
    """Account kinds reported by the hosting platform."""

    HUMAN = "User"
    AUTOMATED = "Bot"
    OTHER = "other"  # Organization, Mannequin, ...
    UNKNOWN = "unknown"  # Lookup failed

    @classmethod
    def from_reported_type(cls, reported_type: str | None) -> "AccountKind":
        """Map the platform's account type string to a kind."""
        if reported_type is None:
            return cls.UNKNOWN
        if reported_type == cls.HUMAN.value:
            return cls.HUMAN
        if reported_type == cls.AUTOMATED.value:
            return cls.AUTOMATED
        return cls.OTHER


@dataclass(frozen=True)
class ActorIdentity:
    """The account that triggered the workflow, classified for one check.

    Built fresh per check and discarded afterwards. ``reported_type`` is the
    raw type string from the platform (None if the lookup failed).
    """

    username: str
    kind: AccountKind
    reported_type: str | None = None
    lookup_error: Exception | None = None

    @property
    def is_human(self) -> bool:
        return self.kind == AccountKind.HUMAN

    @property
    def is_automated(self) -> bool:
        return self.kind == AccountKind.AUTOMATED

    @property
    def is_classified(self) -> bool:
        return self.kind != AccountKind.UNKNOWN


# =============================================================================
# Repository Reference
# =============================================================================


@dataclass(frozen=True)
class RepositoryRef:
    """Owner/name pair identifying a repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name

    def validate(self) -> None:
        """Raise RepositoryConfigError if the reference cannot be used."""
        for part, value in (("owner", self.owner), ("name", self.name)):
            if not isinstance(value, str) or not value.strip():
                raise RepositoryConfigError(f"{self.owner}/{self.name}", f"empty {part}")
            if "/" in value or value != value.strip():
                raise RepositoryConfigError(
                    f"{self.owner}/{self.name}", f"invalid characters in {part}"
                )
            if value in (".", ".."):
                raise RepositoryConfigError(
                    f"{self.owner}/{self.name}", f"dot segment as {part}"
                )

    @classmethod
    def parse(cls, full_name: str) -> "RepositoryRef":
        """Build a reference from ``owner/name``.

        Raises:
            RepositoryConfigError: If the value is not exactly two non-empty parts
        """
        parts = (full_name or "").split("/")
        if len(parts) != 2:
            raise RepositoryConfigError(full_name, "expected 'owner/name'")
        ref = cls(owner=parts[0], name=parts[1])
        ref.validate()
        return ref


# =============================================================================
# Permission Types
# =============================================================================


class AccessDecision(Enum):
    """Outcome of a single write-access strategy."""

    GRANTED = "granted"
    DENIED = "denied"
    INCONCLUSIVE = "inconclusive"  # Strategy could not run


class PermissionLevel(IntEnum):
    """Repository permission tiers, totally ordered."""

    NONE = 0
    READ = 1
    WRITE = 2
    ADMIN = 3

    @classmethod
    def parse(cls, value: str | None) -> "PermissionLevel":
        """Map a platform permission string onto the ordered levels.

        ``maintain`` counts as write and ``triage`` as read; anything
        unrecognised is treated as no access.
        """
        normalized = (value or "").strip().lower()
        return _PERMISSION_ALIASES.get(normalized, cls.NONE)

    @property
    def is_write_eligible(self) -> bool:
        return self >= PermissionLevel.WRITE


_PERMISSION_ALIASES: dict[str, PermissionLevel] = {
    "none": PermissionLevel.NONE,
    "read": PermissionLevel.READ,
    "triage": PermissionLevel.READ,
    "write": PermissionLevel.WRITE,
    "maintain": PermissionLevel.WRITE,
    "admin": PermissionLevel.ADMIN,
}


# =============================================================================
# Remote Records
# =============================================================================


@dataclass(frozen=True)
class UserRecord:
    """Account lookup result."""

    kind: str


@dataclass(frozen=True)
class CollaboratorPermission:
    """Collaborator permission level lookup result."""

    level: str


@dataclass(frozen=True)
class InstallationRecord:
    """App installation bound to a repository."""

    content_permission: str | None
    installation_id: int | None = None


@dataclass(frozen=True)
class RepositoryMetadata:
    """Subset of repository metadata used by the capability probe."""

    default_branch: str


@dataclass(frozen=True)
class BranchRef:
    """A resolved git reference."""

    ref: str


# =============================================================================
# Platform Client Protocol
# =============================================================================


class PlatformClient(Protocol):
    """Remote calls the checks depend on.

    Every method raises on failure (unknown user, missing installation,
    insufficient credentials, network error). The checks decide which
    failures are fatal.
    """

    async def lookup_user_by_username(self, username: str) -> UserRecord: ...

    async def get_collaborator_permission_level(
        self, owner: str, repo: str, username: str
    ) -> CollaboratorPermission: ...

    async def get_repository_installation(self, owner: str, repo: str) -> InstallationRecord: ...

    async def get_repository_metadata(self, owner: str, repo: str) -> RepositoryMetadata: ...

    async def get_branch_ref(self, owner: str, repo: str, ref: str) -> BranchRef: ...
