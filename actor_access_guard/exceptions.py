"""
Custom exceptions for actor access checks.

Gate failures carry stable, contractual message text; callers and
audit tooling may match against ``str(error)``.
"""


class GuardError(Exception):
    """Base exception for all actor access guard errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ActorCheckError(GuardError):
    """Raised when the human-actor gate rejects the triggering actor."""

    def __init__(self, message: str, username: str, details: dict | None = None):
        details = {"username": username, **(details or {})}
        super().__init__(message, details)
        self.username = username


class ActorTypeUndeterminedError(ActorCheckError):
    """Raised when the actor's account type could not be looked up."""

    def __init__(self, username: str, cause: Exception | None = None):
        details = {}
        if cause:
            details["cause"] = str(cause)
        super().__init__(f"Could not determine actor type for: {username}", username, details)
        self.cause = cause


class NonHumanActorError(ActorCheckError):
    """Raised when the actor is not a human account."""

    def __init__(self, username: str, actor_type: str):
        super().__init__(
            f"Workflow initiated by non-human actor: {username} (type: {actor_type}).",
            username,
            {"actor_type": actor_type},
        )
        self.actor_type = actor_type


class WriteAccessCheckError(GuardError):
    """Raised when write access cannot be decided for a human actor.

    Distinct from a denial: the permission lookup itself failed, which
    usually points to a transient platform problem.
    """

    def __init__(self, username: str, repository: str, cause: Exception | None = None):
        details = {"username": username, "repository": repository}
        message = f"Unable to determine write access for {username} on {repository}"
        if cause:
            details["cause"] = str(cause)
            message += f": {cause}"
        super().__init__(message, details)
        self.username = username
        self.repository = repository
        self.cause = cause


class RepositoryConfigError(GuardError):
    """Raised when a repository reference is malformed."""

    def __init__(self, value: str, reason: str):
        super().__init__(
            f"Invalid repository reference '{value}': {reason}",
            {"value": value, "reason": reason},
        )
        self.value = value
        self.reason = reason


class GuardConfigError(GuardError):
    """Raised when guard configuration is missing or invalid."""

    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid configuration for {field}: {reason}", {"field": field, "reason": reason}
        )
        self.field = field
        self.reason = reason


class PlatformAPIError(GuardError):
    """Raised when a call to the hosting platform API fails.

    Note: ``status`` is None for transport failures (DNS, connection reset,
    timeouts) where no HTTP response was received.
    """

    def __init__(
        self,
        endpoint: str,
        status: int | None = None,
        reason: str | None = None,
        cause: Exception | None = None,
    ):
        details: dict = {"endpoint": endpoint}
        if status is not None:
            details["status"] = status
        if reason:
            details["reason"] = reason
        if cause:
            details["cause"] = str(cause)
        message = f"Platform API request failed for {endpoint}"
        if status is not None:
            message += f" (HTTP {status})"
        if reason:
            message += f": {reason}"
        elif cause:
            message += f": {cause}"
        super().__init__(message, details)
        self.endpoint = endpoint
        self.status = status
        self.reason = reason
        self.cause = cause
