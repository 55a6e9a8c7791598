"""
Guard configuration.

Configuration in a YAML file (e.g. .github/actor-guard.yaml):

```yaml
actor_guard:
  repository: "octo-org/octo-repo"
  actor: "octocat"
  api_url: "https://api.github.com"
  allow_automated_actors: false
  request_timeout: 30
```

Environment variables (GITHUB_TOKEN, GITHUB_REPOSITORY, GITHUB_ACTOR,
GITHUB_API_URL, ALLOW_BOT_ACTOR, ACTOR_GUARD_TIMEOUT) fill any value the
file leaves out. The token is never read from the file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import GuardConfigError
from .protocol import RepositoryRef

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "actor-access-guard"
DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass
class GuardConfig:
    """Settings for one guarded invocation.

    Attributes:
        token: API token for the hosting platform (acquired by the caller)
        repository: Target repository as ``owner/name``
        actor: Login of the triggering actor
        api_url: Base URL of the REST API
        allow_automated_actors: Let Bot accounts pass the human-actor gate
        request_timeout: Per-request timeout in seconds
        user_agent: User-Agent header sent with API requests
    """

    token: str
    repository: str
    actor: str
    api_url: str = DEFAULT_API_URL
    allow_automated_actors: bool = False
    request_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def repository_ref(self) -> RepositoryRef:
        """Parsed repository reference. Raises RepositoryConfigError if malformed."""
        return RepositoryRef.parse(self.repository)

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> GuardConfig:
        """Create configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            GuardConfigError: If a required value is missing or invalid
        """
        return cls._build({}, os.environ if environ is None else environ)

    @classmethod
    def from_yaml(cls, path: Path | str, environ: Mapping[str, str] | None = None) -> GuardConfig:
        """Create configuration from the ``actor_guard`` section of a YAML file.

        Raises:
            GuardConfigError: If the file cannot be parsed or a required value is missing
        """
        path = Path(path)
        try:
            content = yaml.safe_load(path.read_text()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise GuardConfigError(str(path), f"cannot load configuration: {e}") from e

        section = content.get("actor_guard", {}) if isinstance(content, dict) else None
        if not isinstance(section, dict):
            raise GuardConfigError("actor_guard", "section must be a mapping")

        return cls._build(section, os.environ if environ is None else environ)

    @classmethod
    def _build(cls, section: Mapping[str, Any], environ: Mapping[str, str]) -> GuardConfig:
        token = environ.get("GITHUB_TOKEN")
        repository = section.get("repository") or environ.get("GITHUB_REPOSITORY")
        actor = section.get("actor") or environ.get("GITHUB_ACTOR")

        for field_name, value in (("token", token), ("repository", repository), ("actor", actor)):
            if not value:
                raise GuardConfigError(field_name, "value is required")

        allow_bots = section.get("allow_automated_actors")
        if allow_bots is None:
            allow_bots = environ.get("ALLOW_BOT_ACTOR", "false")

        timeout_raw = section.get("request_timeout")
        if timeout_raw is None:
            timeout_raw = environ.get("ACTOR_GUARD_TIMEOUT") or None
        try:
            timeout = DEFAULT_TIMEOUT if timeout_raw is None else float(timeout_raw)
        except (TypeError, ValueError) as e:
            raise GuardConfigError("request_timeout", f"not a number: {timeout_raw!r}") from e
        if timeout <= 0:
            raise GuardConfigError("request_timeout", "must be positive")

        user_agent = section.get("user_agent")
        if user_agent is None:
            user_agent = DEFAULT_USER_AGENT
        if not isinstance(user_agent, str) or not user_agent.strip():
            raise GuardConfigError("user_agent", "must be a non-empty string")

        return cls(
            token=token,
            repository=repository,
            actor=actor,
            api_url=(section.get("api_url") or environ.get("GITHUB_API_URL") or DEFAULT_API_URL),
            allow_automated_actors=_parse_bool(allow_bots),
            request_timeout=timeout,
            user_agent=user_agent,
        )
