"""GitHub adapter for the platform client protocol."""

from .client import GITHUB_API_VERSION, GitHubClient

__all__ = ["GITHUB_API_VERSION", "GitHubClient"]
