"""Tests for guard configuration."""

from pathlib import Path

import pytest
import yaml

from actor_access_guard.config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GuardConfig,
)
from actor_access_guard.exceptions import GuardConfigError, RepositoryConfigError
from actor_access_guard.protocol import RepositoryRef

BASE_ENV = {
    "GITHUB_TOKEN": "ghs_test",
    "GITHUB_REPOSITORY": "test-owner/test-repo",
    "GITHUB_ACTOR": "human-user",
}


class TestFromEnvironment:
    def test_minimal(self):
        config = GuardConfig.from_environment(BASE_ENV)

        assert config.token == "ghs_test"
        assert config.repository == "test-owner/test-repo"
        assert config.actor == "human-user"
        assert config.api_url == DEFAULT_API_URL
        assert config.allow_automated_actors is False
        assert config.request_timeout == DEFAULT_TIMEOUT

    def test_overrides(self):
        env = {
            **BASE_ENV,
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            "ALLOW_BOT_ACTOR": "true",
            "ACTOR_GUARD_TIMEOUT": "5",
        }

        config = GuardConfig.from_environment(env)

        assert config.api_url == "https://ghe.example.com/api/v3"
        assert config.allow_automated_actors is True
        assert config.request_timeout == 5.0

    @pytest.mark.parametrize("missing", ["GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_ACTOR"])
    def test_missing_required(self, missing):
        env = {k: v for k, v in BASE_ENV.items() if k != missing}

        with pytest.raises(GuardConfigError):
            GuardConfig.from_environment(env)

    @pytest.mark.parametrize("value", ["abc", "-1", "0"])
    def test_invalid_timeout(self, value):
        with pytest.raises(GuardConfigError) as exc_info:
            GuardConfig.from_environment({**BASE_ENV, "ACTOR_GUARD_TIMEOUT": value})

        assert exc_info.value.field == "request_timeout"

    def test_reads_os_environ_by_default(self, monkeypatch):
        for key, value in BASE_ENV.items():
            monkeypatch.setenv(key, value)

        assert GuardConfig.from_environment().actor == "human-user"

    def test_repository_ref(self):
        config = GuardConfig.from_environment(BASE_ENV)

        assert config.repository_ref == RepositoryRef(owner="test-owner", name="test-repo")

    def test_malformed_repository_ref(self):
        config = GuardConfig.from_environment({**BASE_ENV, "GITHUB_REPOSITORY": "no-slash"})

        with pytest.raises(RepositoryConfigError):
            _ = config.repository_ref


class TestFromYaml:
    def write(self, tmp_path: Path, data) -> Path:
        path = tmp_path / "actor-guard.yaml"
        path.write_text(yaml.safe_dump(data))
        return path

    def test_section_values_win(self, tmp_path):
        path = self.write(
            tmp_path,
            {
                "actor_guard": {
                    "repository": "yaml-owner/yaml-repo",
                    "actor": "claude-bot",
                    "allow_automated_actors": True,
                    "request_timeout": 10,
                }
            },
        )

        config = GuardConfig.from_yaml(path, environ=BASE_ENV)

        assert config.repository == "yaml-owner/yaml-repo"
        assert config.actor == "claude-bot"
        assert config.allow_automated_actors is True
        assert config.request_timeout == 10.0
        assert config.token == "ghs_test"

    def test_environment_fills_gaps(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": {"api_url": "https://ghe.example.com"}})

        config = GuardConfig.from_yaml(path, environ=BASE_ENV)

        assert config.actor == "human-user"
        assert config.api_url == "https://ghe.example.com"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert GuardConfig.from_yaml(path, environ=BASE_ENV).actor == "human-user"

    def test_zero_timeout_rejected(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": {"request_timeout": 0}})

        with pytest.raises(GuardConfigError) as exc_info:
            GuardConfig.from_yaml(path, environ={**BASE_ENV, "ACTOR_GUARD_TIMEOUT": "12"})

        assert exc_info.value.reason == "must be positive"

    def test_null_timeout_falls_back_to_environment(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": {"request_timeout": None}})

        config = GuardConfig.from_yaml(path, environ={**BASE_ENV, "ACTOR_GUARD_TIMEOUT": "12"})

        assert config.request_timeout == 12.0

    def test_null_user_agent_uses_default(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": {"user_agent": None}})

        config = GuardConfig.from_yaml(path, environ=BASE_ENV)

        assert config.user_agent == DEFAULT_USER_AGENT

    @pytest.mark.parametrize("value", [123, "", ["agent"]])
    def test_invalid_user_agent(self, tmp_path, value):
        path = self.write(tmp_path, {"actor_guard": {"user_agent": value}})

        with pytest.raises(GuardConfigError) as exc_info:
            GuardConfig.from_yaml(path, environ=BASE_ENV)

        assert exc_info.value.field == "user_agent"

    def test_custom_user_agent(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": {"user_agent": "release-bot/2.0"}})

        assert GuardConfig.from_yaml(path, environ=BASE_ENV).user_agent == "release-bot/2.0"

    def test_missing_file(self, tmp_path):
        with pytest.raises(GuardConfigError):
            GuardConfig.from_yaml(tmp_path / "missing.yaml", environ=BASE_ENV)

    def test_invalid_section(self, tmp_path):
        path = self.write(tmp_path, {"actor_guard": ["not", "a", "mapping"]})

        with pytest.raises(GuardConfigError) as exc_info:
            GuardConfig.from_yaml(path, environ=BASE_ENV)

        assert exc_info.value.field == "actor_guard"
