"""Tests for relman.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relman.core.config import (
    CONFIG_FILENAME,
    ReleaseConfig,
    load_config,
    load_release_config,
)
from relman.core.result import Err, Ok


class TestReleaseConfig:
    """Test ReleaseConfig defaults and parsing."""

    def test_defaults(self) -> None:
        config = ReleaseConfig()
        assert config.project_name == "pre-commit-config"
        assert config.display_name == "Pre-commit Configuration"
        assert config.releases_dir == "releases"
        assert config.remote == "origin"

    def test_frozen(self) -> None:
        config = ReleaseConfig()
        with pytest.raises(AttributeError):
            config.remote = "upstream"  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ReleaseConfig.from_dict(
            {
                "project": {"name": "hooks", "display_name": "Hooks"},
                "release": {"releases_dir": "dist", "remote": "upstream"},
            }
        )
        assert config.project_name == "hooks"
        assert config.display_name == "Hooks"
        assert config.releases_dir == "dist"
        assert config.remote == "upstream"

    def test_from_dict_ignores_wrong_types(self) -> None:
        config = ReleaseConfig.from_dict({"project": {"name": 5}, "release": "nope"})
        assert config == ReleaseConfig()

    def test_releases_path_relative(self, tmp_path: Path) -> None:
        assert ReleaseConfig().releases_path(tmp_path) == tmp_path / "releases"

    def test_releases_path_absolute(self, tmp_path: Path) -> None:
        target = tmp_path / "out"
        config = ReleaseConfig(releases_dir=str(target))
        assert config.releases_path(tmp_path / "repo") == target

    def test_env_overrides_remote(self) -> None:
        config = ReleaseConfig().with_env({"GIT_REMOTE": "upstream"})
        assert config.remote == "upstream"

    def test_blank_env_is_ignored(self) -> None:
        config = ReleaseConfig(remote="fork").with_env({"GIT_REMOTE": "  "})
        assert config.remote == "fork"


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / CONFIG_FILENAME)
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[project\nname = ", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[project]\nname = "hooks"\n', encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.project_name == "hooks"
        assert result.value.remote == "origin"


class TestLoadReleaseConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        result = load_release_config(tmp_path, env={})
        assert isinstance(result, Ok)
        assert result.value == ReleaseConfig()

    def test_env_wins_over_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[release]\nremote = "fork"\n', encoding="utf-8")
        result = load_release_config(tmp_path, env={"GIT_REMOTE": "upstream"})
        assert isinstance(result, Ok)
        assert result.value.remote == "upstream"

    def test_file_remote_without_env(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[release]\nremote = "fork"\n', encoding="utf-8")
        result = load_release_config(tmp_path, env={})
        assert isinstance(result, Ok)
        assert result.value.remote == "fork"

    def test_broken_file_is_an_error(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("= broken", encoding="utf-8")
        result = load_release_config(tmp_path, env={})
        assert isinstance(result, Err)

    def test_uses_process_env_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GIT_REMOTE", "mirror")
        result = load_release_config(tmp_path)
        assert isinstance(result, Ok)
        assert result.value.remote == "mirror"
