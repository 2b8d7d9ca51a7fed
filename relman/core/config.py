"""Typed release configuration.

Settings come from an optional ``.relman.toml`` at the repository top
level, with the remote name overridable through ``GIT_REMOTE``:

    [project]
    name = "pre-commit-config"
    display_name = "Pre-commit Configuration"

    [release]
    releases_dir = "releases"
    remote = "origin"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_DISPLAY_NAME",
    "DEFAULT_PROJECT_NAME",
    "DEFAULT_RELEASES_DIR",
    "DEFAULT_REMOTE",
    "REMOTE_ENV_VAR",
    "ConfigError",
    "ReleaseConfig",
    "load_config",
    "load_release_config",
]

CONFIG_FILENAME = ".relman.toml"
REMOTE_ENV_VAR = "GIT_REMOTE"

DEFAULT_PROJECT_NAME = "pre-commit-config"
DEFAULT_DISPLAY_NAME = "Pre-commit Configuration"
DEFAULT_RELEASES_DIR = "releases"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the config file cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Per-repository release settings."""

    project_name: str = DEFAULT_PROJECT_NAME
    display_name: str = DEFAULT_DISPLAY_NAME
    releases_dir: str = DEFAULT_RELEASES_DIR
    remote: str = DEFAULT_REMOTE

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ReleaseConfig:
        """Create a ReleaseConfig from parsed TOML."""
        project: StrDict = get_table(data, "project") or {}
        release: StrDict = get_table(data, "release") or {}

        return cls(
            project_name=get_str(project, "name") or DEFAULT_PROJECT_NAME,
            display_name=get_str(project, "display_name") or DEFAULT_DISPLAY_NAME,
            releases_dir=get_str(release, "releases_dir") or DEFAULT_RELEASES_DIR,
            remote=get_str(release, "remote") or DEFAULT_REMOTE,
        )

    def releases_path(self, repo_root: Path) -> Path:
        """Absolute releases directory for a repository."""
        path = Path(self.releases_dir).expanduser()
        if path.is_absolute():
            return path
        return repo_root / path

    def with_env(self, env: Mapping[str, str]) -> ReleaseConfig:
        """Apply environment overrides (``GIT_REMOTE``)."""
        remote = env.get(REMOTE_ENV_VAR, "").strip()
        if not remote:
            return self
        return replace(self, remote=remote)


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ReleaseConfig, ConfigError]:
    """Load and parse a release config file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(ReleaseConfig.from_dict(result.value))


def load_release_config(
    repo_root: Path,
    env: Mapping[str, str] | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Load ``.relman.toml`` from a repository, falling back to defaults.

    A missing file is not an error. Environment overrides are applied last.
    """
    environ = os.environ if env is None else env
    path = repo_root / CONFIG_FILENAME
    if not path.exists():
        return Ok(ReleaseConfig().with_env(environ))

    result = load_config(path)
    if isinstance(result, Err):
        return result
    return Ok(result.value.with_env(environ))
