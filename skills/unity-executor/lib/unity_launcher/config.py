"""
Unity Launcher - Run Configuration

LaunchConfig holds every input of one launcher run. It is built once, from
the environment the CI step provides and/or command line flags, and then
handed to the launcher unchanged.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigError

MODE_BUILD = "build"
MODE_RUN = "run"
MODE_LEGACY = "legacy"
MODES = (MODE_BUILD, MODE_RUN, MODE_LEGACY)

DEFAULT_LOG_PATHS = {
    MODE_BUILD: "Build/Releases/build_output.log",
    MODE_RUN: "unity_output.log",
    MODE_LEGACY: "Build/Releases/build_output.log",
}

# Environment variable names used by the CI step
ENV_INSTALL_DIR = "unity_install_dir"
ENV_PROJECT_PATH = "project_path"
ENV_LOG_PATH = "log_path"
ENV_BUILD_METHOD = "build_method"
ENV_CUSTOM_ARGS = "custom_args"
ENV_CUSTOM_OPTIONS = "custom_options"
# Legacy log naming: <log_dir>/<log_name>_<build_version>.log
ENV_LOG_DIR = "log_dir"
ENV_LOG_NAME = "log_name"
ENV_BUILD_VERSION = "build_version"


@dataclass(frozen=True)
class LaunchConfig:
    """Inputs for a single launcher run."""

    project_path: Optional[Path] = None
    install_dir: Optional[str] = None
    log_path: Optional[str] = None
    build_method: str = ""
    custom_args: str = ""
    mode: str = MODE_BUILD
    log_dir: Optional[str] = None
    log_name: Optional[str] = None
    build_version: Optional[str] = None

    @property
    def blocking(self) -> bool:
        return self.mode == MODE_LEGACY

    @property
    def auto_quit(self) -> bool:
        return self.mode != MODE_RUN

    def resolved_project_path(self) -> Path:
        """Absolute project path; the current directory for run mode when unset."""
        if self.project_path is None:
            return Path.cwd()
        return Path(self.project_path).resolve()

    def resolved_log_path(self) -> Path:
        """Absolute log file path, relative paths being taken from the project root."""
        log_path = self.log_path or self._legacy_log_path() or DEFAULT_LOG_PATHS[self.mode]
        return self.resolved_project_path() / log_path

    def _legacy_log_path(self) -> Optional[Path]:
        """Versioned log name used by blocking builds when log_name is given."""
        if self.mode != MODE_LEGACY or not self.log_name:
            return None
        name = f"{self.log_name}_{self.build_version}" if self.build_version else self.log_name
        return Path(self.log_dir or "") / f"{name}.log"

    def validate(self) -> "LaunchConfig":
        """
        Check that the inputs required by the selected mode are present.

        Raises:
            ConfigError: On an unknown mode or a missing required input
        """
        if self.mode not in MODES:
            raise ConfigError(f"Unknown mode '{self.mode}'. Expected one of: {', '.join(MODES)}")

        if self.mode in (MODE_BUILD, MODE_LEGACY):
            if self.project_path is None:
                raise ConfigError(f"A project path is required in {self.mode} mode")
            if not self.build_method:
                raise ConfigError(f"A build method is required in {self.mode} mode")

        return self


def _env_value(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name, "")
    return value if value else None


def load_config_from_env(environ: Optional[Mapping[str, str]] = None,
                         mode: str = MODE_BUILD) -> LaunchConfig:
    """
    Build a LaunchConfig from environment variables.

    Empty values count as unset. The custom argument string is read from
    ``custom_args`` and falls back to ``custom_options``.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        mode: Run mode the configuration is for

    Returns:
        Unvalidated LaunchConfig
    """
    if environ is None:
        environ = os.environ

    project_path = _env_value(environ, ENV_PROJECT_PATH)
    custom_args = _env_value(environ, ENV_CUSTOM_ARGS) or _env_value(environ, ENV_CUSTOM_OPTIONS) or ""

    return LaunchConfig(
        project_path=Path(project_path) if project_path else None,
        install_dir=_env_value(environ, ENV_INSTALL_DIR),
        log_path=_env_value(environ, ENV_LOG_PATH),
        build_method=_env_value(environ, ENV_BUILD_METHOD) or "",
        custom_args=custom_args,
        mode=mode,
        log_dir=_env_value(environ, ENV_LOG_DIR),
        log_name=_env_value(environ, ENV_LOG_NAME),
        build_version=_env_value(environ, ENV_BUILD_VERSION),
    )


def apply_overrides(config: LaunchConfig, **overrides) -> LaunchConfig:
    """Return a copy of config with every non-None override applied."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **changes)
