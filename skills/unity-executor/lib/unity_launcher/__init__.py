"""
Unity Launcher Library

Locates the Unity editor matching a project's version and runs it in batch
mode, streaming its output to the console and a log file.
Used by the unity-executor skill and its CI entry point.
"""

from .arguments import get_build_arguments, get_legacy_build_arguments, parse_custom_options
from .config import LaunchConfig, load_config_from_env
from .errors import ConfigError, DiscoveryError, LauncherError, ParseError, SpawnError
from .launcher import launch, run
from .paths import (
    find_unity_directory,
    find_unity_executable,
    get_unity_executable,
    get_unity_install_dir,
)
from .runner import UnityProcessRunner
from .version import read_project_version

__all__ = [
    "LaunchConfig",
    "load_config_from_env",
    "read_project_version",
    "get_unity_install_dir",
    "find_unity_directory",
    "find_unity_executable",
    "get_unity_executable",
    "get_build_arguments",
    "get_legacy_build_arguments",
    "parse_custom_options",
    "UnityProcessRunner",
    "launch",
    "run",
    "LauncherError",
    "ConfigError",
    "ParseError",
    "DiscoveryError",
    "SpawnError",
]
