#!/usr/bin/env python3
"""
Unity Launcher - Installation and Executable Discovery

All functions use filesystem-based discovery. Locating an editor is a
two-phase search:

1. Breadth-first walk from the install root for the first directory whose
   name contains the project's version string.
2. Depth-first walk inside that directory for the platform's editor binary.
"""

import logging
import os
import platform
from collections import deque
from pathlib import Path
from typing import Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_INSTALL_DIRS = {
    "Windows": "C:\\Program Files\\",
    "Darwin": "/Applications/",
    "Linux": "/opt/",
}

EXECUTABLE_SUFFIXES = {
    "Windows": "Unity.exe",
    "Darwin": "Unity.app/Contents/MacOS/Unity",
    "Linux": "Unity",
}


def _current_platform(system: Optional[str] = None) -> str:
    system = system or platform.system()
    if system not in EXECUTABLE_SUFFIXES:
        raise ConfigError(f"Unsupported platform: {system}")
    return system


def get_unity_install_dir(install_dir: Optional[str] = None, system: Optional[str] = None) -> Path:
    """
    Resolve the root directory under which Unity installations are searched.

    Args:
        install_dir: Explicit root; used as-is when non-empty
        system: Platform name as returned by platform.system() (defaults to current)

    Returns:
        Path to the install root

    Raises:
        ConfigError: If no root was given and the platform is unsupported
    """
    if install_dir:
        return Path(install_dir)
    return Path(DEFAULT_INSTALL_DIRS[_current_platform(system)])


def get_executable_suffix(system: Optional[str] = None) -> str:
    """Relative path of the editor binary inside an installation, per platform."""
    return EXECUTABLE_SUFFIXES[_current_platform(system)]


def _list_directories(directory: Path) -> list[os.DirEntry]:
    """Immediate subdirectories of a directory, sorted by name. Symlinks are not followed."""
    with os.scandir(directory) as it:
        entries = [entry for entry in it if entry.is_dir(follow_symlinks=False)]
    entries.sort(key=lambda entry: entry.name)
    return entries


def find_unity_directory(install_dir: Path, version: str) -> Optional[Path]:
    """
    Breadth-first search for the installation folder of a Unity version.

    Within each directory entries are examined last-to-first and queued in
    that order, so later siblings are both matched and explored first.
    Directories that cannot be listed due to permissions are skipped.

    Args:
        install_dir: Root directory to search from (never matched itself)
        version: Case-sensitive substring the folder name must contain

    Returns:
        Path to the first matching directory, or None if not found

    Raises:
        OSError: Any listing error other than a permission error
    """
    queue = deque([Path(install_dir)])

    while queue:
        current = queue.popleft()

        try:
            entries = _list_directories(current)
        except PermissionError:
            logger.debug(f"Skipping unreadable directory: {current}")
            continue

        for entry in reversed(entries):
            path = current / entry.name
            if version in entry.name:
                return path
            queue.append(path)

    return None


def find_unity_executable(unity_dir: Path, executable_name: str) -> Optional[Path]:
    """
    Depth-first search for the editor binary below an installation folder.

    The binary directly under unity_dir wins; otherwise subdirectories are
    searched pre-order in listing order.

    Args:
        unity_dir: Installation folder found by find_unity_directory
        executable_name: Relative executable path, see get_executable_suffix

    Returns:
        Path to the executable, or None if not found
    """
    file_path = Path(unity_dir) / executable_name
    if file_path.exists():
        return file_path

    for entry in _list_directories(unity_dir):
        result = find_unity_executable(Path(unity_dir) / entry.name, executable_name)
        if result:
            return result

    return None


def get_unity_executable(install_dir: Path, version: str, system: Optional[str] = None) -> Optional[Path]:
    """
    Locate the editor executable for a Unity version.

    Args:
        install_dir: Root directory containing Unity installations
        version: Version string read from the project
        system: Platform name (defaults to current)

    Returns:
        Path to the executable, or None if the installation or binary is missing

    Raises:
        ConfigError: If the platform is unsupported (checked before searching)
    """
    executable_name = get_executable_suffix(system)

    unity_dir = find_unity_directory(install_dir, version)
    if not unity_dir:
        logger.error("Unable to find the corresponding Unity version installation folder.")
        return None

    executable = find_unity_executable(unity_dir, executable_name)
    if not executable:
        logger.error(f"Unable to find {executable_name} under {unity_dir}")
    return executable
