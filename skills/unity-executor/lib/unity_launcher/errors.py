"""
Unity Launcher - Error Types

Every failure surfaced by the launcher derives from LauncherError so the
entry point can report it once and map it to an exit status.
"""


class LauncherError(RuntimeError):
    """Base class for launcher failures."""


class ConfigError(LauncherError):
    """Raised for an unsupported platform or a missing required input."""


class ParseError(LauncherError):
    """Raised when the project version file is missing, unreadable or malformed."""


class DiscoveryError(LauncherError):
    """Raised when no Unity installation or executable matches the project version."""


class SpawnError(LauncherError):
    """Raised when the Unity process could not be launched at all."""
