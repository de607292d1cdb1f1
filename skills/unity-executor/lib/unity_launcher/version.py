"""
Unity Launcher - Project Version Reader

Reads the editor version a Unity project was saved with from
ProjectSettings/ProjectVersion.txt.
"""

from pathlib import Path

from .errors import ParseError

VERSION_FILE = Path("ProjectSettings") / "ProjectVersion.txt"
VERSION_MARKER = "m_EditorVersion:"


def get_version_file(project_path: Path) -> Path:
    """Return the path of the version descriptor inside a project."""
    return Path(project_path) / VERSION_FILE


def read_project_version(project_path: Path) -> str:
    """
    Extract the Unity editor version required by a project.

    The value is the second whitespace-separated field of the first line
    containing ``m_EditorVersion:``.

    Args:
        project_path: Unity project root (the folder holding ProjectSettings)

    Returns:
        Version string, e.g. "2021.3.1f1"

    Raises:
        ParseError: If the file is missing, unreadable or has no version line
    """
    version_file = get_version_file(project_path)

    try:
        content = version_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to parse project version. Error: {e}") from e

    version_line = next(
        (line for line in content.splitlines() if VERSION_MARKER in line),
        None
    )
    if version_line is None:
        raise ParseError(
            f"Failed to parse project version. Error: no '{VERSION_MARKER}' line in {version_file}"
        )

    fields = version_line.split()
    if len(fields) < 2:
        raise ParseError(
            f"Failed to parse project version. Error: empty version in line '{version_line.strip()}'"
        )

    return fields[1].strip()
