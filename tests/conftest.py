"""
Shared pytest configuration and fixtures for unity-launcher tests.
"""

import pytest
import stat
import sys
from pathlib import Path

# Add skill lib directory to Python path
PLUGIN_ROOT = Path(__file__).parent.parent
SKILLS_ROOT = PLUGIN_ROOT / "skills"

UNITY_EXECUTOR_LIB = SKILLS_ROOT / "unity-executor" / "lib"
if str(UNITY_EXECUTOR_LIB) not in sys.path:
    sys.path.insert(0, str(UNITY_EXECUTOR_LIB))

UNITY_VERSION = "2021.3.1f1"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "posix: Tests that execute shebang scripts")


def pytest_collection_modifyitems(config, items):
    """Skip tests that need a POSIX shell-style executable on Windows."""
    if sys.platform != "win32":
        return
    skip_posix = pytest.mark.skip(reason="Shebang-based fake editor requires POSIX")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)


# ============================================================================
# Shared Fixtures
# ============================================================================

FAKE_EDITOR_SOURCE = """#!{python}
import sys

args = sys.argv[1:]
print("ARGS:" + "|".join(args))
print("editor warning", file=sys.stderr)

if "-logFile" in args:
    log_file = args[args.index("-logFile") + 1]
    if log_file != "-":
        with open(log_file, "a", encoding="utf-8") as f:
            f.write("editor wrote its own log\\n")

code = int(args[args.index("-exitCode") + 1]) if "-exitCode" in args else 0
sys.exit(code)
"""


def write_version_file(project_dir: Path, content: str) -> Path:
    settings = project_dir / "ProjectSettings"
    settings.mkdir(parents=True, exist_ok=True)
    version_file = settings / "ProjectVersion.txt"
    version_file.write_text(content, encoding="utf-8")
    return version_file


@pytest.fixture
def unity_version():
    return UNITY_VERSION


@pytest.fixture
def unity_project(tmp_path):
    """
    Create a minimal Unity project with a ProjectVersion.txt.

    Returns:
        Path to the project directory
    """
    project_dir = tmp_path / "TestProject"
    project_dir.mkdir()
    write_version_file(
        project_dir,
        f"m_EditorVersion: {UNITY_VERSION}\n"
        f"m_EditorVersionWithRevision: {UNITY_VERSION} (3b70a0754835)\n"
    )
    (project_dir / "Assets").mkdir()
    return project_dir


@pytest.fixture
def install_root(tmp_path):
    """
    Create a Unity Hub style install tree without any editor binary.

    Layout: <root>/Unity/Hub/Editor/{2020.3.48f1,2021.3.1f1,2022.3.10f1}/Editor

    Returns:
        Path to the install root
    """
    root = tmp_path / "install"
    for version in ("2020.3.48f1", UNITY_VERSION, "2022.3.10f1"):
        (root / "Unity" / "Hub" / "Editor" / version / "Editor").mkdir(parents=True)
    return root


@pytest.fixture
def fake_editor(install_root):
    """
    Place an executable fake editor at the Linux location for UNITY_VERSION.

    The fake prints its arguments to stdout, a warning to stderr, appends to
    the -logFile path when it is not "-", and exits with the -exitCode value.

    Returns:
        Path to the fake editor executable
    """
    editor = install_root / "Unity" / "Hub" / "Editor" / UNITY_VERSION / "Editor" / "Unity"
    editor.write_text(FAKE_EDITOR_SOURCE.format(python=sys.executable), encoding="utf-8")
    editor.chmod(editor.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return editor
