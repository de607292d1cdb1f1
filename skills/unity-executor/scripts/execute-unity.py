#!/usr/bin/env python3
"""
Unity Project Executor

Runs a Unity project in batch mode using the editor version recorded in
ProjectSettings/ProjectVersion.txt. Intended as a CI pipeline step.

Usage:
    # Inputs from environment variables (project_path, build_method, ...)
    python execute-unity.py

    # Explicit inputs
    python execute-unity.py --project-path /path/to/project --build-method BuildScript.Build

Run with --help for all options.
"""

import sys
from pathlib import Path

# Add lib directory to Python path
lib_path = Path(__file__).parent.parent / "lib"
sys.path.insert(0, str(lib_path))
from unity_launcher.launcher import main


if __name__ == "__main__":
    sys.exit(main())
