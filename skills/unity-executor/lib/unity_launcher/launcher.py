#!/usr/bin/env python3
"""
Unity Launcher - Orchestration and CLI

Runs a Unity project non-interactively with the editor version the project
was saved with:

    install root -> project version -> editor executable -> arguments
    -> child process -> exit status

Exit status is 0 on success, the editor's own exit code when it ran and
failed, and 1 for any failure before or during launch.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .arguments import STDOUT_LOG, get_build_arguments, get_legacy_build_arguments
from .config import MODE_BUILD, MODE_RUN, MODES, LaunchConfig, apply_overrides, load_config_from_env
from .errors import DiscoveryError, SpawnError
from .paths import get_unity_executable, get_unity_install_dir
from .runner import BUILD_MESSAGES, RUN_MESSAGES, UnityProcessRunner
from .version import read_project_version

logger = logging.getLogger(__name__)


def exit_status(returncode: int) -> int:
    """Map a child return code to a process exit status (signals become 1)."""
    return returncode if returncode >= 0 else 1


def launch(config: LaunchConfig) -> int:
    """
    Locate and run the Unity editor for a project.

    Raises:
        LauncherError: On configuration, parse, discovery or spawn failures
        OSError: On filesystem errors while searching installations
    """
    config = config.validate()

    install_dir = get_unity_install_dir(config.install_dir)
    project_path = config.resolved_project_path()
    logger.info(f"Unity project path used: {project_path}")

    version = read_project_version(project_path)
    logger.info(f"Unity version used: {version}")

    executable = get_unity_executable(install_dir, version)
    logger.info(f"Unity Executable: {executable}")
    if executable is None:
        raise DiscoveryError(f"No Unity {version} executable found under {install_dir}")

    log_path = config.resolved_log_path()
    if config.blocking:
        args = get_legacy_build_arguments(project_path, config.build_method, str(log_path), config.custom_args)
    else:
        args = get_build_arguments(
            project_path,
            config.build_method,
            config.custom_args,
            auto_quit=config.auto_quit,
            log_file=STDOUT_LOG,
        )
    logger.info(f"Arguments: {' '.join(args)}")

    messages = RUN_MESSAGES if config.mode == MODE_RUN else BUILD_MESSAGES
    runner = UnityProcessRunner(executable, args, project_path, log_path, messages)
    return exit_status(runner.execute(blocking=config.blocking))


def run(config: LaunchConfig) -> int:
    """Run launch() and turn any failure into exit status 1, reporting it once."""
    try:
        return launch(config)
    except SpawnError:
        # Already reported by the runner
        return 1
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a Unity project in batch mode with the editor version it was saved with",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build using inputs from the environment (project_path, build_method, ...)
  python execute-unity.py

  # Build with an explicit project and method
  python execute-unity.py --project-path /path/to/project --build-method BuildScript.Build

  # Run tests in the current directory's project
  python execute-unity.py --mode run --custom-args "-runTests -testPlatform EditMode -quit"

  # Legacy blocking build, Unity writes the log itself
  python execute-unity.py --mode legacy --project-path . --build-method BuildScript.Build

Environment Variables:
  unity_install_dir - Root directory to search for Unity installations
  project_path      - Unity project directory (contains ProjectSettings)
  log_path          - Log file path relative to the project
  build_method      - Static method passed to -executeMethod
  custom_args       - Additional Unity arguments (custom_options also accepted)
  log_dir, log_name, build_version
                    - Legacy mode log file <log_dir>/<log_name>_<build_version>.log
        """
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        default=MODE_BUILD,
        help="Execution variant (default: build)"
    )

    parser.add_argument(
        "--project-path",
        type=Path,
        default=None,
        help="Unity project directory (default: project_path or current dir in run mode)"
    )

    parser.add_argument(
        "--install-dir",
        default=None,
        help="Root directory of Unity installations (default: unity_install_dir or OS default)"
    )

    parser.add_argument(
        "--log-path",
        default=None,
        help="Log file path relative to the project (default: log_path or per-mode default)"
    )

    parser.add_argument(
        "--build-method",
        default=None,
        help="Static method for -executeMethod (default: build_method)"
    )

    parser.add_argument(
        "--custom-args",
        default=None,
        help="Additional Unity arguments, each starting with a dash (default: custom_args)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="[%(levelname)s] %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO
    )

    config = apply_overrides(
        load_config_from_env(mode=args.mode),
        project_path=args.project_path,
        install_dir=args.install_dir,
        log_path=args.log_path,
        build_method=args.build_method,
        custom_args=args.custom_args,
    )

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
