"""
Unity Launcher - Command Line Arguments

Builds the editor argument list: fixed invocation flags first, followed by
the user's custom options in their original order. A flag and its value
are kept together as one "flag value" entry.
"""

from pathlib import Path
from typing import Optional

STDOUT_LOG = "-"


def parse_custom_options(custom_options: str) -> list[str]:
    """
    Re-tokenize a free-form option string into flag entries.

    The string is split on single spaces. A token starting with "-" starts
    a flag; the next token is taken as its value when it exists and does not
    start with "-". Tokens that are neither flags nor consumed values are
    dropped, so multi-word values cannot be expressed.

    Example:
        "-test -targetPlatform StandaloneWindows64 -quit"
        -> ["-test", "-targetPlatform StandaloneWindows64", "-quit"]
    """
    tokens = custom_options.split(" ") if custom_options else []
    options = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.startswith("-"):
            following = tokens[i + 1] if i + 1 < len(tokens) else ""
            if following and not following.startswith("-"):
                options.append(f"{token} {following}")
                i += 1
            else:
                options.append(token)
        i += 1

    return options


def get_build_arguments(
    project_path: Path,
    execute_method: Optional[str] = "",
    custom_options: str = "",
    auto_quit: bool = True,
    log_file: str = STDOUT_LOG,
) -> list[str]:
    """
    Build the argument list for a batch-mode editor invocation.

    Args:
        project_path: Unity project root passed via -projectPath
        execute_method: Static C# method for -executeMethod (omitted when empty)
        custom_options: Free-form user options, see parse_custom_options
        auto_quit: Whether to add -quit so the editor exits after the method returns
        log_file: Value for -logFile; "-" sends the editor log to stdout

    Returns:
        Ordered list of argument entries
    """
    args = []
    if auto_quit:
        args.append("-quit")
    args.append("-batchmode")
    args.append(f"-logFile {log_file}")
    args.append(f"-projectPath {project_path}")
    if execute_method:
        args.append(f"-executeMethod {execute_method}")

    args.extend(parse_custom_options(custom_options))
    return args


def get_legacy_build_arguments(
    project_path: Path,
    execute_method: str,
    log_file: str,
    custom_options: str = "",
) -> list[str]:
    """
    Build the argument list for a blocking build where Unity writes its own log.

    The editor log goes to log_file, which is read back after the editor exits.
    """
    args = [
        "-batchmode",
        "-quit",
        f"-projectPath {project_path}",
        f"-executeMethod {execute_method}",
        f"-logFile {log_file}",
    ]

    args.extend(parse_custom_options(custom_options))
    return args


def to_command_line(executable: Path, args: list[str]) -> list[str]:
    """
    Expand argument entries into an argv list for the child process.

    Each entry is split at its first space only, so a value containing
    spaces (such as a project path) stays a single argv item.
    """
    argv = [str(executable)]
    for entry in args:
        flag, sep, value = entry.partition(" ")
        argv.append(flag)
        if sep:
            argv.append(value)
    return argv
