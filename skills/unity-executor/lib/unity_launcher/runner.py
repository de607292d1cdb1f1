#!/usr/bin/env python3
"""
Unity Launcher - Process Runner

Runs the Unity editor as a child process in one of two modes:

- Streaming: stdout and stderr are pumped concurrently; every chunk is echoed
  to the matching console stream and appended to the log file as it arrives.
- Blocking: the child inherits the console and writes its own log through
  the -logFile flag; the log is printed once the child exits.

Launch failures raise SpawnError. A child that starts and exits non-zero is
not an error here; its exit code is returned.
"""

import asyncio
import codecs
import logging
import subprocess
import sys
from pathlib import Path
from typing import Sequence, TextIO, Tuple

from .arguments import to_command_line
from .errors import SpawnError

logger = logging.getLogger(__name__)

# (start, success) messages per invocation style
BUILD_MESSAGES = ("Executing Unity build.", "Unity build completed successfully.")
RUN_MESSAGES = ("Executing Unity.", "Execute Unity successfully.")


def console_safe(text: str, console: TextIO) -> str:
    """Replace characters the console's encoding cannot represent."""
    encoding = getattr(console, "encoding", None) or "utf-8"
    return text.encode(encoding, errors="replace").decode(encoding, errors="replace")


class UnityProcessRunner:
    """
    Execute one Unity invocation and capture its output.

    The log file is owned by the runner for the duration of a run and is
    closed on every path before the run's result is returned or raised.
    """

    CHUNK_SIZE = 4096
    LOG_ENCODING = "utf-8"

    def __init__(self,
                 executable: Path,
                 args: Sequence[str],
                 working_dir: Path,
                 log_path: Path,
                 messages: Tuple[str, str] = BUILD_MESSAGES):
        self.executable = Path(executable)
        self.args = list(args)
        self.working_dir = Path(working_dir)
        self.log_path = Path(log_path)
        self.start_message, self.success_message = messages

    @property
    def command(self) -> list[str]:
        return to_command_line(self.executable, self.args)

    def _prepare_log_dir(self):
        logger.info(f"Creating log file. Path: {self.log_path}")
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def _report_exit(self, returncode: int) -> int:
        if returncode != 0:
            logger.error(f"Process exited with code: {returncode}")
        else:
            logger.info(self.success_message)
        return returncode

    async def _pump(self, stream: asyncio.StreamReader, console: TextIO, log_file: TextIO):
        """Copy one output stream to the log and the console, chunk by chunk."""
        decoder = codecs.getincrementaldecoder(self.LOG_ENCODING)(errors="replace")

        while True:
            chunk = await stream.read(self.CHUNK_SIZE)
            text = decoder.decode(chunk, final=not chunk)
            if text:
                log_file.write(text)
                log_file.flush()
                console.write(console_safe(text, console))
                console.flush()
            if not chunk:
                break

    async def run_streaming(self) -> int:
        """
        Spawn the editor and stream its output until it exits.

        Returns:
            The child's exit code

        Raises:
            SpawnError: If the process could not be started
        """
        self._prepare_log_dir()

        with open(self.log_path, "a", encoding=self.LOG_ENCODING, newline="") as log_file:
            logger.info(self.start_message)
            try:
                process = await asyncio.create_subprocess_exec(
                    *self.command,
                    cwd=str(self.working_dir),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                logger.error(f"Process failed: {e}")
                raise SpawnError(f"Process failed: {e}") from e

            await asyncio.gather(
                self._pump(process.stdout, sys.stdout, log_file),
                self._pump(process.stderr, sys.stderr, log_file),
            )
            returncode = await process.wait()

        return self._report_exit(returncode)

    def run_blocking(self) -> int:
        """
        Run the editor synchronously with inherited console output.

        The editor is expected to write its own log to self.log_path (passed
        through -logFile); that file is printed after the process exits.

        Returns:
            The child's exit code

        Raises:
            SpawnError: If the process could not be started
        """
        self._prepare_log_dir()

        logger.info("Start Unity build.")
        try:
            result = subprocess.run(self.command, cwd=str(self.working_dir))
        except OSError as e:
            logger.error(f"Process failed. {e}")
            raise SpawnError(f"Process failed. {e}") from e

        self.print_log()
        return self._report_exit(result.returncode)

    def print_log(self):
        """Print the on-disk log written by the editor, if any."""
        if not self.log_path.exists():
            logger.warning(f"No Unity log written at {self.log_path}")
            return

        print("Unity Build Log:")
        content = self.log_path.read_text(encoding=self.LOG_ENCODING, errors="replace")
        print(console_safe(content, sys.stdout))

    def execute(self, blocking: bool = False) -> int:
        """Run in the requested mode and return the child's exit code."""
        if blocking:
            return self.run_blocking()
        return asyncio.run(self.run_streaming())
