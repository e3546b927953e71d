# SPDX-License-Identifier: MIT
"""Running external commands."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from .errors import SubprocessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Result of a successful command."""

    command: str
    args: tuple[str, ...]
    returncode: int
    output: str = ""


class ProcessRunner:
    """Runs commands as subprocesses, capturing stdout and stderr together.

    Attributes:
        timeout: Seconds to wait before killing the process (None waits forever)
        env: Environment for the child process (None inherits the current one)
    """

    def __init__(
        self,
        timeout: float | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.timeout = timeout
        self.env = dict(env) if env is not None else None

    async def run(
        self,
        command: str | Path,
        args: Sequence[str],
        cwd: str | Path,
    ) -> ProcessResult:
        """Run a command and wait for it to finish.

        Raises:
            SubprocessError: If the command cannot be started, times out, or
                exits with a non-zero status
        """
        command = str(command)
        args = [str(arg) for arg in args]
        logger.debug("Running %s %s in %s", command, " ".join(args), cwd)

        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                cwd=str(cwd),
                env=self.env,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise SubprocessError(command, args, None, reason=f"could not be started: {e}") from e

        try:
            stdout, _ = await asyncio.wait_for(process.communicate(), self.timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise SubprocessError(
                command, args, None, reason=f"timed out after {self.timeout} seconds"
            ) from None

        output = stdout.decode("utf-8", errors="replace") if stdout else ""
        if output:
            logger.debug(output.rstrip())

        if process.returncode != 0:
            raise SubprocessError(command, args, process.returncode, output)

        return ProcessResult(command=command, args=tuple(args), returncode=0, output=output)
