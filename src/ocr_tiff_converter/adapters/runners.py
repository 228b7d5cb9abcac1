"""Command runners implementing the ``CommandRunner`` port."""

from __future__ import annotations

import logging
import shlex
import subprocess

from ocr_tiff_converter.errors import ToolExecutionError
from ocr_tiff_converter.types import CommandArgs

logger = logging.getLogger(__name__)

_STDERR_TAIL = 500


def _tail(text: str | None) -> str:
    if not text:
        return ""
    cleaned = text.strip()
    return cleaned[-_STDERR_TAIL:]


class SubprocessCommandRunner:
    """Run external tools with output captured away from the progress report."""

    def run(self, args: CommandArgs, timeout: float | None = None) -> None:
        """Run ``args`` and raise on failure.

        Parameters
        ----------
        args : CommandArgs
            Executable followed by its arguments.
        timeout : float | None, default=None
            Seconds before the process is killed.

        Raises
        ------
        ToolExecutionError
            If the process cannot start, times out, or exits non-zero.
        """
        command = list(args)
        logger.debug("running: %s", shlex.join(command))
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ToolExecutionError(
                f"{command[0]} timed out after {timeout:g}s"
            ) from exc
        except OSError as exc:
            raise ToolExecutionError(f"could not start {command[0]}: {exc}") from exc

        stderr = _tail(completed.stderr)
        if stderr:
            logger.debug("%s stderr: %s", command[0], stderr)
        if completed.returncode != 0:
            message = f"{command[0]} exited with status {completed.returncode}"
            if stderr:
                message = f"{message}: {stderr.splitlines()[-1]}"
            raise ToolExecutionError(message, returncode=completed.returncode)
