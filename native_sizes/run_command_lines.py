"""Logic for running an external command and capturing its output."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run_command_lines(command: Sequence[str | Path]) -> list[str]:
    """Run a command to completion and return its stdout lines.

    Blocks until the process exits. The exit code is not checked; failing to
    launch the process at all raises ``OSError``.
    """
    argv = [str(x) for x in command]
    result = subprocess.run(
        argv,
        stdout=subprocess.PIPE,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        logger.debug("%s exited with status %d", argv[0], result.returncode)
    return result.stdout.splitlines()
