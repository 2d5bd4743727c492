"""
runner.py

Responsibility: Isolate all subprocess execution.

The scaffolder only depends on the `CommandRunner` call shape, so tests can pass
a fake that records invocations instead of touching a real Go toolchain.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from gocli.errors import ScaffoldError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def __call__(self, cmd: list[str], *, cwd: Path) -> str: ...


def run_command(cmd: list[str], *, cwd: Path) -> str:
    """
    Run a subprocess command and return its combined stdout/stderr.

    Raises ScaffoldError on a non-zero exit or when the executable cannot be
    started. Undecodable output bytes are replaced, never fatal.
    """
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as e:
        raise ScaffoldError(f"Command not found: {cmd[0]}") from e
    except OSError as e:
        raise ScaffoldError(f"Could not run {cmd[0]}: {e}") from e
    except subprocess.CalledProcessError as e:
        raise ScaffoldError(f"Command failed: {' '.join(cmd)}\n\n{e.stdout}") from e
    return proc.stdout
