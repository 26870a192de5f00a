"""
Thin wrapper around subprocess for the X11 query tools.

Output is decoded as UTF-8 with invalid bytes replaced; the text is
diagnostic, not trusted data.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

log = logging.getLogger(__name__)


class CommandError(Exception):
    """An external command could not run, timed out, or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, stdout: str = "", stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _decode(raw: bytes | None) -> str:
    if not raw:
        return ""
    return raw.decode("utf-8", errors="replace").strip()


def run_command(program: str, args: Sequence[str], timeout: float) -> str:
    """
    Run ``program`` with ``args`` and return its stripped stdout.

    Raises:
        CommandError: tool missing, permission denied, timeout or non-zero exit.
    """
    argv = [program, *args]
    try:
        result = subprocess.run(argv, capture_output=True, timeout=timeout)
    except subprocess.TimeoutExpired:
        raise CommandError(f"{program} timed out after {timeout:.1f}s")
    except FileNotFoundError:
        raise CommandError(f"{program} executable not found")
    except PermissionError as e:
        raise CommandError(f"Failed to execute {program}: {e}")

    stdout = _decode(result.stdout)
    stderr = _decode(result.stderr)
    if result.returncode != 0:
        log.debug(f"{program} returned non-zero exit code: {result.returncode}")
        raise CommandError(
            f"Command failed: {' '.join(argv)} (exit {result.returncode}). Stderr: {stderr}",
            returncode=result.returncode,
            stdout=stdout,
            stderr=stderr,
        )
    return stdout
