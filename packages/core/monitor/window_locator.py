from __future__ import annotations

import logging

from .commands import CommandError, run_command
from .types import Found, NotFound, QueryError, WindowLookup

log = logging.getLogger(__name__)


class XdotoolWindowLocator:
    """Finds the first window of a given class via ``xdotool search``."""

    def __init__(self, timeout_s: float = 2.0) -> None:
        self._timeout_s = timeout_s

    def locate(self, class_name: str) -> WindowLookup:
        try:
            output = run_command(
                "xdotool",
                ["search", "--classname", "--limit", "1", class_name],
                timeout=self._timeout_s,
            )
        except CommandError as e:
            # xdotool exits 1 without any output when nothing matches
            if e.returncode is not None and not e.stdout and not e.stderr:
                return NotFound()
            return QueryError(str(e))

        lines = output.splitlines()
        window_id = lines[0].strip() if lines else ""
        if not window_id:
            return NotFound()
        log.debug(f"Window class {class_name!r} resolved to id {window_id}")
        return Found(window_id)
