"""
Window title lookup via ``xprop``.

xprop answers a property query with a single ``name = value`` line, e.g.::

    WM_NAME(UTF8_STRING) = "Song - Artist"

or ``WM_NAME:  not found.`` when the property is missing.
"""

from __future__ import annotations

from .commands import CommandError, run_command

TITLE_PROPERTY = "WM_NAME"


class TitleQueryError(Exception):
    """The property query for a window failed."""


def parse_property_value(output: str) -> str:
    """Extract the value from ``name = value`` output; empty if there is no ``=``."""
    _, sep, value = output.partition("=")
    if not sep:
        return ""
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value.strip()


class XpropTitleReader:
    def __init__(self, timeout_s: float = 2.0) -> None:
        self._timeout_s = timeout_s

    def read(self, window_id: str) -> str:
        try:
            output = run_command("xprop", ["-id", window_id, TITLE_PROPERTY], timeout=self._timeout_s)
        except CommandError as e:
            raise TitleQueryError(f"Title query for window {window_id} failed: {e}") from e
        return parse_property_value(output)
