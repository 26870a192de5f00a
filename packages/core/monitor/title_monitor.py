"""
Window title monitor: mirrors a window's title into a text file.

Per tick: locate window -> read title -> change-gated write -> sleep.
Runs on the calling thread until stop() is called.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Protocol

from .title_reader import TitleQueryError, XpropTitleReader
from .title_writer import ChangeGatedWriter
from .types import Found, MonitorConfig, MonitorState, QueryError, WindowLookup, WriteResult
from .window_locator import XdotoolWindowLocator

log = logging.getLogger(__name__)


def _now_hms() -> str:
    return time.strftime("%H:%M:%S", time.localtime())


class WindowLocator(Protocol):
    def locate(self, class_name: str) -> WindowLookup:
        ...


class TitleReader(Protocol):
    def read(self, window_id: str) -> str:
        ...


class TitleMonitor:
    """Polls a window title and emits TITLE_WRITTEN whenever the file changes."""

    def __init__(
        self,
        config: MonitorConfig,
        locator: Optional[WindowLocator] = None,
        reader: Optional[TitleReader] = None,
        writer: Optional[ChangeGatedWriter] = None,
    ) -> None:
        self._cfg = config
        timeout_s = config.command_timeout_ms / 1000.0
        self._locator = locator or XdotoolWindowLocator(timeout_s)
        self._reader = reader or XpropTitleReader(timeout_s)
        self._writer = writer or ChangeGatedWriter(config.output_path)

        self._event_cb: Optional[Callable[[dict], None]] = None
        self._error_cb: Optional[Callable[[str], None]] = None

        self._stop_evt = threading.Event()

    def on_event(self, cb: Callable[[dict], None]) -> None:
        self._event_cb = cb

    def on_error(self, cb: Callable[[str], None]) -> None:
        self._error_cb = cb

    def _emit(self, evt: dict) -> None:
        if self._event_cb:
            self._event_cb(evt)

    def _emit_error(self, msg: str) -> None:
        if self._error_cb:
            self._error_cb(msg)

    def resolve_title(self) -> str:
        """Current title, or "" when no window is available or the query fails."""
        try:
            lookup = self._locator.locate(self._cfg.window_class)
            if isinstance(lookup, QueryError):
                log.warning(f"Window lookup failed: {lookup.detail}")
                self._emit_error(lookup.detail)
                return ""
            if not isinstance(lookup, Found):
                return ""
            return self._reader.read(lookup.window_id)
        except TitleQueryError as e:
            log.warning(str(e))
            self._emit_error(str(e))
            return ""
        except Exception as e:
            log.exception("Unexpected error while resolving window title")
            self._emit_error(str(e))
            return ""

    def tick(self, state: MonitorState) -> Optional[WriteResult]:
        """
        Run one poll iteration against ``state``.

        Returns the writer's result, or None when the write failed.
        """
        title = self.resolve_title()
        try:
            result = self._writer.write_if_changed(state, title)
        except OSError as e:
            log.error(f"Failed to write {self._writer.path}: {e}")
            self._emit_error(str(e))
            return None

        if result == "WROTE":
            self._emit({"type": "TITLE_WRITTEN", "title": title, "at": _now_hms()})
        return result

    def run(self) -> None:
        """Block, polling until stop() is called."""
        state = MonitorState()
        interval_s = self._cfg.poll_interval_ms / 1000.0
        while not self._stop_evt.is_set():
            try:
                self.tick(state)
            except Exception as e:
                log.exception("Monitor loop error")
                self._emit_error(str(e))
            self._stop_evt.wait(interval_s)

    def stop(self) -> None:
        self._stop_evt.set()
