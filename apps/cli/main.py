import logging
import signal
import sys

from packages.shared.config import AppConfig
from packages.core.logging_ import setup_logging
from packages.core.monitor.title_monitor import TitleMonitor

log = logging.getLogger(__name__)

EMPTY_MARKER = "<empty> (window not found or title unavailable)"


def format_status_line(evt: dict) -> str:
    title = evt.get("title") or EMPTY_MARKER
    return f"[{evt.get('at', '')}] Wrote: {title}"


def main() -> int:
    try:
        setup_logging()
        cfg = AppConfig()
        monitor = TitleMonitor(cfg.to_monitor_config())
    except Exception:
        log.exception("Startup failed")
        return 1

    print(f"Watching window class: {cfg.window_class}")
    print(f"Writing title to:      {cfg.output_path}")
    print(f"Check interval:        {cfg.poll_interval_ms / 1000.0:g}s")

    monitor.on_event(lambda evt: print(format_status_line(evt), flush=True))

    def signal_handler(sig, frame):
        print("\nReceived termination signal, shutting down...")
        monitor.stop()

    signal.signal(signal.SIGINT, signal_handler)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, signal_handler)

    monitor.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
