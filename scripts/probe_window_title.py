"""
Probe script for the window locator and title reader.
Run this on an X11 desktop to verify xdotool/xprop lookups work.

Expected behavior:
- Prints the window id and title while the target application is open
- Prints "not found" once it is closed
- Never touches the output file
"""

import sys
import os
import time
import logging

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from packages.core.monitor.title_reader import TitleQueryError, XpropTitleReader
from packages.core.monitor.types import Found, QueryError
from packages.core.monitor.window_locator import XdotoolWindowLocator
from packages.shared.config import AppConfig

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)

def main():
    class_name = sys.argv[1] if len(sys.argv) > 1 else AppConfig().window_class
    locator = XdotoolWindowLocator()
    reader = XpropTitleReader()

    print("=" * 60)
    print(f"Window title probe: class {class_name!r}")
    print("=" * 60)
    print("Polling (press Ctrl+C to stop)...")
    print("-" * 60)

    try:
        probe_count = 0
        while True:
            probe_count += 1
            lookup = locator.locate(class_name)
            if isinstance(lookup, Found):
                try:
                    title = reader.read(lookup.window_id)
                    print(f"[{probe_count:4d}] id={lookup.window_id} title={title!r}")
                except TitleQueryError as e:
                    print(f"[{probe_count:4d}] id={lookup.window_id} title query failed: {e}")
            elif isinstance(lookup, QueryError):
                print(f"[{probe_count:4d}] lookup failed: {lookup.detail}")
            else:
                print(f"[{probe_count:4d}] not found")

            time.sleep(1.0)

    except KeyboardInterrupt:
        print()
        print("-" * 60)
        print("Probe stopped by user")

    print("=" * 60)
    return 0

if __name__ == "__main__":
    sys.exit(main())
