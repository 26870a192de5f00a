from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from .types import MonitorState, WriteResult

log = logging.getLogger(__name__)


def _replacement_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(path: Path, text: str) -> None:
    """
    Replace ``path`` with exactly the UTF-8 bytes of ``text``.

    Symlinks are followed so the link target is updated, and the existing
    file mode (or the umask default for a new file) is kept.
    """
    target = path.resolve()
    mode = _replacement_mode(target)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            os.fchmod(f.fileno(), mode)
            f.write(text.encode("utf-8"))
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class ChangeGatedWriter:
    """Writes the output file only when the title differs from the last write."""

    def __init__(self, output_path: str) -> None:
        self._path = Path(output_path)

    @property
    def path(self) -> Path:
        return self._path

    def write_if_changed(self, state: MonitorState, current: str) -> WriteResult:
        if state.last_written is not None and state.last_written == current:
            return "SKIPPED"

        # OSError propagates; state only moves after the file is in place
        atomic_write_text(self._path, current)
        state.last_written = current
        log.debug(f"Wrote {len(current)} chars to {self._path}")
        return "WROTE"
