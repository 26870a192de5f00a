from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from packages.core.monitor.types import MonitorConfig


class AppConfig(BaseModel):
    """Compiled-in settings. Never loaded from disk, flags or environment."""

    model_config = ConfigDict(frozen=True)

    window_class: str = "cloudmusic.exe"
    output_path: str = "title.txt"
    poll_interval_ms: int = Field(default=1000, gt=0)
    command_timeout_ms: int = Field(default=2000, gt=0)

    def to_monitor_config(self) -> MonitorConfig:
        return MonitorConfig(
            window_class=self.window_class,
            output_path=self.output_path,
            poll_interval_ms=self.poll_interval_ms,
            command_timeout_ms=self.command_timeout_ms,
        )
