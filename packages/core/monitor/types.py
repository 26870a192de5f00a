from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

WriteResult = Literal["WROTE", "SKIPPED"]


@dataclass(frozen=True)
class MonitorConfig:
    """Configuration for the title monitor."""
    window_class: str
    output_path: str
    poll_interval_ms: int  # milliseconds
    command_timeout_ms: int  # milliseconds, per external query


@dataclass
class MonitorState:
    """
    In-memory state owned by the poll loop.
    last_written is None until the first successful write.
    """
    last_written: Optional[str] = None


@dataclass(frozen=True)
class Found:
    window_id: str


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class QueryError:
    detail: str


WindowLookup = Union[Found, NotFound, QueryError]
