"""Timestamps in a fixed time zone."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/New_York"
FILE_FORMAT = "%Y%m%d-%H%M%S"
HUMAN_FORMAT = "%Y-%m-%d %H:%M:%S"


def date(kind: str | None = "", tz: str = DEFAULT_TIMEZONE, now: datetime | None = None) -> str:
    """Format the current time in tz.

    kind "file" gives a compact filename-safe stamp, anything else a readable one.
    """
    moment = (now or datetime.now(tz=ZoneInfo("UTC"))).astimezone(ZoneInfo(tz))
    fmt = FILE_FORMAT if kind == "file" else HUMAN_FORMAT
    return moment.strftime(fmt)
