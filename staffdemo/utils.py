"""Small helpers: splitting record lines and file-name friendly time stamps."""

from __future__ import annotations

import time
from datetime import datetime


def split_file_line(line: str, delim: str = ";") -> list[str]:
    """Split a record line on ``delim``.

    An empty line yields no fields, and a single trailing delimiter does not
    produce a trailing empty field.
    """
    if not line:
        return []
    fields = line.split(delim)
    if fields[-1] == "":
        fields.pop()
    return fields


def time_stamp(now: datetime | float | None = None) -> str:
    """Return the local time in ``ctime`` form, made safe for file names.

    Spaces become underscores and colons become dashes. ``now`` may be a
    datetime, a POSIX timestamp, or omitted for the current time.
    """
    if now is None:
        text = time.ctime()
    elif isinstance(now, datetime):
        text = time.asctime(now.timetuple())
    else:
        text = time.ctime(now)
    return text.rstrip("\n").replace(" ", "_").replace(":", "-")