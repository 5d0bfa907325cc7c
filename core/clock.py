# =============================================================================
# core/clock.py  —  Current Time Rendering
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the wall clock and renders it in one of three formats:
#     - default  →  "2026-10-16 12:34:56"          (local time, fixed width)
#     - rfc3339  →  "2026-10-16T12:34:56+09:00"    (local time with offset)
#     - unix     →  "1791950096"                   (seconds since epoch)
#
# TESTABILITY:
#   Output depends on the clock, so current_time() accepts an optional `now`.
#   Tests pass a fixed datetime; the MCP tool passes nothing and gets the
#   real time.  A naive `now` is interpreted as local time.
#
# NO PREFIX:
#   The returned text is the timestamp alone, so a caller can parse it
#   straight back (int(), datetime.fromisoformat(), strptime()).
# =============================================================================

from datetime import datetime, timezone

from core.models import DEFAULT_TIME_FORMAT, TIME_FORMATS


DEFAULT_LAYOUT = "%Y-%m-%d %H:%M:%S"


def resolve_format(fmt: str | None) -> str:
    """Return `fmt` if it is supported, otherwise "default"."""
    if fmt in TIME_FORMATS:
        return fmt
    return DEFAULT_TIME_FORMAT


def format_rfc3339(moment: datetime) -> str:
    """RFC 3339 with second precision; UTC is written as "Z"."""
    offset = moment.utcoffset()
    # RFC 3339 offsets stop at minutes; LMT-style zones (+00:19:32) go to UTC.
    if offset is not None and offset.total_seconds() % 60:
        moment = moment.astimezone(timezone.utc)
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def render_time(moment: datetime, fmt: str | None = None) -> str:
    """Render an existing datetime in the requested format."""
    # Aware datetimes are converted to local time; naive ones are taken as local.
    local = moment.astimezone()
    fmt = resolve_format(fmt)

    if fmt == "rfc3339":
        return format_rfc3339(local)
    if fmt == "unix":
        return str(int(local.timestamp()))
    return local.strftime(DEFAULT_LAYOUT)


def current_time(fmt: str | None = None, now: datetime | None = None) -> str:
    """Read the clock (or use `now`) and render it.

    Args:
        fmt: "default", "rfc3339" or "unix".  Unknown values fall back to
             "default".
        now: Optional fixed moment, for deterministic callers.

    Returns:
        The rendered timestamp as a string.
    """
    if now is None:
        now = datetime.now().astimezone()
    return render_time(now, fmt)
