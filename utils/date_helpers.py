from datetime import date, datetime, time, timedelta, timezone

_STRFTIME_MAP = {
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
    "MM-DD-YYYY": "%m-%d-%Y",
}


def now_local() -> datetime:
    """Current instant as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as sent by the API.

    Accepts a trailing 'Z' for UTC and bare dates ('2024-05-01', read as
    local midnight). Raises ValueError on anything else.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


def format_timestamp(d: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a 'Z' suffix."""
    if d.tzinfo is None:
        d = d.astimezone()
    iso = d.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return iso.replace("+00:00", "Z")


def to_frame_of(d: datetime, reference: datetime) -> datetime:
    """Express d in reference's frame so calendar fields are comparable.

    Aware values are converted to the reference timezone. A reference in
    local time (as from now_local()) only carries the offset in force at that
    instant, so values are then converted with their own local offset, which
    differs across a daylight-saving change. When the reference is naive both
    are compared as local wall-clock time.
    """
    if reference.tzinfo is not None:
        if d.tzinfo is None:
            return d.replace(tzinfo=reference.tzinfo)
        if is_local_offset(reference):
            return d.astimezone()
        return d.astimezone(reference.tzinfo)
    if d.tzinfo is not None:
        return d.astimezone().replace(tzinfo=None)
    return d


def is_local_offset(d: datetime) -> bool:
    """True for a fixed-offset value whose offset is the local one at d."""
    return isinstance(d.tzinfo, timezone) and d.utcoffset() == d.astimezone().utcoffset()


def days_since_week_start(d: datetime | date) -> int:
    """Day-of-week index with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7


def week_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return (start, end) of the week containing now, both inclusive.

    start is now moved back to the most recent Sunday (time of day kept);
    end is start + 6 days.
    """
    start = now - timedelta(days=days_since_week_start(now))
    return start, start + timedelta(days=6)


def combine_local(d: date, at: time | None = None) -> datetime:
    """Attach a wall-clock time (default: now's) and the local timezone to d."""
    at = at or datetime.now().time()
    return datetime.combine(d, at).astimezone()


def format_display_date(d: datetime | date | None, fmt_key: str = "DD/MM/YYYY") -> str:
    """Render a date or timestamp in the user-facing display format."""
    if d is None:
        return "N/A"
    if isinstance(d, datetime) and d.tzinfo is not None:
        d = d.astimezone()
    return d.strftime(_STRFTIME_MAP.get(fmt_key, "%d/%m/%Y"))


def parse_display_date(display_str: str, fmt_key: str) -> date | None:
    """Parse a date in the given display format. Returns None on failure.

    Falls back to ISO 8601 if the display format doesn't match.
    """
    if not display_str:
        return None
    raw = display_str.strip()
    fmt = _STRFTIME_MAP.get(fmt_key, "%d/%m/%Y")
    try:
        return datetime.strptime(raw, fmt).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None
