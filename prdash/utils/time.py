"""
time.py - time utilities
Single responsibility: common time helpers used by query templates and the UI.
"""
import re
from datetime import datetime, timedelta, timezone

_DURATION_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d+)?(?:ms|[smhdw]))+$")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|[smhdw])")
_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 7 * 86400,
}

# Go reference-time layout elements, longest first so "2006" wins over "06".
_GO_LAYOUT = [
    ("2006", "%Y"),
    ("January", "%B"),
    ("Monday", "%A"),
    ("-0700", "%z"),
    ("Jan", "%b"),
    ("Mon", "%a"),
    ("MST", "%Z"),
    ("01", "%m"),
    ("02", "%d"),
    ("03", "%I"),
    ("04", "%M"),
    ("05", "%S"),
    ("06", "%y"),
    ("15", "%H"),
    ("PM", "%p"),
]


def now() -> datetime:
    return datetime.now(timezone.utc).astimezone()


def parse_duration(text: str) -> timedelta:
    """Parse "-2w", "36h", "+1h30m", "500ms" into a timedelta.

    Raises ValueError on anything else.
    """
    value = (text or "").strip()
    if not _DURATION_RE.match(value):
        raise ValueError(f"invalid duration: {text!r}")
    sign = -1 if value.startswith("-") else 1
    seconds = sum(
        float(amount) * _UNIT_SECONDS[unit]
        for amount, unit in _DURATION_PART_RE.findall(value)
    )
    return timedelta(seconds=sign * seconds)


def to_strftime(layout: str) -> str:
    """Translate a Go reference layout ("2006-01-02") into a strftime format.

    Strings that already contain "%" are taken to be strftime formats.
    """
    if "%" in layout:
        return layout
    out = []
    i = 0
    while i < len(layout):
        for go, py in _GO_LAYOUT:
            if layout.startswith(go, i):
                out.append(py)
                i += len(go)
                break
        else:
            out.append(layout[i])
            i += 1
    return "".join(out)


def format_time(layout: str, value: datetime) -> str:
    return value.strftime(to_strftime(layout))


def parse_time(layout: str, text: str) -> datetime:
    parsed = datetime.strptime(text, to_strftime(layout))
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def humanize_since(value: datetime, reference: datetime | None = None) -> str:
    """Compact elapsed time: "3d", "5h", "12m", "40s"."""
    reference = reference or now()
    if value.tzinfo is None:
        value = value.astimezone()
    seconds = int((reference - value).total_seconds())
    if seconds < 0:
        seconds = 0
    if seconds >= 86400:
        return f"{seconds // 86400}d"
    if seconds >= 3600:
        return f"{seconds // 3600}h"
    if seconds >= 60:
        return f"{seconds // 60}m"
    return f"{seconds}s"
