"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from datetime import datetime

from prdash.config import COLOR_CLOSED, COLOR_OPEN
from prdash.utils.time import humanize_since


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str.replace("Z", "+00:00"))
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, TypeError, AttributeError):
        return iso_str or ""


def format_age(iso_str: str | None) -> str:
    """"3d"-style age of an ISO timestamp; empty when it cannot be parsed."""
    try:
        return humanize_since(datetime.fromisoformat(iso_str.replace("Z", "+00:00")))
    except (ValueError, TypeError, AttributeError):
        return ""


def state_color(state: str) -> str:
    return COLOR_OPEN if state == "open" else COLOR_CLOSED


def author_text(author: str, show_icon: bool) -> str:
    if not author:
        return ""
    return f"👤 {author}" if show_icon else author
