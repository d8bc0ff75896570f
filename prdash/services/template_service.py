"""
template_service.py - Query template expansion
Single responsibility: render {{ }} expressions inside search text, best effort.
Templates render in a jinja2 sandbox; unsafe attribute access fails like any other error.

Examples:
    updated:>={{ nowModify("-2w") | date("2006-01-02") }}
    created:<{{ now | dateModify("-36h") | date("%Y-%m-%d") }}
"""
import logging
from datetime import datetime

from jinja2 import StrictUndefined
from jinja2.sandbox import SandboxedEnvironment

from prdash.utils.time import format_time, humanize_since, parse_duration, parse_time
from prdash.utils.time import now as current_time

logger = logging.getLogger(__name__)

DEFAULT_DATE_LAYOUT = "2006-01-02"
_TEMPLATE_MARKERS = ("{{", "{%", "{#")


def _date_filter(value: datetime, layout: str = DEFAULT_DATE_LAYOUT) -> str:
    return format_time(layout, value)


def _date_modify_filter(value: datetime, offset: str) -> datetime:
    return value + parse_duration(offset)


def _create_env() -> SandboxedEnvironment:
    env = SandboxedEnvironment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["date"] = _date_filter
    env.filters["dateModify"] = _date_modify_filter
    return env


_env = _create_env()


def _helpers(now: datetime) -> dict:
    return {
        "now": now,
        "Now": now,
        "nowModify": lambda offset: now + parse_duration(offset),
        "dateModify": lambda offset, value: value + parse_duration(offset),
        "date": lambda layout, value: format_time(layout, value),
        "toDate": parse_time,
        "ago": lambda value: humanize_since(value, now),
    }


def has_template(text: str | None) -> bool:
    return bool(text) and any(marker in text for marker in _TEMPLATE_MARKERS)


def expand(raw_text: str, variables: dict | None = None) -> str:
    """
    Expand template expressions in ``raw_text``.

    ``now`` is read fresh on every call unless ``variables`` supplies it.
    Any parse or evaluation failure returns ``raw_text`` unchanged.
    """
    if not has_template(raw_text):
        return raw_text

    variables = dict(variables or {})
    now = variables.pop("now", None) or current_time()
    context = _helpers(now)
    context.update(variables)

    try:
        return _env.from_string(raw_text).render(context)
    except Exception as exc:
        logger.warning("bad template %r: %s", raw_text, exc)
        return raw_text
