"""Display formatting for scalar values. All pure."""

from datetime import timezone

from trello_cli._utils import _parse_iso_timestamp
from trello_cli.formatters._table import _trunc


def format_time(ts):
    """Render an API timestamp as "YYYY-MM-DD HH:MM" (UTC), "-" when absent.
    Unparseable values fall back to the raw string, truncated."""
    if not ts:
        return "-"
    parsed = _parse_iso_timestamp(ts)
    if parsed is None:
        return _trunc(ts, 16)
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M")


def format_date(ts):
    if not ts:
        return "-"
    return format_time(ts)[:10]


def format_bool(value):
    return "yes" if value else "no"


def format_labels(names):
    if not names:
        return "-"
    return ", ".join(names)


def label_names(labels):
    """Display names for card labels; unnamed labels show their colour."""
    return [lbl.get("name") or lbl.get("color") or "-" for lbl in labels or []]
