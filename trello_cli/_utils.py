"""
Shared pure-utility functions for trello-cli.

These helpers have no business logic and no side effects.
They are used across api.py, client.py, commands.py, and formatters.
"""

from datetime import datetime

from trello_cli.exceptions import ValidationError


def _mask_token(value):
    """Mask a secret for display: first and last 4 chars only."""
    if not value:
        return "(not set)"
    if len(value) <= 8:
        return "***"
    return value[:4] + "..." + value[-4:]


def _parse_csv_values(raw, valid_set, field_name):
    """Parse comma-separated values (possibly repeated flags) and validate each.
    Returns a list of validated values."""
    if not raw:
        return []
    chunks = raw if isinstance(raw, (list, tuple)) else [raw]
    values = []
    for chunk in chunks:
        values.extend(v.strip() for v in chunk.split(",") if v.strip())
    for v in values:
        if v not in valid_set:
            raise ValidationError(
                f"invalid {field_name} '{v}'. Valid: {', '.join(sorted(valid_set))}"
            )
    return values


def _parse_iso_timestamp(ts):
    """Parse an RFC 3339 timestamp from the API into an aware datetime.

    Accepts "2026-01-15T10:30:00Z", "2026-01-15T10:30:00.000Z" and numeric
    offsets. Returns None for anything else, including date-only values.
    """
    if not ts or "T" not in ts:
        return None
    try:
        clean = ts.replace("Z", "+00:00").replace("z", "+00:00")
        parsed = datetime.fromisoformat(clean)
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        return None
    return parsed
