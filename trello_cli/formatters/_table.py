"""Low-level table rendering helpers (stdlib only)."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_GUTTER = "  "


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator.

    Works on code points, so a multi-byte character is never split.
    """
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _cell(value):
    if value is None:
        return ""
    return _sanitize_str(value if isinstance(value, str) else str(value))


def _table(headers, rows):
    """Build an aligned table string.
    headers: list of column names.
    rows: list of sequences, one display string per column.
    Every column but the last is padded to its widest cell, followed by a
    two-space gutter."""
    grid = [[_cell(h) for h in headers]]
    for row in rows:
        cells = [_cell(v) for v in row]
        cells.extend([""] * (len(headers) - len(cells)))
        grid.append(cells)
    widths = [max(len(r[i]) for r in grid) for i in range(len(headers))]
    last = len(headers) - 1
    lines = []
    for cells in grid:
        parts = [c if i == last else c.ljust(widths[i]) for i, c in enumerate(cells)]
        lines.append(_GUTTER.join(parts).rstrip())
    return "\n".join(lines)


def _key_value(pairs):
    """Build a two-column label/value block with aligned labels."""
    if not pairs:
        return ""
    width = max(len(label) for label, _ in pairs)
    lines = [f"{label:<{width}}{_GUTTER}{_cell(value)}".rstrip() for label, value in pairs]
    return "\n".join(lines)
