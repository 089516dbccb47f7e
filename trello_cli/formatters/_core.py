"""Core output dispatchers: mode resolution, JSON rendering, errors."""

import json
import sys

from trello_cli.models import DISPLAY, OutputMode


def stdout_is_interactive(stream=None):
    """True when *stream* (default stdout) is attached to a terminal."""
    stream = stream if stream is not None else sys.stdout
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        # Missing or closed stream: treat as a pipe.
        return False


def resolve_output_mode(explicit_json, explicit_pretty, is_interactive):
    """Decide how this invocation renders its results.

    Piped output is always JSON, compact unless --pretty was given. At a
    terminal, --json or --pretty select indented JSON; otherwise display.
    """
    pretty = bool(explicit_pretty or (explicit_json and is_interactive))
    if not is_interactive or explicit_json or explicit_pretty:
        return OutputMode(structured=True, pretty=pretty)
    return DISPLAY


def render_json(data, pretty=False):
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def output(data, formatter, mode):
    """Print *data* as JSON or through *formatter*, depending on *mode*."""
    if mode.structured:
        print(render_json(data, mode.pretty))
    else:
        print(formatter(data))


def mutation_response(message, mode, **details):
    """Print a confirmation for mutations that return no resource."""
    if mode.structured:
        print(render_json({"ok": True, "message": message, **details}, mode.pretty))
        return
    print(message)


def emit_error(err):
    """Write an error to stderr; stdout is never touched."""
    print(f"Error: {err}", file=sys.stderr)
