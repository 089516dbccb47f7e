"""
trello-cli shared configuration, constants, and the credential store.
Standalone module: imports nothing from other project files except exceptions.
"""

import json
import os
import sys
import tempfile

from trello_cli.exceptions import CliError, SetupError

# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

BASE_URL = "https://api.trello.com/1"

ENV_API_KEY = "TRELLO_API_KEY"
ENV_API_TOKEN = "TRELLO_API_TOKEN"

VALID_BOARD_FILTERS = {"open", "closed", "all", "members", "organization", "public", "starred"}
VALID_CARD_FILTERS = {"open", "closed", "all", "visible"}
VALID_LIST_FILTERS = {"open", "closed", "all"}
VALID_SEARCH_TYPES = {"actions", "boards", "cards", "members", "organizations", "all"}
VALID_LABEL_COLORS = {
    "green",
    "yellow",
    "orange",
    "red",
    "purple",
    "blue",
    "sky",
    "lime",
    "pink",
    "black",
}

SETUP_HINT = (
    "not authenticated; run: trello auth setup <api-key> <api-token>\n"
    f"or set {ENV_API_KEY} and {ENV_API_TOKEN} env vars"
)

# ---------------------------------------------------------------------------
# HTTP settings (read once per process)
# ---------------------------------------------------------------------------

HTTP_TIMEOUT_SECONDS = _env_int("TRELLO_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RESPONSE_BYTES = _env_int("TRELLO_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("TRELLO_HTTP_LOG", False)

# ---------------------------------------------------------------------------
# Credential store
# ---------------------------------------------------------------------------

_PROFILE_FIELDS = ("member_id", "full_name", "username")


def _user_config_dir():
    """Return the per-user config directory for this platform."""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        if base:
            return base
    elif sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support")
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return xdg
    return os.path.join(os.path.expanduser("~"), ".config")


def config_path():
    """Path of the credential file (may not exist yet)."""
    return os.path.join(_user_config_dir(), "trello", "config.json")


def load_credentials():
    """Read the stored credential record.

    Returns an empty dict when nothing is stored. Raises SetupError when the
    file exists but cannot be parsed.
    """
    path = config_path()
    if not os.path.exists(path):
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SetupError(f"failed to load config {path}: {e}") from e
    if not isinstance(data, dict):
        raise SetupError(f"failed to load config {path}: expected a JSON object")
    return data


def save_credentials(api_key, api_token, **profile):
    """Write the credential record (atomic write-then-rename, owner-only)."""
    record = {"api_key": api_key, "api_token": api_token}
    for name in _PROFILE_FIELDS:
        if profile.get(name):
            record[name] = profile[name]

    path = config_path()
    directory = os.path.dirname(path)
    try:
        os.makedirs(directory, mode=0o700, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".config_tmp_")
    except OSError as e:
        raise CliError(f"saving config: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2)
        os.replace(tmp_path, path)
    except Exception as e:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        if isinstance(e, OSError):
            raise CliError(f"saving config: {e}") from e
        raise
    # No-op on Windows.
    try:
        os.chmod(path, 0o600)
    except (OSError, NotImplementedError):
        pass
    return record


def clear_credentials():
    """Remove the credential file. Missing file is not an error."""
    try:
        os.remove(config_path())
    except FileNotFoundError:
        pass
    except OSError as e:
        raise CliError(f"removing config: {e}") from e


def resolve_credentials():
    """Return (api_key, api_token): env vars first, then the credential file."""
    env_key = os.environ.get(ENV_API_KEY, "")
    env_token = os.environ.get(ENV_API_TOKEN, "")
    if env_key and env_token:
        return env_key, env_token

    stored = load_credentials()
    key = stored.get("api_key") or ""
    token = stored.get("api_token") or ""
    if key and token:
        return key, token
    raise SetupError(SETUP_HINT)
