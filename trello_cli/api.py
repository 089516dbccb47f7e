"""
HTTP request layer for trello-cli: parameter merging, request building,
execution, failure classification, and payload decoding.
"""

import http.client
import json
import sys
import time
import urllib.error
import urllib.parse
import urllib.request

from trello_cli import config
from trello_cli.exceptions import ApiError, DecodeError, TransportError
from trello_cli.models import RequestDescriptor

# ---------------------------------------------------------------------------
# Parameter merging
# ---------------------------------------------------------------------------


class _Clear:
    """Sentinel: send the parameter with an explicit empty value."""

    def __repr__(self):
        return "CLEAR"


CLEAR = _Clear()


def _param_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def merge_params(*sources):
    """Merge parameter mappings into one flat str -> str dict.

    Sources are applied left to right, so a later source wins for a key it
    sets. None, "" and empty sequences count as "not set" and never reach the
    query string (an earlier value for the key is kept). CLEAR is the only way
    to send an explicit empty value.
    """
    merged = {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if value is CLEAR:
                merged[key] = ""
                continue
            if value is None or value == "":
                continue
            if isinstance(value, (list, tuple)) and not value:
                continue
            merged[key] = _param_value(value)
    return merged


# ---------------------------------------------------------------------------
# Logging helpers
# ---------------------------------------------------------------------------

_SECRET_PARAMS = frozenset({"key", "token"})


def _sanitize_url_for_log(url):
    """Mask credential query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = [(k, "***" if k.lower() in _SECRET_PARAMS else v) for k, v in pairs]
    safe_query = urllib.parse.urlencode(masked)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


# ---------------------------------------------------------------------------
# HTTP execution
# ---------------------------------------------------------------------------


def _read_body(stream):
    raw = stream.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
    if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
        raise TransportError(
            f"response too large (>{config.HTTP_MAX_RESPONSE_BYTES} bytes)"
        )
    return raw


def _read_error_body(err, method, safe_url):
    """Body of an HTTPError, truncated at the response size limit."""
    if not err.fp:
        return b""
    try:
        return err.read(config.HTTP_MAX_RESPONSE_BYTES)
    except (http.client.HTTPException, OSError) as e:
        _log_http_event(phase="network_error", method=method, url=safe_url, error=str(e))
        raise TransportError(f"reading response: {e}") from e


def _http_request(url, body=None, headers=None, method="GET"):
    """Make one HTTP request. Returns the raw response bytes for status < 400.

    Raises ApiError for status >= 400 and TransportError when no response
    could be obtained. Never retries."""
    timeout = max(1, config.HTTP_TIMEOUT_SECONDS)
    safe_url = _sanitize_url_for_log(url)
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
    _log_http_event(phase="request", method=method, url=safe_url, timeout_seconds=timeout)
    start = time.perf_counter()
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            raw = _read_body(resp)
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=getattr(resp, "status", 200),
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return raw
    except urllib.error.HTTPError as e:
        raw = _read_error_body(e, method, safe_url)
        _log_http_event(
            phase="response",
            method=method,
            url=safe_url,
            status=e.code,
            bytes=len(raw),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        if e.code < 400:
            # Unfollowed 3xx: still a success by status.
            return raw
        raise ApiError(e.code, raw.decode("utf-8", errors="replace")) from e
    except TimeoutError as e:
        _log_http_event(phase="network_error", method=method, url=safe_url, error="timeout")
        raise TransportError(f"request failed: timed out after {timeout} seconds") from e
    except urllib.error.URLError as e:
        _log_http_event(
            phase="network_error", method=method, url=safe_url, error=f"url_error: {e.reason}"
        )
        raise TransportError(f"request failed: {e.reason}") from e
    except (http.client.HTTPException, OSError) as e:
        _log_http_event(phase="network_error", method=method, url=safe_url, error=str(e))
        raise TransportError(f"request failed: {e}") from e


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_json(raw, expected, operation):
    """Decode a success payload and check its top-level shape.

    expected is dict or list. Anything else (invalid JSON, wrong shape) is a
    DecodeError rather than an empty result."""
    try:
        value = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeError(f"decoding {operation} response: {e.reason}") from None
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"decoding {operation} response: {e.msg} at position {e.pos}"
        ) from None
    if not isinstance(value, expected):
        want = "object" if expected is dict else "array"
        raise DecodeError(
            f"decoding {operation} response: expected JSON {want}, "
            f"got {type(value).__name__}"
        )
    return value


# ---------------------------------------------------------------------------
# Authenticated client
# ---------------------------------------------------------------------------


class ApiClient:
    """Authenticated request engine bound to one (key, token) pair.

    The credentials are appended as query parameters to every request. No
    validation happens here; shape checks belong to the caller.
    """

    def __init__(self, api_key, api_token):
        self._api_key = api_key
        self._api_token = api_token

    def _auth_params(self):
        return {"key": self._api_key, "token": self._api_token}

    def build_request(self, method, path, params=None, body=None):
        """Assemble a RequestDescriptor.

        Auth params go first; a caller param literally named "key" or
        "token" replaces the auth value. Discouraged, but not an error.
        """
        query = self._auth_params()
        query.update(params or {})
        payload = None
        if body is not None:
            payload = json.dumps(body, ensure_ascii=False).encode("utf-8")
        return RequestDescriptor(
            method=method.upper(),
            path=path,
            params=tuple(query.items()),
            body=payload,
        )

    def execute(self, method, path, params=None, body=None):
        """Run one request and return the raw success payload."""
        request = self.build_request(method, path, params, body)
        headers = request.headers
        headers["User-Agent"] = f"trello-cli/{config.VERSION}"
        return _http_request(
            request.url(config.BASE_URL), request.body, headers, request.method
        )

    def get(self, path, params=None):
        return self.execute("GET", path, params)

    def post(self, path, params=None, body=None):
        return self.execute("POST", path, params, body)

    def put(self, path, params=None, body=None):
        return self.execute("PUT", path, params, body)

    def delete(self, path, params=None):
        return self.execute("DELETE", path, params)
