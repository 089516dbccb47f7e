"""
Typed value objects shared by the request engine and the output layer.
"""

import urllib.parse
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestDescriptor:
    """One fully-assembled API call. Built per call, never mutated."""

    method: str
    path: str
    params: tuple[tuple[str, str], ...]
    body: bytes | None = None

    @property
    def query(self) -> str:
        return urllib.parse.urlencode(self.params)

    def url(self, base_url: str) -> str:
        return f"{base_url}{self.path}?{self.query}"

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        return headers


@dataclass(frozen=True)
class OutputMode:
    """Rendering decision for one invocation.

    structured=True means JSON (compact unless pretty); False means
    human-readable tables and key/value views.
    """

    structured: bool
    pretty: bool = False

    @property
    def is_display(self) -> bool:
        return not self.structured


DISPLAY = OutputMode(structured=False)
