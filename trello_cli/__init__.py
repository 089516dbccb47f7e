"""trello-cli: command-line client and Python API for Trello boards, lists, and cards."""

from trello_cli.api import CLEAR, ApiClient, merge_params
from trello_cli.client import TrelloClient
from trello_cli.config import VERSION
from trello_cli.exceptions import (
    ApiError,
    CliError,
    DecodeError,
    SetupError,
    TransportError,
    ValidationError,
)
from trello_cli.types import (
    Action,
    Attachment,
    Board,
    Card,
    Checklist,
    CheckItem,
    Label,
    Member,
    Organization,
    SearchResult,
    TrelloList,
)

__all__ = [
    "VERSION",
    "CLEAR",
    "ApiClient",
    "TrelloClient",
    "merge_params",
    "CliError",
    "SetupError",
    "ValidationError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "Action",
    "Attachment",
    "Board",
    "Card",
    "Checklist",
    "CheckItem",
    "Label",
    "Member",
    "Organization",
    "SearchResult",
    "TrelloList",
]
