"""Typed response definitions for TrelloClient methods.

These TypedDicts document the shape of dicts returned by the Trello API.
They are optional: runtime behavior is unchanged (plain dicts), and the
JSON output always carries every field the API returned.
"""

from __future__ import annotations

from typing import TypedDict

# ---------------------------------------------------------------------------
# Boards and lists
# ---------------------------------------------------------------------------


class BoardPrefs(TypedDict, total=False):
    permissionLevel: str
    voting: str
    comments: str
    background: str
    backgroundColor: str | None
    backgroundImage: str | None
    selfJoin: bool
    cardCovers: bool
    isTemplate: bool
    cardAging: str


class Board(TypedDict, total=False):
    id: str
    name: str
    desc: str
    closed: bool
    idOrganization: str | None
    url: str
    shortUrl: str
    shortLink: str
    dateLastActivity: str | None
    prefs: BoardPrefs
    labelNames: dict[str, str]


class TrelloList(TypedDict, total=False):
    id: str
    name: str
    closed: bool
    idBoard: str
    pos: float
    subscribed: bool


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


class Label(TypedDict, total=False):
    id: str
    idBoard: str
    name: str
    color: str | None


class CardBadges(TypedDict, total=False):
    attachments: int
    checkItems: int
    checkItemsChecked: int
    comments: int
    description: bool
    due: str | None
    dueComplete: bool
    subscribed: bool
    votes: int


class Card(TypedDict, total=False):
    id: str
    idShort: int
    name: str
    desc: str
    closed: bool
    idBoard: str
    idList: str
    idMembers: list[str]
    idLabels: list[str]
    labels: list[Label]
    due: str | None
    dueComplete: bool
    start: str | None
    pos: float
    shortLink: str
    shortUrl: str
    url: str
    subscribed: bool
    dateLastActivity: str | None
    badges: CardBadges


class Attachment(TypedDict, total=False):
    id: str
    name: str
    url: str
    mimeType: str | None
    bytes: int | None
    date: str
    isUpload: bool


class CheckItem(TypedDict, total=False):
    id: str
    name: str
    state: str  # "complete" or "incomplete"
    idChecklist: str
    idCard: str
    pos: float
    due: str | None


class Checklist(TypedDict, total=False):
    id: str
    name: str
    idBoard: str
    idCard: str
    pos: float
    checkItems: list[CheckItem]


# ---------------------------------------------------------------------------
# Members and workspaces
# ---------------------------------------------------------------------------


class Member(TypedDict, total=False):
    id: str
    fullName: str
    username: str
    email: str | None
    bio: str
    avatarUrl: str | None
    url: str
    idBoards: list[str]
    memberType: str
    confirmed: bool


class Organization(TypedDict, total=False):
    id: str
    name: str
    displayName: str
    desc: str
    url: str
    idBoards: list[str]


class Action(TypedDict, total=False):
    """Activity entry; comments come back as actions of type commentCard."""

    id: str
    idMemberCreator: str
    type: str
    date: str
    data: dict
    memberCreator: Member


class SearchOptions(TypedDict, total=False):
    terms: list
    modifiers: list


class SearchResult(TypedDict, total=False):
    cards: list[Card]
    boards: list[Board]
    members: list[Member]
    options: SearchOptions
