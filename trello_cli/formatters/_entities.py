"""Formatters for boards, lists, members, workspaces, and labels."""

from trello_cli.formatters._table import _key_value, _table, _trunc
from trello_cli.formatters._values import format_bool, format_time

# ---------------------------------------------------------------------------
# Boards
# ---------------------------------------------------------------------------


def format_boards_table(boards, show_workspace=True):
    """Format boards as a readable table.

    Accepts the list returned by TrelloClient.list_my_boards() or
    list_member_boards().
    """
    if not boards:
        return "No boards found."
    name_width = 40 if show_workspace else 44
    headers = ["ID", "NAME"]
    if show_workspace:
        headers.append("WORKSPACE")
    headers += ["LAST ACTIVITY", "CLOSED"]
    rows = []
    for b in boards:
        row = [b.get("id", ""), _trunc(b.get("name", ""), name_width)]
        if show_workspace:
            row.append(_trunc(b.get("idOrganization") or "", 24))
        row += [format_time(b.get("dateLastActivity")), format_bool(b.get("closed"))]
        rows.append(row)
    return _table(headers, rows)


def format_board_detail(board):
    prefs = board.get("prefs") or {}
    return _key_value(
        [
            ("ID", board.get("id", "")),
            ("Name", board.get("name", "")),
            ("Description", _trunc(board.get("desc", ""), 80)),
            ("Workspace", board.get("idOrganization") or ""),
            ("URL", board.get("shortUrl", "")),
            ("Last Activity", format_time(board.get("dateLastActivity"))),
            ("Closed", format_bool(board.get("closed"))),
            ("Permission", prefs.get("permissionLevel", "")),
        ]
    )


def format_board_saved(board, action):
    """Confirmation after create/update: name, ID and short URL."""
    return "\n".join(
        [
            f"Board {action}: {board.get('name', '')}",
            f"ID:  {board.get('id', '')}",
            f"URL: {board.get('shortUrl', '')}",
        ]
    )


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


def format_lists_table(lists):
    if not lists:
        return "No lists found."
    rows = [
        (lst.get("id", ""), _trunc(lst.get("name", ""), 50), format_bool(lst.get("closed")))
        for lst in lists
    ]
    return _table(["ID", "NAME", "CLOSED"], rows)


def format_list_detail(lst):
    return _key_value(
        [
            ("ID", lst.get("id", "")),
            ("Name", lst.get("name", "")),
            ("Board", lst.get("idBoard", "")),
            ("Closed", format_bool(lst.get("closed"))),
        ]
    )


def format_list_saved(lst, action):
    lines = [f"List {action}: {lst.get('name', '')}"]
    if action == "created":
        lines.append(f"ID:    {lst.get('id', '')}")
        lines.append(f"Board: {lst.get('idBoard', '')}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Members and workspaces
# ---------------------------------------------------------------------------


def format_members_table(members):
    if not members:
        return "No members found."
    rows = [(m.get("id", ""), m.get("fullName", ""), m.get("username", "")) for m in members]
    return _table(["ID", "NAME", "USERNAME"], rows)


def format_member_detail(member, include_private=False):
    """Key/value profile view. *include_private* adds the fields only the
    member themselves can see (email, board count)."""
    pairs = [
        ("ID", member.get("id", "")),
        ("Full Name", member.get("fullName", "")),
        ("Username", member.get("username", "")),
    ]
    if include_private:
        pairs.append(("Email", member.get("email") or ""))
    pairs += [
        ("Bio", _trunc(member.get("bio", ""), 80)),
        ("URL", member.get("url", "")),
    ]
    if include_private:
        pairs.append(("Boards", str(len(member.get("idBoards") or []))))
    return _key_value(pairs)


def format_workspaces_table(orgs):
    if not orgs:
        return "No workspaces found."
    rows = [
        (
            o.get("id", ""),
            _trunc(o.get("name", ""), 24),
            _trunc(o.get("displayName", ""), 30),
            str(len(o.get("idBoards") or [])),
        )
        for o in orgs
    ]
    return _table(["ID", "NAME", "DISPLAY NAME", "BOARDS"], rows)


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------


def format_labels_table(labels):
    if not labels:
        return "No labels found."
    rows = [
        (lbl.get("id", ""), lbl.get("name") or "-", lbl.get("color") or "-") for lbl in labels
    ]
    return _table(["ID", "NAME", "COLOR"], rows)


def format_label_detail(label):
    return _key_value(
        [
            ("ID", label.get("id", "")),
            ("Name", label.get("name") or "-"),
            ("Color", label.get("color") or "-"),
            ("Board", label.get("idBoard", "")),
        ]
    )
