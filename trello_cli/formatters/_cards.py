"""Card-specific formatters: tables, detail, checklists, attachments."""

from trello_cli.formatters._table import _key_value, _table, _trunc
from trello_cli.formatters._values import (
    format_bool,
    format_date,
    format_labels,
    format_time,
    label_names,
)


def format_cards_table(cards, name_width=44):
    """Format cards as a readable table.

    Accepts the list returned by list_board_cards()/list_list_cards().
    """
    if not cards:
        return "No cards found."
    rows = []
    for c in cards:
        rows.append(
            (
                c.get("id", ""),
                str(c.get("idShort", "")),
                _trunc(c.get("name", ""), name_width),
                format_date(c.get("due")),
                format_labels(label_names(c.get("labels"))),
            )
        )
    return _table(["ID", "#", "NAME", "DUE", "LABELS"], rows)


def format_member_cards_table(cards):
    """Cards assigned to a member: shows the board instead of labels."""
    if not cards:
        return "No cards found."
    rows = [
        (
            c.get("id", ""),
            str(c.get("idShort", "")),
            _trunc(c.get("name", ""), 44),
            _trunc(c.get("idBoard", ""), 24),
            format_date(c.get("due")),
        )
        for c in cards
    ]
    return _table(["ID", "#", "NAME", "BOARD", "DUE"], rows)


def format_card_detail(card):
    """Format a single card with full details."""
    badges = card.get("badges") or {}
    checklist_summary = "-"
    if badges.get("checkItems"):
        checklist_summary = f"{badges.get('checkItemsChecked', 0)}/{badges['checkItems']}"
    return _key_value(
        [
            ("ID", card.get("id", "")),
            ("#", str(card.get("idShort", ""))),
            ("Name", card.get("name", "")),
            ("Description", _trunc(card.get("desc", ""), 80)),
            ("List", card.get("idList", "")),
            ("Board", card.get("idBoard", "")),
            ("URL", card.get("shortUrl", "")),
            ("Due", format_date(card.get("due"))),
            ("Due complete", format_bool(card.get("dueComplete"))),
            ("Labels", format_labels(label_names(card.get("labels")))),
            ("Checklists", checklist_summary),
            ("Attachments", str(badges.get("attachments", 0))),
            ("Comments", str(badges.get("comments", 0))),
            ("Last Activity", format_time(card.get("dateLastActivity"))),
            ("Closed", format_bool(card.get("closed"))),
        ]
    )


def format_card_saved(card, action):
    """Confirmation after a card mutation."""
    lines = [f"Card {action}: {card.get('name', '')}"]
    if action == "created":
        lines.append(f"ID:  {card.get('id', '')}")
        lines.append(f"#{card.get('idShort', '')}  {card.get('shortUrl', '')}")
    elif action == "updated":
        lines.append(f"ID:  {card.get('id', '')}")
    elif action == "moved":
        lines.append(f"New list: {card.get('idList', '')}")
    return "\n".join(lines)


def format_comment_added(action, card_id):
    return f"Comment added to card {card_id}.\nAction ID: {action.get('id', '')}"


def format_attachments_table(attachments):
    if not attachments:
        return "No attachments found."
    rows = [
        (
            a.get("id", ""),
            _trunc(a.get("name", ""), 30),
            _trunc(a.get("url", ""), 50),
            format_time(a.get("date")),
        )
        for a in attachments
    ]
    return _table(["ID", "NAME", "URL", "DATE"], rows)


# ---------------------------------------------------------------------------
# Checklists
# ---------------------------------------------------------------------------


def _checklist_lines(cl):
    lines = [f"{cl.get('name', '')} (ID: {cl.get('id', '')})"]
    items = cl.get("checkItems") or []
    if not items:
        lines.append("  (empty)")
        return lines
    for item in items:
        mark = "[x]" if item.get("state") == "complete" else "[ ]"
        lines.append(f"  {mark} {item.get('name', '')}  (ID: {item.get('id', '')})")
    return lines


def format_checklists(checklists):
    """Checklists with their items, one block per checklist."""
    if not checklists:
        return "No checklists found."
    blocks = ["\n".join(_checklist_lines(cl)) for cl in checklists]
    return "\n\n".join(blocks)


def format_checklist_detail(checklist):
    return "\n".join(_checklist_lines(checklist))


def format_checklist_saved(checklist, action):
    return "\n".join(
        [
            f"Checklist {action}: {checklist.get('name', '')}",
            f"ID:   {checklist.get('id', '')}",
            f"Card: {checklist.get('idCard', '')}",
        ]
    )


def format_check_item_saved(item, action):
    lines = [f"Item {action}: {item.get('name', '')}"]
    if action == "added":
        lines.append(f"ID: {item.get('id', '')}")
    return "\n".join(lines)
