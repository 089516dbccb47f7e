"""Search result formatter."""

from trello_cli.formatters._cards import format_cards_table
from trello_cli.formatters._table import _table, _trunc
from trello_cli.formatters._values import format_bool


def format_search_results(result):
    """Render cards, boards and members sections; empty sections are skipped."""
    cards = result.get("cards") or []
    boards = result.get("boards") or []
    members = result.get("members") or []
    if not (cards or boards or members):
        return "No results found."

    sections = []
    if cards:
        sections.append(f"Cards ({len(cards)})\n{format_cards_table(cards)}")
    if boards:
        rows = [
            (
                b.get("id", ""),
                _trunc(b.get("name", ""), 44),
                b.get("shortUrl", ""),
                format_bool(b.get("closed")),
            )
            for b in boards
        ]
        sections.append(f"Boards ({len(boards)})\n{_table(['ID', 'NAME', 'URL', 'CLOSED'], rows)}")
    if members:
        rows = [(m.get("id", ""), m.get("fullName", ""), m.get("username", "")) for m in members]
        sections.append(f"Members ({len(members)})\n{_table(['ID', 'NAME', 'USERNAME'], rows)}")
    return "\n\n".join(sections)
