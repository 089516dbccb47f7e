"""Output formatting package for trello-cli.

Re-exports all public names so consumers can do:
    from trello_cli.formatters import format_cards_table
"""

from trello_cli.formatters._cards import (
    format_attachments_table,
    format_card_detail,
    format_card_saved,
    format_check_item_saved,
    format_checklist_detail,
    format_checklist_saved,
    format_checklists,
    format_comment_added,
    format_cards_table,
    format_member_cards_table,
)
from trello_cli.formatters._core import (
    emit_error,
    mutation_response,
    output,
    render_json,
    resolve_output_mode,
    stdout_is_interactive,
)
from trello_cli.formatters._entities import (
    format_board_detail,
    format_board_saved,
    format_boards_table,
    format_label_detail,
    format_labels_table,
    format_list_detail,
    format_list_saved,
    format_lists_table,
    format_member_detail,
    format_members_table,
    format_workspaces_table,
)
from trello_cli.formatters._search import format_search_results
from trello_cli.formatters._table import (
    _CONTROL_RE,
    _key_value,
    _sanitize_str,
    _table,
    _trunc,
)
from trello_cli.formatters._values import (
    format_bool,
    format_date,
    format_labels,
    format_time,
    label_names,
)

__all__ = [
    "_CONTROL_RE",
    "_key_value",
    "_sanitize_str",
    "_table",
    "_trunc",
    "emit_error",
    "format_attachments_table",
    "format_board_detail",
    "format_board_saved",
    "format_boards_table",
    "format_bool",
    "format_card_detail",
    "format_card_saved",
    "format_cards_table",
    "format_check_item_saved",
    "format_checklist_detail",
    "format_checklist_saved",
    "format_checklists",
    "format_comment_added",
    "format_date",
    "format_label_detail",
    "format_labels",
    "format_labels_table",
    "format_list_detail",
    "format_list_saved",
    "format_lists_table",
    "format_member_cards_table",
    "format_member_detail",
    "format_members_table",
    "format_search_results",
    "format_time",
    "format_workspaces_table",
    "label_names",
    "mutation_response",
    "output",
    "render_json",
    "resolve_output_mode",
    "stdout_is_interactive",
]
