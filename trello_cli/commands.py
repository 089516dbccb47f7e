"""
Command implementations for trello-cli.
Each cmd_*() function receives the invocation's TrelloClient and an
argparse.Namespace and handles one CLI command.

Resource access lives in client.py (TrelloClient). These thin wrappers
handle argparse -> keyword args, required-flag checks, and formatter
dispatch through ns.mode.
"""

import os
import sys

from trello_cli import config
from trello_cli._utils import _mask_token, _parse_csv_values
from trello_cli.api import CLEAR
from trello_cli.client import TrelloClient
from trello_cli.exceptions import CliError, ValidationError
from trello_cli.formatters import (
    format_attachments_table,
    format_board_detail,
    format_board_saved,
    format_boards_table,
    format_card_detail,
    format_card_saved,
    format_cards_table,
    format_check_item_saved,
    format_checklist_detail,
    format_checklist_saved,
    format_checklists,
    format_comment_added,
    format_label_detail,
    format_labels_table,
    format_list_detail,
    format_list_saved,
    format_lists_table,
    format_member_cards_table,
    format_member_detail,
    format_members_table,
    format_search_results,
    format_workspaces_table,
    mutation_response,
    output,
)


def _require(value, flag):
    if not value:
        raise ValidationError(f"{flag} is required")
    return value


def _saved(formatter, action):
    return lambda data: formatter(data, action)


def _is_set(value):
    # Same omission rule as merge_params.
    return value not in (None, "")


# ---------------------------------------------------------------------------
# Auth and info (no client needed)
# ---------------------------------------------------------------------------

_TOKEN_URL = (
    "https://trello.com/1/authorize?expiration=never&scope=read,write"
    "&response_type=token&key={key}"
)


def cmd_auth_setup(_client, ns):
    """Validate the key/token pair against members/me, then store it."""
    if len(ns.api_key) < 8:
        raise ValidationError(
            "API key looks too short; check your key at https://trello.com/power-ups/admin"
        )
    if len(ns.api_token) < 8:
        raise ValidationError(
            "API token looks too short; re-generate it at " + _TOKEN_URL.format(key=ns.api_key)
        )

    try:
        member = TrelloClient(ns.api_key, ns.api_token).get_member("me")
    except CliError as e:
        raise CliError(f"credentials validation failed: {e}") from e
    config.save_credentials(
        ns.api_key,
        ns.api_token,
        member_id=member.get("id"),
        full_name=member.get("fullName"),
        username=member.get("username"),
    )
    result = {
        "config_path": config.config_path(),
        "member": {
            "id": member.get("id", ""),
            "fullName": member.get("fullName", ""),
            "username": member.get("username", ""),
        },
        "api_key": _mask_token(ns.api_key),
        "api_token": _mask_token(ns.api_token),
    }

    def _fmt(r):
        m = r["member"]
        return "\n".join(
            [
                f"Credentials saved to {r['config_path']}",
                f"Authenticated as: {m['fullName']} (@{m['username']})",
                f"API key:          {r['api_key']}",
                f"API token:        {r['api_token']}",
            ]
        )

    output(result, _fmt, ns.mode)


def _credential_status():
    env_key = os.environ.get(config.ENV_API_KEY, "")
    env_token = os.environ.get(config.ENV_API_TOKEN, "")
    status = {"config_path": config.config_path(), "authenticated": False, "source": None}
    if env_key and env_token:
        status.update(
            authenticated=True,
            source="env",
            api_key=_mask_token(env_key),
            api_token=_mask_token(env_token),
        )
        return status
    stored = config.load_credentials()
    if stored.get("api_key") and stored.get("api_token"):
        status.update(
            authenticated=True,
            source="config",
            api_key=_mask_token(stored["api_key"]),
            api_token=_mask_token(stored["api_token"]),
        )
        if stored.get("full_name"):
            status["user"] = {
                "fullName": stored["full_name"],
                "username": stored.get("username", ""),
            }
    return status


def _format_auth_status(status):
    lines = [f"Config: {status['config_path']}", ""]
    if status["source"] == "env":
        lines += [
            "Credential source: env vars (take priority over config)",
            f"{config.ENV_API_KEY}:   {status['api_key']}",
            f"{config.ENV_API_TOKEN}: {status['api_token']}",
        ]
    elif status["source"] == "config":
        lines += [
            "Credential source: config file",
            f"API key:   {status['api_key']}",
            f"API token: {status['api_token']}",
        ]
        user = status.get("user")
        if user:
            lines.append(f"User:      {user['fullName']} (@{user['username']})")
    else:
        lines += [
            "Status: not authenticated",
            "",
            "Run: trello auth setup <api-key> <api-token>",
            "Or set env vars:",
            f"  export {config.ENV_API_KEY}=your-key",
            f"  export {config.ENV_API_TOKEN}=your-token",
        ]
    return "\n".join(lines)


def cmd_auth_status(_client, ns):
    output(_credential_status(), _format_auth_status, ns.mode)


def cmd_auth_logout(_client, ns):
    config.clear_credentials()
    mutation_response("Credentials removed from config.", ns.mode)
    if ns.mode.is_display:
        print(
            f"Set {config.ENV_API_KEY} and {config.ENV_API_TOKEN} env vars "
            "if you still need access."
        )


def cmd_info(_client, ns):
    """Tool diagnostics: version, platform, config path, credential source."""
    status = _credential_status()
    info = {
        "version": config.VERSION,
        "python": sys.version.split()[0],
        "platform": sys.platform,
        "executable": sys.executable,
        "config_path": status["config_path"],
        "key_source": status["source"] or "none",
        "env": {
            config.ENV_API_KEY: _mask_token(os.environ.get(config.ENV_API_KEY, "")),
            config.ENV_API_TOKEN: _mask_token(os.environ.get(config.ENV_API_TOKEN, "")),
        },
    }

    def _fmt(r):
        return "\n".join(
            [
                f"trello-cli {r['version']}",
                "",
                f"  python:   {r['python']} ({r['executable']})",
                f"  platform: {r['platform']}",
                f"  config:   {r['config_path']}",
                "",
                f"  key source:   {r['key_source']}",
                "",
                "  env vars:",
                f"    {config.ENV_API_KEY}   = {r['env'][config.ENV_API_KEY]}",
                f"    {config.ENV_API_TOKEN} = {r['env'][config.ENV_API_TOKEN]}",
                "",
                "  credential resolution order:",
                f"    1. {config.ENV_API_KEY} + {config.ENV_API_TOKEN} env vars",
                "    2. config file  (trello auth setup)",
            ]
        )

    output(info, _fmt, ns.mode)


# ---------------------------------------------------------------------------
# Boards
# ---------------------------------------------------------------------------


def cmd_boards_list(client, ns):
    output(client.list_my_boards(ns.filter), format_boards_table, ns.mode)


def cmd_boards_get(client, ns):
    output(client.get_board(ns.board_id), format_board_detail, ns.mode)


def cmd_boards_create(client, ns):
    board = client.create_board(ns.name, desc=ns.desc, id_organization=ns.workspace)
    output(board, _saved(format_board_saved, "created"), ns.mode)


def cmd_boards_update(client, ns):
    params = {"name": ns.name, "desc": ns.desc, "closed": ns.closed}
    if not any(_is_set(v) for v in params.values()):
        raise ValidationError("nothing to update; pass --name, --desc, --closed or --reopen")
    board = client.update_board(ns.board_id, params)
    output(board, _saved(format_board_saved, "updated"), ns.mode)


def cmd_boards_delete(client, ns):
    client.delete_board(ns.board_id)
    mutation_response(f"Board {ns.board_id} deleted.", ns.mode, id=ns.board_id)


def cmd_boards_members(client, ns):
    output(client.list_board_members(ns.board_id), format_members_table, ns.mode)


def cmd_boards_labels(client, ns):
    output(client.list_board_labels(ns.board_id), format_labels_table, ns.mode)


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


def cmd_lists_list(client, ns):
    board_id = _require(ns.board, "--board")
    output(client.list_board_lists(board_id, ns.filter), format_lists_table, ns.mode)


def cmd_lists_get(client, ns):
    output(client.get_list(ns.list_id), format_list_detail, ns.mode)


def cmd_lists_create(client, ns):
    board_id = _require(ns.board, "--board")
    lst = client.create_list(ns.name, board_id, pos=ns.pos)
    output(lst, _saved(format_list_saved, "created"), ns.mode)


def cmd_lists_rename(client, ns):
    lst = client.update_list(ns.list_id, {"name": ns.name})
    output(lst, _saved(format_list_saved, "renamed to"), ns.mode)


def cmd_lists_archive(client, ns):
    lst = client.archive_list(ns.list_id, True)
    output(lst, _saved(format_list_saved, "archived"), ns.mode)


def cmd_lists_unarchive(client, ns):
    lst = client.archive_list(ns.list_id, False)
    output(lst, _saved(format_list_saved, "unarchived"), ns.mode)


def cmd_lists_cards(client, ns):
    output(client.list_list_cards(ns.list_id, ns.filter), format_cards_table, ns.mode)


# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


def cmd_cards_list(client, ns):
    if ns.list:
        cards = client.list_list_cards(ns.list, ns.filter)
    elif ns.board:
        cards = client.list_board_cards(ns.board, ns.filter)
    else:
        raise ValidationError("provide --board <board-id> or --list <list-id>")
    output(cards, format_cards_table, ns.mode)


def cmd_cards_get(client, ns):
    output(client.get_card(ns.card_id), format_card_detail, ns.mode)


def cmd_cards_create(client, ns):
    list_id = _require(ns.list, "--list")
    labels = [v.strip() for v in (ns.labels or "").split(",") if v.strip()]
    card = client.create_card(
        list_id,
        ns.name,
        desc=ns.desc,
        params={"due": ns.due, "pos": ns.pos, "idLabels": labels},
    )
    output(card, _saved(format_card_saved, "created"), ns.mode)


def cmd_cards_update(client, ns):
    if ns.due and ns.clear_due:
        raise ValidationError("--due and --clear-due are mutually exclusive")
    params = {
        "name": ns.name,
        "desc": ns.desc,
        "due": CLEAR if ns.clear_due else ns.due,
        "closed": ns.closed,
        "dueComplete": ns.due_complete,
    }
    if not any(_is_set(v) for v in params.values()):
        raise ValidationError(
            "nothing to update; pass --name, --desc, --due, --clear-due, --closed "
            "or --due-complete/--due-incomplete"
        )
    card = client.update_card(ns.card_id, params)
    output(card, _saved(format_card_saved, "updated"), ns.mode)


def cmd_cards_delete(client, ns):
    client.delete_card(ns.card_id)
    mutation_response(f"Card {ns.card_id} deleted.", ns.mode, id=ns.card_id)


def cmd_cards_move(client, ns):
    list_id = _require(ns.list, "--list")
    card = client.move_card(ns.card_id, list_id, ns.board)
    output(card, _saved(format_card_saved, "moved"), ns.mode)


def cmd_cards_archive(client, ns):
    card = client.archive_card(ns.card_id)
    output(card, _saved(format_card_saved, "archived"), ns.mode)


def cmd_cards_comment(client, ns):
    action = client.add_comment(ns.card_id, ns.text)
    output(action, lambda a: format_comment_added(a, ns.card_id), ns.mode)


def cmd_cards_checklists(client, ns):
    output(client.list_card_checklists(ns.card_id), format_checklists, ns.mode)


def cmd_cards_attachments(client, ns):
    output(client.list_card_attachments(ns.card_id), format_attachments_table, ns.mode)


def _add_or_remove(ns, noun):
    if ns.add and ns.remove:
        raise ValidationError("--add and --remove are mutually exclusive")
    if not (ns.add or ns.remove):
        raise ValidationError(f"provide --add <{noun}-id> or --remove <{noun}-id>")


def cmd_cards_label(client, ns):
    _add_or_remove(ns, "label")
    if ns.add:
        client.add_label_to_card(ns.card_id, ns.add)
        message = f"Label {ns.add} added to card {ns.card_id}."
    else:
        client.remove_label_from_card(ns.card_id, ns.remove)
        message = f"Label {ns.remove} removed from card {ns.card_id}."
    mutation_response(message, ns.mode, card_id=ns.card_id, label_id=ns.add or ns.remove)


def cmd_cards_member(client, ns):
    _add_or_remove(ns, "member")
    if ns.add:
        client.add_member_to_card(ns.card_id, ns.add)
        message = f"Member {ns.add} added to card {ns.card_id}."
    else:
        client.remove_member_from_card(ns.card_id, ns.remove)
        message = f"Member {ns.remove} removed from card {ns.card_id}."
    mutation_response(message, ns.mode, card_id=ns.card_id, member_id=ns.add or ns.remove)


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


def cmd_members_me(client, ns):
    member = client.get_member("me")
    output(member, lambda m: format_member_detail(m, include_private=True), ns.mode)


def cmd_members_get(client, ns):
    output(client.get_member(ns.member), format_member_detail, ns.mode)


def cmd_members_boards(client, ns):
    boards = client.list_member_boards(ns.member, ns.filter)
    output(boards, lambda b: format_boards_table(b, show_workspace=False), ns.mode)


def cmd_members_cards(client, ns):
    cards = client.list_member_cards(ns.member, ns.filter)
    output(cards, format_member_cards_table, ns.mode)


def cmd_members_workspaces(client, ns):
    output(client.list_member_organizations(ns.member), format_workspaces_table, ns.mode)


# ---------------------------------------------------------------------------
# Checklists
# ---------------------------------------------------------------------------


def cmd_checklists_get(client, ns):
    output(client.get_checklist(ns.checklist_id), format_checklist_detail, ns.mode)


def cmd_checklists_create(client, ns):
    card_id = _require(ns.card, "--card")
    checklist = client.create_checklist(card_id, ns.name)
    output(checklist, _saved(format_checklist_saved, "created"), ns.mode)


def cmd_checklists_delete(client, ns):
    client.delete_checklist(ns.checklist_id)
    mutation_response(f"Checklist {ns.checklist_id} deleted.", ns.mode, id=ns.checklist_id)


def cmd_checklists_add_item(client, ns):
    checklist_id = _require(ns.checklist, "--checklist")
    item = client.create_check_item(checklist_id, ns.name)
    output(item, _saved(format_check_item_saved, "added"), ns.mode)


def _set_item_state(client, ns, state, action):
    card_id = _require(ns.card, "--card")
    checklist_id = _require(ns.checklist, "--checklist")
    item = client.update_check_item(card_id, checklist_id, ns.item_id, state)
    output(item, _saved(format_check_item_saved, action), ns.mode)


def cmd_checklists_check(client, ns):
    _set_item_state(client, ns, "complete", "checked")


def cmd_checklists_uncheck(client, ns):
    _set_item_state(client, ns, "incomplete", "unchecked")


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------


def cmd_labels_get(client, ns):
    output(client.get_label(ns.label_id), format_label_detail, ns.mode)


def cmd_labels_create(client, ns):
    board_id = _require(ns.board, "--board")
    if ns.color and ns.color not in config.VALID_LABEL_COLORS:
        raise ValidationError(
            f"invalid color '{ns.color}'. Valid: {', '.join(sorted(config.VALID_LABEL_COLORS))}"
        )
    label = client.create_label(board_id, ns.name, ns.color)
    output(label, format_label_detail, ns.mode)


def cmd_labels_delete(client, ns):
    client.delete_label(ns.label_id)
    mutation_response(f"Label {ns.label_id} deleted.", ns.mode, id=ns.label_id)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def cmd_search(client, ns):
    model_types = _parse_csv_values(ns.type, config.VALID_SEARCH_TYPES, "type")
    result = client.search(ns.query, model_types, ns.limit)
    output(result, format_search_results, ns.mode)
