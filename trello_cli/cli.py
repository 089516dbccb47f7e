"""
trello-cli: command-line client for Trello boards, lists, and cards
"""

import argparse
import sys

from trello_cli import config
from trello_cli.client import TrelloClient
from trello_cli.commands import (
    cmd_auth_logout,
    cmd_auth_setup,
    cmd_auth_status,
    cmd_boards_create,
    cmd_boards_delete,
    cmd_boards_get,
    cmd_boards_labels,
    cmd_boards_list,
    cmd_boards_members,
    cmd_boards_update,
    cmd_cards_archive,
    cmd_cards_attachments,
    cmd_cards_checklists,
    cmd_cards_comment,
    cmd_cards_create,
    cmd_cards_delete,
    cmd_cards_get,
    cmd_cards_label,
    cmd_cards_list,
    cmd_cards_member,
    cmd_cards_move,
    cmd_cards_update,
    cmd_checklists_add_item,
    cmd_checklists_check,
    cmd_checklists_create,
    cmd_checklists_delete,
    cmd_checklists_get,
    cmd_checklists_uncheck,
    cmd_info,
    cmd_labels_create,
    cmd_labels_delete,
    cmd_labels_get,
    cmd_lists_archive,
    cmd_lists_cards,
    cmd_lists_create,
    cmd_lists_get,
    cmd_lists_list,
    cmd_lists_rename,
    cmd_lists_unarchive,
    cmd_members_boards,
    cmd_members_cards,
    cmd_members_get,
    cmd_members_me,
    cmd_members_workspaces,
    cmd_search,
)
from trello_cli.exceptions import CliError, ValidationError
from trello_cli.formatters import emit_error, resolve_output_mode, stdout_is_interactive

HELP_TEXT = """\
Usage: trello <command> [subcommand] [args...]

Global flags:
  --json                  Output JSON (indented at a terminal)
  --pretty                Output indented JSON
  --verbose, -v           Log HTTP requests to stderr
  --version               Show version number
  --help, -h              Show this help

When stdout is not a terminal, output is always JSON (compact unless --pretty).

Commands:
  auth setup <key> <token>  - Validate and save API credentials
  auth status               - Show where credentials come from
  auth logout               - Remove saved credentials
  info                      - Show tool and configuration info

  boards list               - List your boards
    --filter <f>              open (default), closed, all, members, starred, ...
  boards get <id>           - Show board details
  boards create <name>      - Create a board
    --desc <text>             Board description
    --workspace <id>          Workspace (organization) ID
  boards update <id>        - Update a board
    --name <text>, --desc <text>, --closed, --reopen
  boards delete <id>        - Permanently delete a board
  boards members <id>       - List board members
  boards labels <id>        - List board labels

  lists list --board <id>   - List lists on a board (--filter open|closed|all)
  lists get <id>            - Show list details
  lists create <name>       - Create a list (--board <id> required, --pos top|bottom|n)
  lists rename <id> <name>  - Rename a list
  lists archive <id>        - Archive a list
  lists unarchive <id>      - Restore an archived list
  lists cards <id>          - List cards in a list (--filter)

  cards list                - List cards (--board <id> or --list <id>, --filter)
  cards get <id>            - Show card details
  cards create <name>       - Create a card (--list <id> required)
    --desc <text>, --due <date>, --pos <pos>, --labels <id,id>
  cards update <id>         - Update a card
    --name <text>, --desc <text>, --due <date>, --clear-due, --closed,
    --due-complete, --due-incomplete
  cards delete <id>         - Permanently delete a card
  cards move <id>           - Move a card (--list <id> required, --board <id>)
  cards archive <id>        - Archive a card
  cards comment <id> <text> - Add a comment
  cards checklists <id>     - Show checklists with items
  cards attachments <id>    - List attachments
  cards label <id>          - --add <label-id> or --remove <label-id>
  cards member <id>         - --add <member-id> or --remove <member-id>

  members me                - Show the authenticated member
  members get <id|user>     - Show a member
  members boards [id]       - List a member's boards (default: me)
  members cards [id]        - List a member's cards (default: me)
  members workspaces [id]   - List a member's workspaces (default: me)

  checklists get <id>       - Show a checklist
  checklists create <name>  - Create a checklist (--card <id> required)
  checklists delete <id>    - Delete a checklist
  checklists add-item <name>  - Add an item (--checklist <id> required)
  checklists check <item>   - Mark complete (--card, --checklist required)
  checklists uncheck <item> - Mark incomplete (--card, --checklist required)

  labels get <id>           - Show a label
  labels create <name>      - Create a label (--board <id> required, --color)
  labels delete <id>        - Delete a label

  search <query>            - Search cards, boards and members
    --type <t,t>              cards, boards, members, organizations, actions, all
    --limit <n>               Max results per type (default: 10)

Environment:
  TRELLO_API_KEY, TRELLO_API_TOKEN   Credentials (override the config file)
  TRELLO_HTTP_TIMEOUT_SECONDS        Request timeout (default: 30)
  TRELLO_HTTP_LOG=1                  Same as --verbose"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --json works after subcommands)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (json, pretty, verbose, remaining_argv).
    Handles --version directly.
    """
    as_json = False
    pretty = False
    verbose = False
    remaining = []
    for arg in argv:
        if arg == "--version":
            print(f"trello-cli {config.VERSION}")
            sys.exit(0)
        elif arg == "--json":
            as_json = True
        elif arg == "--pretty":
            pretty = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        else:
            remaining.append(arg)
    return as_json, pretty, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises ValidationError instead of printing usage."""

    def error(self, message):
        raise ValidationError(message)


def _positive_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a positive integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return parsed


def _group(sub, name):
    """Add a command group (e.g. "boards") and return its subparsers."""
    p = sub.add_parser(name)
    p.set_defaults(func=None)
    return p.add_subparsers(dest="action", parser_class=_SubcommandParser)


def _add_boards(sub):
    g = _group(sub, "boards")
    p = g.add_parser("list")
    p.add_argument("--filter", choices=sorted(config.VALID_BOARD_FILTERS), default="open")
    p.set_defaults(func=cmd_boards_list)

    p = g.add_parser("get")
    p.add_argument("board_id")
    p.set_defaults(func=cmd_boards_get)

    p = g.add_parser("create")
    p.add_argument("name")
    p.add_argument("--desc")
    p.add_argument("--workspace")
    p.set_defaults(func=cmd_boards_create)

    p = g.add_parser("update")
    p.add_argument("board_id")
    p.add_argument("--name")
    p.add_argument("--desc")
    state = p.add_mutually_exclusive_group()
    state.add_argument("--closed", action="store_const", const=True, dest="closed")
    state.add_argument("--reopen", action="store_const", const=False, dest="closed")
    p.set_defaults(func=cmd_boards_update)

    for name, func in (
        ("delete", cmd_boards_delete),
        ("members", cmd_boards_members),
        ("labels", cmd_boards_labels),
    ):
        p = g.add_parser(name)
        p.add_argument("board_id")
        p.set_defaults(func=func)


def _add_lists(sub):
    g = _group(sub, "lists")
    p = g.add_parser("list")
    p.add_argument("--board")
    p.add_argument("--filter", choices=sorted(config.VALID_LIST_FILTERS), default="open")
    p.set_defaults(func=cmd_lists_list)

    p = g.add_parser("create")
    p.add_argument("name")
    p.add_argument("--board")
    p.add_argument("--pos")
    p.set_defaults(func=cmd_lists_create)

    p = g.add_parser("rename")
    p.add_argument("list_id")
    p.add_argument("name")
    p.set_defaults(func=cmd_lists_rename)

    p = g.add_parser("cards")
    p.add_argument("list_id")
    p.add_argument("--filter", choices=sorted(config.VALID_CARD_FILTERS), default="open")
    p.set_defaults(func=cmd_lists_cards)

    for name, func in (
        ("get", cmd_lists_get),
        ("archive", cmd_lists_archive),
        ("unarchive", cmd_lists_unarchive),
    ):
        p = g.add_parser(name)
        p.add_argument("list_id")
        p.set_defaults(func=func)


def _add_cards(sub):
    g = _group(sub, "cards")
    p = g.add_parser("list")
    p.add_argument("--board")
    p.add_argument("--list")
    p.add_argument("--filter", choices=sorted(config.VALID_CARD_FILTERS), default="open")
    p.set_defaults(func=cmd_cards_list)

    p = g.add_parser("create")
    p.add_argument("name")
    p.add_argument("--list")
    p.add_argument("--desc")
    p.add_argument("--due")
    p.add_argument("--pos")
    p.add_argument("--labels")
    p.set_defaults(func=cmd_cards_create)

    p = g.add_parser("update")
    p.add_argument("card_id")
    p.add_argument("--name")
    p.add_argument("--desc")
    p.add_argument("--due")
    p.add_argument("--clear-due", action="store_true", dest="clear_due")
    p.add_argument("--closed", action="store_const", const=True)
    done = p.add_mutually_exclusive_group()
    done.add_argument("--due-complete", action="store_const", const=True, dest="due_complete")
    done.add_argument("--due-incomplete", action="store_const", const=False, dest="due_complete")
    p.set_defaults(func=cmd_cards_update)

    p = g.add_parser("move")
    p.add_argument("card_id")
    p.add_argument("--list")
    p.add_argument("--board")
    p.set_defaults(func=cmd_cards_move)

    p = g.add_parser("comment")
    p.add_argument("card_id")
    p.add_argument("text")
    p.set_defaults(func=cmd_cards_comment)

    for name, func in (("label", cmd_cards_label), ("member", cmd_cards_member)):
        p = g.add_parser(name)
        p.add_argument("card_id")
        p.add_argument("--add")
        p.add_argument("--remove")
        p.set_defaults(func=func)

    for name, func in (
        ("get", cmd_cards_get),
        ("delete", cmd_cards_delete),
        ("archive", cmd_cards_archive),
        ("checklists", cmd_cards_checklists),
        ("attachments", cmd_cards_attachments),
    ):
        p = g.add_parser(name)
        p.add_argument("card_id")
        p.set_defaults(func=func)


def _add_members(sub):
    g = _group(sub, "members")
    g.add_parser("me").set_defaults(func=cmd_members_me)

    p = g.add_parser("get")
    p.add_argument("member")
    p.set_defaults(func=cmd_members_get)

    p = g.add_parser("boards")
    p.add_argument("member", nargs="?", default="me")
    p.add_argument("--filter", choices=sorted(config.VALID_BOARD_FILTERS), default="open")
    p.set_defaults(func=cmd_members_boards)

    p = g.add_parser("cards")
    p.add_argument("member", nargs="?", default="me")
    p.add_argument("--filter", choices=sorted(config.VALID_CARD_FILTERS), default="open")
    p.set_defaults(func=cmd_members_cards)

    p = g.add_parser("workspaces")
    p.add_argument("member", nargs="?", default="me")
    p.set_defaults(func=cmd_members_workspaces)


def _add_checklists(sub):
    g = _group(sub, "checklists")
    for name, func in (("get", cmd_checklists_get), ("delete", cmd_checklists_delete)):
        p = g.add_parser(name)
        p.add_argument("checklist_id")
        p.set_defaults(func=func)

    p = g.add_parser("create")
    p.add_argument("name")
    p.add_argument("--card")
    p.set_defaults(func=cmd_checklists_create)

    p = g.add_parser("add-item")
    p.add_argument("name")
    p.add_argument("--checklist")
    p.set_defaults(func=cmd_checklists_add_item)

    for name, func in (("check", cmd_checklists_check), ("uncheck", cmd_checklists_uncheck)):
        p = g.add_parser(name)
        p.add_argument("item_id")
        p.add_argument("--card")
        p.add_argument("--checklist")
        p.set_defaults(func=func)


def _add_labels(sub):
    g = _group(sub, "labels")
    for name, func in (("get", cmd_labels_get), ("delete", cmd_labels_delete)):
        p = g.add_parser(name)
        p.add_argument("label_id")
        p.set_defaults(func=func)

    p = g.add_parser("create")
    p.add_argument("name")
    p.add_argument("--board")
    p.add_argument("--color")
    p.set_defaults(func=cmd_labels_create)


def build_parser():
    parser = _SubcommandParser(
        prog="trello",
        description="Command-line client for Trello",
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- auth ---
    g = _group(sub, "auth")
    p = g.add_parser("setup")
    p.add_argument("api_key")
    p.add_argument("api_token")
    p.set_defaults(func=cmd_auth_setup)
    g.add_parser("status").set_defaults(func=cmd_auth_status)
    g.add_parser("logout").set_defaults(func=cmd_auth_logout)

    # --- info ---
    sub.add_parser("info").set_defaults(func=cmd_info)

    _add_boards(sub)
    _add_lists(sub)
    _add_cards(sub)
    _add_members(sub)
    _add_checklists(sub)
    _add_labels(sub)

    # --- search ---
    p = sub.add_parser("search")
    p.add_argument("query")
    p.add_argument("--type", action="append")
    p.add_argument("--limit", type=_positive_int, default=10)
    p.set_defaults(func=cmd_search)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

NO_CLIENT_COMMANDS = {"auth", "info"}


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    as_json, pretty, verbose, remaining_argv = _extract_global_flags(argv)
    if verbose:
        config.HTTP_LOG_ENABLED = True

    if not remaining_argv:
        print(HELP_TEXT)
        sys.exit(0)

    try:
        ns = build_parser().parse_args(remaining_argv)
        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler is None:
            raise ValidationError(f"{ns.command} requires a subcommand (see trello --help)")

        ns.mode = resolve_output_mode(as_json, pretty, stdout_is_interactive())

        client = None
        if ns.command not in NO_CLIENT_COMMANDS:
            api_key, api_token = config.resolve_credentials()
            client = TrelloClient(api_key, api_token)
        handler(client, ns)

    except CliError as e:
        emit_error(e)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
