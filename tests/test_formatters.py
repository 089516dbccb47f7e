"""Tests for the formatters package: tables, value rendering, output modes."""

import json

import pytest

from trello_cli.exceptions import ApiError
from trello_cli.formatters import (
    _key_value,
    _sanitize_str,
    _table,
    _trunc,
    emit_error,
    format_attachments_table,
    format_board_saved,
    format_boards_table,
    format_bool,
    format_card_detail,
    format_card_saved,
    format_cards_table,
    format_checklists,
    format_date,
    format_labels,
    format_labels_table,
    format_lists_table,
    format_member_cards_table,
    format_member_detail,
    format_members_table,
    format_search_results,
    format_time,
    format_workspaces_table,
    label_names,
    mutation_response,
    output,
    render_json,
    resolve_output_mode,
    stdout_is_interactive,
)
from trello_cli.models import DISPLAY, OutputMode

# ---------------------------------------------------------------------------
# Output mode
# ---------------------------------------------------------------------------


class TestResolveOutputMode:
    @pytest.mark.parametrize(
        "tty,as_json,pretty,expected",
        [
            (False, False, False, OutputMode(structured=True, pretty=False)),
            (False, True, False, OutputMode(structured=True, pretty=False)),
            (False, False, True, OutputMode(structured=True, pretty=True)),
            (True, False, False, DISPLAY),
            (True, True, False, OutputMode(structured=True, pretty=True)),
            (True, False, True, OutputMode(structured=True, pretty=True)),
        ],
    )
    def test_mode_table(self, tty, as_json, pretty, expected):
        assert resolve_output_mode(as_json, pretty, tty) == expected

    def test_display_property(self):
        assert DISPLAY.is_display is True
        assert OutputMode(structured=True).is_display is False


class TestStdoutIsInteractive:
    def test_pipe(self, capsys):
        assert stdout_is_interactive() is False

    def test_tty_stream(self):
        class _Tty:
            def isatty(self):
                return True

        assert stdout_is_interactive(_Tty()) is True

    def test_closed_stream(self):
        class _Closed:
            def isatty(self):
                raise ValueError("I/O operation on closed file")

        assert stdout_is_interactive(_Closed()) is False


class TestRenderJson:
    def test_compact_is_single_line(self):
        assert render_json({"a": [1, 2], "b": "é"}) == '{"a":[1,2],"b":"é"}'

    def test_pretty_is_indented(self):
        text = render_json({"a": 1}, pretty=True)
        assert text == '{\n  "a": 1\n}'

    def test_no_field_elision(self):
        data = [{"id": "1", "extra": {"nested": None}}]
        assert json.loads(render_json(data)) == data


class TestOutput:
    def test_structured_prints_json(self, capsys):
        output([], format_cards_table, OutputMode(structured=True))
        assert capsys.readouterr().out == "[]\n"

    def test_display_uses_formatter(self, capsys):
        output([], format_cards_table, DISPLAY)
        assert capsys.readouterr().out == "No cards found.\n"

    def test_mutation_response_display(self, capsys):
        mutation_response("Card c1 deleted.", DISPLAY, id="c1")
        assert capsys.readouterr().out == "Card c1 deleted.\n"

    def test_mutation_response_structured(self, capsys):
        mutation_response("Card c1 deleted.", OutputMode(structured=True), id="c1")
        data = json.loads(capsys.readouterr().out)
        assert data == {"ok": True, "message": "Card c1 deleted.", "id": "c1"}

    def test_emit_error_only_stderr(self, capsys):
        emit_error(ApiError(404, "not found"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: HTTP 404: not found\n"


# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------


class TestTrunc:
    def test_short_unchanged(self):
        assert _trunc("abc", 5) == "abc"

    def test_exact_length_unchanged(self):
        assert _trunc("abcde", 5) == "abcde"

    def test_long_gets_ellipsis(self):
        result = _trunc("abcdefgh", 5)
        assert result == "abcd…"
        assert len(result) == 5

    def test_multibyte_not_split(self):
        assert _trunc("héllo wörld", 4) == "hél…"

    def test_length_never_exceeds_limit(self):
        for n in range(1, 12):
            assert len(_trunc("a long card name", n)) <= n

    def test_empty(self):
        assert _trunc("", 5) == ""
        assert _trunc(None, 5) == ""


class TestSanitizeStr:
    def test_strips_ansi(self):
        assert _sanitize_str("\x1b[31mred\x1b[0m") == "red"

    def test_keeps_plain(self):
        assert _sanitize_str("plain text") == "plain text"


class TestTable:
    def test_columns_aligned(self):
        text = _table(["ID", "NAME"], [("1", "alpha"), ("222", "b")])
        assert text.split("\n") == ["ID   NAME", "1    alpha", "222  b"]

    def test_trailing_whitespace_stripped(self):
        text = _table(["A", "B"], [("x", "")])
        assert text.split("\n")[1] == "x"

    def test_key_value(self):
        text = _key_value([("ID", "1"), ("Name", "x")])
        assert text.split("\n") == ["ID    1", "Name  x"]


class TestValues:
    def test_format_time_rfc3339_millis(self):
        assert format_time("2026-01-15T10:30:00.000Z") == "2026-01-15 10:30"

    def test_format_time_offset_converted_to_utc(self):
        assert format_time("2026-01-15T12:30:00+02:00") == "2026-01-15 10:30"

    def test_format_time_empty(self):
        assert format_time(None) == "-"
        assert format_time("") == "-"

    def test_format_time_unparseable_truncated(self):
        assert format_time("sometime next week please") == "sometime next w…"

    def test_format_date(self):
        assert format_date("2026-01-15T23:59:00.000Z") == "2026-01-15"
        assert format_date(None) == "-"

    def test_format_bool(self):
        assert format_bool(True) == "yes"
        assert format_bool(False) == "no"

    def test_format_labels(self):
        assert format_labels([]) == "-"
        assert format_labels(["bug", "ui"]) == "bug, ui"

    def test_label_names_fall_back_to_color(self):
        labels = [{"name": "bug", "color": "red"}, {"name": "", "color": "green"}]
        assert label_names(labels) == ["bug", "green"]


# ---------------------------------------------------------------------------
# Entity formatters
# ---------------------------------------------------------------------------


class TestEmptyCollections:
    @pytest.mark.parametrize(
        "formatter,message",
        [
            (format_boards_table, "No boards found."),
            (format_lists_table, "No lists found."),
            (format_cards_table, "No cards found."),
            (format_member_cards_table, "No cards found."),
            (format_members_table, "No members found."),
            (format_labels_table, "No labels found."),
            (format_workspaces_table, "No workspaces found."),
            (format_attachments_table, "No attachments found."),
            (format_checklists, "No checklists found."),
        ],
    )
    def test_single_line(self, formatter, message):
        assert formatter([]) == message


class TestBoards:
    def test_table(self):
        boards = [
            {
                "id": "b1",
                "name": "Roadmap",
                "idOrganization": "o1",
                "dateLastActivity": "2026-02-01T08:00:00.000Z",
                "closed": False,
            }
        ]
        lines = format_boards_table(boards).split("\n")
        assert lines[0].split() == ["ID", "NAME", "WORKSPACE", "LAST", "ACTIVITY", "CLOSED"]
        assert "Roadmap" in lines[1]
        assert "2026-02-01 08:00" in lines[1]
        assert lines[1].endswith("no")

    def test_table_without_workspace(self):
        text = format_boards_table([{"id": "b1", "name": "R"}], show_workspace=False)
        assert "WORKSPACE" not in text

    def test_saved(self):
        board = {"id": "b1", "name": "R", "shortUrl": "https://trello.com/b/x"}
        text = format_board_saved(board, "created")
        assert text.split("\n") == ["Board created: R", "ID:  b1", "URL: https://trello.com/b/x"]


class TestCards:
    def test_table(self):
        cards = [
            {
                "id": "c1",
                "idShort": 7,
                "name": "Fix login",
                "due": "2026-03-01T12:00:00.000Z",
                "labels": [{"name": "", "color": "red"}],
            }
        ]
        lines = format_cards_table(cards).split("\n")
        assert lines[0].split() == ["ID", "#", "NAME", "DUE", "LABELS"]
        assert lines[1].split() == ["c1", "7", "Fix", "login", "2026-03-01", "red"]

    def test_long_name_truncated(self):
        text = format_cards_table([{"id": "c1", "idShort": 1, "name": "x" * 60}])
        assert "x" * 43 + "…" in text
        assert "x" * 44 not in text

    def test_detail_checklist_summary(self):
        card = {
            "id": "c1",
            "idShort": 3,
            "name": "Fix",
            "badges": {"checkItems": 4, "checkItemsChecked": 1, "comments": 2},
            "dueComplete": True,
        }
        text = format_card_detail(card)
        assert "Checklists     1/4" in text
        assert "Comments       2" in text
        assert "Due complete   yes" in text
        assert "Due            -" in text

    def test_detail_without_checklists(self):
        assert "Checklists     -" in format_card_detail({"id": "c1"})

    def test_saved_moved(self):
        text = format_card_saved({"name": "Fix", "idList": "l2"}, "moved")
        assert text == "Card moved: Fix\nNew list: l2"

    def test_checklists_tree(self):
        checklists = [
            {
                "id": "cl1",
                "name": "QA",
                "checkItems": [
                    {"id": "i1", "name": "tests", "state": "complete"},
                    {"id": "i2", "name": "docs", "state": "incomplete"},
                ],
            },
            {"id": "cl2", "name": "Empty", "checkItems": []},
        ]
        assert format_checklists(checklists).split("\n") == [
            "QA (ID: cl1)",
            "  [x] tests  (ID: i1)",
            "  [ ] docs  (ID: i2)",
            "",
            "Empty (ID: cl2)",
            "  (empty)",
        ]


class TestMembers:
    def test_detail_private_fields(self):
        member = {
            "id": "m1",
            "fullName": "Ada",
            "username": "ada",
            "email": "a@x",
            "idBoards": ["1", "2"],
        }
        public = format_member_detail(member)
        private = format_member_detail(member, include_private=True)
        assert "a@x" not in public
        assert "a@x" in private
        assert "Boards     2" in private

    def test_workspaces(self):
        orgs = [{"id": "o1", "name": "acme", "displayName": "Acme", "idBoards": ["b"]}]
        text = format_workspaces_table(orgs)
        assert text.split("\n")[1].split() == ["o1", "acme", "Acme", "1"]


class TestLabels:
    def test_unnamed_label(self):
        text = format_labels_table([{"id": "lb1", "name": "", "color": "green"}])
        assert text.split("\n")[1].split() == ["lb1", "-", "green"]


class TestSearch:
    def test_no_results(self):
        assert format_search_results({"cards": [], "boards": []}) == "No results found."

    def test_sections(self):
        result = {
            "cards": [{"id": "c1", "idShort": 1, "name": "Fix"}],
            "boards": [{"id": "b1", "name": "Roadmap", "shortUrl": "u", "closed": False}],
            "members": [],
        }
        text = format_search_results(result)
        assert text.startswith("Cards (1)\n")
        assert "\n\nBoards (1)\n" in text
        assert "Members" not in text
