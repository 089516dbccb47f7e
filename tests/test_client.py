"""Tests for client.py: TrelloClient verb/path/param assembly and payload shapes."""

from unittest.mock import MagicMock

import pytest

from trello_cli.api import CLEAR
from trello_cli.client import TrelloClient
from trello_cli.exceptions import DecodeError


@pytest.fixture
def client():
    """TrelloClient whose ApiClient.execute is a mock returning b'{}'."""
    c = TrelloClient("k", "t")
    c.api.execute = MagicMock(return_value=b"{}")
    return c


def _call(client):
    """(method, path, params) of the single execute() call."""
    args = client.api.execute.call_args.args
    return args[0], args[1], args[2] if len(args) > 2 else None


class TestBoards:
    def test_get_board(self, client):
        client.api.execute.return_value = b'{"id": "b1", "name": "Roadmap"}'
        assert client.get_board("b1") == {"id": "b1", "name": "Roadmap"}
        assert _call(client) == ("GET", "/boards/b1", {})

    def test_list_my_boards_filter(self, client):
        client.api.execute.return_value = b"[]"
        assert client.list_my_boards("open") == []
        assert _call(client) == ("GET", "/members/me/boards", {"filter": "open"})

    def test_list_my_boards_without_filter(self, client):
        client.api.execute.return_value = b"[]"
        client.list_my_boards()
        assert _call(client) == ("GET", "/members/me/boards", {})

    def test_create_board(self, client):
        client.create_board("Roadmap", desc="Q3", id_organization="o1")
        assert _call(client) == (
            "POST",
            "/boards",
            {"name": "Roadmap", "desc": "Q3", "idOrganization": "o1"},
        )

    def test_create_board_omits_empty_fields(self, client):
        client.create_board("Roadmap", desc="")
        assert _call(client) == ("POST", "/boards", {"name": "Roadmap"})

    def test_update_board(self, client):
        client.update_board("b1", {"closed": True, "name": None})
        assert _call(client) == ("PUT", "/boards/b1", {"closed": "true"})

    def test_delete_board(self, client):
        assert client.delete_board("b1") is None
        client.api.execute.assert_called_once_with("DELETE", "/boards/b1", None)

    def test_board_lists_must_be_array(self, client):
        client.api.execute.return_value = b'{"id": "x"}'
        with pytest.raises(DecodeError):
            client.list_board_lists("b1")

    def test_board_members_and_labels(self, client):
        client.api.execute.return_value = b'[{"id": "m1"}]'
        assert client.list_board_members("b1") == [{"id": "m1"}]
        assert _call(client)[1] == "/boards/b1/members"
        client.list_board_labels("b1")
        assert _call(client)[1] == "/boards/b1/labels"


class TestLists:
    def test_create_list(self, client):
        client.create_list("Doing", "b1", pos="top")
        assert _call(client) == ("POST", "/lists", {"name": "Doing", "idBoard": "b1", "pos": "top"})

    def test_archive_and_unarchive(self, client):
        client.archive_list("l1")
        assert _call(client) == ("PUT", "/lists/l1/closed", {"value": "true"})
        client.archive_list("l1", False)
        assert _call(client) == ("PUT", "/lists/l1/closed", {"value": "false"})

    def test_list_cards(self, client):
        client.api.execute.return_value = b"[]"
        client.list_list_cards("l1", "all")
        assert _call(client) == ("GET", "/lists/l1/cards", {"filter": "all"})


class TestCards:
    def test_create_card_params_override_fixed_fields(self, client):
        client.create_card("l1", "Fix bug", desc="d", params={"due": "2026-03-01", "name": "X"})
        method, path, params = _call(client)
        assert (method, path) == ("POST", "/cards")
        assert params == {"idList": "l1", "name": "X", "desc": "d", "due": "2026-03-01"}

    def test_create_card_labels_joined(self, client):
        client.create_card("l1", "Fix bug", params={"idLabels": ["a", "b"]})
        assert _call(client)[2]["idLabels"] == "a,b"

    def test_update_card_clear_due(self, client):
        client.update_card("c1", {"due": CLEAR, "name": ""})
        assert _call(client) == ("PUT", "/cards/c1", {"due": ""})

    def test_move_card(self, client):
        client.move_card("c1", "l2")
        assert _call(client) == ("PUT", "/cards/c1", {"idList": "l2"})
        client.move_card("c1", "l2", "b2")
        assert _call(client)[2] == {"idList": "l2", "idBoard": "b2"}

    def test_archive_card(self, client):
        client.archive_card("c1")
        assert _call(client) == ("PUT", "/cards/c1", {"closed": "true"})

    def test_add_comment(self, client):
        client.add_comment("c1", "hello")
        assert _call(client) == ("POST", "/cards/c1/actions/comments", {"text": "hello"})

    def test_label_add_remove(self, client):
        client.add_label_to_card("c1", "lb1")
        assert _call(client) == ("POST", "/cards/c1/idLabels", {"value": "lb1"})
        client.remove_label_from_card("c1", "lb1")
        assert _call(client)[:2] == ("DELETE", "/cards/c1/idLabels/lb1")

    def test_member_add_remove(self, client):
        client.add_member_to_card("c1", "m1")
        assert _call(client) == ("POST", "/cards/c1/idMembers", {"value": "m1"})
        client.remove_member_from_card("c1", "m1")
        assert _call(client)[:2] == ("DELETE", "/cards/c1/idMembers/m1")

    def test_card_collections(self, client):
        client.api.execute.return_value = b"[]"
        client.list_card_checklists("c1")
        assert _call(client)[1] == "/cards/c1/checklists"
        client.list_card_attachments("c1")
        assert _call(client)[1] == "/cards/c1/attachments"

    def test_path_segments_are_quoted(self, client):
        client.get_card("a/b")
        assert _call(client)[1] == "/cards/a%2Fb"


class TestMembers:
    def test_defaults_to_me(self, client):
        client.get_member()
        assert _call(client)[1] == "/members/me"

    def test_member_collections(self, client):
        client.api.execute.return_value = b"[]"
        client.list_member_boards("alice", "open")
        assert _call(client) == ("GET", "/members/alice/boards", {"filter": "open"})
        client.list_member_cards()
        assert _call(client)[1] == "/members/me/cards"
        client.list_member_organizations()
        assert _call(client)[1] == "/members/me/organizations"


class TestChecklistsAndLabels:
    def test_create_checklist(self, client):
        client.create_checklist("c1", "QA")
        assert _call(client) == ("POST", "/checklists", {"idCard": "c1", "name": "QA"})

    def test_create_check_item(self, client):
        client.create_check_item("cl1", "Write tests")
        assert _call(client) == ("POST", "/checklists/cl1/checkItems", {"name": "Write tests"})

    def test_update_check_item(self, client):
        client.update_check_item("c1", "cl1", "i1", "complete")
        assert _call(client) == (
            "PUT",
            "/cards/c1/checklist/cl1/checkItem/i1",
            {"state": "complete", "idChecklist": "cl1"},
        )

    def test_create_label_without_color(self, client):
        client.create_label("b1", "bug")
        assert _call(client) == ("POST", "/labels", {"idBoard": "b1", "name": "bug"})

    def test_delete_label(self, client):
        client.delete_label("lb1")
        client.api.execute.assert_called_once_with("DELETE", "/labels/lb1", None)


class TestSearch:
    def test_defaults_to_all_types(self, client):
        client.search("bug")
        method, path, params = _call(client)
        assert (method, path) == ("GET", "/search")
        assert params["query"] == "bug"
        assert params["modelTypes"] == "all"
        assert "cards_limit" not in params
        assert "card_fields" in params
        assert "board_fields" in params

    def test_types_and_limit(self, client):
        client.search("bug", ["cards", "boards"], 5)
        params = _call(client)[2]
        assert params["modelTypes"] == "cards,boards"
        assert params["cards_limit"] == "5"
        assert params["boards_limit"] == "5"
        assert params["members_limit"] == "5"

    def test_result_must_be_object(self, client):
        client.api.execute.return_value = b"[]"
        with pytest.raises(DecodeError):
            client.search("bug")
