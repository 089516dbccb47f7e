"""
TrelloClient: public Python API for Trello boards, lists, and cards.

Single entry point for programmatic use and for the command layer.
Every method is a thin call-through to ApiClient.execute: it fixes the verb
and path, assembles parameters with merge_params, and decodes the payload
into the expected shape. Methods return plain dicts/lists suitable for JSON
serialization and raise TransportError/ApiError/DecodeError on failure.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from trello_cli.api import ApiClient, decode_json, merge_params

_SEARCH_CARD_FIELDS = "id,name,idBoard,idList,shortUrl,labels,due,dueComplete"
_SEARCH_BOARD_FIELDS = "id,name,shortUrl,closed"


def _seg(value):
    """Quote one path segment (IDs, usernames)."""
    return quote(str(value), safe="")


class TrelloClient:
    """Typed resource operations over one authenticated ApiClient."""

    def __init__(self, api_key: str, api_token: str):
        self.api = ApiClient(api_key, api_token)

    # -------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------

    def _object(self, method, path, params=None, operation=""):
        raw = self.api.execute(method, path, params)
        result: dict[str, Any] = decode_json(raw, dict, operation or path)
        return result

    def _array(self, path, params=None, operation=""):
        raw = self.api.execute("GET", path, params)
        result: list[dict[str, Any]] = decode_json(raw, list, operation or path)
        return result

    def _filtered(self, path, filter, operation):
        return self._array(path, merge_params({"filter": filter}), operation)

    # -------------------------------------------------------------------
    # Boards
    # -------------------------------------------------------------------

    def get_board(self, board_id: str, params: dict | None = None) -> dict[str, Any]:
        return self._object("GET", f"/boards/{_seg(board_id)}", merge_params(params), "board")

    def list_my_boards(self, filter: str | None = None) -> list[dict[str, Any]]:
        """Boards of the authenticated member."""
        return self._filtered("/members/me/boards", filter, "boards")

    def create_board(
        self,
        name: str,
        *,
        desc: str | None = None,
        id_organization: str | None = None,
        prefs: dict | None = None,
    ) -> dict[str, Any]:
        params = merge_params(
            {"name": name},
            {"desc": desc, "idOrganization": id_organization},
            prefs,
        )
        return self._object("POST", "/boards", params, "board")

    def update_board(self, board_id: str, params: dict) -> dict[str, Any]:
        return self._object("PUT", f"/boards/{_seg(board_id)}", merge_params(params), "board")

    def delete_board(self, board_id: str) -> None:
        self.api.delete(f"/boards/{_seg(board_id)}")

    def list_board_lists(self, board_id: str, filter: str | None = None) -> list[dict[str, Any]]:
        return self._filtered(f"/boards/{_seg(board_id)}/lists", filter, "lists")

    def list_board_cards(self, board_id: str, filter: str | None = None) -> list[dict[str, Any]]:
        return self._filtered(f"/boards/{_seg(board_id)}/cards", filter, "cards")

    def list_board_members(self, board_id: str) -> list[dict[str, Any]]:
        return self._array(f"/boards/{_seg(board_id)}/members", operation="members")

    def list_board_labels(self, board_id: str) -> list[dict[str, Any]]:
        return self._array(f"/boards/{_seg(board_id)}/labels", operation="labels")

    # -------------------------------------------------------------------
    # Lists
    # -------------------------------------------------------------------

    def get_list(self, list_id: str) -> dict[str, Any]:
        return self._object("GET", f"/lists/{_seg(list_id)}", operation="list")

    def create_list(self, name: str, board_id: str, *, pos: str | None = None) -> dict[str, Any]:
        params = merge_params({"name": name, "idBoard": board_id}, {"pos": pos})
        return self._object("POST", "/lists", params, "list")

    def update_list(self, list_id: str, params: dict) -> dict[str, Any]:
        return self._object("PUT", f"/lists/{_seg(list_id)}", merge_params(params), "list")

    def archive_list(self, list_id: str, archive: bool = True) -> dict[str, Any]:
        params = merge_params({"value": archive})
        return self._object("PUT", f"/lists/{_seg(list_id)}/closed", params, "list")

    def list_list_cards(self, list_id: str, filter: str | None = None) -> list[dict[str, Any]]:
        return self._filtered(f"/lists/{_seg(list_id)}/cards", filter, "cards")

    # -------------------------------------------------------------------
    # Cards
    # -------------------------------------------------------------------

    def get_card(self, card_id: str, params: dict | None = None) -> dict[str, Any]:
        return self._object("GET", f"/cards/{_seg(card_id)}", merge_params(params), "card")

    def create_card(
        self,
        list_id: str,
        name: str,
        *,
        desc: str | None = None,
        params: dict | None = None,
    ) -> dict[str, Any]:
        """Create a card. *params* (due, pos, idLabels, ...) override the
        fixed fields on key collision."""
        merged = merge_params({"idList": list_id, "name": name}, {"desc": desc}, params)
        return self._object("POST", "/cards", merged, "card")

    def update_card(self, card_id: str, params: dict) -> dict[str, Any]:
        return self._object("PUT", f"/cards/{_seg(card_id)}", merge_params(params), "card")

    def delete_card(self, card_id: str) -> None:
        self.api.delete(f"/cards/{_seg(card_id)}")

    def move_card(self, card_id: str, list_id: str, board_id: str | None = None) -> dict[str, Any]:
        return self.update_card(card_id, {"idList": list_id, "idBoard": board_id})

    def archive_card(self, card_id: str) -> dict[str, Any]:
        return self.update_card(card_id, {"closed": True})

    def list_card_checklists(self, card_id: str) -> list[dict[str, Any]]:
        return self._array(f"/cards/{_seg(card_id)}/checklists", operation="checklists")

    def list_card_attachments(self, card_id: str) -> list[dict[str, Any]]:
        return self._array(f"/cards/{_seg(card_id)}/attachments", operation="attachments")

    def add_comment(self, card_id: str, text: str) -> dict[str, Any]:
        path = f"/cards/{_seg(card_id)}/actions/comments"
        return self._object("POST", path, merge_params({"text": text}), "comment")

    def add_label_to_card(self, card_id: str, label_id: str) -> None:
        self.api.post(f"/cards/{_seg(card_id)}/idLabels", merge_params({"value": label_id}))

    def remove_label_from_card(self, card_id: str, label_id: str) -> None:
        self.api.delete(f"/cards/{_seg(card_id)}/idLabels/{_seg(label_id)}")

    def add_member_to_card(self, card_id: str, member_id: str) -> None:
        self.api.post(f"/cards/{_seg(card_id)}/idMembers", merge_params({"value": member_id}))

    def remove_member_from_card(self, card_id: str, member_id: str) -> None:
        self.api.delete(f"/cards/{_seg(card_id)}/idMembers/{_seg(member_id)}")

    # -------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------

    def get_member(self, id_or_username: str = "me", params: dict | None = None) -> dict[str, Any]:
        """Member by ID or username ("me" for the authenticated member)."""
        path = f"/members/{_seg(id_or_username)}"
        return self._object("GET", path, merge_params(params), "member")

    def list_member_boards(
        self, id_or_username: str = "me", filter: str | None = None
    ) -> list[dict[str, Any]]:
        return self._filtered(f"/members/{_seg(id_or_username)}/boards", filter, "boards")

    def list_member_cards(
        self, id_or_username: str = "me", filter: str | None = None
    ) -> list[dict[str, Any]]:
        return self._filtered(f"/members/{_seg(id_or_username)}/cards", filter, "cards")

    def list_member_organizations(self, id_or_username: str = "me") -> list[dict[str, Any]]:
        path = f"/members/{_seg(id_or_username)}/organizations"
        return self._array(path, operation="organizations")

    # -------------------------------------------------------------------
    # Checklists
    # -------------------------------------------------------------------

    def get_checklist(self, checklist_id: str) -> dict[str, Any]:
        return self._object("GET", f"/checklists/{_seg(checklist_id)}", operation="checklist")

    def create_checklist(self, card_id: str, name: str) -> dict[str, Any]:
        params = merge_params({"idCard": card_id, "name": name})
        return self._object("POST", "/checklists", params, "checklist")

    def delete_checklist(self, checklist_id: str) -> None:
        self.api.delete(f"/checklists/{_seg(checklist_id)}")

    def create_check_item(self, checklist_id: str, name: str) -> dict[str, Any]:
        path = f"/checklists/{_seg(checklist_id)}/checkItems"
        return self._object("POST", path, merge_params({"name": name}), "check item")

    def update_check_item(
        self, card_id: str, checklist_id: str, check_item_id: str, state: str
    ) -> dict[str, Any]:
        """Set a check item's state ("complete" or "incomplete")."""
        path = (
            f"/cards/{_seg(card_id)}/checklist/{_seg(checklist_id)}"
            f"/checkItem/{_seg(check_item_id)}"
        )
        params = merge_params({"state": state, "idChecklist": checklist_id})
        return self._object("PUT", path, params, "check item")

    # -------------------------------------------------------------------
    # Labels
    # -------------------------------------------------------------------

    def get_label(self, label_id: str) -> dict[str, Any]:
        return self._object("GET", f"/labels/{_seg(label_id)}", operation="label")

    def create_label(self, board_id: str, name: str, color: str | None = None) -> dict[str, Any]:
        params = merge_params({"idBoard": board_id, "name": name, "color": color})
        return self._object("POST", "/labels", params, "label")

    def delete_label(self, label_id: str) -> None:
        self.api.delete(f"/labels/{_seg(label_id)}")

    # -------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------

    def search(
        self, query: str, model_types: list[str] | None = None, limit: int = 0
    ) -> dict[str, Any]:
        """Search cards, boards and members.

        Returns the raw search result: {"cards": [...], "boards": [...],
        "members": [...], "options": {...}}.
        """
        limits = {}
        if limit > 0:
            limits = {"cards_limit": limit, "boards_limit": limit, "members_limit": limit}
        params = merge_params(
            {"query": query, "modelTypes": list(model_types or []) or "all"},
            limits,
            {"card_fields": _SEARCH_CARD_FIELDS, "board_fields": _SEARCH_BOARD_FIELDS},
        )
        return self._object("GET", "/search", params, "search")
