"""JSON document-backed menu item repository."""

from dataclasses import dataclass

from cafeteria_voting.adapters.json_document_store import (
    JsonDocumentStore,
    new_id,
    parse_datetime,
    to_json_value,
    utc_now_iso,
)
from cafeteria_voting.domain.models import MenuItem
from cafeteria_voting.services.menu_items import MenuItemRepository

_FIELD_NAMES = {
    "name": "name",
    "description": "description",
    "category": "category",
    "image_url": "imageUrl",
    "available": "available",
}


@dataclass
class JsonMenuItemRepository(MenuItemRepository):
    """Stores menu items in the ``menuItems`` collection."""

    store: JsonDocumentStore

    def list_menu_items(self) -> list[MenuItem]:
        with self.store.read() as document:
            return [_to_menu_item(row) for row in document["menuItems"]]

    def get_menu_item(self, menu_item_id: str) -> MenuItem | None:
        with self.store.read() as document:
            for row in document["menuItems"]:
                if row.get("id") == menu_item_id:
                    return _to_menu_item(row)
        return None

    def create_menu_item(self, fields: dict[str, object]) -> MenuItem:
        """Append a menu item with a fresh id and timestamps."""
        now = utc_now_iso()
        row = {
            "available": True,
            **_to_row(fields),
            "id": new_id(),
            "createdAt": now,
            "updatedAt": now,
        }
        with self.store.transaction() as document:
            document["menuItems"].append(row)
        return _to_menu_item(row)

    def update_menu_item(
        self, menu_item_id: str, partial: dict[str, object]
    ) -> MenuItem | None:
        """Merge-patch a menu item, returning None when it does not exist."""
        patch = _to_row(partial)
        with self.store.transaction() as document:
            items = document["menuItems"]
            for index, row in enumerate(items):
                if row.get("id") == menu_item_id:
                    items[index] = {**row, **patch, "updatedAt": utc_now_iso()}
                    return _to_menu_item(items[index])
        return None

    def delete_menu_item(self, menu_item_id: str) -> bool:
        """Remove the menu item and every session link pointing at it."""
        with self.store.transaction() as document:
            before = len(document["menuItems"])
            document["menuItems"] = [
                row for row in document["menuItems"] if row.get("id") != menu_item_id
            ]
            document["sessionMenuItems"] = [
                row
                for row in document["sessionMenuItems"]
                if row.get("menuItemId") != menu_item_id
            ]
            return len(document["menuItems"]) != before


def _to_row(fields: dict[str, object]) -> dict[str, object]:
    return {
        _FIELD_NAMES[name]: to_json_value(value)
        for name, value in fields.items()
        if name in _FIELD_NAMES
    }


def _to_menu_item(row: dict[str, object]) -> MenuItem:
    return MenuItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        category=str(row.get("category", "")),
        available=bool(row.get("available", True)),
        image_url=row.get("imageUrl"),
        created_at=parse_datetime(row.get("createdAt")),
        updated_at=parse_datetime(row.get("updatedAt")),
    )
