"""Menu item management."""

from dataclasses import dataclass
from typing import Protocol

from cafeteria_voting.domain.errors import NotFoundError
from cafeteria_voting.domain.models import MenuItem


class MenuItemRepository(Protocol):
    """Persistence interface for menu items."""

    def list_menu_items(self) -> list[MenuItem]:
        """Return all menu items in insertion order."""

    def get_menu_item(self, menu_item_id: str) -> MenuItem | None:
        """Return a menu item by id, if present."""

    def create_menu_item(self, fields: dict[str, object]) -> MenuItem:
        """Create a menu item and return it."""

    def update_menu_item(
        self, menu_item_id: str, partial: dict[str, object]
    ) -> MenuItem | None:
        """Merge-patch a menu item, returning None when it does not exist."""

    def delete_menu_item(self, menu_item_id: str) -> bool:
        """Delete a menu item and its session links."""


@dataclass
class MenuItemService:
    """Application service for the menu catalogue."""

    repository: MenuItemRepository

    def list_menu_items(self) -> list[MenuItem]:
        return self.repository.list_menu_items()

    def get_menu_item(self, menu_item_id: str) -> MenuItem:
        item = self.repository.get_menu_item(menu_item_id)
        if item is None:
            raise NotFoundError("Menu item not found")
        return item

    def create_menu_item(self, fields: dict[str, object]) -> MenuItem:
        return self.repository.create_menu_item(fields)

    def update_menu_item(
        self, menu_item_id: str, partial: dict[str, object]
    ) -> MenuItem:
        """Apply a partial update, raising NotFoundError for unknown ids."""
        item = self.repository.update_menu_item(menu_item_id, partial)
        if item is None:
            raise NotFoundError("Menu item not found")
        return item

    def delete_menu_item(self, menu_item_id: str) -> None:
        """Delete a menu item; deleting an unknown id is a no-op."""
        self.repository.delete_menu_item(menu_item_id)
