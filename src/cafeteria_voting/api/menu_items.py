"""Menu item endpoints."""

from fastapi import APIRouter, Depends, Response, status

from cafeteria_voting.api.dependencies import get_container, require_staff
from cafeteria_voting.api.models import (
    MenuItemCreateRequest,
    MenuItemResponse,
    MenuItemUpdateRequest,
)
from cafeteria_voting.containers import AppContainer
from cafeteria_voting.domain.models import MenuItem

router = APIRouter(prefix="/api/menu-items", tags=["menu-items"])


@router.get("", response_model=list[MenuItemResponse])
def list_menu_items(
    container: AppContainer = Depends(get_container),
) -> list[MenuItem]:
    return container.menu_item_service.list_menu_items()


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
)
def create_menu_item(
    payload: MenuItemCreateRequest,
    container: AppContainer = Depends(get_container),
) -> MenuItem:
    """Create a menu item. Staff only."""
    return container.menu_item_service.create_menu_item(payload.model_dump())


@router.put(
    "/{menu_item_id}",
    response_model=MenuItemResponse,
    dependencies=[Depends(require_staff)],
)
def update_menu_item(
    menu_item_id: str,
    payload: MenuItemUpdateRequest,
    container: AppContainer = Depends(get_container),
) -> MenuItem:
    """Apply the fields present in the payload. Staff only."""
    return container.menu_item_service.update_menu_item(
        menu_item_id, payload.model_dump(exclude_unset=True)
    )


@router.delete("/{menu_item_id}", dependencies=[Depends(require_staff)])
def delete_menu_item(
    menu_item_id: str,
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete a menu item and drop it from every session. Staff only."""
    container.menu_item_service.delete_menu_item(menu_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
