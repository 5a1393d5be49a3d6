"""FastAPI routes for the Shelf domain."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request

from shelf.api.schemas import (
    ITEM_ID_MIN,
    AddItemOnShelfRequest,
    ShelfItemResponse,
    UpdateItemOnShelfRequest,
)
from shelf.errors import ItemNotFound
from shelf.item.dto import ShelfItemDto
from shelf.service import Shelf


def get_shelf(request: Request) -> Shelf:
    """The Shelf assembled at application startup."""
    return request.app.state.shelf


ShelfDep = Annotated[Shelf, Depends(get_shelf)]
ItemId = Annotated[int, Path(ge=ITEM_ID_MIN)]


def _to_response(dto: ShelfItemDto) -> ShelfItemResponse:
    return ShelfItemResponse(
        item_id=dto.item_id,
        item_name=dto.item_name,
        quantity=dto.quantity,
        version=dto.version,
        updated_at=dto.updated_at,
    )


# ---------------------------------------------------------------------------
# Shelf Router
# ---------------------------------------------------------------------------
shelf_router = APIRouter(prefix="/shelf", tags=["shelf"])


@shelf_router.get("", response_model=list[ShelfItemResponse])
async def fetch_available_items(shelf: ShelfDep) -> list[ShelfItemResponse]:
    return [_to_response(dto) for dto in shelf.queries.find_all_available()]


@shelf_router.get("/{item_id}", response_model=ShelfItemResponse)
async def fetch_item(item_id: ItemId, shelf: ShelfDep) -> ShelfItemResponse:
    dto = shelf.queries.find_by_item_id(item_id)
    if dto is None:
        raise ItemNotFound(item_id)
    return _to_response(dto)


@shelf_router.post("", status_code=201, response_model=ShelfItemResponse)
async def add_item(body: AddItemOnShelfRequest, shelf: ShelfDep) -> ShelfItemResponse:
    dto = shelf.service.create_item(
        item_id=body.item_id,
        item_name=body.item_name,
        quantity=body.quantity,
    )
    return _to_response(dto)


@shelf_router.put("/{item_id}", response_model=ShelfItemResponse)
async def update_item(item_id: ItemId, body: UpdateItemOnShelfRequest, shelf: ShelfDep) -> ShelfItemResponse:
    dto = shelf.service.adjust_item(
        item_id=item_id,
        direction=body.update_type.direction,
        amount=body.quantity,
    )
    return _to_response(dto)
