from typing import List

from fastapi import APIRouter

from config import settings
from schemas import (
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    MessageResponse,
    RestauranteCreate,
    RestauranteResponse,
)
from services import restaurants_service

router = APIRouter(prefix=settings.api_prefix, tags=["restaurantes"])


@router.get("/restaurantes", response_model=List[RestauranteResponse])
async def list_restaurants() -> List[RestauranteResponse]:
    return await restaurants_service.list_restaurants()


@router.get("/restaurantes/{restaurant_id}/menu", response_model=List[MenuItemResponse])
async def read_menu(restaurant_id: int) -> List[MenuItemResponse]:
    return await restaurants_service.get_menu(restaurant_id)


@router.post("/restaurantes", response_model=RestauranteResponse)
async def create_restaurant(payload: RestauranteCreate) -> RestauranteResponse:
    return await restaurants_service.create_restaurant(payload)


@router.put("/restaurantes/{restaurant_id}", response_model=RestauranteResponse)
async def update_restaurant(
    restaurant_id: int, payload: RestauranteCreate
) -> RestauranteResponse:
    return await restaurants_service.update_restaurant(restaurant_id, payload)


@router.delete("/restaurantes/{restaurant_id}", response_model=MessageResponse)
async def delete_restaurant(restaurant_id: int) -> MessageResponse:
    await restaurants_service.delete_restaurant(restaurant_id)
    return MessageResponse(message="Restaurante eliminado exitosamente")


@router.post("/menu-items", response_model=MenuItemResponse)
async def create_menu_item(payload: MenuItemCreate) -> MenuItemResponse:
    return await restaurants_service.create_menu_item(payload)


@router.put("/menu-items/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(item_id: int, payload: MenuItemUpdate) -> MenuItemResponse:
    return await restaurants_service.update_menu_item(item_id, payload)


@router.delete("/menu-items/{item_id}", response_model=MessageResponse)
async def delete_menu_item(item_id: int) -> MessageResponse:
    await restaurants_service.delete_menu_item(item_id)
    return MessageResponse(message="Item del menú eliminado exitosamente")
