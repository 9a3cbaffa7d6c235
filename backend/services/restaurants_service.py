from typing import List

from errors import NotFoundError
from repositories import menu_items_repository, restaurants_repository
from schemas import (
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    RestauranteCreate,
    RestauranteResponse,
)
from services.menu_cache import menu_cache
from services.store_calls import call_store

RESTAURANT = "Restaurante"
MENU_ITEM = "Item del menú"


async def list_restaurants() -> List[RestauranteResponse]:
    rows = await call_store(
        "Error obteniendo restaurantes", restaurants_repository.fetch_restaurants
    )
    return [RestauranteResponse(**row) for row in rows]


async def create_restaurant(payload: RestauranteCreate) -> RestauranteResponse:
    row = await call_store(
        "Error creando restaurante",
        restaurants_repository.insert_restaurant,
        payload.model_dump(),
    )
    return RestauranteResponse(**row)


async def update_restaurant(
    restaurant_id: int, payload: RestauranteCreate
) -> RestauranteResponse:
    row = await call_store(
        "Error actualizando restaurante",
        restaurants_repository.update_restaurant,
        restaurant_id,
        payload.model_dump(),
    )
    if row is None:
        raise NotFoundError(RESTAURANT)
    menu_cache.invalidate(restaurant_id)
    return RestauranteResponse(**row)


async def delete_restaurant(restaurant_id: int) -> None:
    deleted = await call_store(
        "Error eliminando restaurante",
        restaurants_repository.delete_restaurant,
        restaurant_id,
    )
    if not deleted:
        raise NotFoundError(RESTAURANT)
    menu_cache.invalidate(restaurant_id)


async def get_menu(restaurant_id: int) -> List[MenuItemResponse]:
    cached = menu_cache.get(restaurant_id)
    if cached is not None:
        return cached
    version = menu_cache.version(restaurant_id)
    rows = await call_store("Error obteniendo menú", menu_items_repository.fetch_menu, restaurant_id)
    menu = [MenuItemResponse(**row) for row in rows]
    menu_cache.put(restaurant_id, menu, version)
    return menu


async def create_menu_item(payload: MenuItemCreate) -> MenuItemResponse:
    row = await call_store(
        "Error creando item del menú",
        menu_items_repository.insert_menu_item,
        payload.model_dump(),
    )
    menu_cache.invalidate(row["restaurante_id"])
    return MenuItemResponse(**row)


async def update_menu_item(item_id: int, payload: MenuItemUpdate) -> MenuItemResponse:
    row = await call_store(
        "Error actualizando item del menú",
        menu_items_repository.update_menu_item,
        item_id,
        payload.model_dump(),
    )
    if row is None:
        raise NotFoundError(MENU_ITEM)
    menu_cache.invalidate(row["restaurante_id"])
    return MenuItemResponse(**row)


async def delete_menu_item(item_id: int) -> None:
    row = await call_store(
        "Error eliminando item del menú",
        menu_items_repository.delete_menu_item,
        item_id,
    )
    if row is None:
        raise NotFoundError(MENU_ITEM)
    menu_cache.invalidate(row["restaurante_id"])
