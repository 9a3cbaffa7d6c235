from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection

from database import menu_items, read_connection, transaction


def fetch_menu(restaurant_id: int) -> List[Dict[str, Any]]:
    query = (
        select(menu_items)
        .where(menu_items.c.restaurante_id == restaurant_id)
        .order_by(menu_items.c.precio, menu_items.c.nombre, menu_items.c.id)
    )
    with read_connection() as conn:
        return [dict(row) for row in conn.execute(query).mappings()]


def insert_menu_item(record: Dict[str, Any]) -> Dict[str, Any]:
    statement = insert(menu_items).values(**record).returning(menu_items)
    with transaction() as conn:
        return dict(conn.execute(statement).mappings().one())


def update_menu_item(item_id: int, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    statement = (
        update(menu_items)
        .where(menu_items.c.id == item_id)
        .values(**record)
        .returning(menu_items)
    )
    with transaction() as conn:
        row = conn.execute(statement).mappings().first()
    return dict(row) if row else None


def delete_menu_item(item_id: int) -> Optional[Dict[str, Any]]:
    statement = delete(menu_items).where(menu_items.c.id == item_id).returning(menu_items)
    with transaction() as conn:
        row = conn.execute(statement).mappings().first()
    return dict(row) if row else None


def fetch_prices(conn: Connection, item_ids: Iterable[int]) -> Dict[int, int]:
    """Current unit price per menu item id, read on the caller's transaction."""
    ids = sorted(set(item_ids))
    if not ids:
        return {}
    query = select(menu_items.c.id, menu_items.c.precio).where(menu_items.c.id.in_(ids))
    return {row.id: row.precio for row in conn.execute(query)}
