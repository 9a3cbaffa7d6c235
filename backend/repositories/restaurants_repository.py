from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from database import read_connection, restaurantes, transaction


def fetch_restaurants() -> List[Dict[str, Any]]:
    query = select(restaurantes).order_by(restaurantes.c.nombre, restaurantes.c.id)
    with read_connection() as conn:
        return [dict(row) for row in conn.execute(query).mappings()]


def insert_restaurant(record: Dict[str, Any]) -> Dict[str, Any]:
    statement = insert(restaurantes).values(**record).returning(restaurantes)
    with transaction() as conn:
        return dict(conn.execute(statement).mappings().one())


def update_restaurant(restaurant_id: int, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    statement = (
        update(restaurantes)
        .where(restaurantes.c.id == restaurant_id)
        .values(**record)
        .returning(restaurantes)
    )
    with transaction() as conn:
        row = conn.execute(statement).mappings().first()
    return dict(row) if row else None


def delete_restaurant(restaurant_id: int) -> bool:
    statement = (
        delete(restaurantes)
        .where(restaurantes.c.id == restaurant_id)
        .returning(restaurantes.c.id)
    )
    with transaction() as conn:
        return conn.execute(statement).first() is not None
