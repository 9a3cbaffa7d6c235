from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection

from database import (
    menu_items,
    pedido_items,
    pedidos,
    read_connection,
    restaurantes,
    usuarios,
)


def _summary_query():
    return select(
        pedidos,
        restaurantes.c.nombre.label("restaurante_nombre"),
        usuarios.c.nombre.label("responsable_nombre"),
    ).select_from(
        pedidos.join(restaurantes, pedidos.c.restaurante_id == restaurantes.c.id).join(
            usuarios, pedidos.c.usuario_responsable_id == usuarios.c.id
        )
    )


def fetch_orders() -> List[Dict[str, Any]]:
    query = _summary_query().order_by(pedidos.c.fecha_pedido.desc(), pedidos.c.id.desc())
    with read_connection() as conn:
        return [dict(row) for row in conn.execute(query).mappings()]


def fetch_order(order_id: int) -> Optional[Dict[str, Any]]:
    query = _summary_query().where(pedidos.c.id == order_id)
    with read_connection() as conn:
        row = conn.execute(query).mappings().first()
    return dict(row) if row else None


def fetch_order_items(order_id: int) -> List[Dict[str, Any]]:
    query = (
        select(
            pedido_items,
            usuarios.c.nombre.label("usuario_nombre"),
            menu_items.c.nombre.label("item_nombre"),
        )
        .select_from(
            pedido_items.join(usuarios, pedido_items.c.usuario_id == usuarios.c.id).join(
                menu_items, pedido_items.c.menu_item_id == menu_items.c.id
            )
        )
        .where(pedido_items.c.pedido_id == order_id)
        .order_by(usuarios.c.nombre, menu_items.c.nombre, pedido_items.c.id)
    )
    with read_connection() as conn:
        return [dict(row) for row in conn.execute(query).mappings()]


def order_exists(conn: Connection, order_id: int) -> bool:
    query = select(pedidos.c.id).where(pedidos.c.id == order_id)
    return conn.execute(query).first() is not None


def insert_order(conn: Connection, record: Dict[str, Any]) -> int:
    statement = insert(pedidos).values(**record).returning(pedidos.c.id)
    return conn.execute(statement).scalar_one()


def update_order(conn: Connection, order_id: int, record: Dict[str, Any]) -> None:
    conn.execute(update(pedidos).where(pedidos.c.id == order_id).values(**record))


def insert_order_items(
    conn: Connection, order_id: int, rows: Sequence[Dict[str, Any]]
) -> None:
    for row in rows:
        conn.execute(insert(pedido_items).values(pedido_id=order_id, **row))


def delete_order_items(conn: Connection, order_id: int) -> None:
    conn.execute(delete(pedido_items).where(pedido_items.c.pedido_id == order_id))


def delete_order(conn: Connection, order_id: int) -> bool:
    statement = delete(pedidos).where(pedidos.c.id == order_id).returning(pedidos.c.id)
    return conn.execute(statement).first() is not None
