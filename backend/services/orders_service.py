import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.engine import Connection

from config import settings
from database import transaction
from errors import NotFoundError, StoreError, ValidationError
from repositories import menu_items_repository, orders_repository
from schemas import (
    PedidoItemInput,
    PedidoItemView,
    PedidoMetricas,
    PedidoSummary,
    PedidoView,
    PedidoWrite,
)
from services import cost_allocation
from services.store_calls import call_store

logger = logging.getLogger("pedidos-api")

ORDER = "Pedido"


def load_order_complete(order_id: int) -> Optional[PedidoView]:
    """Order header, its line items and the per-participant breakdown.

    Returns ``None`` when the order does not exist. Line items carry the unit
    price captured when they were written, ordered by participant name and
    then item name.
    """
    header = orders_repository.fetch_order(order_id)
    if header is None:
        return None
    items = [PedidoItemView(**row) for row in orders_repository.fetch_order_items(order_id)]
    # rows written before carts were required to be non-empty have nothing to split
    costos = cost_allocation.allocate(items, header["valor_domicilio"]) if items else []
    return PedidoView(**header, items=items, costos_por_usuario=costos)


def _check_items(payload: PedidoWrite) -> None:
    if not payload.items:
        raise ValidationError("El pedido debe tener al menos un item")


def _priced_rows(
    conn: Connection, items: Sequence[PedidoItemInput]
) -> Tuple[List[Dict[str, Any]], int]:
    prices = menu_items_repository.fetch_prices(conn, (item.menu_item_id for item in items))
    rows: List[Dict[str, Any]] = []
    for item in items:
        precio = prices.get(item.menu_item_id)
        if precio is None:
            raise StoreError(f"menu item {item.menu_item_id} does not exist")
        rows.append(
            {
                "usuario_id": item.usuario_id,
                "menu_item_id": item.menu_item_id,
                "cantidad": item.cantidad,
                "precio_unitario": precio,
                "subtotal": cost_allocation.line_subtotal(
                    item.cantidad,
                    precio,
                    item.subtotal,
                    recompute=settings.recompute_line_subtotals,
                ),
            }
        )
    return rows, cost_allocation.food_subtotal([row["subtotal"] for row in rows])


def _header(payload: PedidoWrite, total_pedido: int) -> Dict[str, Any]:
    return {
        "restaurante_id": payload.restaurante_id,
        "usuario_responsable_id": payload.usuario_responsable_id,
        "valor_domicilio": payload.valor_domicilio,
        "total_pedido": total_pedido,
    }


def _create_order(payload: PedidoWrite) -> int:
    with transaction() as conn:
        rows, total_pedido = _priced_rows(conn, payload.items)
        order_id = orders_repository.insert_order(conn, _header(payload, total_pedido))
        orders_repository.insert_order_items(conn, order_id, rows)
    return order_id


def _replace_order(order_id: int, payload: PedidoWrite) -> None:
    with transaction() as conn:
        if not orders_repository.order_exists(conn, order_id):
            raise NotFoundError(ORDER)
        rows, total_pedido = _priced_rows(conn, payload.items)
        orders_repository.update_order(conn, order_id, _header(payload, total_pedido))
        orders_repository.delete_order_items(conn, order_id)
        orders_repository.insert_order_items(conn, order_id, rows)


def _delete_order(order_id: int) -> None:
    with transaction() as conn:
        orders_repository.delete_order_items(conn, order_id)
        if not orders_repository.delete_order(conn, order_id):
            raise NotFoundError(ORDER)


async def get_order(order_id: int) -> PedidoView:
    order = await call_store("Error obteniendo pedido", load_order_complete, order_id)
    if order is None:
        raise NotFoundError(ORDER)
    return order


async def list_orders() -> List[PedidoSummary]:
    rows = await call_store("Error obteniendo pedidos", orders_repository.fetch_orders)
    return [PedidoSummary(**row) for row in rows]


async def create_order(payload: PedidoWrite) -> PedidoView:
    _check_items(payload)
    order_id = await call_store("Error creando pedido", _create_order, payload)
    logger.info("Created order %s with %d items", order_id, len(payload.items))
    return await get_order(order_id)


async def replace_order(order_id: int, payload: PedidoWrite) -> PedidoView:
    _check_items(payload)
    await call_store("Error actualizando pedido", _replace_order, order_id, payload)
    logger.info("Replaced order %s with %d items", order_id, len(payload.items))
    return await get_order(order_id)


async def delete_order(order_id: int) -> None:
    await call_store("Error eliminando pedido", _delete_order, order_id)
    logger.info("Deleted order %s", order_id)


def _order_amount(order: PedidoSummary) -> int:
    return order.total_pedido + order.valor_domicilio


async def get_metrics(limit: Optional[int] = None) -> PedidoMetricas:
    orders = await list_orders()
    limit = settings.top_orders_limit if limit is None else limit
    ingresos = sum(_order_amount(order) for order in orders)
    promedio = ingresos / len(orders) if orders else 0.0
    top = sorted(orders, key=_order_amount, reverse=True)[:limit]
    return PedidoMetricas(
        total_pedidos=len(orders),
        ingresos_totales=ingresos,
        promedio_por_pedido=promedio,
        pedidos_mas_costosos=top,
    )
