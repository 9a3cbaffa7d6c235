from typing import List, Optional

from fastapi import APIRouter, Query

from config import settings
from schemas import MessageResponse, PedidoMetricas, PedidoSummary, PedidoView, PedidoWrite
from services import orders_service

router = APIRouter(prefix=f"{settings.api_prefix}/pedidos", tags=["pedidos"])


@router.get("", response_model=List[PedidoSummary])
async def list_orders() -> List[PedidoSummary]:
    return await orders_service.list_orders()


@router.get("/metricas", response_model=PedidoMetricas)
async def read_metrics(limit: Optional[int] = Query(default=None, ge=1)) -> PedidoMetricas:
    return await orders_service.get_metrics(limit)


@router.get("/{order_id}", response_model=PedidoView)
async def read_order(order_id: int) -> PedidoView:
    return await orders_service.get_order(order_id)


@router.post("", response_model=PedidoView)
async def create_order(payload: PedidoWrite) -> PedidoView:
    return await orders_service.create_order(payload)


@router.put("/{order_id}", response_model=PedidoView)
async def replace_order(order_id: int, payload: PedidoWrite) -> PedidoView:
    return await orders_service.replace_order(order_id, payload)


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(order_id: int) -> MessageResponse:
    await orders_service.delete_order(order_id)
    return MessageResponse(message="Pedido eliminado exitosamente")
