from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class RestauranteCreate(BaseModel):
    nombre: str = Field(..., description="Display name of the restaurant")
    telefono: Optional[str] = None
    direccion: Optional[str] = None


class RestauranteResponse(BaseModel):
    id: int
    nombre: str
    telefono: Optional[str]
    direccion: Optional[str]


class MenuItemCreate(BaseModel):
    nombre: str
    precio: int = Field(..., ge=0, description="Unit price in minor currency units")
    restaurante_id: int


class MenuItemUpdate(BaseModel):
    nombre: str
    precio: int = Field(..., ge=0)


class MenuItemResponse(BaseModel):
    id: int
    nombre: str
    precio: int
    restaurante_id: int


class UsuarioPayload(BaseModel):
    # blank and missing names are both rejected with 400 by the service
    nombre: Optional[str] = None


class UsuarioResponse(BaseModel):
    id: int
    nombre: str


class MessageResponse(BaseModel):
    message: str


class PedidoItemInput(BaseModel):
    usuario_id: int = Field(..., description="Participant the item is attributed to")
    menu_item_id: int
    cantidad: int = Field(..., ge=1)
    subtotal: int = Field(..., ge=0, description="cantidad x unit price, as priced by the client")


class PedidoWrite(BaseModel):
    restaurante_id: int
    usuario_responsable_id: int
    valor_domicilio: int = Field(0, ge=0, description="Delivery fee shared by all participants")
    items: List[PedidoItemInput]


class PedidoItemView(BaseModel):
    id: int
    pedido_id: int
    usuario_id: int
    usuario_nombre: str
    menu_item_id: int
    item_nombre: str
    precio_unitario: int
    cantidad: int
    subtotal: int


class CostoUsuario(BaseModel):
    usuario_id: int
    usuario_nombre: str
    items: List[PedidoItemView]
    subtotal: int
    costo_domicilio: int
    total: int


class PedidoSummary(BaseModel):
    id: int
    restaurante_id: int
    usuario_responsable_id: int
    valor_domicilio: int
    total_pedido: int
    estado: str
    fecha_pedido: Optional[datetime]
    restaurante_nombre: str
    responsable_nombre: str


class PedidoView(PedidoSummary):
    items: List[PedidoItemView]
    costos_por_usuario: List[CostoUsuario]


class PedidoMetricas(BaseModel):
    total_pedidos: int
    ingresos_totales: int
    promedio_por_pedido: float
    pedidos_mas_costosos: List[PedidoSummary]
