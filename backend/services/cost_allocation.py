"""Split an order's cost among the participants that appear in it.

Food cost is attributed per participant from their own line items. The
delivery fee is shared evenly and each share is rounded up to a whole minor
unit, so the shares together may exceed the fee by at most ``n - 1`` units
for ``n`` participants. That surplus is kept as is.
"""

from typing import Dict, List, Sequence

from schemas import CostoUsuario, PedidoItemView


def delivery_share(valor_domicilio: int, participants: int) -> int:
    if participants <= 0:
        raise ValueError("delivery fee needs at least one participant")
    return -(-valor_domicilio // participants)


def line_subtotal(
    cantidad: int, precio_unitario: int, supplied: int, recompute: bool = False
) -> int:
    """Subtotal persisted for one line item.

    The client-priced value is trusted unless ``recompute`` is set, in which
    case it is derived from the unit price captured at write time.
    """
    if recompute:
        return cantidad * precio_unitario
    return supplied


def food_subtotal(subtotals: Sequence[int]) -> int:
    return sum(subtotals)


def allocate(items: Sequence[PedidoItemView], valor_domicilio: int) -> List[CostoUsuario]:
    if not items:
        raise ValueError("cannot allocate an order without items")

    groups: Dict[int, List[PedidoItemView]] = {}
    for item in items:
        groups.setdefault(item.usuario_id, []).append(item)

    share = delivery_share(valor_domicilio, len(groups))
    breakdown: List[CostoUsuario] = []
    for usuario_id, group in groups.items():
        subtotal = sum(item.subtotal for item in group)
        breakdown.append(
            CostoUsuario(
                usuario_id=usuario_id,
                usuario_nombre=group[0].usuario_nombre,
                items=list(group),
                subtotal=subtotal,
                costo_domicilio=share,
                total=subtotal + share,
            )
        )
    return breakdown
