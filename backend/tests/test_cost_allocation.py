import pytest

from schemas import PedidoItemView
from services.cost_allocation import allocate, delivery_share, food_subtotal, line_subtotal


def _item(item_id, usuario_id, subtotal, nombre=None):
    return PedidoItemView(
        id=item_id,
        pedido_id=1,
        usuario_id=usuario_id,
        usuario_nombre=nombre or f"user-{usuario_id}",
        menu_item_id=item_id,
        item_nombre=f"item-{item_id}",
        precio_unitario=subtotal,
        cantidad=1,
        subtotal=subtotal,
    )


def test_two_participants_split_delivery_evenly():
    items = [_item(1, 1, 20000, "A"), _item(2, 2, 15000, "B")]

    breakdown = allocate(items, 5000)

    assert [(c.usuario_nombre, c.subtotal, c.costo_domicilio, c.total) for c in breakdown] == [
        ("A", 20000, 2500, 22500),
        ("B", 15000, 2500, 17500),
    ]


def test_delivery_share_rounds_up_and_keeps_surplus():
    items = [_item(1, 1, 100), _item(2, 2, 200), _item(3, 3, 300)]

    breakdown = allocate(items, 1000)

    assert [c.costo_domicilio for c in breakdown] == [334, 334, 334]
    assert sum(c.costo_domicilio for c in breakdown) == 1002


def test_items_grouped_in_first_seen_order():
    items = [_item(1, 7, 10), _item(2, 3, 20), _item(3, 7, 30), _item(4, 3, 40)]

    breakdown = allocate(items, 0)

    assert [c.usuario_id for c in breakdown] == [7, 3]
    assert [i.id for i in breakdown[0].items] == [1, 3]
    assert [i.id for i in breakdown[1].items] == [2, 4]
    assert [c.subtotal for c in breakdown] == [40, 60]


@pytest.mark.parametrize(
    "subtotals, users, fee",
    [
        ([5000], [1], 0),
        ([1200, 800, 3000, 50], [1, 2, 1, 3], 7),
        ([0, 0], [1, 2], 1),
        ([9999, 1, 2, 3, 4], [1, 2, 3, 4, 5], 4001),
    ],
)
def test_breakdown_properties(subtotals, users, fee):
    items = [_item(i, u, s) for i, (u, s) in enumerate(zip(users, subtotals), start=1)]
    n = len(set(users))

    breakdown = allocate(items, fee)

    assert sum(c.subtotal for c in breakdown) == sum(subtotals)
    assert 0 <= sum(c.costo_domicilio for c in breakdown) - fee <= n - 1
    for costo in breakdown:
        assert costo.costo_domicilio == -(-fee // n)
        assert costo.total == costo.subtotal + costo.costo_domicilio


def test_allocate_is_repeatable():
    items = [_item(1, 1, 300), _item(2, 2, 700), _item(3, 1, 5)]

    assert allocate(items, 999) == allocate(items, 999)


def test_allocate_rejects_empty_cart():
    with pytest.raises(ValueError):
        allocate([], 5000)


def test_delivery_share_needs_participants():
    assert delivery_share(0, 4) == 0
    assert delivery_share(10, 4) == 3
    with pytest.raises(ValueError):
        delivery_share(100, 0)


def test_line_subtotal_trusts_client_unless_recomputing():
    assert line_subtotal(2, 10000, 1) == 1
    assert line_subtotal(2, 10000, 1, recompute=True) == 20000
    assert food_subtotal([20000, 15000]) == 35000
