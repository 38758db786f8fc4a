import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest

from store.exceptions import AddressNotFoundError, OrderTotalTooLargeError, ProductNotFoundError
from store.models import Order, OrderItem
from store.pricing import PricedLine, create_order, max_order_total, order_total, price_lines


def _product(price):
    return SimpleNamespace(id=uuid.uuid4(), price=Decimal(price))


def test_price_lines_snapshot_current_price():
    pizza, soda = _product("10.00"), _product("5.50")
    products = {pizza.id: pizza, soda.id: soda}

    lines = price_lines(
        [{"product_id": pizza.id, "quantity": 2}, {"product_id": soda.id, "quantity": 1}],
        products,
    )

    assert lines == [PricedLine(pizza.id, 2, Decimal("10.00")), PricedLine(soda.id, 1, Decimal("5.50"))]
    assert [line.line_total for line in lines] == [Decimal("20.00"), Decimal("5.50")]
    assert order_total(lines) == Decimal("25.50")


def test_price_lines_unknown_product():
    with pytest.raises(ProductNotFoundError):
        price_lines([{"product_id": uuid.uuid4(), "quantity": 1}], {})


def test_order_total_is_exact_decimal():
    lines = [PricedLine(uuid.uuid4(), 3, Decimal("0.10"))]
    assert order_total(lines) == Decimal("0.30")
    assert order_total([]) == Decimal("0.00")


@pytest.mark.django_db
def test_create_order_writes_order_and_items(user, address, make_product):
    pizza = make_product("Pizza", "10.00")

    order = create_order(user.id, address.id, [{"product_id": pizza.id, "quantity": 3}])

    assert order.status == Order.STATUS_PENDING
    assert order.total == Decimal("30.00")
    assert order.address == address
    item = order.items.get()
    assert (item.product_id, item.quantity, item.price) == (pizza.id, 3, Decimal("10.00"))


@pytest.mark.django_db
def test_create_order_unknown_address(user, make_product):
    pizza = make_product("Pizza", "10.00")
    with pytest.raises(AddressNotFoundError):
        create_order(user.id, uuid.uuid4(), [{"product_id": pizza.id, "quantity": 1}])
    assert not Order.objects.exists()


@pytest.mark.django_db
def test_create_order_unknown_product_writes_nothing(user, address, make_product):
    pizza = make_product("Pizza", "10.00")
    with pytest.raises(ProductNotFoundError):
        create_order(user.id, address.id, [
            {"product_id": pizza.id, "quantity": 1},
            {"product_id": uuid.uuid4(), "quantity": 1},
        ])
    assert not Order.objects.exists()
    assert not OrderItem.objects.exists()


@pytest.mark.django_db
def test_create_order_without_owner_restriction(make_user, address, make_product):
    admin = make_user(name="Admin Loja", email="admin@example.com", role="ADMIN")
    pizza = make_product("Pizza", "10.00")

    order = create_order(admin.id, address.id, [{"product_id": pizza.id, "quantity": 1}],
                         restrict_address_to_user=False)

    assert order.user_id == admin.id


def test_max_order_total_matches_total_column():
    assert max_order_total() == Decimal("9999999999.99")


@pytest.mark.django_db
def test_create_order_total_over_limit_writes_nothing(user, address, make_product):
    gold = make_product("Barra de ouro", "99999999.99")
    with pytest.raises(OrderTotalTooLargeError):
        create_order(user.id, address.id, [{"product_id": gold.id, "quantity": 101}])
    assert not Order.objects.exists()
    assert not OrderItem.objects.exists()
