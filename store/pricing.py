"""
Criação de pedido com snapshot de preço.

Fluxo: busca única dos produtos pelos ids distintos, rejeita o pedido inteiro se
algum não existir, copia o preço atual de cada produto para o item e grava
pedido + itens numa única transação. O total é calculado aqui, uma vez, e nunca
recalculado a partir do preço corrente dos produtos.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS, transaction

from .exceptions import AddressNotFoundError, OrderTotalTooLargeError, ProductNotFoundError
from .models import Address, Order, OrderItem, Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricedLine:
    product_id: UUID
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


def price_lines(items: Iterable[Mapping], products: Mapping[UUID, Product]) -> List[PricedLine]:
    """Monta as linhas com o preço atual de cada produto (items: [{product_id, quantity}])."""
    lines = []
    for item in items:
        product = products.get(item["product_id"])
        if product is None:
            raise ProductNotFoundError()
        lines.append(PricedLine(product.id, int(item["quantity"]), product.price))
    return lines


def order_total(lines: Iterable[PricedLine]) -> Decimal:
    return sum((line.line_total for line in lines), Decimal("0.00"))


def max_order_total() -> Decimal:
    """Maior total que cabe em Order.total (max_digits / decimal_places)."""
    field = Order._meta.get_field("total")
    places = Decimal(1).scaleb(-field.decimal_places)
    return Decimal(10) ** (field.max_digits - field.decimal_places) - places


def create_order(user_id, address_id, items: List[Mapping], using: str = DEFAULT_DB_ALIAS,
                 restrict_address_to_user: bool = True) -> Order:
    """
    Cria o pedido do usuário com os itens informados (já validados).

    Levanta ProductNotFoundError se qualquer produto não existir,
    AddressNotFoundError se o endereço não existir (ou não for do usuário) e
    OrderTotalTooLargeError se o total não couber em Order.total;
    nesses casos nada é gravado.
    """
    addresses = Address.objects.using(using).filter(pk=address_id)
    if restrict_address_to_user:
        addresses = addresses.filter(user_id=user_id)
    address = addresses.first()
    if address is None:
        raise AddressNotFoundError()

    requested_ids = {item["product_id"] for item in items}
    products: Dict[UUID, Product] = {
        p.id: p for p in Product.objects.using(using).filter(id__in=requested_ids)
    }
    if len(products) != len(requested_ids):
        missing = requested_ids - set(products)
        logger.info(f"Pedido rejeitado, produtos inexistentes: {sorted(str(pid) for pid in missing)}")
        raise ProductNotFoundError()

    lines = price_lines(items, products)
    total = order_total(lines)
    if total > max_order_total():
        logger.info(f"Pedido rejeitado, total {total} acima do limite")
        raise OrderTotalTooLargeError()

    with transaction.atomic(using=using):
        order = Order.objects.using(using).create(
            user_id=user_id,
            address=address,
            status=Order.STATUS_PENDING,
            total=total,
        )
        OrderItem.objects.using(using).bulk_create([
            OrderItem(order=order, product_id=line.product_id, quantity=line.quantity, price=line.price)
            for line in lines
        ])

    logger.info(f"Pedido {order.id} criado: {len(lines)} itens, total {total}")
    return (
        Order.objects.using(using)
        .select_related("address")
        .prefetch_related("items__product")
        .get(pk=order.pk)
    )
