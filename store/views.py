# store/views.py — categorias, produtos e pedidos

import logging

from django.db import DatabaseError
from django.http import HttpResponse, JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .filters import OrderFilter, ProductFilter
from .helpers import bad_request, get_or_404, parse_id, save_unique, server_error
from .models import Category, Order, Product
from .permissions import IsAuthenticatedIdentity, OnlyAdmin
from .pricing import create_order
from .serializers import (
    CategoryBriefSerializer,
    CategorySerializer,
    OrderCreateSerializer,
    OrderReadSerializer,
    OrderStatusSerializer,
    ProductSerializer,
)

logger = logging.getLogger(__name__)


def ping(_request):
    return HttpResponse("pong", content_type="text/plain")


def health(_request):
    return JsonResponse({"status": "healthy", "service": "E-commerce API"})


# -------------------------------------------------
# Categorias
# -------------------------------------------------
DUPLICATE_CATEGORY = "Erro ao criar a categoria, categoria já existe."


@api_view(["POST"])
@permission_classes([AllowAny])
def category_create(request):
    ser = CategorySerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao criar a categoria, verifique os dados informados.", ser.errors)

    try:
        category = save_unique(ser, DUPLICATE_CATEGORY)
    except DatabaseError:
        return server_error("Erro ao criar uma categoria")

    return Response(
        {"message": "Categoria criada com sucesso", "category": CategorySerializer(category).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
@permission_classes([OnlyAdmin])
def category_list(request):
    try:
        data = CategoryBriefSerializer(Category.objects.order_by("-created_at"), many=True).data
    except DatabaseError:
        return server_error("Erro ao listar as categorias")
    return Response({"categories": data}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAuthenticatedIdentity])
def category_detail(request, pk: str):
    category_id = parse_id(pk)
    if category_id is None:
        return bad_request("Erro ao buscar a categoria, verifique os dados informados.")

    category = get_or_404(Category.objects.all(), category_id, "Categoria não encontrada")
    return Response({"category": CategorySerializer(category).data}, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([IsAuthenticatedIdentity])
def category_update(request, pk: str):
    category_id = parse_id(pk)
    ser = CategorySerializer(data=request.data)
    body_ok = ser.is_valid()
    if category_id is None or not body_ok:
        return bad_request("Erro ao atualizar a categoria, verifique os dados informados.", ser.errors)

    ser.instance = get_or_404(Category.objects.all(), category_id, "Categoria não encontrada")
    try:
        category = save_unique(ser, DUPLICATE_CATEGORY)
    except DatabaseError:
        return server_error("Erro ao atualizar uma categoria")

    return Response(
        {"message": "Categoria atualizada com sucesso", "category": CategorySerializer(category).data},
        status=status.HTTP_200_OK,
    )


@api_view(["DELETE"])
@permission_classes([IsAuthenticatedIdentity])
def category_delete(request, pk: str):
    category_id = parse_id(pk)
    if category_id is None:
        return bad_request("Erro ao deletar a categoria, verifique os dados informados.")

    category = get_or_404(Category.objects.all(), category_id, "Categoria não encontrada")
    try:
        category.delete()
    except DatabaseError:
        return server_error("Erro ao deletar uma categoria")

    return Response({"message": "Categoria deletada com sucesso"}, status=status.HTTP_200_OK)


# -------------------------------------------------
# Produtos
# -------------------------------------------------
DUPLICATE_PRODUCT = "Produto já existe"


def _products():
    return Product.objects.select_related("category").order_by("-created_at")


@api_view(["POST"])
@permission_classes([IsAuthenticatedIdentity])
def product_create(request):
    ser = ProductSerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao criar o produto, verifique os dados informados.", ser.errors)

    try:
        product = save_unique(ser, DUPLICATE_PRODUCT)
    except DatabaseError:
        return server_error("Erro ao criar um produto")

    logger.info(f"Produto {product.id} criado ({product.name})")
    return Response(
        {"message": "Produto criado com sucesso", "product": ProductSerializer(product).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
@permission_classes([IsAuthenticatedIdentity])
def product_list(request):
    filterset = ProductFilter(request.query_params, queryset=_products())
    if not filterset.is_valid():
        return bad_request("Erro ao listar produtos, filtro inválido.", filterset.errors)

    try:
        data = ProductSerializer(filterset.qs, many=True).data
    except DatabaseError:
        return server_error("Erro ao listar produtos")
    return Response({"products": data}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def product_detail(request, pk: str):
    product_id = parse_id(pk)
    if product_id is None:
        return bad_request("Erro ao buscar o produto, verifique os dados informados.")

    product = get_or_404(_products(), product_id, "Produto não encontrado")
    return Response({"product": ProductSerializer(product).data}, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([IsAuthenticatedIdentity])
def product_update(request, pk: str):
    product_id = parse_id(pk)
    ser = ProductSerializer(data=request.data)
    body_ok = ser.is_valid()
    if product_id is None or not body_ok:
        return bad_request("Erro ao editar um produto, verifique os dados informados.", ser.errors)

    ser.instance = get_or_404(Product.objects.all(), product_id, "Produto não encontrado")
    try:
        product = save_unique(ser, DUPLICATE_PRODUCT)
    except DatabaseError:
        return server_error("Erro ao atualizar um produto")

    return Response(
        {"message": "Produto atualizado com sucesso", "product": ProductSerializer(product).data},
        status=status.HTTP_200_OK,
    )


@api_view(["DELETE"])
@permission_classes([IsAuthenticatedIdentity])
def product_delete(request, pk: str):
    product_id = parse_id(pk)
    if product_id is None:
        return bad_request("Erro ao deletar um produto, verifique os dados informados.")

    product = get_or_404(Product.objects.all(), product_id, "Produto não encontrado")
    try:
        product.delete()
    except DatabaseError:
        return server_error("Erro ao deletar um produto")

    return Response({"message": "Produto deletado com sucesso"}, status=status.HTTP_200_OK)


# -------------------------------------------------
# Pedidos
# -------------------------------------------------
def _orders():
    return (
        Order.objects.select_related("address")
        .prefetch_related("items__product")
        .order_by("-created_at")
    )


@api_view(["POST"])
@permission_classes([IsAuthenticatedIdentity])
def order_create(request):
    """
    Body: { "address_id": "<uuid>", "items": [ { "product_id": "<uuid>", "quantity": 2 }, ... ] }
    Preço de cada item é copiado do produto neste momento; status inicial sempre PENDING.
    """
    ser = OrderCreateSerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao criar o pedido, verifique os dados informados.", ser.errors)

    try:
        order = create_order(
            user_id=request.user.sub,
            address_id=ser.validated_data["address_id"],
            items=ser.validated_data["items"],
            restrict_address_to_user=not request.user.is_admin,
        )
    except DatabaseError:
        return server_error("Erro ao criar uma nova ordem, por favor tente novamente!")

    return Response(OrderReadSerializer(order).data, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([IsAuthenticatedIdentity])
def order_list(request):
    try:
        data = OrderReadSerializer(_orders().filter(user_id=request.user.sub), many=True).data
    except DatabaseError:
        return server_error("Erro ao listar os pedidos, por favor tente novamente!")
    return Response(data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([OnlyAdmin])
def order_list_all(request):
    filterset = OrderFilter(request.query_params, queryset=_orders())
    if not filterset.is_valid():
        return bad_request("Erro ao listar os pedidos, filtro inválido.", filterset.errors)

    try:
        data = OrderReadSerializer(filterset.qs, many=True).data
    except DatabaseError:
        return server_error("Erro ao listar os pedidos, por favor tente novamente!")
    return Response(data, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([OnlyAdmin])
def order_update_status(request, pk: str):
    """Qualquer status pode ir para qualquer outro (sem grafo de transição)."""
    order_id = parse_id(pk)
    ser = OrderStatusSerializer(data=request.data)
    body_ok = ser.is_valid()
    if order_id is None or not body_ok:
        return bad_request("Erro ao atualizar o pedido, verifique os dados informados.", ser.errors)

    order = get_or_404(_orders(), order_id, "Pedido não encontrado")
    try:
        previous = order.status
        order.status = ser.validated_data["status"]
        order.save(update_fields=["status", "updated_at"])
    except DatabaseError:
        return server_error("Erro ao atualizar o pedido, por favor tente novamente!")

    logger.info(f"Pedido {order.id}: {previous} -> {order.status}")
    return Response(OrderReadSerializer(order).data, status=status.HTTP_200_OK)
