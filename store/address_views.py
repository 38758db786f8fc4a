# store/address_views.py — catálogo de endereços do usuário autenticado
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .helpers import bad_request, get_or_404, parse_id, server_error
from .models import Address
from .permissions import IsAuthenticatedIdentity, OnlyAdmin
from .serializers import AddressSerializer

logger = logging.getLogger(__name__)


def _visible_addresses(request):
    """Admin enxerga todos; os demais só os próprios."""
    qs = Address.objects.select_related("user").order_by("-created_at")
    if request.user.is_admin:
        return qs
    return qs.filter(user_id=request.user.sub)


@api_view(["GET", "POST"])
@permission_classes([IsAuthenticatedIdentity])
def address_collection(request):
    if request.method == "POST":
        return _address_create(request)

    try:
        data = AddressSerializer(
            Address.objects.select_related("user").filter(user_id=request.user.sub).order_by("-created_at"),
            many=True,
        ).data
    except DatabaseError:
        return server_error("Erro ao listar endereços")
    return Response({"address": data}, status=status.HTTP_200_OK)


def _address_create(request):
    ser = AddressSerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao salvar o endereço, verifique os dados informados.", ser.errors)

    try:
        address = ser.save(user_id=request.user.sub)
    except DatabaseError:
        return server_error("Erro ao criar um novo endereço")

    logger.info(f"Endereço {address.id} criado para o usuário {request.user.sub}")
    return Response(
        {"message": "Endereço criado com sucesso", "address": AddressSerializer(address).data},
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
@permission_classes([OnlyAdmin])
def address_list_all(request):
    try:
        data = AddressSerializer(Address.objects.select_related("user").order_by("-created_at"), many=True).data
    except DatabaseError:
        return server_error("Erro ao listar endereços")
    return Response({"address": data}, status=status.HTTP_200_OK)


@api_view(["GET", "PUT", "DELETE"])
@permission_classes([IsAuthenticatedIdentity])
def address_item(request, pk: str):
    address_id = parse_id(pk)

    if request.method == "PUT":
        ser = AddressSerializer(data=request.data)
        body_ok = ser.is_valid()
        if address_id is None or not body_ok:
            return bad_request("Erro ao editar o endereço, verifique os dados informados.", ser.errors)

        ser.instance = get_or_404(_visible_addresses(request), address_id, "Endereço não encontrado")
        try:
            address = ser.save()
        except DatabaseError:
            return server_error("Erro ao atualizar um endereço")
        return Response(
            {"message": "Endereço atualizado com sucesso", "address": AddressSerializer(address).data},
            status=status.HTTP_200_OK,
        )

    if address_id is None:
        return bad_request("Erro ao buscar o endereço, verifique os dados informados.")

    address = get_or_404(_visible_addresses(request), address_id, "Endereço não encontrado")

    if request.method == "DELETE":
        try:
            address.delete()
        except DatabaseError:
            return server_error("Erro ao deletar um endereço")
        return Response({"message": "Endereço deletado com sucesso"}, status=status.HTTP_200_OK)

    return Response({"address": AddressSerializer(address).data}, status=status.HTTP_200_OK)
