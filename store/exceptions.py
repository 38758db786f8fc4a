# store/exceptions.py — erros de domínio + handler que devolve sempre {"message": ...}
import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    AuthenticationFailed,
    NotAuthenticated,
    PermissionDenied,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .authentication import UNAUTHORIZED_MESSAGE

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Erro interno, por favor tente novamente!"


class DuplicateError(APIException):
    """Violação de chave única (e-mail, nome de categoria, nome de produto)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Registro já existe."
    default_code = "duplicate"


class ProductNotFoundError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Um ou mais produtos não foram encontrados."
    default_code = "product_not_found"


class OrderTotalTooLargeError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "O valor total do pedido excede o limite permitido."
    default_code = "order_total_too_large"


class AddressNotFoundError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Endereço não encontrado."
    default_code = "address_not_found"


class RecordNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Registro não encontrado."
    default_code = "not_found"


def _message_from(detail) -> str:
    if isinstance(detail, dict):
        detail = next(iter(detail.values()), "")
    if isinstance(detail, list):
        detail = detail[0] if detail else ""
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    Falhas de autenticação e de papel viram 401 "Não autorizado.".
    Demais APIException: mantém o status e troca {"detail"} por {"message"}.
    Qualquer outra exceção: loga com traceback e devolve 500 genérico.
    """
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed, PermissionDenied)):
        return Response(
            {"message": UNAUTHORIZED_MESSAGE},
            status=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    response = exception_handler(exc, context)
    if response is not None:
        data = response.data
        if isinstance(data, dict) and "detail" in data:
            data = data["detail"]
        response.data = {"message": _message_from(data)}
        return response

    view = context.get("view")
    logger.error(
        "Erro inesperado em %s", view.__class__.__name__ if view else "view desconhecida", exc_info=exc
    )
    return Response({"message": GENERIC_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
