# store/helpers.py — pedaços repetidos por todas as views
import logging

from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.response import Response

from .exceptions import DuplicateError, RecordNotFound
from .serializers import IdParamsSerializer

logger = logging.getLogger(__name__)


def parse_id(pk):
    """UUID do parâmetro de rota, ou None se malformado."""
    ser = IdParamsSerializer(data={"id": pk})
    if not ser.is_valid():
        return None
    return ser.validated_data["id"]


def bad_request(message: str, errors=None) -> Response:
    if errors:
        logger.info(f"{message} {dict(errors)}")
    return Response({"message": message}, status=status.HTTP_400_BAD_REQUEST)


def server_error(message: str) -> Response:
    # chamado dentro de um except: o traceback vai para o log, nunca para o cliente
    logger.exception(message)
    return Response({"message": message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def get_or_404(queryset, pk, message: str):
    obj = queryset.filter(pk=pk).first()
    if obj is None:
        raise RecordNotFound(message)
    return obj


def is_unique_violation(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed", Postgres: "duplicate key value", MySQL: "Duplicate entry"
    text = str(exc).lower()
    return "unique" in text or "duplicate" in text


def save_unique(serializer, duplicate_message: str, **kwargs):
    """
    serializer.save() com a constraint única do banco mapeada para DuplicateError.
    Outras IntegrityError (chave estrangeira, NOT NULL) seguem adiante como DatabaseError.
    """
    try:
        with transaction.atomic():
            return serializer.save(**kwargs)
    except IntegrityError as e:
        if not is_unique_violation(e):
            raise
        logger.info(duplicate_message)
        raise DuplicateError(duplicate_message)
