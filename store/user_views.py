# store/user_views.py — cadastro/CRUD de usuários e login (sign-in)
from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .authentication import issue_token
from .helpers import bad_request, get_or_404, parse_id, save_unique, server_error
from .models import User
from .user_serializers import (
    SignInSerializer,
    UserCreateSerializer,
    UserSerializer,
    UserUpdateSerializer,
)

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "O email que você está tentando cadastrar já existe."
INVALID_CREDENTIALS = "E-mail ou senha inválidos."


# ---------------------------
# Auth
# ---------------------------
@api_view(["POST"])
@permission_classes([AllowAny])
def sign_in(request):
    """
    Body: { "email": "...", "password": "..." }
    E-mail inexistente e senha errada recebem a mesma resposta.
    """
    ser = SignInSerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao realizar o login, verifique os dados informados.", ser.errors)

    email = ser.validated_data["email"].strip().lower()
    user = User.objects.filter(email=email).first()
    if user is None or not user.check_password(ser.validated_data["password"]):
        return Response({"message": INVALID_CREDENTIALS}, status=status.HTTP_400_BAD_REQUEST)

    logger.info(f"Login do usuário {user.id}")
    return Response(
        {"message": "Login realizado com sucesso!", "token": issue_token(user)},
        status=status.HTTP_200_OK,
    )


# ---------------------------
# Usuários
# ---------------------------
@api_view(["POST"])
@permission_classes([AllowAny])
def user_create(request):
    ser = UserCreateSerializer(data=request.data)
    if not ser.is_valid():
        return bad_request("Erro ao criar um usuário", ser.errors)

    try:
        user = save_unique(ser, DUPLICATE_EMAIL)
    except DatabaseError:
        return server_error("Erro ao criar um usuário")

    logger.info(f"Usuário {user.id} cadastrado")
    return Response({"message": "Usuário cadastrado com sucesso."}, status=status.HTTP_201_CREATED)


@api_view(["GET"])
@permission_classes([AllowAny])
def user_list(request):
    try:
        data = UserSerializer(User.objects.order_by("-created_at"), many=True).data
    except DatabaseError:
        return server_error("Erro ao listar os usuários")
    return Response({"data": data}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([AllowAny])
def user_detail(request, pk: str):
    user_id = parse_id(pk)
    if user_id is None:
        return bad_request("Erro ao buscar o usuário")

    user = get_or_404(User.objects.all(), user_id, "Usuário não encontrado")
    return Response({"data": UserSerializer(user).data}, status=status.HTTP_200_OK)


@api_view(["PUT"])
@permission_classes([AllowAny])
def user_update(request, pk: str):
    user_id = parse_id(pk)
    ser = UserUpdateSerializer(data=request.data)
    body_ok = ser.is_valid()
    if user_id is None or not body_ok:
        return bad_request("Erro ao tentar atualizar o usuário, tente novamente!", ser.errors)

    user = get_or_404(User.objects.all(), user_id, "Usuário não encontrado")
    ser.instance = user
    try:
        save_unique(ser, DUPLICATE_EMAIL)
    except DatabaseError:
        return server_error("Erro ao tentar atualizar o usuário, tente novamente!")

    return Response({"message": "Usuário atualizado com sucesso!"}, status=status.HTTP_200_OK)


@api_view(["DELETE"])
@permission_classes([AllowAny])
def user_delete(request, pk: str):
    user_id = parse_id(pk)
    if user_id is None:
        return bad_request("Erro ao deletar o usuário")

    user = get_or_404(User.objects.all(), user_id, "Usuário não encontrado")
    try:
        user.delete()
    except DatabaseError:
        return server_error("Erro ao deletar o usuário")

    logger.info(f"Usuário {user_id} removido")
    return Response({"message": "Usuário deletado com sucesso!"}, status=status.HTTP_200_OK)
