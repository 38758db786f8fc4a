# store/authentication.py — Bearer JWT (HS256) para o DRF
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

# módulo carregado pelo DRF via DEFAULT_AUTHENTICATION_CLASSES: nada de rest_framework.views aqui
UNAUTHORIZED_MESSAGE = "Não autorizado."


@dataclass(frozen=True)
class TokenIdentity:
    """Identidade do chamador, montada a partir do payload do token."""
    sub: str
    name: str = ""
    email: str = ""
    role: str = "USER"

    is_authenticated = True

    @property
    def is_admin(self) -> bool:
        return (self.role or "").upper() == "ADMIN"


def issue_token(user) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "iat": now,
        "exp": now + timedelta(days=settings.JWT_EXPIRES_DAYS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> TokenIdentity:
    payload = jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub"]},
    )
    return TokenIdentity(
        sub=str(payload["sub"]),
        name=payload.get("name") or "",
        email=payload.get("email") or "",
        role=payload.get("role") or "USER",
    )


class JWTAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        header = get_authorization_header(request)
        if not header:
            return None

        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != self.keyword.lower().encode():
            raise AuthenticationFailed(UNAUTHORIZED_MESSAGE)

        try:
            identity = decode_token(parts[1].decode())
        except (jwt.InvalidTokenError, UnicodeDecodeError) as e:
            logger.info(f"Token rejeitado: {e}")
            raise AuthenticationFailed(UNAUTHORIZED_MESSAGE)

        return identity, parts[1]

    def authenticate_header(self, request):
        return self.keyword
