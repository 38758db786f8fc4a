"""Fixtures compartilhadas: clientes autenticados e registros prontos."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from store.authentication import issue_token
from store.models import Address, Category, Product, User


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(name="Maria Silva", email="maria@example.com", password="segredo123", role=User.ROLE_USER):
        user = User(name=name, email=email, role=role)
        user.set_password(password)
        user.save()
        return user
    return _make


@pytest.fixture
def user(make_user) -> User:
    return make_user()


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user(name="Admin Loja", email="admin@example.com", role=User.ROLE_ADMIN)


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
        return client
    return _client


@pytest.fixture
def user_client(client_for, user) -> APIClient:
    return client_for(user)


@pytest.fixture
def admin_client(client_for, admin_user) -> APIClient:
    return client_for(admin_user)


@pytest.fixture
def category(db) -> Category:
    return Category.objects.create(name="Bebidas")


@pytest.fixture
def make_product(category):
    def _make(name, price, **kwargs):
        return Product.objects.create(
            name=name,
            description=kwargs.pop("description", ""),
            price=Decimal(price),
            category=kwargs.pop("category", category),
            **kwargs,
        )
    return _make


@pytest.fixture
def make_address(db):
    def _make(owner, **kwargs):
        data = {
            "street": "Rua das Flores",
            "number": "123",
            "city": "São Paulo",
            "state": "SP",
            "zip_code": "01234-567",
        }
        data.update(kwargs)
        return Address.objects.create(user=owner, **data)
    return _make


@pytest.fixture
def address(make_address, user) -> Address:
    return make_address(user)
