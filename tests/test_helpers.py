"""save_unique: só violação de unicidade vira erro de duplicidade."""
import pytest
from django.db import IntegrityError

from store.exceptions import DuplicateError
from store.helpers import save_unique

pytestmark = pytest.mark.django_db


class _FailingSerializer:
    def __init__(self, message):
        self.message = message

    def save(self, **kwargs):
        raise IntegrityError(self.message)


@pytest.mark.parametrize("message", [
    "UNIQUE constraint failed: store_category.name",
    'duplicate key value violates unique constraint "store_product_name_key"',
])
def test_unique_violation_becomes_duplicate(message):
    with pytest.raises(DuplicateError) as exc_info:
        save_unique(_FailingSerializer(message), "Produto já existe")
    assert exc_info.value.detail == "Produto já existe"


@pytest.mark.parametrize("message", [
    "FOREIGN KEY constraint failed",
    'insert or update on table "store_address" violates foreign key constraint',
    "NOT NULL constraint failed: store_product.price",
])
def test_other_integrity_errors_are_not_duplicates(message):
    with pytest.raises(IntegrityError):
        save_unique(_FailingSerializer(message), "Produto já existe")


def test_foreign_key_failure_on_create_is_a_500(user_client, category, monkeypatch):
    def broken_save(self, **kwargs):
        raise IntegrityError("FOREIGN KEY constraint failed")

    monkeypatch.setattr("store.serializers.ProductSerializer.save", broken_save)

    resp = user_client.post("/products/create", {
        "name": "Refrigerante",
        "description": "Lata 350ml",
        "price": "5.50",
        "category_id": str(category.id),
    })

    assert resp.status_code == 500
    assert resp.json() == {"message": "Erro ao criar um produto"}
