"""Categorias e produtos."""
import uuid
from decimal import Decimal

import pytest

from store.models import Category, Product

pytestmark = pytest.mark.django_db


# --------- Categorias ---------
def test_create_category_is_open(api_client):
    resp = api_client.post("/category/create", {"name": "Lanches"})

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Categoria criada com sucesso"
    assert body["category"]["name"] == "Lanches"
    assert Category.objects.filter(name="Lanches").exists()


def test_duplicate_category_name(api_client, category):
    resp = api_client.post("/category/create", {"name": "Bebidas"})

    assert resp.status_code == 400
    assert resp.json() == {"message": "Erro ao criar a categoria, categoria já existe."}
    assert Category.objects.filter(name="Bebidas").count() == 1


def test_category_list_is_admin_only(user_client, admin_client, category):
    assert user_client.get("/category/list").status_code == 401

    resp = admin_client.get("/category/list")
    assert resp.status_code == 200
    assert resp.json() == {"categories": [{"id": str(category.id), "name": "Bebidas"}]}


def test_get_category(user_client, category):
    resp = user_client.get(f"/category/get/{category.id}")
    assert resp.status_code == 200
    assert resp.json()["category"]["name"] == "Bebidas"


def test_get_missing_category(user_client):
    resp = user_client.get(f"/category/get/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Categoria não encontrada"}


def test_update_category(user_client, category):
    resp = user_client.put(f"/category/update/{category.id}", {"name": "Sucos"})
    assert resp.status_code == 200
    category.refresh_from_db()
    assert category.name == "Sucos"


def test_update_category_requires_token(api_client, category):
    assert api_client.put(f"/category/update/{category.id}", {"name": "Sucos"}).status_code == 401


def test_delete_category_leaves_products_without_category(user_client, category, make_product):
    product = make_product("Água", "2.50")

    resp = user_client.delete(f"/category/delete/{category.id}")

    assert resp.status_code == 200
    product.refresh_from_db()
    assert product.category is None


# --------- Produtos ---------
def _product_body(category, **overrides):
    body = {
        "name": "Refrigerante",
        "description": "Lata 350ml",
        "price": 5.5,
        "category_id": str(category.id),
    }
    body.update(overrides)
    return body


def test_create_product(user_client, category):
    resp = user_client.post("/products/create", _product_body(category, image_url="https://img.example.com/r.png"))

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Produto criado com sucesso"
    assert body["product"]["price"] == "5.50"
    assert body["product"]["category"] == {"id": str(category.id), "name": "Bebidas"}
    assert Product.objects.get(name="Refrigerante").price == Decimal("5.50")


def test_create_product_requires_token(api_client, category):
    assert api_client.post("/products/create", _product_body(category)).status_code == 401
    assert not Product.objects.exists()


def test_duplicate_product_name(user_client, category, make_product):
    make_product("Refrigerante", "4.00")

    resp = user_client.post("/products/create", _product_body(category))

    assert resp.status_code == 400
    assert resp.json() == {"message": "Produto já existe"}
    assert Product.objects.filter(name="Refrigerante").count() == 1


@pytest.mark.parametrize("overrides", [
    {"category_id": str(uuid.uuid4())},
    {"category_id": "nao-e-uuid"},
    {"price": "abc"},
    {"price": -1},
    {"name": ""},
    {"image_url": "nao-e-url"},
])
def test_create_product_validation(user_client, category, overrides):
    resp = user_client.post("/products/create", _product_body(category, **overrides))
    assert resp.status_code == 400
    assert resp.json() == {"message": "Erro ao criar o produto, verifique os dados informados."}


def test_list_products_newest_first(user_client, make_product):
    older = make_product("Água", "2.50")
    newer = make_product("Suco", "7.00")

    resp = user_client.get("/products/list")

    assert resp.status_code == 200
    products = resp.json()["products"]
    assert [p["id"] for p in products] == [str(newer.id), str(older.id)]
    assert products[0]["category"]["name"] == "Bebidas"


def test_get_product_is_open(api_client, make_product):
    product = make_product("Água", "2.50")
    resp = api_client.get(f"/products/get/{product.id}")
    assert resp.status_code == 200
    assert resp.json()["product"]["name"] == "Água"


def test_get_product_bad_id(api_client):
    resp = api_client.get("/products/get/42")
    assert resp.status_code == 400


def test_update_product_overwrites_all_fields(user_client, category, make_product):
    product = make_product("Água", "2.50", image_url="https://img.example.com/a.png")
    other = Category.objects.create(name="Mercearia")

    resp = user_client.put(
        f"/products/update/{product.id}",
        {"name": "Água com gás", "description": "500ml", "price": "3.25", "category_id": str(other.id)},
    )

    assert resp.status_code == 200
    product.refresh_from_db()
    assert product.name == "Água com gás"
    assert product.description == "500ml"
    assert product.price == Decimal("3.25")
    assert product.category == other


def test_delete_product(user_client, make_product):
    product = make_product("Água", "2.50")
    resp = user_client.delete(f"/products/delete/{product.id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Produto deletado com sucesso"}
    assert not Product.objects.exists()


def test_delete_missing_product(user_client):
    assert user_client.delete(f"/products/delete/{uuid.uuid4()}").status_code == 404


def test_filter_products_by_category(user_client, make_product):
    other = Category.objects.create(name="Mercearia")
    make_product("Água", "2.50")
    rice = make_product("Arroz", "20.00", category=other)

    resp = user_client.get("/products/list", {"category_id": str(other.id)})

    assert [p["id"] for p in resp.json()["products"]] == [str(rice.id)]
    assert user_client.get("/products/list", {"category_id": "x"}).status_code == 400
