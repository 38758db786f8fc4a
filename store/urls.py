# store/urls.py — mesmas rotas do front: /users, /auth, /products, /category, /address, /order
from django.urls import path

from . import address_views, user_views, views

urlpatterns = [
    path("ping", views.ping),
    path("health", views.health),

    # Auth
    path("auth/sign-in", user_views.sign_in, name="auth-sign-in"),

    # Usuários
    path("users/create",           user_views.user_create, name="user-create"),
    path("users/list",             user_views.user_list,   name="user-list"),
    path("users/get/<str:pk>",     user_views.user_detail, name="user-detail"),
    path("users/update/<str:pk>",  user_views.user_update, name="user-update"),
    path("users/delete/<str:pk>",  user_views.user_delete, name="user-delete"),

    # Produtos
    path("products/create",          views.product_create, name="product-create"),
    path("products/list",            views.product_list,   name="product-list"),
    path("products/get/<str:pk>",    views.product_detail, name="product-detail"),
    path("products/update/<str:pk>", views.product_update, name="product-update"),
    path("products/delete/<str:pk>", views.product_delete, name="product-delete"),

    # Categorias
    path("category/create",          views.category_create, name="category-create"),
    path("category/list",            views.category_list,   name="category-list"),
    path("category/get/<str:pk>",    views.category_detail, name="category-detail"),
    path("category/update/<str:pk>", views.category_update, name="category-update"),
    path("category/delete/<str:pk>", views.category_delete, name="category-delete"),

    # Endereços
    path("address/address",          address_views.address_collection, name="address-collection"),
    path("address/admin/address",    address_views.address_list_all,   name="address-list-all"),
    path("address/address/<str:pk>", address_views.address_item,       name="address-item"),

    # Pedidos
    path("order/create",                views.order_create,        name="order-create"),
    path("order/list",                  views.order_list,          name="order-list"),
    path("order/admin/list-all",        views.order_list_all,      name="order-list-all"),
    path("order/admin/update/<str:pk>", views.order_update_status, name="order-update-status"),
]
