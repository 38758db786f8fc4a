# store/filters.py — filtros opcionais por query string nas listagens
import django_filters

from .models import Order, Product


class ProductFilter(django_filters.FilterSet):
    category_id = django_filters.UUIDFilter(field_name="category_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Product
        fields = ["category_id", "name"]


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Order.STATUS_CHOICES)
    user_id = django_filters.UUIDFilter(field_name="user_id")

    class Meta:
        model = Order
        fields = ["status", "user_id"]
