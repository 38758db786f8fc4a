# store/serializers.py — validação de entrada + formato de saída (categorias, produtos, endereços, pedidos)
#
# Unicidade (nome de categoria/produto) NÃO é checada aqui: a constraint do banco decide
# e a IntegrityError vira DuplicateError nas views.

from rest_framework import serializers

from .models import Address, Category, Order, OrderItem, Product


class IdParamsSerializer(serializers.Serializer):
    id = serializers.UUIDField(error_messages={"invalid": "O id informado não é um uuid válido"})


# --------- Categorias ---------
class CategoryBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "created_at", "updated_at"]
        extra_kwargs = {"name": {"validators": []}}


# --------- Produtos ---------
class ProductSerializer(serializers.ModelSerializer):
    category = CategoryBriefSerializer(read_only=True)
    category_id = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        source="category",
        write_only=True,
        pk_field=serializers.UUIDField(),
    )
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    description = serializers.CharField(allow_blank=True)
    image_url = serializers.URLField(required=False, allow_null=True, allow_blank=True, max_length=500)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "image_url",
            "category",
            "category_id",
            "created_at",
            "updated_at",
        ]
        extra_kwargs = {"name": {"validators": []}}


class ProductBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ["id", "name", "price", "image_url"]


# --------- Endereços ---------
class AddressOwnerSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class AddressSerializer(serializers.ModelSerializer):
    state = serializers.CharField(
        min_length=2,
        max_length=2,
        error_messages={"min_length": "UF inválida", "max_length": "UF inválida"},
    )
    zip_code = serializers.RegexField(
        r"^\d{5}-\d{3}$",
        error_messages={"invalid": "CEP inválido"},
    )
    user = AddressOwnerSerializer(read_only=True)

    class Meta:
        model = Address
        fields = [
            "id",
            "street",
            "number",
            "city",
            "state",
            "zip_code",
            "user",
            "created_at",
            "updated_at",
        ]


class OrderAddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = ["id", "street", "number", "city", "state", "zip_code"]


# ===========================
#  PEDIDO / ITENS (WRITE)
# ===========================
MAX_ITEM_QUANTITY = 10_000


class OrderItemWriteSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY)


class OrderCreateSerializer(serializers.Serializer):
    address_id = serializers.UUIDField()
    items = OrderItemWriteSerializer(many=True, allow_empty=False)


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)


# ===========================
#  PEDIDO / ITENS (READ)
# ===========================
class OrderItemReadSerializer(serializers.ModelSerializer):
    product = ProductBriefSerializer(read_only=True)

    class Meta:
        model = OrderItem
        fields = ("id", "product_id", "product", "quantity", "price")


class OrderReadSerializer(serializers.ModelSerializer):
    address = OrderAddressSerializer(read_only=True)
    items = OrderItemReadSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = (
            "id",
            "user_id",
            "address_id",
            "address",
            "status",
            "total",
            "items",
            "created_at",
            "updated_at",
        )
