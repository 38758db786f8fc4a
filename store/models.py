# store/models.py — User, Category, Product, Address, Order e OrderItem
import uuid

from django.contrib.auth.hashers import check_password, make_password
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


class TimestampedModel(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]


# --------- Usuários ---------
class User(TimestampedModel):
    ROLE_ADMIN = "ADMIN"
    ROLE_USER = "USER"
    ROLE_CHOICES = [
        (ROLE_ADMIN, "Administrador"),
        (ROLE_USER, "Usuário"),
    ]

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    # hash (bcrypt via hashers do Django); nunca sai nas respostas
    password = models.CharField(max_length=255)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)

    class Meta(TimestampedModel.Meta):
        pass

    def __str__(self):
        return f"{self.name} <{self.email}>"

    def set_password(self, raw_password: str) -> None:
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    @property
    def is_admin(self) -> bool:
        return self.role == self.ROLE_ADMIN


# --------- Categorias ---------
class Category(TimestampedModel):
    name = models.CharField(max_length=120, unique=True)

    class Meta(TimestampedModel.Meta):
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


# --------- Produtos ---------
class Product(TimestampedModel):
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    image_url = models.URLField(max_length=500, blank=True, null=True)
    # obrigatório na escrita; exclusão da categoria não é barrada
    category = models.ForeignKey(
        Category, related_name="products", on_delete=models.SET_NULL, null=True
    )

    class Meta(TimestampedModel.Meta):
        pass

    def __str__(self):
        return f"{self.name} (R$ {self.price})"


# --------- Endereços ---------
zip_code_validator = RegexValidator(r"^\d{5}-\d{3}$", "CEP inválido")


class Address(TimestampedModel):
    user = models.ForeignKey(User, related_name="addresses", on_delete=models.CASCADE)
    street = models.CharField(max_length=255)
    number = models.CharField(max_length=20)
    city = models.CharField(max_length=120)
    state = models.CharField(max_length=2)
    zip_code = models.CharField(max_length=9, validators=[zip_code_validator])

    class Meta(TimestampedModel.Meta):
        verbose_name_plural = "addresses"

    def __str__(self):
        return f"{self.street}, {self.number} - {self.city}/{self.state}"


# --------- Pedidos ---------
class Order(TimestampedModel):
    STATUS_PENDING = "PENDING"
    STATUS_PREPARING = "PREPARING"
    STATUS_DELIVERED = "DELIVERED"
    STATUS_CANCELED = "CANCELED"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pendente"),
        (STATUS_PREPARING, "Preparando"),
        (STATUS_DELIVERED, "Entregue"),
        (STATUS_CANCELED, "Cancelado"),
    ]

    user = models.ForeignKey(User, related_name="orders", on_delete=models.CASCADE)
    address = models.ForeignKey(
        Address, related_name="orders", on_delete=models.SET_NULL, null=True
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    # soma de price * quantity dos itens, calculada uma única vez na criação
    total = models.DecimalField(max_digits=12, decimal_places=2, default=0)

    class Meta(TimestampedModel.Meta):
        pass

    def __str__(self):
        return f"Pedido #{self.id} - {self.get_status_display()}"


class OrderItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, related_name="items", on_delete=models.CASCADE)
    product = models.ForeignKey(
        Product, related_name="order_items", on_delete=models.SET_NULL, null=True
    )
    quantity = models.PositiveIntegerField(default=1)
    # preço do produto no momento do pedido; não acompanha mudanças posteriores
    price = models.DecimalField(max_digits=10, decimal_places=2)

    def __str__(self):
        name = self.product.name if self.product else "produto removido"
        return f"{self.quantity}x {name} no Pedido #{self.order_id}"
