# store/admin.py
from django.contrib import admin

from .models import Address, Category, Order, OrderItem, Product, User


# ===============================
# User
# ===============================
@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "role", "created_at")
    list_filter = ("role",)
    search_fields = ("name", "email")
    # hash não é editável pelo admin
    exclude = ("password",)


# ===============================
# Category
# ===============================
@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)


# ===============================
# Product
# ===============================
def _price_fmt(value) -> str:
    return f"R$ {value:.2f}".replace(".", ",") if value is not None else "-"


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "price_fmt", "category", "created_at")
    list_filter = ("category",)
    search_fields = ("name", "description")

    def price_fmt(self, obj):
        return _price_fmt(obj.price)
    price_fmt.short_description = "Preço"


# ===============================
# Address
# ===============================
@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "street", "number", "city", "state", "zip_code")
    list_filter = ("state",)
    search_fields = ("street", "city", "zip_code", "user__email")


# ===============================
# Order / OrderItem
# ===============================
class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    # snapshot do preço não muda depois de gravado
    readonly_fields = ("product", "quantity", "price")
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "status", "total_fmt", "created_at")
    list_filter = ("status",)
    search_fields = ("user__email",)
    readonly_fields = ("total",)
    inlines = [OrderItemInline]

    def total_fmt(self, obj):
        return _price_fmt(obj.total)
    total_fmt.short_description = "Total"
