from django.db import models
from django.utils import timezone


def now_to_the_second():
    # Stored timestamps match the "yyyy-MM-ddTHH:mm:ss" wire format exactly
    return timezone.now().replace(microsecond=0)


class OrderModel(models.Model):
    # UUID assigned by the service layer, exposed in the API
    id = models.UUIDField(primary_key=True, editable=False)
    customer_email = models.EmailField(max_length=254)
    total_price = models.DecimalField(max_digits=19, decimal_places=2)
    created_at = models.DateTimeField(default=now_to_the_second, editable=False, db_index=True)

    class Meta:
        db_table = "orders"
        ordering = ["created_at", "id"]


class OrderItemModel(models.Model):
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey("products.ProductModel", on_delete=models.PROTECT, related_name="+")

    # Snapshot of the product when the order was placed
    product_name = models.CharField(max_length=50)
    price = models.DecimalField(max_digits=12, decimal_places=2)

    position = models.PositiveIntegerField()

    class Meta:
        db_table = "order_items"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["order", "position"], name="ux_order_item_position"),
        ]
