from django.db import models


class ProductModel(models.Model):
    # UUID assigned by the service layer, exposed in the API
    id = models.UUIDField(primary_key=True, editable=False)
    name = models.CharField(max_length=50)
    price = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = "products"
        ordering = ["name", "id"]

    def __str__(self):
        return f"{self.name} ({self.price})"
