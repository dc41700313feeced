import django.db.models.deletion
from django.db import migrations, models

import apps.orders.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="OrderModel",
            fields=[
                ("id", models.UUIDField(editable=False, primary_key=True, serialize=False)),
                ("customer_email", models.EmailField(max_length=254)),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=19)),
                (
                    "created_at",
                    models.DateTimeField(
                        db_index=True,
                        default=apps.orders.models.now_to_the_second,
                        editable=False,
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="OrderItemModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_name", models.CharField(max_length=50)),
                ("price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("position", models.PositiveIntegerField()),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="orders.ordermodel",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="+",
                        to="products.productmodel",
                    ),
                ),
            ],
            options={
                "db_table": "order_items",
                "ordering": ["position"],
            },
        ),
        migrations.AddConstraint(
            model_name="orderitemmodel",
            constraint=models.UniqueConstraint(fields=("order", "position"), name="ux_order_item_position"),
        ),
    ]
