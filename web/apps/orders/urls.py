from django.urls import path

from .views import OrdersCollectionView, RetrieveOrderView

app_name = "orders"

urlpatterns = [
    path("orders", OrdersCollectionView.as_view(), name="orders-collection"),  # GET interval / POST create
    path("orders/<str:order_id>", RetrieveOrderView.as_view(), name="orders-detail"),
]
