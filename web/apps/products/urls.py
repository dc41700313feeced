from django.urls import path

from .views import ProductDetailView, ProductsCollectionView

app_name = "products"

urlpatterns = [
    path("products", ProductsCollectionView.as_view(), name="products-collection"),  # GET list / POST create
    path("products/<str:product_id>", ProductDetailView.as_view(), name="products-detail"),
]
