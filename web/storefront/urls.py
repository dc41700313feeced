from django.urls import include, path

urlpatterns = [
    path("", include("apps.monitoring.urls")),
    path("v1/", include("apps.products.urls")),
    path("v1/", include("apps.orders.urls")),
]
