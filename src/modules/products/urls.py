"""Product URL configuration.

Routes are registered without trailing slashes: ``/products``,
``/products/{id}``, ``/products/search/{keyword}`` and
``/products/{id}/restore``.
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
