"""
URL configuration for django_wishlist project.

REST lives under /api/, GraphQL at /graphql (GraphiQL in DEBUG), the
OpenAPI document under /api/schema/.
"""
from django.conf import settings
from django.contrib import admin
from django.urls import include, path
from django.views.decorators.csrf import csrf_exempt
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from .views import ApiTestView, WishlistGraphQLView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/test", ApiTestView.as_view(), name="api-test"),
    path("api/", include("user.urls")),
    path("api/", include("wishlist.urls")),
    path("graphql", csrf_exempt(WishlistGraphQLView.as_view(graphiql=settings.DEBUG)), name="graphql"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),  # OpenAPI JSON/YAML
    path("api/schema/swagger-ui/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
