import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class DjangoWishlistConfig(AppConfig):
    name = "django_wishlist"
    verbose_name = "Wishlist API"

    def ready(self):
        if settings.JWT_SECRET == settings.DEFAULT_JWT_SECRET and not settings.DEBUG:
            logger.warning("JWT_SECRET is not set; tokens are signed with the development key")
