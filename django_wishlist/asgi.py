import os
# uvicorn/daphne start Django outside of manage.py.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_wishlist.settings")

from django.core.asgi import get_asgi_application

application = get_asgi_application()
