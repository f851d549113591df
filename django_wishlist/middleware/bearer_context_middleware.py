from django.utils.deprecation import MiddlewareMixin

from django_wishlist.context import CONTEXT_ATTR, build_request_context
from django_wishlist.store import WishlistStore


class BearerContextMiddleware(MiddlewareMixin):
    """Resolve the bearer token once per request and attach a RequestContext."""

    def __init__(self, get_response):
        super().__init__(get_response)
        self.store = WishlistStore()

    def process_request(self, request):
        setattr(request, CONTEXT_ATTR, build_request_context(request, self.store))
        return None
