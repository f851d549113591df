from dataclasses import dataclass
from typing import Any, Optional

from .security import token_from_header, validate_token
from .store import WishlistStore

CONTEXT_ATTR = "wishlist_context"


@dataclass(frozen=True)
class RequestContext:
    """Per-request state every REST view and GraphQL resolver receives."""

    store: WishlistStore
    user_id: Optional[str] = None
    request: Any = None

    @property
    def is_authenticated(self):
        return self.user_id is not None


def build_request_context(request, store):
    # Caller identity comes from "Authorization: Bearer <token>"; anything
    # unusable degrades to an anonymous context.
    token = token_from_header(request.META.get("HTTP_AUTHORIZATION"))
    return RequestContext(store=store, user_id=validate_token(token), request=request)


def get_request_context(request):
    context = getattr(request, CONTEXT_ATTR, None)
    if context is None:
        context = build_request_context(request, WishlistStore())
        setattr(request, CONTEXT_ATTR, context)
    return context
