import logging

from django.utils import timezone
from graphene_django.views import GraphQLView
from graphql import GraphQLError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import APIView

from .context import get_request_context
from .exceptions import AuthenticationError, InternalError

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "GET /api/test - This message",
    "POST /api/register - Register a user",
    "POST /api/login - Log in",
    "GET /api/me - Logged-in user (token required)",
    "GET /api/wishlists - List wishlists",
    "POST /api/wishlists - Create a wishlist (token required)",
    "GET /api/wishlists/:id - Get a wishlist",
    "GET /api/wishlists/:id/items - Items of a wishlist",
    "POST /api/wishlists/:id/items - Add an item (token required, owner only)",
    "GET /api/users/:userId/wishlists - Wishlists of a user",
    "POST /graphql - GraphQL endpoint",
]


class ContextAPIView(APIView):
    """APIView that exposes the request context and answers 401 with our message."""

    def get_context(self, request):
        return get_request_context(request._request)

    def permission_denied(self, request, message=None, code=None):
        if request.authenticators and not request.successful_authenticator:
            raise AuthenticationError()
        super().permission_denied(request, message=message, code=code)


class ApiTestView(APIView):
    def get(self, request, format=None):
        return Response(
            {
                "message": "Wishlist API is up",
                "timestamp": timezone.now().isoformat(),
                "endpoints": ENDPOINTS,
            },
            status=status.HTTP_200_OK,
        )


class WishlistGraphQLView(GraphQLView):
    """GraphQL endpoint whose resolvers get the RequestContext as ``info.context``."""

    def get_context(self, request):
        return get_request_context(request)

    @staticmethod
    def format_error(error):
        formatted = GraphQLView.format_error(error)
        original = getattr(error, "original_error", None) if isinstance(error, GraphQLError) else None
        if original is not None and not isinstance(original, APIException):
            logger.error(
                "Unhandled error in GraphQL resolver at %s",
                getattr(error, "path", None),
                exc_info=(type(original), original, original.__traceback__),
            )
            formatted["message"] = InternalError.default_detail
        return formatted
