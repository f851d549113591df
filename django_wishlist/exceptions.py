"""
Error taxonomy shared by the REST views and the GraphQL resolvers.

All of them are DRF ``APIException`` subclasses: REST turns them into a
status code plus ``{"error": ...}`` body through ``api_exception_handler``,
GraphQL reports ``str(exc)`` as the error message.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class InvalidInput(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
    default_code = "invalid_input"


class AuthenticationError(APIException):
    # not NotAuthenticated: DRF may rewrite that one to 403
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid or missing token"
    default_code = "not_authenticated"


class AuthorizationError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You are not allowed to do this"
    default_code = "forbidden"


class NotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class ConflictError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Already exists"
    default_code = "conflict"


class InternalError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_error"


def _message(detail):
    # DRF details can be a string, a list or a dict of lists
    if isinstance(detail, dict):
        for field, value in detail.items():
            text = _message(value)
            return text if field == "non_field_errors" else f"{field}: {text}"
        return ""
    if isinstance(detail, (list, tuple)):
        return _message(detail[0]) if detail else ""
    return str(detail)


def validated_or_raise(serializer, message):
    """
    Run ``serializer.is_valid()`` and return ``validated_data``.

    Missing or blank fields raise ``InvalidInput(message)``; any other
    problem (malformed email, wrong type) raises with the field's own
    error text.
    """
    if serializer.is_valid():
        return serializer.validated_data

    for errors in serializer.errors.values():
        for error in errors:
            if getattr(error, "code", None) in {"required", "blank", "null"}:
                raise InvalidInput(message)
    raise InvalidInput(_message(serializer.errors))


def api_exception_handler(exc, context):
    """DRF exception handler rendering every failure as ``{"error": ...}``."""
    from rest_framework.views import exception_handler, set_rollback

    response = exception_handler(exc, context)

    if response is not None:
        detail = getattr(exc, "detail", None)
        if detail is None:
            # Django's Http404 / PermissionDenied, already translated by DRF
            data = response.data
            detail = data.get("detail", data) if isinstance(data, dict) else data
        response.data = {"error": _message(detail)}
        return response

    set_rollback()
    view = context.get("view")
    if isinstance(exc, DatabaseError):
        logger.exception("Database error in %s", view.__class__.__name__ if view else "view")
    else:
        logger.exception("Unhandled error in %s: %s", view.__class__.__name__ if view else "view", exc)
    return Response(
        {"error": InternalError.default_detail},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
