from rest_framework.authentication import BaseAuthentication


class BearerContextAuthentication(BaseAuthentication):
    """
    Turn the request context's user id into ``request.user``.

    Never fails the request: a missing, invalid or expired token, or a
    token for a user that no longer exists, simply leaves the caller
    anonymous. Views that need a caller use ``IsAuthenticated``, which
    answers 401 because ``authenticate_header`` is provided.
    """

    www_authenticate_realm = "api"

    def authenticate(self, request):
        # DRF loads this class while rest_framework.views is still importing
        from .context import get_request_context

        context = get_request_context(request._request)
        if not context.is_authenticated:
            return None
        user = context.store.find_user_by_id(context.user_id)
        if user is None or not user.is_active:
            return None
        return (user, context)

    def authenticate_header(self, request):
        return f'Bearer realm="{self.www_authenticate_realm}"'
