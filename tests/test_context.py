import pytest
from django.http import HttpResponse
from django.test import RequestFactory

from django_wishlist.context import CONTEXT_ATTR, build_request_context, get_request_context
from django_wishlist.middleware.bearer_context_middleware import BearerContextMiddleware
from django_wishlist.security import issue_token
from django_wishlist.store import WishlistStore


@pytest.fixture
def rf():
    return RequestFactory()


class TestBuildRequestContext:

    def test_valid_bearer_token_resolves_user(self, rf):
        request = rf.get("/api/me", HTTP_AUTHORIZATION=f"Bearer {issue_token(3)}")
        store = WishlistStore()

        context = build_request_context(request, store)

        assert context.user_id == "3"
        assert context.is_authenticated
        assert context.store is store
        assert context.request is request

    @pytest.mark.parametrize("header", [None, "", "Bearer broken", "Token abc"])
    def test_unusable_header_gives_anonymous_context(self, rf, header):
        extra = {"HTTP_AUTHORIZATION": header} if header is not None else {}
        context = build_request_context(rf.get("/", **extra), WishlistStore())

        assert context.user_id is None
        assert not context.is_authenticated


class TestBearerContextMiddleware:

    def test_attaches_context_per_request_with_shared_store(self, rf):
        middleware = BearerContextMiddleware(lambda request: HttpResponse())
        first = rf.get("/", HTTP_AUTHORIZATION=f"Bearer {issue_token(1)}")
        second = rf.get("/")

        middleware(first)
        middleware(second)

        assert getattr(first, CONTEXT_ATTR).user_id == "1"
        assert getattr(second, CONTEXT_ATTR).user_id is None
        assert getattr(first, CONTEXT_ATTR).store is getattr(second, CONTEXT_ATTR).store

    def test_get_request_context_builds_when_missing(self, rf):
        request = rf.get("/", HTTP_AUTHORIZATION=f"Bearer {issue_token(9)}")

        context = get_request_context(request)

        assert context.user_id == "9"
        assert get_request_context(request) is context
