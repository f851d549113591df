import json

import pytest
from rest_framework.test import APIClient

from django_wishlist.security import hash_password, issue_token
from django_wishlist.store import WishlistStore

PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def store(db):
    return WishlistStore()


@pytest.fixture
def make_user(store):
    def _make(name="Alice", email="alice@example.com", password=PASSWORD):
        return store.create_user(name=name, email=email, password_hash=hash_password(password))

    return _make


@pytest.fixture
def alice(make_user):
    return make_user()


@pytest.fixture
def bob(make_user):
    return make_user(name="Bob", email="bob@example.com")


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"HTTP_AUTHORIZATION": f"Bearer {issue_token(user.pk)}"}

    return _headers


@pytest.fixture
def graphql(client):
    """Run a GraphQL document against /graphql and return the decoded body."""

    def _execute(query, variables=None, token=None):
        extra = {}
        if token:
            extra["HTTP_AUTHORIZATION"] = f"Bearer {token}"
        response = client.post(
            "/graphql",
            data=json.dumps({"query": query, "variables": variables or {}}),
            content_type="application/json",
            **extra,
        )
        return response.json()

    return _execute
