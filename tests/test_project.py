import json
import warnings
from io import StringIO
from unittest.mock import patch
from urllib.parse import urlparse

import pytest
from django.core.management import call_command
from django.test import Client

from django_wishlist.security import issue_token, validate_token


class TestProjectLoads:

    def test_system_checks_pass(self):
        call_command("check")

    def test_models_match_migrations(self, db):
        call_command("makemigrations", "--check", "--dry-run", stdout=StringIO())

    def test_fresh_client_serves_rest_and_graphql(self, db):
        client = Client()

        assert client.get("/api/test").status_code == 200
        response = client.post(
            "/graphql",
            data=json.dumps({"query": "{ me { id } }"}),
            content_type="application/json",
        )
        assert response.json() == {"data": {"me": None}}

    def test_default_signing_key_is_long_enough_for_hs256(self, settings):
        assert len(settings.DEFAULT_JWT_SECRET.encode()) >= 32
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert validate_token(issue_token(1)) == "1"

        assert not [w for w in caught if "key" in str(w.message).lower()]


class _RoutedPost:
    """Stands in for requests.Session.post, answering through the Django test client."""

    def __init__(self, client):
        self.client = client
        self.calls = 0

    def __call__(self, url, json=None, headers=None, timeout=None):
        self.calls += 1
        extra = {}
        if headers and "Authorization" in headers:
            extra["HTTP_AUTHORIZATION"] = headers["Authorization"]
        response = self.client.post(
            urlparse(url).path,
            data=_dumps(json),
            content_type="application/json",
            **extra,
        )
        response.raise_for_status = lambda: None
        return response


def _dumps(payload):
    return json.dumps(payload)


@pytest.mark.django_db
class TestGraphqlSmokeCommand:

    def test_walks_every_operation(self, client):
        routed = _RoutedPost(client)
        out = StringIO()

        with patch("requests.Session.post", new=routed):
            call_command("graphql_smoke", url="http://testserver/graphql", stdout=out)

        assert "GraphQL smoke test passed" in out.getvalue()
        assert "items listed newest first" in out.getvalue()
        assert routed.calls == 8
