import json
from unittest.mock import patch

import pytest
from django.contrib.auth import get_user_model
from django.db import DatabaseError

from django_wishlist.security import issue_token, validate_token
from wishlist.models import Wishlist, WishlistItem

from .conftest import PASSWORD

User = get_user_model()

REGISTER = """
mutation Register($name: String!, $email: String!, $password: String!) {
  register(name: $name, email: $email, password: $password) {
    token
    user { id name email createdAt }
  }
}
"""

LOGIN = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) { token user { id } }
}
"""

CREATE_WISHLIST = """
mutation CreateWishlist($userId: String!, $title: String!, $isPublic: Boolean!) {
  createWishlist(userId: $userId, title: $title, isPublic: $isPublic) {
    id userId title isPublic
  }
}
"""

CREATE_ITEM = """
mutation CreateItem($wishlistId: String!) {
  createWishlistItem(
    wishlistId: $wishlistId, title: "Book", description: "A novel",
    url: "https://example.com/book", imageUrl: "https://example.com/book.png"
  ) { id wishlistId title imageUrl }
}
"""


def _message(result):
    return result["errors"][0]["message"]


@pytest.mark.django_db
class TestAuthMutations:

    def test_register(self, graphql):
        result = graphql(REGISTER, {"name": "Alice", "email": "alice@example.com", "password": PASSWORD})

        payload = result["data"]["register"]
        user = User.objects.get(email="alice@example.com")
        assert payload["user"]["id"] == str(user.pk)
        assert validate_token(payload["token"]) == str(user.pk)

    def test_register_duplicate_email(self, graphql, alice):
        result = graphql(REGISTER, {"name": "Other", "email": "alice@example.com", "password": "x"})

        assert _message(result) == "User already exists"
        assert User.objects.count() == 1

    def test_password_is_not_queryable(self, graphql):
        result = graphql("{ me { password } }")

        assert "errors" in result

    def test_login_failures_are_indistinguishable(self, graphql, alice):
        wrong_password = graphql(LOGIN, {"email": "alice@example.com", "password": "nope"})
        unknown_email = graphql(LOGIN, {"email": "ghost@example.com", "password": PASSWORD})

        assert _message(wrong_password) == _message(unknown_email) == "Invalid credentials"

    def test_login(self, graphql, alice):
        result = graphql(LOGIN, {"email": "alice@example.com", "password": PASSWORD})

        assert validate_token(result["data"]["login"]["token"]) == str(alice.pk)


@pytest.mark.django_db
class TestQueries:

    def test_me_anonymous_is_null(self, graphql):
        assert graphql("{ me { id } }") == {"data": {"me": None}}

    def test_me_with_token(self, graphql, alice):
        result = graphql("{ me { id email } }", token=issue_token(alice.pk))

        assert result["data"]["me"] == {"id": str(alice.pk), "email": "alice@example.com"}

    def test_wishlists_lists_everything(self, graphql, store, alice, bob):
        store.create_wishlist(alice.pk, "Public", is_public=True)
        store.create_wishlist(bob.pk, "Private")

        result = graphql("{ wishlists { title isPublic itemsCount user { name } } }")

        titles = {w["title"] for w in result["data"]["wishlists"]}
        assert titles == {"Public", "Private"}

    def test_wishlist_aggregate_and_missing(self, graphql, store, alice):
        wishlist = store.create_wishlist(alice.pk, "Birthday")
        store.create_wishlist_item(wishlist.pk, "Book", "d", "https://example.com")
        query = "query W($id: String!) { wishlist(id: $id) { title userId user { id name } items { title } } }"

        found = graphql(query, {"id": str(wishlist.pk)})["data"]["wishlist"]
        missing = graphql(query, {"id": "999"})["data"]["wishlist"]

        assert found["userId"] == str(alice.pk)
        assert found["user"] == {"id": str(alice.pk), "name": "Alice"}
        assert found["items"] == [{"title": "Book"}]
        assert missing is None

    def test_wishlist_items_of_missing_wishlist(self, graphql):
        result = graphql('{ wishlistItems(wishlistId: "999") { id } }')

        assert _message(result) == "Wishlist does not exist"

    def test_wishlists_by_user(self, graphql, store, alice, bob):
        store.create_wishlist(alice.pk, "Mine")
        store.create_wishlist(bob.pk, "Theirs")
        query = "query U($userId: String!) { wishlistsByUser(userId: $userId) { title } }"

        result = graphql(query, {"userId": str(alice.pk)})

        assert result["data"]["wishlistsByUser"] == [{"title": "Mine"}]

    def test_wishlists_by_unknown_user(self, graphql):
        result = graphql('{ wishlistsByUser(userId: "999") { title } }')

        assert _message(result) == "User does not exist"


@pytest.mark.django_db
class TestWishlistMutations:

    def test_create_wishlist_for_explicit_user(self, graphql, alice, bob):
        # the owner comes from userId, even when another user calls it
        result = graphql(
            CREATE_WISHLIST,
            {"userId": str(alice.pk), "title": "Birthday", "isPublic": False},
            token=issue_token(bob.pk),
        )

        created = result["data"]["createWishlist"]
        assert created["userId"] == str(alice.pk)
        assert Wishlist.objects.get(pk=created["id"]).user == alice

    def test_create_wishlist_for_unknown_user(self, graphql, db):
        result = graphql(CREATE_WISHLIST, {"userId": "999", "title": "Birthday", "isPublic": True})

        assert _message(result) == "User does not exist"
        assert not Wishlist.objects.exists()

    def test_create_item_as_owner(self, graphql, store, alice):
        wishlist = store.create_wishlist(alice.pk, "Birthday")

        result = graphql(CREATE_ITEM, {"wishlistId": str(wishlist.pk)}, token=issue_token(alice.pk))

        item = result["data"]["createWishlistItem"]
        assert item["wishlistId"] == str(wishlist.pk)
        assert item["imageUrl"] == "https://example.com/book.png"

    def test_create_item_anonymously_is_allowed(self, graphql, store, alice):
        wishlist = store.create_wishlist(alice.pk, "Birthday")

        result = graphql(CREATE_ITEM, {"wishlistId": str(wishlist.pk)})

        assert "errors" not in result
        assert WishlistItem.objects.filter(wishlist=wishlist).count() == 1

    def test_create_item_as_non_owner_is_forbidden(self, graphql, store, alice, bob):
        wishlist = store.create_wishlist(alice.pk, "Birthday")

        result = graphql(CREATE_ITEM, {"wishlistId": str(wishlist.pk)}, token=issue_token(bob.pk))

        assert _message(result) == "You can only add items to your own wishlists"
        assert not WishlistItem.objects.exists()

    def test_create_item_on_missing_wishlist(self, graphql, db):
        result = graphql(CREATE_ITEM, {"wishlistId": "999"})

        assert _message(result) == "Wishlist does not exist"
        assert not WishlistItem.objects.exists()


@pytest.mark.django_db
class TestErrorMapping:

    def test_storage_failure_is_reported_as_internal_error(self, graphql):
        failure = DatabaseError('relation "wishlist_wishlist" does not exist')
        with patch("django_wishlist.store.WishlistStore.list_wishlists", side_effect=failure):
            result = graphql("{ wishlists { id } }")

        assert _message(result) == "Internal server error"
        assert "wishlist_wishlist" not in json.dumps(result)

    def test_domain_errors_keep_their_message(self, graphql):
        result = graphql('{ wishlistItems(wishlistId: "999") { id } }')

        assert _message(result) == "Wishlist does not exist"

    def test_me_for_inactive_user_is_null(self, graphql, alice):
        alice.is_active = False
        alice.save(update_fields=["is_active"])

        assert graphql("{ me { id } }", token=issue_token(alice.pk)) == {"data": {"me": None}}
