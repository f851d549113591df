"""
Walk a running server through the GraphQL API.

Registers a throwaway user, creates a wishlist with two items, then reads
everything back anonymously.

Usage:
    python manage.py graphql_smoke --url http://localhost:8000/graphql
"""
import uuid

import requests
from django.core.management.base import BaseCommand, CommandError

REGISTER = """
mutation Register($name: String!, $email: String!, $password: String!) {
  register(name: $name, email: $email, password: $password) { token user { id name email } }
}
"""

ME = "query { me { id name email } }"

CREATE_WISHLIST = """
mutation CreateWishlist($userId: String!, $title: String!, $isPublic: Boolean!) {
  createWishlist(userId: $userId, title: $title, isPublic: $isPublic) { id title isPublic createdAt }
}
"""

CREATE_ITEM = """
mutation CreateWishlistItem($wishlistId: String!, $title: String!, $description: String!, $url: String!, $imageUrl: String!) {
  createWishlistItem(wishlistId: $wishlistId, title: $title, description: $description, url: $url, imageUrl: $imageUrl) {
    id title description url imageUrl createdAt
  }
}
"""

WISHLIST_ITEMS = """
query GetWishlistItems($wishlistId: String!) {
  wishlistItems(wishlistId: $wishlistId) { id title description }
}
"""

WISHLIST = """
query GetWishlist($id: String!) {
  wishlist(id: $id) { id title user { id name } items { id title } }
}
"""

WISHLISTS = "query { wishlists { id title isPublic } }"

ITEMS = [
    ("iPhone 15 Pro", "Apple smartphone", "https://www.apple.com/iphone-15-pro/", "https://example.com/iphone.jpg"),
    ("MacBook Air M2", "Light laptop", "https://www.apple.com/macbook-air/", "https://example.com/macbook.jpg"),
]


class Command(BaseCommand):
    help = "Exercise every GraphQL query and mutation against a running server"

    def add_arguments(self, parser):
        parser.add_argument("--url", default="http://localhost:8000/graphql", help="GraphQL endpoint")
        parser.add_argument("--timeout", type=int, default=10)

    def handle(self, *args, **options):
        self.url = options["url"]
        self.timeout = options["timeout"]
        self.session = requests.Session()

        email = f"smoke-{uuid.uuid4().hex[:12]}@example.com"
        payload = self.post_query(REGISTER, {"name": "Smoke Test", "email": email, "password": uuid.uuid4().hex})
        auth = payload["register"]
        user = auth["user"]
        self.stdout.write(f"1. registered {user['email']}")

        token = auth["token"]
        me = self.post_query(ME, token=token)["me"]
        if not me or me["id"] != user["id"]:
            raise CommandError("me did not resolve the registered user")
        self.stdout.write(f"2. authenticated as {me['name']}")

        wishlist = self.post_query(
            CREATE_WISHLIST, {"userId": user["id"], "title": "Smoke list", "isPublic": True}, token=token
        )["createWishlist"]
        self.stdout.write(f"3. created wishlist {wishlist['id']}")

        for title, description, url, image_url in ITEMS:
            self.post_query(
                CREATE_ITEM,
                {
                    "wishlistId": wishlist["id"],
                    "title": title,
                    "description": description,
                    "url": url,
                    "imageUrl": image_url,
                },
                token=token,
            )
        self.stdout.write(f"4. added {len(ITEMS)} items")

        items = self.post_query(WISHLIST_ITEMS, {"wishlistId": wishlist["id"]})["wishlistItems"]
        if [item["title"] for item in items] != [title for title, *_ in reversed(ITEMS)]:
            raise CommandError("wishlistItems did not come back newest first")
        self.stdout.write("5. items listed newest first")

        full = self.post_query(WISHLIST, {"id": wishlist["id"]})["wishlist"]
        self.stdout.write(f"6. {full['title']} owned by {full['user']['name']} with {len(full['items'])} items")

        wishlists = self.post_query(WISHLISTS)["wishlists"]
        self.stdout.write(f"7. {len(wishlists)} wishlists on the server")

        self.stdout.write(self.style.SUCCESS("GraphQL smoke test passed"))

    def post_query(self, query, variables=None, token=None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            resp = self.session.post(
                self.url,
                json={"query": query, "variables": variables or {}},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise CommandError(f"Request to {self.url} failed: {exc}")

        try:
            body = resp.json()
        except ValueError:
            raise CommandError(f"{self.url} answered {resp.status_code} without a JSON body")
        if body.get("errors"):
            raise CommandError("; ".join(error["message"] for error in body["errors"]))
        resp.raise_for_status()
        return body["data"]
