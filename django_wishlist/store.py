"""
Relational access for users, wishlists and wishlist items.

``WishlistStore`` is the only place the API layer touches the ORM.  One
instance is built per process (see ``BearerContextMiddleware``) and handed
to every handler through the request context.  Each method is a single
query or insert; atomicity is left to the database.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count

from wishlist.models import Wishlist, WishlistItem

from .exceptions import ConflictError

logger = logging.getLogger(__name__)


def _pk(value):
    """Coerce a wire id to an int primary key, ``None`` if it cannot be one."""
    if isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


class WishlistStore:

    def __init__(self, using="default"):
        self.using = using
        self.users = get_user_model()

    # users

    def find_user_by_email(self, email):
        if not email:
            return None
        email = self.users.objects.normalize_email(email)
        return self.users.objects.using(self.using).filter(email=email).first()

    def find_user_by_id(self, user_id):
        pk = _pk(user_id)
        if pk is None:
            return None
        return self.users.objects.using(self.using).filter(pk=pk).first()

    def create_user(self, name, email, password_hash):
        """Insert a user with an already hashed password."""
        email = self.users.objects.normalize_email(email)
        user = self.users(name=name, email=email, password=password_hash)
        try:
            with transaction.atomic(using=self.using):
                user.save(using=self.using)
        except IntegrityError as exc:
            logger.info("Duplicate email on insert: %s", exc)
            raise ConflictError("User already exists")
        return user

    # wishlists

    def create_wishlist(self, user_id, title, is_public=False):
        return Wishlist.objects.using(self.using).create(
            user_id=user_id,
            title=title,
            is_public=is_public,
        )

    def list_wishlists(self):
        return list(
            Wishlist.objects.using(self.using)
            .select_related("user")
            .annotate(items_count=Count("items"))
        )

    def list_wishlists_for_user(self, user_id):
        pk = _pk(user_id)
        if pk is None:
            return []
        return list(
            Wishlist.objects.using(self.using)
            .filter(user_id=pk)
            .annotate(items_count=Count("items"))
        )

    def find_wishlist_by_id(self, wishlist_id, with_details=False):
        pk = _pk(wishlist_id)
        if pk is None:
            return None
        qs = Wishlist.objects.using(self.using).filter(pk=pk)
        if with_details:
            qs = qs.select_related("user").prefetch_related("items")
        return qs.first()

    # items

    def list_wishlist_items(self, wishlist_id):
        pk = _pk(wishlist_id)
        if pk is None:
            return []
        return list(
            WishlistItem.objects.using(self.using)
            .filter(wishlist_id=pk)
            .order_by("-created_at", "-id")
        )

    def create_wishlist_item(self, wishlist_id, title, description, url, image_url=""):
        return WishlistItem.objects.using(self.using).create(
            wishlist_id=wishlist_id,
            title=title,
            description=description,
            url=url,
            image_url=image_url or "",
        )
