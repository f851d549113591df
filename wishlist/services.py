import logging
from dataclasses import dataclass

from django_wishlist.exceptions import AuthenticationError, AuthorizationError, NotFoundError

logger = logging.getLogger(__name__)

WISHLIST_NOT_FOUND = "Wishlist does not exist"
USER_NOT_FOUND = "User does not exist"
NOT_OWNER = "You can only add items to your own wishlists"


@dataclass(frozen=True)
class NewWishlistItem:
    title: str
    description: str
    url: str
    image_url: str = ""


def create_wishlist(store, owner, title, is_public=False):
    return store.create_wishlist(user_id=owner.pk, title=title, is_public=is_public)


def create_wishlist_for_user_id(store, user_id, title, is_public=False):
    # GraphQL variant: the owner comes from the arguments, not from the
    # caller's token.
    user = store.find_user_by_id(user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return store.create_wishlist(user_id=user.pk, title=title, is_public=is_public)


def list_wishlists(store):
    # is_public is stored but not used as a filter here
    return store.list_wishlists()


def get_wishlist(store, wishlist_id):
    wishlist = store.find_wishlist_by_id(wishlist_id, with_details=True)
    if wishlist is None:
        raise NotFoundError(WISHLIST_NOT_FOUND)
    return wishlist


def list_wishlist_items(store, wishlist_id):
    wishlist = store.find_wishlist_by_id(wishlist_id)
    if wishlist is None:
        raise NotFoundError(WISHLIST_NOT_FOUND)
    return wishlist, store.list_wishlist_items(wishlist.pk)


def add_wishlist_item(store, wishlist_id, item, caller_id=None, require_caller=True):
    """
    Add ``item`` to a wishlist.

    The wishlist must exist.  When ``caller_id`` is known it must be the
    owner's id.  With ``require_caller=False`` an anonymous caller may add
    items (the GraphQL mutation works this way; REST does not).
    """
    if caller_id is None and require_caller:
        raise AuthenticationError()

    wishlist = store.find_wishlist_by_id(wishlist_id)
    if wishlist is None:
        raise NotFoundError(WISHLIST_NOT_FOUND)

    if caller_id is not None and str(wishlist.user_id) != str(caller_id):
        logger.warning(
            "User id=%s tried to add an item to wishlist id=%s owned by id=%s",
            caller_id, wishlist.pk, wishlist.user_id,
        )
        raise AuthorizationError(NOT_OWNER)

    return store.create_wishlist_item(
        wishlist_id=wishlist.pk,
        title=item.title,
        description=item.description,
        url=item.url,
        image_url=item.image_url,
    )


def list_user_wishlists(store, user_id):
    user = store.find_user_by_id(user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return user, store.list_wishlists_for_user(user.pk)
