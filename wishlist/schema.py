import graphene
from graphene_django import DjangoObjectType

from django_wishlist.exceptions import NotFoundError
from user.schema import UserType  # noqa: F401  registers the User type for Wishlist.user

from . import services
from .models import Wishlist, WishlistItem


class WishlistItemType(DjangoObjectType):
    wishlist_id = graphene.ID(required=True)

    class Meta:
        model = WishlistItem
        name = "WishlistItem"
        fields = ("id", "title", "description", "url", "image_url", "created_at")


class WishlistType(DjangoObjectType):
    user_id = graphene.ID(required=True)
    items = graphene.List(graphene.NonNull(WishlistItemType), required=True)
    items_count = graphene.Int(required=True)

    class Meta:
        model = Wishlist
        name = "Wishlist"
        fields = ("id", "title", "is_public", "created_at", "user")

    def resolve_items(root, info):
        return root.items.all()

    def resolve_items_count(root, info):
        count = getattr(root, "items_count", None)
        return count if count is not None else root.items.count()


class Query(graphene.ObjectType):
    wishlists = graphene.List(graphene.NonNull(WishlistType), required=True)
    wishlist = graphene.Field(WishlistType, id=graphene.String(required=True))
    wishlist_items = graphene.List(
        graphene.NonNull(WishlistItemType),
        wishlist_id=graphene.String(required=True),
        required=True,
    )
    wishlists_by_user = graphene.List(
        graphene.NonNull(WishlistType),
        user_id=graphene.String(required=True),
        required=True,
    )

    def resolve_wishlists(root, info):
        return services.list_wishlists(info.context.store)

    def resolve_wishlist(root, info, id):
        try:
            return services.get_wishlist(info.context.store, id)
        except NotFoundError:
            return None

    def resolve_wishlist_items(root, info, wishlist_id):
        _, items = services.list_wishlist_items(info.context.store, wishlist_id)
        return items

    def resolve_wishlists_by_user(root, info, user_id):
        _, wishlists = services.list_user_wishlists(info.context.store, user_id)
        return wishlists


class CreateWishlist(graphene.Mutation):
    """
    Create a wishlist for ``userId``.

    The owner is taken from the arguments and is not compared with the
    caller's token, unlike ``POST /api/wishlists``.
    """

    class Arguments:
        user_id = graphene.String(required=True)
        title = graphene.String(required=True)
        is_public = graphene.Boolean(required=True)

    Output = WishlistType

    def mutate(root, info, user_id, title, is_public):
        return services.create_wishlist_for_user_id(
            info.context.store, user_id=user_id, title=title, is_public=is_public
        )


class CreateWishlistItem(graphene.Mutation):
    """
    Add an item to a wishlist.

    A caller with a token must own the wishlist; a caller without one is
    let through, unlike ``POST /api/wishlists/<id>/items``.
    """

    class Arguments:
        wishlist_id = graphene.String(required=True)
        title = graphene.String(required=True)
        description = graphene.String(required=True)
        url = graphene.String(required=True)
        image_url = graphene.String(required=True)

    Output = WishlistItemType

    def mutate(root, info, wishlist_id, title, description, url, image_url):
        return services.add_wishlist_item(
            info.context.store,
            wishlist_id=wishlist_id,
            item=services.NewWishlistItem(title=title, description=description, url=url, image_url=image_url),
            caller_id=info.context.user_id,
            require_caller=False,
        )


class Mutation(graphene.ObjectType):
    create_wishlist = CreateWishlist.Field()
    create_wishlist_item = CreateWishlistItem.Field()
