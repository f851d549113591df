from rest_framework import permissions, status
from rest_framework.response import Response

from django_wishlist.exceptions import validated_or_raise
from django_wishlist.views import ContextAPIView
from user.serializers import UserBriefSerializer

from . import services
from .serializers import (
    WishlistCountSerializer,
    WishlistCreateSerializer,
    WishlistDetailSerializer,
    WishlistItemCreateSerializer,
    WishlistItemSerializer,
    WishlistSerializer,
    WishlistSummarySerializer,
)


class WishlistListCreateAPIView(ContextAPIView):
    """
    GET: list every wishlist with its owner and item count
    POST: create a wishlist owned by the caller, payload { "title", "isPublic"? }
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.IsAuthenticated()]
        return [permissions.AllowAny()]

    def get(self, request, format=None):
        wishlists = services.list_wishlists(self.get_context(request).store)
        serializer = WishlistSummarySerializer(wishlists, many=True)
        return Response({"wishlists": serializer.data}, status=status.HTTP_200_OK)

    def post(self, request, format=None):
        data = validated_or_raise(WishlistCreateSerializer(data=request.data), "Title is required")
        wishlist = services.create_wishlist(
            self.get_context(request).store,
            owner=request.user,
            title=data["title"],
            is_public=data["isPublic"],
        )
        return Response(
            {"message": "Wishlist created successfully", "wishlist": WishlistSerializer(wishlist).data},
            status=status.HTTP_201_CREATED,
        )


class WishlistDetailAPIView(ContextAPIView):
    def get(self, request, pk, format=None):
        wishlist = services.get_wishlist(self.get_context(request).store, pk)
        return Response({"wishlist": WishlistDetailSerializer(wishlist).data}, status=status.HTTP_200_OK)


class WishlistItemListCreateAPIView(ContextAPIView):
    """
    GET: items of a wishlist, newest first
    POST: add an item, payload { "title", "description", "url", "imageUrl"? } (owner only)
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.IsAuthenticated()]
        return [permissions.AllowAny()]

    def get(self, request, pk, format=None):
        wishlist, items = services.list_wishlist_items(self.get_context(request).store, pk)
        serializer = WishlistItemSerializer(items, many=True)
        return Response({"wishlistId": wishlist.pk, "items": serializer.data}, status=status.HTTP_200_OK)

    def post(self, request, pk, format=None):
        data = validated_or_raise(
            WishlistItemCreateSerializer(data=request.data),
            "Title, description and URL are required",
        )
        item = services.add_wishlist_item(
            self.get_context(request).store,
            wishlist_id=pk,
            item=services.NewWishlistItem(
                title=data["title"],
                description=data["description"],
                url=data["url"],
                image_url=data.get("imageUrl") or "",
            ),
            caller_id=request.user.pk,
        )
        return Response(
            {"message": "Item added successfully", "item": WishlistItemSerializer(item).data},
            status=status.HTTP_201_CREATED,
        )


class UserWishlistsAPIView(ContextAPIView):
    def get(self, request, user_id, format=None):
        user, wishlists = services.list_user_wishlists(self.get_context(request).store, user_id)
        return Response(
            {
                "user": UserBriefSerializer(user).data,
                "wishlists": WishlistCountSerializer(wishlists, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
