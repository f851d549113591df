from django.urls import path

from .views import (
    UserWishlistsAPIView,
    WishlistDetailAPIView,
    WishlistItemListCreateAPIView,
    WishlistListCreateAPIView,
)

urlpatterns = [
    path("wishlists", WishlistListCreateAPIView.as_view(), name="wishlist-list-create"),
    path("wishlists/<str:pk>", WishlistDetailAPIView.as_view(), name="wishlist-detail"),
    path("wishlists/<str:pk>/items", WishlistItemListCreateAPIView.as_view(), name="wishlist-items"),
    path("users/<str:user_id>/wishlists", UserWishlistsAPIView.as_view(), name="user-wishlists"),
]
