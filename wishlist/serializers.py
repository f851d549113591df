from rest_framework import serializers

from user.serializers import UserBriefSerializer

from .models import Wishlist, WishlistItem


class WishlistCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    isPublic = serializers.BooleanField(required=False, default=False)


class WishlistItemCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    description = serializers.CharField()
    url = serializers.CharField(max_length=2000)
    imageUrl = serializers.CharField(max_length=2000, required=False, allow_blank=True, allow_null=True, default="")


class WishlistItemSerializer(serializers.ModelSerializer):
    wishlistId = serializers.IntegerField(source="wishlist_id", read_only=True)
    imageUrl = serializers.CharField(source="image_url", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = WishlistItem
        fields = ("id", "wishlistId", "title", "description", "url", "imageUrl", "createdAt")


class WishlistSerializer(serializers.ModelSerializer):
    isPublic = serializers.BooleanField(source="is_public", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Wishlist
        fields = ("id", "title", "isPublic", "createdAt")


class WishlistCountSerializer(WishlistSerializer):
    # items_count comes from the store's Count("items") annotation
    itemsCount = serializers.IntegerField(source="items_count", read_only=True)

    class Meta(WishlistSerializer.Meta):
        fields = WishlistSerializer.Meta.fields + ("itemsCount",)


class WishlistSummarySerializer(WishlistCountSerializer):
    user = UserBriefSerializer(read_only=True)

    class Meta(WishlistCountSerializer.Meta):
        fields = ("id", "title", "isPublic", "createdAt", "user", "itemsCount")


class WishlistDetailSerializer(WishlistSerializer):
    user = UserBriefSerializer(read_only=True)
    items = WishlistItemSerializer(many=True, read_only=True)

    class Meta(WishlistSerializer.Meta):
        fields = WishlistSerializer.Meta.fields + ("user", "items")
