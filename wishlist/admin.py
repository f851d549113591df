from django.contrib import admin

from .models import Wishlist, WishlistItem


class WishlistItemInline(admin.TabularInline):
    model = WishlistItem
    extra = 0


@admin.register(Wishlist)
class WishlistAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "user", "is_public", "created_at")
    list_filter = ("is_public",)
    search_fields = ("title", "user__email")
    inlines = [WishlistItemInline]


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "wishlist", "url", "created_at")
    search_fields = ("title", "description", "wishlist__title")
