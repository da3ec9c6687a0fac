from django.contrib import admin

from bu_connects.posts import models


@admin.register(models.Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["id", "author", "campus", "media_type", "created_at"]
    search_fields = ["author", "content"]
    list_filter = ["campus", "media_type"]


@admin.register(models.PostLike)
class PostLikeAdmin(admin.ModelAdmin):
    list_display = ["id", "post_id", "user_id", "created_at"]


@admin.register(models.PostComment)
class PostCommentAdmin(admin.ModelAdmin):
    list_display = ["id", "post_id", "user_name", "created_at"]
    search_fields = ["user_name", "comment_text"]
