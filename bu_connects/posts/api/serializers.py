from rest_framework import serializers

from bu_connects.posts.models import Post
from bu_connects.posts.models import PostComment
from bu_connects.uploads import file_url


class PostSerializer(serializers.ModelSerializer):
    """Read serializer for the feed."""

    media_url = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = (
            "id",
            "author",
            "content",
            "campus",
            "media_url",
            "media_type",
            "created_at",
        )
        read_only_fields = fields

    def get_media_url(self, obj: Post) -> str | None:
        return file_url(obj.media)


class PostCreateSerializer(serializers.Serializer):
    author = serializers.CharField(max_length=255)
    content = serializers.CharField(allow_blank=True, required=False, default="")
    campus = serializers.CharField(
        max_length=100, allow_blank=True, required=False, default=""
    )
    media = serializers.FileField(required=False, allow_empty_file=True)


class LikeToggleSerializer(serializers.Serializer):
    # Plain identifiers: a like may name a post or user that has no row.
    postId = serializers.IntegerField(source="post_id")  # noqa: N815
    userId = serializers.IntegerField(source="user_id")  # noqa: N815


class PostCommentSerializer(serializers.ModelSerializer):
    post_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = PostComment
        fields = ("id", "post_id", "user_name", "comment_text", "created_at")
        read_only_fields = fields


class CommentCreateSerializer(serializers.Serializer):
    postId = serializers.IntegerField(source="post_id")  # noqa: N815
    userName = serializers.CharField(max_length=255, source="user_name")  # noqa: N815
    text = serializers.CharField(source="comment_text")
