from django.conf import settings
from django.db import models

from bu_connects.uploads import MEDIA_TYPE_IMAGE
from bu_connects.uploads import MEDIA_TYPE_NONE
from bu_connects.uploads import MEDIA_TYPE_VIDEO
from bu_connects.uploads import timestamped_upload_to


class Post(models.Model):
    """Campus feed entry: text with an optional image or video."""

    class MediaType(models.TextChoices):
        NONE = MEDIA_TYPE_NONE, "None"
        IMAGE = MEDIA_TYPE_IMAGE, "Image"
        VIDEO = MEDIA_TYPE_VIDEO, "Video"

    # Display name of the author, as entered by the client.
    author = models.CharField(max_length=255)
    content = models.TextField(blank=True)
    campus = models.CharField(max_length=100, blank=True, db_index=True)
    media = models.FileField(
        upload_to=timestamped_upload_to, blank=True, null=True, max_length=255
    )
    media_type = models.CharField(
        max_length=10, choices=MediaType.choices, default=MediaType.NONE
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Post({self.pk} by {self.author})"


class PostLike(models.Model):
    """Presence of a row means the user likes the post.

    Both sides are plain identifiers at the store level: no row has to exist
    behind them. Deleting a post or user still removes its likes through the
    ORM cascade.
    """

    post = models.ForeignKey(
        Post, on_delete=models.CASCADE, related_name="likes", db_constraint=False
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="post_likes",
        db_constraint=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["post", "user"], name="unique_post_like_per_user"
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"PostLike({self.post_id}<-{self.user_id})"


class PostComment(models.Model):
    post = models.ForeignKey(
        Post, on_delete=models.CASCADE, related_name="comments", db_constraint=False
    )
    # Denormalized commenter name, not a user reference.
    user_name = models.CharField(max_length=255)
    comment_text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"PostComment({self.pk} on {self.post_id})"
