import re

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework import status

from bu_connects.posts.models import Post
from bu_connects.posts.models import PostComment
from bu_connects.posts.models import PostLike

POSTS_URL = "/api/posts"


@pytest.mark.django_db
class TestPostFeed:
    def test_lists_newest_first(self, api_client):
        first = Post.objects.create(author="A", content="one", campus="North")
        second = Post.objects.create(author="B", content="two", campus="South")

        res = api_client.get(POSTS_URL)

        assert res.status_code == status.HTTP_200_OK
        assert [p["id"] for p in res.data] == [second.pk, first.pk]

    def test_filters_by_campus(self, api_client):
        Post.objects.create(author="A", content="one", campus="North")
        south = Post.objects.create(author="B", content="two", campus="South")

        res = api_client.get(POSTS_URL, {"campus": "South"})

        assert [p["id"] for p in res.data] == [south.pk]

    @pytest.mark.parametrize("campus", ["", "undefined"])
    def test_placeholder_campus_returns_everything(self, api_client, campus):
        Post.objects.create(author="A", content="one", campus="North")
        Post.objects.create(author="B", content="two", campus="South")

        res = api_client.get(POSTS_URL, {"campus": campus})

        assert len(res.data) == 2  # noqa: PLR2004


@pytest.mark.django_db
class TestPostCreate:
    def test_text_only_post_has_no_media(self, api_client):
        res = api_client.post(
            POSTS_URL,
            {"author": "Ada", "content": "hello", "campus": "North"},
            format="multipart",
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data["message"] == "Post created"
        assert res.data["media_url"] is None
        assert res.data["media_type"] == "none"
        post = Post.objects.get(pk=res.data["id"])
        assert post.media_type == Post.MediaType.NONE
        assert not post.media

    def test_json_post_without_file(self, api_client):
        res = api_client.post(
            POSTS_URL, {"author": "Ada", "content": "json"}, format="json"
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data["media_type"] == "none"

    @pytest.mark.parametrize(
        ("content_type", "expected"),
        [
            ("video/mp4", "video"),
            ("video/quicktime", "video"),
            ("image/jpeg", "image"),
            ("application/pdf", "image"),
        ],
    )
    def test_media_type_follows_declared_content_type(
        self, api_client, content_type, expected
    ):
        upload = SimpleUploadedFile("clip.bin", b"0" * 32, content_type=content_type)

        res = api_client.post(
            POSTS_URL,
            {"author": "Ada", "content": "c", "campus": "N", "media": upload},
            format="multipart",
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data["media_type"] == expected
        assert re.fullmatch(r"/uploads/\d{13}-clip\.bin", res.data["media_url"])

    def test_uploaded_media_is_served(self, api_client):
        upload = SimpleUploadedFile("pic.jpg", b"jpeg-bytes", content_type="image/jpeg")
        res = api_client.post(
            POSTS_URL,
            {"author": "Ada", "content": "c", "media": upload},
            format="multipart",
        )

        media = api_client.get(res.data["media_url"])

        assert media.status_code == status.HTTP_200_OK
        assert b"".join(media.streaming_content) == b"jpeg-bytes"

    def test_author_is_required(self, api_client):
        res = api_client.post(POSTS_URL, {"content": "c"}, format="multipart")

        assert res.status_code == status.HTTP_400_BAD_REQUEST

    def test_failed_insert_removes_written_media(
        self, api_client, refuse_writes_to, stored_files
    ):
        refuse_writes_to("posts_post")
        upload = SimpleUploadedFile("beach.jpg", b"jpeg", content_type="image/jpeg")

        res = api_client.post(
            POSTS_URL,
            {"author": "Ada", "content": "c", "media": upload},
            format="multipart",
        )

        assert res.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert stored_files() == []
        assert not Post.objects.exists()


@pytest.mark.django_db
class TestPostDelete:
    def test_delete_cascades_to_likes_and_comments(self, api_client, user):
        post = Post.objects.create(author="A", content="bye")
        PostLike.objects.create(post=post, user=user)
        PostComment.objects.create(post=post, user_name="B", comment_text="nice")

        res = api_client.delete(f"{POSTS_URL}/{post.pk}")

        assert res.status_code == status.HTTP_200_OK
        assert res.data == {"message": "Post deleted successfully"}
        assert not Post.objects.filter(pk=post.pk).exists()
        assert not PostLike.objects.exists()
        assert not PostComment.objects.exists()

    def test_delete_missing_post_still_succeeds(self, api_client):
        res = api_client.delete(f"{POSTS_URL}/424242")

        assert res.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestLikeToggle:
    def test_alternates(self, api_client, user):
        post = Post.objects.create(author="A", content="like me")
        payload = {"postId": post.pk, "userId": user.pk}

        results = [
            api_client.post("/api/posts/like", payload, format="json").data["liked"]
            for _ in range(4)
        ]

        assert results == [True, False, True, False]
        assert not PostLike.objects.filter(post=post, user=user).exists()

    def test_post_without_a_row_can_be_liked(self, api_client, user):
        res = api_client.post(
            "/api/posts/like", {"postId": 999, "userId": user.pk}, format="json"
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data == {"liked": True}
        assert PostLike.objects.filter(post_id=999, user_id=user.pk).count() == 1

    def test_ids_must_be_integers(self, api_client):
        res = api_client.post(
            "/api/posts/like", {"postId": "five", "userId": 1}, format="json"
        )

        assert res.status_code == status.HTTP_400_BAD_REQUEST
        assert "postId" in res.data


@pytest.mark.django_db
class TestComments:
    def test_add_and_list_newest_first(self, api_client):
        post = Post.objects.create(author="A", content="discuss")
        other = Post.objects.create(author="A", content="elsewhere")
        PostComment.objects.create(post=other, user_name="Z", comment_text="off")

        first = api_client.post(
            "/api/posts/comment",
            {"postId": post.pk, "userName": "Bea", "text": "first!"},
            format="json",
        )
        second = api_client.post(
            "/api/posts/comment",
            {"postId": post.pk, "userName": "Cal", "text": "second"},
            format="json",
        )

        assert first.data["message"] == "Comment added"
        res = api_client.get(f"{POSTS_URL}/{post.pk}/comments")
        assert res.status_code == status.HTTP_200_OK
        assert [c["id"] for c in res.data] == [second.data["id"], first.data["id"]]
        assert res.data[1] == {
            "id": first.data["id"],
            "post_id": post.pk,
            "user_name": "Bea",
            "comment_text": "first!",
            "created_at": res.data[1]["created_at"],
        }

    def test_comment_on_post_without_a_row(self, api_client, db):
        res = api_client.post(
            "/api/posts/comment",
            {"postId": 31337, "userName": "Bea", "text": "hello?"},
            format="json",
        )

        assert res.status_code == status.HTTP_200_OK
        listed = api_client.get(f"{POSTS_URL}/31337/comments")
        assert [c["id"] for c in listed.data] == [res.data["id"]]
