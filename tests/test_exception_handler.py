import pytest
from django.db import DatabaseError
from rest_framework import status

from bu_connects.posts.api.views import PostListCreateView

pytestmark = pytest.mark.django_db


@pytest.fixture
def broken_feed(monkeypatch):
    def get_queryset(self):
        msg = 'relation "posts_post" does not exist'
        raise DatabaseError(msg)

    monkeypatch.setattr(PostListCreateView, "get_queryset", get_queryset)


@pytest.mark.usefixtures("broken_feed")
def test_store_failure_exposes_message(api_client, settings):
    settings.API_EXPOSE_STORE_ERRORS = True

    res = api_client.get("/api/posts")

    assert res.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert res.json() == {"error": 'relation "posts_post" does not exist'}


@pytest.mark.usefixtures("broken_feed")
def test_store_failure_hides_message(api_client, settings):
    settings.API_EXPOSE_STORE_ERRORS = False

    res = api_client.get("/api/posts")

    assert res.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert res.json() == {"error": "Internal server error"}


def test_validation_errors_keep_drf_shape(api_client):
    res = api_client.post("/api/posts/like", {}, format="json")

    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert set(res.data) == {"postId", "userId"}
