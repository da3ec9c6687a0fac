import pytest
from rest_framework import status

from bu_connects.notifications.models import Notification

pytestmark = pytest.mark.django_db


def test_list_joins_actor_identity(api_client, user, other_user):
    other_user.profile_pic.name = "1700000000000-face.png"
    other_user.save(update_fields=["profile_pic"])
    notification = Notification.objects.create(
        user=user,
        actor=other_user,
        notification_type=Notification.Type.LIKE,
        message="liked your post",
    )

    res = api_client.get(f"/api/notifications/{user.pk}")

    assert res.status_code == status.HTTP_200_OK
    assert len(res.data) == 1
    row = res.data[0]
    assert row["id"] == notification.pk
    assert row["user_id"] == user.pk
    assert row["actor_id"] == other_user.pk
    assert row["actorName"] == "Campus Friend"
    assert row["actorPic"] == "1700000000000-face.png"
    assert row["is_read"] is False


def test_list_is_capped_at_twenty_newest(api_client, user, other_user):
    created = [
        Notification.objects.create(user=user, actor=other_user) for _ in range(25)
    ]
    Notification.objects.create(user=other_user, actor=user)

    res = api_client.get(f"/api/notifications/{user.pk}")

    ids = [row["id"] for row in res.data]
    assert ids == [n.pk for n in reversed(created)][:20]


def test_mark_all_read_is_scoped_to_recipient(api_client, user, other_user):
    Notification.objects.create(user=user, actor=other_user)
    Notification.objects.create(user=user, actor=other_user)
    untouched = Notification.objects.create(user=other_user, actor=user)

    res = api_client.put(f"/api/notifications/read/{user.pk}")

    assert res.status_code == status.HTTP_200_OK
    assert res.data == {"message": "Marked all as read"}
    assert not Notification.objects.filter(user=user, is_read=False).exists()
    untouched.refresh_from_db()
    assert untouched.is_read is False


def test_mark_read_twice_keeps_read(api_client, user, other_user):
    Notification.objects.create(user=user, actor=other_user, is_read=True)

    api_client.put(f"/api/notifications/read/{user.pk}")

    assert Notification.objects.get(user=user).is_read is True
