import re
from pathlib import Path

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework import status

TEST_PASSWORD = "s3cret-pass"  # noqa: S105  # matches the user fixture


@pytest.mark.django_db
class TestUserDetail:
    def test_get_user_projection(self, api_client, user):
        res = api_client.get(f"/api/user/{user.pk}")

        assert res.status_code == status.HTTP_200_OK
        assert res.data["id"] == user.pk
        assert res.data["email"] == user.email
        assert "password" not in res.data

    def test_unknown_user_is_not_found(self, api_client):
        res = api_client.get("/api/user/999")

        assert res.status_code == status.HTTP_404_NOT_FOUND
        assert res.data == {"message": "User not found"}


@pytest.mark.django_db
class TestSettings:
    def test_update_motto_keeps_password(self, api_client, user):
        res = api_client.put(
            "/api/settings",
            {"userId": user.pk, "motto": "Stay curious"},
            format="json",
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data == {"message": "Settings updated!"}
        user.refresh_from_db()
        assert user.motto == "Stay curious"
        assert user.check_password(TEST_PASSWORD)

    def test_empty_password_is_ignored(self, api_client, user):
        api_client.put(
            "/api/settings",
            {"userId": user.pk, "motto": "m", "password": ""},
            format="json",
        )

        user.refresh_from_db()
        assert user.check_password(TEST_PASSWORD)

    def test_non_empty_password_is_changed(self, api_client, user):
        api_client.put(
            "/api/settings",
            {"userId": user.pk, "motto": "m", "password": "n3w-pass"},
            format="json",
        )

        user.refresh_from_db()
        assert user.check_password("n3w-pass")
        assert not user.check_password(TEST_PASSWORD)

    def test_unknown_user(self, api_client, db):
        res = api_client.put(
            "/api/settings", {"userId": 404, "motto": "m"}, format="json"
        )

        assert res.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestProfilePic:
    def test_missing_file_is_bad_request(self, api_client, user):
        res = api_client.post(
            "/api/user/profile-pic", {"userId": user.pk}, format="multipart"
        )

        assert res.status_code == status.HTTP_400_BAD_REQUEST
        assert res.data == {"message": "No image uploaded"}

    def test_upload_stores_timestamped_file(self, api_client, user, settings):
        upload = SimpleUploadedFile("me.png", b"\x89PNG....", content_type="image/png")

        res = api_client.post(
            "/api/user/profile-pic",
            {"userId": user.pk, "image": upload},
            format="multipart",
        )

        assert res.status_code == status.HTTP_200_OK
        assert res.data["message"] == "Profile picture updated!"
        name = res.data["profile_pic"]
        assert re.fullmatch(r"\d{13}-me\.png", name)
        assert (Path(settings.MEDIA_ROOT) / name).exists()
        user.refresh_from_db()
        assert user.profile_pic.name == name

    def test_upload_for_unknown_user(self, api_client, db):
        upload = SimpleUploadedFile("me.png", b"data", content_type="image/png")

        res = api_client.post(
            "/api/user/profile-pic",
            {"userId": 12345, "image": upload},
            format="multipart",
        )

        assert res.status_code == status.HTTP_404_NOT_FOUND

    def test_failed_update_removes_new_file_and_keeps_old_one(
        self, api_client, user, refuse_writes_to, stored_files
    ):
        api_client.post(
            "/api/user/profile-pic",
            {
                "userId": user.pk,
                "image": SimpleUploadedFile("old.png", b"1", content_type="image/png"),
            },
            format="multipart",
        )
        user.refresh_from_db()
        kept = user.profile_pic.name
        refuse_writes_to("users_user")

        res = api_client.post(
            "/api/user/profile-pic",
            {
                "userId": user.pk,
                "image": SimpleUploadedFile("new.png", b"2", content_type="image/png"),
            },
            format="multipart",
        )

        assert res.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert stored_files() == [kept]
        user.refresh_from_db()
        assert user.profile_pic.name == kept
