import pytest
from django.contrib.auth import get_user_model

from bu_connects.users.auth_backends import EmailBackend

pytestmark = pytest.mark.django_db
User = get_user_model()


class TestEmailBackend:
    def setup_method(self):
        self.backend = EmailBackend()
        self.password = "Sahm1232"  # noqa: S105  # Allow hardcoded password in test
        self.user = User.objects.create_user(
            email="test@gmail.com",
            password=self.password,
        )

    def test_authenticate_with_email_keyword(self):
        user = self.backend.authenticate(
            None,
            email="test@gmail.com",
            password=self.password,
        )
        assert user == self.user

    def test_authenticate_with_username_keyword(self):
        user = self.backend.authenticate(
            None,
            username="test@gmail.com",
            password=self.password,
        )
        assert user == self.user

    def test_authenticate_ignores_email_case(self):
        user = self.backend.authenticate(
            None,
            email="Test@Gmail.com",
            password=self.password,
        )
        assert user == self.user

    def test_authenticate_with_wrong_email(self):
        user = self.backend.authenticate(
            None,
            email="wrong@gmail.com",
            password=self.password,
        )
        assert user is None

    def test_wrong_password_with_correct_email(self):
        user = self.backend.authenticate(
            None,
            email="test@gmail.com",
            password="wrongpass",  # noqa: S106
        )
        assert user is None

    def test_missing_credentials(self):
        assert self.backend.authenticate(None, email=None, password=None) is None
