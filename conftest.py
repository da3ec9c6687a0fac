from pathlib import Path

import pytest
from django.db import DatabaseError
from django.db.backends.utils import CursorWrapper
from rest_framework.test import APIClient

from bu_connects.users.models import User

TEST_PASSWORD = "s3cret-pass"  # noqa: S105


@pytest.fixture(autouse=True)
def _media_storage(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "uploads")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(db) -> User:
    return User.objects.create_user(
        email="member@example.com",
        password=TEST_PASSWORD,
        name="Campus Member",
        campus="Main",
    )


@pytest.fixture
def other_user(db) -> User:
    return User.objects.create_user(
        email="friend@example.com",
        password=TEST_PASSWORD,
        name="Campus Friend",
        campus="Main",
    )


@pytest.fixture
def refuse_writes_to(monkeypatch):
    """Make every INSERT or UPDATE on the given table fail like a store error."""

    def install(table: str) -> None:
        execute = CursorWrapper.execute

        def refusing_execute(self, sql, params=None):
            statement = sql.lstrip().upper()
            if statement.startswith(("INSERT", "UPDATE")) and f'"{table}"' in sql:
                msg = f"writes to {table} refused"
                raise DatabaseError(msg)
            return execute(self, sql, params)

        monkeypatch.setattr(CursorWrapper, "execute", refusing_execute)

    return install


@pytest.fixture
def stored_files(settings):
    def listing() -> list[str]:
        root = Path(settings.MEDIA_ROOT)
        if not root.exists():
            return []
        return sorted(p.name for p in root.rglob("*") if p.is_file())

    return listing
