from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import CharField
from django.db.models import EmailField
from django.db.models.functions import Lower
from django.utils.translation import gettext_lazy as _

from bu_connects.uploads import timestamped_upload_to

from .managers import UserManager


class User(AbstractUser):
    """
    Campus network member. Signs in with email; never deleted through the API.
    """

    # First and last name do not cover name patterns around the globe
    name = CharField(_("Name of User"), blank=True, max_length=255)
    first_name = None  # type: ignore[assignment]
    last_name = None  # type: ignore[assignment]
    username = None  # type: ignore[assignment]
    email = EmailField(_("email address"), unique=True)
    campus = CharField(_("Campus"), max_length=100, blank=True, default="")
    motto = CharField(_("Motto"), max_length=255, blank=True, default="")
    profile_pic = models.FileField(
        upload_to=timestamped_upload_to, blank=True, null=True, max_length=255
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta(AbstractUser.Meta):
        constraints = [
            models.UniqueConstraint(Lower("email"), name="unique_user_email_ci"),
        ]

    def __str__(self) -> str:
        return self.email
