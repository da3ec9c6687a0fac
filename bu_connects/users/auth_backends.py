from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class EmailBackend(ModelBackend):
    """Authenticate by case-insensitive email against the salted hash."""

    def authenticate(self, request, username=None, password=None, **kwargs):
        usermodel = get_user_model()
        email = kwargs.get("email", username)
        if email is None or password is None:
            return None
        try:
            user = usermodel.objects.get(email__iexact=email)
        except usermodel.DoesNotExist:
            # Run the hasher once so a missing account costs the same time
            # as a wrong password.
            usermodel().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
