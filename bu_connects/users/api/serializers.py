from rest_framework import serializers

from bu_connects.users.models import User


class UserSerializer(serializers.ModelSerializer[User]):
    """Public projection of a user. Never carries the password."""

    profile_pic = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "name", "email", "campus", "motto", "profile_pic"]
        read_only_fields = fields

    def get_profile_pic(self, obj: User) -> str | None:
        return obj.profile_pic.name or None


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    campus = serializers.CharField(max_length=100, allow_blank=True, required=False)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    # Blank is a wrong password, answered by the backend with 401.
    password = serializers.CharField(
        write_only=True, allow_blank=True, trim_whitespace=False
    )


class SettingsSerializer(serializers.Serializer):
    userId = serializers.IntegerField()  # noqa: N815
    motto = serializers.CharField(max_length=255, allow_blank=True, required=False)
    # Empty or missing leaves the current password untouched.
    password = serializers.CharField(
        write_only=True,
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )


class ProfilePicSerializer(serializers.Serializer):
    userId = serializers.IntegerField()  # noqa: N815
    image = serializers.FileField(required=False, allow_empty_file=True)
