"""Registration, login and profile endpoints."""

import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError
from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser
from rest_framework.parsers import JSONParser
from rest_framework.parsers import MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from bu_connects.uploads import discard_file_on_failure
from bu_connects.users.models import User

from .serializers import LoginSerializer
from .serializers import ProfilePicSerializer
from .serializers import RegisterSerializer
from .serializers import SettingsSerializer
from .serializers import UserSerializer

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email registered!"
USER_NOT_FOUND = "User not found"


class RegisterView(APIView):
    @extend_schema(tags=["Auth"], request=RegisterSerializer)
    def post(self, request):
        # A taken email conflicts whatever the other fields hold.
        fields = request.data if hasattr(request.data, "get") else {}
        email = str(fields.get("email") or "").strip()
        if email and User.objects.filter(email__iexact=email).exists():
            return Response({"message": EMAIL_TAKEN}, status=status.HTTP_409_CONFLICT)

        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            # The unique email index settles a race between two registrations
            # that both passed the check above.
            with transaction.atomic():
                user = User.objects.create_user(
                    email=data["email"],
                    password=data["password"],
                    name=data["name"],
                    campus=data.get("campus", ""),
                )
        except IntegrityError:
            return Response({"message": EMAIL_TAKEN}, status=status.HTTP_409_CONFLICT)

        logger.info("Registered user %s on campus %s", user.pk, user.campus)
        return Response(
            {
                "message": "Registration successful!",
                "id": user.pk,
                "name": user.name,
                "email": user.email,
                "campus": user.campus,
            },
            status=status.HTTP_200_OK,
        )


class LoginView(APIView):
    @extend_schema(tags=["Auth"], request=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.info("Rejected login attempt")
            return Response(
                {"message": "Invalid email or password!"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response({"success": True, "user": UserSerializer(user).data})


class UserDetailView(APIView):
    @extend_schema(tags=["Users"], responses=UserSerializer)
    def get(self, request, pk: int):
        user = User.objects.filter(pk=pk).first()
        if user is None:
            return Response(
                {"message": USER_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND
            )
        return Response(UserSerializer(user).data)


class SettingsView(APIView):
    @extend_schema(tags=["Users"], request=SettingsSerializer)
    def put(self, request):
        serializer = SettingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        user = User.objects.filter(pk=data["userId"]).first()
        if user is None:
            return Response(
                {"message": USER_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND
            )
        update_fields = []
        if "motto" in data:
            user.motto = data["motto"]
            update_fields.append("motto")
        if data.get("password"):
            user.set_password(data["password"])
            update_fields.append("password")
        if update_fields:
            user.save(update_fields=update_fields)
        return Response({"message": "Settings updated!"})


class ProfilePicView(APIView):
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    @extend_schema(tags=["Users"], request=ProfilePicSerializer)
    def post(self, request):
        upload = request.FILES.get("image")
        if upload is None:
            return Response(
                {"message": "No image uploaded"}, status=status.HTTP_400_BAD_REQUEST
            )
        serializer = ProfilePicSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = User.objects.filter(pk=serializer.validated_data["userId"]).first()
        if user is None:
            return Response(
                {"message": USER_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND
            )
        user.profile_pic = upload
        with discard_file_on_failure(user, "profile_pic"), transaction.atomic():
            user.save(update_fields=["profile_pic"])
        logger.info("Profile picture stored for user %s: %s", user.pk, upload.name)
        return Response(
            {"message": "Profile picture updated!", "profile_pic": user.profile_pic.name}
        )
