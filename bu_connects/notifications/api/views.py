from __future__ import annotations

from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from bu_connects.notifications.models import Notification

from .serializers import NotificationSerializer

RECENT_LIMIT = 20


@extend_schema_view(get=extend_schema(tags=["Notifications"]))
class NotificationListView(generics.ListAPIView):
    """The recipient's most recent notifications, newest first."""

    serializer_class = NotificationSerializer
    pagination_class = None
    filter_backends = []

    def get_queryset(self):
        return Notification.objects.filter(
            user_id=self.kwargs["user_id"]
        ).select_related("actor")[:RECENT_LIMIT]


class NotificationMarkReadView(APIView):
    @extend_schema(tags=["Notifications"], request=None)
    def put(self, request, user_id: int):
        Notification.objects.filter(user_id=user_id, is_read=False).update(
            is_read=True
        )
        return Response({"message": "Marked all as read"})
