import logging

from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics
from rest_framework import status
from rest_framework.response import Response

from bu_connects.events.models import CampusEvent

from .serializers import CampusEventSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    get=extend_schema(
        tags=["Events"],
        parameters=[
            OpenApiParameter(
                name="campus",
                required=True,
                type=str,
                description="Campus whose events are listed",
            )
        ],
    ),
    post=extend_schema(tags=["Events"]),
)
class CampusEventListCreateView(generics.ListCreateAPIView):
    """Upcoming events of one campus, in date order."""

    serializer_class = CampusEventSerializer
    pagination_class = None
    filter_backends = []

    def get_queryset(self):
        return CampusEvent.objects.filter(
            campus=self.request.query_params.get("campus", "").strip()
        )

    def list(self, request, *args, **kwargs):
        if not request.query_params.get("campus", "").strip():
            return Response(
                {"message": "campus query parameter is required"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = serializer.save()
        logger.info("Event %s added for campus %s", event.pk, event.campus)
        return Response(
            {"message": "Event added!", "id": event.pk}, status=status.HTTP_200_OK
        )
