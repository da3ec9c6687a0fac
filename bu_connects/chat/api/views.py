from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics

from bu_connects.chat.services import conversation

from .serializers import MessageSerializer


@extend_schema_view(get=extend_schema(tags=["Chat"]))
class ConversationView(generics.ListAPIView):
    """History between two participants. New messages arrive over the socket."""

    serializer_class = MessageSerializer
    pagination_class = None
    filter_backends = []

    def get_queryset(self):
        return conversation(self.kwargs["user1"], self.kwargs["user2"])
