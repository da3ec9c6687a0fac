import logging

from django.db import transaction
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics
from rest_framework.parsers import FormParser
from rest_framework.parsers import JSONParser
from rest_framework.parsers import MultiPartParser
from rest_framework.response import Response

from bu_connects.market.models import MarketItem
from bu_connects.uploads import discard_file_on_failure

from .serializers import MarketItemCreateSerializer
from .serializers import MarketItemSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    get=extend_schema(tags=["Market"]),
    post=extend_schema(tags=["Market"], request=MarketItemCreateSerializer),
)
class MarketItemListCreateView(generics.ListAPIView):
    queryset = MarketItem.objects.all()
    serializer_class = MarketItemSerializer
    pagination_class = None
    filter_backends = []
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def post(self, request, *args, **kwargs):
        serializer = MarketItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        # Only the single file under "image" is kept.
        item = MarketItem(
            **{**serializer.validated_data, "image": request.FILES.get("image")}
        )
        with discard_file_on_failure(item, "image"), transaction.atomic():
            item.save()
        logger.info("Market item %s listed by %s", item.pk, item.seller)
        return Response({"message": "Item listed successfully!", "id": item.pk})
