from rest_framework import serializers

from bu_connects.market.models import MarketItem
from bu_connects.uploads import file_url


class MarketItemSerializer(serializers.ModelSerializer):
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = MarketItem
        fields = (
            "id",
            "name",
            "price",
            "description",
            "seller",
            "campus",
            "image_url",
            "created_at",
        )
        read_only_fields = fields

    def get_image_url(self, obj: MarketItem) -> str | None:
        return file_url(obj.image)


class MarketItemCreateSerializer(serializers.ModelSerializer):
    image = serializers.FileField(required=False, allow_empty_file=True)

    class Meta:
        model = MarketItem
        fields = ("name", "price", "description", "seller", "campus", "image")
        extra_kwargs = {
            "description": {"required": False},
            "campus": {"required": False},
        }
