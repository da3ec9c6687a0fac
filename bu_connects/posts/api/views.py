import logging

from django.db import transaction
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import generics
from rest_framework import status
from rest_framework.parsers import FormParser
from rest_framework.parsers import JSONParser
from rest_framework.parsers import MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from bu_connects.posts.models import Post
from bu_connects.posts.models import PostComment
from bu_connects.posts.services import toggle_like
from bu_connects.uploads import discard_file_on_failure
from bu_connects.uploads import file_url
from bu_connects.uploads import media_type_for

from .filters import PostFilter
from .serializers import CommentCreateSerializer
from .serializers import LikeToggleSerializer
from .serializers import PostCommentSerializer
from .serializers import PostCreateSerializer
from .serializers import PostSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    get=extend_schema(
        tags=["Posts"],
        parameters=[
            OpenApiParameter(
                name="campus",
                required=False,
                type=str,
                description="Only posts from this campus",
            )
        ],
    ),
    post=extend_schema(tags=["Posts"], request=PostCreateSerializer),
)
class PostListCreateView(generics.ListAPIView):
    """Campus feed, newest first, plus post creation with one optional file."""

    queryset = Post.objects.all()
    serializer_class = PostSerializer
    filterset_class = PostFilter
    pagination_class = None
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def post(self, request, *args, **kwargs):
        serializer = PostCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        upload = request.FILES.get("media")
        post = Post(
            author=data["author"],
            content=data["content"],
            campus=data["campus"],
            media=upload,
            media_type=media_type_for(upload),
        )
        with discard_file_on_failure(post, "media"), transaction.atomic():
            post.save()
        logger.info("Post %s created with media_type=%s", post.pk, post.media_type)

        return Response(
            {
                "message": "Post created",
                "id": post.pk,
                "media_url": file_url(post.media),
                "media_type": post.media_type,
            },
            status=status.HTTP_200_OK,
        )


class PostDeleteView(APIView):
    @extend_schema(tags=["Posts"])
    def delete(self, request, pk: int):
        # Likes and comments go with the post (on_delete=CASCADE).
        deleted, _ = Post.objects.filter(pk=pk).delete()
        logger.info("Delete post %s: %s rows removed", pk, deleted)
        return Response({"message": "Post deleted successfully"})


class LikeToggleView(APIView):
    @extend_schema(tags=["Posts"], request=LikeToggleSerializer)
    def post(self, request):
        serializer = LikeToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        liked = toggle_like(
            serializer.validated_data["post_id"],
            serializer.validated_data["user_id"],
        )
        return Response({"liked": liked})


@extend_schema_view(get=extend_schema(tags=["Comments"]))
class PostCommentListView(generics.ListAPIView):
    serializer_class = PostCommentSerializer
    pagination_class = None
    filter_backends = []

    def get_queryset(self):
        return PostComment.objects.filter(post_id=self.kwargs["post_id"])


class CommentCreateView(APIView):
    @extend_schema(tags=["Comments"], request=CommentCreateSerializer)
    def post(self, request):
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = PostComment.objects.create(**serializer.validated_data)
        return Response({"message": "Comment added", "id": comment.pk})
