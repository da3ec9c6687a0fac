from django.urls import path

from bu_connects.chat.api.views import ConversationView
from bu_connects.events.api.views import CampusEventListCreateView
from bu_connects.market.api.views import MarketItemListCreateView
from bu_connects.notifications.api.views import NotificationListView
from bu_connects.notifications.api.views import NotificationMarkReadView
from bu_connects.posts.api.views import CommentCreateView
from bu_connects.posts.api.views import LikeToggleView
from bu_connects.posts.api.views import PostCommentListView
from bu_connects.posts.api.views import PostDeleteView
from bu_connects.posts.api.views import PostListCreateView
from bu_connects.users.api.views import LoginView
from bu_connects.users.api.views import ProfilePicView
from bu_connects.users.api.views import RegisterView
from bu_connects.users.api.views import SettingsView
from bu_connects.users.api.views import UserDetailView

app_name = "api"
# Paths carry no trailing slash; clients call them exactly as listed.
urlpatterns = [
    # Posts, likes, comments
    path("posts", PostListCreateView.as_view(), name="post-list"),
    path("posts/like", LikeToggleView.as_view(), name="post-like"),
    path("posts/comment", CommentCreateView.as_view(), name="post-comment"),
    path("posts/<int:pk>", PostDeleteView.as_view(), name="post-detail"),
    path(
        "posts/<int:post_id>/comments",
        PostCommentListView.as_view(),
        name="post-comments",
    ),
    # Notifications
    path(
        "notifications/read/<int:user_id>",
        NotificationMarkReadView.as_view(),
        name="notifications-read",
    ),
    path(
        "notifications/<int:user_id>",
        NotificationListView.as_view(),
        name="notifications",
    ),
    # Marketplace and events
    path("market", MarketItemListCreateView.as_view(), name="market"),
    path("events", CampusEventListCreateView.as_view(), name="events"),
    # Users and auth
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("settings", SettingsView.as_view(), name="settings"),
    path("user/profile-pic", ProfilePicView.as_view(), name="user-profile-pic"),
    path("user/<int:pk>", UserDetailView.as_view(), name="user-detail"),
    # Chat history
    path(
        "messages/<str:user1>/<str:user2>",
        ConversationView.as_view(),
        name="messages",
    ),
]
