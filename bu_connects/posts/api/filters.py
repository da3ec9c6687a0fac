import django_filters

from bu_connects.posts.models import Post

# Placeholder values some clients send when no campus is selected.
_NO_CAMPUS = {"", "undefined", "null"}


class PostFilter(django_filters.FilterSet):
    campus = django_filters.CharFilter(method="filter_campus")

    class Meta:
        model = Post
        fields = ["campus"]

    def filter_campus(self, queryset, name, value):
        if value is None or value.strip() in _NO_CAMPUS:
            return queryset
        return queryset.filter(campus=value)
