from __future__ import annotations

import logging

from django.db import IntegrityError
from django.db import transaction

from .models import PostLike

logger = logging.getLogger(__name__)


def toggle_like(post_id: int, user_id: int) -> bool:
    """Flip the like state of (post, user) and return the new state.

    Unliking is a single DELETE. Liking inserts inside a savepoint; the
    unique (post, user) constraint rejects a second row, in which case a
    concurrent request already liked the post and the outcome is the same.
    """
    deleted, _ = PostLike.objects.filter(post_id=post_id, user_id=user_id).delete()
    if deleted:
        return False
    try:
        with transaction.atomic():
            PostLike.objects.create(post_id=post_id, user_id=user_id)
    except IntegrityError:
        logger.info(
            "Concurrent like already recorded for post=%s user=%s", post_id, user_id
        )
    return True
