"""Media store helpers shared by posts, market items and profile pictures.

Uploaded files land flat in ``MEDIA_ROOT`` and are named after their arrival
time plus the client-supplied file name, e.g. ``1718000000000-beach.jpg``.
They are served read-only under ``MEDIA_URL`` (``/uploads/``).
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from pathlib import PurePath
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import DatabaseError
from django.views.static import serve

if TYPE_CHECKING:  # import for type checking only
    from django.core.files.uploadedfile import UploadedFile

logger = logging.getLogger(__name__)

MEDIA_TYPE_NONE = "none"
MEDIA_TYPE_IMAGE = "image"
MEDIA_TYPE_VIDEO = "video"


def timestamped_upload_to(instance, filename: str) -> str:
    # Only the base name is kept; client paths never reach the storage.
    return f"{int(time.time() * 1000)}-{PurePath(filename).name}"


def media_type_for(upload: UploadedFile | None) -> str:
    """Classify an upload by its declared content type."""
    if upload is None:
        return MEDIA_TYPE_NONE
    content_type = getattr(upload, "content_type", None) or ""
    if content_type.startswith("video/"):
        return MEDIA_TYPE_VIDEO
    return MEDIA_TYPE_IMAGE


def file_url(field_file) -> str | None:
    """Public URL of a stored file, or None when the field is empty."""
    if not field_file:
        return None
    return field_file.url


@contextmanager
def discard_file_on_failure(instance, field_name: str):
    """Delete the file a failed save of ``instance`` already wrote.

    Storage writes happen inside the row save; on a store error the new file
    is removed again and the error propagates.
    """
    name_before = getattr(instance, field_name).name
    try:
        yield
    except DatabaseError:
        stored = getattr(instance, field_name)
        if stored and stored.name != name_before:
            logger.warning("Removing %s left by a failed save", stored.name)
            stored.delete(save=False)
        raise


def serve_upload(request, path: str):
    """Read-only view over the media store."""
    return serve(request, path, document_root=settings.MEDIA_ROOT)
