"""DRF exception handler mapping store failures to JSON 500 responses."""

from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_STORE_ERROR = "Internal server error"


def api_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(
            "Store failure in %s", type(view).__name__ if view else "unknown view"
        )
        detail = str(exc) if settings.API_EXPOSE_STORE_ERRORS else GENERIC_STORE_ERROR
        return Response(
            {"error": detail}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, (Http404, NotFound)):
        response.data = {"message": str(getattr(exc, "detail", exc)) or "Not found"}
    return response
