from __future__ import annotations

import uvicorn
from django.conf import settings
from django.core.management.base import BaseCommand
from django.core.management.base import CommandParser


class Command(BaseCommand):
    help = "Serve the HTTP API and the Socket.IO channel with uvicorn"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--host",
            dest="host",
            default="0.0.0.0",  # noqa: S104
            help="Interface to bind (default: all interfaces)",
        )
        parser.add_argument(
            "--port",
            dest="port",
            type=int,
            default=None,
            help="Port to listen on (default: the PORT setting)",
        )
        parser.add_argument(
            "--reload",
            dest="reload",
            action="store_true",
            help="Restart on code changes (development only)",
        )

    def handle(self, *args, **options) -> None:
        port = options.get("port") or settings.PORT
        self.stdout.write(f"Server running on http://{options['host']}:{port}")
        uvicorn.run(
            "config.asgi:application",
            host=options["host"],
            port=port,
            reload=options["reload"],
            # Django's LOGGING stays in charge.
            log_config=None,
        )
