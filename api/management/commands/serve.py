import logging

from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from services.config import get_gateway_settings, parse_port
from services.errors import MissingConfiguration

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Serve the gateway on GATEWAY_HOST:GATEWAY_PORT until the process is stopped."

    def add_arguments(self, parser):
        parser.add_argument("--host", default=None, help="Override GATEWAY_HOST.")
        parser.add_argument("--port", default=None, help="Override GATEWAY_PORT.")

    def handle(self, *args, **options):
        config = get_gateway_settings()

        # Fail at startup rather than on the first request
        try:
            config.require_rpc_url()
        except MissingConfiguration as e:
            raise CommandError(str(e))

        host = options["host"] or config.host
        try:
            port = parse_port(options["port"]) if options["port"] is not None else config.port
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        ipv6 = ":" in host
        addrport = f"[{host}]:{port}" if ipv6 else f"{host}:{port}"

        logger.info("Serving on http://%s", addrport)
        call_command("runserver", addrport, use_ipv6=ipv6, use_reloader=False)
