# api/views.py

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from services.account import get_account_snapshot
from services.config import get_gateway_settings
from services.errors import InvalidAddress, MissingConfiguration, UpstreamRpcFailure
from services.eth_client import build_client
from services.token import get_token_metadata

logger = logging.getLogger(__name__)

# Compact separators keep bodies byte-stable across requests
COMPACT_JSON = {"separators": (",", ":")}

UPSTREAM_FAILURE_STATUS = 400


def _run_query(query, address):
    """
    Build a client, run one query service and map gateway errors
    to status codes. The body is either the full record or
    a single ``error`` field.
    """
    try:
        client = build_client(get_gateway_settings())
        result = query(client, address)

    except MissingConfiguration as e:
        logger.error("Gateway misconfigured: %s", e)
        return JsonResponse({"error": str(e)}, status=500)

    except InvalidAddress as e:
        logger.info("Rejected address %r", e.text)
        return JsonResponse({"error": str(e)}, status=400)

    except UpstreamRpcFailure as e:
        logger.warning(
            "Upstream %s failed for %s (%s): %r",
            e.operation,
            address,
            type(e).__name__,
            e.__cause__,
        )
        return JsonResponse({"error": str(e)}, status=UPSTREAM_FAILURE_STATUS)

    return JsonResponse(result.to_dict(), json_dumps_params=COMPACT_JSON)


# -----------------------------
# ACCOUNT SNAPSHOT
# GET /api/eth/<address>
# -----------------------------
@require_GET
def account_view(request, address):
    return _run_query(get_account_snapshot, address)


# -----------------------------
# TOKEN METADATA
# GET /api/token/<address>
# -----------------------------
@require_GET
def token_view(request, address):
    return _run_query(get_token_metadata, address)
