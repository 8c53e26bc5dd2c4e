import logging

from services.address import parse_address
from services.eth_client import RpcClient
from services.models import TokenMetadata

logger = logging.getLogger(__name__)


def get_token_metadata(client: RpcClient, address_text: str) -> TokenMetadata:
    """
    Read name, symbol and total supply of a token contract.

    An address that is not a contract with this interface fails the
    same way as a network error (UpstreamRpcFailure).
    """
    address = parse_address(address_text)

    name = client.call_view(address, "name")
    symbol = client.call_view(address, "symbol")
    total_supply = client.call_view(address, "totalSupply")

    logger.debug("Token %s: %s (%s)", address, name, symbol)

    return TokenMetadata(
        address=address_text,
        name=name,
        symbol=symbol,
        total_supply=str(int(total_supply)),
    )
