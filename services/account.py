import logging

from services.address import parse_address
from services.eth_client import RpcClient
from services.models import AccountSnapshot

logger = logging.getLogger(__name__)


def get_account_snapshot(client: RpcClient, address_text: str) -> AccountSnapshot:
    """
    Read gas price, latest block number and balance for an address.

    The three reads are independent round trips and may observe
    slightly different chain heads. Any failing read aborts the whole
    snapshot with UpstreamRpcFailure.

    Raises:
        InvalidAddress: ``address_text`` is not a 0x-prefixed 20-byte hex string
        UpstreamRpcFailure: a node read failed
    """
    address = parse_address(address_text)

    gas_price = client.gas_price()
    block_number = client.block_number()
    balance = client.balance_of(address)

    logger.debug("Account %s at block %s: balance=%s", address, block_number, balance)

    # Wei amounts stay strings so values above 2**53 survive JSON consumers
    return AccountSnapshot(
        gas_price=str(int(gas_price)),
        block_number=int(block_number),
        balance=str(int(balance)),
    )
