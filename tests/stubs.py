from typing import Any, Dict, List, Set, Tuple

from services.config import GatewaySettings
from services.errors import ContractCallError, RpcTransportError
from services.eth_client import RpcClient

TEST_TOKEN = "0xAbC0000000000000000000000000000000000001"


class StubChain:
    """
    In-memory chain state. Tokens are keyed by lowercase address.
    Any operation listed in `fail_on` raises a transport error.
    """

    def __init__(self):
        self.gas_price = 21000000000
        self.block_number = 18000000
        self.balances: Dict[str, int] = {}
        self.default_balance = 1000000000000000000
        self.tokens: Dict[str, Tuple[str, str, int]] = {
            TEST_TOKEN.lower(): ("TestToken", "TT", 1000000000000000000000),
        }
        self.fail_on: Set[str] = set()
        self.calls: List[str] = []


class StubRpcClient(RpcClient):
    chain = StubChain()

    def __init__(self, config: GatewaySettings, chain: StubChain = None):
        super().__init__(config)
        if chain is not None:
            self.chain = chain

    def _record(self, operation: str):
        self.chain.calls.append(operation)
        if operation in self.chain.fail_on:
            raise RpcTransportError(operation, "node unreachable") from ConnectionError("stubbed")

    def gas_price(self) -> int:
        self._record("eth_gasPrice")
        return self.chain.gas_price

    def block_number(self) -> int:
        self._record("eth_blockNumber")
        return self.chain.block_number

    def balance_of(self, address) -> int:
        self._record("eth_getBalance")
        return self.chain.balances.get(address.lower(), self.chain.default_balance)

    def call_view(self, address, function_name: str) -> Any:
        self._record(function_name)
        token = self.chain.tokens.get(address.lower())
        if token is None:
            raise ContractCallError(function_name, "contract call failed")
        name, symbol, total_supply = token
        return {"name": name, "symbol": symbol, "totalSupply": total_supply}[function_name]
