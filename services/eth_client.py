import json
import logging
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Optional

import requests
from django.utils.module_loading import import_string
from eth_abi.exceptions import DecodingError
from eth_typing import ChecksumAddress
from web3 import Web3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from services.config import GatewaySettings
from services.errors import (
    ContractCallError,
    RpcDecodeError,
    RpcNodeError,
    RpcTransportError,
)

logger = logging.getLogger(__name__)

# ===================================
# 1) Token ABI (name, symbol, totalSupply)
# ===================================
ABI_PATH = os.path.join(os.path.dirname(__file__), "erc20_abi.json")

with open(ABI_PATH, "r") as f:
    TOKEN_ABI = json.load(f)

TOKEN_VIEW_FUNCTIONS = tuple(item["name"] for item in TOKEN_ABI if item["type"] == "function")


# ===================================
# 2) Library exceptions -> gateway errors
# ===================================
@contextmanager
def translate_rpc_errors(operation: str):
    """
    Re-raise anything web3 (or its transport) throws as an
    UpstreamRpcFailure subclass, keeping the original as the cause.
    """
    try:
        yield
    except (ContractLogicError, BadFunctionCallOutput) as exc:
        raise ContractCallError(operation, "contract call failed") from exc
    except DecodingError as exc:
        raise RpcDecodeError(operation, "could not decode node response") from exc
    except requests.exceptions.RequestException as exc:
        raise RpcTransportError(operation, "node unreachable") from exc
    except (Web3Exception, ValueError, TypeError) as exc:
        raise RpcNodeError(operation, "node returned an error") from exc


# ===================================
# 3) Client interface + web3 implementation
# ===================================
class RpcClient(ABC):
    """Read-only view of a node, as used by the query services."""

    def __init__(self, config: GatewaySettings):
        self.config = config

    @abstractmethod
    def gas_price(self) -> int:
        ...

    @abstractmethod
    def block_number(self) -> int:
        ...

    @abstractmethod
    def balance_of(self, address: ChecksumAddress) -> int:
        ...

    @abstractmethod
    def call_view(self, address: ChecksumAddress, function_name: str) -> Any:
        """Call a no-argument view function of the token ABI."""


class Web3Client(RpcClient):
    def __init__(self, config: GatewaySettings, w3: Optional[Web3] = None):
        super().__init__(config)
        if w3 is None:
            provider = Web3.HTTPProvider(
                config.require_rpc_url(),
                request_kwargs={"timeout": config.rpc_timeout},
                exception_retry_configuration=None,
            )
            w3 = Web3(provider)
        self._w3 = w3

    @property
    def w3(self) -> Web3:
        return self._w3

    def gas_price(self) -> int:
        with translate_rpc_errors("eth_gasPrice"):
            return int(self.w3.eth.gas_price)

    def block_number(self) -> int:
        with translate_rpc_errors("eth_blockNumber"):
            return int(self.w3.eth.block_number)

    def balance_of(self, address: ChecksumAddress) -> int:
        with translate_rpc_errors("eth_getBalance"):
            return int(self.w3.eth.get_balance(address, "latest"))

    def call_view(self, address: ChecksumAddress, function_name: str) -> Any:
        if function_name not in TOKEN_VIEW_FUNCTIONS:
            raise ValueError(f"{function_name} is not part of the token ABI")

        with translate_rpc_errors(function_name):
            contract = self.w3.eth.contract(address=address, abi=TOKEN_ABI)
            return getattr(contract.functions, function_name)().call()


def build_client(config: GatewaySettings) -> RpcClient:
    """
    Instantiate the configured client class for one request.

    Raises MissingConfiguration before touching the network
    when no RPC URL is configured.
    """
    config.require_rpc_url()
    client_class = import_string(config.client_class)
    logger.debug("Using %s for %s", config.client_class, config.rpc_url)
    return client_class(config)
