from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class AccountSnapshot:
    gas_price: str
    block_number: int
    balance: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gasPrice": self.gas_price,
            "blockNumber": self.block_number,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class TokenMetadata:
    # Echoes the caller's input, not the checksum form
    address: str
    name: str
    symbol: str
    total_supply: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "name": self.name,
            "symbol": self.symbol,
            "totalSupply": self.total_supply,
        }
