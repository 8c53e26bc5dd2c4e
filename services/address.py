from eth_typing import ChecksumAddress
from eth_utils import is_hex_address, to_checksum_address

from services.errors import InvalidAddress


def parse_address(text: str) -> ChecksumAddress:
    """
    Parse caller input into a checksum address.

    Accepts a lowercase ``0x`` followed by exactly 40 hex digits in any letter
    case. Mixed-case input is not checked against EIP-55.
    """
    if not isinstance(text, str) or not text.startswith("0x") or not is_hex_address(text):
        raise InvalidAddress(text)
    return to_checksum_address(text)
