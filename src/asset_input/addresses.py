"""Canonical forms for hex-encoded chain addresses."""

from __future__ import annotations

import re

from eth_typing import HexStr
from eth_utils import add_0x_prefix, remove_0x_prefix

_WHOLE_HEX_BYTES = re.compile(r"(?:[0-9a-fA-F]{2})*")


def normalize_hex_address(value: str) -> HexStr:
    """Normalize a (possibly partial) hex address.

    The payload is lowercased and left-padded with a single ``0`` nibble when
    it has an odd number of digits. Decoding stops at the first pair of
    characters that is not a valid hex byte, so ``"0xabzz"`` becomes ``"0xab"``.

    Examples:
        normalize_hex_address("0xABC") -> "0x0abc"
        normalize_hex_address("0x1F98") -> "0x1f98"
    """
    payload = remove_0x_prefix(HexStr(value))
    if len(payload) % 2:
        payload = "0" + payload

    match = _WHOLE_HEX_BYTES.match(payload)
    decoded = match.group(0) if match else ""
    return add_0x_prefix(HexStr(decoded.lower()))


def normalize_evm_address(address: str) -> HexStr:
    """Normalize an EVM contract address for case-insensitive comparison."""
    return normalize_hex_address(address)


def normalize_address_query(term: str) -> str:
    """Normalize a partial address typed by a user.

    Drops the single ``0`` nibble that normalization may prepend to an
    odd-length query, so ``"0xabc"`` searches for ``"0xabc"`` rather than
    ``"0x0abc"``.
    """
    return re.sub(r"^0x0?", "0x", normalize_hex_address(term))

