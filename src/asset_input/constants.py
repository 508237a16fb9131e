"""Static lookup tables for the asset input engine."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Symbols displayed first when no search term is active. Lower index means
# higher priority; these are popular assets we can load an icon for.
SYMBOL_PRIORITY_LIST: tuple[str, ...] = (
    "MATIC",
    "KEEP",
    "ENS",
    "CRV",
    "FTM",
    "GRT",
    "BAL",
    "NU",
    "AMP",
    "BNT",
    "COMP",
    "UMA",
    "WLTC",
    "CVC",
)

DEFAULT_BASE_ASSET_SYMBOL = "ETH"

ADDRESS_QUERY_PREFIX = "0x"


def build_symbol_priority(symbols: Iterable[str]) -> Mapping[str, int]:
    """Build a read-only symbol -> rank table.

    The first symbol gets the highest rank (``len(symbols)``), the last gets 1.
    Symbols absent from the table rank 0.
    """
    ordered = list(symbols)
    return MappingProxyType(
        {symbol: len(ordered) - index for index, symbol in enumerate(ordered)}
    )


SYMBOL_PRIORITY: Mapping[str, int] = build_symbol_priority(SYMBOL_PRIORITY_LIST)
