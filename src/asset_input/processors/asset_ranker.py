from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Mapping, Sequence

from ..addresses import normalize_address_query, normalize_evm_address
from ..constants import ADDRESS_QUERY_PREFIX, SYMBOL_PRIORITY, build_symbol_priority
from ..domain import Asset, AssetWithOptionalAmount

logger = logging.getLogger(__name__)

__all__ = [
    "asset_list_key",
    "build_symbol_priority",
    "filter_assets",
    "rank_assets",
    "sort_by_priority",
    "sort_by_search_term",
    "symbol_collation_key",
]


def _primary_weight(char: str) -> tuple[int, str]:
    # Punctuation and symbols sort before digits, digits before letters.
    if char.isalpha():
        return (2, char)
    if char.isdigit():
        return (1, char)
    return (0, char)


def symbol_collation_key(
    symbol: str,
) -> tuple[tuple[tuple[int, str], ...], str, tuple[bool, ...]]:
    """Sort key approximating locale-aware string comparison.

    Symbols compare first ignoring accents and case, then by accents, and
    finally lowercase sorts before uppercase ("eth" < "ETH" < "ETHx").
    Punctuation sorts ahead of digits and digits ahead of letters, so
    "A_B" < "A1B" < "AAB".
    """
    decomposed = unicodedata.normalize("NFD", symbol)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return (
        tuple(_primary_weight(char) for char in base.casefold()),
        decomposed.casefold(),
        tuple(char.isupper() for char in decomposed),
    )


def _matches_address(asset: Asset, search_term: str) -> bool:
    if asset.contract_address is None:
        return False
    if not search_term.startswith(ADDRESS_QUERY_PREFIX):
        return False
    return normalize_address_query(search_term) in normalize_evm_address(
        asset.contract_address
    ) and len(asset.contract_address) >= len(search_term)


def filter_assets(
    assets: Sequence[AssetWithOptionalAmount], search_term: str
) -> list[AssetWithOptionalAmount]:
    """Keep assets whose symbol or contract address matches ``search_term``.

    Symbols match on a case-insensitive substring. Contract addresses match
    only for ``0x``-prefixed terms, comparing normalized hex so that partial
    and mixed-case input both work.
    """
    lowered = search_term.lower()
    return [
        entry
        for entry in assets
        if lowered in entry.asset.symbol.lower()
        or _matches_address(entry.asset, search_term)
    ]


def sort_by_priority(
    assets: Sequence[AssetWithOptionalAmount],
    priority: Mapping[str, int] | None = None,
) -> list[AssetWithOptionalAmount]:
    """Order prioritized symbols first, then alphabetically."""
    table = SYMBOL_PRIORITY if priority is None else priority
    return sorted(
        assets,
        key=lambda entry: (
            -table.get(entry.asset.symbol, 0),
            symbol_collation_key(entry.asset.symbol),
        ),
    )


def sort_by_search_term(
    assets: Sequence[AssetWithOptionalAmount], search_term: str
) -> list[AssetWithOptionalAmount]:
    """Order symbols starting with ``search_term`` first, then alphabetically.

    Matching is case-insensitive. No filtering is performed: given
    [DAAD, AD, AB, AC, AA] and the term "AA", the result is
    [AA, AB, AC, AD, DAAD].
    """
    starts_with_term = re.compile(re.escape(search_term), re.IGNORECASE)
    return sorted(
        assets,
        key=lambda entry: (
            starts_with_term.match(entry.asset.symbol) is None,
            symbol_collation_key(entry.asset.symbol),
        ),
    )


def rank_assets(
    assets: Sequence[AssetWithOptionalAmount],
    search_term: str,
    priority: Mapping[str, int] | None = None,
) -> list[AssetWithOptionalAmount]:
    """Filter and order assets for display in the selection menu.

    Args:
        assets: Candidate assets, left untouched
        search_term: Raw text typed in the search field
        priority: Symbol rank table; defaults to SYMBOL_PRIORITY

    Returns:
        A new list. With an empty (or whitespace-only) term, all assets in
        priority order; otherwise the matching assets with start-anchored
        symbol matches first.
    """
    term = search_term.strip()
    if not term:
        return sort_by_priority(assets, priority)

    filtered = filter_assets(assets, term)
    logger.debug(
        "Search %r matched %d of %d assets", term, len(filtered), len(assets)
    )
    return sort_by_search_term(filtered, term)


def asset_list_key(asset: Asset) -> str:
    """Stable key identifying an asset within a rendered list."""
    if asset.metadata is not None and asset.metadata.coingecko_id:
        return asset.metadata.coingecko_id
    return asset.symbol + (asset.contract_address or "")
