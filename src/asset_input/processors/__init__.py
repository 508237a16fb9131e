from __future__ import annotations

from .amount_validator import (
    MaxAmount,
    find_selected_asset,
    is_max_available,
    max_amount,
    max_amount_string,
    parse_amount,
    validate_amount,
    validate_selection,
)
from .asset_ranker import (
    asset_list_key,
    filter_assets,
    rank_assets,
    sort_by_priority,
    sort_by_search_term,
)

__all__ = [
    "MaxAmount",
    "find_selected_asset",
    "is_max_available",
    "max_amount",
    "max_amount_string",
    "parse_amount",
    "validate_amount",
    "validate_selection",
    "asset_list_key",
    "filter_assets",
    "rank_assets",
    "sort_by_priority",
    "sort_by_search_term",
]
