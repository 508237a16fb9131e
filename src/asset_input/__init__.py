"""Asset ranking and fixed-point amount validation for asset input widgets."""

from .domain import Asset, AssetMetadata, AssetWithOptionalAmount, FixedPointAmount
from .errors import AmountError, error_message
from .processors import (
    MaxAmount,
    find_selected_asset,
    is_max_available,
    max_amount,
    max_amount_string,
    parse_amount,
    rank_assets,
    validate_amount,
    validate_selection,
)

__all__ = [
    "Asset",
    "AssetMetadata",
    "AssetWithOptionalAmount",
    "FixedPointAmount",
    "AmountError",
    "error_message",
    "MaxAmount",
    "find_selected_asset",
    "is_max_available",
    "max_amount",
    "max_amount_string",
    "parse_amount",
    "rank_assets",
    "validate_amount",
    "validate_selection",
]
