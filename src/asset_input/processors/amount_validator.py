from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..domain import Asset, AssetWithOptionalAmount, FixedPointAmount
from ..errors import AmountError
from ..units import fixed_point_to_string, parse_to_fixed_point, scale_to_decimals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaxAmount:
    """Result of the "use max" action."""

    amount: str
    error: AmountError | None = None


def parse_amount(text: str) -> FixedPointAmount | AmountError:
    """Parse user input, returning INVALID_AMOUNT when it is malformed."""
    parsed = parse_to_fixed_point(text.strip())
    if parsed is None:
        return AmountError.INVALID_AMOUNT
    return parsed


def validate_amount(
    text: str,
    selected_asset_decimals: int | None,
    balance: FixedPointAmount | None,
) -> AmountError | None:
    """Check a typed amount against the selected asset's balance.

    Args:
        text: Raw amount typed by the user
        selected_asset_decimals: Decimals of the selected asset, or None when
            no asset (or no fungible asset) is selected
        balance: Known balance of the selected asset, or None when unknown

    Returns:
        None when the amount is acceptable or cannot be checked (empty input,
        no selection, unknown balance). Otherwise the error kind to display.

    A balance of zero or less is always insufficient, even for a zero request.
    """
    if not text.strip() or selected_asset_decimals is None or balance is None:
        return None

    parsed = parse_amount(text)
    if isinstance(parsed, AmountError):
        logger.debug("Rejected malformed amount %r", text)
        return parsed

    requested = scale_to_decimals(
        parsed.amount, parsed.decimals, selected_asset_decimals
    )
    available = scale_to_decimals(
        balance.amount, balance.decimals, selected_asset_decimals
    )
    if requested > available or available <= 0:
        logger.debug(
            "Requested %r exceeds available balance at %d decimals",
            text,
            selected_asset_decimals,
        )
        return AmountError.INSUFFICIENT_BALANCE

    return None


def validate_selection(
    text: str, selection: AssetWithOptionalAmount | None
) -> AmountError | None:
    """Validate ``text`` against a selected asset and its known balance."""
    if (
        selection is None
        or not selection.has_amounts
        or not selection.asset.has_decimals
    ):
        return None
    return validate_amount(
        text, selection.asset.decimals, selection.fixed_point_amount
    )


def max_amount_string(balance: FixedPointAmount | None) -> str | None:
    """Exact decimal rendering of the whole balance, or None when unknown."""
    if balance is None:
        return None
    return fixed_point_to_string(balance)


def max_amount(selection: AssetWithOptionalAmount | None) -> MaxAmount | None:
    """Compute the "use max" amount and its validation result.

    Returns None when there is no selection with a known balance, in which
    case the caller should not emit an amount change.
    """
    if selection is None or not selection.has_amounts:
        return None

    amount = max_amount_string(selection.fixed_point_amount)
    if amount is None:
        return None
    return MaxAmount(amount=amount, error=validate_selection(amount, selection))


def find_selected_asset(
    asset: Asset, assets: Sequence[AssetWithOptionalAmount]
) -> AssetWithOptionalAmount:
    """Find the list entry for ``asset``, matching on symbol.

    An asset missing from the list is treated as held with a zero balance.
    """
    for entry in assets:
        if entry.asset.symbol == asset.symbol:
            return entry

    return AssetWithOptionalAmount(
        asset=Asset(
            symbol=asset.symbol,
            contract_address=asset.contract_address,
            decimals=1,
            metadata=asset.metadata,
        ),
        amount=0,
        localized_decimal_amount="0",
    )


def is_max_available(
    selection: AssetWithOptionalAmount | None,
    base_asset_symbol: str,
    show_max_button: bool = True,
) -> bool:
    """Whether the "use max" action applies to the current selection.

    The network's base asset is excluded since part of it pays for fees.
    """
    return (
        show_max_button
        and selection is not None
        and selection.has_amounts
        and selection.asset.symbol != base_asset_symbol
    )
