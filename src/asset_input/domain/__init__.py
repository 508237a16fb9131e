"""Domain models for the asset input engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetMetadata:
    """Optional display metadata attached to an asset."""

    logo_url: str | None = None
    coingecko_id: str | None = None


@dataclass(frozen=True)
class Asset:
    """Represents a selectable asset.

    Contract-based assets carry a ``contract_address``; fungible assets carry
    ``decimals`` defining their fixed-point scale. Either may be absent.
    """

    symbol: str
    contract_address: str | None = None
    decimals: int | None = None
    metadata: AssetMetadata | None = None

    def __post_init__(self) -> None:
        if self.decimals is not None and self.decimals < 0:
            raise ValueError(
                f"decimals must be non-negative for {self.symbol}: {self.decimals}"
            )

    @property
    def has_contract_address(self) -> bool:
        return self.contract_address is not None

    @property
    def has_decimals(self) -> bool:
        return self.decimals is not None


@dataclass(frozen=True)
class FixedPointAmount:
    """An exact quantity equal to ``amount / 10**decimals``."""

    amount: int
    decimals: int

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative: {self.decimals}")


@dataclass(frozen=True)
class AssetWithOptionalAmount:
    """An asset with its balance, when one is known."""

    asset: Asset
    amount: int | None = None
    localized_decimal_amount: str | None = None

    @property
    def has_amounts(self) -> bool:
        return self.amount is not None and self.localized_decimal_amount is not None

    @property
    def fixed_point_amount(self) -> FixedPointAmount | None:
        """Balance at the asset's scale (0 decimals when the asset has none)."""
        if self.amount is None:
            return None
        return FixedPointAmount(self.amount, self.asset.decimals or 0)
