"""Load asset lists from JSON files."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .domain import Asset, AssetMetadata, AssetWithOptionalAmount, FixedPointAmount
from .units import fixed_point_to_string

logger = logging.getLogger(__name__)


class AssetFileError(Exception):
    """Raised when an asset list file cannot be read or is malformed."""


class AssetMetadataRecord(BaseModel):
    logo_url: str | None = Field(default=None, alias="logoURL")
    coingecko_id: str | None = Field(default=None, alias="coinGeckoID")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AssetRecord(BaseModel):
    symbol: str = Field(min_length=1)
    contract_address: str | None = Field(default=None, alias="contractAddress")
    decimals: int | None = Field(default=None, ge=0)
    metadata: AssetMetadataRecord | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_domain(self) -> Asset:
        metadata = None
        if self.metadata is not None:
            metadata = AssetMetadata(
                logo_url=self.metadata.logo_url,
                coingecko_id=self.metadata.coingecko_id,
            )
        return Asset(
            symbol=self.symbol,
            contract_address=self.contract_address,
            decimals=self.decimals,
            metadata=metadata,
        )


class AssetEntryRecord(BaseModel):
    """One list entry: an asset and, optionally, its raw balance."""

    asset: AssetRecord
    amount: int | None = Field(default=None, ge=0)
    localized_decimal_amount: str | None = Field(
        default=None, alias="localizedDecimalAmount"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_domain(self) -> AssetWithOptionalAmount:
        asset = self.asset.to_domain()
        localized = self.localized_decimal_amount
        if self.amount is not None and localized is None:
            localized = fixed_point_to_string(
                FixedPointAmount(self.amount, asset.decimals or 0)
            )
        return AssetWithOptionalAmount(
            asset=asset,
            amount=self.amount,
            localized_decimal_amount=localized,
        )


_ENTRIES_ADAPTER = TypeAdapter(list[AssetEntryRecord])


def parse_assets(raw: str | bytes) -> list[AssetWithOptionalAmount]:
    """Parse a JSON array of asset entries.

    Raises:
        AssetFileError: If the payload is not a valid asset list
    """
    try:
        records = _ENTRIES_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise AssetFileError(f"Invalid asset list: {e}") from e
    return [record.to_domain() for record in records]


def load_assets(path: Path) -> list[AssetWithOptionalAmount]:
    """Read and parse an asset list file.

    Raises:
        AssetFileError: If the file cannot be read or is not a valid asset list
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise AssetFileError(f"Cannot read asset list {path}: {e}") from e

    assets = parse_assets(raw)
    logger.debug("Loaded %d assets from %s", len(assets), path)
    return assets
