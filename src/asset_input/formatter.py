"""Rich console formatter for ranked asset lists."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .domain import AssetWithOptionalAmount
from .processors.asset_ranker import asset_list_key


def _truncate_address(address: str) -> str:
    """Truncate address for display."""
    if len(address) <= 16:
        return address
    return f"{address[:10]}...{address[-4:]}"


def build_assets_table(
    assets: Sequence[AssetWithOptionalAmount], search_term: str = ""
) -> Table:
    """Build a table of assets in the order given."""
    title = f"Assets matching {search_term.strip()!r}" if search_term.strip() else "Assets"
    table = Table(title=title, expand=False, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Symbol", style="cyan", no_wrap=True)
    table.add_column("Contract", style="dim", no_wrap=True)
    table.add_column("Decimals", justify="right")
    table.add_column("Balance", justify="right", style="green")
    table.add_column("Key", style="dim", no_wrap=True)

    for position, entry in enumerate(assets, start=1):
        asset = entry.asset
        table.add_row(
            str(position),
            asset.symbol,
            _truncate_address(asset.contract_address) if asset.contract_address else "—",
            str(asset.decimals) if asset.has_decimals else "—",
            entry.localized_decimal_amount if entry.has_amounts else "[dim]<unknown>[/]",
            asset_list_key(asset),
        )

    return table


def print_assets_table(
    assets: Sequence[AssetWithOptionalAmount],
    search_term: str = "",
    console: Console | None = None,
) -> None:
    """Print ranked assets to stdout."""
    (console or Console()).print(build_assets_table(assets, search_term))
