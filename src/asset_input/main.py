"""CLI entrypoint for asset-input."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Annotated

import typer

from .domain import Asset, AssetWithOptionalAmount
from .errors import error_message
from .formatter import print_assets_table
from .loader import AssetFileError, load_assets
from .logger import get_logger, setup_logging
from .processors import (
    find_selected_asset,
    is_max_available,
    max_amount,
    rank_assets,
    validate_selection,
)
from .settings import CONFIG_ENV_VAR, AssetInputSettings
from .state import AppState

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Rank assets and validate typed amounts against balances.",
)

AssetsFileArgument = Annotated[
    Path | None,
    typer.Argument(
        help="JSON asset list. Defaults to the configured assets_file.",
        show_default=False,
    ),
]


def _state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if not isinstance(state, AppState):
        raise typer.BadParameter("CLI state was not initialized")
    return state


def _load(state: AppState, assets_file: Path | None) -> list[AssetWithOptionalAmount]:
    path = assets_file or state.settings.assets_file
    if path is None:
        raise typer.BadParameter(
            "an assets file is required",
            param_hint=["ASSETS_FILE", "ASSET_INPUT_ASSETS_FILE"],
        )
    try:
        return load_assets(path)
    except AssetFileError as e:
        state.logger.error(str(e))
        raise typer.Exit(code=2) from e


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [asset_input] table).",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option("--show-config", help="Print effective config and exit."),
    ] = False,
):
    """Load configuration and logging shared by all commands."""
    if config_path:
        os.environ[CONFIG_ENV_VAR] = str(config_path)

    init_kwargs: dict[str, str] = {}
    if log_level is not None:
        init_kwargs["log_level"] = log_level.upper()

    settings = AssetInputSettings(**init_kwargs)
    setup_logging(settings.log_level)
    ctx.obj = AppState(settings=settings, logger=get_logger("asset_input"))

    if show_config:
        typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command()
def rank(
    ctx: typer.Context,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Search term typed by the user.")
    ] = "",
    assets_file: AssetsFileArgument = None,
    plain: Annotated[
        bool, typer.Option("--plain", help="Print one symbol per line.")
    ] = False,
):
    """Filter and order assets the way the selection menu shows them."""
    state = _state(ctx)
    assets = _load(state, assets_file)
    ranked = rank_assets(assets, search, state.settings.priority_table)

    if plain:
        for entry in ranked:
            typer.echo(entry.asset.symbol)
        return
    print_assets_table(ranked, search)


@app.command()
def validate(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Symbol of the selected asset.")],
    amount: Annotated[str, typer.Argument(help="Amount typed by the user.")],
    assets_file: AssetsFileArgument = None,
):
    """Check a typed amount against the selected asset's balance."""
    state = _state(ctx)
    assets = _load(state, assets_file)
    selection = find_selected_asset(Asset(symbol=symbol), assets)

    error = validate_selection(amount, selection)
    if error is not None:
        typer.echo(error_message(error))
        raise typer.Exit(code=1)
    typer.echo("ok")


@app.command("max")
def max_command(
    ctx: typer.Context,
    symbol: Annotated[str, typer.Argument(help="Symbol of the selected asset.")],
    assets_file: AssetsFileArgument = None,
):
    """Print the exact maximum amount available for an asset."""
    state = _state(ctx)
    assets = _load(state, assets_file)
    selection = find_selected_asset(Asset(symbol=symbol), assets)

    result = max_amount(selection)
    if result is None:
        state.logger.warning("No known balance for %s", symbol)
        raise typer.Exit(code=1)

    if not is_max_available(
        selection,
        state.settings.base_asset_symbol,
        state.settings.show_max_button,
    ):
        state.logger.warning("Max amount is not available for %s", symbol)
        raise typer.Exit(code=1)

    typer.echo(result.amount)
    if result.error is not None:
        state.logger.warning("%s: %s", symbol, error_message(result.error))


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
