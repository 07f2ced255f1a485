"""Command line entrypoint for listing Morpho vaults."""

import asyncio
import json
import logging
from dataclasses import asdict
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import get_settings
from src.core.constants import DEFAULT_VAULT_PAGE_SIZE
from src.core.exceptions import MorphoClientError
from src.core.models import VaultRecord
from src.data.clients.morpho import MorphoVaultClient

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
    help="Morpho vaults client.",
)


def _format_pct(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value * 100:.2f}%"


def _format_usd(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.2f}M"
    if value >= 1_000:
        return f"${value / 1_000:.1f}K"
    return f"${value:.2f}"


def build_vault_table(vaults: List[VaultRecord]) -> Table:
    """Render vault records as a rich table."""
    table = Table(title=f"Morpho Vaults ({len(vaults)})", header_style="bold #ff8c00")
    table.add_column("Vault")
    table.add_column("Symbol")
    table.add_column("Asset")
    table.add_column("Chain")
    table.add_column("APY", justify="right")
    table.add_column("Liquidity", justify="right")
    table.add_column("Warnings")
    table.add_column("Listed", justify="center")

    for vault in vaults:
        table.add_row(
            vault.name,
            vault.symbol,
            vault.asset.symbol if vault.asset else "-",
            vault.chain.network if vault.chain else "-",
            _format_pct(vault.latest_apy),
            _format_usd(vault.liquidity.usd if vault.liquidity else None),
            ", ".join(vault.warning_levels) or "-",
            "yes" if vault.whitelisted else "no",
        )

    return table


@app.callback()
def main_callback() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)


@app.command()
def vaults(
    first: Annotated[int, typer.Option("--first", "-n", help="Number of vaults to fetch.")] = DEFAULT_VAULT_PAGE_SIZE,
    skip: Annotated[int, typer.Option("--skip", help="Number of vaults to skip.")] = 0,
    as_json: Annotated[bool, typer.Option("--json", help="Print raw records as JSON.")] = False,
) -> None:
    """List vaults from the Morpho API."""
    client = MorphoVaultClient(get_settings())
    try:
        records = asyncio.run(client.fetch_vaults(first=first, skip=skip))
    except MorphoClientError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([asdict(v) for v in records], indent=2))
        return

    Console().print(build_vault_table(records))


def main():
    app()


if __name__ == "__main__":
    main()
