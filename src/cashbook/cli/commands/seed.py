"""Seed command: write sample input files and show how to run."""

from pathlib import Path

import click

from cashbook.cli.fixtures import CASH_BOOK_CSV, CHART_OF_ACCOUNTS_CSV


def _seed_file(
    path: str | None, default_path: str, kind: str, records: str, contents: str
) -> str:
    """Resolve one input path, writing sample data if the file is missing.

    Returns:
        The resolved path
    """
    if path is None:
        click.echo(f"You didn't inform the {kind} CSV file.")
        path = default_path
        click.echo(f"Using default {path}")

    file_path = Path(path)
    if not file_path.exists():
        click.echo(f"File {path} doesn't exist.")
        click.echo(f"So, I'm seeding some {records} for you ;-)")
        file_path.write_text(contents, encoding="utf-8")
        click.echo(f"File {path} created")
    return path


def seed_inputs(
    ctx: click.Context, balances: str | None, transactions: str | None
) -> tuple[str, str]:
    """Make sure both input files exist and print the run command.

    Args:
        ctx: Click context carrying the default paths
        balances: Balance file path, or None to use the default
        transactions: Transaction file path, or None to use the default

    Returns:
        (balances_path, transactions_path)
    """
    balances = _seed_file(
        balances,
        ctx.obj["default_balances"],
        "balance",
        "balance data",
        CHART_OF_ACCOUNTS_CSV,
    )
    click.echo()
    transactions = _seed_file(
        transactions,
        ctx.obj["default_transactions"],
        "cash book",
        "book entries records",
        CASH_BOOK_CSV,
    )
    click.echo()
    click.echo("Great! Now you can use the app running:")
    click.echo()
    click.echo(f"$ cashbook run {balances} {transactions}")
    click.echo()
    return balances, transactions


@click.command("seed")
@click.argument("balances", required=False, type=click.Path(dir_okay=False))
@click.argument("transactions", required=False, type=click.Path(dir_okay=False))
@click.pass_context
def seed(ctx, balances: str | None, transactions: str | None):
    """Create sample BALANCES and TRANSACTIONS files if they are missing.

    Examples:
        cashbook seed
        cashbook seed balances.csv transactions.csv
    """
    seed_inputs(ctx, balances, transactions)


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
