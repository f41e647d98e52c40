"""Main CLI entry point."""

import click

from cashbook.cli.logging_config import configure_logging

# Import and register all commands at module level
from cashbook.cli.commands import run, seed

DEFAULT_BALANCES_PATH = "contas.csv"
DEFAULT_TRANSACTIONS_PATH = "transacoes.csv"


@click.group()
@click.option(
    "--default-balances",
    type=click.Path(dir_okay=False),
    default=DEFAULT_BALANCES_PATH,
    show_default=True,
    envvar="CASHBOOK_BALANCES_PATH",
    help="Balance file used when none is given (CASHBOOK_BALANCES_PATH)",
)
@click.option(
    "--default-transactions",
    type=click.Path(dir_okay=False),
    default=DEFAULT_TRANSACTIONS_PATH,
    show_default=True,
    envvar="CASHBOOK_TRANSACTIONS_PATH",
    help="Transaction file used when none is given (CASHBOOK_TRANSACTIONS_PATH)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log postings and fee triggers")
@click.pass_context
def cli(ctx, default_balances: str, default_transactions: str, verbose: bool):
    """Cashbook - apply transactions and fees to account balances.

    Reads a balance table and a transaction list, both as two-column
    comma-separated files, and prints the resulting balances.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)
    ctx.obj["default_balances"] = default_balances
    ctx.obj["default_transactions"] = default_transactions


# Register all commands
run.register_commands(cli)
seed.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
