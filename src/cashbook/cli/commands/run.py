"""Run command: apply a transaction file to a balance file."""

from pathlib import Path

import click

from cashbook.cli.commands.seed import seed_inputs
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.cash_book import CashBook
from cashbook.domain.chart import ChartOfAccounts
from cashbook.domain.fees import DEFAULT_WITHDRAWAL_FEE


def _inputs_exist(balances: str | None, transactions: str | None) -> bool:
    return (
        balances is not None
        and Path(balances).is_file()
        and transactions is not None
        and Path(transactions).is_file()
    )


@click.command("run")
@click.argument("balances", required=False, type=click.Path(dir_okay=False))
@click.argument("transactions", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--fee",
    type=click.IntRange(min=0),
    default=DEFAULT_WITHDRAWAL_FEE,
    show_default=True,
    envvar="CASHBOOK_WITHDRAWAL_FEE",
    help="Flat fee charged on each withdrawal (CASHBOOK_WITHDRAWAL_FEE)",
)
@click.option("--entries", is_flag=True, help="Also print the posted entries")
@click.pass_context
def run(ctx, balances: str | None, transactions: str | None, fee: int, entries: bool):
    """Apply TRANSACTIONS to BALANCES and print the resulting balances.

    When either file is missing, sample files are seeded instead and the
    command to run is printed.

    Examples:
        cashbook run contas.csv transacoes.csv
        cashbook run contas.csv transacoes.csv --fee 250 --entries
    """
    if not _inputs_exist(balances, transactions):
        seed_inputs(ctx, balances, transactions)
        return

    try:
        chart = ChartOfAccounts.import_from_text(
            Path(balances).read_text(encoding="utf-8-sig")
        )
        chart.add_default_fee_rule(fee)
        cash_book = CashBook.import_transactions_from_text(
            chart, Path(transactions).read_text(encoding="utf-8-sig")
        )
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Here it is what you're waiting for:")
    click.echo()
    click.echo(chart.serialize())
    click.echo()
    if entries:
        click.echo("Posted entries:")
        click.echo()
        click.echo(cash_book.serialize())
        click.echo()


def register_commands(cli):
    """Register run command with main CLI."""
    cli.add_command(run)
