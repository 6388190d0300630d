"""Ledger viewing commands."""

import click
from spendly.cli.error_handling import handle_domain_error
from spendly.domain.errors import NotFoundError, transaction_not_found


@click.command("list")
@click.option("--source", help="Only show transactions from this source (e.g. 'sms')")
@click.option("--limit", type=int, help="Maximum number of transactions to show")
@click.option("--verbose", "-v", is_flag=True, help="Show balance, account and reference columns")
@click.pass_context
def list_transactions(ctx, source: str | None, limit: int | None, verbose: bool):
    """List ledger transactions, newest first."""
    db = ctx.obj["db"]
    transactions = db.list_transactions(source=source, limit=limit)

    if not transactions:
        click.echo("No transactions found.")
        return

    if verbose:
        click.echo(f"\nFound {len(transactions)} transaction(s):")
        click.echo("=" * 100)
        for txn in transactions:
            _echo_details(txn)
            click.echo("-" * 100)
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<14} {'Date':<17} {'Amount':>14} {'Type':<8} {'Category':<16} {'Description':<28}"
    )
    click.echo("-" * 100)

    for txn in transactions:
        amount_str = f"{txn.amount:,.2f}"
        description = txn.description[:28]
        click.echo(
            f"{txn.id:<14} {txn.date:%Y-%m-%d %H:%M} {amount_str:>14} {txn.direction:<8} "
            f"{txn.category.value:<16} {description:<28}"
        )


@click.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show a single ledger transaction."""
    db = ctx.obj["db"]
    txn = db.get_transaction(transaction_id)
    if txn is None:
        handle_domain_error(ctx, NotFoundError(transaction_not_found(transaction_id)))

    _echo_details(txn)


def _echo_details(txn) -> None:
    click.echo(f"\nTransaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date:%Y-%m-%d %H:%M}")
    click.echo(f"  Amount: {txn.amount:,.2f} ({txn.direction})")
    click.echo(f"  Category: {txn.category.value}")
    click.echo(f"  Description: {txn.description}")
    if txn.balance is not None:
        click.echo(f"  Balance: {txn.balance:,.2f}")
    if txn.account_ref:
        click.echo(f"  Account: ***{txn.account_ref}")
    if txn.reference_id:
        click.echo(f"  Reference: {txn.reference_id}")
    click.echo(f"  Source: {txn.source}")


def register_commands(cli):
    """Register ledger viewing commands with main CLI."""
    cli.add_command(list_transactions)
    cli.add_command(show_transaction)
