"""Categorization command."""

import click
from spendly.cli.error_handling import handle_domain_error
from spendly.domain.categorizer import categorize
from spendly.utils.amount_parser import parse_amount


@click.command("categorize")
@click.argument("description")
@click.option("--amount", help="Transaction amount (e.g., 12,500.00)")
@click.pass_context
def categorize_description(ctx, description: str, amount: str | None):
    """Print the category for a transaction description.

    Examples:
        spendly categorize "NEW SONALI JEWELLERS"
        spendly categorize "Bank Debit" --amount 25,000
    """
    value = None
    if amount is not None:
        try:
            value = parse_amount(amount)
        except ValueError as e:
            handle_domain_error(ctx, e)

    click.echo(categorize(description, value).value)


def register_commands(cli):
    """Register categorize command with main CLI."""
    cli.add_command(categorize_description)
