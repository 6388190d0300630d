"""SMS parsing command."""

import json

import click
from spendly.domain.categorizer import categorize
from spendly.domain.sms_parser import extract_transaction


@click.command("parse")
@click.argument("message")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def parse_message(ctx, message: str, as_json: bool):
    """Extract a transaction from a bank SMS.

    Pass "-" to read the message from standard input.

    Examples:
        spendly parse "Your A/C (***3766) has been debited BDT 3,060.00. Avl Bal: BDT 3,04,017.61 @ 07:58 PM"
    """
    if message == "-":
        message = click.get_text_stream("stdin").read()

    parsed = extract_transaction(message)
    if parsed is None:
        click.echo("Error: Not a bank transaction", err=True)
        ctx.exit(1)

    category = categorize(parsed.description, parsed.amount)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "kind": parsed.kind.value,
                    "amount": str(parsed.amount),
                    "balance": str(parsed.balance),
                    "timestamp": parsed.timestamp,
                    "timestamp_parsed": parsed.timestamp_parsed,
                    "account_ref": parsed.account_ref,
                    "description": parsed.description,
                    "reference_id": parsed.reference_id,
                    "category": category.value,
                },
                indent=2,
            )
        )
        return

    timestamp = parsed.timestamp if parsed.timestamp_parsed else f"{parsed.timestamp} (not in message)"
    click.echo(f"Type: {parsed.kind.value.capitalize()}")
    click.echo(f"Amount: {parsed.amount:,.2f}")
    click.echo(f"Balance: {parsed.balance:,.2f}")
    click.echo(f"Time: {timestamp}")
    if parsed.account_ref:
        click.echo(f"Account: ***{parsed.account_ref}")
    click.echo(f"Description: {parsed.description}")
    if parsed.reference_id:
        click.echo(f"Reference: {parsed.reference_id}")
    click.echo(f"Category: {category.value}")


def register_commands(cli):
    """Register parse command with main CLI."""
    cli.add_command(parse_message)
