"""SMS import command."""

import click
from spendly.cli.error_handling import handle_domain_error
from spendly.domain.message_source import load_messages
from spendly.domain.sms_import import SMSImportService
from spendly.utils.date_parser import get_timezone


@click.command("import")
@click.argument("messages_file", type=click.Path(exists=True))
@click.option(
    "--bank",
    help="Your bank's name, used to recognise its messages",
    envvar="SPENDLY_BANK_NAME",
)
@click.option(
    "--timezone",
    help="Timezone the bank writes message times in (default: Asia/Dhaka)",
    envvar="SPENDLY_TIMEZONE",
)
@click.pass_context
def import_sms(ctx, messages_file: str, bank: str | None, timezone: str | None):
    """Import transactions from a JSON export of SMS messages."""
    db = ctx.obj["db"]

    try:
        zone = get_timezone(timezone)
        messages = load_messages(messages_file)
    except ValueError as e:
        handle_domain_error(ctx, e)

    service = SMSImportService(db, zone=zone)
    result = service.import_messages(messages, bank_name=bank)
    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result['imported']} transactions")
    click.echo(f"  Skipped: {result['skipped']} duplicates")
    click.echo(f"  Unrecognized: {result['unrecognized']} messages")
    click.echo(f"  Filtered: {result['filtered']} non-bank messages")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_sms)
