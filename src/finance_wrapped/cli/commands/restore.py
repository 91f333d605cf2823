"""Restore from backup command."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.errors import DomainError


@click.command("restore")
@click.option(
    "--backup-file",
    type=click.Path(dir_okay=False),
    help="Backup file to read (defaults to backup.json in the data directory)",
)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def restore_backup(ctx, backup_file: str | None, yes: bool):
    """Replace all transactions with the contents of a backup file."""
    store = ctx.obj["store"]

    if not yes and not click.confirm(
        "This replaces every transaction in the ledger. Continue?"
    ):
        click.echo("Restore cancelled.")
        return

    try:
        count = store.restore_from_backup(backup_file)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Restored {count} transactions from backup")


def register_commands(cli):
    """Register restore command with main CLI."""
    cli.add_command(restore_backup)
