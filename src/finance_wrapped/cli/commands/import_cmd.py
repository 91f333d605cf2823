"""CSV import command."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.errors import DomainError, OverlapDetected


def _echo_overlap(overlap: OverlapDetected) -> None:
    click.echo(
        f"\nThis file covers {overlap.period_start} to {overlap.period_end}, which overlaps "
        "previously imported statements:"
    )
    for stmt in overlap.statements:
        click.echo(
            f"  {stmt.id}: {stmt.filename} ({stmt.period_start} to {stmt.period_end}, "
            f"{stmt.tx_count} transactions, template {stmt.template_used})"
        )


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--template", help="CSV template name (defaults to the default template)")
@click.option("--override", is_flag=True, help="Import even if the period overlaps earlier imports")
@click.option("--no-input", is_flag=True, help="Cancel instead of asking when an overlap is found")
@click.pass_context
def import_csv(ctx, csv_file: str, template: str | None, override: bool, no_input: bool):
    """Import transactions from a bank statement CSV file."""
    store = ctx.obj["store"]

    try:
        result = store.import_from_csv(csv_file, template_name=template, override=override)
    except OverlapDetected as overlap:
        _echo_overlap(overlap)
        if no_input or not click.confirm("Import anyway?", default=False):
            click.echo("Import cancelled.")
            ctx.exit(1)
        try:
            result = store.import_from_csv(csv_file, template_name=template, override=True)
        except (DomainError, OSError) as e:
            handle_domain_error(ctx, e)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {result.imported} transactions")
    click.echo(f"  Period: {result.statement.period_start} to {result.statement.period_end}")
    click.echo(f"  Template: {result.statement.template_used}")
    click.echo(f"  Status: {result.statement.status}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
