"""Bank statement history commands."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.errors import DomainError


@click.group()
def statement_group():
    """Show imported bank statements."""
    pass


@statement_group.command("list")
@click.option(
    "--status",
    type=click.Choice(["completed", "failed", "override"]),
    help="Only show statements with this status",
)
@click.pass_context
def list_statements(ctx, status: str | None):
    """List every recorded import attempt."""
    store = ctx.obj["store"]
    statements = store.list_statements()
    if status:
        statements = [s for s in statements if s.status == status]

    if not statements:
        click.echo("No bank statements found.")
        return

    click.echo("\nBank Statements:")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<5} {'File':<28} {'Period':<25} {'Count':<7} {'Template':<14} {'Status':<10}"
    )
    click.echo("-" * 100)
    for stmt in statements:
        period = f"{stmt.period_start} - {stmt.period_end}" if stmt.period_start else ""
        click.echo(
            f"{stmt.id:<5} {stmt.filename[:28]:<28} {period:<25} {stmt.tx_count:<7} "
            f"{stmt.template_used[:14]:<14} {stmt.status:<10}"
        )


@statement_group.command("show")
@click.argument("statement_id", type=int)
@click.pass_context
def show_statement(ctx, statement_id: int):
    """Show one recorded import."""
    store = ctx.obj["store"]
    try:
        stmt = store.require_statement(statement_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nBank statement ID: {stmt.id}")
    click.echo(f"  File: {stmt.filename}")
    click.echo(f"  Imported at: {stmt.import_date}")
    if stmt.period_start:
        click.echo(f"  Period: {stmt.period_start} to {stmt.period_end}")
    click.echo(f"  Transactions: {stmt.tx_count}")
    click.echo(f"  Template: {stmt.template_used}")
    click.echo(f"  Status: {stmt.status}")


def register_commands(cli):
    """Register statement commands with main CLI."""
    cli.add_command(statement_group, name="statement")
