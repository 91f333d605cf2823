"""CSV template management commands."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.errors import DomainError


@click.group()
def template_group():
    """Manage CSV templates."""
    pass


@template_group.command("list")
@click.pass_context
def list_templates(ctx):
    """List CSV templates."""
    store = ctx.obj["store"]
    templates = store.list_templates()
    if not templates:
        click.echo("No CSV templates found.")
        return

    default = store.templates.default
    click.echo("\nCSV Templates:")
    click.echo("-" * 60)
    for tpl in templates:
        marker = "*" if tpl.name == default else " "
        header = "header" if tpl.has_header else "no header"
        click.echo(
            f"{marker} {tpl.name} (date: {tpl.date_column}, amount: {tpl.amount_column}, "
            f"description: {tpl.desc_column}, {header})"
        )


@template_group.command("create")
@click.argument("name")
@click.option("--date-column", type=int, required=True, help="Zero-based index of the date column")
@click.option("--amount-column", type=int, required=True, help="Zero-based index of the amount column")
@click.option("--desc-column", type=int, required=True, help="Zero-based index of the description column")
@click.option("--has-header", is_flag=True, default=False, help="Skip the first line of the file")
@click.pass_context
def create_template(
    ctx, name: str, date_column: int, amount_column: int, desc_column: int, has_header: bool
):
    """Create a new CSV template and make it the default."""
    store = ctx.obj["store"]
    try:
        created = store.templates.add_template(
            name=name,
            date_column=date_column,
            amount_column=amount_column,
            desc_column=desc_column,
            has_header=has_header,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created CSV template '{created.name}' (now the default)")


@template_group.command("set-default")
@click.argument("name")
@click.pass_context
def set_default_template(ctx, name: str):
    """Use a template for imports by default."""
    store = ctx.obj["store"]
    try:
        store.templates.set_default(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Default CSV template set to '{name}'")


def register_commands(cli):
    """Register template commands with main CLI."""
    cli.add_command(template_group, name="template")
