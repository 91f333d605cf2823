"""Category management commands."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    store = ctx.obj["store"]
    categories = store.list_categories()
    if not categories:
        click.echo("No categories found.")
        return

    default = store.categories.default
    click.echo("\nCategories:")
    for cat in categories:
        marker = "*" if cat.name == default else " "
        click.echo(f"{marker} {cat.name} ({cat.display_name})")


@category_group.command("create")
@click.argument("name")
@click.option("--display-name", default="", help="Label shown in listings (defaults to the name)")
@click.pass_context
def create_category(ctx, name: str, display_name: str):
    """Create a new category."""
    store = ctx.obj["store"]
    try:
        created = store.categories.add_category(name=name, display_name=display_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{created.name}'")


@category_group.command("set-default")
@click.argument("name")
@click.pass_context
def set_default_category(ctx, name: str):
    """Use a category for imported transactions by default."""
    store = ctx.obj["store"]
    try:
        store.categories.set_default(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Default category set to '{name}'")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
