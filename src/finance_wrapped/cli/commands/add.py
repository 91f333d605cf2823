"""Add transaction command."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.entities import TRANSACTION_TYPES, Transaction
from finance_wrapped.domain.errors import DomainError
from finance_wrapped.utils.amount_parser import parse_amount
from finance_wrapped.utils.date_parser import to_ledger_date


@click.command("add")
@click.option(
    "--date",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., -50.00, $1,234.56, (50.00))")
@click.option("--description", default="", help="Transaction description")
@click.option("--category", help="Category name (defaults to the default category)")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False),
    default="expense",
    help="Transaction type (default: expense)",
)
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    amount: str,
    description: str,
    category: str | None,
    transaction_type: str,
):
    """Add a transaction manually.

    Examples:
        finwrap add --date 2024-01-15 --amount -50.00 --description "Grocery store"
        finwrap add --date today --amount 1000 --type income --category salary
    """
    store = ctx.obj["store"]

    try:
        txn_date = to_ledger_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except DomainError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if category is None:
        category = store.categories.default
    elif store.categories.get_category(category) is None:
        click.echo(f"Warning: category '{category}' does not exist", err=True)

    txn = Transaction(
        amount=txn_amount,
        description=description,
        date=txn_date,
        category=category,
        transaction_type=transaction_type.lower(),
    )
    try:
        transaction_id = store.save(txn)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    if description:
        click.echo(f"  Description: {description}")
    click.echo(f"  Category: {category}")
    click.echo(f"  Type: {txn.transaction_type}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
