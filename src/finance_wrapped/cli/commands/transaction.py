"""Transaction management commands."""

from dataclasses import replace

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.domain.entities import TRANSACTION_TYPES, BulkUpdate, Transaction
from finance_wrapped.domain.errors import DomainError
from finance_wrapped.utils.amount_parser import parse_amount
from finance_wrapped.utils.date_parser import get_date_range, to_ledger_date


def _format_amount(txn: Transaction) -> str:
    return f"${txn.amount:,.2f}"


def _split_marker(txn: Transaction) -> str:
    if txn.is_split:
        return "split"
    if txn.parent_id is not None:
        return f"<- {txn.parent_id}"
    return ""


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option(
    "--period",
    type=click.Choice(["this-month", "last-month", "this-year", "last-year"]),
    help="Only show transactions dated within this period",
)
@click.option("--category", help="Only show transactions in this category")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False),
    help="Only show transactions of this type",
)
@click.pass_context
def list_transactions(ctx, period: str | None, category: str | None, transaction_type: str | None):
    """View transactions in the order they were added."""
    store = ctx.obj["store"]
    transactions = store.list_transactions()

    if period:
        start, end = get_date_range(period)
        transactions = [t for t in transactions if start <= t.date <= end]
    if category is not None:
        transactions = [t for t in transactions if t.category == category]
    if transaction_type:
        transactions = [t for t in transactions if t.transaction_type == transaction_type.lower()]

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Amount':<14} {'Type':<10} {'Category':<16} {'Split':<8} {'Description':<30}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:<6} {txn.date:<12} {_format_amount(txn):<14} {txn.transaction_type:<10} "
            f"{txn.category[:16]:<16} {_split_marker(txn):<8} {txn.description[:30]:<30}"
        )

    total_expenses = sum(t.amount for t in transactions if t.amount < 0)
    total_income = sum(t.amount for t in transactions if t.amount > 0)
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<6} Outflow: ${abs(total_expenses):,.2f} | "
        f"Inflow: ${total_income:,.2f} | Count: {len(transactions)}"
    )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show one transaction and the parts it was split into."""
    store = ctx.obj["store"]
    try:
        txn = store.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nTransaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {_format_amount(txn)}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Type: {txn.transaction_type}")
    if txn.parent_id is not None:
        parent = store.get_transaction(txn.parent_id)
        suffix = "" if parent is not None else " (deleted)"
        click.echo(f"  Split from: {txn.parent_id}{suffix}")
    if txn.is_split:
        click.echo("  Split into:")
        for child in store.ledger.children_of(txn.id):
            click.echo(f"    {child.id}: {_format_amount(child)} {child.description}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.option("--amount", help="Transaction amount")
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category name")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False),
    help="Transaction type",
)
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    date: str | None,
    amount: str | None,
    description: str | None,
    category: str | None,
    transaction_type: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        finwrap transaction update 1 --amount -75.00
        finwrap transaction update 1 --category groceries --type expense
    """
    store = ctx.obj["store"]
    try:
        txn = store.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    changes = {}
    if date is not None:
        try:
            changes["date"] = to_ledger_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)
    if amount is not None:
        try:
            changes["amount"] = parse_amount(amount)
        except DomainError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)
    if description is not None:
        changes["description"] = description
    if category is not None:
        changes["category"] = category
    if transaction_type is not None:
        changes["transaction_type"] = transaction_type.lower()

    if not changes:
        click.echo("Error: No fields to update", err=True)
        ctx.exit(1)

    store.save(replace(txn, **changes))
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Parts split off from the transaction are kept and still reference it.

    Examples:
        finwrap transaction delete 1
    """
    store = ctx.obj["store"]

    try:
        store.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    children = store.ledger.children_of(transaction_id)
    if children:
        click.echo(
            f"Note: {len(children)} split part(s) will keep referring to transaction {transaction_id}."
        )

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    store.delete(transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("split")
@click.argument("transaction_id", type=int)
@click.option(
    "--part",
    "parts",
    type=(str, str, str),
    multiple=True,
    required=True,
    metavar="AMOUNT DESCRIPTION CATEGORY",
    help="One split part; repeat for each part. Use '' for the parent's category.",
)
@click.pass_context
def split_transaction(ctx, transaction_id: int, parts: tuple[tuple[str, str, str], ...]):
    """Split a transaction into parts that add up to its amount.

    Every part keeps the original's date and type; the original stays in the
    ledger, marked as split.

    Examples:
        finwrap transaction split 7 --part -30 Groceries food --part -20 Soap household
    """
    store = ctx.obj["store"]

    parsed = []
    for amount, description, category in parts:
        try:
            parsed.append((parse_amount(amount), description, category))
        except DomainError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        added = store.split_service.split_into_parts(transaction_id, parsed)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Split transaction {transaction_id} into {len(added)} parts:")
    for child in added:
        click.echo(f"  {child.id}: {_format_amount(child)} {child.description}")


@transaction_group.command("bulk-edit")
@click.argument("transaction_ids", type=int, nargs=-1, required=True)
@click.option("--date", help="New date for every selected transaction")
@click.option("--amount", help="New amount for every selected transaction")
@click.option("--description", help="New description for every selected transaction")
@click.option("--category", help="New category for every selected transaction")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TRANSACTION_TYPES, case_sensitive=False),
    help="New type for every selected transaction",
)
@click.pass_context
def bulk_edit(
    ctx,
    transaction_ids: tuple[int, ...],
    date: str | None,
    amount: str | None,
    description: str | None,
    category: str | None,
    transaction_type: str | None,
):
    """Apply the same field values to several transactions.

    Examples:
        finwrap transaction bulk-edit 3 4 5 --category groceries
    """
    store = ctx.obj["store"]

    new_date = None
    if date:
        try:
            new_date = to_ledger_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    new_amount = None
    if amount:
        try:
            new_amount = parse_amount(amount)
        except DomainError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    updates = BulkUpdate(
        amount=new_amount,
        description=description,
        date=new_date,
        category=category,
        transaction_type=transaction_type.lower() if transaction_type else None,
    )
    if not updates.changes():
        click.echo("Error: No fields to update", err=True)
        ctx.exit(1)

    modified = store.apply_bulk(transaction_ids, updates)
    click.echo(f"Updated {modified} transaction(s)")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
