"""Main CLI entry point."""

import click

from finance_wrapped.cli.error_handling import handle_domain_error
from finance_wrapped.database.factories import create_json_database
from finance_wrapped.domain.errors import StoreLoadError
from finance_wrapped.domain.store import Store
from finance_wrapped.logging_setup import configure_logging

# Import and register all commands at module level
from finance_wrapped.cli.commands import (
    add,
    category,
    import_cmd,
    restore,
    statement,
    template,
    transaction,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory holding the ledger files (overrides FINWRAP_HOME environment variable)",
    envvar="FINWRAP_HOME",
)
@click.option(
    "--log-level",
    help="Log level (DEBUG, INFO, WARNING, ...); defaults to FINWRAP_LOG_LEVEL or WARNING",
)
@click.pass_context
def cli(ctx, data_dir: str | None, log_level: str | None):
    """Finance Wrapped - personal transaction ledger.

    Record transactions by hand or import them from bank statement CSV files,
    with protection against importing the same statement period twice.
    """
    ctx.ensure_object(dict)

    # Load the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            configure_logging(log_level)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--log-level")
        try:
            ctx.obj["store"] = Store(create_json_database(data_dir))
        except StoreLoadError as e:
            handle_domain_error(ctx, e)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
import_cmd.register_commands(cli)
statement.register_commands(cli)
template.register_commands(cli)
category.register_commands(cli)
restore.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
