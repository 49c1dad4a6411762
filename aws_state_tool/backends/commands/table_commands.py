"""
Lock table management commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Literal

import click

from ..constants import (
    DEFAULT_LOCK_TABLE_NAME,
    ENV_LOCK_TABLE,
    EXIT_BACKEND,
    EXIT_NOT_FOUND,
    EXIT_OWNERSHIP,
)
from ..core.table_operations import create_lock_table, drop_lock_table
from ..exceptions import BackendError, TableAlreadyExistsError, TableNotFoundError
from ..logging_config import get_logger, setup_logging
from ..utils import output_json, output_text, report_error, validate_table_name

logger = get_logger(__name__)


@click.command("create-table")
@click.option(
    "--table",
    envvar=ENV_LOCK_TABLE,
    default=DEFAULT_LOCK_TABLE_NAME,
    help="DynamoDB lock table name",
)
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option(
    "--billing",
    type=click.Choice(["on-demand", "provisioned"]),
    default="on-demand",
    help="Billing mode (default: on-demand)",
)
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.pass_context
def create_table_command(
    ctx: click.Context,
    table: str,
    region: str | None,
    profile: str | None,
    billing: str,
    text: bool,
    verbose: int,
) -> None:
    """Create the DynamoDB lock table.

    The table is keyed by lock_key and holds one item per held lock.

    Examples:

    \b
        # Create table with default name
        aws-state-tool lock create-table

    \b
        # Create with provisioned billing
        aws-state-tool lock create-table --table my-locks --billing provisioned

    \b
    Output Format:
        Returns JSON with table details:
        {"table": "...", "status": "CREATING", "arn": "..."}
    """
    setup_logging(verbose)

    try:
        validate_table_name(table)
    except ValueError as e:
        report_error(ctx, str(e), "Choose a valid DynamoDB table name", EXIT_BACKEND, text)
        return

    try:
        logger.debug(f"Region: {region}, Billing: {billing}")

        billing_mode: Literal["PAY_PER_REQUEST", "PROVISIONED"] = (
            "PAY_PER_REQUEST" if billing == "on-demand" else "PROVISIONED"
        )
        table_desc = create_lock_table(table, region, profile, billing_mode)

        if text:
            output_text(f"✅ Table '{table}' created successfully")
            output_text(f"Status: {table_desc['TableStatus']}")
            output_text(f"ARN: {table_desc['TableArn']}")
        else:
            output_json(
                {
                    "table": table,
                    "status": table_desc["TableStatus"],
                    "arn": table_desc["TableArn"],
                }
            )

    except TableAlreadyExistsError as e:
        report_error(ctx, str(e), "Use a different table name or drop the existing table", 1, text)

    except BackendError as e:
        report_error(ctx, str(e), "Check AWS credentials and permissions", EXIT_BACKEND, text)


@click.command("drop-table")
@click.option(
    "--table",
    envvar=ENV_LOCK_TABLE,
    default=DEFAULT_LOCK_TABLE_NAME,
    help="DynamoDB lock table name",
)
@click.option("--region", envvar="AWS_REGION", help="AWS region")
@click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")
@click.option("--approve", is_flag=True, help="Required flag to confirm table deletion")
@click.option("--text", is_flag=True, help="Output as human-readable text")
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
)
@click.pass_context
def drop_table_command(
    ctx: click.Context,
    table: str,
    region: str | None,
    profile: str | None,
    approve: bool,
    text: bool,
    verbose: int,
) -> None:
    """Drop the DynamoDB lock table.

    Deletes every lock record with it. Requires --approve.

    Examples:

    \b
        aws-state-tool lock drop-table --table my-locks --approve
    """
    setup_logging(verbose)

    if not approve:
        report_error(
            ctx,
            "Refusing to drop table without --approve",
            f"Rerun with 'aws-state-tool lock drop-table --table {table} --approve'",
            EXIT_OWNERSHIP,
            text,
        )
        return

    try:
        table_desc = drop_lock_table(table, region, profile)

        if text:
            output_text(f"✅ Table '{table}' deleted")
        else:
            output_json({"table": table, "status": table_desc.get("TableStatus", "DELETING")})

    except TableNotFoundError as e:
        report_error(ctx, str(e), "Check the table name and region", EXIT_NOT_FOUND, text)

    except BackendError as e:
        report_error(ctx, str(e), "Check AWS credentials and permissions", EXIT_BACKEND, text)
