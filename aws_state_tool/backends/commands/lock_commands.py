"""
Lock commands for the DynamoDB lock backend.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from ..constants import (
    DEFAULT_LOCK_KEY,
    DEFAULT_LOCK_TABLE_NAME,
    ENV_LOCK_KEY,
    ENV_LOCK_TABLE,
    EXIT_BACKEND,
    EXIT_LOCK_HELD,
    EXIT_NOT_FOUND,
    EXIT_OWNERSHIP,
)
from ..core.lock_backend import DynamoDbLockBackend
from ..exceptions import BackendError, LockHeldError, LockOwnershipError
from ..logging_config import get_logger, setup_logging
from ..utils import generate_default_holder_id, output_json, output_text, report_error

logger = get_logger(__name__)


def _lock_options(func):  # type: ignore[no-untyped-def]
    """Options shared by every lock command."""
    func = click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
    )(func)
    func = click.option("--text", is_flag=True, help="Output as human-readable text")(func)
    func = click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")(func)
    func = click.option("--region", envvar="AWS_REGION", help="AWS region")(func)
    func = click.option(
        "--lock-key",
        envvar=ENV_LOCK_KEY,
        default=DEFAULT_LOCK_KEY,
        help="Lock key protecting the state (default: default)",
    )(func)
    func = click.option(
        "--table",
        envvar=ENV_LOCK_TABLE,
        default=DEFAULT_LOCK_TABLE_NAME,
        help="DynamoDB lock table name",
    )(func)
    return func


@click.command("acquire")
@click.option("--holder", help="Holder ID (default: hostname-pid)")
@_lock_options
@click.pass_context
def lock_acquire_command(
    ctx: click.Context,
    holder: str | None,
    table: str,
    lock_key: str,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Acquire the state lock.

    Creates the lock record with a conditional write. Fails immediately if
    the lock is already held; there is no waiting or retrying.

    Examples:

    \b
        # Acquire the default lock
        aws-state-tool lock acquire --table my-locks

    \b
        # Acquire as an explicit holder
        aws-state-tool lock acquire --lock-key prod --holder ci-run-42

    \b
    Output Format:
        Returns JSON:
        {"lock_key": "prod", "holder_id": "ci-run-42", "info": null}
    """
    setup_logging(verbose)
    holder = holder or generate_default_holder_id()

    try:
        backend = DynamoDbLockBackend(table, lock_key, region, profile)
        record = backend.lock(holder)

        if text:
            output_text(f"✅ Lock '{lock_key}' acquired by {holder}")
        else:
            output_json(record.to_dict())

    except LockHeldError as e:
        report_error(
            ctx,
            str(e),
            f"Wait for the holder to finish or run 'aws-state-tool lock force-release --lock-key {lock_key}'",
            EXIT_LOCK_HELD,
            text,
        )

    except BackendError as e:
        report_error(ctx, str(e), "Check table exists and AWS credentials", EXIT_BACKEND, text)


@click.command("release")
@click.option("--holder", help="Holder ID (default: hostname-pid)")
@_lock_options
@click.pass_context
def lock_release_command(
    ctx: click.Context,
    holder: str | None,
    table: str,
    lock_key: str,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Release the state lock.

    Only the current holder can release the lock. Uses a conditional delete
    so a stale holder cannot remove someone else's lock.

    Examples:

    \b
        # Release as an explicit holder
        aws-state-tool lock release --lock-key prod --holder ci-run-42

    \b
    Output Format:
        Returns JSON:
        {"lock_key": "prod", "holder_id": "ci-run-42", "released": true}
    """
    setup_logging(verbose)
    holder = holder or generate_default_holder_id()

    try:
        backend = DynamoDbLockBackend(table, lock_key, region, profile)
        backend.unlock(holder)

        if text:
            output_text(f"✅ Lock '{lock_key}' released by {holder}")
        else:
            output_json({"lock_key": lock_key, "holder_id": holder, "released": True})

    except LockOwnershipError as e:
        report_error(
            ctx, str(e), f"Lock is not held by '{holder}'. Check the current holder", EXIT_OWNERSHIP, text
        )

    except BackendError as e:
        report_error(ctx, str(e), "Check table exists and AWS credentials", EXIT_BACKEND, text)


@click.command("update-info")
@click.argument("info")
@click.option("--holder", help="Holder ID (default: hostname-pid)")
@_lock_options
@click.pass_context
def lock_update_info_command(
    ctx: click.Context,
    info: str,
    holder: str | None,
    table: str,
    lock_key: str,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Publish progress on a held lock.

    Examples:

    \b
        aws-state-tool lock update-info "applying resource 3 of 12" --holder ci-run-42
    """
    setup_logging(verbose)
    holder = holder or generate_default_holder_id()

    try:
        backend = DynamoDbLockBackend(table, lock_key, region, profile)
        backend.update_lock_info(holder, info)

        if text:
            output_text(f"✅ Lock '{lock_key}' info updated")
        else:
            output_json({"lock_key": lock_key, "holder_id": holder, "info": info})

    except LockOwnershipError as e:
        report_error(
            ctx, str(e), f"Lock is not held by '{holder}'. Check the current holder", EXIT_OWNERSHIP, text
        )

    except BackendError as e:
        report_error(ctx, str(e), "Check table exists and AWS credentials", EXIT_BACKEND, text)


@click.command("check")
@_lock_options
@click.pass_context
def lock_check_command(
    ctx: click.Context,
    table: str,
    lock_key: str,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Check whether the state lock is held.

    Exit code 0 if locked, 1 if free.

    Examples:

    \b
        if aws-state-tool lock check --lock-key prod; then
            echo "Lock is held"
        fi

    \b
    Output Format:
        Returns JSON if locked:
        {"lock_key": "prod", "holder_id": "ci-run-42", "info": "applying"}

        Returns JSON if free:
        {"lock_key": "prod", "status": "free"}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Checking lock '{lock_key}' in '{table}'")
        backend = DynamoDbLockBackend(table, lock_key, region, profile)
        record = backend.current_lock()

    except BackendError as e:
        report_error(ctx, str(e), "Check table exists and AWS credentials", EXIT_BACKEND, text)
        return

    if record:
        if text:
            output_text(f"Lock '{lock_key}' is held by {record.holder_id}")
            if record.info:
                output_text(f"Info: {record.info}")
        else:
            output_json(record.to_dict())
        ctx.exit(0)
    else:
        if text:
            output_text(f"Lock '{lock_key}' is free")
        else:
            output_json({"lock_key": lock_key, "status": "free"})
        ctx.exit(EXIT_NOT_FOUND)


@click.command("force-release")
@click.option("--approve", is_flag=True, help="Required flag to confirm the forced release")
@_lock_options
@click.pass_context
def lock_force_release_command(
    ctx: click.Context,
    approve: bool,
    table: str,
    lock_key: str,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Remove the state lock regardless of holder.

    For locks left behind by crashed runs. Requires --approve.

    Examples:

    \b
        aws-state-tool lock force-release --lock-key prod --approve
    """
    setup_logging(verbose)

    if not approve:
        report_error(
            ctx,
            "Refusing to force release without --approve",
            "Confirm the holder is gone, then rerun with --approve",
            EXIT_OWNERSHIP,
            text,
        )
        return

    try:
        backend = DynamoDbLockBackend(table, lock_key, region, profile)
        record = backend.force_unlock()

    except BackendError as e:
        report_error(ctx, str(e), "Check table exists and AWS credentials", EXIT_BACKEND, text)
        return

    previous = record.holder_id if record else None
    if text:
        if previous:
            output_text(f"✅ Lock '{lock_key}' force released (was held by {previous})")
        else:
            output_text(f"Lock '{lock_key}' was not held")
    else:
        output_json({"lock_key": lock_key, "released": True, "previous_holder": previous})
