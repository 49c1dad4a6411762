"""
State file commands for the S3 file backend.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from contextlib import closing
from typing import BinaryIO

import click

from ..constants import ENV_BUCKET, ENV_PREFIX_PATH, EXIT_BACKEND, EXIT_NOT_FOUND, STATE_FILE_SUFFIX
from ..core.file_backend import S3FileBackend
from ..exceptions import BackendError, StateFileNotFoundError
from ..logging_config import get_logger, setup_logging
from ..utils import output_json, output_text, report_error

logger = get_logger(__name__)


def _state_options(func):  # type: ignore[no-untyped-def]
    """Options shared by every state command."""
    func = click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
    )(func)
    func = click.option("--text", is_flag=True, help="Output as human-readable text")(func)
    func = click.option("--profile", envvar="AWS_PROFILE", help="AWS profile")(func)
    func = click.option("--region", envvar="AWS_REGION", help="AWS region")(func)
    func = click.option("--prefix", envvar=ENV_PREFIX_PATH, help="Key prefix for state files")(func)
    func = click.option("--bucket", envvar=ENV_BUCKET, required=True, help="S3 bucket name")(func)
    return func


@click.command("list")
@click.option(
    "--suffix",
    default=STATE_FILE_SUFFIX,
    show_default=True,
    help="Only list files with this extension",
)
@_state_options
@click.pass_context
def state_list_command(
    ctx: click.Context,
    suffix: str,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """List state files in the bucket.

    Pages through the listing 100 objects at a time.

    Examples:

    \b
        aws-state-tool state list --bucket my-state --prefix prod

    \b
    Output Format:
        Returns JSON:
        {"bucket": "my-state", "prefix": "prod", "files": ["main.gyro"], "count": 1}
    """
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, suffix, region, profile)
        files = list(backend.list())

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    if text:
        for name in files:
            output_text(name)
    else:
        output_json({"bucket": bucket, "prefix": prefix, "files": files, "count": len(files)})


@click.command("get")
@click.argument("file")
@_state_options
@click.pass_context
def state_get_command(
    ctx: click.Context,
    file: str,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Write a state file to stdout.

    Examples:

    \b
        aws-state-tool state get main.gyro --bucket my-state > main.gyro
    """
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, region=region, profile=profile)
        with closing(backend.open_input(file)) as body:
            data = body.read()

    except StateFileNotFoundError as e:
        report_error(ctx, str(e), f"Check '{file}' with 'aws-state-tool state list'", EXIT_NOT_FOUND, text)
        return

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    click.get_binary_stream("stdout").write(data)


@click.command("put")
@click.argument("file")
@click.argument("source", type=click.File("rb"), default="-")
@_state_options
@click.pass_context
def state_put_command(
    ctx: click.Context,
    file: str,
    source: BinaryIO,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Upload a state file from SOURCE (default: stdin).

    Examples:

    \b
        aws-state-tool state put main.gyro ./main.gyro --bucket my-state
    """
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, region=region, profile=profile)
        with backend.open_output(file) as output:
            output.write(source.read())

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    if text:
        output_text(f"✅ Uploaded '{file}' to s3://{bucket}/{backend.prefixed(file)}")
    else:
        output_json({"file": file, "key": backend.prefixed(file), "uploaded": True})


@click.command("delete")
@click.argument("file")
@_state_options
@click.pass_context
def state_delete_command(
    ctx: click.Context,
    file: str,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Delete a state file. Deleting a missing file succeeds."""
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, region=region, profile=profile)
        backend.delete(file)

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    if text:
        output_text(f"✅ Deleted '{file}'")
    else:
        output_json({"file": file, "deleted": True})


@click.command("exists")
@click.argument("file")
@_state_options
@click.pass_context
def state_exists_command(
    ctx: click.Context,
    file: str,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Check whether a state file exists.

    Exit code 0 if it exists, 1 if not.
    """
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, region=region, profile=profile)
        found = backend.exists(file)

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    if text:
        output_text(f"'{file}' {'exists' if found else 'does not exist'}")
    else:
        output_json({"file": file, "exists": found})
    ctx.exit(0 if found else EXIT_NOT_FOUND)


@click.command("copy")
@click.argument("source")
@click.argument("destination")
@_state_options
@click.pass_context
def state_copy_command(
    ctx: click.Context,
    source: str,
    destination: str,
    bucket: str,
    prefix: str | None,
    region: str | None,
    profile: str | None,
    text: bool,
    verbose: int,
) -> None:
    """Copy a state file within the bucket.

    Examples:

    \b
        aws-state-tool state copy main.gyro main.gyro.bak --bucket my-state
    """
    setup_logging(verbose)

    try:
        backend = S3FileBackend(bucket, prefix, region=region, profile=profile)
        backend.copy(source, destination)

    except StateFileNotFoundError as e:
        report_error(ctx, str(e), f"Check '{source}' with 'aws-state-tool state list'", EXIT_NOT_FOUND, text)
        return

    except BackendError as e:
        report_error(ctx, str(e), "Check bucket exists and AWS credentials", EXIT_BACKEND, text)
        return

    if text:
        output_text(f"✅ Copied '{source}' to '{destination}'")
    else:
        output_json({"source": source, "destination": destination, "copied": True})
