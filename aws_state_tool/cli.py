"""CLI entry point for aws-state-tool.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from aws_state_tool import __version__
from aws_state_tool.backends.commands.lock_commands import (
    lock_acquire_command,
    lock_check_command,
    lock_force_release_command,
    lock_release_command,
    lock_update_info_command,
)
from aws_state_tool.backends.commands.state_commands import (
    state_copy_command,
    state_delete_command,
    state_exists_command,
    state_get_command,
    state_list_command,
    state_put_command,
)
from aws_state_tool.backends.commands.table_commands import (
    create_table_command,
    drop_table_command,
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """DynamoDB state locking and S3 state storage for infrastructure runs"""
    pass


@main.group("lock")
def lock() -> None:
    """DynamoDB-backed state lock with conditional writes"""
    pass


@main.group("state")
def state() -> None:
    """S3-backed state file storage"""
    pass


# Register lock commands
lock.add_command(lock_acquire_command)
lock.add_command(lock_release_command)
lock.add_command(lock_update_info_command)
lock.add_command(lock_check_command)
lock.add_command(lock_force_release_command)

# Register lock table commands
lock.add_command(create_table_command)
lock.add_command(drop_table_command)

# Register state commands
state.add_command(state_list_command)
state.add_command(state_get_command)
state.add_command(state_put_command)
state.add_command(state_delete_command)
state.add_command(state_exists_command)
state.add_command(state_copy_command)

if __name__ == "__main__":
    main()
