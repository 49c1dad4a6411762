"""
Utility functions for backend commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
import os
import socket
from typing import Any

import click


def output_json(data: dict[str, Any], quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        click.echo(json.dumps(data, default=str))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        click.echo(message)


def error_json(error: str, solution: str, exit_code: int) -> str:
    """
    Format error as a JSON line.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        JSON encoded error
    """
    return json.dumps({"error": error, "solution": solution, "exit_code": exit_code})


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"


def report_error(ctx: click.Context, error: str, solution: str, exit_code: int, text: bool) -> None:
    """
    Write an error to stderr and exit the command.

    Args:
        ctx: Click context of the running command
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code
        text: If True, output as text; otherwise JSON
    """
    if text:
        click.echo(error_text(error, solution), err=True)
    else:
        click.echo(error_json(error, solution, exit_code), err=True)
    ctx.exit(exit_code)


def validate_table_name(table_name: str) -> bool:
    """
    Validate DynamoDB table name.

    Args:
        table_name: Table name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If table name is invalid
    """
    if not table_name:
        raise ValueError("Table name cannot be empty")
    if len(table_name) < 3 or len(table_name) > 255:
        raise ValueError("Table name must be between 3 and 255 characters")
    if not all(c.isalnum() or c in "-_." for c in table_name):
        raise ValueError(
            "Table name can only contain alphanumeric characters, hyphens, underscores, and periods"
        )
    return True


def generate_default_holder_id() -> str:
    """
    Generate default lock holder ID.

    Returns:
        Holder ID in format hostname-pid
    """
    return f"{socket.gethostname()}-{os.getpid()}"
