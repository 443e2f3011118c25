"""
Standardized error handling and exit codes for the nsid CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for nsid CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic or unexpected error."""

    USER_ERROR = 2
    """Invalid identifier, option or configuration (actionable by user)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Cannot parse identifier: orders",
        ...     reason="NamespaceId string must contain at least 1 '/' separator",
        ...     solution="nsid parse orders/42",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}")


def print_invalid_id_error(id_string: str, reason: str) -> None:
    """Print error when an identifier string cannot be decoded."""
    print_error(
        f"Cannot parse identifier: {id_string}",
        reason=reason,
        solution="namespace/id[/as_of[/as_at]], timestamps like 1977-11-13T14:18:00Z",
    )


def print_incompatible_flags_error(flag1: str, flag2: str, reason: str | None = None) -> None:
    """Print error when incompatible CLI flags are used together."""
    problem = f"Cannot use {flag1} with {flag2}"

    if reason:
        print_error(problem, reason=reason)
    else:
        print_error(problem, solution=f"Remove one of the flags: {flag1} or {flag2}")


def print_invalid_option_error(option: str, valid_options: list[str]) -> None:
    """Print error when an invalid option value is provided."""
    valid_str = ", ".join(valid_options)
    print_error(
        f"Invalid option: {option}",
        reason=f"Valid options are: {valid_str}",
        solution=f"Use one of: {valid_str}",
    )
