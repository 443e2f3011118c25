"""
nsid CLI - identifier commands.

Decode, build and compare namespace ids from the command line.
"""

import json
import logging
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nsid.cli.errors import (
    ExitCode,
    print_error,
    print_incompatible_flags_error,
    print_invalid_id_error,
    print_invalid_option_error,
)
from nsid.core.config import load_config
from nsid.core.ids import (
    ID_TYPES,
    BiTemporalNamespaceId,
    InvalidIdError,
    NamespaceId,
    TemporalNamespaceId,
    Timestamp,
    lookup_id_type,
    parse_as,
    parse_id,
)
from nsid.core.ids.convert import resolve_id
from nsid.core.ids.parser import ID_MODELS, AnyNamespaceId

logger = logging.getLogger(__name__)

console = Console()

KIND_CHOICES = ["auto", *ID_MODELS]


def _id_type(type_name: str | None) -> type:
    """Resolve --type, falling back to the configured default."""
    name = type_name or load_config().default_id_type
    try:
        return lookup_id_type(name)
    except InvalidIdError:
        print_invalid_option_error(f"--type {name}", list(ID_TYPES))
        raise typer.Exit(ExitCode.USER_ERROR)


def _kind_of(value: AnyNamespaceId) -> str:
    if isinstance(value, BiTemporalNamespaceId):
        return "bitemporal"
    if isinstance(value, TemporalNamespaceId):
        return "temporal"
    return "namespace"


def describe(value: AnyNamespaceId) -> dict[str, Any]:
    """Flatten an identifier into printable fields."""
    fields: dict[str, Any] = {
        "kind": _kind_of(value),
        "namespace": value.namespace,
        "id": str(value.id),
        "id_type": type(value.id).__name__,
    }
    if isinstance(value, (TemporalNamespaceId, BiTemporalNamespaceId)):
        fields["as_of_time"] = str(value.as_of_time)
    if isinstance(value, BiTemporalNamespaceId):
        fields["as_at_time"] = str(value.as_at_time)
    fields["canonical"] = str(value)
    return fields


def _print_fields(fields: dict[str, Any], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(fields, indent=2))
        return

    table = Table(show_header=False, border_style="cyan")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", overflow="fold")
    for key, value in fields.items():
        table.add_row(key, escape(str(value)))
    console.print(table)


def parse(
    id_string: Annotated[str, typer.Argument(help="Identifier string to decode")],
    type_name: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Id value type (str, int, float, decimal, uuid)"),
    ] = None,
    kind: Annotated[
        str,
        typer.Option("--kind", "-k", help="Identifier kind, or 'auto' to detect"),
    ] = "auto",
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print fields as JSON"),
    ] = False,
) -> None:
    """
    Decode an identifier string and show its fields.

    Examples:
        nsid parse orders/42 --type int
        nsid parse orders/42/1977-11-13T14:18:00Z --json
        nsid parse orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z -k namespace
    """
    if kind not in KIND_CHOICES:
        print_invalid_option_error(f"--kind {kind}", KIND_CHOICES)
        raise typer.Exit(ExitCode.USER_ERROR)

    id_type = _id_type(type_name)
    try:
        if kind == "auto":
            value = parse_id(id_string, id_type)
        else:
            value = parse_as(id_string, kind, id_type)  # type: ignore[arg-type]
    except InvalidIdError as e:
        print_invalid_id_error(id_string, str(e))
        raise typer.Exit(ExitCode.USER_ERROR)

    logger.debug(f"Parsed {id_string!r} as {type(value).__name__}")
    _print_fields(describe(value), json_output or load_config().output_format == "json")


def new(
    namespace: Annotated[str, typer.Argument(help="Namespace of the identifier")],
    id_value: Annotated[str, typer.Argument(help="Id value, converted with --type")],
    type_name: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Id value type (str, int, float, decimal, uuid)"),
    ] = None,
    kind: Annotated[
        str | None,
        typer.Option(
            "--kind",
            "-k",
            help="namespace, temporal or bitemporal (inferred from timestamps if omitted)",
        ),
    ] = None,
    as_of: Annotated[
        str | None,
        typer.Option("--as-of", help="As-of (valid) time, e.g. 1977-11-13T14:18:00Z"),
    ] = None,
    as_at: Annotated[
        str | None,
        typer.Option("--as-at", help="As-at (transaction) time, e.g. 2008-01-05T22:00:00Z"),
    ] = None,
) -> None:
    """
    Build an identifier and print its canonical string.

    Omitted timestamps of temporal and bi-temporal ids default to now.

    Examples:
        nsid new orders 42
        nsid new orders 42 --as-of 1977-11-13T14:18:00Z
        nsid new orders 42 --kind bitemporal
    """
    if kind is None:
        kind = "bitemporal" if as_at else "temporal" if as_of else "namespace"
    if kind not in ID_MODELS:
        print_invalid_option_error(f"--kind {kind}", list(ID_MODELS))
        raise typer.Exit(ExitCode.USER_ERROR)
    if kind == "namespace" and (as_of or as_at):
        print_incompatible_flags_error(
            "--kind namespace",
            "--as-of/--as-at",
            reason="Namespace ids carry no timestamps",
        )
        raise typer.Exit(ExitCode.USER_ERROR)
    if kind == "temporal" and as_at:
        print_incompatible_flags_error(
            "--kind temporal",
            "--as-at",
            reason="Temporal ids carry only an as-of time",
        )
        raise typer.Exit(ExitCode.USER_ERROR)

    id_type = _id_type(type_name)
    value: AnyNamespaceId
    try:
        typed_id = resolve_id(id_value, id_type)
        as_of_time = Timestamp.parse(as_of) if as_of else None
        as_at_time = Timestamp.parse(as_at) if as_at else None
        if kind == "bitemporal":
            value = BiTemporalNamespaceId.create(namespace, typed_id, as_of_time, as_at_time)
        elif kind == "temporal":
            value = TemporalNamespaceId.create(namespace, typed_id, as_of_time)
        else:
            value = NamespaceId.create(namespace, typed_id)
    except (InvalidIdError, ValidationError) as e:
        print_error(f"Cannot build {kind} id in namespace '{namespace}'", reason=str(e))
        raise typer.Exit(ExitCode.USER_ERROR)

    console.print(str(value), markup=False, highlight=False, soft_wrap=True)


def compare(
    first: Annotated[str, typer.Argument(help="First identifier string")],
    second: Annotated[str, typer.Argument(help="Second identifier string")],
    type_name: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Id value type (str, int, float, decimal, uuid)"),
    ] = None,
) -> None:
    """
    Compare two identifiers of the same kind.

    Prints 'before', 'equal' or 'after' for FIRST relative to SECOND.

    Examples:
        nsid compare orders/1 orders/2 --type int
    """
    id_type = _id_type(type_name)
    parsed = []
    for id_string in (first, second):
        try:
            parsed.append(parse_id(id_string, id_type))
        except InvalidIdError as e:
            print_invalid_id_error(id_string, str(e))
            raise typer.Exit(ExitCode.USER_ERROR)

    left, right = parsed
    if _kind_of(left) != _kind_of(right):
        print_error(
            f"Cannot compare a {_kind_of(left)} id with a {_kind_of(right)} id",
            reason="Only identifiers of the same kind have an order",
            solution="nsid parse <id> --kind <kind>  # to read both as the same kind",
        )
        raise typer.Exit(ExitCode.USER_ERROR)

    result = left.compare_to(right)
    verdict = "before" if result < 0 else "after" if result > 0 else "equal"
    console.print(verdict, markup=False, highlight=False)
