"""
Namespaced identifier types.

This package provides immutable, string-encodable identifiers that address an
entity within a namespace, optionally qualified by a valid time (as-of) and a
transaction time (as-at).

Public API:
    Models:
        - NamespaceId: {namespace}/{id}
        - TemporalNamespaceId: {namespace}/{id}/{as_of}
        - BiTemporalNamespaceId: {namespace}/{id}/{as_of}/{as_at}
        - Timestamp: nanosecond-precision instant

    Parser functions:
        - parse_id: Parse string into the detected identifier model
        - parse_as: Parse string into a named identifier model
        - validate_id: Check if string is a decodable identifier
        - get_id_kind: Determine identifier kind without full parsing

    Conversion:
        - convert_id: Convert an id segment to its value type
        - lookup_id_type: Resolve an id type by short name

Example:
    >>> from nsid.core.ids import BiTemporalNamespaceId, NamespaceId, parse_id
    >>> nsid = NamespaceId.create("namespace", 2)
    >>> str(nsid)
    'namespace/2'
    >>> NamespaceId.from_string("namespace/2", int) == nsid
    True
    >>> btid = parse_id("bitemporal/id/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z")
    >>> str(btid.to_temporal_id())
    'bitemporal/id/1977-11-13T14:18:00Z'
"""

from nsid.core.errors import InvalidIdError
from nsid.core.ids.convert import (
    DEFAULT_STRATEGIES,
    ID_TYPES,
    convert_id,
    lookup_id_type,
)
from nsid.core.ids.models import BiTemporalNamespaceId, NamespaceId, TemporalNamespaceId
from nsid.core.ids.parser import (
    IdKind,
    get_id_kind,
    parse_as,
    parse_id,
    validate_id,
)
from nsid.core.ids.segments import SEPARATOR
from nsid.core.ids.timestamps import Clock, Timestamp, system_clock

__all__ = [
    # Models
    "NamespaceId",
    "TemporalNamespaceId",
    "BiTemporalNamespaceId",
    "Timestamp",
    "Clock",
    "system_clock",
    "SEPARATOR",
    # Parser functions
    "IdKind",
    "parse_id",
    "parse_as",
    "validate_id",
    "get_id_kind",
    # Conversion
    "DEFAULT_STRATEGIES",
    "ID_TYPES",
    "convert_id",
    "lookup_id_type",
    # Errors
    "InvalidIdError",
]
