"""
nsid - namespaced identifiers

Immutable, string-encodable identifiers addressing an entity within a
namespace, optionally qualified by a valid time and a transaction time.
"""

__version__ = "0.3.0"

# Re-export core models for convenience
from nsid.core.errors import InvalidIdError
from nsid.core.ids import (
    BiTemporalNamespaceId,
    NamespaceId,
    TemporalNamespaceId,
    Timestamp,
    parse_id,
)

__all__ = [
    "BiTemporalNamespaceId",
    "InvalidIdError",
    "NamespaceId",
    "TemporalNamespaceId",
    "Timestamp",
    "parse_id",
    "__version__",
]
