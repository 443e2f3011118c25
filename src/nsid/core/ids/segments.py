"""
Splitting of canonical identifier strings into raw segments.

    namespace/id                      → 1 separator
    namespace/id/as_of                → 2 separators
    namespace/id/as_of/as_at          → 3 separators

Segments are returned as text; typed conversion happens in the models.
"""

import logging
from typing import NamedTuple

from nsid.core.arguments import require_non_empty
from nsid.core.errors import InvalidIdError

logger = logging.getLogger(__name__)

# Field separator of the canonical string form. Not escaped anywhere, so
# neither the namespace nor the id text may contain it.
SEPARATOR = "/"


class IdSegments(NamedTuple):
    """Raw text segments of an identifier string."""

    namespace: str
    id: str
    as_of: str | None = None
    as_at: str | None = None


def split_namespace_id(id_string: str) -> IdSegments:
    """
    Split a namespace id string into namespace and id segments.

    The string may also be a temporal or bi-temporal id string being read
    as a plain namespace id. When more than one separator is present, the
    id ends at the second separator and the trailing timestamp segments are
    dropped, giving the same namespace and id as a full decode.

    Raises:
        InvalidIdError: If the string is empty, has no separator, or has an
            empty namespace or id segment

    Examples:
        >>> split_namespace_id("orders/42")
        IdSegments(namespace='orders', id='42', as_of=None, as_at=None)
        >>> split_namespace_id("orders/42/1977-11-13T14:18:00Z").id
        '42'
        >>> split_namespace_id("orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z").id
        '42'
    """
    s = require_non_empty(id_string, "ID string cannot be empty")
    first = s.find(SEPARATOR)
    if first == -1:
        raise InvalidIdError(
            f"NamespaceId string must contain at least 1 '{SEPARATOR}' separator",
            id_string,
        )

    second = s.find(SEPARATOR, first + 1)
    end = second if second != -1 else len(s)
    if end != len(s):
        logger.debug(f"Ignoring trailing segment of {s!r} past position {end}")

    return IdSegments(
        namespace=require_non_empty(s[:first], "Namespace segment cannot be empty"),
        id=require_non_empty(s[first + 1 : end], "Identifier segment cannot be empty"),
    )


def split_temporal_id(id_string: str) -> IdSegments:
    """
    Split a temporal id string into namespace, id and as-of segments.

    The namespace ends at the first separator and the as-of segment starts
    after the last one; the id is what lies between.

    Raises:
        InvalidIdError: If fewer than 2 separators are present or a segment
            is empty
    """
    s = require_non_empty(id_string, "ID string cannot be empty")
    first = s.find(SEPARATOR)
    last = s.rfind(SEPARATOR)
    if first == -1 or first == last:
        raise InvalidIdError(
            f"TemporalNamespaceId string must contain at least 2 '{SEPARATOR}' separators",
            id_string,
        )

    return IdSegments(
        namespace=require_non_empty(s[:first], "Namespace segment cannot be empty"),
        id=require_non_empty(s[first + 1 : last], "Identifier segment cannot be empty"),
        as_of=require_non_empty(s[last + 1 :], "As-of time segment cannot be empty"),
    )


def split_bitemporal_id(id_string: str) -> IdSegments:
    """
    Split a bi-temporal id string into its four segments.

    The first separator ends the namespace, the second ends the id, and the
    last starts the as-at segment. The as-of segment lies between the second
    and last separators.

    Raises:
        InvalidIdError: If fewer than 3 separators are present or a segment
            is empty
    """
    s = require_non_empty(id_string, "ID string cannot be empty")
    first = s.find(SEPARATOR)
    second = s.find(SEPARATOR, first + 1) if first != -1 else -1
    last = s.rfind(SEPARATOR)
    if first == -1 or second == -1 or second == last:
        raise InvalidIdError(
            f"BiTemporalNamespaceId string must contain at least 3 '{SEPARATOR}' separators",
            id_string,
        )

    return IdSegments(
        namespace=require_non_empty(s[:first], "Namespace segment cannot be empty"),
        id=require_non_empty(s[first + 1 : second], "Identifier segment cannot be empty"),
        as_of=require_non_empty(s[second + 1 : last], "As-of time segment cannot be empty"),
        as_at=require_non_empty(s[last + 1 :], "As-at time segment cannot be empty"),
    )
