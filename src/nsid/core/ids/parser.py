"""
Format detection and parsing of identifier strings of unknown shape.

The model classes decode a string when its shape is known up front. This
module handles the case where it is not: it picks the widest identifier
form whose trailing segments are valid instants.

    - orders/42                                             → namespace
    - orders/42/1977-11-13T14:18:00Z                        → temporal
    - orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z   → bitemporal

Public API:
    - parse_id: Parse string into the detected identifier model
    - parse_as: Parse string into a named identifier model
    - validate_id: Check if string is a decodable identifier
    - get_id_kind: Determine identifier kind without converting the id
"""

import logging
from typing import Any, Callable, Literal

from nsid.core.errors import InvalidIdError
from nsid.core.ids.models import BiTemporalNamespaceId, NamespaceId, TemporalNamespaceId
from nsid.core.ids.segments import split_bitemporal_id, split_namespace_id, split_temporal_id
from nsid.core.ids.timestamps import Timestamp

logger = logging.getLogger(__name__)

# Type alias for identifier kind literals
IdKind = Literal["namespace", "temporal", "bitemporal"]

AnyNamespaceId = NamespaceId | TemporalNamespaceId | BiTemporalNamespaceId

ID_MODELS: dict[str, type[Any]] = {
    "namespace": NamespaceId,
    "temporal": TemporalNamespaceId,
    "bitemporal": BiTemporalNamespaceId,
}


def _is_instant(text: str | None) -> bool:
    if text is None:
        return False
    try:
        Timestamp.parse(text)
    except InvalidIdError:
        return False
    return True


def get_id_kind(id_str: str) -> IdKind | None:
    """
    Determine the kind of an identifier string without converting its id.

    Checks from the widest form to the narrowest, so a bi-temporal string is
    never reported as temporal even though it would also decode as one.

    Args:
        id_str: The identifier string to check

    Returns:
        The identifier kind, or None if the string is not an identifier

    Examples:
        >>> get_id_kind("orders/42")
        'namespace'
        >>> get_id_kind("orders/42/1977-11-13T14:18:00Z")
        'temporal'
        >>> get_id_kind("orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z")
        'bitemporal'
        >>> get_id_kind("orders") is None
        True
    """
    try:
        segments = split_bitemporal_id(id_str)
        if _is_instant(segments.as_of) and _is_instant(segments.as_at):
            return "bitemporal"
    except InvalidIdError:
        pass

    try:
        segments = split_temporal_id(id_str)
        if _is_instant(segments.as_of):
            return "temporal"
    except InvalidIdError:
        pass

    try:
        split_namespace_id(id_str)
    except InvalidIdError:
        return None
    return "namespace"


def parse_as(
    id_str: str,
    kind: IdKind,
    id_type: type = str,
    *,
    converter: Callable[[str], Any] | None = None,
) -> AnyNamespaceId:
    """
    Parse a string into the identifier model named by kind.

    Raises:
        InvalidIdError: If kind is unknown or the string does not decode
    """
    model = ID_MODELS.get(kind)
    if model is None:
        known = ", ".join(ID_MODELS)
        raise InvalidIdError(f"Unknown id kind '{kind}' (expected one of: {known})", kind)
    return model.from_string(id_str, id_type, converter=converter)


def parse_id(
    id_str: str,
    id_type: type = str,
    *,
    converter: Callable[[str], Any] | None = None,
) -> AnyNamespaceId:
    """
    Parse a string into the widest identifier model it matches.

    Args:
        id_str: The identifier string to parse
        id_type: Type of the id value (default str)
        converter: Explicit text-to-id conversion, replacing id_type lookup

    Returns:
        NamespaceId, TemporalNamespaceId or BiTemporalNamespaceId

    Raises:
        InvalidIdError: If the string is not an identifier or its id cannot
            be converted

    Examples:
        >>> parsed = parse_id("orders/42/1977-11-13T14:18:00Z", int)
        >>> type(parsed).__name__, parsed.id
        ('TemporalNamespaceId', 42)
    """
    kind = get_id_kind(id_str)
    if kind is None:
        raise InvalidIdError(f"Invalid ID format: {id_str!r}", id_str)
    logger.debug(f"Detected {kind} id: {id_str}")
    return parse_as(id_str, kind, id_type, converter=converter)


def validate_id(id_str: str, id_type: type = str) -> bool:
    """
    Check if a string decodes as any identifier with an id of id_type.

    Examples:
        >>> validate_id("orders/42", int)
        True
        >>> validate_id("orders/abc", int)
        False
    """
    try:
        parse_id(id_str, id_type)
    except InvalidIdError:
        return False
    return True
