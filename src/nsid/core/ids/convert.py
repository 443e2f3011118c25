"""
Conversion of raw id segments into typed id values.

Decoding an identifier yields the id segment as text. Unless the caller
supplies an explicit converter, the text is turned into the target type by
trying three strategies in order:

    1. factory:     a named text factory on the type, e.g. date.fromisoformat
    2. constructor: the type called with the text, e.g. int("42")
    3. identity:    the text itself, when it already is an instance of the type

A strategy that does not apply, or that raises any error for the text,
hands over to the next one. Factories take precedence over constructors
for types that offer both.
"""

import logging
from decimal import Decimal
from typing import Any, Callable, Sequence, TypeVar
from uuid import UUID

from nsid.core.errors import InvalidIdError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ConversionStrategy = Callable[[str, type], Any]

# Names probed, in order, by the factory strategy
FACTORY_METHOD_NAMES = ("from_string", "from_str", "parse", "fromisoformat", "value_of")

# Id types addressable by name (CLI and configuration)
ID_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "decimal": Decimal,
    "uuid": UUID,
}


def _type_name(id_type: Any) -> str:
    module = getattr(id_type, "__module__", None)
    name = getattr(id_type, "__qualname__", None) or repr(id_type)
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def from_factory(text: str, id_type: type) -> Any:
    """Convert using the first named text factory on id_type that accepts text."""
    for name in FACTORY_METHOD_NAMES:
        factory = getattr(id_type, name, None)
        if not callable(factory):
            continue
        try:
            return factory(text)
        except Exception as e:
            logger.debug(f"{_type_name(id_type)}.{name} rejected {text!r}: {e}")
    raise TypeError(f"{_type_name(id_type)} has no usable text factory")


def from_constructor(text: str, id_type: type) -> Any:
    """Convert by calling id_type with the text as its only argument."""
    return id_type(text)


def from_identity(text: str, id_type: type) -> Any:
    """Return the text unchanged when it already is an id_type instance."""
    if isinstance(text, id_type):
        return text
    raise TypeError(f"str is not an instance of {_type_name(id_type)}")


DEFAULT_STRATEGIES: tuple[ConversionStrategy, ...] = (
    from_factory,
    from_constructor,
    from_identity,
)


def convert_id(
    text: str,
    id_type: type[T],
    strategies: Sequence[ConversionStrategy] = DEFAULT_STRATEGIES,
) -> T:
    """
    Convert an id segment to id_type.

    Args:
        text: Raw id segment
        id_type: Target type of the id value
        strategies: Conversion strategies to try in order

    Returns:
        The converted id value

    Raises:
        InvalidIdError: If no strategy produces a value

    Examples:
        >>> convert_id("2", int)
        2
        >>> convert_id("id", str)
        'id'
        >>> convert_id("id", int)
        Traceback (most recent call last):
            ...
        nsid.core.errors.InvalidIdError: Identifier segment cannot be converted to type: int
    """
    for strategy in strategies:
        try:
            value = strategy(text, id_type)
        except Exception as e:
            logger.debug(f"{strategy.__name__} could not convert {text!r}: {e}")
            continue
        if value is not None:
            return value

    raise InvalidIdError(
        f"Identifier segment cannot be converted to type: {_type_name(id_type)}",
        text,
    )


def resolve_id(
    text: str,
    id_type: type[T] = str,  # type: ignore[assignment]
    converter: Callable[[str], T] | None = None,
) -> T:
    """
    Convert an id segment with an explicit converter, or by strategy lookup.

    An explicit converter replaces strategy discovery entirely. Any error it
    raises, or a None result, is reported as InvalidIdError.
    """
    if converter is None:
        return convert_id(text, id_type)

    try:
        value = converter(text)
    except Exception as e:
        raise InvalidIdError(f"Identifier segment {text!r} rejected by converter: {e}", text) from e
    if value is None:
        raise InvalidIdError(f"Converter returned no value for identifier segment {text!r}", text)
    return value


def lookup_id_type(name: str) -> type:
    """
    Resolve an id type by its short name.

    Raises:
        InvalidIdError: If the name is not one of ID_TYPES
    """
    try:
        return ID_TYPES[name]
    except KeyError:
        known = ", ".join(ID_TYPES)
        raise InvalidIdError(f"Unknown id type '{name}' (expected one of: {known})", name) from None
