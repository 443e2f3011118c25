"""
Identifier models for namespaced and time-qualified ids.

These Pydantic models provide immutable, string-encodable identifiers. Each
one composes the previous by value:

    - NamespaceId:           {namespace}/{id}
    - TemporalNamespaceId:   {namespace}/{id}/{as_of}
    - BiTemporalNamespaceId: {namespace}/{id}/{as_of}/{as_at}

Format Examples:
    - orders/42
    - orders/42/1977-11-13T14:18:00Z
    - orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z

The as-of time is the valid time, when a version takes effect. The as-at
time is the transaction time, when that version was recorded. Ids are
generic over the value type T, which must support ordering and equality.

No escaping is performed: a namespace or id whose text contains '/' cannot
be decoded again.
"""

import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nsid.core.errors import InvalidIdError
from nsid.core.ids.convert import resolve_id
from nsid.core.ids.segments import (
    SEPARATOR,
    split_bitemporal_id,
    split_namespace_id,
    split_temporal_id,
)
from nsid.core.ids.timestamps import Clock, Timestamp, TimestampLike, system_clock
from nsid.core.versioned import Versioned, compare_values

logger = logging.getLogger(__name__)

T = TypeVar("T")

M = TypeVar("M", bound=BaseModel)


def _build(model: type[M], id_string: str, **fields: Any) -> M:
    """Construct a decoded model, reporting validation failures as InvalidIdError."""
    try:
        return model(**fields)
    except ValidationError as e:
        raise InvalidIdError(f"Invalid {model.__name__} string {id_string!r}: {e}", id_string) from e


class NamespaceId(BaseModel, Versioned, Generic[T]):
    """
    NamespaceId: {namespace}/{id} → orders/42

    A unique id value within a namespace. Ordered by namespace, then id.
    """

    namespace: str
    id: T

    model_config = ConfigDict(frozen=True)

    @field_validator("namespace")
    @classmethod
    def check_namespace(cls, v: str) -> str:
        """Validate that namespace is not blank."""
        if not v.strip():
            raise ValueError("Namespace cannot be empty")
        return v

    @field_validator("id")
    @classmethod
    def check_id(cls, v: T) -> T:
        """Validate that id is present and has non-blank text."""
        if v is None:
            raise ValueError("ID cannot be None")
        if not str(v).strip():
            raise ValueError("ID cannot be empty")
        return v

    @classmethod
    def create(cls, namespace: str, id_value: T) -> "NamespaceId[T]":
        """Construct from a namespace and an id value."""
        return cls(namespace=namespace, id=id_value)

    @classmethod
    def from_string(
        cls,
        id_string: str,
        id_type: type[T] = str,  # type: ignore[assignment]
        *,
        converter: Callable[[str], T] | None = None,
    ) -> "NamespaceId[T]":
        """
        Decode a namespace id string.

        Temporal and bi-temporal id strings are accepted too; their
        trailing timestamp segment is ignored.

        Args:
            id_string: '/' separated id string
            id_type: Type of the id value (default str)
            converter: Explicit text-to-id conversion, replacing id_type lookup

        Returns:
            The decoded NamespaceId

        Raises:
            InvalidIdError: If the string cannot be decoded

        Examples:
            >>> NamespaceId.from_string("namespace/2", int).id
            2
            >>> NamespaceId.from_string("ns/1/1977-11-13T14:18:00Z").id
            '1'
        """
        segments = split_namespace_id(id_string)
        id_value = resolve_id(segments.id, id_type, converter)
        return _build(cls, id_string, namespace=segments.namespace, id=id_value)

    def compare_to(self, other: "NamespaceId[T]") -> int:
        if not isinstance(other, NamespaceId):
            raise TypeError(f"Cannot compare NamespaceId with {type(other).__name__}")
        if self is other:
            return 0
        return compare_values(self.namespace, other.namespace) or compare_values(
            self.id, other.id
        )

    def to_namespace_id(self) -> "NamespaceId[T]":
        """Return this id (already a NamespaceId)."""
        return self

    def to_string(self) -> str:
        """Canonical string form."""
        return str(self)

    def __str__(self) -> str:
        """Format as {namespace}/{id}"""
        return f"{self.namespace}{SEPARATOR}{self.id}"


class TemporalNamespaceId(BaseModel, Versioned, Generic[T]):
    """
    TemporalNamespaceId: {namespace_id}/{as_of} → orders/42/1977-11-13T14:18:00Z

    A NamespaceId qualified by the time at which this version of the entity
    became effective. as_of_time defaults to the current time, captured once
    when the model is constructed. Ordered by namespace, id, then as_of_time.
    """

    namespace_id: NamespaceId
    as_of_time: Timestamp = Field(default_factory=Timestamp.now)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(
        cls,
        namespace: str,
        id_value: T,
        as_of_time: TimestampLike | None = None,
        *,
        clock: Clock = system_clock,
    ) -> "TemporalNamespaceId[T]":
        """
        Construct from parts.

        Args:
            namespace: Namespace of the id
            id_value: Id value
            as_of_time: Timestamp, aware datetime or ISO-8601 string;
                read from clock when omitted
            clock: Current-time source for the default
        """
        if as_of_time is None:
            as_of_time = clock()
        return cls(
            namespace_id=NamespaceId(namespace=namespace, id=id_value),
            as_of_time=as_of_time,
        )

    @classmethod
    def from_string(
        cls,
        id_string: str,
        id_type: type[T] = str,  # type: ignore[assignment]
        *,
        converter: Callable[[str], T] | None = None,
    ) -> "TemporalNamespaceId[T]":
        """
        Decode a temporal id string: {namespace}/{id}/{as_of}.

        Raises:
            InvalidIdError: If fewer than 2 separators are present, the id
                cannot be converted or the as-of segment is not an instant
        """
        segments = split_temporal_id(id_string)
        id_value = resolve_id(segments.id, id_type, converter)
        as_of_time = Timestamp.parse(segments.as_of)
        namespace_id = _build(NamespaceId, id_string, namespace=segments.namespace, id=id_value)
        return _build(cls, id_string, namespace_id=namespace_id, as_of_time=as_of_time)

    @property
    def namespace(self) -> str:
        return self.namespace_id.namespace

    @property
    def id(self) -> T:
        return self.namespace_id.id

    def compare_to(self, other: "TemporalNamespaceId[T]") -> int:
        if not isinstance(other, TemporalNamespaceId):
            raise TypeError(f"Cannot compare TemporalNamespaceId with {type(other).__name__}")
        if self is other:
            return 0
        return self.namespace_id.compare_to(other.namespace_id) or compare_values(
            self.as_of_time, other.as_of_time
        )

    def to_namespace_id(self) -> "NamespaceId[T]":
        """Project to a new NamespaceId, dropping the as-of time."""
        return NamespaceId(namespace=self.namespace, id=self.id)

    def to_temporal_id(self) -> "TemporalNamespaceId[T]":
        """Return this id (already a TemporalNamespaceId)."""
        return self

    def to_string(self) -> str:
        """Canonical string form."""
        return str(self)

    def __str__(self) -> str:
        """Format as {namespace_id}/{as_of}"""
        return f"{self.namespace_id}{SEPARATOR}{self.as_of_time}"


class BiTemporalNamespaceId(BaseModel, Versioned, Generic[T]):
    """
    BiTemporalNamespaceId: {temporal_id}/{as_at}
        → orders/42/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z

    A TemporalNamespaceId further qualified by the time at which this
    version was recorded or observed. Both timestamps default to the current
    time, read independently. Ordered by namespace, id, as_of_time, then
    as_at_time.
    """

    temporal_id: TemporalNamespaceId
    as_at_time: Timestamp = Field(default_factory=Timestamp.now)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(
        cls,
        namespace: str,
        id_value: T,
        as_of_time: TimestampLike | None = None,
        as_at_time: TimestampLike | None = None,
        *,
        clock: Clock = system_clock,
    ) -> "BiTemporalNamespaceId[T]":
        """
        Construct from parts.

        Each omitted timestamp is a separate clock() read, so two defaulted
        timestamps may differ slightly.
        """
        if as_of_time is None:
            as_of_time = clock()
        if as_at_time is None:
            as_at_time = clock()
        return cls(
            temporal_id=TemporalNamespaceId(
                namespace_id=NamespaceId(namespace=namespace, id=id_value),
                as_of_time=as_of_time,
            ),
            as_at_time=as_at_time,
        )

    @classmethod
    def from_string(
        cls,
        id_string: str,
        id_type: type[T] = str,  # type: ignore[assignment]
        *,
        converter: Callable[[str], T] | None = None,
    ) -> "BiTemporalNamespaceId[T]":
        """
        Decode a bi-temporal id string: {namespace}/{id}/{as_of}/{as_at}.

        Raises:
            InvalidIdError: If fewer than 3 separators are present, the id
                cannot be converted or either timestamp is not an instant

        Examples:
            >>> btid = BiTemporalNamespaceId.from_string(
            ...     "bitemporal/id/1977-11-13T14:18:00Z/2008-01-05T22:00:00Z"
            ... )
            >>> str(btid.as_at_time)
            '2008-01-05T22:00:00Z'
        """
        segments = split_bitemporal_id(id_string)
        id_value = resolve_id(segments.id, id_type, converter)
        as_of_time = Timestamp.parse(segments.as_of)
        as_at_time = Timestamp.parse(segments.as_at)
        namespace_id = _build(NamespaceId, id_string, namespace=segments.namespace, id=id_value)
        temporal_id = _build(
            TemporalNamespaceId, id_string, namespace_id=namespace_id, as_of_time=as_of_time
        )
        return _build(cls, id_string, temporal_id=temporal_id, as_at_time=as_at_time)

    @property
    def namespace(self) -> str:
        return self.temporal_id.namespace

    @property
    def id(self) -> T:
        return self.temporal_id.id

    @property
    def as_of_time(self) -> Timestamp:
        return self.temporal_id.as_of_time

    def compare_to(self, other: "BiTemporalNamespaceId[T]") -> int:
        if not isinstance(other, BiTemporalNamespaceId):
            raise TypeError(f"Cannot compare BiTemporalNamespaceId with {type(other).__name__}")
        if self is other:
            return 0
        return self.temporal_id.compare_to(other.temporal_id) or compare_values(
            self.as_at_time, other.as_at_time
        )

    def to_namespace_id(self) -> "NamespaceId[T]":
        """Project to a new NamespaceId, dropping both timestamps."""
        return NamespaceId(namespace=self.namespace, id=self.id)

    def to_temporal_id(self) -> "TemporalNamespaceId[T]":
        """Project to a new TemporalNamespaceId, dropping the as-at time."""
        return TemporalNamespaceId(
            namespace_id=self.to_namespace_id(), as_of_time=self.as_of_time
        )

    def to_bitemporal_id(self) -> "BiTemporalNamespaceId[T]":
        """Return this id (already a BiTemporalNamespaceId)."""
        return self

    def to_string(self) -> str:
        """Canonical string form."""
        return str(self)

    def __str__(self) -> str:
        """Format as {temporal_id}/{as_at}"""
        return f"{self.temporal_id}{SEPARATOR}{self.as_at_time}"
