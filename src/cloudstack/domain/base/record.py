"""Base record type shared by every CloudStack response object."""
from functools import total_ordering
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, SerializationInfo, model_serializer

from cloudstack.domain.base.codecs import natural_key

R = TypeVar("R", bound="CloudStackRecord")

WIRE_CONTEXT = {"from_wire": True}


def _freeze(value: Any) -> Any:
    """Make nested dicts and lists hashable."""
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set):
        return frozenset(_freeze(v) for v in value)
    return value


def is_wire_context(context: Optional[Mapping[str, Any]]) -> bool:
    """True when validation runs for a deserialised API response."""
    return bool(context) and bool(context.get("from_wire"))


@total_ordering
class CloudStackRecord(BaseModel):
    """
    Immutable value object mapping one CloudStack JSON object.

    Fields use snake_case attribute names; each field whose wire key differs
    declares it with ``Field(alias=...)``. Subclasses tune behaviour with
    class variables:

    - ``equality_fields``: fields compared by ``==`` and hashed, all when None
    - ``identity_field``: field used for natural ordering
    - ``wire_collection``: key holding a list of these records in a response
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,  # Allow populating by field name (snake_case)
        extra="ignore",  # Server-side additions must not break parsing
        coerce_numbers_to_str=True,  # Older API versions send numeric ids
    )

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = None
    identity_field: ClassVar[Optional[str]] = "id"
    wire_collection: ClassVar[Optional[str]] = None

    @classmethod
    def from_wire(cls: Type[R], data: Mapping[str, Any]) -> R:
        """
        Create a record from a decoded API response object.

        Construction invariants enforced for request payloads are skipped on
        this path; the server is the authority for what it returns.

        Args:
            data: JSON object keyed by wire names

        Returns:
            New record instance
        """
        return cls.model_validate(dict(data), context=WIRE_CONTEXT)

    def to_wire(self) -> Dict[str, Any]:
        """
        Render the record as a JSON-compatible dict keyed by wire names.

        Fields with no wire value (None, empty tag sets, unlimited limits)
        are left out.
        """
        return self.model_dump(mode="json", by_alias=True)

    @model_serializer(mode="wrap")
    def serialize_present_fields(self, handler: Any, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        if info.by_alias:
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def builder(cls: Type[R]) -> "RecordBuilder[R]":
        """Start a fluent builder for this record type."""
        from cloudstack.domain.base.builder import RecordBuilder
        return RecordBuilder(cls)

    def to_builder(self: R) -> "RecordBuilder[R]":
        """Start a builder pre-populated with this record's values."""
        return self.builder().from_record(self)

    def sort_key(self) -> Tuple[Any, ...]:
        """Key used for natural ordering; the identity field by default."""
        if self.identity_field is None:
            return ()
        return (natural_key(getattr(self, self.identity_field)),)

    def _equality_values(self) -> Tuple[Any, ...]:
        names = self.equality_fields or tuple(type(self).model_fields)
        return tuple(getattr(self, name) for name in names)

    def __eq__(self, other: object) -> bool:
        """Records are equal when their type and equality fields match."""
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._equality_values() == other._equality_values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, _freeze(self._equality_values())))

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in type(self).model_fields
            if getattr(self, name) not in (None, frozenset(), ())
        )
        return f"{type(self).__name__}({shown})"

    __str__ = __repr__
