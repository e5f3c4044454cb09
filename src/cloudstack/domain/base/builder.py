"""Fluent builder used to assemble records for request payloads."""
import logging
from typing import Any, Callable, Dict, Generic, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from cloudstack.domain.base.exceptions import ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _snapshot(value: Any) -> Any:
    # Callers may keep mutating what they passed in
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(value, dict):
        return dict(value)
    return value


class RecordBuilder(Generic[R]):
    """
    Accumulates field values and produces one immutable record.

    Every model field gets a fluent setter named after the field::

        account = (Account.builder()
                   .id("42")
                   .name("ops")
                   .ip_limit(0)
                   .build())

    Fields left unset take the model default: None for scalars, an empty
    set for collections.
    """

    def __init__(self, record_cls: Type[R]):
        self._record_cls = record_cls
        self._values: Dict[str, Any] = {}

    def from_record(self, record: R) -> "RecordBuilder[R]":
        """Copy every field of an existing record into this builder."""
        for name in self._record_cls.model_fields:
            self._values[name] = getattr(record, name)
        return self

    def set(self, name: str, value: Any) -> "RecordBuilder[R]":
        """
        Set a field by name.

        Raises:
            AttributeError: If the record has no such field
        """
        if name not in self._record_cls.model_fields:
            raise AttributeError(f"{self._record_cls.__name__} has no field '{name}'")
        self._values[name] = _snapshot(value)
        return self

    def __getattr__(self, name: str) -> Callable[[Any], "RecordBuilder[R]"]:
        if name.startswith("_") or name not in self._record_cls.model_fields:
            raise AttributeError(
                f"{type(self).__name__} for {self._record_cls.__name__} has no setter '{name}'"
            )

        def setter(value: Any) -> "RecordBuilder[R]":
            return self.set(name, value)

        return setter

    def build(self) -> R:
        """
        Produce the record.

        Returns:
            Immutable record holding the accumulated values

        Raises:
            ValidationError: If a value does not fit its field or a
                cross-field rule of the record is violated
        """
        try:
            return self._record_cls.model_validate(dict(self._values))
        except PydanticValidationError as e:
            errors = e.errors(include_url=False)
            first = errors[0]["msg"] if errors else str(e)
            logger.debug("Failed to build %s: %s", self._record_cls.__name__, errors)
            raise ValidationError(
                f"Invalid {self._record_cls.__name__}: {first}", details=errors
            ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._record_cls.__name__}, {self._values!r})"
