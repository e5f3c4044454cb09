"""Enumerations that map CloudStack wire literals onto symbolic members.

The API is inconsistent about how it spells enumerated values: some are
integer codes, some UpperCamel, some lower-hyphen and a few are irregular.
Every family here derives the wire literal from the member name and never
raises on an unknown value; it falls back to ``UNRECOGNIZED`` (or ``UNKNOWN``
where the enum has no ``UNRECOGNIZED`` member) so that values added on the
server side do not break parsing.
"""
import logging
import re
from enum import Enum
from typing import Any, List, Optional

from pydantic_core import core_schema

logger = logging.getLogger(__name__)

_CAMEL_WORDS = re.compile(r"[A-Z][^A-Z]*|^[^A-Z]+")


class CaseFormat(Enum):
    """Identifier spelling conventions found on the wire."""
    LOWER_HYPHEN = "lower-hyphen"
    LOWER_UNDERSCORE = "lower_underscore"
    LOWER_CAMEL = "lowerCamel"
    UPPER_CAMEL = "UpperCamel"
    UPPER_UNDERSCORE = "UPPER_UNDERSCORE"

    def split_words(self, text: str) -> List[str]:
        """Split text written in this format into lower-case words."""
        if self is CaseFormat.LOWER_HYPHEN:
            parts = text.split("-")
        elif self in (CaseFormat.LOWER_UNDERSCORE, CaseFormat.UPPER_UNDERSCORE):
            parts = text.split("_")
        else:
            # every capital starts a new word, so "VM" becomes "v", "m"
            parts = _CAMEL_WORDS.findall(text)
        return [part.lower() for part in parts if part]

    def join_words(self, words: List[str]) -> str:
        """Join lower-case words using this format."""
        if self is CaseFormat.LOWER_HYPHEN:
            return "-".join(words)
        if self is CaseFormat.LOWER_UNDERSCORE:
            return "_".join(words)
        if self is CaseFormat.UPPER_UNDERSCORE:
            return "_".join(word.upper() for word in words)
        camel = "".join(word.capitalize() for word in words)
        if self is CaseFormat.LOWER_CAMEL and camel:
            return camel[0].lower() + camel[1:]
        return camel

    def to(self, target: "CaseFormat", text: str) -> str:
        """Convert text from this format to the target format."""
        if self is target:
            return text
        return target.join_words(self.split_words(text))


class WireEnum(str, Enum):
    """
    String-valued enum whose members carry their wire literal as value.

    Subclasses pick a case format by overriding ``wire_format``; members
    declared with ``auto()`` get their literal derived from their name, and
    members declared with an explicit string keep it as an irregular literal.
    """

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    @classmethod
    def wire_format(cls) -> Optional[CaseFormat]:
        """Case format of the wire literal, or None when it is the member name."""
        return None

    @classmethod
    def fallback(cls) -> "WireEnum":
        """Member returned for values this client does not know."""
        members = cls.__members__
        return members["UNRECOGNIZED"] if "UNRECOGNIZED" in members else members["UNKNOWN"]

    @classmethod
    def from_value(cls, value: Any) -> "WireEnum":
        """
        Resolve a wire value to a member.

        Args:
            value: Wire literal, member, or None

        Returns:
            Matching member, or the fallback member when nothing matches
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.fallback()
        text = str(value)
        member = cls._value2member_map_.get(text)
        if member is None:
            member = cls.__members__.get(cls._member_name(text))
        if member is None:
            member = cls.__members__.get(text.upper())
        if member is None:
            logger.debug("Unrecognized %s value %r", cls.__name__, text)
            return cls.fallback()
        return member

    @classmethod
    def _member_name(cls, text: str) -> str:
        wire_format = cls.wire_format()
        if wire_format is None:
            return text
        return wire_format.to(CaseFormat.UPPER_UNDERSCORE, text)

    @classmethod
    def _missing_(cls, value):
        return cls.from_value(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._to_wire, when_used="json"
            ),
        )

    @classmethod
    def _to_wire(cls, member: "WireEnum") -> str:
        return member.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def _literal_in(wire_format: CaseFormat):
    def generate(name, start, count, last_values):
        return CaseFormat.UPPER_UNDERSCORE.to(wire_format, name)
    return staticmethod(generate)


class UpperCamelEnum(WireEnum):
    """Wire literal is the member name in UpperCamel, e.g. ``PrepareForMaintenance``."""

    _generate_next_value_ = _literal_in(CaseFormat.UPPER_CAMEL)

    @classmethod
    def wire_format(cls) -> Optional[CaseFormat]:
        return CaseFormat.UPPER_CAMEL


class LowerHyphenEnum(WireEnum):
    """Wire literal is the member name in lower-hyphen, e.g. ``domain-admin``."""

    _generate_next_value_ = _literal_in(CaseFormat.LOWER_HYPHEN)

    @classmethod
    def wire_format(cls) -> Optional[CaseFormat]:
        return CaseFormat.LOWER_HYPHEN


class LowerCaseEnum(WireEnum):
    """Wire literal is the lower-cased member name, e.g. ``tcp``."""

    _generate_next_value_ = _literal_in(CaseFormat.LOWER_UNDERSCORE)

    @classmethod
    def wire_format(cls) -> Optional[CaseFormat]:
        return CaseFormat.LOWER_UNDERSCORE


class NameEnum(WireEnum):
    """Wire literal is exactly the member name."""


class CodeEnum(int, Enum):
    """
    Integer-coded enum; the wire carries the code as a number or numeric string.

    Codes outside the declared set resolve to the fallback member.
    """

    @classmethod
    def fallback(cls) -> "CodeEnum":
        """Member returned for codes this client does not know."""
        members = cls.__members__
        return members["UNRECOGNIZED"] if "UNRECOGNIZED" in members else members["UNKNOWN"]

    @classmethod
    def from_value(cls, value: Any) -> "CodeEnum":
        """
        Resolve a wire code to a member.

        Args:
            value: Integer code, numeric string, member name, or None

        Returns:
            Matching member, or the fallback member when nothing matches
        """
        if isinstance(value, cls):
            return value
        if value is None or isinstance(value, bool):
            return cls.fallback()
        code: Optional[int] = None
        if isinstance(value, int):
            code = value
        else:
            text = str(value).strip()
            try:
                code = int(text)
            except ValueError:
                member = cls.__members__.get(text.upper())
                if member is not None:
                    return member
        member = cls._value2member_map_.get(code) if code is not None else None
        if member is None:
            logger.debug("Unrecognized %s code %r", cls.__name__, value)
            return cls.fallback()
        return member

    @classmethod
    def _missing_(cls, value):
        return cls.from_value(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._to_wire, when_used="json"
            ),
        )

    @classmethod
    def _to_wire(cls, member: "CodeEnum") -> int:
        return int(member.value)

    @property
    def code(self) -> int:
        """Integer code carried on the wire."""
        return int(self.value)

    def __str__(self) -> str:
        return str(int(self.value))

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
