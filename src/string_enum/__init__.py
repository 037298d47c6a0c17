"""Closed sets of named constants with plain-string wire representations."""

from string_enum.bridge import StringEnumConverter, StringEnumJSONEncoder
from string_enum.enums import StrEnum, StringEnum, member
from string_enum.errors import DuplicateValueError, UnknownValueError
from string_enum.types import ClosedSet

__all__ = [
    "ClosedSet",
    "DuplicateValueError",
    "StrEnum",
    "StringEnum",
    "StringEnumConverter",
    "StringEnumJSONEncoder",
    "UnknownValueError",
    "member",
]
