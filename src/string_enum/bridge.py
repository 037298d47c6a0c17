"""Conversion of closed-set values to and from JSON string tokens."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from string_enum.types import ClosedSet

E = TypeVar("E", bound=ClosedSet)


@dataclass(frozen=True)
class StringEnumConverter(Generic[E]):
    """Converter between values of one closed set and JSON string tokens.

    Fields typed as the closed set are dumped as their token in both
    python and JSON mode, so dumped data validates again as is.

    Unknown tokens raise :py:class:`~string_enum.errors.UnknownValueError`,
    which pydantic passes on instead of collecting it as a validation error.
    Hence a union field like ``A | B`` does not fall through to ``B``
    if a token is missing in ``A``, but fails on the first branch.
    """

    enum_type: type[E]
    """Closed set whose values are converted."""

    def decode(self, token: str | None) -> E | None:
        """Decode a token into the matching member.

        A missing token decodes to ``None``. Unknown tokens raise
        :py:class:`~string_enum.errors.UnknownValueError`.
        """
        if token is None:
            return None

        return self.enum_type.parse(token)

    def encode(self, instance: E) -> str:
        """Encode a member as its string token."""
        if instance is None:
            raise TypeError(
                f"Cannot encode a missing value of '{self.enum_type.__name__}'."
            )

        return str(instance)

    def validate(self, value: Any) -> E:
        """Validate raw field input of a pydantic model."""
        if isinstance(value, str):
            return self.enum_type.parse(value)

        if isinstance(value, self.enum_type):
            return self.enum_type.parse(str(value))

        raise ValueError(
            f"Expected a string token of '{self.enum_type.__name__}', "
            f"got '{type(value).__name__}'."
        )

    def core_schema(self) -> CoreSchema:
        """Return the pydantic core schema for fields typed as the closed set."""
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.encode,
                return_schema=core_schema.str_schema(),
                when_used="unless-none",
            ),
        )

    def json_schema(self) -> JsonSchemaValue:
        """Return the JSON schema of the closed set's string tokens."""
        return {
            "type": "string",
            "enum": [str(v) for v in self.enum_type.get_values()],
            "title": self.enum_type.__name__,
        }


class StringEnumJSONEncoder(json.JSONEncoder):
    """JSON encoder which writes closed-set values as their string tokens."""

    def default(self, o: Any) -> Any:  # noqa: D102
        if isinstance(o, ClosedSet):
            return StringEnumConverter(type(o)).encode(o)

        return super().default(o)
