"""Errors raised when declaring or parsing closed sets."""

from typing import Any


class UnknownValueError(LookupError):
    """No member of a closed set has the given string form."""

    def __init__(self, value: Any, enum_type: type) -> None:  # noqa: D107
        self.value = value
        self.enum_type = enum_type
        super().__init__(
            f"The parameter '{value}' it is not defined "
            "within the possible values of the enum"
        )


class DuplicateValueError(ValueError):
    """Two members of the same closed set share one string value."""

    def __init__(  # noqa: D107
        self, enum_type: type, value: str, first: str, second: str
    ) -> None:
        self.enum_type = enum_type
        self.value = value
        self.first = first
        self.second = second
        super().__init__(
            f"Members '{first}' and '{second}' of '{enum_type.__name__}' "
            f"share the value '{value}'"
        )
