"""Common types."""

from collections.abc import Iterator
from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class ClosedSet(Protocol):
    """Protocol for closed sets of string-valued constants."""

    @classmethod
    def get_values(cls) -> Iterator[Self]: ...  # noqa: D102

    @classmethod
    def parse(cls, value: str) -> Self: ...  # noqa: D102

    @classmethod
    def try_parse(cls, value: str) -> tuple[bool, Self | None]: ...  # noqa: D102

    def __str__(self) -> str: ...  # noqa: D105
