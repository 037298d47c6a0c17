"""Closed sets of named, string-valued constants."""

from collections.abc import Callable, Iterator
from dataclasses import FrozenInstanceError, dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Self

from pydantic import GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema
from strenum import LowercaseStrEnum

from string_enum.bridge import StringEnumConverter
from string_enum.errors import DuplicateValueError, UnknownValueError
from string_enum.hashing import gen_int_hash
from string_enum.telemetry import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class _Declaration:
    """Placeholder for a member in the body of a closed set."""

    value: str | None = None


def member(value: str | None = None) -> Any:
    """Declare a member of the enclosing closed set.

    Args:
        value:
            Wire representation of the member, stored verbatim.
            Defaults to the attribute name the member is assigned to.

    Returns:
        A placeholder, which is replaced by the actual member
        as soon as the class body has been evaluated.
    """
    return _Declaration(value)


@dataclass(eq=False, init=False)
class StringEnum:
    """Base class for closed sets of named, string-valued constants.

    Members are declared as class attributes via :py:func:`member`
    and registered in declaration order::

        class OrderState(StringEnum):
            created = member("created")
            offered = member()

    Instances compare equal if they belong to the same closed set
    and carry the same value. A string context renders only the value.
    """

    value: str
    """Wire representation of this value."""

    name: str | None = field(default=None, init=False, repr=False)
    """Attribute under which this value was declared, if it is a member."""

    __members: ClassVar[MappingProxyType[str, Any]] = MappingProxyType({})

    def __init__(self, value: str) -> None:  # noqa: D107
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "name", None)

    def __setattr__(self, attr: str, value: Any) -> None:  # noqa: D105
        raise FrozenInstanceError(f"cannot assign to field '{attr}'")

    def __delattr__(self, attr: str) -> None:  # noqa: D105
        raise FrozenInstanceError(f"cannot delete field '{attr}'")

    def __init_subclass__(cls, unique: bool = True, **kwargs: Any) -> None:
        """Register the members declared in the body of a new closed set.

        Args:
            unique:
                Whether to reject two members sharing the same value.
            **kwargs:
                Passed on to superclass.
        """
        super().__init_subclass__(**kwargs)

        if len(cls.__members) > 0:
            raise TypeError(
                f"Closed set '{cls.__mro__[1].__name__}' already has members "
                "and cannot be extended."
            )

        declared = {
            attr: decl
            for attr, decl in vars(cls).items()
            if isinstance(decl, _Declaration)
        }

        members: dict[str, Self] = {}
        first_by_value: dict[str, str] = {}

        for attr, decl in declared.items():
            if attr in ("value", "name") or hasattr(StringEnum, attr):
                raise TypeError(
                    f"Cannot declare member '{attr}' of '{cls.__name__}', "
                    "the name is reserved."
                )

            value = decl.value if decl.value is not None else attr
            if unique and value in first_by_value:
                raise DuplicateValueError(cls, value, first_by_value[value], attr)
            first_by_value.setdefault(value, attr)

            instance = cls(value)
            object.__setattr__(instance, "name", attr)
            setattr(cls, attr, instance)
            members[attr] = instance

        cls.__members = MappingProxyType(members)

        if len(members) > 0:
            log.debug(
                f"Declared closed set '{cls.__name__}' with {len(members)} members"
            )

    @classmethod
    def get_values(cls) -> Iterator[Self]:
        """Iterate over all members of this closed set in declaration order."""
        yield from cls.__members.values()

    @classmethod
    def parse(cls, value: str) -> Self:
        """Return the first member whose string form equals ``value`` exactly."""
        found = cls.__find(value)
        if found is None:
            log.debug(f"Rejected unknown value '{value}' of '{cls.__name__}'")
            raise UnknownValueError(value, cls)

        return found

    @classmethod
    def try_parse(cls, value: str) -> tuple[bool, Self | None]:
        """Like :py:meth:`parse`, but report a missing match instead of raising."""
        found = cls.__find(value)
        return found is not None, found

    @classmethod
    def __find(cls, value: str) -> Self | None:
        return next((m for m in cls.get_values() if str(m) == value), None)

    def __str__(self) -> str:  # noqa: D105
        return self.value

    def __format__(self, format_spec: str) -> str:  # noqa: D105
        return format(self.value, format_spec)

    def __repr__(self) -> str:  # noqa: D105
        if self.name is not None:
            return f"{type(self).__name__}.{self.name}"

        return f"{type(self).__name__}('{self.value}')"

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, StringEnum):
            return NotImplemented

        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:  # noqa: D105
        return gen_int_hash(self.value)

    def __reduce__(self) -> tuple[Callable[..., Any], tuple[Any, ...]]:  # noqa: D105
        if self.name is not None:
            return getattr, (type(self), self.name)

        return type(self), (self.value,)

    @classmethod
    def __get_pydantic_core_schema__(  # noqa: D105
        cls, source: type[Any], handler: Callable[[Any], CoreSchema]
    ) -> CoreSchema:
        return StringEnumConverter(cls).core_schema()

    @classmethod
    def __get_pydantic_json_schema__(  # noqa: D105
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return StringEnumConverter(cls).json_schema()


class StrEnum(LowercaseStrEnum):
    """StrEnum which renders only its value in a string context.

    Suited for small sets fixed at definition time,
    whose members should also compare equal to their plain string.
    """

    @classmethod
    def get_values(cls) -> Iterator[Self]:
        """Iterate over all members of this enum in definition order."""
        yield from cls

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a string into a StrEnum of proper type."""
        _, result = cls.try_parse(value)
        if result is None:
            log.debug(f"Rejected unknown value '{value}' of '{cls.__name__}'")
            raise UnknownValueError(value, cls)

        return result

    @classmethod
    def try_parse(cls, value: str) -> tuple[bool, Self | None]:
        """Like :py:meth:`parse`, but report a missing match instead of raising."""
        found = next((m for m in cls if m.value == value), None)
        return found is not None, found

    def __repr__(self) -> str:  # noqa: D105
        return f"'{self.value}'"

    @classmethod
    def __get_pydantic_core_schema__(  # noqa: D105
        cls, source: type[Any], handler: Callable[[Any], CoreSchema]
    ) -> CoreSchema:
        return StringEnumConverter(cls).core_schema()

    @classmethod
    def __get_pydantic_json_schema__(  # noqa: D105
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return StringEnumConverter(cls).json_schema()
