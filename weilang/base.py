"""Core runtime values: the object base class, errors, scalars and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_UINT64_MASK = (1 << 64) - 1


class ObjectType(str, Enum):
    """The name of every kind of runtime value."""

    INTEGER = "int"
    BOOLEAN = "bool"
    NULL = "null"
    ERROR = "error"
    RETURN_VALUE = "return_value"
    FUNCTION = "function"
    STRING = "str"
    STRING_ITERATOR = "str_iterator"
    BUILTIN = "builtin"
    LIST = "list"
    LIST_ITERATOR = "list_iterator"
    DICT = "dict"
    DICT_ITERATOR = "dict_iterator"
    CONTINUE_VALUE = "continue_value"
    BREAK_VALUE = "break_value"
    BUILTIN_METHOD = "builtin_method"
    BOUND_BUILTIN_METHOD = "bound_builtin_method"
    MODULE = "module"
    TUPLE = "tuple"
    CLASS = "class"
    INSTANCE = "instance_obj"
    BOUND_CLASS_METHOD = "bound_class_method"
    BOUND_METHOD = "bound_method"
    SUPER = "super"
    WEI = "wei"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HashKey:
    """Key under which a hashable value is stored in a dict."""

    type: ObjectType
    value: int


class WeiObject:
    """Base of every runtime value.

    Subclasses set ``object_type``. Containers override ``_equals`` and
    ``_render`` to take part in cycle-safe comparison and printing.
    """

    object_type: ClassVar[ObjectType]

    @property
    def type(self) -> ObjectType:
        return self.object_type

    def type_is(self, object_type: ObjectType) -> bool:
        return self.type == object_type

    def _equals(self, other: "WeiObject", visited: set[int]) -> bool:
        """Compare with a value of the same type; identity by default."""
        return self is other

    def _deep_equal(self, other: "WeiObject", visited: set[int]) -> bool:
        if not other.type_is(self.type):
            return False
        return self._equals(other, visited)

    def _render(self, visited: set[int]) -> str:
        """Text form, given the ids of containers already being printed."""
        return str(self)


class WeiError(WeiObject, Exception):
    """A runtime error; it is both a value and a raisable exception."""

    object_type = ObjectType.ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"

    def __repr__(self) -> str:
        return f"WeiError({self.message!r})"


def new_error(template: str, *args: object) -> WeiError:
    """Build an error whose message is ``template % args``."""
    return WeiError(template % args if args else template)


def wrong_number_unpack(got: int, want: int) -> WeiError:
    return new_error("unpack got=%d, want=%d", got, want)


def wrong_number_argument(got: int, want: int) -> WeiError:
    return new_error("wrong number of arguments. got=%d, want=%d", got, want)


def wrong_number_argument_range(got: int, low: int, high: int) -> WeiError:
    return new_error("wrong number of arguments. got=%d, want=%d-%d", got, low, high)


def wrong_number_argument_named(name: str, got: int, want: int) -> WeiError:
    return new_error("%s wrong number of arguments. got=%d, want=%d", name, got, want)


def wrong_argument_type(got: ObjectType, at: int | None = None) -> WeiError:
    """Error for an argument of the wrong type, optionally at a position."""
    if at is None:
        return new_error("wrong argument type: '%s'", got)
    return new_error("wrong argument type: '%s' at %d", got, at)


def attribute_error(otype: str, name: str) -> WeiError:
    return new_error("'%s' object has not attribute '%s'", otype, name)


def unreachable(msg: str) -> WeiError:
    return new_error("unreachable %s", msg)


class Null(WeiObject):
    """The single ``null`` value."""

    object_type = ObjectType.NULL

    def __str__(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return "NULL"

    def hash_key(self) -> HashKey:
        return HashKey(self.type, 0)


@dataclass(eq=False)
class Boolean(WeiObject):
    value: bool

    object_type: ClassVar[ObjectType] = ObjectType.BOOLEAN

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(self.type, 1 if self.value else 0)


@dataclass(eq=False)
class Integer(WeiObject):
    value: int

    object_type: ClassVar[ObjectType] = ObjectType.INTEGER

    def __str__(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(self.type, self.value & _UINT64_MASK)

    def _equals(self, other: WeiObject, visited: set[int]) -> bool:
        return isinstance(other, Integer) and self.value == other.value


@dataclass(eq=False)
class ReturnValue(WeiObject):
    """Wraps the value of a ``return`` while it unwinds the evaluator."""

    value: WeiObject

    object_type: ClassVar[ObjectType] = ObjectType.RETURN_VALUE

    def __str__(self) -> str:
        return str(self.value)


class ContinueValue(WeiObject):
    """Signals a ``continue`` statement."""

    object_type = ObjectType.CONTINUE_VALUE

    def __str__(self) -> str:
        return "continue"


class BreakValue(WeiObject):
    """Signals a ``break`` statement."""

    object_type = ObjectType.BREAK_VALUE

    def __str__(self) -> str:
        return "break"


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)
CONTINUE_VALUE = ContinueValue()
BREAK_VALUE = BreakValue()


def native_bool_to_boolean(value: bool) -> Boolean:
    """Return the shared TRUE or FALSE object."""
    return TRUE if value else FALSE


def type_in(obj: WeiObject | None, *args: ObjectType) -> bool:
    """True if ``obj`` is not None and has one of the given types."""
    if obj is None:
        return False
    return any(obj.type_is(object_type) for object_type in args)


def convert_range(i: int, n: int) -> int:
    """Resolve a possibly negative index and clamp it into ``0..n``."""
    if i < 0:
        i += n
    return min(max(i, 0), n)


def equal(a: WeiObject, b: WeiObject) -> bool:
    """Structural equality, safe on self-referencing containers."""
    return a._deep_equal(b, set())


def object_string(obj: WeiObject) -> str:
    """Text form of ``obj``, printing repeated containers as ``...``."""
    return obj._render(set())