"""Built-in functions, built-in methods and per-type attribute tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar

from weilang.base import ObjectType, WeiObject, attribute_error

BuiltinFunction = Callable[..., WeiObject]
BuiltinMethodFunction = Callable[..., WeiObject]


@dataclass(eq=False)
class Builtin(WeiObject):
    """A function provided by the interpreter."""

    name: str
    fn: BuiltinFunction

    object_type: ClassVar[ObjectType] = ObjectType.BUILTIN

    def __str__(self) -> str:
        return f"<builtin function {self.name}>"

    def call(self, *args: WeiObject) -> WeiObject:
        return self.fn(*args)


@dataclass(eq=False)
class BuiltinMethod(WeiObject):
    """An unbound method of a built-in type; ``fn`` takes the receiver first."""

    ctype: ObjectType
    name: str
    fn: BuiltinMethodFunction

    object_type: ClassVar[ObjectType] = ObjectType.BUILTIN_METHOD

    def __str__(self) -> str:
        return f"<builtin method '{self.name}' of '{self.ctype}' object>"

    def bind(self, this: WeiObject) -> "BoundBuiltinMethod":
        return BoundBuiltinMethod(self, this)


@dataclass(eq=False)
class BoundBuiltinMethod(WeiObject):
    """A built-in method bound to the value it was looked up on."""

    method: BuiltinMethod
    this: WeiObject

    object_type: ClassVar[ObjectType] = ObjectType.BOUND_BUILTIN_METHOD

    @property
    def name(self) -> str:
        return self.method.name

    @property
    def ctype(self) -> ObjectType:
        return self.method.ctype

    @property
    def fn(self) -> BuiltinMethodFunction:
        return self.method.fn

    def __str__(self) -> str:
        return f"<bound builtin method '{self.name}' of '{self.ctype}' object>"

    def call(self, *args: WeiObject) -> WeiObject:
        return self.method.fn(self.this, *args)

    def get_attribute(self, name: str) -> WeiObject:
        if name == "__name__":
            from weilang.text import String

            return String(self.name)
        raise attribute_error(str(self.ctype), name)


@dataclass
class AttributeStore:
    """Attributes shared by every value of one built-in type."""

    attribute: dict[str, WeiObject]

    def get(self, obj: WeiObject, name: str) -> WeiObject | None:
        """Look up ``name``, binding methods to ``obj``; None if absent."""
        value = self.attribute.get(name)
        if isinstance(value, BuiltinMethod):
            return value.bind(obj)
        return value