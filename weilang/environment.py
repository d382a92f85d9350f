"""Variable scopes, the ``wei`` namespace, modules, functions and call stacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Sequence

from weilang.base import ObjectType, WeiObject, attribute_error, new_error
from weilang.text import String

WEI_NAME = "wei"


class Environment:
    """A scope of named values, optionally nested in an outer scope."""

    def __init__(self, outer: "Environment | None" = None) -> None:
        self._store: dict[str, WeiObject] = {}
        self._constants: dict[str, bool] = {}
        self.outer = outer

    def add(self, name: str, value: WeiObject, constant: bool) -> WeiObject:
        """Declare ``name`` in this scope; redeclaring is an error."""
        if name in self._store:
            raise new_error("variable name '%s' redeclared in this block", name)
        self._store[name] = value
        self._constants[name] = constant
        return value

    def get(self, name: str) -> WeiObject | None:
        """Value of ``name`` here or in an outer scope, or None."""
        if name in self._store:
            return self._store[name]
        if self.outer is not None:
            return self.outer.get(name)
        return None

    def _is_constant(self, name: str) -> bool:
        return self._constants.get(name, False)

    def set(self, name: str, value: WeiObject) -> None:
        """Assign to an existing variable in the nearest scope that has it."""
        if name not in self._store:
            if self.outer is not None:
                self.outer.set(name, value)
                return
            raise new_error("undefined: '%s'", name)
        if self._is_constant(name):
            raise new_error("cannot assign to constant: '%s'", name)
        self._store[name] = value

    def pass_value(self, name: str, value: WeiObject, is_constant: bool) -> WeiObject:
        """Bind an argument or loop target, replacing any earlier binding."""
        self._store[name] = value
        if is_constant:
            self._constants[name] = True
        return value

    def add_wei(self, wei: "Wei") -> None:
        self.add(WEI_NAME, wei, True)

    def get_from_wei(self, name: str) -> WeiObject:
        wei = self.get(WEI_NAME)
        if wei is None:
            raise RuntimeError("unreachable: not found wei from environment")
        return wei.get_attribute(name)


class Wei(WeiObject):
    """The read-only ``wei`` namespace of a module."""

    object_type = ObjectType.WEI

    def __init__(self) -> None:
        self._store: dict[str, WeiObject] = {}

    def __str__(self) -> str:
        return "wei"

    def get_attribute(self, name: str) -> WeiObject:
        if name in self._store:
            return self._store[name]
        raise new_error("undefined: 'wei.%s'", name)

    def set_attribute(self, name: str, value: WeiObject) -> None:
        raise new_error("undefined assignment: 'wei.%s", name)

    def add(self, name: str, value: WeiObject) -> None:
        self._store[name] = value


class Module(WeiObject):
    """A loaded source file: its top-level scope and exported names."""

    object_type = ObjectType.MODULE

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.env = Environment()
        wei = Wei()
        wei.add("filename", String(filename))
        self.env.add_wei(wei)
        self._exports: set[str] = set()

    def __str__(self) -> str:
        return f"<module object at '{self.filename}'>"

    def get_attribute(self, name: str) -> WeiObject:
        if name not in self._exports:
            raise attribute_error(str(self.type), name)
        value = self.env.get(name)
        if value is None:
            raise attribute_error(str(self.type), name)
        return value

    def set_attribute(self, name: str, value: WeiObject) -> None:
        if name not in self._exports:
            raise attribute_error(str(self.type), name)
        self.env.set(name, value)

    def add_export(self, name: str) -> None:
        self._exports.add(name)


@dataclass(eq=False)
class Function(WeiObject):
    """A user-defined function closed over the scope it was created in."""

    name: str
    parameters: Sequence[Any]
    body: Any
    env: Environment

    object_type: ClassVar[ObjectType] = ObjectType.FUNCTION

    def __str__(self) -> str:
        return f"<function at {id(self):#x}>"


@dataclass
class Frame:
    """One entry of the call stack."""

    filename: str
    func_name: str
    lineno: int = 0


@dataclass
class CallStack:
    """The chain of active calls, innermost last."""

    frames: list[Frame] = field(default_factory=list)

    def create_frame(self, filename: str, func_name: str) -> Frame:
        frame = Frame(filename, func_name)
        self.frames.append(frame)
        return frame

    def destroy_frame(self) -> Frame:
        return self.frames.pop()

    def top(self) -> Frame:
        return self.frames[-1]

    def copy(self) -> "CallStack":
        """A new stack sharing the current frames."""
        return CallStack(list(self.frames))