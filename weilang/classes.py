"""User-defined classes, their instances, bound methods and ``super``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from weilang.base import ObjectType, WeiObject, attribute_error, new_error
from weilang.environment import Function


class Class(WeiObject):
    """A class declared in a program, with instance and class-level members."""

    object_type = ObjectType.CLASS

    def __init__(self, name: str, parent: "Class | None" = None) -> None:
        self.name = name
        self.parent = parent
        self.members: dict[str, WeiObject | None] = {}
        self.methods: dict[str, Function] = {}
        self._constant_members: set[str] = set()
        self.class_members: dict[str, WeiObject] = {}
        self.class_methods: dict[str, Function] = {}
        self._constant_class_members: set[str] = set()

    def __str__(self) -> str:
        return f"<class {self.name}>"

    def __repr__(self) -> str:
        return f"Class({self.name!r})"

    def set_attribute(self, name: str, value: WeiObject) -> None:
        """Assign a class member here or in the nearest ancestor that has it."""
        if name in self._constant_class_members:
            raise new_error("cannot assign to constant attribute: '%s'", name)
        if name in self.class_members:
            self.class_members[name] = value
            return
        if self.parent is not None:
            self.parent.set_attribute(name, value)
            return
        raise attribute_error(str(self), name)

    def get_attribute(self, name: str) -> WeiObject:
        return self._get_attribute(self, name)

    def _get_attribute(self, cls: "Class", name: str) -> WeiObject:
        if name in self.class_members:
            return self.class_members[name]
        if name in self.class_methods:
            return BoundClassMethod(self, cls, self.class_methods[name])
        if self.parent is not None:
            return self.parent._get_attribute(cls, name)
        raise attribute_error(str(self), name)

    def _get_method(self, instance: "Instance", name: str) -> "BoundMethod | None":
        if name in self.methods:
            return BoundMethod(self, instance, self.methods[name])
        if self.parent is not None:
            return self.parent._get_method(instance, name)
        return None

    def _is_constant_member(self, name: str) -> bool:
        return name in self._constant_members

    def add_member(self, name: str, default_value: WeiObject | None, is_constant: bool) -> None:
        """Declare an instance member; ``None`` means it must be set in init."""
        if name in self.members:
            raise new_error("'%s' redeclared in this block", name)
        self.members[name] = default_value
        if is_constant:
            self._constant_members.add(name)

    def add_method(self, name: str, function: Function) -> None:
        if name in self.methods:
            raise new_error("'%s' redeclared in this block", name)
        self.methods[name] = function

    def add_class_member(self, name: str, default_value: WeiObject, is_constant: bool) -> None:
        if name in self.class_members:
            raise new_error("'%s' redeclared in this block", name)
        self.class_members[name] = default_value
        if is_constant:
            self._constant_class_members.add(name)

    def add_class_method(self, name: str, function: Function) -> None:
        if name in self.class_methods:
            raise new_error("'%s' redeclared in this block", name)
        self.class_methods[name] = function


class Instance(WeiObject):
    """An object created from a class."""

    object_type = ObjectType.INSTANCE

    def __init__(self, cls: Class) -> None:
        self.cls = cls
        chain: list[Class] = []
        current: Class | None = cls
        while current is not None:
            chain.append(current)
            current = current.parent
        self.members: dict[str, WeiObject | None] = {}
        for ancestor in reversed(chain):
            self.members.update(ancestor.members)
        # While True, constant members may still be assigned.
        self.in_init = False

    @property
    def class_name(self) -> str:
        return self.cls.name

    def __str__(self) -> str:
        return f"<{self.cls.name} object at {id(self):#x}>"

    def set_attribute(self, name: str, value: WeiObject) -> None:
        if not self.in_init and self.cls._is_constant_member(name):
            raise new_error("cannot assign to constant attribute: '%s'", name)
        if name not in self.members:
            raise attribute_error(str(self), name)
        self.members[name] = value

    def get_attribute(self, name: str) -> WeiObject:
        value = self.members.get(name)
        if value is not None:
            return value
        if name in self.members:
            return value  # type: ignore[return-value]
        method = self.cls._get_method(self, name)
        if method is not None:
            return method
        raise attribute_error(str(self), name)

    def set_member(self, name: str, value: WeiObject) -> None:
        self.members[name] = value

    def get_method(self, name: str) -> "BoundMethod | None":
        return self.cls._get_method(self, name)

    def ready(self) -> "Instance":
        """Check every member was initialised and finish construction."""
        for name, value in self.members.items():
            if value is None:
                raise new_error(
                    "%s object does not initialize attribute: '%s'", self.cls.name, name
                )
        self.in_init = False
        self.set_member("__class__", self.cls)
        return self


@dataclass(eq=False)
class BoundClassMethod(WeiObject):
    """A class method bound to the class it was looked up on."""

    define: Class
    cls: Class
    function: Function

    object_type: ClassVar[ObjectType] = ObjectType.BOUND_CLASS_METHOD

    def __str__(self) -> str:
        return f"<class method '{self.function.name}' of '{self.cls.name}'>"

    def super(self) -> "Super":
        return Super(self.define, self.cls, None)


@dataclass(eq=False)
class BoundMethod(WeiObject):
    """An instance method bound to an instance."""

    define: Class
    this: Instance
    function: Function

    object_type: ClassVar[ObjectType] = ObjectType.BOUND_METHOD

    @property
    def cls(self) -> Class:
        return self.this.cls

    def __str__(self) -> str:
        return f"<bound method '{self.function.name}' of '{self.this}'>"

    def super(self) -> "Super":
        return Super(self.define, None, self.this)


@dataclass(eq=False)
class Super(WeiObject):
    """Access to the parent of the class a method was defined in.

    Reaches instance methods, class members and class methods only.
    """

    define: Class
    cls: Class | None
    this: Instance | None

    object_type: ClassVar[ObjectType] = ObjectType.SUPER

    def __str__(self) -> str:
        subject = self.cls if self.cls is not None else self.this
        return f"<{subject} super in {self.define})>"

    def get_attribute(self, name: str) -> WeiObject:
        parent = self.define.parent
        if parent is None:
            raise attribute_error(str(self), name)
        if self.cls is not None:
            return parent._get_attribute(self.cls, name)
        assert self.this is not None
        method = parent._get_method(self.this, name)
        if method is None:
            raise attribute_error(str(self.this), name)
        return method

    def set_attribute(self, name: str, value: WeiObject) -> None:
        raise new_error("super does not support set attribute")