"""Tuple and list values, with the list's built-in methods and iterator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from weilang.base import (
    Integer,
    ObjectType,
    WeiObject,
    attribute_error,
    convert_range,
    equal,
    new_error,
    object_string,
    wrong_argument_type,
    wrong_number_argument,
    wrong_number_argument_range,
)
from weilang.builtin import AttributeStore, BuiltinMethod


def _render_items(items: tuple[WeiObject, ...] | list[WeiObject], visited: set[int]) -> str:
    return ", ".join(item._render(visited) for item in items)


@dataclass(eq=False)
class Tuple(WeiObject):
    """An immutable sequence of values."""

    elements: tuple[WeiObject, ...] = ()

    object_type: ClassVar[ObjectType] = ObjectType.TUPLE

    def __post_init__(self) -> None:
        self.elements = tuple(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        return object_string(self)

    def _render(self, visited: set[int]) -> str:
        if id(self) in visited:
            return "(...)"
        visited.add(id(self))
        return f"({_render_items(self.elements, visited)})"


@dataclass(eq=False)
class List(WeiObject):
    """A mutable sequence of values."""

    elements: list[WeiObject] = field(default_factory=list)

    object_type: ClassVar[ObjectType] = ObjectType.LIST
    attributes: ClassVar[AttributeStore]

    def __post_init__(self) -> None:
        self.elements = list(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        return object_string(self)

    def _render(self, visited: set[int]) -> str:
        if id(self) in visited:
            return "[...]"
        visited.add(id(self))
        return f"[{_render_items(self.elements, visited)}]"

    def _equals(self, other: WeiObject, visited: set[int]) -> bool:
        if not isinstance(other, List) or len(self.elements) != len(other.elements):
            return False
        seen_self = id(self) in visited
        seen_other = id(other) in visited
        if seen_self and seen_other:
            return True
        if seen_self or seen_other:
            return False
        visited.add(id(self))
        visited.add(id(other))
        return all(
            mine._deep_equal(theirs, visited)
            for mine, theirs in zip(self.elements, other.elements)
        )

    def _resolve_index(self, index: WeiObject) -> int | None:
        """Turn ``index`` into a position, or None if it is out of range."""
        if not isinstance(index, Integer):
            raise new_error("list index expect 'int', got '%s'", index.type)
        idx = index.value
        length = len(self.elements)
        if idx < 0:
            idx += length
        if idx < 0 or idx >= length:
            return None
        return idx

    def get_item(self, index: WeiObject) -> WeiObject:
        idx = self._resolve_index(index)
        if idx is None:
            raise new_error("list index out of range")
        return self.elements[idx]

    def set_item(self, index: WeiObject, value: WeiObject) -> None:
        idx = self._resolve_index(index)
        if idx is None:
            raise new_error("list assignment index out of range")
        self.elements[idx] = value

    def iter(self) -> "ListIterator":
        return ListIterator(self)

    def get_attribute(self, name: str) -> WeiObject:
        found = self.attributes.get(self, name)
        if found is None:
            raise attribute_error(str(self.type), name)
        return found

    def set_attribute(self, name: str, value: WeiObject) -> None:
        raise attribute_error(str(self.type), name)


class ListIterator(WeiObject):
    """Yields ``(index, element)`` tuples over a list, seeing later changes."""

    object_type = ObjectType.LIST_ITERATOR

    def __init__(self, source: List) -> None:
        self._list = source
        self._index = 0

    def __str__(self) -> str:
        return "<list_iterator>"

    def iter(self) -> "ListIterator":
        return self

    def __iter__(self) -> Iterator[Tuple]:
        return self

    def __next__(self) -> Tuple:
        elements = self._list.elements
        if self._index >= len(elements):
            raise StopIteration
        position = self._index
        self._index += 1
        return Tuple((Integer(position), elements[position]))


def _append(this: List, *args: WeiObject) -> List:
    if not args:
        raise new_error("want at least 1 arguments")
    this.elements.extend(args)
    return this


def _extend(this: List, *args: WeiObject) -> List:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    other = args[0]
    if not isinstance(other, List):
        raise wrong_argument_type(other.type, 1)
    this.elements.extend(list(other.elements))
    return this


def _insert(this: List, *args: WeiObject) -> List:
    if len(args) != 2:
        raise wrong_number_argument(len(args), 2)
    index, value = args
    if not isinstance(index, Integer):
        raise wrong_argument_type(index.type, 1)
    length = len(this.elements)
    idx = convert_range(index.value, length)
    if idx >= length:
        this.elements.append(value)
    else:
        this.elements.insert(idx, value)
    return this


def _pop(this: List, *args: WeiObject) -> WeiObject:
    if len(args) > 1:
        raise wrong_number_argument_range(len(args), 0, 1)
    elements = this.elements
    length = len(elements)
    if not args:
        if length == 0:
            raise new_error("pop from empty list")
        return elements.pop()
    index = args[0]
    if not isinstance(index, Integer):
        raise wrong_argument_type(index.type, 1)
    if length == 0:
        raise new_error("pop from empty list")
    idx = index.value
    if idx < 0:
        idx += length
    if idx < 0 or idx >= length:
        raise new_error("list pop index out of range")
    return elements.pop(idx)


def _remove(this: List, *args: WeiObject) -> List:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    target = args[0]
    for position, element in enumerate(this.elements):
        if equal(element, target):
            del this.elements[position]
            return this
    raise new_error("object not in list")


def _reverse(this: List, *args: WeiObject) -> List:
    if args:
        raise wrong_number_argument(len(args), 0)
    this.elements.reverse()
    return this


List.attributes = AttributeStore(
    {
        name: BuiltinMethod(ObjectType.LIST, name, fn)
        for name, fn in (
            ("append", _append),
            ("extend", _extend),
            ("insert", _insert),
            ("pop", _pop),
            ("remove", _remove),
            ("reverse", _reverse),
        )
    }
)