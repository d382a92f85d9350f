"""String values, the string's built-in methods and its iterator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence

from weilang.base import (
    HashKey,
    Integer,
    ObjectType,
    WeiObject,
    attribute_error,
    convert_range,
    native_bool_to_boolean,
    new_error,
    wrong_argument_type,
    wrong_number_argument,
    wrong_number_argument_range,
)
from weilang.builtin import AttributeStore, BuiltinMethod, BoundBuiltinMethod
from weilang.sequences import List, Tuple

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_UINT64_MASK = (1 << 64) - 1


def _fnv1a_64(data: bytes) -> int:
    digest = _FNV64_OFFSET
    for byte in data:
        digest ^= byte
        digest = (digest * _FNV64_PRIME) & _UINT64_MASK
    return digest


@dataclass(eq=False)
class String(WeiObject):
    """An immutable text value, indexed by character."""

    value: str = ""

    object_type: ClassVar[ObjectType] = ObjectType.STRING
    attributes: ClassVar[AttributeStore]

    @property
    def length(self) -> int:
        return len(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value

    def _equals(self, other: WeiObject, visited: set[int]) -> bool:
        return isinstance(other, String) and self.value == other.value

    def hash_key(self) -> HashKey:
        return HashKey(self.type, _fnv1a_64(self.value.encode("utf-8")))

    def get_attribute(self, name: str) -> WeiObject:
        found = self.attributes.get(self, name)
        if found is None:
            raise attribute_error(str(self.type), name)
        return found

    def set_attribute(self, name: str, value: WeiObject) -> None:
        raise attribute_error(str(self.type), name)

    def iter(self) -> "StringIterator":
        return StringIterator(self)

    def _slice(self, start: int, end: int) -> str:
        start = convert_range(start, self.length)
        end = convert_range(end, self.length)
        return self.value[start:end]


class StringIterator(WeiObject):
    """Yields ``(index, character)`` tuples over a string."""

    object_type = ObjectType.STRING_ITERATOR

    def __init__(self, source: String) -> None:
        self._chars = source.value
        self._index = 0

    def __str__(self) -> str:
        return "<str_iterator>"

    def __iter__(self) -> Iterator[Tuple]:
        return self

    def __next__(self) -> Tuple:
        if self._index >= len(self._chars):
            raise StopIteration
        position = self._index
        self._index += 1
        return Tuple((Integer(position), String(self._chars[position])))


def _str_arg(args: Sequence[WeiObject], position: int) -> String:
    arg = args[position]
    if not isinstance(arg, String):
        raise wrong_argument_type(arg.type, position + 1)
    return arg


def _int_arg(args: Sequence[WeiObject], position: int) -> int:
    arg = args[position]
    if not isinstance(arg, Integer):
        raise wrong_argument_type(arg.type, position + 1)
    return arg.value


def _check_range_arity(args: Sequence[WeiObject], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        raise wrong_number_argument_range(len(args), low, high)


def _contains(this: String, *args: WeiObject) -> WeiObject:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    substr = args[0]
    if not isinstance(substr, String):
        raise wrong_argument_type(substr.type, 0)
    return native_bool_to_boolean(substr.value in this.value)


def _count(this: String, *args: WeiObject) -> WeiObject:
    """Count occurrences of ``sub`` in ``str[start:end]``."""
    _check_range_arity(args, 1, 3)
    sub = _str_arg(args, 0)
    if len(args) == 1:
        return Integer(this.value.count(sub.value))
    start = _int_arg(args, 1)
    end = _int_arg(args, 2) if len(args) == 3 else this.length
    if end - start < sub.length:
        return Integer(0)
    return Integer(this._slice(start, end).count(sub.value))


def _start_end(this: String, args: Sequence[WeiObject]) -> tuple[int, int]:
    start, end = 0, this.length
    if len(args) > 1:
        start = convert_range(_int_arg(args, 1), this.length)
        if len(args) == 3:
            end = convert_range(_int_arg(args, 2), this.length)
    return start, end


def _endswith(this: String, *args: WeiObject) -> WeiObject:
    _check_range_arity(args, 1, 3)
    sub = _str_arg(args, 0)
    start, end = _start_end(this, args)
    if sub.length == 0:
        return native_bool_to_boolean(True)
    if end - start < sub.length:
        return native_bool_to_boolean(False)
    return native_bool_to_boolean(this._slice(end - sub.length, end) == sub.value)


def _startswith(this: String, *args: WeiObject) -> WeiObject:
    _check_range_arity(args, 1, 3)
    sub = _str_arg(args, 0)
    start, end = _start_end(this, args)
    if sub.length == 0:
        return native_bool_to_boolean(True)
    if end - start < sub.length:
        return native_bool_to_boolean(False)
    return native_bool_to_boolean(this._slice(start, start + sub.length) == sub.value)


def _find(this: String, *args: WeiObject) -> WeiObject:
    """Position of the first ``sub`` in ``str[start:end]``, or -1."""
    _check_range_arity(args, 1, 3)
    sub = _str_arg(args, 0)
    if len(args) == 1:
        return Integer(this.value.find(sub.value))
    start = _int_arg(args, 1)
    end = _int_arg(args, 2) if len(args) == 3 else this.length
    found = this._slice(start, end).find(sub.value)
    if found != -1:
        found += convert_range(start, this.length)
    return Integer(found)


def _format(this: String, *args: WeiObject) -> WeiObject:
    """Replace each ``{}`` with the next argument; ``{{`` and ``}}`` escape."""
    want = this.value.count("{}")
    if len(args) != want:
        raise wrong_number_argument(len(args), want)
    out: list[str] = []
    used = 0
    pending = ""
    for char in this.value:
        if pending:
            if char == pending:
                out.append(char)
            elif char == "}":
                out.append(str(args[used]))
                used += 1
            else:
                raise new_error("single '%s' encountered in format string", pending)
            pending = ""
        elif char in "{}":
            pending = char
        else:
            out.append(char)
    if pending:
        raise new_error("single '%s' encountered in format string", pending)
    if used != len(args):
        raise wrong_number_argument(len(args), used)
    return String("".join(out))


def _isdigit(this: String, *args: WeiObject) -> WeiObject:
    if args:
        raise wrong_number_argument(len(args), 0)
    if not this.value:
        return native_bool_to_boolean(False)
    return native_bool_to_boolean(all("0" <= char <= "9" for char in this.value))


def _join(this: String, *args: WeiObject) -> WeiObject:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    items = args[0]
    if not isinstance(items, List):
        raise wrong_argument_type(items.type)
    return String(this.value.join(str(element) for element in items.elements))


def _lower(this: String, *args: WeiObject) -> WeiObject:
    if args:
        raise wrong_number_argument(len(args), 0)
    return String(this.value.lower())


def _upper(this: String, *args: WeiObject) -> WeiObject:
    if args:
        raise wrong_number_argument(len(args), 0)
    return String(this.value.upper())


def _split(this: String, *args: WeiObject) -> WeiObject:
    """Split on ``sep``, at most ``maxsplit`` times when given."""
    _check_range_arity(args, 1, 2)
    sep = _str_arg(args, 0)
    if sep.length == 0:
        raise new_error("empty separator")
    if len(args) == 1:
        parts = this.value.split(sep.value)
    else:
        maxsplit = _int_arg(args, 1)
        if maxsplit == -1:
            parts = []
        elif maxsplit < -1:
            parts = this.value.split(sep.value)
        else:
            parts = this.value.split(sep.value, maxsplit)
    return List([String(part) for part in parts])


def _strip(this: String, *args: WeiObject) -> WeiObject:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    chars = args[0]
    if not isinstance(chars, String):
        raise wrong_argument_type(chars.type)
    return String(this.value.strip(chars.value))


String.attributes = AttributeStore(
    {
        key: BuiltinMethod(ObjectType.STRING, name, fn)
        for key, name, fn in (
            ("contains", "contain", _contains),
            ("count", "count", _count),
            ("endswith", "endswith", _endswith),
            ("find", "find", _find),
            ("format", "format", _format),
            ("isdigit", "isdigit", _isdigit),
            ("join", "join", _join),
            ("lower", "lower", _lower),
            ("split", "split", _split),
            ("startswith", "startswith", _startswith),
            ("strip", "strip", _strip),
            ("upper", "upper", _upper),
        )
    }
)

__all__ = ["String", "StringIterator", "BoundBuiltinMethod"]