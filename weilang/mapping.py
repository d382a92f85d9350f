"""Dict values, the dict's built-in methods and its iterator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Sequence

from weilang.base import (
    NULL,
    HashKey,
    ObjectType,
    WeiObject,
    attribute_error,
    native_bool_to_boolean,
    new_error,
    object_string,
    wrong_argument_type,
    wrong_number_argument,
    wrong_number_argument_range,
)
from weilang.builtin import AttributeStore, BuiltinMethod
from weilang.sequences import Tuple
from weilang.text import String


def _hash_key(key: WeiObject) -> HashKey:
    """Hash key of ``key``, or an error if its type cannot be hashed."""
    hash_key = getattr(key, "hash_key", None)
    if not callable(hash_key):
        raise new_error("unhashable type: '%s'", key.type)
    return hash_key()


@dataclass
class HashPair:
    """A key together with the value stored under it."""

    key: WeiObject
    value: WeiObject


@dataclass(eq=False)
class Dict(WeiObject):
    """A mapping from hashable values to values."""

    pairs: dict[HashKey, HashPair] = field(default_factory=dict)

    object_type: ClassVar[ObjectType] = ObjectType.DICT
    attributes: ClassVar[AttributeStore]

    def __len__(self) -> int:
        return len(self.pairs)

    def __str__(self) -> str:
        return object_string(self)

    def _render(self, visited: set[int]) -> str:
        if id(self) in visited:
            return "{...}"
        visited.add(id(self))
        items = ", ".join(
            f"{pair.key}: {pair.value._render(visited)}" for pair in self.pairs.values()
        )
        return "{" + items + "}"

    def _equals(self, other: WeiObject, visited: set[int]) -> bool:
        if not isinstance(other, Dict) or len(self.pairs) != len(other.pairs):
            return False
        seen_self = id(self) in visited
        seen_other = id(other) in visited
        if seen_self and seen_other:
            return True
        if seen_self or seen_other:
            return False
        visited.add(id(self))
        visited.add(id(other))
        for key, mine in self.pairs.items():
            theirs = other.pairs.get(key)
            if theirs is None or mine.key is not theirs.key:
                return False
            if not mine.value._deep_equal(theirs.value, visited):
                return False
        return True

    def get_item(self, key: WeiObject) -> WeiObject:
        pair = self.pairs.get(_hash_key(key))
        if pair is None:
            raise new_error("key '%s' does not exist", str(key))
        return pair.value

    def set_item(self, key: WeiObject, value: WeiObject) -> None:
        self.pairs[_hash_key(key)] = HashPair(key, value)

    def iter(self) -> "DictIterator":
        return DictIterator(self)

    def get_attribute(self, name: str) -> WeiObject:
        found = self.attributes.get(self, name)
        if found is not None:
            return found
        pair = self.pairs.get(String(name).hash_key())
        if pair is not None:
            return pair.value
        raise attribute_error(str(self.type), name)

    def set_attribute(self, name: str, value: WeiObject) -> None:
        key = String(name)
        self.pairs[key.hash_key()] = HashPair(key, value)


class DictIterator(WeiObject):
    """Yields ``(key, value)`` tuples over a snapshot of a dict."""

    object_type = ObjectType.DICT_ITERATOR

    def __init__(self, source: Dict) -> None:
        self._pairs = list(source.pairs.values())
        self._index = 0

    def __str__(self) -> str:
        return "<dict_iterator>"

    def iter(self) -> "DictIterator":
        return self

    def __iter__(self) -> Iterator[Tuple]:
        return self

    def __next__(self) -> Tuple:
        if self._index >= len(self._pairs):
            raise StopIteration
        pair = self._pairs[self._index]
        self._index += 1
        return Tuple((pair.key, pair.value))


def _key_and_default(args: Sequence[WeiObject]) -> tuple[HashKey, WeiObject]:
    if not 1 <= len(args) <= 2:
        raise wrong_number_argument_range(len(args), 1, 2)
    hash_key = _hash_key(args[0])
    default = args[1] if len(args) == 2 else NULL
    return hash_key, default


def _get(this: Dict, *args: WeiObject) -> WeiObject:
    hash_key, default = _key_and_default(args)
    pair = this.pairs.get(hash_key)
    return pair.value if pair is not None else default


def _has(this: Dict, *args: WeiObject) -> WeiObject:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    return native_bool_to_boolean(_hash_key(args[0]) in this.pairs)


def _pop(this: Dict, *args: WeiObject) -> WeiObject:
    hash_key, default = _key_and_default(args)
    pair = this.pairs.pop(hash_key, None)
    return pair.value if pair is not None else default


def _setdefault(this: Dict, *args: WeiObject) -> WeiObject:
    hash_key, default = _key_and_default(args)
    pair = this.pairs.get(hash_key)
    if pair is not None:
        return pair.value
    this.pairs[hash_key] = HashPair(args[0], default)
    return default


def _update(this: Dict, *args: WeiObject) -> WeiObject:
    if len(args) != 1:
        raise wrong_number_argument(len(args), 1)
    other = args[0]
    if not isinstance(other, Dict):
        raise wrong_argument_type(other.type, 1)
    this.pairs.update(other.pairs)
    return this


Dict.attributes = AttributeStore(
    {
        "get": BuiltinMethod(ObjectType.DICT, "get", _get),
        "has": BuiltinMethod(ObjectType.LIST, "has", _has),
        "pop": BuiltinMethod(ObjectType.DICT, "pop", _pop),
        "setdefault": BuiltinMethod(ObjectType.DICT, "setdefault", _setdefault),
        "update": BuiltinMethod(ObjectType.DICT, "update", _update),
    }
)