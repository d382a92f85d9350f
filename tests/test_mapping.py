import pytest

from weilang.base import NULL, TRUE, FALSE, Integer, WeiError, equal
from weilang.mapping import Dict, DictIterator, HashPair
from weilang.sequences import List, Tuple
from weilang.text import String


def make_dict(**values):
    d = Dict()
    for name, value in values.items():
        d.set_item(String(name), Integer(value))
    return d


def call(d, name, *args):
    return d.get_attribute(name).call(*args)


def test_set_and_get_item():
    d = Dict()
    d.set_item(String("a"), Integer(1))
    d.set_item(Integer(2), String("two"))
    assert d.get_item(String("a")).value == 1
    assert d.get_item(Integer(2)).value == "two"
    assert len(d) == 2


def test_set_item_overwrites_same_key():
    d = Dict()
    d.set_item(String("a"), Integer(1))
    d.set_item(String("a"), Integer(5))
    assert len(d) == 1
    assert d.get_item(String("a")).value == 5


def test_missing_key_error():
    d = Dict()
    with pytest.raises(WeiError) as info:
        d.get_item(String("zzz"))
    assert info.value.message == "key 'zzz' does not exist"


def test_unhashable_key_error():
    d = Dict()
    with pytest.raises(WeiError) as info:
        d.set_item(List([]), Integer(1))
    assert info.value.message == "unhashable type: 'list'"


def test_get_method_with_default():
    d = make_dict(a=1)
    assert call(d, "get", String("a")).value == 1
    assert call(d, "get", String("b")) is NULL
    fallback = Integer(9)
    assert call(d, "get", String("b"), fallback) is fallback


def test_get_method_wrong_arity():
    d = Dict()
    method = d.get_attribute("get")
    assert str(method) == "<bound builtin method 'get' of 'dict' object>"
    assert method.call(String("a")) is NULL
    with pytest.raises(WeiError) as info:
        method.call()
    assert info.value.message == "wrong number of arguments. got=0, want=1-2"
    with pytest.raises(WeiError) as info:
        method.call(String("a"), NULL, NULL)
    assert info.value.message == "wrong number of arguments. got=3, want=1-2"


def test_has_method():
    d = make_dict(a=1)
    assert call(d, "has", String("a")) is TRUE
    assert call(d, "has", String("b")) is FALSE
    assert str(d.get_attribute("has")) == "<bound builtin method 'has' of 'list' object>"


def test_pop_method():
    d = make_dict(a=1, b=2)
    assert call(d, "pop", String("a")).value == 1
    assert call(d, "has", String("a")) is FALSE
    assert call(d, "pop", String("a")) is NULL
    assert len(d) == 1


def test_setdefault_method():
    d = make_dict(a=1)
    assert call(d, "setdefault", String("a"), Integer(7)).value == 1
    value = Integer(7)
    assert call(d, "setdefault", String("c"), value) is value
    assert d.get_item(String("c")) is value
    assert call(d, "setdefault", String("d")) is NULL


def test_update_method():
    d = make_dict(a=1)
    other = make_dict(b=2)
    assert call(d, "update", other) is d
    assert d.get_item(String("b")).value == 2


def test_update_rejects_non_dict():
    d = Dict()
    with pytest.raises(WeiError) as info:
        call(d, "update", Integer(1))
    assert info.value.message == "wrong argument type: 'int' at 1"


def test_attribute_falls_back_to_string_key():
    d = make_dict(name=3)
    assert d.get_attribute("name").value == 3
    with pytest.raises(WeiError) as info:
        d.get_attribute("missing")
    assert info.value.message == "'dict' object has not attribute 'missing'"


def test_set_attribute_stores_string_key():
    d = Dict()
    d.set_attribute("x", Integer(4))
    assert d.get_item(String("x")).value == 4


def test_string_form():
    d = make_dict(a=1)
    assert str(d) == "{a: 1}"
    assert str(Dict()) == "{}"


def test_self_referencing_string_form():
    d = Dict()
    d.set_item(String("a"), d)
    assert str(d) == "{a: {...}}"


def test_iterator_yields_key_value_tuples():
    d = make_dict(a=1, b=2)
    it = d.iter()
    assert isinstance(it, DictIterator)
    items = {(str(t.elements[0]), t.elements[1].value) for t in it}
    assert items == {("a", 1), ("b", 2)}
    assert str(it) == "<dict_iterator>"


def test_iterator_is_snapshot():
    d = make_dict(a=1)
    it = d.iter()
    d.set_item(String("b"), Integer(2))
    assert len(list(it)) == 1


def test_equal_same_dict_and_length_mismatch():
    d = make_dict(a=1)
    assert equal(d, d)
    assert not equal(d, Dict())


def test_equal_shares_keys():
    key = String("a")
    a = Dict({key.hash_key(): HashPair(key, Integer(1))})
    b = Dict({key.hash_key(): HashPair(key, Integer(1))})
    c = Dict({key.hash_key(): HashPair(key, Integer(2))})
    assert equal(a, b)
    assert not equal(a, c)


def test_tuple_of_iterator_items():
    d = make_dict(k=5)
    item = next(iter(d.iter()))
    assert isinstance(item, Tuple)
    assert str(item) == "(k, 5)"