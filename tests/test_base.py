import pytest

from weilang.base import (
    BREAK_VALUE,
    CONTINUE_VALUE,
    FALSE,
    NULL,
    TRUE,
    Boolean,
    HashKey,
    Integer,
    ObjectType,
    ReturnValue,
    WeiError,
    attribute_error,
    convert_range,
    equal,
    native_bool_to_boolean,
    new_error,
    object_string,
    type_in,
    unreachable,
    wrong_argument_type,
    wrong_number_argument,
    wrong_number_argument_named,
    wrong_number_argument_range,
    wrong_number_unpack,
)


def test_object_type_string_values():
    assert str(Integer(1).type) == "int"
    assert "%s" % NULL.type == "null"
    assert str(TRUE.type) == "bool"
    assert wrong_argument_type(ObjectType.INSTANCE).message == (
        "wrong argument type: 'instance_obj'"
    )


def test_type_is():
    assert Integer(1).type_is(ObjectType.INTEGER)
    assert not Integer(1).type_is(ObjectType.BOOLEAN)
    assert NULL.type is ObjectType.NULL
    assert TRUE.type is ObjectType.BOOLEAN


def test_integer_string_and_hash_key():
    assert str(Integer(42)) == "42"
    assert Integer(42).hash_key() == Integer(42).hash_key()
    assert Integer(42).hash_key() == HashKey(ObjectType.INTEGER, 42)


def test_negative_integer_hash_key_is_unsigned():
    key = Integer(-1).hash_key()
    assert key.value == 0xFFFFFFFFFFFFFFFF
    assert key.type is ObjectType.INTEGER


def test_boolean_hash_keys_and_strings():
    assert TRUE.hash_key() == HashKey(ObjectType.BOOLEAN, 1)
    assert FALSE.hash_key() == HashKey(ObjectType.BOOLEAN, 0)
    assert str(TRUE) == "true"
    assert str(FALSE) == "false"


def test_hash_keys_differ_across_types():
    assert not (Integer(1).hash_key() == TRUE.hash_key())
    assert not (Integer(0).hash_key() == NULL.hash_key())


def test_null():
    assert str(NULL) == "null"
    assert NULL.hash_key() == HashKey(ObjectType.NULL, 0)


def test_native_bool_to_boolean_returns_singletons():
    assert native_bool_to_boolean(True) is TRUE
    assert native_bool_to_boolean(False) is FALSE


def test_control_values():
    assert str(CONTINUE_VALUE) == "continue"
    assert str(BREAK_VALUE) == "break"
    assert CONTINUE_VALUE.type_is(ObjectType.CONTINUE_VALUE)
    assert BREAK_VALUE.type_is(ObjectType.BREAK_VALUE)


def test_return_value_string_is_wrapped_value():
    inner = Integer(7)
    rv = ReturnValue(inner)
    assert str(rv) == str(inner)
    assert rv.value is inner
    assert rv.type_is(ObjectType.RETURN_VALUE)


def test_type_in():
    assert not type_in(None, ObjectType.INTEGER)
    assert type_in(Integer(1), ObjectType.STRING, ObjectType.INTEGER)
    assert not type_in(Integer(1), ObjectType.STRING, ObjectType.NULL)


def test_convert_range_invariants():
    n = 5
    for i in range(-12, 12):
        result = convert_range(i, n)
        assert 0 <= result <= n
        if 0 <= i <= n:
            assert result == i
        elif i > n:
            assert result == n
        elif i + n >= 0:
            assert result == i + n
        else:
            assert result == 0


def test_equal_integers():
    assert equal(Integer(3), Integer(3))
    assert not equal(Integer(3), Integer(4))


def test_equal_different_types_is_false():
    assert not equal(Integer(1), TRUE)
    assert not equal(NULL, FALSE)


def test_equal_identity_types():
    assert equal(TRUE, TRUE)
    assert equal(NULL, NULL)
    assert not equal(TRUE, FALSE)
    assert not equal(Boolean(True), Boolean(True))


def test_object_string_of_scalars():
    assert object_string(Integer(12)) == str(Integer(12))
    assert object_string(NULL) == "null"
    assert object_string(TRUE) == "true"


def test_new_error_formats_message():
    err = new_error("undefined: '%s'", "foo")
    assert err.message == "undefined: 'foo'"
    assert str(err) == "Error: undefined: 'foo'"
    assert err.type_is(ObjectType.ERROR)


def test_new_error_without_arguments_keeps_template():
    err = new_error("pop from empty list")
    assert err.message == "pop from empty list"


def test_errors_can_be_raised():
    err = wrong_number_argument(2, 1)
    assert err.message == "wrong number of arguments. got=2, want=1"
    assert str(err) == "Error: wrong number of arguments. got=2, want=1"
    with pytest.raises(WeiError) as info:
        raise err
    assert info.value is err


def test_argument_count_errors():
    assert wrong_number_argument_range(3, 1, 2).message == (
        "wrong number of arguments. got=3, want=1-2"
    )
    assert wrong_number_argument_named("foo", 0, 1).message == (
        "foo wrong number of arguments. got=0, want=1"
    )
    assert wrong_number_unpack(3, 2).message == "unpack got=3, want=2"


def test_argument_type_errors():
    assert wrong_argument_type(ObjectType.INTEGER).message == "wrong argument type: 'int'"
    assert wrong_argument_type(ObjectType.LIST, 1).message == (
        "wrong argument type: 'list' at 1"
    )


def test_attribute_and_unreachable_errors():
    assert attribute_error("str", "foo").message == "'str' object has not attribute 'foo'"
    assert unreachable("here").message == "unreachable here"