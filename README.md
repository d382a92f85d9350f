# weilang

The runtime side of the wei scripting language: its token kinds, its value
objects and their built-in methods, the scopes that hold variables,
modules, call stacks, and user-defined classes with inheritance and
`super`.

The package uses only the standard library and needs Python 3.10 or newer.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is in it

| Module                | Contents                                                                 |
|-----------------------|--------------------------------------------------------------------------|
| `weilang.token`       | `TokenType`, `Position`, `Token`, `lookup_ident`                          |
| `weilang.base`        | `ObjectType`, `HashKey`, `WeiObject`, `WeiError`, `Null`, `Boolean`, `Integer`, `ReturnValue`, `ContinueValue`, `BreakValue`, the shared `NULL`, `TRUE`, `FALSE`, `CONTINUE_VALUE`, `BREAK_VALUE`, and the helpers `equal`, `object_string`, `convert_range`, `type_in`, `native_bool_to_boolean` and the error builders |
| `weilang.builtin`     | `Builtin`, `BuiltinMethod`, `BoundBuiltinMethod`, `AttributeStore`        |
| `weilang.sequences`   | `Tuple`, `List`, `ListIterator`                                           |
| `weilang.text`        | `String`, `StringIterator`                                                |
| `weilang.mapping`     | `HashPair`, `Dict`, `DictIterator`                                        |
| `weilang.environment` | `Environment`, `Wei`, `Module`, `Function`, `Frame`, `CallStack`          |
| `weilang.classes`     | `Class`, `Instance`, `BoundClassMethod`, `BoundMethod`, `Super`           |

## Tokens

`TokenType` lists every token kind; `Token` holds a kind, its literal text
and its start and end `Position`. `lookup_ident` tells keywords from plain
identifiers:

```python
from weilang.token import TokenType, lookup_ident

lookup_ident("fn")     # TokenType.FUNCTION
lookup_ident("while")  # TokenType.WHILE
lookup_ident("total")  # TokenType.IDENT
```

## Values

Every runtime value is a `WeiObject` with an `ObjectType`, reached through
its `type` property and `type_is`. `Integer`, `Boolean`, `Null` and
`String` have a `hash_key()` and can be used as dict keys; other values
raise `WeiError("unhashable type: ...")` when used as one.

`equal` compares values structurally (integers and strings by value, lists
and dicts element by element, everything else by identity), and
`object_string` renders values the way the language prints them; a list,
tuple or dict that contains itself is shown as `[...]`, `(...)` or `{...}`.

Lists, strings and dicts carry their built-in methods:

- lists: `append`, `extend`, `insert`, `pop`, `remove`, `reverse`
- strings: `contains`, `count`, `endswith`, `find`, `format`, `isdigit`,
  `join`, `lower`, `split`, `startswith`, `strip`, `upper`
- dicts: `get`, `has`, `pop`, `setdefault`, `update`

`get_attribute` returns them as a `BoundBuiltinMethod`, called with
`call(...)`:

```python
from weilang.base import Integer
from weilang.sequences import List
from weilang.text import String

numbers = List([Integer(1)])
numbers.get_attribute("append").call(Integer(2), Integer(3))
str(numbers)                                       # "[1, 2, 3]"

parts = String("a,b,c").get_attribute("split").call(String(","), Integer(1))
str(parts)                                         # "[a, b,c]"

str(String("{} + {}").get_attribute("format").call(Integer(1), Integer(2)))  # "1 + 2"
```

A dict also answers `get_attribute` with the value stored under a string
key of that name, and `set_attribute` stores under such a key.

Iterating a list yields `(index, element)` tuples, a string yields
`(index, character)` tuples, and a dict yields `(key, value)` tuples; each
is a `Tuple` value.

Negative indexes count from the end, as `convert_range` does:

```python
from weilang.base import convert_range

convert_range(-1, 5)   # 4
convert_range(10, 5)   # 5
```

Wherever the language reports an error (a wrong number or type of
arguments, an index out of range, a missing key, an assignment to a
constant) a `WeiError` is raised. It is also a `WeiObject`, and its text
form is `Error: <message>`.

## Scopes and modules

An `Environment` maps names to values and records which were declared
constant. `get` falls through to the enclosing scope and returns `None`
for an unknown name; `set` assigns in the nearest scope that has the name.
Redeclaring a name in one scope, assigning to a constant, or assigning to
an undefined name raises `WeiError`. `pass_value` binds arguments and loop
targets, replacing any earlier binding.

A `Module` owns its top-level environment, exposes through
`get_attribute` and `set_attribute` only the names given to `add_export`,
and holds a `Wei` object under the name `wei` from which `wei.filename`
is read.

`Function` holds a name, parameters, a body and the environment it closes
over. `CallStack` records one `Frame` per active call, with
`create_frame`, `destroy_frame`, `top` and `copy`.

## Classes

A `Class` holds instance members and methods, class members and class
methods, each member optionally constant, and may inherit from a parent
class. An `Instance` starts with every member declared along the
inheritance chain; while its `in_init` flag is set, constant members may
be assigned. `ready()` raises `WeiError` if a member was left
uninitialised, then clears `in_init` and sets `__class__`.

Methods looked up on an instance come back as `BoundMethod`, class
methods as `BoundClassMethod`. Either one's `super()` gives a `Super` that
looks up instance methods, or class members and class methods, starting
from the parent of the class the method was defined in. `Super` does not
allow assignment.

## What it does not do

The package has no lexer, parser or evaluator, and no command or
interactive prompt: it cannot read or run wei source text on its own.
`Function` stores its parameters and body as given and does not execute
them. It provides the tokens, values, scopes and classes that such a
front end and evaluator work with.