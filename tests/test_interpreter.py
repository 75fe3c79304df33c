import io

import pytest

from typedset import Address, MyString, Set
from typedset.internals.parser import parse_to_ast
from typedset.internals.report import Reporter
from typedset.runtime.interpreter import Interpreter, render
from typedset.semantics.checker import TypeChecker
from typedset.semantics.elements import default_element_table


def run(src):
    ast, _ = parse_to_ast(src)
    table = default_element_table()
    assert TypeChecker(table, Reporter(source=src)).check(ast)
    out = io.StringIO()
    interp = Interpreter(table, out=out)
    interp.run(ast)
    return out.getvalue(), interp


def test_render_values():
    assert render(True) == "true"
    assert render(False) == "false"
    assert render(12) == "12"
    assert render([MyString("a"), MyString("b")]) == "[a, b]"
    assert render([]) == "[]"
    assert render(Set(MyString("b"), MyString("a"))) == "a, b"


def test_strings_become_mystring_elements():
    _, interp = run('let s = Set<MyString>("a", "a")\ns.add("b")\n')
    s, _ = interp.env["s"]
    assert isinstance(s, Set)
    assert s.size() == 2
    assert s.contains(MyString("a"))
    assert not s.contains("a")


def test_addresses_are_built():
    _, interp = run('let homes = Set<Address>(Address("Bob", "Main St", 12345))\n')
    homes, _ = interp.env["homes"]
    assert homes.slice() == [Address("Bob", "Main St", 12345)]


def test_print_outputs():
    out, _ = run(
        'let s = Set<MyString>("y", "x")\n'
        's.remove("nope")\n'
        'print s\n'
        'print s.size()\n'
        'print s.contains("x")\n'
        'print s.contains("z")\n'
    )
    assert out == "x, y\n2\ntrue\nfalse\n"


def test_bound_variables_share_the_set():
    out, interp = run('let a = Set<MyString>()\nlet b = a\nb.add("k")\nprint a\n')
    assert out == "k\n"
    assert interp.env["a"][0] is interp.env["b"][0]


def test_unchecked_non_set_receiver_is_internal_error():
    ast, _ = parse_to_ast('let n = 1\nn.add(2)\n')
    with pytest.raises(RuntimeError, match="CE0002"):
        Interpreter(default_element_table(), out=io.StringIO()).run(ast)
