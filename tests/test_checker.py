from typedset.internals.parser import parse_to_ast
from typedset.internals.report import Reporter
from typedset.semantics.checker import TypeChecker
from typedset.semantics.elements import default_element_table
from typedset.semantics.typesys import BuiltinType, ElementType, SetType, SliceType


def check(src):
    ast, _ = parse_to_ast(src)
    reporter = Reporter(source=src)
    checker = TypeChecker(default_element_table(), reporter)
    ok = checker.check(ast)
    return ok, reporter, checker


def test_valid_program_has_no_diagnostics():
    ok, reporter, checker = check(
        'let s = Set<MyString>("a")\n'
        's.add("b")\n'
        'let n = s.size()\n'
        'let items = s.slice()\n'
        'let homes = Set<Address>(Address("Bob", "Main St", 12345))\n'
        'print homes.contains(Address("Bob", "Main St", 12345))\n'
    )
    assert ok
    assert reporter.items == []
    assert checker.scope["s"][0] == SetType(ElementType("MyString"))
    assert checker.scope["n"][0] is BuiltinType.INT
    assert checker.scope["items"][0] == SliceType(ElementType("MyString"))


def test_string_coerces_to_mystring_only():
    ok, reporter, _ = check('let homes = Set<Address>("Main St")\n')
    assert not ok
    assert reporter.codes == ["CE2006"]
    assert "expected Address, got string" in reporter.items[0].message


def test_mystring_set_rejects_int():
    ok, reporter, _ = check("let s = Set<MyString>()\ns.add(5)\n")
    assert not ok
    assert reporter.codes == ["CE2006"]


def test_builtin_element_type_violates_constraint():
    for name in ("int", "bool", "string"):
        ok, reporter, _ = check(f"let s = Set<{name}>()\n")
        assert not ok
        assert reporter.codes == ["CE4006"]


def test_unknown_element_type():
    ok, reporter, _ = check("let s = Set<Widget>()\n")
    assert reporter.codes == ["CE2001"]
    ok, reporter, _ = check("let w = Widget(1)\n")
    assert reporter.codes == ["CE2001"]


def test_undeclared_name_reported_once():
    ok, reporter, _ = check("print ghost\nghost.add(\"x\")\n")
    assert reporter.codes == ["CE1001", "CE1001"]


def test_failed_binding_does_not_cascade():
    ok, reporter, _ = check("let s = Set<Widget>()\ns.add(\"x\")\nprint s\n")
    assert reporter.codes == ["CE2001"]


def test_redeclaration():
    ok, reporter, _ = check("let s = Set<MyString>()\nlet s = Set<MyString>()\n")
    assert reporter.codes == ["CE1005"]
    assert "1:5" in reporter.items[0].message


def test_method_on_non_set():
    ok, reporter, _ = check('let n = 3\nn.add(1)\n')
    assert reporter.codes == ["CE2041"]


def test_unknown_method_and_arity():
    ok, reporter, _ = check('let s = Set<MyString>()\ns.clear()\nprint s.size(1)\ns.add()\n')
    assert reporter.codes == ["CE2040", "CE2009", "CE2009"]


def test_record_field_checks():
    ok, reporter, _ = check(
        'let a = Address("Bob", "Main St")\n'
        'let b = Address("Bob", 12345, "Main St")\n'
    )
    assert reporter.codes == ["CE2027", "CE2028", "CE2028"]


def test_blank_results_cannot_be_used():
    ok, reporter, _ = check('let s = Set<MyString>()\nprint s.add("a")\nlet r = s.remove("a")\n')
    assert reporter.codes == ["CE2032", "CE2032"]


def test_unused_pure_result_is_warning():
    ok, reporter, _ = check('let s = Set<MyString>()\ns.size()\ns.contains("a")\n')
    assert ok
    assert reporter.codes == ["CW2001", "CW2001"]
    assert reporter.exit_code() == 1
