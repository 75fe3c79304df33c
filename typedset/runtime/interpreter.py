"""Evaluates checked set scripts against real Set instances."""
from __future__ import annotations
import sys
from typing import Any, Dict, List, Optional, TextIO, Tuple

from typedset.core import Set
from typedset.internals import errors as er
from typedset.semantics.ast import (
    BoolLit, Expr, ExprStmt, IntLit, Let, MethodCall, Name, Print, Program,
    RecordNew, SetNew, Stmt, StringLit,
)
from typedset.semantics.checker import SET_METHODS
from typedset.semantics.elements import ElementTable
from typedset.semantics.typesys import (
    BuiltinType, ElementType, SetType, Type, builtin_from_name,
)

Value = Tuple[Any, Optional[Type]]


def render(value: Any) -> str:
    """Text form of a script value, as written by 'print'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(str(v) for v in value) + "]"
    return str(value)


class Interpreter:
    """Runs a Program. The program must have passed TypeChecker."""

    def __init__(self, element_table: ElementTable, out: Optional[TextIO] = None):
        self.element_table = element_table
        self.out = out or sys.stdout
        self.env: Dict[str, Value] = {}

    def run(self, program: Program) -> None:
        for stmt in program.statements:
            self._stmt(stmt)

    def _stmt(self, stmt: Stmt) -> None:
        if isinstance(stmt, Let):
            self.env[stmt.name] = self._eval(stmt.value)
        elif isinstance(stmt, Print):
            value, _ = self._eval(stmt.value)
            print(render(value), file=self.out)
        elif isinstance(stmt, ExprStmt):
            self._eval(stmt.expr)
        else:
            er.raise_internal_error("CE0001", node=type(stmt).__name__)

    def _coerce(self, value: Any, ty: Optional[Type], target: Type) -> Any:
        # Implicit primitive -> element conversion, e.g. "a" -> MyString("a")
        if isinstance(target, ElementType) and ty != target:
            kind = self.element_table.get(target.name)
            if kind is not None and kind.coerces_from == ty:
                return kind.build(value)
        return value

    def _eval_args(self, args: List[Expr], target: Type) -> List[Any]:
        values = []
        for arg in args:
            value, ty = self._eval(arg)
            values.append(self._coerce(value, ty, target))
        return values

    def _eval(self, expr: Expr) -> Value:
        if isinstance(expr, StringLit):
            return expr.value, BuiltinType.STRING
        if isinstance(expr, IntLit):
            return expr.value, BuiltinType.INT
        if isinstance(expr, BoolLit):
            return expr.value, BuiltinType.BOOL
        if isinstance(expr, Name):
            return self.env[expr.id]
        if isinstance(expr, SetNew):
            elem = builtin_from_name(expr.element_type) or ElementType(expr.element_type)
            return Set(*self._eval_args(expr.args, elem)), SetType(elem)
        if isinstance(expr, RecordNew):
            kind = self.element_table.get(expr.type_name)
            values = [self._eval(arg)[0] for arg in expr.args]
            return kind.build(*values), ElementType(kind.name)
        if isinstance(expr, MethodCall):
            return self._method_call(expr)
        er.raise_internal_error("CE0001", node=type(expr).__name__)

    def _method_call(self, expr: MethodCall) -> Value:
        target, ty = self.env[expr.receiver.id]
        if not isinstance(target, Set) or not isinstance(ty, SetType):
            er.raise_internal_error("CE0002", name=expr.receiver.id)

        args = self._eval_args(expr.args, ty.element)
        result = getattr(target, expr.method)(*args)
        return result, SET_METHODS[expr.method].returns(ty.element)
