"""Static checking of set scripts.

Runs over the whole program before anything executes and reports every
problem it finds through the Reporter. Expressions whose type could not
be determined evaluate to None so that one mistake does not cascade into
follow-up errors.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from typedset.internals import errors as er
from typedset.internals.report import Reporter, Span
from typedset.semantics.ast import (
    BoolLit, Expr, ExprStmt, IntLit, Let, MethodCall, Name, Print, Program,
    RecordNew, SetNew, Stmt, StringLit,
)
from typedset.semantics.constraints import ConstraintValidator
from typedset.semantics.elements import ElementTable
from typedset.semantics.typesys import (
    BuiltinType, ElementType, SetType, SliceType, Type, builtin_from_name,
)


@dataclass(frozen=True)
class MethodSig:
    """Set method signature; every parameter has the set's element type."""
    arity: int
    returns: Callable[[Type], Type]
    pure: bool = False  # True if calling it as a statement is pointless


SET_METHODS: Dict[str, MethodSig] = {
    "add": MethodSig(1, lambda e: BuiltinType.BLANK),
    "remove": MethodSig(1, lambda e: BuiltinType.BLANK),
    "contains": MethodSig(1, lambda e: BuiltinType.BOOL, pure=True),
    "size": MethodSig(0, lambda e: BuiltinType.INT, pure=True),
    "slice": MethodSig(0, lambda e: SliceType(e), pure=True),
}


def _fmt_loc(span: Optional[Span]) -> str:
    return f"{span.line}:{span.col}" if span else "?"


class TypeChecker:
    def __init__(self, element_table: ElementTable, reporter: Reporter):
        self.element_table = element_table
        self.reporter = reporter
        self.constraints = ConstraintValidator(element_table, reporter)
        # name -> (type or None if it failed to check, declaration span)
        self.scope: Dict[str, Tuple[Optional[Type], Optional[Span]]] = {}

    def check(self, program: Program) -> bool:
        """Check a program. Returns True if no errors were reported."""
        for stmt in program.statements:
            self._stmt(stmt)
        return not self.reporter.has_errors

    # ------------------------
    # Statements
    # ------------------------

    def _stmt(self, stmt: Stmt) -> None:
        if isinstance(stmt, Let):
            self._let(stmt)
        elif isinstance(stmt, Print):
            ty = self._expr(stmt.value)
            if ty is BuiltinType.BLANK:
                er.emit(self.reporter, er.ERR.CE2032, stmt.value.loc, usage="printed")
        elif isinstance(stmt, ExprStmt):
            self._expr(stmt.expr)
            call = stmt.expr
            if isinstance(call, MethodCall):
                sig = SET_METHODS.get(call.method)
                if sig is not None and sig.pure:
                    er.emit(self.reporter, er.ERR.CW2001, call.method_span or call.loc,
                            method=call.method)
        else:
            er.raise_internal_error("CE0001", node=type(stmt).__name__)

    def _let(self, stmt: Let) -> None:
        ty = self._expr(stmt.value)
        if ty is BuiltinType.BLANK:
            er.emit(self.reporter, er.ERR.CE2032, stmt.value.loc, usage="bound to a variable")
            ty = None

        if stmt.name in self.scope:
            _, prev = self.scope[stmt.name]
            er.emit(self.reporter, er.ERR.CE1005, stmt.name_span or stmt.loc,
                    name=stmt.name, prev_loc=_fmt_loc(prev))
            return

        self.scope[stmt.name] = (ty, stmt.name_span or stmt.loc)

    # ------------------------
    # Expressions
    # ------------------------

    def _expr(self, expr: Expr) -> Optional[Type]:
        if isinstance(expr, StringLit):
            return BuiltinType.STRING
        if isinstance(expr, IntLit):
            return BuiltinType.INT
        if isinstance(expr, BoolLit):
            return BuiltinType.BOOL
        if isinstance(expr, Name):
            return self._name(expr)
        if isinstance(expr, SetNew):
            return self._set_new(expr)
        if isinstance(expr, RecordNew):
            return self._record(expr)
        if isinstance(expr, MethodCall):
            return self._method_call(expr)
        er.raise_internal_error("CE0001", node=type(expr).__name__)

    def _name(self, expr: Name) -> Optional[Type]:
        if expr.id not in self.scope:
            er.emit(self.reporter, er.ERR.CE1001, expr.loc, name=expr.id)
            return None
        return self.scope[expr.id][0]

    def assignable(self, expected: Type, got: Type) -> bool:
        if expected == got:
            return True
        if isinstance(expected, ElementType):
            kind = self.element_table.get(expected.name)
            return kind is not None and kind.coerces_from is not None and kind.coerces_from == got
        return False

    def _check_args(self, expected: Type, args: List[Expr]) -> None:
        for index, arg in enumerate(args, start=1):
            got = self._expr(arg)
            if got is not None and not self.assignable(expected, got):
                er.emit(self.reporter, er.ERR.CE2006, arg.loc,
                        index=index, expected=expected, got=got)

    def _set_new(self, expr: SetNew) -> Optional[Type]:
        span = expr.type_span or expr.loc
        if not self.element_table.is_known(expr.element_type):
            er.emit(self.reporter, er.ERR.CE2001, span, name=expr.element_type)
            self._check_args_untyped(expr.args)
            return None

        type_arg = builtin_from_name(expr.element_type) or ElementType(expr.element_type)
        if not self.constraints.validate_all_constraints("Set", type_arg, span):
            self._check_args_untyped(expr.args)
            return None

        self._check_args(type_arg, expr.args)
        return SetType(type_arg)

    def _check_args_untyped(self, args: List[Expr]) -> None:
        # Still walk the arguments so undeclared names are reported
        for arg in args:
            self._expr(arg)

    def _record(self, expr: RecordNew) -> Optional[Type]:
        kind = self.element_table.get(expr.type_name)
        if kind is None:
            er.emit(self.reporter, er.ERR.CE2001, expr.loc, name=expr.type_name)
            self._check_args_untyped(expr.args)
            return None

        if len(expr.args) != len(kind.fields):
            er.emit(self.reporter, er.ERR.CE2027, expr.loc, name=kind.name,
                    expected=len(kind.fields), got=len(expr.args))
            self._check_args_untyped(expr.args)
            return ElementType(kind.name)

        for (field_name, field_ty), arg in zip(kind.fields, expr.args):
            got = self._expr(arg)
            if got is not None and got != field_ty:
                er.emit(self.reporter, er.ERR.CE2028, arg.loc,
                        field_name=field_name, expected=field_ty, got=got)
        return ElementType(kind.name)

    def _method_call(self, expr: MethodCall) -> Optional[Type]:
        recv_ty = self._name(expr.receiver)
        if recv_ty is None:
            self._check_args_untyped(expr.args)
            return None

        if not isinstance(recv_ty, SetType):
            er.emit(self.reporter, er.ERR.CE2041, expr.receiver.loc,
                    name=expr.receiver.id, type=recv_ty)
            self._check_args_untyped(expr.args)
            return None

        sig = SET_METHODS.get(expr.method)
        if sig is None:
            er.emit(self.reporter, er.ERR.CE2040, expr.method_span or expr.loc,
                    method=expr.method, type=recv_ty)
            self._check_args_untyped(expr.args)
            return None

        if len(expr.args) != sig.arity:
            er.emit(self.reporter, er.ERR.CE2009, expr.loc, name=expr.method,
                    expected=sig.arity, got=len(expr.args))
            self._check_args_untyped(expr.args)
        else:
            self._check_args(recv_ty.element, expr.args)

        return sig.returns(recv_ty.element)
