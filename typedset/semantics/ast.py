# typedset/semantics/ast.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from typedset.internals.report import Span

# === Core node base ===

@dataclass
class Node:
    loc: Optional[Span]

@dataclass
class Stmt(Node):
    pass

@dataclass
class Expr(Node):
    pass

# === Program structure ===

@dataclass
class Program(Node):
    statements: List[Stmt] = field(default_factory=list)

# === Statements ===

@dataclass
class Let(Stmt):
    name: str
    value: Expr
    name_span: Optional[Span] = None

@dataclass
class Print(Stmt):
    value: Expr

@dataclass
class ExprStmt(Stmt):
    expr: Expr

# === Expressions ===

@dataclass
class Name(Expr):
    id: str

@dataclass
class StringLit(Expr):
    value: str

@dataclass
class IntLit(Expr):
    value: int

@dataclass
class BoolLit(Expr):
    value: bool

@dataclass
class SetNew(Expr):
    """Set<Kind>(args...)"""
    element_type: str
    args: List[Expr]
    type_span: Optional[Span] = None

@dataclass
class RecordNew(Expr):
    """Kind(args...) - positional element construction, e.g. Address("Bob", "Main St", 1)."""
    type_name: str
    args: List[Expr]

@dataclass
class MethodCall(Expr):
    receiver: Name
    method: str
    args: List[Expr]
    method_span: Optional[Span] = None
