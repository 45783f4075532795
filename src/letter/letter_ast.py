"""
Defines the abstract syntax tree (AST) for the Letter scripting language.

The tree is a tagged union: every node kind is its own frozen dataclass, all
deriving from `Node`. Children are owned exclusively by their parent, child
sequences are tuples, and optional children (an `if` with no `else`, a `let`
with no initializer) are `None` rather than a placeholder node.

Classes:
    Node:
        Base class providing `kind` and `to_dict()`.

    Program:
        Root of every parse; never nested.

    Statements:
        EmptyStatement, BlockStatement, ExpressionStatement, VariableStatement,
        VariableDeclaration, IfStatement, WhileStatement, DoWhileStatement,
        ForStatement, FunctionDeclaration, ReturnStatement, ClassDeclaration,
        ClassBody, ConstructorDefinition, GetterDefinition, SetterDefinition,
        MethodDefinition, PropertyDefinition.

    Expressions:
        AssignmentExpression, LogicalExpression, BinaryExpression,
        UnaryExpression, CallExpression, MemberExpression, NewExpression,
        FunctionExpression.

    Terminals:
        Identifier, NumericLiteral, StringLiteral, BooleanLiteral, NullLiteral,
        ThisLiteral, SuperLiteral.

Usage:
    The parser builds these bottom-up; an evaluator walks them with `match`:

        match node:
            case BinaryExpression(operator, left, right): ...
            case NumericLiteral(value): ...

`to_dict()` is a debugging aid for printing trees as JSON. Its shape is not a
stable interchange format.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Union

ASTDict = dict[str, Any]
"""Plain-dict rendering of a node: {"kind": ..., <field>: ...}."""


def _to_plain(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_to_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class Node:
    """Base class of every AST node."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> ASTDict:
        result: ASTDict = {"kind": self.kind}
        for f in fields(self):
            result[f.name] = _to_plain(getattr(self, f.name))
        return result


# ----- Terminals -----


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class NumericLiteral(Node):
    value: float


@dataclass(frozen=True)
class StringLiteral(Node):
    value: str


@dataclass(frozen=True)
class BooleanLiteral(Node):
    value: bool


@dataclass(frozen=True)
class NullLiteral(Node):
    pass


@dataclass(frozen=True)
class ThisLiteral(Node):
    pass


@dataclass(frozen=True)
class SuperLiteral(Node):
    pass


# ----- Expressions -----


@dataclass(frozen=True)
class AssignmentExpression(Node):
    """`left operator right` where operator is `=` or a compound `op=`.

    `left` is always an Identifier or MemberExpression.
    """

    operator: str
    left: Identifier | MemberExpression
    right: Expression


@dataclass(frozen=True)
class LogicalExpression(Node):
    """`&&` and `||`, kept apart from BinaryExpression for short-circuiting."""

    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class BinaryExpression(Node):
    """Equality, relational, additive and multiplicative operators."""

    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryExpression(Node):
    operator: str
    argument: Expression


@dataclass(frozen=True)
class CallExpression(Node):
    callee: Expression
    arguments: tuple[Expression, ...]


@dataclass(frozen=True)
class MemberExpression(Node):
    """`object.property` (computed=False) or `object[property]` (computed=True)."""

    object: Expression
    property: Expression
    computed: bool


@dataclass(frozen=True)
class NewExpression(Node):
    callee: Expression
    arguments: tuple[Expression, ...]


@dataclass(frozen=True)
class FunctionExpression(Node):
    identifier: Identifier | None
    params: tuple[Identifier, ...]
    body: BlockStatement


# ----- Statements -----


@dataclass(frozen=True)
class EmptyStatement(Node):
    pass


@dataclass(frozen=True)
class BlockStatement(Node):
    body: tuple[Statement, ...]


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expression: Expression


@dataclass(frozen=True)
class VariableDeclaration(Node):
    identifier: Identifier
    init: Expression | None


@dataclass(frozen=True)
class VariableStatement(Node):
    """A `let` declaration list. Also used, without its `;`, as a for-init."""

    declarations: tuple[VariableDeclaration, ...]


@dataclass(frozen=True)
class IfStatement(Node):
    test: Expression
    consequent: Statement
    alternate: Statement | None


@dataclass(frozen=True)
class WhileStatement(Node):
    test: Expression
    body: Statement


@dataclass(frozen=True)
class DoWhileStatement(Node):
    body: Statement
    test: Expression


@dataclass(frozen=True)
class ForStatement(Node):
    init: VariableStatement | Expression | None
    test: Expression | None
    update: Expression | None
    body: Statement


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    identifier: Identifier
    params: tuple[Identifier, ...]
    body: BlockStatement


@dataclass(frozen=True)
class ReturnStatement(Node):
    argument: Expression | None


@dataclass(frozen=True)
class ConstructorDefinition(Node):
    value: FunctionExpression


@dataclass(frozen=True)
class GetterDefinition(Node):
    key: Identifier
    value: FunctionExpression


@dataclass(frozen=True)
class SetterDefinition(Node):
    key: Identifier
    value: FunctionExpression


@dataclass(frozen=True)
class MethodDefinition(Node):
    key: Identifier
    value: FunctionExpression


@dataclass(frozen=True)
class PropertyDefinition(Node):
    key: Identifier
    value: Expression | None


ClassMember = Union[
    ConstructorDefinition,
    GetterDefinition,
    SetterDefinition,
    MethodDefinition,
    PropertyDefinition,
]


@dataclass(frozen=True)
class ClassBody(Node):
    body: tuple[ClassMember, ...]


@dataclass(frozen=True)
class ClassDeclaration(Node):
    identifier: Identifier
    super_class: Identifier | None
    body: ClassBody


@dataclass(frozen=True)
class Program(Node):
    body: tuple[Statement, ...]


Expression = Union[
    AssignmentExpression,
    LogicalExpression,
    BinaryExpression,
    UnaryExpression,
    CallExpression,
    MemberExpression,
    NewExpression,
    FunctionExpression,
    Identifier,
    NumericLiteral,
    StringLiteral,
    BooleanLiteral,
    NullLiteral,
    ThisLiteral,
    SuperLiteral,
]

Statement = Union[
    EmptyStatement,
    BlockStatement,
    ExpressionStatement,
    VariableStatement,
    IfStatement,
    WhileStatement,
    DoWhileStatement,
    ForStatement,
    FunctionDeclaration,
    ReturnStatement,
    ClassDeclaration,
]

Tree = Union[Program, Statement, Expression, VariableDeclaration, ClassBody, ClassMember]
"""Any node the parser can produce."""
