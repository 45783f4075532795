"""
Letter Language Parser

Recursive-descent parser turning Letter source text into an abstract syntax
tree of `letter_ast` nodes.

The parser owns a `Lexer` and exactly one buffered lookahead token. Every
grammar production is one `parse_*` method; each chooses what to do by
inspecting (never consuming) the lookahead type, and consumes input only
through `eat()`. There is no backtracking and no error recovery: the first
`LetterSyntaxError` aborts the parse.

Supported Constructs
--------------------
- Statements:
    * Empty `;`, blocks `{ ... }`, expression statements
    * `let a, b = 1;`
    * `if (...) ... else ...` (else-if chains nest naturally)
    * `while`, `do ... while (...);`, `for (init; test; update)`
    * `function name(a, b) { ... }` and `return [expr];`
    * `class Name [extends Base] { ... }` with constructor, `get`/`set`
      accessors, methods and fields

- Expressions, loosest to tightest binding:
    assignment (right-assoc) -> `||` -> `&&` -> `== !=` -> `< > <= >=`
    -> `+ -` -> `* /` -> unary `+ - !` -> call -> member (`.x`, `[x]`)
    -> primary (parenthesized, function expression, `new`, literal,
    identifier)

Entry Points
------------
- `Parser(source).parse()`: Parse a full program into a `Program` node.
- `parse(source)`: Convenience wrapper around the above.

Raises
------
LetterSyntaxError
    On the first unexpected token, invalid assignment target or
    unrecognised character.
"""

from __future__ import annotations

from letter.letter_ast import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ClassBody,
    ClassDeclaration,
    ClassMember,
    ConstructorDefinition,
    DoWhileStatement,
    EmptyStatement,
    Expression,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    FunctionExpression,
    GetterDefinition,
    Identifier,
    IfStatement,
    LogicalExpression,
    MemberExpression,
    MethodDefinition,
    NewExpression,
    NullLiteral,
    NumericLiteral,
    Program,
    PropertyDefinition,
    ReturnStatement,
    SetterDefinition,
    Statement,
    StringLiteral,
    SuperLiteral,
    ThisLiteral,
    UnaryExpression,
    VariableDeclaration,
    VariableStatement,
    WhileStatement,
)
from letter.letter_constants import (
    ASSIGNMENT_OPERATORS,
    ITERATION_KEYWORDS,
    LITERAL_TOKENS,
    TokenType,
)
from letter.letter_errors import LetterSyntaxError
from letter.letter_lexer import CharacterStream, Lexer, Token


class Parser:
    """
    Letter Parser Class

    Attributes
    ----------
    lexer : Lexer
        Source of tokens, pulled on demand.
    lookahead : Token
        The next token, already read but not yet consumed.

    Methods
    -------
    parse() -> Program
        Parse the whole source.
    eat(token_type) -> Token
        Consume the lookahead if it has the expected type.
    parse_statement_list(stop) -> list[Statement]
        Parse statements until the lookahead has type `stop`.
    parse_statement() -> Statement
        Single-token dispatch over every statement form.
    parse_expression() -> Expression
        Parse a full (assignment-level) expression.

    Raises
    ------
    LetterSyntaxError
        From the constructor if the very first lexeme is unrecognisable, and
        from any `parse_*` method on the first grammar violation.
    """

    def __init__(self, source: str) -> None:
        self.lexer = Lexer(CharacterStream(source))
        # Prime the lookahead for predictive parsing.
        self.lookahead: Token = self.lexer.next_token()

    def parse(self) -> Program:
        """Parse a full Letter program and return its `Program` root."""
        return self.parse_program()

    # ----- Lookahead plumbing -----

    def eat(self, token_type: TokenType) -> Token:
        """Consume and return the lookahead, which must be of `token_type`."""
        token = self.lookahead
        if token.type is not token_type:
            raise LetterSyntaxError(
                f"Unexpected token {token.type.value}, expected {token_type.value}!",
                token.line,
                token.col,
            )
        self.lookahead = self.lexer.next_token()
        return token

    def check(self, *types: TokenType) -> bool:
        return self.lookahead.type in types

    # ----- Program & statements -----

    def parse_program(self) -> Program:
        """
        Program
            : StatementList
            ;
        """
        return Program(tuple(self.parse_statement_list(TokenType.EOF)))

    def parse_statement_list(self, stop: TokenType) -> list[Statement]:
        """
        StatementList
            : Statement
            | StatementList Statement
            ;
        """
        statements: list[Statement] = []
        while not self.check(stop):
            statements.append(self.parse_statement())
        return statements

    def parse_statement(self) -> Statement:
        """
        Statement
            : IterationStatement
            | FunctionDeclaration
            | ReturnStatement
            | EmptyStatement
            | BlockStatement
            | VariableStatement
            | IfStatement
            | ClassDeclaration
            | ExpressionStatement
            ;
        """
        kind = self.lookahead.type
        if kind in ITERATION_KEYWORDS:
            return self.parse_iteration_statement()
        if kind is TokenType.FUNCTION:
            return self.parse_function_declaration()
        if kind is TokenType.RETURN:
            return self.parse_return_statement()
        if kind is TokenType.SEMICOLON:
            return self.parse_empty_statement()
        if kind is TokenType.LBRACE:
            return self.parse_block_statement()
        if kind is TokenType.LET:
            return self.parse_variable_statement()
        if kind is TokenType.IF:
            return self.parse_if_statement()
        if kind is TokenType.CLASS:
            return self.parse_class_declaration()
        return self.parse_expression_statement()

    def parse_empty_statement(self) -> EmptyStatement:
        self.eat(TokenType.SEMICOLON)
        return EmptyStatement()

    def parse_block_statement(self) -> BlockStatement:
        """
        BlockStatement
            : '{' OptStatementList '}'
            ;
        """
        self.eat(TokenType.LBRACE)
        body = self.parse_statement_list(TokenType.RBRACE)
        self.eat(TokenType.RBRACE)
        return BlockStatement(tuple(body))

    def parse_expression_statement(self) -> ExpressionStatement:
        expression = self.parse_expression()
        self.eat(TokenType.SEMICOLON)
        return ExpressionStatement(expression)

    def parse_variable_statement(self) -> VariableStatement:
        """
        VariableStatement
            : VariableStatementInit ';'
            ;
        """
        statement = self.parse_variable_statement_init()
        self.eat(TokenType.SEMICOLON)
        return statement

    def parse_variable_statement_init(self) -> VariableStatement:
        """
        VariableStatementInit
            : 'let' VariableDeclarationList
            ;

        Shared by `let` statements and `for` initializers; the caller decides
        what follows.
        """
        self.eat(TokenType.LET)
        return VariableStatement(tuple(self.parse_variable_declaration_list()))

    def parse_variable_declaration_list(self) -> list[VariableDeclaration]:
        declarations = [self.parse_variable_declaration()]
        while self.check(TokenType.COMMA):
            self.eat(TokenType.COMMA)
            declarations.append(self.parse_variable_declaration())
        return declarations

    def parse_variable_declaration(self) -> VariableDeclaration:
        """
        VariableDeclaration
            : Identifier OptVariableInitializer
            ;
        """
        identifier = self.parse_identifier()
        init = None
        if not self.check(TokenType.COMMA, TokenType.SEMICOLON):
            init = self.parse_variable_initializer()
        return VariableDeclaration(identifier, init)

    def parse_variable_initializer(self) -> Expression:
        self.eat(TokenType.ASSIGN)
        return self.parse_assignment_expression()

    def parse_if_statement(self) -> IfStatement:
        """
        IfStatement
            : 'if' '(' Expression ')' Statement
            | 'if' '(' Expression ')' Statement 'else' Statement
            ;
        """
        self.eat(TokenType.IF)
        self.eat(TokenType.LPAREN)
        test = self.parse_expression()
        self.eat(TokenType.RPAREN)
        consequent = self.parse_statement()
        alternate = None
        if self.check(TokenType.ELSE):
            self.eat(TokenType.ELSE)
            alternate = self.parse_statement()
        return IfStatement(test, consequent, alternate)

    def parse_iteration_statement(self) -> Statement:
        if self.check(TokenType.DO):
            return self.parse_do_while_statement()
        if self.check(TokenType.FOR):
            return self.parse_for_statement()
        return self.parse_while_statement()

    def parse_while_statement(self) -> WhileStatement:
        self.eat(TokenType.WHILE)
        self.eat(TokenType.LPAREN)
        test = self.parse_expression()
        self.eat(TokenType.RPAREN)
        return WhileStatement(test, self.parse_statement())

    def parse_do_while_statement(self) -> DoWhileStatement:
        """
        DoWhileStatement
            : 'do' Statement 'while' '(' Expression ')' ';'
            ;
        """
        self.eat(TokenType.DO)
        body = self.parse_statement()
        self.eat(TokenType.WHILE)
        self.eat(TokenType.LPAREN)
        test = self.parse_expression()
        self.eat(TokenType.RPAREN)
        self.eat(TokenType.SEMICOLON)
        return DoWhileStatement(body, test)

    def parse_for_statement(self) -> ForStatement:
        """
        ForStatement
            : 'for' '(' OptForStatementInit ';' OptExpression ';' OptExpression ')' Statement
            ;
        """
        self.eat(TokenType.FOR)
        self.eat(TokenType.LPAREN)

        init = None
        if not self.check(TokenType.SEMICOLON):
            init = self.parse_for_statement_init()
        self.eat(TokenType.SEMICOLON)

        test = None
        if not self.check(TokenType.SEMICOLON):
            test = self.parse_expression()
        self.eat(TokenType.SEMICOLON)

        update = None
        if not self.check(TokenType.RPAREN):
            update = self.parse_expression()
        self.eat(TokenType.RPAREN)

        return ForStatement(init, test, update, self.parse_statement())

    def parse_for_statement_init(self) -> VariableStatement | Expression:
        if self.check(TokenType.LET):
            return self.parse_variable_statement_init()
        return self.parse_expression()

    # ----- Functions -----

    def parse_function_declaration(self) -> FunctionDeclaration:
        """
        FunctionDeclaration
            : 'function' Identifier '(' OptFormalParameterList ')' BlockStatement
            ;
        """
        self.eat(TokenType.FUNCTION)
        identifier = self.parse_identifier()
        params = self.parse_formal_parameters()
        return FunctionDeclaration(identifier, params, self.parse_block_statement())

    def parse_formal_parameters(self) -> tuple[Identifier, ...]:
        """`(` OptFormalParameterList `)`"""
        self.eat(TokenType.LPAREN)
        params: list[Identifier] = []
        if not self.check(TokenType.RPAREN):
            params = self.parse_formal_parameter_list()
        self.eat(TokenType.RPAREN)
        return tuple(params)

    def parse_formal_parameter_list(self) -> list[Identifier]:
        """
        FormalParameterList
            : Identifier
            | FormalParameterList ',' Identifier
            ;
        """
        params = [self.parse_identifier()]
        while self.check(TokenType.COMMA):
            self.eat(TokenType.COMMA)
            params.append(self.parse_identifier())
        return params

    def parse_return_statement(self) -> ReturnStatement:
        self.eat(TokenType.RETURN)
        argument = None
        if not self.check(TokenType.SEMICOLON):
            argument = self.parse_expression()
        self.eat(TokenType.SEMICOLON)
        return ReturnStatement(argument)

    # ----- Classes -----

    def parse_class_declaration(self) -> ClassDeclaration:
        """
        ClassDeclaration
            : 'class' Identifier OptClassExtends ClassBody
            ;

        ClassExtends
            : 'extends' Identifier
            ;
        """
        self.eat(TokenType.CLASS)
        identifier = self.parse_identifier()
        super_class = None
        if not self.check(TokenType.LBRACE):
            self.eat(TokenType.EXTENDS)
            super_class = self.parse_identifier()
        return ClassDeclaration(identifier, super_class, self.parse_class_body())

    def parse_class_body(self) -> ClassBody:
        self.eat(TokenType.LBRACE)
        members: list[ClassMember] = []
        while not self.check(TokenType.RBRACE):
            members.append(self.parse_class_statement())
        self.eat(TokenType.RBRACE)
        return ClassBody(tuple(members))

    def parse_class_statement(self) -> ClassMember:
        """
        ClassStatement
            : ConstructorDefinition
            | GetterDefinition
            | SetterDefinition
            | MethodDefinition
            | PropertyDefinition
            ;
        """
        if self.check(TokenType.CONSTRUCTOR):
            return self.parse_constructor_definition()
        if self.check(TokenType.GET):
            return self.parse_getter_definition()
        if self.check(TokenType.SET):
            return self.parse_setter_definition()
        return self.parse_property_definition()

    def parse_constructor_definition(self) -> ConstructorDefinition:
        self.eat(TokenType.CONSTRUCTOR)
        params = self.parse_formal_parameters()
        body = self.parse_block_statement()
        return ConstructorDefinition(FunctionExpression(None, params, body))

    def parse_getter_definition(self) -> GetterDefinition:
        """
        GetterDefinition
            : 'get' Identifier '(' ')' BlockStatement
            ;
        """
        self.eat(TokenType.GET)
        key = self.parse_identifier()
        self.eat(TokenType.LPAREN)
        self.eat(TokenType.RPAREN)
        body = self.parse_block_statement()
        return GetterDefinition(key, FunctionExpression(None, (), body))

    def parse_setter_definition(self) -> SetterDefinition:
        """
        SetterDefinition
            : 'set' Identifier '(' Identifier ')' BlockStatement
            ;
        """
        self.eat(TokenType.SET)
        key = self.parse_identifier()
        self.eat(TokenType.LPAREN)
        param = self.parse_identifier()
        self.eat(TokenType.RPAREN)
        body = self.parse_block_statement()
        return SetterDefinition(key, FunctionExpression(None, (param,), body))

    def parse_property_definition(self) -> MethodDefinition | PropertyDefinition:
        """
        PropertyDefinition
            : Identifier OptPropertyInitializer ';'
            ;

        An identifier followed by `(` is a method instead.
        """
        key = self.parse_identifier()
        if self.check(TokenType.LPAREN):
            return self.parse_method_definition(key)
        value = None
        if self.check(TokenType.ASSIGN):
            self.eat(TokenType.ASSIGN)
            value = self.parse_assignment_expression()
        self.eat(TokenType.SEMICOLON)
        return PropertyDefinition(key, value)

    def parse_method_definition(self, key: Identifier) -> MethodDefinition:
        params = self.parse_formal_parameters()
        body = self.parse_block_statement()
        return MethodDefinition(key, FunctionExpression(None, params, body))

    # ----- Expressions -----

    def parse_expression(self) -> Expression:
        """
        Expression
            : AssignmentExpression
            ;
        """
        return self.parse_assignment_expression()

    def parse_assignment_expression(self) -> Expression:
        """
        AssignmentExpression
            : LogicalOrExpression
            | LeftHandSideExpression ASSIGNMENT_OPERATOR AssignmentExpression
            ;
        """
        left = self.parse_logical_or_expression()
        if self.lookahead.type not in ASSIGNMENT_OPERATORS:
            return left
        if not isinstance(left, (Identifier, MemberExpression)):
            raise LetterSyntaxError(
                "Invalid left-hand side in assignment expression, "
                "expected Identifier or MemberExpression!",
                self.lookahead.line,
                self.lookahead.col,
            )
        operator = self.eat(self.lookahead.type).value
        return AssignmentExpression(operator, left, self.parse_assignment_expression())

    def parse_logical_or_expression(self) -> Expression:
        left = self.parse_logical_and_expression()
        while self.check(TokenType.OR):
            operator = self.eat(TokenType.OR).value
            left = LogicalExpression(operator, left, self.parse_logical_and_expression())
        return left

    def parse_logical_and_expression(self) -> Expression:
        left = self.parse_equality_expression()
        while self.check(TokenType.AND):
            operator = self.eat(TokenType.AND).value
            left = LogicalExpression(operator, left, self.parse_equality_expression())
        return left

    def parse_equality_expression(self) -> Expression:
        left = self.parse_relational_expression()
        while self.check(TokenType.EQUALITY):
            operator = self.eat(TokenType.EQUALITY).value
            left = BinaryExpression(operator, left, self.parse_relational_expression())
        return left

    def parse_relational_expression(self) -> Expression:
        left = self.parse_additive_expression()
        while self.check(TokenType.RELATIONAL):
            operator = self.eat(TokenType.RELATIONAL).value
            left = BinaryExpression(operator, left, self.parse_additive_expression())
        return left

    def parse_additive_expression(self) -> Expression:
        left = self.parse_multiplicative_expression()
        while self.check(TokenType.ADDITIVE):
            operator = self.eat(TokenType.ADDITIVE).value
            left = BinaryExpression(
                operator, left, self.parse_multiplicative_expression()
            )
        return left

    def parse_multiplicative_expression(self) -> Expression:
        left = self.parse_unary_expression()
        while self.check(TokenType.MULTIPLICATIVE):
            operator = self.eat(TokenType.MULTIPLICATIVE).value
            left = BinaryExpression(operator, left, self.parse_unary_expression())
        return left

    def parse_unary_expression(self) -> Expression:
        """
        UnaryExpression
            : LeftHandSideExpression
            | ADDITIVE_OPERATOR UnaryExpression
            | LOGICAL_NOT UnaryExpression
            ;
        """
        if self.check(TokenType.ADDITIVE, TokenType.NOT):
            operator = self.eat(self.lookahead.type).value
            return UnaryExpression(operator, self.parse_unary_expression())
        return self.parse_left_hand_side_expression()

    def parse_left_hand_side_expression(self) -> Expression:
        return self.parse_call_member_expression()

    def parse_call_member_expression(self) -> Expression:
        member = self.parse_member_expression()
        if self.check(TokenType.LPAREN):
            return self.parse_call_expression(member)
        return member

    def parse_call_expression(self, callee: Expression) -> CallExpression:
        """
        CallExpression
            : Callee Arguments
            ;

        Callee
            : MemberExpression
            | CallExpression
            ;
        """
        call = CallExpression(callee, self.parse_arguments())
        if self.check(TokenType.LPAREN):
            return self.parse_call_expression(call)
        return call

    def parse_arguments(self) -> tuple[Expression, ...]:
        """
        Arguments
            : '(' OptArgumentList ')'
            ;

        ArgumentList
            : AssignmentExpression
            | ArgumentList ',' AssignmentExpression
            ;
        """
        self.eat(TokenType.LPAREN)
        arguments: list[Expression] = []
        if not self.check(TokenType.RPAREN):
            arguments.append(self.parse_assignment_expression())
            while self.check(TokenType.COMMA):
                self.eat(TokenType.COMMA)
                arguments.append(self.parse_assignment_expression())
        self.eat(TokenType.RPAREN)
        return tuple(arguments)

    def parse_member_expression(self) -> Expression:
        """
        MemberExpression
            : PrimaryExpression
            | MemberExpression '.' Identifier
            | MemberExpression '[' Expression ']'
            ;
        """
        obj = self.parse_primary_expression()
        while self.check(TokenType.DOT, TokenType.LBRACK):
            if self.check(TokenType.DOT):
                self.eat(TokenType.DOT)
                obj = MemberExpression(obj, self.parse_identifier(), False)
            else:
                self.eat(TokenType.LBRACK)
                prop = self.parse_expression()
                self.eat(TokenType.RBRACK)
                obj = MemberExpression(obj, prop, True)
        return obj

    def parse_primary_expression(self) -> Expression:
        """
        PrimaryExpression
            : ParenthesizedExpression
            | FunctionExpression
            | NewExpression
            | Literal
            | Identifier
            ;
        """
        kind = self.lookahead.type
        if kind is TokenType.LPAREN:
            return self.parse_parenthesized_expression()
        if kind is TokenType.FUNCTION:
            return self.parse_function_expression()
        if kind is TokenType.NEW:
            return self.parse_new_expression()
        if kind in LITERAL_TOKENS:
            return self.parse_literal()
        return self.parse_identifier()

    def parse_parenthesized_expression(self) -> Expression:
        self.eat(TokenType.LPAREN)
        expression = self.parse_expression()
        self.eat(TokenType.RPAREN)
        return expression

    def parse_function_expression(self) -> FunctionExpression:
        """
        FunctionExpression
            : 'function' OptIdentifier '(' OptFormalParameterList ')' BlockStatement
            ;
        """
        self.eat(TokenType.FUNCTION)
        identifier = None
        if not self.check(TokenType.LPAREN):
            identifier = self.parse_identifier()
        params = self.parse_formal_parameters()
        return FunctionExpression(identifier, params, self.parse_block_statement())

    def parse_new_expression(self) -> NewExpression:
        """
        NewExpression
            : 'new' MemberExpression Arguments
            ;
        """
        self.eat(TokenType.NEW)
        callee = self.parse_member_expression()
        return NewExpression(callee, self.parse_arguments())

    # ----- Terminals -----

    def parse_identifier(self) -> Identifier:
        return Identifier(self.eat(TokenType.IDENT).value)

    def parse_literal(self) -> Expression:
        """
        Literal
            : NumericLiteral
            | StringLiteral
            | BooleanLiteral
            | NullLiteral
            | ThisLiteral
            | SuperLiteral
            ;
        """
        kind = self.lookahead.type
        if kind is TokenType.NUMBER:
            return self.parse_numeric_literal()
        if kind is TokenType.STRING:
            return self.parse_string_literal()
        if kind in (TokenType.TRUE, TokenType.FALSE):
            return self.parse_boolean_literal()
        if kind is TokenType.NULL:
            self.eat(TokenType.NULL)
            return NullLiteral()
        if kind is TokenType.THIS:
            self.eat(TokenType.THIS)
            return ThisLiteral()
        if kind is TokenType.SUPER:
            self.eat(TokenType.SUPER)
            return SuperLiteral()
        raise LetterSyntaxError(
            "Unexpected literal production!", self.lookahead.line, self.lookahead.col
        )

    def parse_numeric_literal(self) -> NumericLiteral:
        token = self.eat(TokenType.NUMBER)
        try:
            value = float(token.value)
        except ValueError as err:
            raise LetterSyntaxError(
                "Expected a parsable numeric value!", token.line, token.col
            ) from err
        return NumericLiteral(value)

    def parse_string_literal(self) -> StringLiteral:
        token = self.eat(TokenType.STRING)
        # Strip exactly the surrounding quotes; escapes are left as written.
        return StringLiteral(token.value[1:-1])

    def parse_boolean_literal(self) -> BooleanLiteral:
        token = self.eat(self.lookahead.type)
        if token.value == "true":
            return BooleanLiteral(True)
        if token.value == "false":
            return BooleanLiteral(False)
        raise LetterSyntaxError(
            "Expected a parsable boolean value!", token.line, token.col
        )


def parse(source: str) -> Program:
    """Parse `source` and return the `Program` root."""
    return Parser(source).parse()


__all__ = ["Parser", "parse"]
