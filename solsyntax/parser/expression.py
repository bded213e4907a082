"""
Expression and type-name parsing.

Binary operators are parsed by precedence climbing over BINARY_OPERATORS;
assignment and the conditional operator sit above them as right-associative
levels, and prefix, postfix and suffix forms below them.
"""

from typing import List, Optional, Tuple

from .base import BaseParser, DATA_LOCATIONS
from .ast_nodes import (
    ArrayTypeName,
    Assignment,
    AddSubOperation,
    AndOperation,
    BitAndOperation,
    BitOrOperation,
    BitXorOperation,
    Conditional,
    ElementaryTypeName,
    ElementaryTypeNameExpression,
    EqualityComparison,
    ExpOperation,
    Expression,
    FunctionCall,
    FunctionCallOptions,
    FunctionTypeName,
    Identifier,
    IndexAccess,
    IndexRangeAccess,
    InlineArray,
    Literal,
    MappingType,
    MemberAccess,
    MetaType,
    MulDivModOperation,
    NamedArgument,
    NewExpression,
    OrderComparison,
    OrOperation,
    PayableConversion,
    ShiftOperation,
    TupleExpression,
    TypeName,
    UnaryOperation,
    UserDefinedTypeName,
    VariableDeclaration,
)
from ..lexer.tokens import TokenType, ELEMENTARY_TYPES


# Binary operator -> (precedence, node class); higher binds tighter
BINARY_OPERATORS = {
    TokenType.PIPE_PIPE: (3, OrOperation),
    TokenType.AMPERSAND_AMPERSAND: (4, AndOperation),
    TokenType.EQ_EQ: (5, EqualityComparison),
    TokenType.BANG_EQ: (5, EqualityComparison),
    TokenType.LT: (6, OrderComparison),
    TokenType.GT: (6, OrderComparison),
    TokenType.LT_EQ: (6, OrderComparison),
    TokenType.GT_EQ: (6, OrderComparison),
    TokenType.PIPE: (7, BitOrOperation),
    TokenType.CARET: (8, BitXorOperation),
    TokenType.AMPERSAND: (9, BitAndOperation),
    TokenType.LT_LT: (10, ShiftOperation),
    TokenType.GT_GT: (10, ShiftOperation),
    TokenType.GT_GT_GT: (10, ShiftOperation),
    TokenType.PLUS: (11, AddSubOperation),
    TokenType.MINUS: (11, AddSubOperation),
    TokenType.STAR: (12, MulDivModOperation),
    TokenType.SLASH: (12, MulDivModOperation),
    TokenType.PERCENT: (12, MulDivModOperation),
    TokenType.STAR_STAR: (13, ExpOperation),
}
RIGHT_ASSOCIATIVE = frozenset({TokenType.STAR_STAR})
LOWEST_BINARY_PRECEDENCE = 3

ASSIGNMENT_OPERATORS = frozenset({
    TokenType.EQ,
    TokenType.PIPE_EQ,
    TokenType.CARET_EQ,
    TokenType.AMPERSAND_EQ,
    TokenType.LT_LT_EQ,
    TokenType.GT_GT_EQ,
    TokenType.GT_GT_GT_EQ,
    TokenType.PLUS_EQ,
    TokenType.MINUS_EQ,
    TokenType.STAR_EQ,
    TokenType.SLASH_EQ,
    TokenType.PERCENT_EQ,
})

PREFIX_OPERATORS = frozenset({
    TokenType.PLUS_PLUS,
    TokenType.MINUS_MINUS,
    TokenType.BANG,
    TokenType.TILDE,
    TokenType.DELETE,
    TokenType.MINUS,
})

VISIBILITIES = {
    TokenType.INTERNAL: 'internal',
    TokenType.EXTERNAL: 'external',
    TokenType.PRIVATE: 'private',
    TokenType.PUBLIC: 'public',
}

MUTABILITIES = {
    TokenType.PURE: 'pure',
    TokenType.VIEW: 'view',
    TokenType.PAYABLE: 'payable',
}

# String-like literal token -> (Literal.kind, prefix length); adjacent tokens
# of the same type are concatenated
STRING_LITERALS = {
    TokenType.STRING_LITERAL: ('string', 0),
    TokenType.UNICODE_STRING_LITERAL: ('unicode_string', len('unicode')),
    TokenType.HEX_STRING: ('hex_string', len('hex')),
}


class ExpressionParser(BaseParser):
    """Parses expressions, type names and parameter lists."""

    # =========================================================================
    # EXPRESSIONS
    # =========================================================================

    def parse_expression(self) -> Expression:
        with self.nested():
            return self.parse_assignment()

    def parse_assignment(self) -> Expression:
        left = self.parse_conditional()

        if self.current().type in ASSIGNMENT_OPERATORS:
            op = self.advance().value
            with self.nested():
                right = self.parse_assignment()
            return Assignment(span=left.span.merge(right.span), left=left, operator=op, right=right)

        return left

    def parse_conditional(self) -> Expression:
        condition = self.parse_binary(LOWEST_BINARY_PRECEDENCE)

        if self.match(TokenType.QUESTION):
            self.advance()
            true_expr = self.parse_expression()
            self.expect(TokenType.COLON, 'conditional expression')
            with self.nested():
                false_expr = self.parse_conditional()
            return Conditional(
                span=condition.span.merge(false_expr.span),
                condition=condition,
                true_expression=true_expr,
                false_expression=false_expr,
            )

        return condition

    def parse_binary(self, min_precedence: int) -> Expression:
        left = self.parse_unary()

        while True:
            token_type = self.current().type
            entry = BINARY_OPERATORS.get(token_type)
            if entry is None or entry[0] < min_precedence:
                return left
            precedence, node_class = entry
            op = self.advance().value
            next_min = precedence if token_type in RIGHT_ASSOCIATIVE else precedence + 1
            with self.nested():
                right = self.parse_binary(next_min)
            left = node_class(span=left.span.merge(right.span), left=left, operator=op, right=right)

    def parse_unary(self) -> Expression:
        if self.current().type in PREFIX_OPERATORS:
            op_token = self.advance()
            with self.nested():
                operand = self.parse_unary()
            return UnaryOperation(
                span=op_token.span.merge(operand.span),
                operator=op_token.value,
                operand=operand,
                is_prefix=True,
            )

        return self.parse_postfix()

    def parse_postfix(self) -> Expression:
        expr = self.parse_primary()

        while True:
            if self.match(TokenType.PLUS_PLUS, TokenType.MINUS_MINUS):
                op = self.advance().value
                expr = UnaryOperation(span=self.span_from(expr.span), operator=op, operand=expr, is_prefix=False)
            elif self.match(TokenType.LBRACKET):
                expr = self._parse_index_suffix(expr)
            elif self.match(TokenType.DOT):
                self.advance()
                if self.is_identifier() or self.match(TokenType.ADDRESS):
                    member = self.advance().value
                else:
                    raise self.error('member name')
                expr = MemberAccess(span=self.span_from(expr.span), expression=expr, member=member)
            elif self.match(TokenType.LBRACE) and self.is_identifier(1) and self.peek(2).type == TokenType.COLON:
                options = self._parse_named_arguments()
                expr = FunctionCallOptions(span=self.span_from(expr.span), expression=expr, options=options)
            elif self.match(TokenType.LPAREN):
                args, named = self.parse_call_arguments()
                expr = FunctionCall(
                    span=self.span_from(expr.span),
                    expression=expr,
                    arguments=args,
                    named_arguments=named,
                )
            else:
                return expr

    def _parse_index_suffix(self, base: Expression) -> Expression:
        """[i], [], [a:b], [a:], [:b] or [:]"""
        self.expect(TokenType.LBRACKET)

        start = None
        if not self.match(TokenType.COLON, TokenType.RBRACKET):
            start = self.parse_expression()

        if self.match(TokenType.COLON):
            self.advance()
            end = None
            if not self.match(TokenType.RBRACKET):
                end = self.parse_expression()
            self.expect(TokenType.RBRACKET, 'index range access')
            return IndexRangeAccess(span=self.span_from(base.span), base=base, start=start, end=end)

        self.expect(TokenType.RBRACKET, 'index access')
        return IndexAccess(span=self.span_from(base.span), base=base, index=start)

    def parse_call_arguments(self) -> Tuple[List[Expression], List[NamedArgument]]:
        """( expr, ... ) or ( { name: expr, ... } )"""
        self.expect(TokenType.LPAREN)
        args: List[Expression] = []
        named: List[NamedArgument] = []

        if self.match(TokenType.LBRACE):
            named = self._parse_named_arguments()
        elif not self.match(TokenType.RPAREN):
            args.append(self.parse_expression())
            while self.match(TokenType.COMMA):
                self.advance()
                args.append(self.parse_expression())

        self.expect(TokenType.RPAREN, 'argument list')
        return args, named

    def _parse_named_arguments(self) -> List[NamedArgument]:
        self.expect(TokenType.LBRACE)
        named: List[NamedArgument] = []

        if not self.match(TokenType.RBRACE):
            while True:
                start = self.current().span
                name = self.expect_identifier('named argument')
                self.expect(TokenType.COLON, 'named argument')
                value = self.parse_expression()
                named.append(NamedArgument(span=self.span_from(start), name=name, value=value))
                if not self.match(TokenType.COMMA):
                    break
                self.advance()

        self.expect(TokenType.RBRACE, 'named argument list')
        return named

    # =========================================================================
    # PRIMARY EXPRESSIONS
    # =========================================================================

    def parse_primary(self) -> Expression:
        token = self.current()

        if token.type in (TokenType.NUMBER, TokenType.HEX_NUMBER):
            return self._parse_number_literal()

        if token.type in STRING_LITERALS:
            return self._parse_string_literal()

        if token.type in (TokenType.TRUE, TokenType.FALSE):
            self.advance()
            return Literal(span=token.span, value=token.value, kind='bool', parts=[token.value])

        if token.type == TokenType.LPAREN:
            return self._parse_tuple()

        if token.type == TokenType.LBRACKET:
            return self._parse_inline_array()

        if token.type == TokenType.NEW:
            self.advance()
            type_name = self.parse_type_name()
            return NewExpression(span=self.span_from(token.span), type_name=type_name)

        if token.type == TokenType.PAYABLE:
            self.advance()
            if not self.match(TokenType.LPAREN):
                raise self.error("'('", 'payable conversion')
            args, named = self.parse_call_arguments()
            return PayableConversion(span=self.span_from(token.span), arguments=args, named_arguments=named)

        if token.type == TokenType.TYPE:
            self.advance()
            self.expect(TokenType.LPAREN, 'type expression')
            type_name = self.parse_type_name()
            self.expect(TokenType.RPAREN, 'type expression')
            return MetaType(span=self.span_from(token.span), type_name=type_name)

        if token.type in ELEMENTARY_TYPES:
            self.advance()
            type_name = ElementaryTypeName(span=token.span, name=token.value)
            return ElementaryTypeNameExpression(span=token.span, type_name=type_name)

        if self.is_identifier():
            self.advance()
            return Identifier(span=token.span, name=token.value)

        raise self.error('expression')

    def _parse_number_literal(self) -> Literal:
        token = self.advance()
        kind = 'number' if token.type == TokenType.NUMBER else 'hex_number'
        sub_denomination = None
        if self.match(TokenType.SUB_DENOMINATION):
            sub_denomination = self.advance().value
        return Literal(
            span=self.span_from(token.span),
            value=token.value,
            kind=kind,
            sub_denomination=sub_denomination,
            parts=[token.value],
        )

    def _parse_string_literal(self) -> Literal:
        first = self.current()
        kind, prefix = STRING_LITERALS[first.type]
        parts = []
        while self.match(first.type):
            parts.append(self.advance().value)
        value = ''.join(part[prefix + 1:-1] for part in parts)
        return Literal(span=self.span_from(first.span), value=value, kind=kind, parts=parts)

    def _parse_tuple(self) -> TupleExpression:
        """( ), ( a ), ( a, , c )"""
        start = self.expect(TokenType.LPAREN)
        components: List[Optional[Expression]] = []

        if not self.match(TokenType.RPAREN):
            while True:
                if self.match(TokenType.COMMA, TokenType.RPAREN):
                    components.append(None)
                else:
                    components.append(self.parse_expression())
                if not self.match(TokenType.COMMA):
                    break
                self.advance()

        self.expect(TokenType.RPAREN, 'tuple expression')
        return TupleExpression(span=self.span_from(start.span), components=components)

    def _parse_inline_array(self) -> InlineArray:
        start = self.expect(TokenType.LBRACKET)
        elements = [self.parse_expression()]
        while self.match(TokenType.COMMA):
            self.advance()
            elements.append(self.parse_expression())
        self.expect(TokenType.RBRACKET, 'inline array')
        return InlineArray(span=self.span_from(start.span), elements=elements)

    # =========================================================================
    # TYPE NAMES
    # =========================================================================

    def at_type_name(self, offset: int = 0) -> bool:
        token_type = self.peek(offset).type
        return (
            token_type in ELEMENTARY_TYPES
            or token_type in (TokenType.MAPPING, TokenType.FUNCTION)
            or self.is_identifier(offset)
        )

    def parse_type_name(self) -> TypeName:
        with self.nested():
            return self._parse_type_name()

    def _parse_type_name(self) -> TypeName:
        token = self.current()

        if token.type == TokenType.MAPPING:
            type_name = self.parse_mapping_type()
        elif token.type == TokenType.FUNCTION:
            type_name = self.parse_function_type()
        elif token.type in ELEMENTARY_TYPES:
            type_name = self.parse_elementary_type_name(allow_payable=True)
        elif self.is_identifier():
            path = self.parse_identifier_path('type name')
            type_name = UserDefinedTypeName(span=self.span_from(token.span), path=path)
        else:
            raise self.error('type name')

        # Array suffixes
        while self.match(TokenType.LBRACKET):
            self.advance()
            length = None
            if not self.match(TokenType.RBRACKET):
                length = self.parse_expression()
            self.expect(TokenType.RBRACKET, 'array type')
            type_name = ArrayTypeName(span=self.span_from(token.span), base_type=type_name, length=length)

        return type_name

    def parse_elementary_type_name(self, allow_payable: bool) -> ElementaryTypeName:
        token = self.current()
        if token.type not in ELEMENTARY_TYPES:
            raise self.error('elementary type name')
        self.advance()
        payable = False
        if allow_payable and token.type == TokenType.ADDRESS and self.match(TokenType.PAYABLE):
            self.advance()
            payable = True
        return ElementaryTypeName(span=self.span_from(token.span), name=token.value, payable=payable)

    def parse_mapping_type(self) -> MappingType:
        """mapping(KeyType [name] => ValueType [name])"""
        start = self.expect(TokenType.MAPPING)
        self.expect(TokenType.LPAREN, 'mapping type')

        if self.current().type in ELEMENTARY_TYPES:
            key_type: TypeName = self.parse_elementary_type_name(allow_payable=False)
        elif self.is_identifier():
            key_start = self.current().span
            path = self.parse_identifier_path('mapping key type')
            key_type = UserDefinedTypeName(span=self.span_from(key_start), path=path)
        else:
            raise self.error('mapping key type')

        key_name = self.expect_identifier() if self.is_identifier() else None
        self.expect(TokenType.ARROW, 'mapping type')
        value_type = self.parse_type_name()
        value_name = self.expect_identifier() if self.is_identifier() else None
        self.expect(TokenType.RPAREN, 'mapping type')

        return MappingType(
            span=self.span_from(start.span),
            key_type=key_type,
            value_type=value_type,
            key_name=key_name,
            value_name=value_name,
        )

    def parse_function_type(self) -> FunctionTypeName:
        """function (params) [visibility] [mutability] [returns (params)]"""
        start = self.expect(TokenType.FUNCTION)
        self.expect(TokenType.LPAREN, 'function type')
        parameters = self.parse_parameter_list()
        self.expect(TokenType.RPAREN, 'function type')

        visibility = ''
        mutability = ''
        while True:
            if self.current().type in VISIBILITIES:
                visibility = VISIBILITIES[self.advance().type]
            elif self.current().type in MUTABILITIES:
                mutability = MUTABILITIES[self.advance().type]
            else:
                break

        return_parameters: List[VariableDeclaration] = []
        if self.match(TokenType.RETURNS):
            self.advance()
            self.expect(TokenType.LPAREN, 'function type')
            return_parameters = self.parse_parameter_list()
            self.expect(TokenType.RPAREN, 'function type')

        return FunctionTypeName(
            span=self.span_from(start.span),
            parameters=parameters,
            return_parameters=return_parameters,
            visibility=visibility,
            mutability=mutability,
        )

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def parse_parameter_list(self, allow_indexed: bool = False) -> List[VariableDeclaration]:
        """Comma-separated parameters up to (not including) the closing ')'."""
        params: List[VariableDeclaration] = []
        if self.match(TokenType.RPAREN):
            return params

        params.append(self.parse_parameter(allow_indexed))
        while self.match(TokenType.COMMA):
            self.advance()
            params.append(self.parse_parameter(allow_indexed))
        return params

    def parse_parameter(self, allow_indexed: bool = False) -> VariableDeclaration:
        """TypeName [indexed | data location] [name]"""
        start = self.current().span
        type_name = self.parse_type_name()

        is_indexed = False
        storage_location = ''
        if allow_indexed and self.match(TokenType.INDEXED):
            self.advance()
            is_indexed = True
        elif not allow_indexed and self.current().type in DATA_LOCATIONS:
            storage_location = self.advance().value

        name = ''
        if self.is_identifier():
            name = self.advance().value

        return VariableDeclaration(
            span=self.span_from(start),
            type_name=type_name,
            name=name,
            storage_location=storage_location,
            is_indexed=is_indexed,
        )

    def parse_data_location(self) -> str:
        if self.current().type in DATA_LOCATIONS:
            return self.advance().value
        return ''
