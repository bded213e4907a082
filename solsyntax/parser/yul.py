"""
Yul sub-parser for the body of inline assembly statements.

Yul tokens are produced by the lexer's YUL mode, so this parser only ever
sees YUL_* token types between the opening ASSEMBLY_LBRACE and the matching
YUL_RBRACE.
"""

from typing import List

from .base import BaseParser
from .ast_nodes import (
    ASTNode,
    YulAssignment,
    YulBlock,
    YulBreak,
    YulCase,
    YulContinue,
    YulExpression,
    YulFor,
    YulFunctionCall,
    YulFunctionDefinition,
    YulIf,
    YulLeave,
    YulLet,
    YulLiteral,
    YulPath,
    YulSwitch,
)
from ..lexer.tokens import SourceSpan, TokenType


YUL_LITERALS = {
    TokenType.YUL_DECIMAL_NUMBER: 'number',
    TokenType.YUL_HEX_NUMBER: 'hex_number',
    TokenType.YUL_STRING_LITERAL: 'string',
    TokenType.YUL_HEX_STRING: 'hex_string',
    TokenType.YUL_TRUE: 'bool',
    TokenType.YUL_FALSE: 'bool',
}


class YulParser(BaseParser):
    """Parses Yul blocks, statements and expressions."""

    # =========================================================================
    # BLOCKS
    # =========================================================================

    def parse_assembly_body(self, start: SourceSpan) -> YulBlock:
        """Statements after an assembly '{' (already consumed) up to its '}'."""
        statements = self._parse_statements_until_rbrace()
        self.expect(TokenType.YUL_RBRACE, 'assembly block')
        return YulBlock(span=self.span_from(start), statements=statements)

    def parse_block(self) -> YulBlock:
        start = self.expect(TokenType.YUL_LBRACE, 'assembly block')
        statements = self._parse_statements_until_rbrace()
        self.expect(TokenType.YUL_RBRACE, 'assembly block')
        return YulBlock(span=self.span_from(start.span), statements=statements)

    def _parse_statements_until_rbrace(self) -> List[ASTNode]:
        statements = []
        while not self.match(TokenType.YUL_RBRACE, TokenType.EOF):
            statements.append(self.parse_statement())
        return statements

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def parse_statement(self) -> ASTNode:
        with self.nested():
            return self._parse_statement()

    def _parse_statement(self) -> ASTNode:
        token = self.current()

        if token.type == TokenType.YUL_LBRACE:
            return self.parse_block()
        if token.type == TokenType.YUL_LET:
            return self.parse_variable_declaration()
        if token.type == TokenType.YUL_IF:
            return self.parse_if()
        if token.type == TokenType.YUL_FOR:
            return self.parse_for()
        if token.type == TokenType.YUL_SWITCH:
            return self.parse_switch()
        if token.type == TokenType.YUL_FUNCTION:
            return self.parse_function_definition()
        if token.type == TokenType.YUL_LEAVE:
            self.advance()
            return YulLeave(span=token.span)
        if token.type == TokenType.YUL_BREAK:
            self.advance()
            return YulBreak(span=token.span)
        if token.type == TokenType.YUL_CONTINUE:
            self.advance()
            return YulContinue(span=token.span)
        if token.type == TokenType.YUL_EVM_BUILTIN:
            return self.parse_function_call()
        if token.type == TokenType.YUL_IDENTIFIER:
            if self.peek(1).type == TokenType.YUL_LPAREN:
                return self.parse_function_call()
            return self.parse_assignment()

        raise self.error('assembly statement')

    def parse_variable_declaration(self) -> YulLet:
        """let a, b := f()"""
        start = self.expect(TokenType.YUL_LET)
        variables = [self.expect(TokenType.YUL_IDENTIFIER, 'variable declaration').value]
        while self.match(TokenType.YUL_COMMA):
            self.advance()
            variables.append(self.expect(TokenType.YUL_IDENTIFIER, 'variable declaration').value)

        value = None
        if self.match(TokenType.YUL_ASSIGN):
            self.advance()
            value = self.parse_expression()
            if len(variables) > 1 and not isinstance(value, YulFunctionCall):
                raise self.reporter.structural_error(
                    'Declaring multiple variables requires a function call as initializer',
                    value.span,
                )

        return YulLet(span=self.span_from(start.span), variables=variables, value=value)

    def parse_assignment(self) -> YulAssignment:
        """a := x, or a, b := f()"""
        targets = [self.parse_path()]
        while self.match(TokenType.YUL_COMMA):
            self.advance()
            targets.append(self.parse_path())

        self.expect(TokenType.YUL_ASSIGN, 'assignment')
        value = self.parse_expression()
        if len(targets) > 1 and not isinstance(value, YulFunctionCall):
            raise self.reporter.structural_error(
                'Assigning to multiple variables requires a function call',
                value.span,
            )

        return YulAssignment(span=targets[0].span.merge(value.span), targets=targets, value=value)

    def parse_if(self) -> YulIf:
        start = self.expect(TokenType.YUL_IF)
        condition = self.parse_expression()
        body = self.parse_block()
        return YulIf(span=self.span_from(start.span), condition=condition, body=body)

    def parse_for(self) -> YulFor:
        """for { init } condition { post } { body }"""
        start = self.expect(TokenType.YUL_FOR)
        init = self.parse_block()
        condition = self.parse_expression()
        post = self.parse_block()
        body = self.parse_block()
        return YulFor(span=self.span_from(start.span), init=init, condition=condition, post=post, body=body)

    def parse_switch(self) -> YulSwitch:
        start = self.expect(TokenType.YUL_SWITCH)
        expression = self.parse_expression()

        cases: List[YulCase] = []
        while self.match(TokenType.YUL_CASE):
            case_start = self.advance()
            value = self.parse_literal()
            body = self.parse_block()
            cases.append(YulCase(span=self.span_from(case_start.span), value=value, body=body))

        default = None
        if self.match(TokenType.YUL_DEFAULT):
            self.advance()
            default = self.parse_block()

        span = self.span_from(start.span)
        if not cases:
            raise self.reporter.structural_error(
                'Switch statement requires at least one non-default case',
                span,
            )

        return YulSwitch(span=span, expression=expression, cases=cases, default=default)

    def parse_function_definition(self) -> YulFunctionDefinition:
        """function name(a, b) -> r, s { ... }"""
        start = self.expect(TokenType.YUL_FUNCTION)
        name = self.expect(TokenType.YUL_IDENTIFIER, 'function definition').value

        self.expect(TokenType.YUL_LPAREN, 'function definition')
        parameters = []
        if not self.match(TokenType.YUL_RPAREN):
            parameters.append(self.expect(TokenType.YUL_IDENTIFIER, 'parameter list').value)
            while self.match(TokenType.YUL_COMMA):
                self.advance()
                parameters.append(self.expect(TokenType.YUL_IDENTIFIER, 'parameter list').value)
        self.expect(TokenType.YUL_RPAREN, 'function definition')

        return_variables = []
        if self.match(TokenType.YUL_ARROW):
            self.advance()
            return_variables.append(self.expect(TokenType.YUL_IDENTIFIER, 'return variables').value)
            while self.match(TokenType.YUL_COMMA):
                self.advance()
                return_variables.append(self.expect(TokenType.YUL_IDENTIFIER, 'return variables').value)

        body = self.parse_block()
        return YulFunctionDefinition(
            span=self.span_from(start.span),
            name=name,
            parameters=parameters,
            return_variables=return_variables,
            body=body,
        )

    # =========================================================================
    # EXPRESSIONS
    # =========================================================================

    def parse_expression(self) -> YulExpression:
        with self.nested():
            return self._parse_expression()

    def _parse_expression(self) -> YulExpression:
        token = self.current()

        if token.type in YUL_LITERALS:
            return self.parse_literal()
        if token.type == TokenType.YUL_EVM_BUILTIN:
            return self.parse_function_call()
        if token.type == TokenType.YUL_IDENTIFIER:
            if self.peek(1).type == TokenType.YUL_LPAREN:
                return self.parse_function_call()
            return self.parse_path()

        raise self.error('assembly expression')

    def parse_literal(self) -> YulLiteral:
        token = self.current()
        if token.type not in YUL_LITERALS:
            raise self.error('literal')
        self.advance()
        return YulLiteral(span=token.span, value=token.value, kind=YUL_LITERALS[token.type])

    def parse_path(self) -> YulPath:
        """x or x.slot; parts after a '.' may also be builtin names"""
        start = self.expect(TokenType.YUL_IDENTIFIER, 'assembly path')
        parts = [start.value]
        while self.match(TokenType.YUL_PERIOD):
            self.advance()
            if not self.match(TokenType.YUL_IDENTIFIER, TokenType.YUL_EVM_BUILTIN):
                raise self.error('identifier', 'assembly path')
            parts.append(self.advance().value)
        return YulPath(span=self.span_from(start.span), parts=parts)

    def parse_function_call(self) -> YulFunctionCall:
        name_token = self.advance()
        self.expect(TokenType.YUL_LPAREN, 'function call')

        arguments = []
        if not self.match(TokenType.YUL_RPAREN):
            arguments.append(self.parse_expression())
            while self.match(TokenType.YUL_COMMA):
                self.advance()
                arguments.append(self.parse_expression())
        self.expect(TokenType.YUL_RPAREN, 'function call')

        return YulFunctionCall(
            span=self.span_from(name_token.span),
            name=name_token.value,
            arguments=arguments,
            is_builtin=name_token.type == TokenType.YUL_EVM_BUILTIN,
        )
