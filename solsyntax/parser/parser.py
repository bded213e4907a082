"""
Solidity parser implementation.

The Parser converts the visible token stream from the Lexer into an
Abstract Syntax Tree (AST). Expressions and type names are handled by the
inherited ExpressionParser methods; assembly bodies are handed to a
YulParser reading from the same cursor. The first error raises a
ParserError carrying a positioned diagnostic.
"""

from typing import List, Optional

from ..config import ParseOptions
from ..diagnostics import DiagnosticReporter
from ..lexer import Token, TokenType, visible_tokens
from ..lexer.tokens import ELEMENTARY_TYPES
from .base import TokenCursor, DATA_LOCATIONS
from .expression import ExpressionParser, VISIBILITIES, MUTABILITIES
from .yul import YulParser
from .ast_nodes import (
    # Top-level
    ASTNode,
    SourceUnit,
    PragmaDirective,
    ImportDirective,
    UsingDirective,
    InheritanceSpecifier,
    ContractDefinition,
    # Definitions
    StructDefinition,
    EnumDefinition,
    UserDefinedValueTypeDefinition,
    EventDefinition,
    ErrorDefinition,
    ModifierDefinition,
    ModifierInvocation,
    FunctionDefinition,
    OverrideSpecifier,
    # Variables
    VariableDeclaration,
    StateVariableDeclaration,
    # Expressions
    Expression,
    FunctionCall,
    # Statements
    Statement,
    Block,
    ExpressionStatement,
    VariableDeclarationStatement,
    IfStatement,
    ForStatement,
    WhileStatement,
    DoWhileStatement,
    ReturnStatement,
    EmitStatement,
    RevertStatement,
    BreakStatement,
    ContinueStatement,
    CatchClause,
    TryStatement,
    AssemblyStatement,
)


CONTRACT_KINDS = {
    TokenType.CONTRACT: 'contract',
    TokenType.INTERFACE: 'interface',
    TokenType.LIBRARY: 'library',
}


class Parser(ExpressionParser):
    """
    Recursive descent parser for Solidity source code.

    Parses a stream of tokens into an AST (Abstract Syntax Tree). Hidden
    tokens (whitespace, comments) are dropped on construction.
    """

    def __init__(
        self,
        tokens: List[Token],
        options: Optional[ParseOptions] = None,
        reporter: Optional[DiagnosticReporter] = None,
    ):
        tokens = visible_tokens(tokens)
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError('token list must end with an EOF token')
        cursor = TokenCursor(tokens, reporter or DiagnosticReporter(), options or ParseOptions())
        super().__init__(cursor)
        self.yul = YulParser(cursor)

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> SourceUnit:
        """Parse the entire source file into a SourceUnit AST."""
        start = self.current().span
        nodes: List[ASTNode] = []

        while not self.match(TokenType.EOF):
            nodes.append(self.parse_source_unit_element())

        return SourceUnit(span=start.merge(self.current().span), nodes=nodes)

    def parse_standalone_expression(self) -> Expression:
        """Parse a single expression that must span the whole input."""
        expr = self.parse_expression()
        self.expect(TokenType.EOF)
        return expr

    def parse_source_unit_element(self) -> ASTNode:
        if self.match(TokenType.PRAGMA):
            return self.parse_pragma()
        if self.match(TokenType.IMPORT):
            return self.parse_import()
        if self.match(TokenType.ABSTRACT, TokenType.CONTRACT, TokenType.INTERFACE, TokenType.LIBRARY):
            return self.parse_contract()
        if self.match(TokenType.STRUCT):
            return self.parse_struct()
        if self.match(TokenType.ENUM):
            return self.parse_enum()
        if self.match(TokenType.FUNCTION) and self.peek(1).type != TokenType.LPAREN:
            return self.parse_function()
        if self.match(TokenType.TYPE) and self.is_identifier(1):
            return self.parse_user_defined_value_type()
        if self.match(TokenType.USING):
            return self.parse_using()
        if self.match(TokenType.EVENT):
            return self.parse_event()
        if self._at_error_definition():
            return self.parse_error()
        if self.at_type_name():
            return self.parse_constant_variable()

        raise self.error('pragma, import directive or contract, interface, library, struct, '
                         'enum, function, error or constant definition')

    def parse_pragma(self) -> PragmaDirective:
        """Parse a pragma directive; its body is an opaque run of pragma tokens."""
        start = self.expect(TokenType.PRAGMA)
        chunks = []
        while self.match(TokenType.PRAGMA_TOKEN):
            chunks.append(self.advance().value)
        if not chunks:
            raise self.error('pragma name', 'pragma directive')
        self.expect(TokenType.PRAGMA_SEMICOLON, 'pragma directive')

        return PragmaDirective(
            span=self.span_from(start.span),
            name=chunks[0],
            value=' '.join(chunks[1:]),
            tokens=chunks,
        )

    def parse_import(self) -> ImportDirective:
        """Parse an import statement in any of its three forms."""
        start = self.expect(TokenType.IMPORT)
        unit_alias = None
        symbols = []
        is_wildcard = False

        if self.match(TokenType.STRING_LITERAL):
            path = self._parse_import_path()
            if self.match(TokenType.AS):
                self.advance()
                unit_alias = self.expect_identifier('import directive', allow_from=False)
        elif self.match(TokenType.STAR):
            self.advance()
            is_wildcard = True
            self.expect(TokenType.AS, 'import directive')
            unit_alias = self.expect_identifier('import directive', allow_from=False)
            self.expect(TokenType.FROM, 'import directive')
            path = self._parse_import_path()
        elif self.match(TokenType.LBRACE):
            self.advance()
            while True:
                name = self.expect_identifier('import directive', allow_from=False)
                alias = None
                if self.match(TokenType.AS):
                    self.advance()
                    alias = self.expect_identifier('import directive', allow_from=False)
                symbols.append((name, alias))
                if not self.match(TokenType.COMMA):
                    break
                self.advance()
            self.expect(TokenType.RBRACE, 'import directive')
            self.expect(TokenType.FROM, 'import directive')
            path = self._parse_import_path()
        else:
            raise self.error("import path, '{' or '*'", 'import directive')

        self.expect(TokenType.SEMICOLON, 'import directive')
        return ImportDirective(
            span=self.span_from(start.span),
            path=path,
            unit_alias=unit_alias,
            symbols=symbols,
            is_wildcard=is_wildcard,
        )

    def _parse_import_path(self) -> str:
        token = self.current()
        if token.type != TokenType.STRING_LITERAL or len(token.value) <= 2:
            raise self.error('non-empty import path', 'import directive')
        self.advance()
        return token.value[1:-1]

    def parse_contract(self) -> ContractDefinition:
        """Parse a contract, interface, library, or abstract contract."""
        start = self.current()
        is_abstract = False
        if self.match(TokenType.ABSTRACT):
            is_abstract = True
            self.advance()
            if not self.match(TokenType.CONTRACT):
                raise self.error("'contract'")

        if self.current().type not in CONTRACT_KINDS:
            raise self.error("'contract', 'interface' or 'library'")
        kind = CONTRACT_KINDS[self.advance().type]
        name = self.expect_identifier(f'{kind} definition')

        base_contracts = []
        if self.match(TokenType.IS) and kind != 'library':
            self.advance()
            base_contracts.append(self.parse_inheritance_specifier())
            while self.match(TokenType.COMMA):
                self.advance()
                base_contracts.append(self.parse_inheritance_specifier())

        self.expect(TokenType.LBRACE, f'{kind} definition')
        body = []
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            body.append(self.parse_contract_body_element())
        self.expect(TokenType.RBRACE, f'{kind} definition')

        return ContractDefinition(
            span=self.span_from(start.span),
            name=name,
            kind=kind,
            is_abstract=is_abstract,
            base_contracts=base_contracts,
            body=body,
        )

    def parse_inheritance_specifier(self) -> InheritanceSpecifier:
        start = self.current().span
        path = self.parse_identifier_path('inheritance specifier')
        arguments = None
        if self.match(TokenType.LPAREN):
            arguments, _ = self.parse_call_arguments()
        return InheritanceSpecifier(span=self.span_from(start), name='.'.join(path), arguments=arguments)

    def parse_contract_body_element(self) -> ASTNode:
        if self.match(TokenType.CONSTRUCTOR):
            return self.parse_constructor()
        if self.match(TokenType.FUNCTION) and self.peek(1).type != TokenType.LPAREN:
            return self.parse_function()
        if self.match(TokenType.MODIFIER):
            return self.parse_modifier()
        if self.match(TokenType.FALLBACK, TokenType.RECEIVE):
            return self.parse_special_function()
        if self.match(TokenType.STRUCT):
            return self.parse_struct()
        if self.match(TokenType.ENUM):
            return self.parse_enum()
        if self.match(TokenType.TYPE) and self.is_identifier(1):
            return self.parse_user_defined_value_type()
        if self.match(TokenType.EVENT):
            return self.parse_event()
        if self._at_error_definition():
            return self.parse_error()
        if self.match(TokenType.USING):
            return self.parse_using()
        if self.at_type_name():
            return self.parse_state_variable()

        raise self.error('contract body element')

    def _at_error_definition(self) -> bool:
        """'error' is contextual: error Name(...)"""
        return (
            self.match_value(TokenType.IDENTIFIER, 'error')
            and self.is_identifier(1)
            and self.peek(2).type == TokenType.LPAREN
        )

    def _at_transient(self) -> bool:
        """'transient' is contextual: a storage location unless it is the variable name."""
        return (
            self.match_value(TokenType.IDENTIFIER, 'transient')
            and self.peek(1).type not in (TokenType.SEMICOLON, TokenType.EQ)
        )

    # =========================================================================
    # DEFINITIONS
    # =========================================================================

    def parse_using(self) -> UsingDirective:
        """Parse 'using L for T;', 'using L for *;' or 'using L for T global;'."""
        start = self.expect(TokenType.USING)
        library = '.'.join(self.parse_identifier_path('using directive'))
        self.expect(TokenType.FOR, 'using directive')

        type_name = None
        if self.match(TokenType.STAR):
            self.advance()
        else:
            type_name = self.parse_type_name()

        is_global = False
        if self.match_value(TokenType.IDENTIFIER, 'global'):
            self.advance()
            is_global = True

        self.expect(TokenType.SEMICOLON, 'using directive')
        return UsingDirective(
            span=self.span_from(start.span),
            library=library,
            type_name=type_name,
            is_global=is_global,
        )

    def parse_struct(self) -> StructDefinition:
        """Parse a struct definition; at least one member is required."""
        start = self.expect(TokenType.STRUCT)
        name = self.expect_identifier('struct definition')
        self.expect(TokenType.LBRACE, 'struct definition')

        members = []
        while True:
            member_start = self.current().span
            type_name = self.parse_type_name()
            member_name = self.expect_identifier('struct member')
            self.expect(TokenType.SEMICOLON, 'struct member')
            members.append(VariableDeclaration(
                span=self.span_from(member_start),
                type_name=type_name,
                name=member_name,
            ))
            if self.match(TokenType.RBRACE):
                break

        self.expect(TokenType.RBRACE, 'struct definition')
        return StructDefinition(span=self.span_from(start.span), name=name, members=members)

    def parse_enum(self) -> EnumDefinition:
        """Parse an enum definition."""
        start = self.expect(TokenType.ENUM)
        name = self.expect_identifier('enum definition')
        self.expect(TokenType.LBRACE, 'enum definition')

        members = [self.expect_identifier('enum definition')]
        while self.match(TokenType.COMMA):
            self.advance()
            members.append(self.expect_identifier('enum definition'))

        self.expect(TokenType.RBRACE, 'enum definition')
        return EnumDefinition(span=self.span_from(start.span), name=name, members=members)

    def parse_user_defined_value_type(self) -> UserDefinedValueTypeDefinition:
        """type Name is ElementaryType;"""
        start = self.expect(TokenType.TYPE)
        name = self.expect_identifier('user-defined value type')
        self.expect(TokenType.IS, 'user-defined value type')
        underlying = self.parse_elementary_type_name(allow_payable=True)
        self.expect(TokenType.SEMICOLON, 'user-defined value type')
        return UserDefinedValueTypeDefinition(
            span=self.span_from(start.span),
            name=name,
            underlying_type=underlying,
        )

    def parse_event(self) -> EventDefinition:
        """Parse an event definition."""
        start = self.expect(TokenType.EVENT)
        name = self.expect_identifier('event definition')
        self.expect(TokenType.LPAREN, 'event definition')
        parameters = self.parse_parameter_list(allow_indexed=True)
        self.expect(TokenType.RPAREN, 'event definition')

        is_anonymous = False
        if self.match(TokenType.ANONYMOUS):
            self.advance()
            is_anonymous = True

        self.expect(TokenType.SEMICOLON, 'event definition')
        return EventDefinition(
            span=self.span_from(start.span),
            name=name,
            parameters=parameters,
            is_anonymous=is_anonymous,
        )

    def parse_error(self) -> ErrorDefinition:
        """Parse a custom error definition."""
        start = self.advance()  # 'error'
        name = self.expect_identifier('error definition')
        self.expect(TokenType.LPAREN, 'error definition')
        parameters = self.parse_parameter_list()
        self.expect(TokenType.RPAREN, 'error definition')
        self.expect(TokenType.SEMICOLON, 'error definition')
        return ErrorDefinition(span=self.span_from(start.span), name=name, parameters=parameters)

    def parse_modifier(self) -> ModifierDefinition:
        """Parse a modifier definition; the parameter list may be omitted."""
        start = self.expect(TokenType.MODIFIER)
        name = self.expect_identifier('modifier definition')

        parameters = []
        if self.match(TokenType.LPAREN):
            self.advance()
            parameters = self.parse_parameter_list()
            self.expect(TokenType.RPAREN, 'modifier definition')

        is_virtual = False
        override = None
        while True:
            if self.match(TokenType.VIRTUAL):
                self.advance()
                is_virtual = True
            elif self.match(TokenType.OVERRIDE):
                override = self.parse_override_specifier()
            else:
                break

        body = self._parse_optional_body('modifier definition')
        return ModifierDefinition(
            span=self.span_from(start.span),
            name=name,
            parameters=parameters,
            is_virtual=is_virtual,
            override=override,
            body=body,
        )

    def parse_function(self) -> FunctionDefinition:
        """Parse a function definition (contract member or free function)."""
        start = self.expect(TokenType.FUNCTION)
        if self.match(TokenType.FALLBACK, TokenType.RECEIVE):
            name = self.advance().value
        else:
            name = self.expect_identifier('function definition')
        return self._parse_function_rest(start, name, 'function')

    def parse_constructor(self) -> FunctionDefinition:
        """Parse a constructor definition; a body is required."""
        start = self.expect(TokenType.CONSTRUCTOR)
        function = self._parse_function_rest(start, '', 'constructor')
        if function.body is None:
            raise self.reporter.syntax_error(self.previous(), "'{'", 'constructor definition')
        return function

    def parse_special_function(self) -> FunctionDefinition:
        """Parse a fallback or receive function."""
        start = self.advance()
        kind = 'fallback' if start.type == TokenType.FALLBACK else 'receive'
        return self._parse_function_rest(start, '', kind)

    def _parse_function_rest(self, start: Token, name: str, kind: str) -> FunctionDefinition:
        construct = f'{kind} definition'
        self.expect(TokenType.LPAREN, construct)
        parameters = self.parse_parameter_list()
        self.expect(TokenType.RPAREN, construct)

        visibility = ''
        mutability = ''
        modifiers = []
        is_virtual = False
        override = None

        while True:
            if self.current().type in VISIBILITIES:
                visibility = VISIBILITIES[self.advance().type]
            elif self.current().type in MUTABILITIES:
                mutability = MUTABILITIES[self.advance().type]
            elif self.match(TokenType.VIRTUAL):
                self.advance()
                is_virtual = True
            elif self.match(TokenType.OVERRIDE):
                override = self.parse_override_specifier()
            elif self.is_identifier():
                modifiers.append(self.parse_modifier_invocation())
            else:
                break

        return_parameters = []
        if self.match(TokenType.RETURNS) and kind in ('function', 'fallback'):
            self.advance()
            self.expect(TokenType.LPAREN, construct)
            return_parameters = self.parse_parameter_list()
            self.expect(TokenType.RPAREN, construct)

        body = self._parse_optional_body(construct)
        return FunctionDefinition(
            span=self.span_from(start.span),
            name=name,
            kind=kind,
            parameters=parameters,
            return_parameters=return_parameters,
            visibility=visibility,
            mutability=mutability,
            modifiers=modifiers,
            is_virtual=is_virtual,
            override=override,
            body=body,
        )

    def _parse_optional_body(self, construct: str) -> Optional[Block]:
        if self.match(TokenType.SEMICOLON):
            self.advance()
            return None
        if not self.match(TokenType.LBRACE):
            raise self.error("'{' or ';'", construct)
        return self.parse_block()

    def parse_modifier_invocation(self) -> ModifierInvocation:
        start = self.current().span
        path = self.parse_identifier_path('modifier invocation')
        arguments = None
        if self.match(TokenType.LPAREN):
            arguments, _ = self.parse_call_arguments()
        return ModifierInvocation(span=self.span_from(start), name='.'.join(path), arguments=arguments)

    def parse_override_specifier(self) -> OverrideSpecifier:
        start = self.expect(TokenType.OVERRIDE)
        overrides = []
        if self.match(TokenType.LPAREN):
            self.advance()
            overrides.append('.'.join(self.parse_identifier_path('override specifier')))
            while self.match(TokenType.COMMA):
                self.advance()
                overrides.append('.'.join(self.parse_identifier_path('override specifier')))
            self.expect(TokenType.RPAREN, 'override specifier')
        return OverrideSpecifier(span=self.span_from(start.span), overrides=overrides)

    def parse_state_variable(self) -> StateVariableDeclaration:
        """Parse a state variable declaration."""
        start = self.current().span
        type_name = self.parse_type_name()

        visibility = ''
        mutability = ''
        override = None
        while True:
            if self.match(TokenType.PUBLIC, TokenType.PRIVATE, TokenType.INTERNAL):
                visibility = self.advance().value
            elif self.match(TokenType.CONSTANT, TokenType.IMMUTABLE):
                mutability = self.advance().value
            elif self._at_transient():
                mutability = self.advance().value
            elif self.match(TokenType.OVERRIDE):
                override = self.parse_override_specifier()
            else:
                break

        name = self.expect_identifier('state variable declaration')

        initial_value = None
        if self.match(TokenType.EQ):
            self.advance()
            initial_value = self.parse_expression()

        self.expect(TokenType.SEMICOLON, 'state variable declaration')
        return StateVariableDeclaration(
            span=self.span_from(start),
            type_name=type_name,
            name=name,
            visibility=visibility,
            mutability=mutability,
            override=override,
            initial_value=initial_value,
        )

    def parse_constant_variable(self) -> VariableDeclaration:
        """File-level constant: T constant NAME = value;"""
        start = self.current().span
        type_name = self.parse_type_name()
        self.expect(TokenType.CONSTANT, 'file-level constant')
        name = self.expect_identifier('file-level constant')
        self.expect(TokenType.EQ, 'file-level constant')
        initial_value = self.parse_expression()
        self.expect(TokenType.SEMICOLON, 'file-level constant')
        return VariableDeclaration(
            span=self.span_from(start),
            type_name=type_name,
            name=name,
            mutability='constant',
            initial_value=initial_value,
        )

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def parse_block(self) -> Block:
        """Parse a block; 'unchecked { ... }' is only allowed directly inside one."""
        start = self.expect(TokenType.LBRACE, 'block')
        statements = []

        while not self.match(TokenType.RBRACE, TokenType.EOF):
            if self.match(TokenType.UNCHECKED):
                statements.append(self.parse_unchecked_block())
            else:
                statements.append(self.parse_statement())

        self.expect(TokenType.RBRACE, 'block')
        return Block(span=self.span_from(start.span), statements=statements)

    def parse_unchecked_block(self) -> Block:
        start = self.expect(TokenType.UNCHECKED)
        block = self.parse_block()
        return Block(span=self.span_from(start.span), statements=block.statements, unchecked=True)

    def parse_statement(self) -> Statement:
        """Parse a single statement."""
        with self.nested():
            return self._parse_statement()

    def _parse_statement(self) -> Statement:
        if self.match(TokenType.LBRACE):
            return self.parse_block()
        elif self.match(TokenType.IF):
            return self.parse_if_statement()
        elif self.match(TokenType.FOR):
            return self.parse_for_statement()
        elif self.match(TokenType.WHILE):
            return self.parse_while_statement()
        elif self.match(TokenType.DO):
            return self.parse_do_while_statement()
        elif self.match(TokenType.RETURN):
            return self.parse_return_statement()
        elif self.match(TokenType.EMIT):
            return self.parse_emit_statement()
        elif self.match(TokenType.TRY):
            return self.parse_try_statement()
        elif self.match(TokenType.ASSEMBLY):
            return self.parse_assembly_statement()
        elif self.match(TokenType.BREAK):
            token = self.advance()
            self.expect(TokenType.SEMICOLON, 'break statement')
            return BreakStatement(span=self.span_from(token.span))
        elif self.match(TokenType.CONTINUE):
            token = self.advance()
            self.expect(TokenType.SEMICOLON, 'continue statement')
            return ContinueStatement(span=self.span_from(token.span))
        elif self.match_value(TokenType.IDENTIFIER, 'revert') and self.is_identifier(1):
            return self.parse_revert_statement()
        else:
            return self.parse_simple_statement()

    def parse_simple_statement(self) -> Statement:
        """A variable declaration or an expression statement."""
        if self.is_variable_declaration():
            return self.parse_variable_declaration_statement()
        return self.parse_expression_statement()

    def is_variable_declaration(self) -> bool:
        """Check if current position starts a variable declaration."""
        saved_pos = self.pos

        try:
            # Tuple declaration: skip '(' and leading empty slots
            if self.match(TokenType.LPAREN):
                self.advance()
                while self.match(TokenType.COMMA):
                    self.advance()
                if self.match(TokenType.RPAREN):
                    return False
            return self._skip_declaration_type()

        finally:
            self.pos = saved_pos

    def _skip_declaration_type(self) -> bool:
        """Skip a type name and report whether a declaration follows it."""
        if self.match(TokenType.MAPPING, TokenType.FUNCTION):
            return True
        if self.match(TokenType.ADDRESS) and self.peek(1).type == TokenType.PAYABLE:
            return True

        if self.current().type in ELEMENTARY_TYPES:
            self.advance()
        elif self.is_identifier():
            self.advance()
            # Skip qualified names
            while self.match(TokenType.DOT) and self.is_identifier(1):
                self.advance()
                self.advance()
        else:
            return False

        # Skip array brackets
        while self.match(TokenType.LBRACKET):
            self.advance()
            depth = 1
            while depth > 0:
                if self.match(TokenType.EOF):
                    return False
                if self.match(TokenType.LBRACKET):
                    depth += 1
                elif self.match(TokenType.RBRACKET):
                    depth -= 1
                self.advance()

        return self.current().type in DATA_LOCATIONS or self.is_identifier()

    def parse_variable_declaration(self) -> VariableDeclaration:
        start = self.current().span
        type_name = self.parse_type_name()
        storage_location = self.parse_data_location()
        name = self.expect_identifier('variable declaration')
        return VariableDeclaration(
            span=self.span_from(start),
            type_name=type_name,
            name=name,
            storage_location=storage_location,
        )

    def parse_variable_declaration_statement(self) -> VariableDeclarationStatement:
        """Parse a variable declaration statement."""
        if self.match(TokenType.LPAREN):
            return self.parse_tuple_declaration()

        start = self.current().span
        declaration = self.parse_variable_declaration()

        initial_value = None
        if self.match(TokenType.EQ):
            self.advance()
            initial_value = self.parse_expression()

        self.expect(TokenType.SEMICOLON, 'variable declaration')
        return VariableDeclarationStatement(
            span=self.span_from(start),
            declarations=[declaration],
            initial_value=initial_value,
        )

    def parse_tuple_declaration(self) -> VariableDeclarationStatement:
        """Parse (T a, , U b) = value; an initializer is mandatory."""
        start = self.expect(TokenType.LPAREN)
        declarations: List[Optional[VariableDeclaration]] = []

        while True:
            if self.match(TokenType.COMMA, TokenType.RPAREN):
                declarations.append(None)
            else:
                declarations.append(self.parse_variable_declaration())
            if not self.match(TokenType.COMMA):
                break
            self.advance()

        self.expect(TokenType.RPAREN, 'tuple variable declaration')
        self.expect(TokenType.EQ, 'tuple variable declaration')
        initial_value = self.parse_expression()
        self.expect(TokenType.SEMICOLON, 'tuple variable declaration')

        return VariableDeclarationStatement(
            span=self.span_from(start.span),
            declarations=declarations,
            initial_value=initial_value,
            is_tuple=True,
        )

    def parse_expression_statement(self) -> ExpressionStatement:
        expr = self.parse_expression()
        self.expect(TokenType.SEMICOLON, 'expression statement')
        return ExpressionStatement(span=self.span_from(expr.span), expression=expr)

    def parse_if_statement(self) -> IfStatement:
        start = self.expect(TokenType.IF)
        self.expect(TokenType.LPAREN, 'if statement')
        condition = self.parse_expression()
        self.expect(TokenType.RPAREN, 'if statement')
        true_body = self.parse_statement()

        false_body = None
        if self.match(TokenType.ELSE):
            self.advance()
            false_body = self.parse_statement()

        return IfStatement(
            span=self.span_from(start.span),
            condition=condition,
            true_body=true_body,
            false_body=false_body,
        )

    def parse_for_statement(self) -> ForStatement:
        """for (init; condition; post) body -- every clause may be empty."""
        start = self.expect(TokenType.FOR)
        self.expect(TokenType.LPAREN, 'for statement')

        init = None
        if self.match(TokenType.SEMICOLON):
            self.advance()
        else:
            init = self.parse_simple_statement()

        condition = None
        if not self.match(TokenType.SEMICOLON):
            condition = self.parse_expression()
        self.expect(TokenType.SEMICOLON, 'for statement')

        post = None
        if not self.match(TokenType.RPAREN):
            post = self.parse_expression()
        self.expect(TokenType.RPAREN, 'for statement')

        body = self.parse_statement()
        return ForStatement(
            span=self.span_from(start.span),
            body=body,
            init=init,
            condition=condition,
            post=post,
        )

    def parse_while_statement(self) -> WhileStatement:
        start = self.expect(TokenType.WHILE)
        self.expect(TokenType.LPAREN, 'while statement')
        condition = self.parse_expression()
        self.expect(TokenType.RPAREN, 'while statement')
        body = self.parse_statement()
        return WhileStatement(span=self.span_from(start.span), condition=condition, body=body)

    def parse_do_while_statement(self) -> DoWhileStatement:
        start = self.expect(TokenType.DO)
        body = self.parse_statement()
        self.expect(TokenType.WHILE, 'do-while statement')
        self.expect(TokenType.LPAREN, 'do-while statement')
        condition = self.parse_expression()
        self.expect(TokenType.RPAREN, 'do-while statement')
        self.expect(TokenType.SEMICOLON, 'do-while statement')
        return DoWhileStatement(span=self.span_from(start.span), body=body, condition=condition)

    def parse_return_statement(self) -> ReturnStatement:
        start = self.expect(TokenType.RETURN)
        expression = None
        if not self.match(TokenType.SEMICOLON):
            expression = self.parse_expression()
        self.expect(TokenType.SEMICOLON, 'return statement')
        return ReturnStatement(span=self.span_from(start.span), expression=expression)

    def parse_emit_statement(self) -> EmitStatement:
        start = self.expect(TokenType.EMIT)
        event_call = self._parse_required_call("event invocation after 'emit'")
        self.expect(TokenType.SEMICOLON, 'emit statement')
        return EmitStatement(span=self.span_from(start.span), event_call=event_call)

    def parse_revert_statement(self) -> RevertStatement:
        start = self.advance()  # 'revert'
        error_call = self._parse_required_call("error invocation after 'revert'")
        self.expect(TokenType.SEMICOLON, 'revert statement')
        return RevertStatement(span=self.span_from(start.span), error_call=error_call)

    def _parse_required_call(self, what: str) -> FunctionCall:
        expr = self.parse_expression()
        if not isinstance(expr, FunctionCall):
            raise self.reporter.structural_error(f'Expected {what} to be a function call', expr.span)
        return expr

    def parse_try_statement(self) -> TryStatement:
        """try call() returns (...) { ... } catch [Name](params) { ... } ..."""
        start = self.expect(TokenType.TRY)
        expression = self._parse_required_call("expression after 'try'")

        return_parameters = []
        if self.match(TokenType.RETURNS):
            self.advance()
            self.expect(TokenType.LPAREN, 'try statement')
            return_parameters = self.parse_parameter_list()
            self.expect(TokenType.RPAREN, 'try statement')

        body = self.parse_block()

        catch_clauses = []
        while self.match(TokenType.CATCH):
            catch_clauses.append(self.parse_catch_clause())
        if not catch_clauses:
            raise self.error("'catch'", 'try statement')

        return TryStatement(
            span=self.span_from(start.span),
            expression=expression,
            body=body,
            return_parameters=return_parameters,
            catch_clauses=catch_clauses,
        )

    def parse_catch_clause(self) -> CatchClause:
        start = self.expect(TokenType.CATCH)
        error_name = None
        parameters = None

        if self.is_identifier():
            error_name = self.advance().value
            if not self.match(TokenType.LPAREN):
                raise self.error("'('", 'catch clause')
        if self.match(TokenType.LPAREN):
            self.advance()
            parameters = self.parse_parameter_list()
            self.expect(TokenType.RPAREN, 'catch clause')

        body = self.parse_block()
        return CatchClause(
            span=self.span_from(start.span),
            body=body,
            error_name=error_name,
            parameters=parameters,
        )

    def parse_assembly_statement(self) -> AssemblyStatement:
        """assembly ["evmasm"] [("flag", ...)] { yul }"""
        start = self.expect(TokenType.ASSEMBLY)

        dialect = None
        if self.match(TokenType.ASSEMBLY_DIALECT):
            dialect = self.advance().value[1:-1]

        flags = []
        if self.match(TokenType.LPAREN):
            self.advance()
            flags.append(self.expect(TokenType.ASSEMBLY_FLAG_STRING, 'assembly flags').value[1:-1])
            while self.match(TokenType.COMMA):
                self.advance()
                flags.append(self.expect(TokenType.ASSEMBLY_FLAG_STRING, 'assembly flags').value[1:-1])
            self.expect(TokenType.RPAREN, 'assembly flags')

        lbrace = self.expect(TokenType.ASSEMBLY_LBRACE, 'assembly statement')
        block = self.yul.parse_assembly_body(lbrace.span)
        return AssemblyStatement(span=self.span_from(start.span), block=block, dialect=dialect, flags=flags)
