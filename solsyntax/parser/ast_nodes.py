"""
AST node definitions for Solidity parsing.

This module contains all the dataclasses representing nodes in the
Abstract Syntax Tree (AST) produced by the Solidity parser, including the
nodes of the Yul sub-language found inside assembly blocks. Every node
carries the source span it was parsed from.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from ..lexer.tokens import SourceSpan


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    span: SourceSpan


# =============================================================================
# TYPE NODES
# =============================================================================

@dataclass
class TypeName(ASTNode):
    """Base class for type references."""
    pass


@dataclass
class ElementaryTypeName(TypeName):
    """A builtin type such as uint256, address payable or bytes32."""
    name: str
    payable: bool = False


@dataclass
class UserDefinedTypeName(TypeName):
    """A (possibly qualified) user-defined type, e.g. Lib.Struct."""
    path: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return '.'.join(self.path)


@dataclass
class MappingType(TypeName):
    """Represents mapping(K name => V name)."""
    key_type: TypeName
    value_type: TypeName
    key_name: Optional[str] = None
    value_name: Optional[str] = None


@dataclass
class FunctionTypeName(TypeName):
    """A function type, e.g. function (uint) external returns (bool)."""
    parameters: List['VariableDeclaration'] = field(default_factory=list)
    return_parameters: List['VariableDeclaration'] = field(default_factory=list)
    visibility: str = ''
    mutability: str = ''


@dataclass
class ArrayTypeName(TypeName):
    """A fixed or dynamic array of ``base_type``."""
    base_type: TypeName
    length: Optional['Expression'] = None


# =============================================================================
# TOP-LEVEL NODES
# =============================================================================

@dataclass
class PragmaDirective(ASTNode):
    """Represents a pragma directive (e.g., pragma solidity ^0.8.0)."""
    name: str
    value: str
    tokens: List[str] = field(default_factory=list)


@dataclass
class ImportDirective(ASTNode):
    """Represents an import statement."""
    path: str
    unit_alias: Optional[str] = None
    symbols: List[Tuple[str, Optional[str]]] = field(default_factory=list)  # (name, alias)
    is_wildcard: bool = False


@dataclass
class UsingDirective(ASTNode):
    """Represents a 'using X for Y' directive; type_name None means '*'."""
    library: str
    type_name: Optional[TypeName] = None
    is_global: bool = False


@dataclass
class InheritanceSpecifier(ASTNode):
    """A base contract in an 'is' list, optionally with constructor arguments."""
    name: str
    arguments: Optional[List['Expression']] = None


@dataclass
class SourceUnit(ASTNode):
    """Root node representing an entire Solidity source file."""
    nodes: List[ASTNode] = field(default_factory=list)

    def _of(self, node_type) -> list:
        return [n for n in self.nodes if isinstance(n, node_type)]

    @property
    def pragmas(self) -> List[PragmaDirective]:
        return self._of(PragmaDirective)

    @property
    def imports(self) -> List[ImportDirective]:
        return self._of(ImportDirective)

    @property
    def contracts(self) -> List['ContractDefinition']:
        return self._of(ContractDefinition)

    @property
    def structs(self) -> List['StructDefinition']:
        return self._of(StructDefinition)

    @property
    def enums(self) -> List['EnumDefinition']:
        return self._of(EnumDefinition)

    @property
    def functions(self) -> List['FunctionDefinition']:
        return self._of(FunctionDefinition)

    @property
    def constants(self) -> List['VariableDeclaration']:
        return self._of(VariableDeclaration)


# =============================================================================
# VARIABLE NODES
# =============================================================================

@dataclass
class OverrideSpecifier(ASTNode):
    """override or override(A, B)."""
    overrides: List[str] = field(default_factory=list)


@dataclass
class VariableDeclaration(ASTNode):
    """Represents a parameter, struct member, local or file-level variable."""
    type_name: TypeName
    name: str = ''
    visibility: str = ''
    mutability: str = ''  # '', 'constant', 'immutable', 'transient'
    storage_location: str = ''  # '', 'storage', 'memory', 'calldata'
    is_indexed: bool = False
    override: Optional[OverrideSpecifier] = None
    initial_value: Optional['Expression'] = None


@dataclass
class StateVariableDeclaration(VariableDeclaration):
    """Represents a state variable declaration in a contract."""
    pass


# =============================================================================
# DEFINITION NODES
# =============================================================================

@dataclass
class StructDefinition(ASTNode):
    """Represents a struct definition."""
    name: str
    members: List[VariableDeclaration] = field(default_factory=list)


@dataclass
class EnumDefinition(ASTNode):
    """Represents an enum definition."""
    name: str
    members: List[str] = field(default_factory=list)


@dataclass
class UserDefinedValueTypeDefinition(ASTNode):
    """Represents 'type Price is uint128;'."""
    name: str
    underlying_type: ElementaryTypeName


@dataclass
class EventDefinition(ASTNode):
    """Represents an event definition."""
    name: str
    parameters: List[VariableDeclaration] = field(default_factory=list)
    is_anonymous: bool = False


@dataclass
class ErrorDefinition(ASTNode):
    """Represents a custom error definition."""
    name: str
    parameters: List[VariableDeclaration] = field(default_factory=list)


@dataclass
class ModifierInvocation(ASTNode):
    """A modifier or base constructor call in a function header."""
    name: str
    arguments: Optional[List['Expression']] = None


@dataclass
class ModifierDefinition(ASTNode):
    """Represents a modifier definition."""
    name: str
    parameters: List[VariableDeclaration] = field(default_factory=list)
    is_virtual: bool = False
    override: Optional[OverrideSpecifier] = None
    body: Optional['Block'] = None


@dataclass
class FunctionDefinition(ASTNode):
    """Represents a function, constructor, fallback or receive definition."""
    name: str
    kind: str = 'function'  # 'function', 'constructor', 'fallback', 'receive'
    parameters: List[VariableDeclaration] = field(default_factory=list)
    return_parameters: List[VariableDeclaration] = field(default_factory=list)
    visibility: str = ''
    mutability: str = ''  # '', 'view', 'pure', 'payable'
    modifiers: List[ModifierInvocation] = field(default_factory=list)
    is_virtual: bool = False
    override: Optional[OverrideSpecifier] = None
    body: Optional['Block'] = None

    @property
    def is_constructor(self) -> bool:
        return self.kind == 'constructor'

    @property
    def is_fallback(self) -> bool:
        return self.kind == 'fallback'

    @property
    def is_receive(self) -> bool:
        return self.kind == 'receive'

    @property
    def is_implemented(self) -> bool:
        return self.body is not None


@dataclass
class ContractDefinition(ASTNode):
    """Represents a contract, interface or library."""
    name: str
    kind: str  # 'contract', 'interface', 'library'
    is_abstract: bool = False
    base_contracts: List[InheritanceSpecifier] = field(default_factory=list)
    body: List[ASTNode] = field(default_factory=list)

    def _of(self, node_type) -> list:
        return [n for n in self.body if isinstance(n, node_type)]

    @property
    def functions(self) -> List[FunctionDefinition]:
        return [f for f in self._of(FunctionDefinition) if f.kind == 'function']

    @property
    def constructor(self) -> Optional[FunctionDefinition]:
        return next((f for f in self._of(FunctionDefinition) if f.is_constructor), None)

    @property
    def state_variables(self) -> List[StateVariableDeclaration]:
        return self._of(StateVariableDeclaration)

    @property
    def modifiers(self) -> List[ModifierDefinition]:
        return self._of(ModifierDefinition)

    @property
    def events(self) -> List[EventDefinition]:
        return self._of(EventDefinition)

    @property
    def errors(self) -> List[ErrorDefinition]:
        return self._of(ErrorDefinition)

    @property
    def structs(self) -> List[StructDefinition]:
        return self._of(StructDefinition)

    @property
    def enums(self) -> List[EnumDefinition]:
        return self._of(EnumDefinition)

    @property
    def using_directives(self) -> List[UsingDirective]:
        return self._of(UsingDirective)


# =============================================================================
# EXPRESSION NODES
# =============================================================================

@dataclass
class Expression(ASTNode):
    """Base class for all expression nodes."""
    pass


@dataclass
class Literal(Expression):
    """
    Represents a literal value.

    Adjacent string literals of the same kind are merged: ``value`` holds
    the concatenated contents without quotes and ``parts`` the original
    token texts.
    """
    value: str
    kind: str  # 'number', 'hex_number', 'string', 'unicode_string', 'hex_string', 'bool'
    sub_denomination: Optional[str] = None
    parts: List[str] = field(default_factory=list)


@dataclass
class Identifier(Expression):
    """Represents an identifier reference."""
    name: str


@dataclass
class ElementaryTypeNameExpression(Expression):
    """An elementary type used as a value, e.g. the callee of uint8(x)."""
    type_name: ElementaryTypeName


@dataclass
class NamedArgument(ASTNode):
    """name: value inside a call or call-options list."""
    name: str
    value: Expression


@dataclass
class TupleExpression(Expression):
    """Represents a tuple expression; omitted components are None."""
    components: List[Optional[Expression]] = field(default_factory=list)


@dataclass
class InlineArray(Expression):
    """Represents an inline array (e.g., [1, 2, 3])."""
    elements: List[Expression] = field(default_factory=list)


@dataclass
class NewExpression(Expression):
    """Represents a 'new' expression for contract/array creation."""
    type_name: TypeName


@dataclass
class MetaType(Expression):
    """Represents type(T)."""
    type_name: TypeName


@dataclass
class FunctionCall(Expression):
    """Represents a function call with positional or named arguments."""
    expression: Expression
    arguments: List[Expression] = field(default_factory=list)
    named_arguments: List[NamedArgument] = field(default_factory=list)


@dataclass
class PayableConversion(Expression):
    """Represents payable(x)."""
    arguments: List[Expression] = field(default_factory=list)
    named_arguments: List[NamedArgument] = field(default_factory=list)


@dataclass
class FunctionCallOptions(Expression):
    """Represents expr{value: v, gas: g}."""
    expression: Expression
    options: List[NamedArgument] = field(default_factory=list)


@dataclass
class MemberAccess(Expression):
    """Represents member access (e.g., obj.member, x.address)."""
    expression: Expression
    member: str


@dataclass
class IndexAccess(Expression):
    """Represents index access (e.g., arr[i]); index is None for T[]."""
    base: Expression
    index: Optional[Expression] = None


@dataclass
class IndexRangeAccess(Expression):
    """Represents a slice (e.g., data[start:end]) with omissible bounds."""
    base: Expression
    start: Optional[Expression] = None
    end: Optional[Expression] = None


@dataclass
class UnaryOperation(Expression):
    """Represents a unary operation (e.g., !x, -y, delete z, x++)."""
    operator: str
    operand: Expression
    is_prefix: bool = True


@dataclass
class BinaryOperation(Expression):
    """Base class for the binary operator categories."""
    left: Expression
    operator: str
    right: Expression


@dataclass
class ExpOperation(BinaryOperation):
    """a ** b (right-associative)."""
    pass


@dataclass
class MulDivModOperation(BinaryOperation):
    pass


@dataclass
class AddSubOperation(BinaryOperation):
    pass


@dataclass
class ShiftOperation(BinaryOperation):
    pass


@dataclass
class BitAndOperation(BinaryOperation):
    pass


@dataclass
class BitXorOperation(BinaryOperation):
    pass


@dataclass
class BitOrOperation(BinaryOperation):
    pass


@dataclass
class OrderComparison(BinaryOperation):
    pass


@dataclass
class EqualityComparison(BinaryOperation):
    pass


@dataclass
class AndOperation(BinaryOperation):
    pass


@dataclass
class OrOperation(BinaryOperation):
    pass


@dataclass
class Conditional(Expression):
    """Represents a ternary/conditional operation (a ? b : c)."""
    condition: Expression
    true_expression: Expression
    false_expression: Expression


@dataclass
class Assignment(Expression):
    """Represents a simple or compound assignment (right-associative)."""
    left: Expression
    operator: str
    right: Expression


# =============================================================================
# YUL NODES
# =============================================================================

@dataclass
class YulExpression(ASTNode):
    """Base class for Yul expressions: paths, literals and calls."""
    pass


@dataclass
class YulPath(YulExpression):
    """An identifier or dotted path such as x.slot."""
    parts: List[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return '.'.join(self.parts)


@dataclass
class YulLiteral(YulExpression):
    """A Yul number, string, hex string or boolean."""
    value: str
    kind: str  # 'number', 'hex_number', 'string', 'hex_string', 'bool'


@dataclass
class YulFunctionCall(YulExpression):
    """A call to a builtin or user-defined Yul function; also a statement."""
    name: str
    arguments: List[YulExpression] = field(default_factory=list)
    is_builtin: bool = False


@dataclass
class YulBlock(ASTNode):
    """Represents { ... } inside assembly."""
    statements: List[ASTNode] = field(default_factory=list)


@dataclass
class YulLet(ASTNode):
    """let a, b := value"""
    variables: List[str] = field(default_factory=list)
    value: Optional[YulExpression] = None


@dataclass
class YulAssignment(ASTNode):
    """a, b := value"""
    targets: List[YulPath] = field(default_factory=list)
    value: Optional[YulExpression] = None


@dataclass
class YulIf(ASTNode):
    condition: YulExpression
    body: YulBlock


@dataclass
class YulFor(ASTNode):
    init: YulBlock
    condition: YulExpression
    post: YulBlock
    body: YulBlock


@dataclass
class YulCase(ASTNode):
    value: YulLiteral
    body: YulBlock


@dataclass
class YulSwitch(ASTNode):
    """switch expr case ... default ...; at least one case is required."""
    expression: YulExpression
    cases: List[YulCase] = field(default_factory=list)
    default: Optional[YulBlock] = None


@dataclass
class YulFunctionDefinition(ASTNode):
    name: str
    parameters: List[str] = field(default_factory=list)
    return_variables: List[str] = field(default_factory=list)
    body: Optional[YulBlock] = None


@dataclass
class YulLeave(ASTNode):
    pass


@dataclass
class YulBreak(ASTNode):
    pass


@dataclass
class YulContinue(ASTNode):
    pass


# =============================================================================
# STATEMENT NODES
# =============================================================================

@dataclass
class Statement(ASTNode):
    """Base class for all statement nodes."""
    pass


@dataclass
class Block(Statement):
    """Represents a block of statements enclosed in braces."""
    statements: List[Statement] = field(default_factory=list)
    unchecked: bool = False


@dataclass
class ExpressionStatement(Statement):
    """Represents an expression used as a statement."""
    expression: Expression


@dataclass
class VariableDeclarationStatement(Statement):
    """Represents a variable declaration; tuple slots may be None."""
    declarations: List[Optional[VariableDeclaration]]
    initial_value: Optional[Expression] = None
    is_tuple: bool = False


@dataclass
class IfStatement(Statement):
    """Represents an if/else statement."""
    condition: Expression
    true_body: Statement
    false_body: Optional[Statement] = None


@dataclass
class ForStatement(Statement):
    """Represents a for loop; every clause may be omitted."""
    body: Statement
    init: Optional[Statement] = None
    condition: Optional[Expression] = None
    post: Optional[Expression] = None


@dataclass
class WhileStatement(Statement):
    """Represents a while loop."""
    condition: Expression
    body: Statement


@dataclass
class DoWhileStatement(Statement):
    """Represents a do-while loop."""
    body: Statement
    condition: Expression


@dataclass
class ReturnStatement(Statement):
    """Represents a return statement."""
    expression: Optional[Expression] = None


@dataclass
class EmitStatement(Statement):
    """Represents an emit statement for events."""
    event_call: FunctionCall


@dataclass
class RevertStatement(Statement):
    """Represents 'revert CustomError(...)'."""
    error_call: FunctionCall


@dataclass
class BreakStatement(Statement):
    """Represents a break statement."""
    pass


@dataclass
class ContinueStatement(Statement):
    """Represents a continue statement."""
    pass


@dataclass
class CatchClause(ASTNode):
    """catch Error(string memory reason) { ... }"""
    body: Block
    error_name: Optional[str] = None
    parameters: Optional[List[VariableDeclaration]] = None


@dataclass
class TryStatement(Statement):
    """Represents try call() returns (...) { ... } catch ... { ... }."""
    expression: Expression
    body: Block
    return_parameters: List[VariableDeclaration] = field(default_factory=list)
    catch_clauses: List[CatchClause] = field(default_factory=list)


@dataclass
class AssemblyStatement(Statement):
    """Represents an inline assembly block."""
    block: YulBlock
    dialect: Optional[str] = None
    flags: List[str] = field(default_factory=list)
