"""
Parser module for the Solidity syntax front end.

This module provides AST node definitions, the expression and Yul
sub-parsers, and the declaration/statement Parser built on them.
"""

from .ast_nodes import (
    # Base
    ASTNode,
    # Types
    TypeName,
    ElementaryTypeName,
    UserDefinedTypeName,
    MappingType,
    FunctionTypeName,
    ArrayTypeName,
    # Top-level
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
    Literal,
    Identifier,
    ElementaryTypeNameExpression,
    NamedArgument,
    TupleExpression,
    InlineArray,
    NewExpression,
    MetaType,
    FunctionCall,
    PayableConversion,
    FunctionCallOptions,
    MemberAccess,
    IndexAccess,
    IndexRangeAccess,
    UnaryOperation,
    BinaryOperation,
    ExpOperation,
    MulDivModOperation,
    AddSubOperation,
    ShiftOperation,
    BitAndOperation,
    BitXorOperation,
    BitOrOperation,
    OrderComparison,
    EqualityComparison,
    AndOperation,
    OrOperation,
    Conditional,
    Assignment,
    # Yul
    YulExpression,
    YulPath,
    YulLiteral,
    YulFunctionCall,
    YulBlock,
    YulLet,
    YulAssignment,
    YulIf,
    YulFor,
    YulCase,
    YulSwitch,
    YulFunctionDefinition,
    YulLeave,
    YulBreak,
    YulContinue,
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
from .base import BaseParser, TokenCursor
from .expression import ExpressionParser
from .yul import YulParser
from .parser import Parser

__all__ = [
    # Base
    'ASTNode',
    # Types
    'TypeName',
    'ElementaryTypeName',
    'UserDefinedTypeName',
    'MappingType',
    'FunctionTypeName',
    'ArrayTypeName',
    # Top-level
    'SourceUnit',
    'PragmaDirective',
    'ImportDirective',
    'UsingDirective',
    'InheritanceSpecifier',
    'ContractDefinition',
    # Definitions
    'StructDefinition',
    'EnumDefinition',
    'UserDefinedValueTypeDefinition',
    'EventDefinition',
    'ErrorDefinition',
    'ModifierDefinition',
    'ModifierInvocation',
    'FunctionDefinition',
    'OverrideSpecifier',
    # Variables
    'VariableDeclaration',
    'StateVariableDeclaration',
    # Expressions
    'Expression',
    'Literal',
    'Identifier',
    'ElementaryTypeNameExpression',
    'NamedArgument',
    'TupleExpression',
    'InlineArray',
    'NewExpression',
    'MetaType',
    'FunctionCall',
    'PayableConversion',
    'FunctionCallOptions',
    'MemberAccess',
    'IndexAccess',
    'IndexRangeAccess',
    'UnaryOperation',
    'BinaryOperation',
    'ExpOperation',
    'MulDivModOperation',
    'AddSubOperation',
    'ShiftOperation',
    'BitAndOperation',
    'BitXorOperation',
    'BitOrOperation',
    'OrderComparison',
    'EqualityComparison',
    'AndOperation',
    'OrOperation',
    'Conditional',
    'Assignment',
    # Yul
    'YulExpression',
    'YulPath',
    'YulLiteral',
    'YulFunctionCall',
    'YulBlock',
    'YulLet',
    'YulAssignment',
    'YulIf',
    'YulFor',
    'YulCase',
    'YulSwitch',
    'YulFunctionDefinition',
    'YulLeave',
    'YulBreak',
    'YulContinue',
    # Statements
    'Statement',
    'Block',
    'ExpressionStatement',
    'VariableDeclarationStatement',
    'IfStatement',
    'ForStatement',
    'WhileStatement',
    'DoWhileStatement',
    'ReturnStatement',
    'EmitStatement',
    'RevertStatement',
    'BreakStatement',
    'ContinueStatement',
    'CatchClause',
    'TryStatement',
    'AssemblyStatement',
    # Parsers
    'BaseParser',
    'TokenCursor',
    'ExpressionParser',
    'YulParser',
    'Parser',
]
