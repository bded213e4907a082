#!/usr/bin/env python3
"""
Unit tests for the expression engine and the declaration/statement parser.

Run with: python3 -m pytest solsyntax/test_parser.py
"""

import unittest

from solsyntax.api import parse_source
from solsyntax.config import ParseOptions
from solsyntax.diagnostics import ParserError
from solsyntax.lexer import Lexer
from solsyntax.parser import (
    Parser,
    # Types
    ArrayTypeName,
    ElementaryTypeName,
    FunctionTypeName,
    MappingType,
    UserDefinedTypeName,
    # Top-level and definitions
    ContractDefinition,
    EnumDefinition,
    ErrorDefinition,
    EventDefinition,
    FunctionDefinition,
    ImportDirective,
    ModifierDefinition,
    PragmaDirective,
    StateVariableDeclaration,
    StructDefinition,
    UserDefinedValueTypeDefinition,
    UsingDirective,
    VariableDeclaration,
    # Expressions
    AddSubOperation,
    AndOperation,
    Assignment,
    BitAndOperation,
    BitOrOperation,
    BitXorOperation,
    Conditional,
    ElementaryTypeNameExpression,
    EqualityComparison,
    ExpOperation,
    FunctionCall,
    FunctionCallOptions,
    Identifier,
    IndexAccess,
    IndexRangeAccess,
    InlineArray,
    Literal,
    MemberAccess,
    MetaType,
    MulDivModOperation,
    NewExpression,
    OrderComparison,
    OrOperation,
    PayableConversion,
    ShiftOperation,
    TupleExpression,
    UnaryOperation,
    # Statements
    AssemblyStatement,
    Block,
    BreakStatement,
    ContinueStatement,
    DoWhileStatement,
    EmitStatement,
    ExpressionStatement,
    ForStatement,
    IfStatement,
    ReturnStatement,
    RevertStatement,
    TryStatement,
    VariableDeclarationStatement,
    WhileStatement,
)


def parse(source, options=None):
    return Parser(Lexer(source).tokenize(), options).parse()


def parse_expr(text):
    return Parser(Lexer(text).tokenize()).parse_standalone_expression()


def parse_body(body):
    """Parse statements wrapped in a function and return them."""
    unit = parse('contract C { function f() public { %s } }' % body)
    return unit.contracts[0].functions[0].body.statements


class TestOperatorPrecedence(unittest.TestCase):
    """Binary, unary and assignment nesting."""

    def test_multiplication_binds_tighter_than_addition(self):
        expr = parse_expr('a + b * c')
        self.assertIsInstance(expr, AddSubOperation)
        self.assertIsInstance(expr.left, Identifier)
        self.assertIsInstance(expr.right, MulDivModOperation)

    def test_addition_is_left_associative(self):
        expr = parse_expr('a - b - c')
        self.assertIsInstance(expr.left, AddSubOperation)
        self.assertEqual(expr.right.name, 'c')

    def test_exponentiation_is_right_associative(self):
        expr = parse_expr('a ** b ** c')
        self.assertIsInstance(expr, ExpOperation)
        self.assertEqual(expr.left.name, 'a')
        self.assertIsInstance(expr.right, ExpOperation)

    def test_unary_minus_binds_tighter_than_exponentiation(self):
        expr = parse_expr('-a ** b')
        self.assertIsInstance(expr, ExpOperation)
        self.assertIsInstance(expr.left, UnaryOperation)
        self.assertEqual(expr.left.operator, '-')

    def test_assignment_is_right_associative(self):
        expr = parse_expr('a = b = c')
        self.assertIsInstance(expr, Assignment)
        self.assertEqual(expr.left.name, 'a')
        self.assertIsInstance(expr.right, Assignment)
        self.assertEqual(expr.right.left.name, 'b')

    def test_compound_assignment(self):
        for op in ('+=', '-=', '*=', '/=', '%=', '|=', '&=', '^=', '<<=', '>>=', '>>>='):
            with self.subTest(op=op):
                expr = parse_expr(f'a {op} 1')
                self.assertIsInstance(expr, Assignment)
                self.assertEqual(expr.operator, op)

    def test_logical_levels(self):
        expr = parse_expr('a || b && c')
        self.assertIsInstance(expr, OrOperation)
        self.assertIsInstance(expr.right, AndOperation)

    def test_equality_is_looser_than_ordering(self):
        expr = parse_expr('a == b < c')
        self.assertIsInstance(expr, EqualityComparison)
        self.assertIsInstance(expr.right, OrderComparison)

    def test_bitwise_levels(self):
        expr = parse_expr('a & b ^ c | d')
        self.assertIsInstance(expr, BitOrOperation)
        self.assertIsInstance(expr.left, BitXorOperation)
        self.assertIsInstance(expr.left.left, BitAndOperation)

    def test_shift_is_looser_than_addition(self):
        expr = parse_expr('a << 2 + 1')
        self.assertIsInstance(expr, ShiftOperation)
        self.assertIsInstance(expr.right, AddSubOperation)

    def test_conditional_is_right_associative(self):
        expr = parse_expr('x ? y : z ? w : v')
        self.assertIsInstance(expr, Conditional)
        self.assertIsInstance(expr.false_expression, Conditional)

    def test_conditional_binds_tighter_than_assignment(self):
        expr = parse_expr('r = x ? y : z')
        self.assertIsInstance(expr, Assignment)
        self.assertIsInstance(expr.right, Conditional)

    def test_prefix_and_postfix(self):
        expr = parse_expr('!a.b')
        self.assertIsInstance(expr, UnaryOperation)
        self.assertIsInstance(expr.operand, MemberAccess)

        expr = parse_expr('i++')
        self.assertFalse(expr.is_prefix)
        self.assertEqual(expr.operator, '++')

        expr = parse_expr('delete m[k]')
        self.assertEqual(expr.operator, 'delete')
        self.assertIsInstance(expr.operand, IndexAccess)

    def test_spans_cover_operands(self):
        expr = parse_expr('a + bb')
        self.assertEqual((expr.span.start, expr.span.end), (0, 6))


class TestPrimaryExpressions(unittest.TestCase):
    """Literals, tuples, arrays and the special primaries."""

    def test_adjacent_strings_concatenate(self):
        expr = parse_expr('"ab" "cd"')
        self.assertIsInstance(expr, Literal)
        self.assertEqual(expr.value, 'abcd')
        self.assertEqual(expr.kind, 'string')
        self.assertEqual(expr.parts, ['"ab"', '"cd"'])

    def test_adjacent_hex_strings_concatenate(self):
        expr = parse_expr('hex"00" hex"ff"')
        self.assertEqual(expr.kind, 'hex_string')
        self.assertEqual(expr.value, '00ff')

    def test_mixed_literal_kinds_do_not_concatenate(self):
        with self.assertRaises(ParserError):
            parse_expr('"ab" hex"00"')

    def test_number_with_sub_denomination(self):
        expr = parse_expr('1 ether')
        self.assertEqual(expr.value, '1')
        self.assertEqual(expr.sub_denomination, 'ether')

    def test_booleans(self):
        expr = parse_expr('true')
        self.assertEqual((expr.kind, expr.value), ('bool', 'true'))

    def test_tuple_with_empty_slot(self):
        expr = parse_expr('(a, , c)')
        self.assertIsInstance(expr, TupleExpression)
        self.assertEqual(len(expr.components), 3)
        self.assertEqual(expr.components[0].name, 'a')
        self.assertIsNone(expr.components[1])
        self.assertEqual(expr.components[2].name, 'c')

    def test_empty_and_single_tuples(self):
        self.assertEqual(parse_expr('()').components, [])
        single = parse_expr('(a + b) * c')
        self.assertIsInstance(single, MulDivModOperation)
        self.assertIsInstance(single.left, TupleExpression)
        self.assertEqual(len(single.left.components), 1)

    def test_inline_array(self):
        expr = parse_expr('[1, 2, 3]')
        self.assertIsInstance(expr, InlineArray)
        self.assertEqual(len(expr.elements), 3)

    def test_payable_conversion(self):
        expr = parse_expr('payable(msg.sender)')
        self.assertIsInstance(expr, PayableConversion)
        self.assertIsInstance(expr.arguments[0], MemberAccess)

    def test_meta_type(self):
        expr = parse_expr('type(uint256).max')
        self.assertIsInstance(expr, MemberAccess)
        self.assertIsInstance(expr.expression, MetaType)
        self.assertEqual(expr.expression.type_name.name, 'uint256')

    def test_new_array(self):
        expr = parse_expr('new uint256[](5)')
        self.assertIsInstance(expr, FunctionCall)
        self.assertIsInstance(expr.expression, NewExpression)
        self.assertIsInstance(expr.expression.type_name, ArrayTypeName)

    def test_elementary_type_conversion(self):
        expr = parse_expr('uint8(x)')
        self.assertIsInstance(expr, FunctionCall)
        self.assertIsInstance(expr.expression, ElementaryTypeNameExpression)

    def test_address_member(self):
        expr = parse_expr('this.address')
        self.assertEqual(expr.member, 'address')

    def test_missing_operand(self):
        with self.assertRaises(ParserError) as cm:
            parse_expr('a +')
        self.assertIn('Expected expression but got end of input', str(cm.exception))


class TestSuffixes(unittest.TestCase):
    """Index, range, member, call-option and call suffixes."""

    def test_index_access(self):
        expr = parse_expr('x[i]')
        self.assertIsInstance(expr, IndexAccess)
        self.assertEqual(expr.index.name, 'i')

    def test_index_access_without_index(self):
        expr = parse_expr('x[]')
        self.assertIsInstance(expr, IndexAccess)
        self.assertIsNone(expr.index)

    def test_range_access_variants(self):
        cases = {
            'x[1:2]': (True, True),
            'x[:2]': (False, True),
            'x[1:]': (True, False),
            'x[:]': (False, False),
        }
        for text, (has_start, has_end) in cases.items():
            with self.subTest(text=text):
                expr = parse_expr(text)
                self.assertIsInstance(expr, IndexRangeAccess)
                self.assertEqual(expr.start is not None, has_start)
                self.assertEqual(expr.end is not None, has_end)

    def test_call_options(self):
        expr = parse_expr('c.f{value: 1, gas: 2}(a)')
        self.assertIsInstance(expr, FunctionCall)
        self.assertIsInstance(expr.expression, FunctionCallOptions)
        self.assertEqual([o.name for o in expr.expression.options], ['value', 'gas'])

    def test_named_arguments(self):
        expr = parse_expr('f({a: 1, b: 2})')
        self.assertEqual(expr.arguments, [])
        self.assertEqual([a.name for a in expr.named_arguments], ['a', 'b'])

    def test_trailing_comma_in_arguments(self):
        with self.assertRaises(ParserError):
            parse_expr('f(a,)')


class TestTypeNames(unittest.TestCase):

    def test_mapping_with_names(self):
        unit = parse('contract C { mapping(address owner => uint256 balance) public balances; }')
        var = unit.contracts[0].state_variables[0]
        self.assertIsInstance(var.type_name, MappingType)
        self.assertEqual(var.type_name.key_name, 'owner')
        self.assertEqual(var.type_name.value_name, 'balance')
        self.assertEqual(var.visibility, 'public')

    def test_nested_mapping_and_arrays(self):
        unit = parse('contract C { mapping(uint => mapping(bytes32 => Lib.S[])) m; uint[3][] a; }')
        mapping, array = unit.contracts[0].state_variables
        inner = mapping.type_name.value_type
        self.assertIsInstance(inner, MappingType)
        self.assertIsInstance(inner.value_type, ArrayTypeName)
        self.assertEqual(inner.value_type.base_type.name, 'Lib.S')
        self.assertIsInstance(array.type_name, ArrayTypeName)
        self.assertIsNone(array.type_name.length)
        self.assertIsNotNone(array.type_name.base_type.length)

    def test_function_type_state_variable(self):
        unit = parse('contract C { function (uint256) external returns (bool) callback; }')
        var = unit.contracts[0].state_variables[0]
        self.assertIsInstance(var.type_name, FunctionTypeName)
        self.assertEqual(var.type_name.visibility, 'external')
        self.assertEqual(var.name, 'callback')

    def test_address_payable(self):
        unit = parse('contract C { address payable owner; }')
        type_name = unit.contracts[0].state_variables[0].type_name
        self.assertIsInstance(type_name, ElementaryTypeName)
        self.assertTrue(type_name.payable)


class TestSourceUnit(unittest.TestCase):
    """File-level directives and definitions."""

    def test_pragma(self):
        unit = parse('pragma solidity >=0.8.0 <0.9.0;')
        pragma = unit.nodes[0]
        self.assertIsInstance(pragma, PragmaDirective)
        self.assertEqual(pragma.name, 'solidity')
        self.assertEqual(pragma.value, '>=0.8.0 <0.9.0')

    def test_import_forms(self):
        unit = parse('''
            import "./A.sol";
            import "./B.sol" as B;
            import * as C from "./C.sol";
            import {X, Y as Z} from "./D.sol";
        ''')
        a, b, c, d = unit.imports
        self.assertEqual(a.path, './A.sol')
        self.assertEqual(b.unit_alias, 'B')
        self.assertTrue(c.is_wildcard)
        self.assertEqual(c.unit_alias, 'C')
        self.assertEqual(d.symbols, [('X', None), ('Y', 'Z')])
        self.assertTrue(all(isinstance(i, ImportDirective) for i in unit.imports))

    def test_empty_import_path(self):
        with self.assertRaises(ParserError):
            parse('import "";')

    def test_file_level_definitions(self):
        unit = parse('''
            uint256 constant MAX = 10;
            type Price is uint128;
            struct Point { uint x; uint y; }
            enum Color { Red, Green }
            error Unauthorized(address who);
            event Log(uint256 indexed id) anonymous;
            using Math for uint256 global;
            function helper(uint a) pure returns (uint) { return a; }
        ''')
        kinds = [type(n) for n in unit.nodes]
        self.assertEqual(kinds, [
            VariableDeclaration, UserDefinedValueTypeDefinition, StructDefinition,
            EnumDefinition, ErrorDefinition, EventDefinition, UsingDirective, FunctionDefinition,
        ])
        self.assertEqual(unit.constants[0].mutability, 'constant')
        self.assertTrue(unit.nodes[5].is_anonymous)
        self.assertTrue(unit.nodes[5].parameters[0].is_indexed)
        self.assertTrue(unit.nodes[6].is_global)
        self.assertEqual(unit.functions[0].name, 'helper')

    def test_file_level_variable_requires_constant(self):
        with self.assertRaises(ParserError):
            parse('uint256 x = 1;')

    def test_using_for_star(self):
        unit = parse('contract C { using SafeMath for *; }')
        directive = unit.contracts[0].using_directives[0]
        self.assertEqual(directive.library, 'SafeMath')
        self.assertIsNone(directive.type_name)

    def test_unexpected_top_level_token(self):
        with self.assertRaises(ParserError):
            parse('return 1;')


class TestContractParsing(unittest.TestCase):
    """Contracts, inheritance and body elements."""

    def test_contract_kinds(self):
        unit = parse('abstract contract A {} interface I {} library L {}')
        a, i, lib = unit.contracts
        self.assertTrue(a.is_abstract)
        self.assertEqual(a.kind, 'contract')
        self.assertEqual(i.kind, 'interface')
        self.assertEqual(lib.kind, 'library')

    def test_inheritance_with_arguments(self):
        unit = parse('contract C is A, B(1, 2) {}')
        bases = unit.contracts[0].base_contracts
        self.assertEqual([b.name for b in bases], ['A', 'B'])
        self.assertIsNone(bases[0].arguments)
        self.assertEqual(len(bases[1].arguments), 2)

    def test_body_elements(self):
        unit = parse('''
            contract Token is Base {
                uint256 public constant MAX = 100;
                address immutable owner;
                event Transfer(address indexed from, address indexed to, uint256 value);
                error Insufficient(uint256 need);
                modifier onlyOwner() virtual { _; }
                constructor(uint256 x) Base(x) payable {}
                function transfer(address to, uint256 v) external override(A, B) onlyOwner returns (bool ok) {
                    return true;
                }
                function total() public view virtual returns (uint256);
                fallback() external payable {}
                receive() external payable {}
            }
        ''')
        contract = unit.contracts[0]
        self.assertIsInstance(contract, ContractDefinition)
        self.assertEqual(len(contract.state_variables), 2)
        self.assertEqual(contract.state_variables[1].mutability, 'immutable')
        self.assertEqual(contract.events[0].parameters[1].name, 'to')
        self.assertEqual(contract.errors[0].name, 'Insufficient')

        modifier = contract.modifiers[0]
        self.assertIsInstance(modifier, ModifierDefinition)
        self.assertTrue(modifier.is_virtual)

        self.assertEqual(contract.constructor.mutability, 'payable')
        self.assertEqual(contract.constructor.modifiers[0].name, 'Base')

        transfer, total = contract.functions
        self.assertEqual(transfer.visibility, 'external')
        self.assertEqual(transfer.override.overrides, ['A', 'B'])
        self.assertEqual([m.name for m in transfer.modifiers], ['onlyOwner'])
        self.assertEqual(transfer.return_parameters[0].name, 'ok')
        self.assertFalse(total.is_implemented)
        self.assertTrue(total.is_virtual)

        kinds = [f.kind for f in contract.body if isinstance(f, FunctionDefinition)]
        self.assertEqual(kinds, ['constructor', 'function', 'function', 'fallback', 'receive'])

    def test_struct_requires_members(self):
        with self.assertRaises(ParserError):
            parse('struct S {}')

    def test_from_is_an_identifier_outside_imports(self):
        unit = parse('contract C { uint256 from; }')
        self.assertEqual(unit.contracts[0].state_variables[0].name, 'from')

    def test_reserved_identifier_policy(self):
        unit = parse('contract C { uint256 var; }')
        self.assertEqual(unit.contracts[0].state_variables[0].name, 'var')
        with self.assertRaises(ParserError):
            parse('contract C { uint256 var; }', ParseOptions(allow_reserved_identifiers=False))

    def test_transient_state_variables(self):
        unit = parse('''
            contract C {
                uint256 transient locked;
                bool transient public flag;
                uint256 transient;
                uint256 transient = 1;
            }
        ''')
        variables = unit.contracts[0].state_variables
        self.assertEqual([v.name for v in variables], ['locked', 'flag', 'transient', 'transient'])
        self.assertEqual([v.mutability for v in variables], ['transient', 'transient', '', ''])
        self.assertEqual(variables[1].visibility, 'public')

    def test_state_variable_node_type(self):
        unit = parse('contract C { uint x; }')
        self.assertIsInstance(unit.contracts[0].body[0], StateVariableDeclaration)


class TestStatements(unittest.TestCase):
    """Statement forms inside function bodies."""

    def test_variable_declarations(self):
        stmts = parse_body('''
            uint256[] memory a = new uint256[](3);
            Lib.Point storage p = points[0];
            mapping(uint => uint) storage m = maps[1];
            uint x;
        ''')
        self.assertTrue(all(isinstance(s, VariableDeclarationStatement) for s in stmts))
        self.assertEqual(stmts[0].declarations[0].storage_location, 'memory')
        self.assertIsInstance(stmts[1].declarations[0].type_name, UserDefinedTypeName)
        self.assertIsNone(stmts[3].initial_value)

    def test_expression_statements(self):
        stmts = parse_body('x = 1; a[i] = 2; f(); _; uint8(y);')
        self.assertTrue(all(isinstance(s, ExpressionStatement) for s in stmts))

    def test_tuple_declaration(self):
        stmts = parse_body('(uint256 a, , bool ok) = f(); (, uint256 b) = g();')
        first, second = stmts
        self.assertTrue(first.is_tuple)
        self.assertEqual(len(first.declarations), 3)
        self.assertIsNone(first.declarations[1])
        self.assertIsNone(second.declarations[0])
        self.assertEqual(second.declarations[1].name, 'b')

    def test_tuple_assignment_is_expression(self):
        stmts = parse_body('(a, b) = (b, a);')
        self.assertIsInstance(stmts[0], ExpressionStatement)
        self.assertIsInstance(stmts[0].expression, Assignment)

    def test_tuple_declaration_requires_initializer(self):
        with self.assertRaises(ParserError) as cm:
            parse_body('(uint a, uint b);')
        self.assertIn("Expected '='", str(cm.exception))

    def test_control_flow(self):
        stmts = parse_body('''
            if (a) b(); else if (c) { d(); } else e();
            for (;;) { break; }
            for (uint i = 0; i < n; i++) continue;
            while (x) {}
            do { x--; } while (x > 0);
            return;
        ''')
        self.assertIsInstance(stmts[0], IfStatement)
        self.assertIsInstance(stmts[0].false_body, IfStatement)
        self.assertIsInstance(stmts[1], ForStatement)
        self.assertIsNone(stmts[1].init)
        self.assertIsNone(stmts[1].condition)
        self.assertIsNone(stmts[1].post)
        self.assertIsInstance(stmts[1].body.statements[0], BreakStatement)
        self.assertIsInstance(stmts[2].init, VariableDeclarationStatement)
        self.assertIsInstance(stmts[2].body, ContinueStatement)
        self.assertIsInstance(stmts[3], WhileStatement)
        self.assertIsInstance(stmts[4], DoWhileStatement)
        self.assertIsInstance(stmts[5], ReturnStatement)
        self.assertIsNone(stmts[5].expression)

    def test_unchecked_block(self):
        stmts = parse_body('unchecked { i++; }')
        self.assertIsInstance(stmts[0], Block)
        self.assertTrue(stmts[0].unchecked)

    def test_unchecked_only_directly_in_block(self):
        with self.assertRaises(ParserError):
            parse_body('if (a) unchecked { i++; }')

    def test_emit_and_revert(self):
        stmts = parse_body('emit Transfer(a, b, 1); revert Unauthorized(msg.sender); revert("no");')
        self.assertIsInstance(stmts[0], EmitStatement)
        self.assertEqual(stmts[0].event_call.expression.name, 'Transfer')
        self.assertIsInstance(stmts[1], RevertStatement)
        self.assertIsInstance(stmts[2], ExpressionStatement)

    def test_emit_requires_call(self):
        with self.assertRaises(ParserError) as cm:
            parse_body('emit Transfer;')
        self.assertIn('function call', str(cm.exception))

    def test_try_catch(self):
        stmts = parse_body('''
            try IFoo(t).foo{value: 1}(2) returns (uint256 v) {
                x = v;
            } catch Error(string memory reason) {
                revert(reason);
            } catch (bytes memory data) {
            } catch {
            }
        ''')
        stmt = stmts[0]
        self.assertIsInstance(stmt, TryStatement)
        self.assertIsInstance(stmt.expression, FunctionCall)
        self.assertEqual(stmt.return_parameters[0].name, 'v')
        self.assertEqual(len(stmt.catch_clauses), 3)
        self.assertEqual(stmt.catch_clauses[0].error_name, 'Error')
        self.assertEqual(stmt.catch_clauses[1].parameters[0].name, 'data')
        self.assertIsNone(stmt.catch_clauses[2].parameters)

    def test_try_requires_call(self):
        with self.assertRaises(ParserError):
            parse_body('try x {} catch {}')

    def test_try_requires_catch(self):
        with self.assertRaises(ParserError) as cm:
            parse_body('try f() {}')
        self.assertIn("'catch'", str(cm.exception))

    def test_assembly_statement(self):
        stmts = parse_body('assembly ("memory-safe") { let x := 1 }')
        self.assertIsInstance(stmts[0], AssemblyStatement)
        self.assertEqual(stmts[0].flags, ['memory-safe'])
        self.assertEqual(len(stmts[0].block.statements), 1)


class TestEndToEnd(unittest.TestCase):
    """Whole-file parses through parse_source."""

    SOURCE = '''pragma solidity ^0.8.0;

contract C {
    function f(uint256 a) public pure returns (uint256) {
        if (a > 1) {
            return a;
        } else {
            return 0;
        }
    }
}
'''

    def test_contract_parses_cleanly(self):
        result = parse_source(self.SOURCE)
        self.assertTrue(result.ok)
        self.assertEqual(result.diagnostics, [])
        function = result.source_unit.contracts[0].functions[0]
        self.assertIsInstance(function.body.statements[0], IfStatement)

    def test_missing_closing_brace_reports_once_at_end_of_input(self):
        source = self.SOURCE.rstrip()[:-1]
        result = parse_source(source)
        self.assertFalse(result.ok)
        self.assertIsNone(result.source_unit)
        self.assertEqual(len(result.diagnostics), 1)
        diagnostic = result.diagnostics[0]
        self.assertIn('end of input', diagnostic.message)
        self.assertEqual(diagnostic.span.start, len(source))

    def test_lexical_error_becomes_diagnostic(self):
        result = parse_source('contract C { string s = hex"abc"; }')
        self.assertFalse(result.ok)
        self.assertEqual(result.diagnostics[0].kind.value, 'LexerError')

    def test_comments_are_ignored(self):
        result = parse_source('/// doc\ncontract /* x */ C { // y\n}')
        self.assertTrue(result.ok)


if __name__ == '__main__':
    unittest.main(verbosity=2)
