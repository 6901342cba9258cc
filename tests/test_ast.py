import pytest

from djinnc.ast import (
    AST,
    AccessModifiersExpression,
    BodyExpression,
    CallableExpression,
    ConstantExpression,
    ImportExpression,
    LocalVariableExpression,
    MethodExpression,
    ModifierExpression,
    ModifierType,
    NumberLiteralConstant,
    Program,
    ReturnExpression,
    SignatureExpression,
    VariableExpression,
)
from djinnc.tokens import Location, Token, TokenType


def test_program_starts_empty_and_keeps_order():
    program = Program()
    assert program.imports == []
    assert program.methods == []
    first = ImportExpression("io")
    second = ImportExpression("math")
    program.add_import(first)
    program.add_import(second)
    method = CallableExpression()
    program.add_method(method)
    assert program.imports == [first, second]
    assert program.methods == [method]


def test_programs_do_not_share_lists():
    a = Program()
    b = Program()
    a.add_import(ImportExpression("io"))
    a.add_method(CallableExpression())
    assert b.imports == []
    assert b.methods == []


def test_import_expression_keeps_link():
    assert ImportExpression("console").link == "console"
    assert ImportExpression("a") == ImportExpression("a")
    assert ImportExpression("a") != ImportExpression("b")


def test_body_expression_statements():
    inner = BodyExpression()
    ret = ReturnExpression()
    body = BodyExpression([ret, inner])
    assert body.statements == [ret, inner]
    assert BodyExpression().statements == []
    empty_a, empty_b = BodyExpression(), BodyExpression()
    empty_a.statements.append(ret)
    assert empty_b.statements == []


@pytest.mark.parametrize(
    "flag, value",
    [
        (ModifierType.UNDEFINED, 0),
        (ModifierType.PUBLIC, 1),
        (ModifierType.PROTECTED, 2),
        (ModifierType.PRIVATE, 4),
        (ModifierType.INTERNAL, 8),
        (ModifierType.STATIC, 16),
    ],
)
def test_modifier_flag_values(flag, value):
    assert int(flag) == value


@pytest.mark.parametrize(
    "token_type, expected",
    [
        (TokenType.PUBLIC, ModifierType.PUBLIC),
        (TokenType.PROTECTED, ModifierType.PROTECTED),
        (TokenType.PRIVATE, ModifierType.PRIVATE),
        (TokenType.INTERNAL, ModifierType.INTERNAL),
        (TokenType.STATIC, ModifierType.STATIC),
        (TokenType.ABSTRACT, ModifierType.UNDEFINED),
        (TokenType.IDENTIFIER, ModifierType.UNDEFINED),
    ],
)
def test_modifier_from_token_type(token_type, expected):
    assert ModifierType.from_token_type(token_type) is expected


def test_has_flag():
    combined = ModifierType.PUBLIC | ModifierType.STATIC
    assert combined.has_flag(ModifierType.PUBLIC)
    assert combined.has_flag(ModifierType.STATIC)
    assert not combined.has_flag(ModifierType.PRIVATE)
    assert combined.has_flag(ModifierType.PUBLIC | ModifierType.STATIC)
    assert not combined.has_flag(ModifierType.PUBLIC | ModifierType.PRIVATE)
    assert ModifierType.PRIVATE.has_flag(ModifierType.UNDEFINED)


def test_access_modifiers_add_in_order():
    public_token = Token(TokenType.IDENTIFIER, "public", Location(0, 0, 0))
    static_token = Token(TokenType.IDENTIFIER, "static", Location(0, 7, 7))
    public = ModifierExpression(public_token, ModifierType.PUBLIC)
    static = ModifierExpression(static_token, ModifierType.STATIC)
    modifiers = AccessModifiersExpression()
    modifiers.add_modifier(public)
    modifiers.add_modifier(static)
    assert modifiers.modifiers == [public, static]
    assert [m.modifier.value for m in modifiers.modifiers] == ["public", "static"]
    assert AccessModifiersExpression().modifiers == []


def test_modifier_expression_defaults():
    modifier = ModifierExpression()
    assert modifier.modifier is None
    assert modifier.type is ModifierType.UNDEFINED


def test_callable_expression_parts():
    callable_ = CallableExpression()
    assert callable_.modifiers.modifiers == []
    assert callable_.signature is None
    assert callable_.body is None
    return_type = Token(TokenType.IDENTIFIER, "void")
    name = Token(TokenType.IDENTIFIER, "main")
    callable_.signature = SignatureExpression(return_type=return_type)
    callable_.signature.name = name
    callable_.body = BodyExpression([ReturnExpression()])
    assert callable_.signature.return_type.value == "void"
    assert callable_.signature.name.value == "main"
    assert callable_.signature.parameters == []
    assert len(callable_.body.statements) == 1


def test_callables_do_not_share_modifiers():
    a = CallableExpression()
    b = CallableExpression()
    a.modifiers.add_modifier(ModifierExpression())
    assert b.modifiers.modifiers == []


def test_method_expression_links_callable_and_parent():
    program = Program()
    callable_ = CallableExpression()
    method = MethodExpression(callable_, program)
    assert method.callable is callable_
    assert method.parent is program
    assert MethodExpression(callable_).parent is None


def test_return_expression_holds_value():
    number = Token(TokenType.NUMBER_LITERAL, "0")
    ret = ReturnExpression(right=number)
    assert ret.right.value == "0"
    assert ret.left is None
    assert ReturnExpression().right is None


def test_constants_keep_value():
    number = NumberLiteralConstant("42")
    assert number.value == "42"
    assert isinstance(number, ConstantExpression) and isinstance(number, AST)
    assert ConstantExpression().value == ""
    assert NumberLiteralConstant("1") == NumberLiteralConstant("1")


def test_variables():
    body = BodyExpression()
    local = LocalVariableExpression("count", body)
    assert local.name == "count"
    assert local.parent is body
    assert isinstance(local, VariableExpression)
    assert VariableExpression("x").name == "x"
    assert LocalVariableExpression("y").parent is None