import pytest

from algokit.notation import (
    ExpressionError,
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
    postfix_to_prefix,
    precedence,
    prefix_to_infix,
    prefix_to_postfix,
)


def test_precedence_ordering():
    assert precedence("^") > precedence("*")
    assert precedence("*") == precedence("/")
    assert precedence("/") > precedence("+")
    assert precedence("+") == precedence("-")
    assert precedence("-") > precedence("a")
    assert precedence("(") == precedence("x")


def test_infix_to_postfix_example():
    assert infix_to_postfix("a+b*(c^d-e)") == "abcd^e-*+"


def test_infix_to_prefix_example():
    assert infix_to_prefix("(A+B)*C-D+E") == "+-*+ABCDE"


def test_postfix_to_infix_example():
    assert postfix_to_infix("AB-DE+F*/") == "((A-B)/((D+E)*F))"


def test_prefix_to_postfix_example():
    assert prefix_to_postfix("/-AB*+DEF") == "AB-DE+F*/"


def test_postfix_to_prefix_inverse_of_prefix_to_postfix():
    assert postfix_to_prefix("AB-DE+F*/") == "/-AB*+DEF"


@pytest.mark.parametrize("postfix", ["AB-DE+F*/", "ab+c*", "abc^^", "a", "12+3-"])
def test_postfix_prefix_round_trip(postfix):
    assert prefix_to_postfix(postfix_to_prefix(postfix)) == postfix


@pytest.mark.parametrize("postfix", ["AB-DE+F*/", "ab+c*", "abc^^d/"])
def test_infix_forms_agree(postfix):
    prefix = postfix_to_prefix(postfix)
    assert prefix_to_infix(prefix) == postfix_to_infix(postfix)


@pytest.mark.parametrize("prefix", ["*+PQ-MN", "/-AB*+DEF", "^a^bc"])
def test_prefix_infix_round_trip(prefix):
    assert infix_to_prefix(prefix_to_infix(prefix)) == prefix


@pytest.mark.parametrize("postfix", ["AB-DE+F*/", "ab+c*d-", "xy^z/"])
def test_postfix_infix_round_trip(postfix):
    assert infix_to_postfix(postfix_to_infix(postfix)) == postfix


def test_postfix_conversion_is_left_associative():
    assert infix_to_postfix("a^b^c") == infix_to_postfix("(a^b)^c")
    assert infix_to_postfix("a-b-c") == infix_to_postfix("(a-b)-c")


def test_prefix_conversion_power_is_right_associative():
    assert infix_to_prefix("a^b^c") == infix_to_prefix("a^(b^c)")
    assert infix_to_prefix("a-b-c") == infix_to_prefix("(a-b)-c")


def test_infix_conversions_agree():
    expr = "(A+B)*C-D+E"
    assert prefix_to_postfix(infix_to_prefix(expr)) == infix_to_postfix(expr)


def test_whitespace_is_ignored():
    assert infix_to_postfix("a + b * c") == infix_to_postfix("a+b*c")
    assert postfix_to_infix("a b +") == postfix_to_infix("ab+")


@pytest.mark.parametrize("expr", ["a+b)", "(a+b", "a&b"])
def test_infix_errors(expr):
    with pytest.raises(ExpressionError):
        infix_to_postfix(expr)
    with pytest.raises(ExpressionError):
        infix_to_prefix(expr)


@pytest.mark.parametrize("expr", ["", "A+", "AB", "+", "AB%"])
def test_postfix_errors(expr):
    with pytest.raises(ExpressionError):
        postfix_to_infix(expr)
    with pytest.raises(ExpressionError):
        postfix_to_prefix(expr)


@pytest.mark.parametrize("expr", ["", "+A", "AB", "*"])
def test_prefix_errors(expr):
    with pytest.raises(ExpressionError):
        prefix_to_infix(expr)
    with pytest.raises(ExpressionError):
        prefix_to_postfix(expr)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        postfix_to_infix("+")