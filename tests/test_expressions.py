import pytest

from dsakit.expressions import (
    BracketCheck,
    check_brackets,
    infix_to_postfix,
    is_balanced,
    precedence,
)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{[()]}", BracketCheck.VALID),
        ("a+(b*c)-[d]", BracketCheck.VALID),
        ("", BracketCheck.VALID),
        ("())", BracketCheck.UNMATCHED_CLOSING),
        ("]", BracketCheck.UNMATCHED_CLOSING),
        ("(]", BracketCheck.MISMATCHED),
        ("{(})", BracketCheck.MISMATCHED),
        ("((", BracketCheck.UNCLOSED),
        ("{[]", BracketCheck.UNCLOSED),
    ],
)
def test_check_brackets(expression, expected):
    assert check_brackets(expression) is expected


def test_is_balanced_agrees_with_check():
    for expr in ["([]{})", "(", ")(", "[)"]:
        assert is_balanced(expr) == (check_brackets(expr) is BracketCheck.VALID)


def test_precedence_ordering():
    assert precedence("^") > precedence("*") == precedence("/")
    assert precedence("/") > precedence("+") == precedence("-")
    assert precedence("-") > precedence("a") == precedence("(") == 0


def test_postfix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_postfix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_postfix_left_associative():
    assert infix_to_postfix("a-b-c") == "ab-c-"


def test_postfix_operands_only_unchanged():
    assert infix_to_postfix("abc") == "abc"


def test_postfix_ignores_whitespace():
    assert infix_to_postfix(" a + b * c ") == infix_to_postfix("a+b*c")


def test_postfix_keeps_all_non_paren_symbols():
    expr = "(a+b)*(c-d)/e^f"
    result = infix_to_postfix(expr)
    assert sorted(result) == sorted(c for c in expr if c not in "()")
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", ")("])
def test_postfix_unbalanced_raises(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)