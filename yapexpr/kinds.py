"""Expression kinds, their arities and their operator spellings."""

from __future__ import annotations

import enum

UNKNOWN_OPERATOR = "** ERROR: UNKNOWN OPERATOR! **"


class ExprKind(enum.Enum):
    """Every kind of node an expression tree can hold."""

    EXPR_REF = "expr_ref"
    TERMINAL = "terminal"

    # unary
    UNARY_PLUS = "unary_plus"
    NEGATE = "negate"
    DEREFERENCE = "dereference"
    COMPLEMENT = "complement"
    ADDRESS_OF = "address_of"
    LOGICAL_NOT = "logical_not"
    PRE_INC = "pre_inc"
    PRE_DEC = "pre_dec"
    POST_INC = "post_inc"
    POST_DEC = "post_dec"

    # binary
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"
    MULTIPLIES = "multiplies"
    DIVIDES = "divides"
    MODULUS = "modulus"
    PLUS = "plus"
    MINUS = "minus"
    LESS = "less"
    GREATER = "greater"
    LESS_EQUAL = "less_equal"
    GREATER_EQUAL = "greater_equal"
    EQUAL_TO = "equal_to"
    NOT_EQUAL_TO = "not_equal_to"
    LOGICAL_OR = "logical_or"
    LOGICAL_AND = "logical_and"
    BITWISE_AND = "bitwise_and"
    BITWISE_OR = "bitwise_or"
    BITWISE_XOR = "bitwise_xor"
    COMMA = "comma"
    MEM_PTR = "mem_ptr"
    ASSIGN = "assign"
    SHIFT_LEFT_ASSIGN = "shift_left_assign"
    SHIFT_RIGHT_ASSIGN = "shift_right_assign"
    MULTIPLIES_ASSIGN = "multiplies_assign"
    DIVIDES_ASSIGN = "divides_assign"
    MODULUS_ASSIGN = "modulus_assign"
    PLUS_ASSIGN = "plus_assign"
    MINUS_ASSIGN = "minus_assign"
    BITWISE_AND_ASSIGN = "bitwise_and_assign"
    BITWISE_OR_ASSIGN = "bitwise_or_assign"
    BITWISE_XOR_ASSIGN = "bitwise_xor_assign"
    SUBSCRIPT = "subscript"

    # ternary
    IF_ELSE = "if_else"

    # n-ary
    CALL = "call"


class ExprArity(enum.Enum):
    """How many operands a kind of node takes."""

    INVALID = "invalid"
    ONE = "one"
    TWO = "two"
    THREE = "three"
    N = "n"


_K = ExprKind

_UNARY = (
    _K.EXPR_REF,
    _K.TERMINAL,
    _K.UNARY_PLUS,
    _K.NEGATE,
    _K.DEREFERENCE,
    _K.COMPLEMENT,
    _K.ADDRESS_OF,
    _K.LOGICAL_NOT,
    _K.PRE_INC,
    _K.PRE_DEC,
    _K.POST_INC,
    _K.POST_DEC,
)

_ARITIES: dict[ExprKind, ExprArity] = {
    **{kind: ExprArity.ONE for kind in _UNARY},
    _K.IF_ELSE: ExprArity.THREE,
    _K.CALL: ExprArity.N,
}
_ARITIES.update(
    {kind: ExprArity.TWO for kind in ExprKind if kind not in _ARITIES}
)

_OP_STRINGS: dict[ExprKind, str] = {
    _K.EXPR_REF: "expr_ref",
    _K.TERMINAL: "term",
    _K.UNARY_PLUS: "+",
    _K.NEGATE: "-",
    _K.DEREFERENCE: "*",
    _K.COMPLEMENT: "~",
    _K.ADDRESS_OF: "&",
    _K.LOGICAL_NOT: "!",
    _K.PRE_INC: "++",
    _K.PRE_DEC: "--",
    _K.POST_INC: "++(int)",
    _K.POST_DEC: "--(int)",
    _K.SHIFT_LEFT: "<<",
    _K.SHIFT_RIGHT: ">>",
    _K.MULTIPLIES: "*",
    _K.DIVIDES: "/",
    _K.MODULUS: "%",
    _K.PLUS: "+",
    _K.MINUS: "-",
    _K.LESS: "<",
    _K.GREATER: ">",
    _K.LESS_EQUAL: "<=",
    _K.GREATER_EQUAL: ">=",
    _K.EQUAL_TO: "==",
    _K.NOT_EQUAL_TO: "!=",
    _K.LOGICAL_OR: "||",
    _K.LOGICAL_AND: "&&",
    _K.BITWISE_AND: "&",
    _K.BITWISE_OR: "|",
    _K.BITWISE_XOR: "^",
    _K.COMMA: ",",
    _K.MEM_PTR: "->*",
    _K.ASSIGN: "=",
    _K.SHIFT_LEFT_ASSIGN: "<<=",
    _K.SHIFT_RIGHT_ASSIGN: ">>=",
    _K.MULTIPLIES_ASSIGN: "*=",
    _K.DIVIDES_ASSIGN: "/=",
    _K.MODULUS_ASSIGN: "%=",
    _K.PLUS_ASSIGN: "+=",
    _K.MINUS_ASSIGN: "-=",
    _K.BITWISE_AND_ASSIGN: "&=",
    _K.BITWISE_OR_ASSIGN: "|=",
    _K.BITWISE_XOR_ASSIGN: "^=",
    _K.SUBSCRIPT: "[]",
    _K.IF_ELSE: "?:",
    _K.CALL: "()",
}


def arity_of(kind: object) -> ExprArity:
    """Return the arity of ``kind``; anything that is not a kind is INVALID."""
    if isinstance(kind, ExprKind):
        return _ARITIES[kind]
    return ExprArity.INVALID


def op_string(kind: object) -> str:
    """Return the operator spelling of ``kind``, or an error marker."""
    if isinstance(kind, ExprKind):
        return _OP_STRINGS[kind]
    return UNKNOWN_OPERATOR