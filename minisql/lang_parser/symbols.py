from __future__ import annotations
"""
Contains symbol classes used by parser
"""
from enum import Enum, auto

from typing import Any
from dataclasses import dataclass
from .tokens import TokenType
from .visitor import Visitor


class ArithmeticOp(Enum):
    Addition = auto()
    Subtraction = auto()
    Multiplication = auto()
    Division = auto()

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> ArithmeticOp:
        """
        raises KeyError if `token_type` is not an arithmetic operator
        """
        return _TOKEN_TYPE_TO_OP[token_type]

    def symbol(self) -> str:
        return _OP_TO_SYMBOL[self]


_TOKEN_TYPE_TO_OP = {
    TokenType.PLUS: ArithmeticOp.Addition,
    TokenType.MINUS: ArithmeticOp.Subtraction,
    TokenType.STAR: ArithmeticOp.Multiplication,
    TokenType.SLASH: ArithmeticOp.Division,
}

_OP_TO_SYMBOL = {
    ArithmeticOp.Addition: '+',
    ArithmeticOp.Subtraction: '-',
    ArithmeticOp.Multiplication: '*',
    ArithmeticOp.Division: '/',
}


@dataclass(frozen=True)
class Symbol:
    """
    Symbol is the root of parser hierarchy.
    Comparable to how tokens compose the tokenizer's output, i.e. a stream of tokens,
    Symbols compose the parser's output, i.e. the AST
    """
    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit(self)


@dataclass(frozen=True)
class BinaryArithmeticOperation(Symbol):
    operator: ArithmeticOp
    left_operand: Symbol
    right_operand: Symbol


@dataclass(frozen=True)
class Literal(Symbol):
    # unsigned 64-bit integer
    value: int


@dataclass(frozen=True)
class ColumnName(Symbol):
    """
    a bare identifier; resolves to a column once statements are supported
    """
    name: str
