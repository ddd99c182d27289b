from .tokens import TokenType, Keyword, Token, KEYWORDS
from .tokenizer import Tokenizer
from .pratt_parser import Parser
from .symbols import Symbol, ArithmeticOp, BinaryArithmeticOperation, Literal, ColumnName
from .utils import (ParseError,
                    UnexpectedToken,
                    ExpectedToken,
                    ExpectedIdentifier,
                    ExpectedType,
                    ExpectedKeyword,
                    ExpectedNumber,
                    UnexpectedEndOfInput,
                    InvalidInput)


def parse(text: str) -> Symbol:
    """
    tokenize and parse `text` into an expression tree
    """
    return Parser(Tokenizer(text)).parse()
