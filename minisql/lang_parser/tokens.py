"""
Contains types related to tokens
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional


class TokenType(Enum):
    """
    types of tokens
    """
    # single-char tokens
    LEFT_PAREN = auto()  # '('
    RIGHT_PAREN = auto()  # ')'
    COMMA = auto()  # ,
    SEMI_COLON = auto()  # ;
    EQUAL = auto()  # =; also '=='
    LESS = auto()  # <
    GREATER = auto()  # >
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /

    # 2-char tokens
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=
    NOT_EQUAL = auto()  # !=

    # misc
    EOF = auto()
    # reserved keyword; literal is a `Keyword`
    KEYWORD = auto()
    IDENTIFIER = auto()
    # a literal representing an unsigned 64-bit integer
    INTEGER_NUMBER = auto()
    # double quoted string
    STRING = auto()
    # literal is the offending char
    INVALID = auto()


class Keyword(Enum):
    """
    reserved words; matched case-insensitively
    """
    SELECT = auto()
    CREATE = auto()
    TABLE = auto()
    WHERE = auto()
    FROM = auto()
    ORDER = auto()
    BY = auto()
    AND = auto()
    OR = auto()
    NOT = auto()

    @classmethod
    def from_lexeme(cls, lexeme: str) -> Optional['Keyword']:
        """
        return the keyword `lexeme` spells, in any casing; None if it isn't one
        """
        return cls.__members__.get(lexeme.upper())


KEYWORDS = {keyword.name for keyword in Keyword}


@dataclass(frozen=True)
class Token:
    """
    Represents a token of the source.

    Only `token_type` and `literal` determine equality; `lexeme` and `position`
    record where in the source the token came from.
    """
    token_type: TokenType
    literal: Any = None
    lexeme: str = field(default='', compare=False)
    # offset of first char of lexeme in source
    position: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        # when object is printed
        body = f'{self.token_type.name}'
        if self.token_type == TokenType.KEYWORD:
            body = f'{body}[{self.literal.name}]'
        elif self.literal is not None:
            body = f'{body}[{self.literal!r}]'
        return body

    def __repr__(self) -> str:
        # appears in collections
        return f'Token({self.__str__()})'
