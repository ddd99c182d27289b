import logging

from ..constants import NO_PRECEDENCE, ADDITIVE_PRECEDENCE, MULTIPLICATIVE_PRECEDENCE
from .tokens import TokenType, Token
from .tokenizer import Tokenizer
from .symbols import Symbol, BinaryArithmeticOperation, ArithmeticOp, Literal, ColumnName
from .utils import InvalidInput


logger = logging.getLogger(__name__)


PRECEDENCE = {
    TokenType.PLUS: ADDITIVE_PRECEDENCE,
    TokenType.MINUS: ADDITIVE_PRECEDENCE,
    TokenType.STAR: MULTIPLICATIVE_PRECEDENCE,
    TokenType.SLASH: MULTIPLICATIVE_PRECEDENCE,
}


class Parser:
    """
    Precedence climbing (pratt) parser for arithmetic expressions.

    grammar :
        expr             -> primary ( operator primary )*
        primary          -> INTEGER_NUMBER | IDENTIFIER | "(" expr ")"
        operator         -> "+" | "-" | "*" | "/"

    "*", "/" bind tighter than "+", "-"; operators of the same precedence
    group to the left. Any other token ends the expression. The parser only
    consumes as much of the token stream as the expression needs.
    """
    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer
        self.current_token: Token = tokenizer.next_token()

    def advance(self):
        """
        consume current token
        """
        self.current_token = self.tokenizer.next_token()

    def parse(self) -> Symbol:
        """
        parse one expression from the start of the token stream
        """
        try:
            expr = self.parse_expression(NO_PRECEDENCE)
        except RecursionError as e:
            raise InvalidInput("Expression nested too deeply") from e
        logger.debug(f"parsed expression; stopped at {self.current_token}")
        return expr

    def parse_expression(self, precedence: int) -> Symbol:
        left = self.parse_primary()

        while True:
            token_precedence = self.get_precedence(self.current_token)
            if token_precedence <= precedence:
                break

            op = self.current_token
            self.advance()
            right = self.parse_expression(token_precedence)

            try:
                operator = ArithmeticOp.from_token_type(op.token_type)
            except KeyError as e:
                # unreachable while PRECEDENCE only ranks arithmetic operators
                raise InvalidInput("Unexpected operator") from e
            left = BinaryArithmeticOperation(operator, left, right)

        return left

    def parse_primary(self) -> Symbol:
        token = self.current_token
        if token.token_type == TokenType.INTEGER_NUMBER:
            self.advance()
            return Literal(token.literal)
        elif token.token_type == TokenType.IDENTIFIER:
            self.advance()
            return ColumnName(token.literal)
        elif token.token_type == TokenType.LEFT_PAREN:
            self.advance()
            expr = self.parse_expression(NO_PRECEDENCE)
            if self.current_token.token_type != TokenType.RIGHT_PAREN:
                raise InvalidInput("Expected closing parenthesis")
            self.advance()
            return expr
        elif token.token_type == TokenType.EOF:
            raise InvalidInput("Unexpected end of input")
        raise InvalidInput(f"Unexpected token: {token}")

    @staticmethod
    def get_precedence(token: Token) -> int:
        return PRECEDENCE.get(token.token_type, NO_PRECEDENCE)
