import logging
import string
from typing import Any, List

from ..constants import U64_MAX, U64_MAX_DIGITS
from .tokens import TokenType, Keyword, Token
from .utils import ParseError, UnexpectedToken, ExpectedNumber, UnexpectedEndOfInput


logger = logging.getLogger(__name__)

WHITESPACE = ' \t\n\r'
IDENTIFIER_CHARS = string.ascii_letters + string.digits + '_'


class Tokenizer:
    """
    Converts source text into tokens.

    The entire source is tokenized on construction. The first lexical error
    ends tokenization: an EOF is appended in place of the remaining input and
    the error is recorded in `errors` (and raised, if `raise_exception`).

    Tokens can then be read as a whole, via `scan_tokens`, or one at a
    time via `peek_token` and `next_token`.
    """
    def __init__(self, source: str, raise_exception=False):
        self.source = source
        self.tokens: List[Token] = []
        # start of current lexeme
        self.start = 0
        # current char position in source
        self.current = 0
        # position of next token to hand out
        self.token_position = 0
        self.errors: List[ParseError] = []
        self.raise_exception = raise_exception
        self.tokenize_input()

    # section: char-level helpers

    def is_at_end(self) -> bool:
        """return true if scanner is at end of the source"""
        return self.current >= len(self.source)

    def peek(self) -> str:
        """
        return current char without advancing
        :return:
        """
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def match(self, expected: str) -> bool:
        """
        conditionally advance, if current
        char matches expected
        """
        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        # conditionally increment on match
        self.current += 1
        return True

    def advance(self) -> str:
        """
        advance tokenizer and return consumed char
        :return:
        """
        char = self.source[self.current]
        self.current += 1
        return char

    def make_token(self, token_type: TokenType, literal: Any = None) -> Token:
        text = self.source[self.start: self.current]
        return Token(token_type, literal, lexeme=text, position=self.start)

    # section: tokenization

    def tokenize_input(self):
        """
        tokenize the entire source into self.tokens
        """
        try:
            while True:
                token = self.scan_token()
                self.tokens.append(token)
                if token.token_type == TokenType.EOF:
                    break
        except ParseError as e:
            # stop at first error; the rest of the source is discarded
            logger.error(f"Tokenizer error: {e}")
            self.errors.append(e)
            self.tokens.append(Token(TokenType.EOF, position=self.current))
            if self.raise_exception:
                raise

        logger.debug(f"tokenized {len(self.source)} chars into {len(self.tokens)} tokens")

    def scan_token(self) -> Token:
        """
        scan next token; EOF once source is exhausted
        :return:
        """
        while self.peek() in WHITESPACE:
            self.advance()

        self.start = self.current
        if self.is_at_end():
            return self.make_token(TokenType.EOF)

        char = self.advance()
        # multi-char tokens
        if char == '"':
            return self.tokenize_string()
        elif is_digit(char):
            return self.tokenize_number()
        elif char.isascii() and (char.isalpha() or char == '_'):
            return self.tokenize_identifier()
        # single char tokens
        elif char == '(':
            return self.make_token(TokenType.LEFT_PAREN)
        elif char == ')':
            return self.make_token(TokenType.RIGHT_PAREN)
        elif char == ',':
            return self.make_token(TokenType.COMMA)
        elif char == ';':
            return self.make_token(TokenType.SEMI_COLON)
        # could be single or double char; depends on next char
        elif char == '=':
            # '==' is read as a single EQUAL
            self.match('=')
            return self.make_token(TokenType.EQUAL)
        elif char == '!':
            if self.match('='):
                return self.make_token(TokenType.NOT_EQUAL)
            raise UnexpectedToken("Unexpected '!' without '='")
        elif char == '>':
            token_type = TokenType.GREATER_EQUAL if self.match('=') else TokenType.GREATER
            return self.make_token(token_type)
        elif char == '<':
            token_type = TokenType.LESS_EQUAL if self.match('=') else TokenType.LESS
            return self.make_token(token_type)
        # arithmetic operators
        elif char == '+':
            return self.make_token(TokenType.PLUS)
        elif char == '-':
            return self.make_token(TokenType.MINUS)
        elif char == '*':
            return self.make_token(TokenType.STAR)
        elif char == '/':
            return self.make_token(TokenType.SLASH)

        raise UnexpectedToken(f"Unexpected character '{char}'")

    def tokenize_string(self) -> Token:
        """
        tokenize string
        NB: This only supports double quoted strings, with no escapes
        """
        while self.peek() != '"' and self.is_at_end() is False:
            self.advance()

        if self.is_at_end():
            raise UnexpectedEndOfInput("Unterminated string literal")

        # the closing "
        self.advance()
        # trim enclosing quotation marks
        value = self.source[self.start + 1: self.current - 1]
        return self.make_token(TokenType.STRING, value)

    def tokenize_number(self) -> Token:
        """
        tokenize an unsigned integer; must fit in 64 bits
        """
        while is_digit(self.peek()):
            self.advance()

        text = self.source[self.start: self.current]
        # check length before converting; int() rejects very long digit strings
        significant = text.lstrip('0') or '0'
        if len(significant) > U64_MAX_DIGITS or int(significant) > U64_MAX:
            raise ExpectedNumber(f"Invalid number: {text}")
        return self.make_token(TokenType.INTEGER_NUMBER, int(significant))

    def tokenize_identifier(self) -> Token:
        """
        tokenize identifier or keyword
        :return:
        """
        # consume the longest run first; only then check for a keyword
        while self.peek() in IDENTIFIER_CHARS:
            self.advance()

        identifier = self.source[self.start: self.current]
        keyword = Keyword.from_lexeme(identifier)
        if keyword is not None:
            # reserved keyword
            return self.make_token(TokenType.KEYWORD, keyword)
        return self.make_token(TokenType.IDENTIFIER, identifier)

    # section: token access

    def scan_tokens(self) -> List[Token]:
        """
        returns the list of tokens; always ends with EOF
        :return:
        """
        return list(self.tokens)

    def peek_token(self) -> Token:
        """
        return token at cursor, without consuming it
        """
        if self.token_position < len(self.tokens):
            return self.tokens[self.token_position]
        return self.tokens[-1]

    def next_token(self) -> Token:
        """
        return token at cursor and advance cursor.
        After the last token, keeps returning EOF
        """
        token = self.peek_token()
        if self.token_position < len(self.tokens):
            self.token_position += 1
        return token


def is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()
