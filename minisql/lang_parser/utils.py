import re


class ParseError(Exception):
    """
    Root of tokenizer and parser errors. Each kind
    carries a human-readable message
    """
    description = "Parse error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f'{self.description}: {self.message}'


class UnexpectedToken(ParseError):
    description = "Unexpected token"


class ExpectedToken(ParseError):
    description = "Expected token"


class ExpectedIdentifier(ParseError):
    description = "Expected identifier"


class ExpectedType(ParseError):
    description = "Expected type"


class ExpectedKeyword(ParseError):
    description = "Expected keyword"


class ExpectedNumber(ParseError):
    description = "Expected number"


class UnexpectedEndOfInput(ParseError):
    description = "Unexpected end of input"


class InvalidInput(ParseError):
    """
    catch-all used by the parser for any grammar violation
    """
    description = "Invalid input"


def camel_to_snake(name: str) -> str:
    """
    change casing
    """
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()
