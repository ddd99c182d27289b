from __future__ import annotations
import logging

from lark import Lark, Transformer, Token, v_args
from lark.exceptions import UnexpectedInput  # root of all lark exceptions
from lark.exceptions import VisitError

from ..constants import U64_MAX, U64_MAX_DIGITS
from .grammar import GRAMMAR
from .symbols import Symbol, ArithmeticOp, BinaryArithmeticOperation, Literal, ColumnName
from .tokens import Keyword
from .utils import ExpectedNumber, InvalidInput


logger = logging.getLogger(__name__)


@v_args(inline=True)
class ToAst(Transformer):
    """
    Convert lark parse tree to AST, i.e. the
    same symbols pratt_parser.Parser produces
    """

    def literal(self, token: Token) -> Literal:
        # check length before converting; int() rejects very long digit strings
        significant = str(token).lstrip('0') or '0'
        if len(significant) > U64_MAX_DIGITS or int(significant) > U64_MAX:
            raise ExpectedNumber(f"Invalid number: {token}")
        return Literal(int(significant))

    def column_name(self, token: Token) -> ColumnName:
        # the grammar doesn't distinguish keywords from identifiers
        if Keyword.from_lexeme(str(token)) is not None:
            raise InvalidInput(f"Unexpected keyword: {token}")
        return ColumnName(str(token))

    def addition(self, left: Symbol, right: Symbol) -> BinaryArithmeticOperation:
        return BinaryArithmeticOperation(ArithmeticOp.Addition, left, right)

    def subtraction(self, left: Symbol, right: Symbol) -> BinaryArithmeticOperation:
        return BinaryArithmeticOperation(ArithmeticOp.Subtraction, left, right)

    def multiplication(self, left: Symbol, right: Symbol) -> BinaryArithmeticOperation:
        return BinaryArithmeticOperation(ArithmeticOp.Multiplication, left, right)

    def division(self, left: Symbol, right: Symbol) -> BinaryArithmeticOperation:
        return BinaryArithmeticOperation(ArithmeticOp.Division, left, right)


class SqlFrontEnd:
    """
    Parser for minisql expressions, based on lark definition.
    Unlike pratt_parser.Parser, the entire text must be an expression.
    """
    def __init__(self, raise_exception=False):
        self.parser = None
        self.parsed = None  # parsed AST
        self.exc = None  # exception
        self.is_succ = False
        self.raise_exception = raise_exception
        self._init()

    def _init(self):
        self.parser = Lark(GRAMMAR, parser='lalr', start='start')

    def error_summary(self):
        if self.exc is not None:
            return str(self.exc)

    def is_success(self):
        """
        whether parse operation is success
        :return:
        """
        return self.is_succ

    def get_parsed(self):
        return self.parsed

    def parse(self, text: str):
        """
        parse `text`; on success the AST is available via `get_parsed`
        :param text:
        :return:
        """
        self.parsed = None
        self.is_succ = False
        try:
            tree = self.parser.parse(text)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("untransformed tree:\n%s", tree.pretty())
            transformer = ToAst()
            self.parsed = transformer.transform(tree)
            self.is_succ = True
            self.exc = None
        except UnexpectedInput as e:
            self.exc = e
            if self.raise_exception:
                raise
        except VisitError as e:
            # raised by a ToAst handler
            self.exc = e.orig_exc
            if self.raise_exception:
                raise e.orig_exc from e
