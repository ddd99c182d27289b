from .lang_parser.visitor import Visitor
from .lang_parser.symbols import Symbol, BinaryArithmeticOperation, Literal, ColumnName


class ExpressionPrinter(Visitor):
    """
    Renders an expression tree as text. Every binary operation is
    wrapped in parentheses, so the output shows how the parser grouped
    operands, e.g. `1 + 2 * 3` is printed as `(1 + (2 * 3))`
    """

    def stringify(self, expr: Symbol) -> str:
        return expr.accept(self)

    # section: visit methods

    def visit_binary_arithmetic_operation(self, operation: BinaryArithmeticOperation) -> str:
        left = self.stringify(operation.left_operand)
        right = self.stringify(operation.right_operand)
        return f'({left} {operation.operator.symbol()} {right})'

    def visit_literal(self, literal: Literal) -> str:
        return str(literal.value)

    def visit_column_name(self, column_name: ColumnName) -> str:
        return column_name.name


def stringify(expr: Symbol) -> str:
    return ExpressionPrinter().stringify(expr)
