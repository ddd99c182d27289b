# lark grammar for the arithmetic expressions of minisql; this
# accepts the same language as pratt_parser.Parser, and is used to cross-check it
GRAMMAR = '''
        ?start           : sum

        // left recursive rules, so operators of the same precedence group to the left
        ?sum             : product
                         | sum "+" product    -> addition
                         | sum "-" product    -> subtraction

        ?product         : atom
                         | product "*" atom   -> multiplication
                         | product "/" atom   -> division

        ?atom            : INTEGER_NUMBER     -> literal
                         | IDENTIFIER         -> column_name
                         | "(" sum ")"

        IDENTIFIER       : ("_" | LETTER) ("_" | LETTER | DIGIT)*
        INTEGER_NUMBER   : DIGIT+

        // ref: https://github.com/lark-parser/lark/blob/master/lark/grammars/common.lark
        %import common.LETTER
        %import common.DIGIT
        %import common.WS
        %ignore WS
'''
