# operational constants
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

PROMPT = 'minisql > '

USAGE = '''
Enter an arithmetic expression, e.g. (1 + x) * 3, to parse it.
Meta commands:
    .help           print this message
    .tokens <text>  print the tokens of <text>
    .quit           exit
'''

# logging
LOG_FORMAT = "[%(filename)s:%(lineno)s - %(funcName)s ] %(message)s"
LOG_LEVEL = 'INFO'

# lexer constants
# largest integer literal; literals are unsigned 64-bit
U64_MAX = 2 ** 64 - 1
U64_MAX_DIGITS = len(str(U64_MAX))

# parser constants
# binding powers of infix operators; any other token binds with NO_PRECEDENCE
# and so ends an expression
NO_PRECEDENCE = 0
ADDITIVE_PRECEDENCE = 1
MULTIPLICATIVE_PRECEDENCE = 2
