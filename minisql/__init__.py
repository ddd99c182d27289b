"""
minisql: front end for a small sql-like language; tokenizes text and
parses arithmetic expressions into expression trees
"""
from .interface import MiniSql, repl, run_file, parse_args_and_start
from .expression_printer import ExpressionPrinter, stringify
from .lang_parser import parse, Tokenizer, Parser
