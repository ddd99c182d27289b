from __future__ import annotations
"""
This module contains the highest level user-interaction, i.e. reading
input, handing it to the tokenizer and parser, and reporting the results.
"""
import os
import os.path
import sys
import logging

from typing import List

from .constants import USAGE, PROMPT, EXIT_SUCCESS, EXIT_FAILURE, LOG_FORMAT, LOG_LEVEL
from .dataexchange import Response, MetaCommandResult, FailureStage
from .expression_printer import stringify
from .lang_parser.tokenizer import Tokenizer
from .lang_parser.pratt_parser import Parser
from .lang_parser.utils import ParseError


logger = logging.getLogger(__name__)


# section: core execution/user-interface logic

def config_logging(level: str = LOG_LEVEL):
    # config logger
    # log to file
    # logging.basicConfig(format=LOG_FORMAT, level=level, filename=os.path.join(os.getcwd(), "log.log"))
    # log to stdout
    logging.basicConfig(format=LOG_FORMAT, level=level)


class MiniSql:
    """
    This provides programmatic interface for parsing minisql input.

    An example flow is like:
    ```
    db = MiniSql()

    resp = db.handle_input("(1 + x) * 3")
    assert resp.success
    expr = resp.body
    ```
    """

    def __init__(self):
        self.configure()

    def configure(self):
        """
        Handle any configuration tasks
        """
        config_logging()

    def handle_input(self, input_buffer: str) -> Response:
        """
        handle input- meta command or expression

        :param input_buffer:
        :return:
        """
        if self.is_meta_command(input_buffer):
            return self.do_meta_command(input_buffer)
        return self.prepare_expression(input_buffer)

    @staticmethod
    def is_meta_command(command: str) -> bool:
        return command and command[0] == '.'

    def do_meta_command(self, command: str) -> Response:
        """
        handle execution of meta command
        :param command:
        :return:
        """
        if command == ".quit":
            print("goodbye")
            sys.exit(EXIT_SUCCESS)
        elif command == ".help":
            print(USAGE)
            return Response(True, status=MetaCommandResult.Success)
        elif command.startswith(".tokens"):
            # .tokens expects text to tokenize
            splits = command.split(" ", 1)
            if len(splits) != 2 or not splits[1].strip():
                return Response(False, error_message="Usage: > .tokens <text>",
                                status=MetaCommandResult.InvalidArgument)
            tokenizer = Tokenizer(splits[1])
            return Response(True, status=MetaCommandResult.Success, body=tokenizer.scan_tokens())
        return Response(False, error_message=f"Unrecognized command [{command}]",
                        status=MetaCommandResult.UnrecognizedCommand)

    @staticmethod
    def prepare_expression(text: str) -> Response:
        """
        tokenize and parse `text`, and return the expression tree as body.

        :param text:
        :return:
        """
        tokenizer = Tokenizer(text)
        if tokenizer.errors:
            # tokens are truncated at the error; don't parse them
            return Response(False, error_message=f"tokenize failed due to: [{tokenizer.errors[0]}]",
                            status=FailureStage.Tokenize)

        parser = Parser(tokenizer)
        try:
            expr = parser.parse()
        except ParseError as e:
            return Response(False, error_message=f"parse failed due to: [{e}]", status=FailureStage.Parse)
        return Response(True, body=expr)


def print_response(resp: Response):
    if not resp.success:
        print(f"Command execution failed due to [{resp.error_message}] ")
    elif isinstance(resp.body, list):
        # tokens
        for token in resp.body:
            print(token)
    elif resp.body is not None:
        try:
            print(stringify(resp.body))
        except RecursionError:
            # printer recurses once per tree level
            print("Parsed expression is too deep to print")


def repl():
    """
    REPL (read-eval-print loop) for minisql
    """
    db = MiniSql()

    print("Welcome to minisql")
    print("For help use .help")
    while True:
        input_buffer = input(PROMPT)
        resp = db.handle_input(input_buffer)
        print_response(resp)


def run_file(input_filepath: str) -> Response:
    """
    Parse each non-blank line in file.
    """
    db = MiniSql()

    if not os.path.exists(input_filepath):
        return Response(False, error_message=f"Argument file [{input_filepath}] not found")

    with open(input_filepath) as fp:
        lines = [line.strip() for line in fp]

    failed = 0
    for line in lines:
        if not line:
            continue
        logger.info(f"handling [{line}]")
        resp = db.handle_input(line)
        print_response(resp)
        if not resp.success:
            failed += 1

    if failed:
        return Response(False, error_message=f"{failed} line(s) failed")
    return Response(True)


def parse_args_and_start(args: List) -> int:
    """
    parse args and starts
    :return: exit code
    """
    args_description = """Usage:
python run.py repl
    // start repl
python run.py file <filepath>
    // parse each line of file at <filepath>
    """
    if len(args) < 1:
        print("Error: run-mode not specified")
        print(args_description)
        return EXIT_FAILURE

    runmode = args[0].lower()
    if runmode == "repl":
        repl()
    elif runmode == "file":
        if len(args) < 2:
            print("Error: Expected input filepath")
            print(args_description)
            return EXIT_FAILURE
        resp = run_file(args[1])
        if not resp.success:
            print(resp.error_message)
            return EXIT_FAILURE
    else:
        print(f"Error: Invalid run mode [{runmode}]")
        print(args_description)
        return EXIT_FAILURE
    return EXIT_SUCCESS
