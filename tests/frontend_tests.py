"""
Tests for the grammar front end, the printer, and the
user-facing interface
"""
import pytest
from lark.exceptions import UnexpectedInput

from .context import (parse, stringify, SqlFrontEnd, MiniSql, run_file, parse_args_and_start,
                      MetaCommandResult, FailureStage, Visitor, HandlerNotFoundException,
                      Token, TokenType, Literal, ColumnName, InvalidInput, ExpectedNumber,
                      EXIT_SUCCESS, EXIT_FAILURE)


@pytest.fixture
def expressions():
    return [
        "42",
        "foo",
        "1+2*3",
        "1-2-3",
        "8 / 4 / 2",
        "(1+2)*3",
        "x*2+y",
        "1 + 2 * 3 - 4 / x",
        "((a))",
        "a * (b - (c + 7)) / _tmp_1",
        "18446744073709551615 - 1",
    ]


@pytest.fixture
def db():
    return MiniSql()


# section: grammar front end


def test_frontend_agrees_with_parser(expressions):
    frontend = SqlFrontEnd()
    for text in expressions:
        frontend.parse(text)
        assert frontend.is_success(), frontend.error_summary()
        assert frontend.get_parsed() == parse(text), text


def test_frontend_parse_failure():
    frontend = SqlFrontEnd()
    frontend.parse("(1+2")
    assert not frontend.is_success()
    assert frontend.get_parsed() is None
    assert frontend.error_summary() is not None


def test_frontend_raise_exception():
    frontend = SqlFrontEnd(raise_exception=True)
    with pytest.raises(UnexpectedInput):
        frontend.parse("1 +")


def test_frontend_rejects_keywords():
    frontend = SqlFrontEnd()
    frontend.parse("Select + 1")
    assert not frontend.is_success()
    assert isinstance(frontend.exc, InvalidInput)


def test_frontend_rejects_overflow():
    frontend = SqlFrontEnd(raise_exception=True)
    with pytest.raises(ExpectedNumber):
        frontend.parse("18446744073709551616")


def test_frontend_rejects_very_long_number():
    frontend = SqlFrontEnd()
    frontend.parse("9" * 5000)
    assert not frontend.is_success()
    assert isinstance(frontend.exc, ExpectedNumber)

    frontend = SqlFrontEnd(raise_exception=True)
    with pytest.raises(ExpectedNumber):
        frontend.parse("9" * 5000)


# section: printer


def test_stringify():
    assert stringify(parse("1+2*3")) == "(1 + (2 * 3))"
    assert stringify(parse("1-2-3")) == "((1 - 2) - 3)"
    assert stringify(parse("(x + 1) / y")) == "((x + 1) / y)"
    assert stringify(Literal(7)) == "7"
    assert stringify(ColumnName("col_a")) == "col_a"


def test_stringify_roundtrip(expressions):
    """
    the printed form parses to the same tree
    """
    for text in expressions:
        expr = parse(text)
        assert parse(stringify(expr)) == expr


def test_visitor_without_handler():
    class EmptyVisitor(Visitor):
        pass

    with pytest.raises(HandlerNotFoundException):
        EmptyVisitor().visit(Literal(1))


# section: interface


def test_handle_expression(db):
    resp = db.handle_input("x*2+y")
    assert resp.success, resp.error_message
    assert resp.body == parse("x*2+y")


def test_handle_parse_failure(db):
    resp = db.handle_input("(1+2")
    assert not resp.success
    assert resp.status == FailureStage.Parse
    assert "Expected closing parenthesis" in resp.error_message


def test_handle_tokenize_failure(db):
    resp = db.handle_input("1 + !")
    assert not resp.success
    assert resp.status == FailureStage.Tokenize
    assert "Unexpected '!' without '='" in resp.error_message


def test_tokens_meta_command(db):
    resp = db.handle_input(".tokens a >= 1")
    assert resp.success
    assert resp.status == MetaCommandResult.Success
    assert resp.body == [
        Token(TokenType.IDENTIFIER, "a"),
        Token(TokenType.GREATER_EQUAL),
        Token(TokenType.INTEGER_NUMBER, 1),
        Token(TokenType.EOF),
    ]


def test_tokens_meta_command_without_text(db):
    resp = db.handle_input(".tokens")
    assert not resp.success
    assert resp.status == MetaCommandResult.InvalidArgument


def test_unrecognized_meta_command(db):
    resp = db.handle_input(".nuke")
    assert not resp.success
    assert resp.status == MetaCommandResult.UnrecognizedCommand


def test_help_meta_command(db, capsys):
    resp = db.handle_input(".help")
    assert resp.success
    assert ".tokens" in capsys.readouterr().out


def test_run_file(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("1 + 2 * 3\n\n(a - b) / c\n")
    resp = run_file(str(path))
    assert resp.success, resp.error_message
    out = capsys.readouterr().out
    assert "(1 + (2 * 3))" in out
    assert "((a - b) / c)" in out


def test_run_file_long_chain(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("+".join(["1"] * 3000) + "\nx * 2\n")
    resp = run_file(str(path))
    assert resp.success, resp.error_message
    out = capsys.readouterr().out
    assert "too deep to print" in out
    assert "(x * 2)" in out


def test_run_file_with_failures(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1 + 2\n(1 + 2\n")
    resp = run_file(str(path))
    assert not resp.success


def test_run_file_missing(tmp_path):
    resp = run_file(str(tmp_path / "missing.txt"))
    assert not resp.success


def test_parse_args_and_start(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("x\n")
    assert parse_args_and_start(["file", str(path)]) == EXIT_SUCCESS
    assert parse_args_and_start([]) == EXIT_FAILURE
    assert parse_args_and_start(["file"]) == EXIT_FAILURE
    assert parse_args_and_start(["bogus"]) == EXIT_FAILURE
