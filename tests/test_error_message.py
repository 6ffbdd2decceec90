import pytest

from sushi_shell import error_message
from sushi_shell.error_message import InternalError


class _FakeState:
    def __init__(self, read_stdin, params):
        self.read_stdin = read_stdin
        self._params = params

    def get_param(self, name):
        return self._params.get(name, "")


def test_internal_str_prefix():
    assert error_message.internal_str("boom") == "SUSH INTERNAL ERROR: boom"


def test_internal_raises_with_message():
    with pytest.raises(InternalError) as info:
        error_message.internal("empty nest")
    assert str(info.value) == error_message.internal_str("empty nest")


def test_exponent_mentions_token():
    msg = error_message.exponent("-3")
    assert msg.startswith("exponent less than 0")
    assert msg.endswith('(error token is "-3")')


def test_recursion_repeats_token():
    msg = error_message.recursion("a")
    assert msg.startswith("a: ")
    assert msg.endswith('(error token is "a")')
    assert "expression recursion level exceeded" in msg


def test_assignment_mentions_right_side():
    msg = error_message.assignment("1+2")
    assert msg.startswith("attempted assignment to non-variable")
    assert '"1+2"' in msg


def test_syntax_repeats_token():
    msg = error_message.syntax("+")
    assert msg.startswith("+: syntax error: operand expected")
    assert msg.endswith('(error token is "+")')


def test_syntax_in_cond_expr_quotes_token():
    msg = error_message.syntax_in_cond_expr("]]")
    assert msg.startswith("syntax error in conditional expression: unexpected token")
    assert msg.endswith("`]]'")


def test_report_from_stdin_shows_line(capsys):
    state = _FakeState(True, {"0": "sush", "LINENO": "7"})
    error_message.report("bad thing", state, False)
    err = capsys.readouterr().err
    assert err == "sush: line 7: bad thing\n"


def test_report_with_name(capsys):
    state = _FakeState(False, {"0": "sush"})
    error_message.report("bad thing", state, True)
    assert capsys.readouterr().err == "sush: bad thing\n"


def test_report_plain(capsys):
    state = _FakeState(False, {"0": "sush"})
    error_message.report("bad thing", state, False)
    assert capsys.readouterr().err == "bad thing\n"