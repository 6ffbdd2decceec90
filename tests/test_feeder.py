import io

import pytest

from sushi_shell.error_message import InternalError
from sushi_shell.feeder import Feeder, InputEof
from sushi_shell.state import ShellExit, ShellState


def make_state(text="", flags=""):
    return ShellState(params={"0": "sush", "?": "0"}, stdin=io.StringIO(text), flags=flags)


def test_consume_and_refer():
    feeder = Feeder("echo hi")
    assert feeder.refer(4) == "echo"
    assert len(feeder) == len("echo hi")
    assert feeder.consume(4) == "echo"
    assert feeder.starts_with(" hi")


def test_backup_and_rewind():
    feeder = Feeder("abc def")
    feeder.set_backup()
    feeder.consume(4)
    feeder.rewind()
    assert feeder.consume(len(feeder)) == "abc def"


def test_pop_backup_keeps_position():
    feeder = Feeder("abc def")
    feeder.set_backup()
    feeder.consume(4)
    feeder.pop_backup()
    assert feeder.starts_with("def")
    with pytest.raises(InternalError):
        feeder.rewind()


def test_pop_backup_empty_raises():
    with pytest.raises(InternalError):
        Feeder("x").pop_backup()


def test_add_backup_joins_continuation():
    feeder = Feeder("echo \\\n")
    feeder.set_backup()
    feeder.add_backup("next\n")
    feeder.consume(len(feeder))
    feeder.rewind()
    assert feeder.consume(len(feeder)) == "echo next\n"


def test_replace():
    feeder = Feeder("!$ rest")
    feeder.replace(2, "word")
    assert feeder.consume(len(feeder)) == "word rest"


def test_feed_line_reads_and_counts():
    state = make_state("echo a\necho b\n")
    feeder = Feeder()
    feeder.feed_line(state)
    assert feeder.consume(len(feeder)) == "echo a\n"
    assert state.get_param("LINENO") == "1"
    feeder.feed_line(state)
    assert state.get_param("LINENO") == "2"


def test_feed_line_eof():
    state = make_state("")
    with pytest.raises(InputEof):
        Feeder().feed_line(state)


def test_verbose_flag_echoes(capsys):
    state = make_state("ls\n", flags="v")
    Feeder().feed_line(state)
    assert capsys.readouterr().err == "ls\n"


def test_additional_line_eof_in_source_mode():
    state = make_state("", flags="S")
    assert Feeder("x").feed_additional_line(state) is False
    assert state.get_param("?") == "2"


def test_additional_line_eof_exits():
    state = make_state("")
    with pytest.raises(ShellExit) as info:
        Feeder("x").feed_additional_line(state)
    assert info.value.code == 2


def test_additional_line_interrupted():
    state = make_state("more\n")
    state.sigint.set()
    feeder = Feeder("x")
    assert feeder.feed_additional_line(state) is False
    assert state.get_param("?") == "130"
    assert feeder.consume(len(feeder)) == "x"


def test_scanner_name():
    state = make_state()
    assert Feeder("abc_1 x").scanner_name(state) == len("abc_1")
    assert Feeder("1abc").scanner_name(state) == 0
    assert Feeder("").scanner_name(state) == 0


def test_scanner_name_and_equal():
    state = make_state()
    feeder = Feeder("a=1")
    n = feeder.scanner_name_and_equal(state)
    assert feeder.consume(n) == "a="
    assert Feeder("abc").scanner_name_and_equal(state) == 0


def test_single_quoted():
    state = make_state()
    feeder = Feeder("'abc' x")
    assert feeder.consume(feeder.scanner_single_quoted_subword(state)) == "'abc'"
    assert Feeder("'' x").scanner_single_quoted_subword(state) == 2
    assert Feeder("abc").scanner_single_quoted_subword(state) == 0


def test_single_quoted_spans_lines():
    state = make_state("cd'\n")
    feeder = Feeder("'ab\n")
    n = feeder.scanner_single_quoted_subword(state)
    assert feeder.consume(n) == "'ab\ncd'"


def test_blank_with_line_continuation():
    state = make_state("  x\n")
    feeder = Feeder("  \\\n")
    n = feeder.scanner_blank(state)
    assert feeder.consume(n) == "    "
    assert feeder.starts_with("x")


def test_binary_operator_longest():
    state = make_state()
    for op in ["<<=", "**", "&&", "<", ","]:
        feeder = Feeder(op + " 1")
        assert feeder.consume(feeder.scanner_binary_operator(state)) == op


def test_math_output_format():
    state = make_state()
    for text in ["[#16]", "[##2]"]:
        feeder = Feeder(text + "x")
        assert feeder.consume(feeder.scanner_math_output_format(state)) == text
    assert Feeder("[#]").scanner_math_output_format(state) == 0


def test_dollar_special():
    state = make_state()
    assert Feeder("$?").scanner_dollar_special_and_positional_param(state) == 2
    assert Feeder("$a").scanner_dollar_special_and_positional_param(state) == 0
    assert Feeder("@x").scanner_special_and_positional_param() == 1


def test_unary_operator():
    state = make_state()
    assert Feeder("+=1").scanner_unary_operator(state) == 0
    assert Feeder("-1").scanner_unary_operator(state) == 1


def test_comment():
    feeder = Feeder("# hi\nnext")
    assert feeder.consume(feeder.scanner_comment()) == "# hi"
    assert Feeder("x # y").scanner_comment() == 0


def test_pipe():
    state = make_state()
    assert Feeder("|| x").scanner_pipe(state) == 0
    feeder = Feeder("|& x")
    assert feeder.consume(feeder.scanner_pipe(state)) == "|&"


def test_escaped_char():
    state = make_state()
    assert Feeder("\\a").scanner_escaped_char(state) == 2
    assert Feeder("\\").scanner_escaped_char(state) == 1
    assert Feeder("a").scanner_escaped_char(state) == 0


def test_subword_stops_at_symbols():
    feeder = Feeder("abc$def")
    assert feeder.consume(feeder.scanner_subword()) == "abc"


def test_test_options():
    state = make_state()
    assert Feeder("-f x").scanner_test_check_option(state) == 2
    assert Feeder("-q x").scanner_test_check_option(state) == 0
    feeder = Feeder("-ef b")
    assert feeder.consume(feeder.scanner_test_compare_op(state)) == "-ef"


def test_redirect_and_default_symbols():
    state = make_state()
    feeder = Feeder("&> f")
    assert feeder.consume(feeder.scanner_redirect_symbol(state)) == "&>"
    feeder = Feeder(":-x")
    assert feeder.consume(feeder.scanner_parameter_default_symbol()) == ":-"