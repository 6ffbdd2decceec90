"""Input buffer of the parser, with line feeding and token scanners."""

from __future__ import annotations

import sys
from typing import Callable, Iterable

from .error_message import internal
from .state import ShellState

_SPECIAL_PARAMS = "$?*@#-!_0123456789"
_SUBWORD_STOP = " \t\n;&|()<>{},\\'$/~\"*+-?@!.:=^"


class InputInterrupted(Exception):
    """Reading input was interrupted by the user."""


class InputEof(Exception):
    """The input reached its end."""


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_name_char(ch: str) -> bool:
    return ch == "_" or _is_digit(ch) or "a" <= ch <= "z" or "A" <= ch <= "Z"


class Feeder:
    """Text not yet parsed, plus the means to read more of it."""

    def __init__(self, text: str = "") -> None:
        self._remaining = text
        self._backup: list[str] = []
        self.nest: list[tuple[str, list[str]]] = [("", [])]
        self._lineno = 0

    def __repr__(self) -> str:
        return f"Feeder({self._remaining!r})"

    def consume(self, cutpos: int) -> str:
        cut = self._remaining[:cutpos]
        self._remaining = self._remaining[cutpos:]
        return cut

    def refer(self, cutpos: int) -> str:
        return self._remaining[:cutpos]

    def set_backup(self) -> None:
        self._backup.append(self._remaining)

    def pop_backup(self) -> None:
        if not self._backup:
            internal("backup error")
        self._backup.pop()

    def add_backup(self, line: str) -> None:
        """Append a newly read line to every saved backup."""
        updated = []
        for b in self._backup:
            if b.endswith("\\\n"):
                b = b[:-2]
            updated.append(b + line)
        self._backup = updated

    def rewind(self) -> None:
        if not self._backup:
            internal("backup error")
        self._remaining = self._backup.pop()

    @staticmethod
    def _read_line(state: ShellState, prompt: str) -> str:
        if not state.read_stdin:
            sys.stderr.write(state.get_param(prompt))
            sys.stderr.flush()
        try:
            line = state.stdin.readline()
        except KeyboardInterrupt:
            state.sigint.set()
            raise InputInterrupted from None
        except OSError as why:
            print(f"sush: {state.script_name}: {why}", file=sys.stderr)
            state.set_param("?", "1")
            state.exit()
        if not line:
            raise InputEof
        return line

    def _feed_additional_line_core(self, state: ShellState) -> None:
        if state.sigint.is_set():
            raise InputInterrupted
        line = self._read_line(state, "PS2")
        self.add_line(line, state)
        self.add_backup(line)

    def feed_additional_line(self, state: ShellState) -> bool:
        """Read a continuation line; return False if parsing must stop."""
        try:
            self._feed_additional_line_core(state)
        except InputEof:
            print("sush: syntax error: unexpected end of file", file=sys.stderr)
            state.set_param("?", "2")
            if "S" in state.flags:
                return False
            state.exit()
        except InputInterrupted:
            state.set_param("?", "130")
            return False
        return True

    def feed_line(self, state: ShellState) -> None:
        """Read a new line; raise InputEof or InputInterrupted on failure."""
        line = self._read_line(state, "PS1")
        self.add_line(line, state)

    def add_line(self, line: str, state: ShellState) -> None:
        if "v" in state.flags:
            sys.stderr.write(line)
        self._lineno += 1
        state.set_param("LINENO", str(self._lineno))
        self._remaining += line

    def replace(self, num: int, to: str) -> None:
        self.consume(num)
        self._remaining = to + self._remaining

    def starts_with(self, prefix: str) -> bool:
        return self._remaining.startswith(prefix)

    def __len__(self) -> int:
        return len(self._remaining)

    # scanners

    def _feed_and_connect(self, state: ShellState) -> None:
        self._remaining = self._remaining[:-2]
        try:
            self._feed_additional_line_core(state)
        except (InputEof, InputInterrupted):
            pass

    def _backslash_check_and_feed(self, starts: Iterable[str], state: ShellState) -> None:
        if any(self._remaining.startswith(s + "\\\n") for s in starts):
            self._feed_and_connect(state)

    def _scanner_chars(self, judge: Callable[[str], bool], state: ShellState) -> int:
        while True:
            ans = 0
            for ch in self._remaining:
                if not judge(ch):
                    break
                ans += 1
            if self._remaining[ans:] == "\\\n":
                self._feed_and_connect(state)
            else:
                return ans

    def _scanner_one_of(self, cands: Iterable[str]) -> int:
        for c in cands:
            if self.starts_with(c):
                return len(c)
        return 0

    def _char_at(self, pos: int) -> str:
        return self._remaining[pos] if pos < len(self._remaining) else ""

    def scanner_subword_symbol(self) -> int:
        return self._scanner_one_of(["{", "}", ",", "$", "~", "/", "*", "?",
                                     "@", "!", "+", "-", ".", ":", "=", "^", ","])

    def scanner_math_symbol(self, state: ShellState) -> int:
        self._backslash_check_and_feed([""], state)
        return self._scanner_one_of(["/", "*", "?", ":", "+", "-", "=", "^", "%", ","])

    def scanner_unary_operator(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["+", "-", "!", "~"], state)
        if self._char_at(1) == "=":
            return 0
        return self._scanner_one_of(["+", "-", "!", "~"])

    def scanner_math_output_format(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["[#", "["], state)
        if not self.starts_with("[#"):
            return 0

        ans = 2
        ok = False
        for i, ch in enumerate(self._remaining[2:]):
            if i == 0 and ch == "#":
                ans += 1
                continue
            if _is_digit(ch):
                ok = True
                ans += 1
                continue
            if ch == "]" and ok:
                return ans + 1
            break
        return 0

    def scanner_extglob_head(self) -> int:
        return self._scanner_one_of(["?(", "*(", "+(", "@(", "!("])

    def scanner_escaped_char(self, state: ShellState) -> int:
        if self.starts_with("\\\n"):
            self._feed_and_connect(state)
        if not self.starts_with("\\"):
            return 0
        return 2 if len(self._remaining) > 1 else 1

    def scanner_history_expansion(self, state: ShellState) -> int:
        """Length of a leading "!$" history reference, or 0."""
        return self._scanner_one_of(["!$"])

    def scanner_dollar_special_and_positional_param(self, state: ShellState) -> int:
        if not self.starts_with("$"):
            return 0
        self._backslash_check_and_feed(["$"], state)
        c = self._char_at(1)
        return 2 if c and c in _SPECIAL_PARAMS else 0

    def scanner_special_and_positional_param(self) -> int:
        c = self._char_at(0)
        return 1 if c and c in _SPECIAL_PARAMS else 0

    def scanner_subword(self) -> int:
        for i, ch in enumerate(self._remaining):
            if ch in _SUBWORD_STOP:
                return i
        return len(self._remaining)

    def scanner_double_quoted_subword(self, state: ShellState) -> int:
        return self._scanner_chars(lambda ch: ch not in "\"\\$", state)

    def scanner_extglob_subword(self, state: ShellState) -> int:
        return self._scanner_chars(lambda ch: ch not in ")|,}", state)

    def scanner_single_quoted_subword(self, state: ShellState) -> int:
        if not self.starts_with("'"):
            return 0
        if self.starts_with("''"):
            return 2

        while True:
            end = self._remaining.find("'", 1)
            if end != -1:
                return end + 1
            if not self.feed_additional_line(state):
                return 0

    def scanner_inner_subscript(self, state: ShellState) -> int:
        return self._scanner_chars(lambda ch: ch != "]", state)

    def scanner_unknown_in_param_brace(self) -> int:
        c = self._char_at(0)
        return 1 if c and c not in "'$" else 0

    def scanner_blank(self, state: ShellState) -> int:
        return self._scanner_chars(lambda ch: ch in " \t", state)

    def scanner_multiline_blank(self, state: ShellState) -> int:
        return self._scanner_chars(lambda ch: ch in " \t\n", state)

    def scanner_binary_operator(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["<<", ">>", "+", "-", "/", "*", "%", "<",
                                        ">", "=", "&", "|", "^", "/", "%"], state)
        return self._scanner_one_of(["<<=", ">>=",
            "&&", "||", "**", "==", "!=", "*=", "/=", "%=", "+=", "-=", "&=", "^=", "|=",
            ">>", "<<", "<=", ">=", "&", "^", "=", "+", "-", "/", "*", "%", "<", ">",
            "|", "^", ","])

    def scanner_uint(self, state: ShellState) -> int:
        return self._scanner_chars(_is_digit, state)

    def scanner_name(self, state: ShellState) -> int:
        if _is_digit(self._char_at(0) or "0"):
            return 0
        return self._scanner_chars(_is_name_char, state)

    def scanner_name_and_equal(self, state: ShellState) -> int:
        name_len = self.scanner_name(state)
        if name_len == 0:
            return 0
        return name_len + 1 if self._char_at(name_len) == "=" else 0

    def scanner_job_end(self) -> int:
        return self._scanner_one_of([";", "&", "\n"])

    def scanner_and_or(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["|", "&"], state)
        return self._scanner_one_of(["||", "&&"])

    def scanner_pipe(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["|"], state)
        if self.starts_with("||"):
            return 0
        return self._scanner_one_of(["|&", "|"])

    def scanner_comment(self) -> int:
        if not self.starts_with("#"):
            return 0
        end = self._remaining.find("\n")
        return len(self._remaining) if end == -1 else end

    def scanner_redirect_symbol(self, state: ShellState) -> int:
        self._backslash_check_and_feed([">", "&"], state)
        return self._scanner_one_of(["&>", ">&", ">>", "<", ">"])

    def scanner_parameter_default_symbol(self) -> int:
        return self._scanner_one_of([":-", ":=", ":?", ":+"])

    def scanner_test_check_option(self, state: ShellState) -> int:
        if self._char_at(0) != "-":
            return 0
        self._backslash_check_and_feed(["-"], state)
        c = self._char_at(1)
        return 2 if c and c in "abcdefghknoprstuvwxzGLNOS" else 0

    def scanner_test_compare_op(self, state: ShellState) -> int:
        self._backslash_check_and_feed(["-", "-e", "-n", "-o", "=", "!"], state)
        return self._scanner_one_of(["-ef", "-nt", "-ot", "==", "=", "!=", "<", ">",
                                     "-eq", "-ne", "-lt", "-le", "-gt", "-ge"])