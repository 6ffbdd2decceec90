"""Error reporting helpers and message builders for the shell."""

from __future__ import annotations

import sys
from typing import NoReturn, Protocol


class InternalError(RuntimeError):
    """Raised when the shell reaches a state that should be impossible."""


class _ReportTarget(Protocol):
    read_stdin: bool

    def get_param(self, name: str) -> str: ...


def report(message: str, state: _ReportTarget, show_name: bool) -> None:
    """Print an error message to stderr, prefixed as the shell's state demands."""
    name = state.get_param("0")
    if state.read_stdin:
        lineno = state.get_param("LINENO")
        print(f"{name}: line {lineno}: {message}", file=sys.stderr)
    elif show_name:
        print(f"{name}: {message}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


def internal_str(message: str) -> str:
    """Build the text of an internal error."""
    return f"SUSH INTERNAL ERROR: {message}"


def internal(message: str) -> NoReturn:
    """Raise an InternalError carrying the given message."""
    raise InternalError(internal_str(message))


def exponent(token: str) -> str:
    return f'exponent less than 0 (error token is "{token}")'


def recursion(token: str) -> str:
    return f'{token}: expression recursion level exceeded (error token is "{token}")'


def assignment(right: str) -> str:
    return f'attempted assignment to non-variable (error token is "{right}")'


def syntax(token: str) -> str:
    return f'{token}: syntax error: operand expected (error token is "{token}")'


def syntax_in_cond_expr(token: str) -> str:
    return f"syntax error in conditional expression: unexpected token `{token}'"