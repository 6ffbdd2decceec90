"""Shell-wide state: parameters, arrays, flags, history and interrupt status."""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .feeder import Feeder


class ShellExit(SystemExit):
    """Raised when the shell terminates; carries the exit status as ``code``."""


def _default_params() -> dict[str, str]:
    params = dict(os.environ)
    params.update({"0": "sush", "?": "0", "PS1": "$ ", "PS2": "> "})
    return params


@dataclass
class ShellState:
    """Everything the parser and the expansions read from or write to."""

    params: dict[str, str] = field(default_factory=_default_params)
    arrays: dict[str, list[str]] = field(default_factory=dict)
    position_params: list[str] = field(default_factory=list)
    flags: str = ""
    read_stdin: bool = True
    history: list[str] = field(default_factory=list)
    shopts: set[str] = field(default_factory=set)
    sigint: threading.Event = field(default_factory=threading.Event)
    script_name: str = "-"
    word_eval_error: bool = False
    stdin: TextIO = field(default_factory=lambda: sys.stdin)

    def get_param(self, name: str) -> str:
        """Return the value of a parameter, or an empty string if it is unset."""
        if name == "$":
            return str(os.getpid())
        if name == "#":
            return str(len(self.position_params))
        if name in ("@", "*"):
            return " ".join(self.position_params)
        if name.isdigit() and name.isascii() and name != "0":
            index = int(name) - 1
            if index < len(self.position_params):
                return self.position_params[index]
            return ""
        if name in self.params:
            return self.params[name]
        values = self.arrays.get(name)
        if values:
            return values[0]
        return ""

    def set_param(self, name: str, value: str) -> None:
        self.params[name] = value

    def get_array(self, name: str, index: str) -> str:
        """Return one element of an array, or all of them joined when index is '@'."""
        values = self.arrays.get(name, [])
        if index == "@":
            return " ".join(values)
        try:
            position = int(index)
        except ValueError:
            return ""
        if 0 <= position < len(values):
            return values[position]
        return ""

    def set_array(self, name: str, values: list[str]) -> None:
        self.arrays[name] = list(values)

    def get_position_params(self) -> list[str]:
        return list(self.position_params)

    def exit(self) -> None:
        """Terminate the shell with the status held in '$?'."""
        try:
            status = int(self.get_param("?"))
        except ValueError:
            status = 1
        raise ShellExit(status)


def input_interrupt_check(feeder: Feeder, state: ShellState) -> bool:
    """Discard pending input after an interrupt; return True if one happened."""
    if not state.sigint.is_set():
        return False

    state.sigint.clear()
    state.set_param("?", "130")
    feeder.consume(len(feeder))
    return True