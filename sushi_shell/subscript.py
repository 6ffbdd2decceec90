"""Array subscripts such as [0] or [@]."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .feeder import Feeder
    from .state import ShellState


@dataclass
class Subscript:
    """The bracketed index after an array name, brackets included."""

    text: str = ""

    def eval(self) -> str | None:
        """Return the index if it is a single digit or '@', else None."""
        inner = self.text[1:-1]
        if len(inner) == 1 and ("0" <= inner <= "9" or inner == "@"):
            return inner
        return None

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> Subscript | None:
        if not feeder.starts_with("["):
            return None

        text = ""
        while not feeder.starts_with("]"):
            length = feeder.scanner_inner_subscript(state)
            if length == 0 and not feeder.feed_additional_line(state):
                return None
            text += feeder.consume(length)

        text += feeder.consume(1)
        return cls(text)