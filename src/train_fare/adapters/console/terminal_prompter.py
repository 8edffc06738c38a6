"""Terminal implementation of the fare prompter port."""

import sys
from collections.abc import Callable
from typing import TextIO

from train_fare.domain.ports import FarePrompter

YES_ANSWERS = ("y", "yes")


class TerminalFarePrompter(FarePrompter):
    """Reads answers from stdin and writes prompts to stdout."""

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        """Initialize with optional streams, defaulting to the process streams."""
        self._read_line = read_line or input
        self._out = out or sys.stdout
        self._err = err or sys.stderr

    def ask(self, prompt: str) -> str:
        """Print the prompt and read one line.

        Raises:
            EOFError: If the input stream is closed.
        """
        print(prompt, file=self._out, flush=True)
        return self._read_line()

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question. Anything but y/yes counts as no."""
        answer = self.ask(prompt)
        return answer.strip().lower() in YES_ANSWERS

    def show(self, message: str) -> None:
        print(message, file=self._out)

    def warn(self, message: str) -> None:
        print(message, file=self._err)
