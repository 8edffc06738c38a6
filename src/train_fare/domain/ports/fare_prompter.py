"""Fare prompter port."""

from abc import ABC, abstractmethod


class FarePrompter(ABC):
    """Port for talking to the user during an interactive fare session."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show a prompt and return the line the user entered."""
        ...

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question and return True for yes."""
        ...

    @abstractmethod
    def show(self, message: str) -> None:
        """Display an informational message."""
        ...

    @abstractmethod
    def warn(self, message: str) -> None:
        """Display a recoverable error message."""
        ...
