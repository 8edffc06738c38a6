"""Console adapters."""

from train_fare.adapters.console.fare_formatter import FareFormatter
from train_fare.adapters.console.terminal_prompter import TerminalFarePrompter

__all__ = ["FareFormatter", "TerminalFarePrompter"]
