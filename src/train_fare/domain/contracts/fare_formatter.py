"""Protocol for formatting fare quotes."""

from typing import Protocol

from train_fare.domain.models.fare_quote import FareQuote


class FareFormatterProtocol(Protocol):
    """Protocol for turning fare quotes into user-facing text."""

    def format_amount(self, amount: float) -> str:
        """Format a fare amount in yuan.

        Args:
            amount: The amount to format.

        Returns:
            Amount rounded to two decimals, e.g. "5.10".
        """
        ...

    def format_distance_fare(self, quote: FareQuote) -> str:
        """Format the fare after the distance rule, with origin, destination and distance."""
        ...

    def format_vip_fare(self, quote: FareQuote) -> str:
        """Format the fare after the VIP discount."""
        ...

    def format_total_fare(self, quote: FareQuote) -> str:
        """Format the final fare including the additional fee."""
        ...
