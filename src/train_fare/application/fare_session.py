"""Interactive fare session use case."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from train_fare.application.fare_rules import parse_fare_amount
from train_fare.application.services import FareCalculationService
from train_fare.domain.errors import FareError
from train_fare.domain.models import FareQuote, OtherRule, VipRule

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from train_fare.domain.contracts import FareFormatterProtocol
    from train_fare.domain.ports import FarePrompter

T = TypeVar("T")


class InteractiveFareSession:
    """Walks the user through a fare computation.

    Stages are fixed and linear: distance fare, optional VIP discount,
    optional additional fee. Invalid input re-prompts up to max_attempts
    times; after that the last error propagates.
    """

    def __init__(
        self,
        service: FareCalculationService,
        prompter: "FarePrompter",
        formatter: "FareFormatterProtocol",
        max_attempts: int = 3,
    ) -> None:
        self._service = service
        self._prompter = prompter
        self._formatter = formatter
        self._max_attempts = max(1, max_attempts)

    def run(self) -> FareQuote:
        """Run the session and return the final quote."""
        self._prompter.show("Metro fare calculation")
        self._prompter.show("-----------------------")

        origin = self._retry(lambda: self._read_station("Enter the starting station name:"))
        destination = self._retry(lambda: self._read_station("Enter destination station name:"))

        quote = self._service.quote(origin, destination)
        self._prompter.show("-----------------------")
        self._prompter.show(self._formatter.format_distance_fare(quote))
        self._prompter.show("-----------------------")

        if self._prompter.confirm("Is it a VIP (y/n):"):
            quote = self._service.extend_quote(
                quote, VipRule(discount_factor=self._service.settings.vip_discount)
            )
            self._prompter.show("-----------------------")
            self._prompter.show("Enjoy Member Discount")
            self._prompter.show(self._formatter.format_vip_fare(quote))

        if self._prompter.confirm("Is there any other fee (y/n):"):
            name = self._prompter.ask("Enter the cost name:").strip()
            amount = self._retry(lambda: parse_fare_amount(self._prompter.ask("Input fee (yuan):")))
            quote = self._service.extend_quote(
                quote, OtherRule(name=name, additional_fare=amount)
            )
            self._prompter.show("-----------------------")
            self._prompter.show("Total fare")
            self._prompter.show(self._formatter.format_total_fare(quote))

        return quote

    def _read_station(self, prompt: str) -> str:
        return self._service.require_station(self._prompter.ask(prompt).strip())

    def _retry(self, read: Callable[[], T]) -> T:
        """Call read until it succeeds or the attempts are used up."""
        attempt = 1
        while True:
            try:
                return read()
            except FareError as e:
                logger.debug(f"Invalid input on attempt {attempt}/{self._max_attempts}: {e}")
                if attempt >= self._max_attempts:
                    raise
                self._prompter.warn(f"{e}. Please try again.")
                attempt += 1
