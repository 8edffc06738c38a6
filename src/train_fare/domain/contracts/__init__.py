"""Contracts (protocols) shared between application and adapters."""

from train_fare.domain.contracts.fare_formatter import FareFormatterProtocol

__all__ = ["FareFormatterProtocol"]
