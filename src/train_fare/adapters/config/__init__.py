"""Configuration adapters."""

from train_fare.adapters.config.app_config import AppConfig
from train_fare.adapters.config.distance_table_loader import DistanceTableLoader

__all__ = ["AppConfig", "DistanceTableLoader"]
