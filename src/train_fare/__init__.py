"""Train fare calculator: distance lookup and fare rule pipeline."""

__version__ = "0.1.0"
