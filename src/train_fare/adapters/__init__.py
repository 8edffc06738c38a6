"""Adapters layer - configuration and console I/O."""
