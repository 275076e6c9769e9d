"""Logging setup."""

from medsearch.observability.logging import setup_logging

__all__ = ["setup_logging"]
