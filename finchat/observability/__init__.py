"""Logging, correlation IDs and request logging middleware."""

from finchat.observability.correlation import get_correlation_id
from finchat.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id"]
