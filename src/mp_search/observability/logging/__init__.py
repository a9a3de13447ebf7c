"""Observability – structlog configuration and logger access."""
from mp_search.observability.logging.factory import JsonLoggerFactory
from mp_search.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
