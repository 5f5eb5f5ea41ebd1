"""Observability: logging and metrics for emitters and receivers."""

from notifykit.observability.logger import get_logger
from notifykit.observability.metrics import Metrics

__all__ = ["get_logger", "Metrics"]
