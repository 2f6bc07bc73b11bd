"""Telemetry: logging setup."""

from poms.shared.telemetry.logging import RequestContextFilter, setup_logging

__all__ = [
    "RequestContextFilter",
    "setup_logging",
]
