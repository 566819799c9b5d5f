"""Telemetry and logging utilities."""

from .logger import WorkflowCommandFormatter, configure_logging

__all__ = ["configure_logging", "WorkflowCommandFormatter"]
