"""Shared helpers for the Monkey package."""

from .logger import get_logger

__all__ = ["get_logger"]
