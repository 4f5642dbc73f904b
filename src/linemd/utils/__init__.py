"""Utility helpers for linemd."""

from linemd.utils.logger import get_logger

__all__ = ["get_logger"]
