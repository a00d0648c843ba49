"""Shared helpers for md2docx."""

from .logger import get_logger

__all__ = ["get_logger"]
