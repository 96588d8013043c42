"""Errors raised by hbs_loader."""

from __future__ import annotations


class HbsLoaderError(Exception):
    """Base class for hbs_loader errors."""


class InvalidArgumentError(HbsLoaderError, ValueError):
    """Raised when a loader is configured with a missing required value."""
