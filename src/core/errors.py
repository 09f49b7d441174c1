"""Respack exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RespackError(Exception):
    """Base exception for all respack failures."""


class RespackConfigError(RespackError):
    """Raised for invalid runtime configuration or tabular dialect."""


class RespackSourceError(RespackError):
    """Raised when source resource files or module paths cannot be read."""


class RespackArchiveError(RespackError):
    """Raised for unreadable or unwritable exchange packages."""


class RespackParseError(RespackError):
    """Raised when tabular content cannot be tokenized."""


class RespackImportError(RespackError):
    """Raised when merging translations into resource files fails."""


class RespackEventError(RespackError):
    """Raised when a lifecycle event listener fails."""


class RespackRunSpecError(RespackError):
    """Raised for invalid or unsupported run-spec configuration."""
