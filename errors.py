from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised before any work starts when a required input is missing or invalid."""
