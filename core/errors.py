from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a required input field is absent or not numeric."""
