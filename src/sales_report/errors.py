"""Exceptions raised by the sales report pipeline."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a dataset, an element of it, or a strategy is unusable.

    The whole pipeline is aborted before any accumulation takes place.
    """


__all__ = ["InvalidInputError"]
