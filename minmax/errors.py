"""Exceptions raised by the search engine.

All of them signal a broken contract, either by the caller or inside the
engine itself. None of them is meant to be caught and recovered from.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by the search engine."""


class PreconditionError(SearchError, ValueError):
    """Search entry point called with bad arguments (plies, terminal root)."""


class ChoreographyError(SearchError, RuntimeError):
    """A search pass ran out of order, e.g. reading an evaluation too early."""


class InvariantViolation(SearchError, AssertionError):
    """The game tree or the game rules are in an impossible state."""
