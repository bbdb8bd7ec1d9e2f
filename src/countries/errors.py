"""Exception hierarchy for the countries package."""

from __future__ import annotations


class CountriesError(Exception):
    """Base class for errors raised by the countries package."""


class InvalidTransitionError(CountriesError):
    """A loadable state transition was requested from the wrong source state.

    This signals a programming error in the caller rather than a recoverable
    runtime condition, so it is never caught inside the package.
    """
