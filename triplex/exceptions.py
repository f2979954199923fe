"""Core triplex exceptions.

Structural invalidity of untrusted data is never reported through an
exception: ``validate()`` returns ``False``. The classes here describe
programming errors, i.e. violations of a schema's preconditions.
"""

__all__ = ['APIError', 'DecodeError', 'EncodingError', 'TriplexError', 'UnreachableError']


class TriplexError(Exception):
    """Base exception for triplex package errors.

    Users should be able to use this base class to catch errors
    emitted by triplex.
    """


class APIError(TriplexError):
    """A schema was used in a way that violates its contract."""


class UnreachableError(APIError):
    """A union-like schema could not route a value to any of its branches.

    The value did not satisfy any discriminating predicate, so the caller
    handed the schema something outside of its domain.
    """


class EncodingError(APIError, ValueError):
    """A value could not be found in the lookup table of an enumeration schema."""


class DecodeError(APIError, ValueError):
    """Parsed data did not have the structure required by the schema."""
