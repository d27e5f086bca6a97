"""
Exceptions raised by the clause builders and the statement helpers.
"""


class CriteriaError(Exception):
    """Base exception for SQL criteria errors."""
    pass


class InvalidInputError(CriteriaError, ValueError):
    """Exception raised when a builder receives malformed input.

    Raised eagerly, before any clause text is returned. The caller must
    fix the input; retrying with the same arguments fails the same way.
    """
    pass


class StatementExecutionError(CriteriaError):
    """Exception raised when executing a generated statement fails."""
    pass
