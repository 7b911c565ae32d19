"""Typed failures raised by datasets and summary operations."""


class SummaryError(Exception):
    """Base class for all descriptive summary failures.

    Callers that run several summaries can catch this to skip one summary and carry on.
    """


class TypeMismatchError(SummaryError, TypeError):
    """An operation required a numeric attribute and got a categorical one, or vice versa."""


class InsufficientDataError(SummaryError, ValueError):
    """Fewer non-missing values than the statistic needs."""


class SchemaMismatchError(SummaryError, LookupError):
    """A referenced attribute does not exist, or a frame does not match the declared schema."""


__all__ = [
    "InsufficientDataError",
    "SchemaMismatchError",
    "SummaryError",
    "TypeMismatchError",
]
