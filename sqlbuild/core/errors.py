"""
Errors raised while building a query.

Every error aborts the whole call; no partial SQL is ever returned.
"""


class QueryBuildError(ValueError):
    """Base class: template and arguments cannot produce a query."""

    pass


class TooManyArgumentsError(QueryBuildError):
    """More arguments than ``?`` markers remain after conditional blocks."""

    pass


class NotEnoughArgumentsError(QueryBuildError):
    """``?`` markers remain after every argument was consumed."""

    pass


class InvalidArgumentError(QueryBuildError):
    """Value cannot be used with the marker type (e.g. scalar for ``?a``)."""

    pass


class UnsupportedTypeError(QueryBuildError):
    """Value type has no SQL literal form."""

    pass
