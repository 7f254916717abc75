"""Exceptions raised by the CSS object model and parser"""

from .scanner import ParserError, UnexpectedEndError   # noqa


class CSSError(Exception):

    """Base class for errors raised by the CSS object model

    Syntax errors are reported with :class:`CSSSyntaxError` instead,
    which shares a common base (ValueError) with the other parser
    errors."""
    pass


class CSSIndexError(CSSError, IndexError):

    """Raised when a rule index is out of range"""
    pass


class CSSSyntaxError(ParserError):

    """Raised when a required CSS delimiter is missing

    For example, a missing ':' between a property name and its value in
    a stylesheet or a selector with neither a name nor a class."""
    pass
