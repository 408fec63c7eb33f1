"""Exception hierarchy for html_data.

Every error raised by the library derives from :class:`HtmlDataError` and from
the closest builtin, so callers may catch either the library base class or the
familiar ``ValueError`` / ``LookupError`` / ``TypeError``.
"""
from __future__ import annotations


class HtmlDataError(Exception):
    """Base class for all html_data errors."""


class InvalidArgumentError(HtmlDataError, ValueError):
    """Raised when a configuration or render argument has the wrong shape."""


class InvalidAttributeNameError(HtmlDataError, ValueError):
    """Raised when an attribute key is empty, numeric or not a string."""


class InvalidAttributeValueError(HtmlDataError, ValueError):
    """Raised when an attribute value is neither scalar nor ``None``."""


class MissingKeyError(HtmlDataError, LookupError):
    """Raised when a required key is absent from a mapping."""


class MissingColumnError(MissingKeyError):
    """Raised when strict column ordering names a key a row lacks."""


class CellTypeError(HtmlDataError, TypeError):
    """Raised when a cell or header entry is not scalar, ``None`` or a mapping."""


__all__ = [
    "CellTypeError",
    "HtmlDataError",
    "InvalidArgumentError",
    "InvalidAttributeNameError",
    "InvalidAttributeValueError",
    "MissingColumnError",
    "MissingKeyError",
]
