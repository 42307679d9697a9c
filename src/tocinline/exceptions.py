"""Custom exceptions for tocinline."""


class TocinlineError(Exception):
    """Base exception for tocinline operations."""


class HeadingInputError(TocinlineError):
    """Heading records could not be loaded or validated."""


class ParseError(TocinlineError):
    """Error during rendered HTML parsing."""
