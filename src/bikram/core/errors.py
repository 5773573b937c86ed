class BikramError(Exception):
    """Base error."""

class InvalidDateError(BikramError, ValueError):
    """Raised when (year, month, day) does not name a real day in its calendar."""

class OutOfRangeError(BikramError, ValueError):
    """Raised when a date or a computed result falls outside the calendar table."""

class InvalidArgumentError(BikramError, ValueError):
    """Raised on malformed input: negative numerals, unknown options, unparsable text."""

class CalendarDataError(BikramError):
    """Raised when month-length reference data is inconsistent."""
