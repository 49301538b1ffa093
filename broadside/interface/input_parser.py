"""Parsing of raw console input into core values.

Each parser either returns a value the match can use directly or raises
InputParseError whose message is the re-prompt shown to the player.
"""

from enum import Enum

from ..models.vessel import Orientation


class ErrorType(Enum):
    """Classification of console input errors."""

    NOT_AN_INTEGER = "not_an_integer"
    BAD_ORIENTATION = "bad_orientation"


class InputParseError(Exception):
    """Raised when a line of input cannot be parsed."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Re-prompt to show the player
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class InputAttemptsExceeded(Exception):
    """Raised when a player keeps entering invalid input."""


def parse_integer(text: str) -> int:
    """Parse a whole number.

    Args:
        text: Raw line of input

    Returns:
        Parsed integer

    Raises:
        InputParseError: If the text is not an integer
    """
    try:
        return int(text.strip())
    except ValueError:
        raise InputParseError(
            ErrorType.NOT_AN_INTEGER, "Please enter a valid integer: "
        ) from None


def parse_grid_index(text: str) -> int:
    """Parse a 1-indexed grid position typed by a player into a 0-indexed one."""
    return parse_integer(text) - 1


def parse_orientation(text: str) -> Orientation:
    """Parse 'H'/'h' or 'V'/'v' into an Orientation.

    Raises:
        InputParseError: For any other input
    """
    letter = text.strip()
    if letter in ("H", "h"):
        return Orientation.HORIZONTAL
    if letter in ("V", "v"):
        return Orientation.VERTICAL
    raise InputParseError(ErrorType.BAD_ORIENTATION, "Please enter either H or V: ")
