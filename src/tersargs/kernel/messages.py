"""Error message templates for recoverable scan errors."""

from typing import Iterable, Optional

from tersargs.codes import ErrorCode


def unexpected_arguments_message(characters: Iterable[str]) -> str:
    return f"Argument(s) -{''.join(characters)} unexpected."


def issue_message(code: ErrorCode, argument: str, parameter: Optional[str] = None) -> str:
    """
    Render the message for a single issue.

    UNEXPECTED_ARGUMENT renders only its own character here; aggregation over
    every unexpected character is done by ParseResult.
    """
    if code == ErrorCode.UNEXPECTED_ARGUMENT:
        return unexpected_arguments_message(argument)
    if code == ErrorCode.MISSING_STRING:
        return f"Could not find string parameter for -{argument}."
    if code == ErrorCode.MISSING_INTEGER:
        return f"Could not find integer parameter for -{argument}."
    if code == ErrorCode.INVALID_INTEGER:
        return f"Argument -{argument} expects an integer but was '{parameter}'."
    raise ValueError(f"No message for error code {code!r}")
