"""Exception hierarchy for tersargs."""

from typing import Optional

from tersargs.codes import SchemaErrorCode


class TersargsError(Exception):
    """Base class for all tersargs exceptions."""


class SchemaError(TersargsError, ValueError):
    """Schema text could not be compiled.

    A malformed schema is a bug in the calling program, not bad user input,
    so it is raised rather than reported through ParseResult.
    """

    def __init__(
        self,
        message: str,
        *,
        code: SchemaErrorCode,
        schema_text: str,
        element: str,
        element_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.schema_text = schema_text
        self.element = element
        self.element_id = element_id


class NoErrorToReport(TersargsError, RuntimeError):
    """An error message was requested from a result that has no errors."""
