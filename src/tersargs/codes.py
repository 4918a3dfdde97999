"""Code constants for tersargs schemas and scan results.

These constants prevent stringly-typed error codes and ensure
client code compares against the right values.
"""

from enum import Enum


class ArgumentKind(str, Enum):
    """Value kind declared for a schema identifier."""

    BOOLEAN = "BOOLEAN"  # suffix ""
    STRING = "STRING"  # suffix "*"
    INTEGER = "INTEGER"  # suffix "#"


class ErrorCode(str, Enum):
    """Recoverable scan error codes."""

    OK = "OK"
    MISSING_STRING = "MISSING_STRING"
    MISSING_INTEGER = "MISSING_INTEGER"
    INVALID_INTEGER = "INVALID_INTEGER"
    UNEXPECTED_ARGUMENT = "UNEXPECTED_ARGUMENT"


class SchemaErrorCode(str, Enum):
    """Schema authoring error codes (never recoverable at scan time)."""

    BAD_CHARACTER = "BAD_CHARACTER"
    INVALID_FORMAT = "INVALID_FORMAT"
