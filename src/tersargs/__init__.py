"""tersargs: schema-driven parsing of single-letter command-line flags."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tersargs")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from tersargs.api import Args, parse
from tersargs.codes import ArgumentKind, ErrorCode, SchemaErrorCode
from tersargs.errors import NoErrorToReport, SchemaError, TersargsError
from tersargs.kernel.scanner import ArgumentIssue, ParseResult, scan
from tersargs.kernel.schema import Schema, compile_schema

__all__ = [
    "__version__",
    "Args",
    "parse",
    "scan",
    "compile_schema",
    "Schema",
    "ParseResult",
    "ArgumentIssue",
    "ArgumentKind",
    "ErrorCode",
    "SchemaErrorCode",
    "TersargsError",
    "SchemaError",
    "NoErrorToReport",
]
