"""Public API for tersargs.

High-level entry points that compile a schema and scan tokens in one call.
Callers should use these instead of importing from kernel modules directly.
"""

from typing import Iterable, List, Optional, Union

from tersargs.codes import ArgumentKind, ErrorCode
from tersargs.kernel.scanner import ParseResult, scan
from tersargs.kernel.schema import Schema, compile_schema


def parse(schema: Union[str, Schema], tokens: Iterable[str]) -> ParseResult:
    """
    Compile schema (if given as text) and scan tokens against it.

    Raises:
        SchemaError: if schema text is malformed
    """
    if not isinstance(schema, Schema):
        schema = compile_schema(schema)
    return scan(schema, list(tokens))


class Args:
    """Query handle over one parsed argument list.

    Getters never raise: an identifier that is unknown, absent, or declared
    with a different kind yields the zero value for the requested type.
    """

    def __init__(self, schema: Union[str, Schema], tokens: Iterable[str]):
        self._schema = schema if isinstance(schema, Schema) else compile_schema(schema)
        self._result = scan(self._schema, list(tokens))

    @classmethod
    def init(cls, schema_text: str, tokens: Iterable[str]) -> "Args":
        """Compile schema_text and scan tokens. Raises SchemaError on bad schema."""
        return cls(schema_text, tokens)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def result(self) -> ParseResult:
        return self._result

    def _value(self, identifier: str, kind: ArgumentKind) -> Optional[Union[bool, str, int]]:
        if self._schema.kind_of(identifier) != kind:
            return None
        return self._result.values.get(identifier)

    def is_valid(self) -> bool:
        return self._result.valid

    def get_boolean(self, identifier: str) -> bool:
        value = self._value(identifier, ArgumentKind.BOOLEAN)
        return value if value is not None else False

    def get_string(self, identifier: str) -> str:
        value = self._value(identifier, ArgumentKind.STRING)
        return value if value is not None else ""

    def get_int(self, identifier: str) -> int:
        value = self._value(identifier, ArgumentKind.INTEGER)
        return value if value is not None else 0

    def has(self, identifier: str) -> bool:
        """True if identifier appeared in the scanned tokens."""
        return identifier in self._result.found

    def cardinality(self) -> int:
        """Number of distinct flags found."""
        return len(self._result.found)

    def usage(self) -> str:
        return self._schema.usage()

    @property
    def error_code(self) -> ErrorCode:
        return self._result.error_code

    def error_message(self) -> str:
        """Message for the most recent error. Raises NoErrorToReport if valid."""
        return self._result.error_message()

    def error_messages(self) -> List[str]:
        return self._result.error_messages()

    def __repr__(self) -> str:
        return f"Args(schema={self._schema.text!r}, valid={self._result.valid})"
