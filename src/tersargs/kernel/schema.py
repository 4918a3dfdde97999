"""Schema compilation: schema text -> typed argument declarations.

Schema grammar: a comma-separated list of ``<letter><suffix>`` elements where
the suffix is ``""`` (boolean), ``"*"`` (string) or ``"#"`` (integer).
Whitespace around elements is ignored, as are empty elements.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from tersargs.codes import ArgumentKind, SchemaErrorCode
from tersargs._internal.log import get_logger
from tersargs.errors import SchemaError

logger = get_logger(__name__)

# Matched by exact equality, in this order.
SUFFIX_KINDS: Tuple[Tuple[str, ArgumentKind], ...] = (
    ("", ArgumentKind.BOOLEAN),
    ("*", ArgumentKind.STRING),
    ("#", ArgumentKind.INTEGER),
)

DEFAULT_VALUES: Dict[ArgumentKind, Union[bool, str, int]] = {
    ArgumentKind.BOOLEAN: False,
    ArgumentKind.STRING: "",
    ArgumentKind.INTEGER: 0,
}


def freeze_mapping(v: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only view over a private copy of v."""
    return MappingProxyType(dict(v))


def is_identifier(value: str) -> bool:
    """True if value is a single Unicode letter."""
    return len(value) == 1 and value.isalpha()


class Schema(BaseModel):
    """Compiled schema. Immutable once built.

    Each identifier maps to exactly one ArgumentKind, so the boolean, string
    and integer flag sets are disjoint by construction.
    """

    text: str  # Original schema text, kept verbatim for usage()
    elements: Mapping[str, ArgumentKind]  # Read-only once validated

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("elements")
    @classmethod
    def validate_elements(cls, v: Mapping[str, ArgumentKind]) -> Mapping[str, ArgumentKind]:
        """Validate every key is a single-letter identifier."""
        for identifier in v:
            if not is_identifier(identifier):
                raise ValueError(f"Identifier '{identifier}' must be a single letter")
        return freeze_mapping(v)

    @field_serializer("elements")
    def serialize_elements(self, v: Mapping[str, ArgumentKind]) -> Dict[str, ArgumentKind]:
        return dict(v)

    def _flags_of(self, kind: ArgumentKind) -> FrozenSet[str]:
        return frozenset(i for i, k in self.elements.items() if k == kind)

    @property
    def boolean_flags(self) -> FrozenSet[str]:
        return self._flags_of(ArgumentKind.BOOLEAN)

    @property
    def string_flags(self) -> FrozenSet[str]:
        return self._flags_of(ArgumentKind.STRING)

    @property
    def integer_flags(self) -> FrozenSet[str]:
        return self._flags_of(ArgumentKind.INTEGER)

    @property
    def identifiers(self) -> FrozenSet[str]:
        """Get set of all declared identifiers."""
        return frozenset(self.elements)

    def kind_of(self, identifier: str) -> Optional[ArgumentKind]:
        """Declared kind of identifier, or None if it is not in the schema."""
        return self.elements.get(identifier)

    def default_values(self) -> Dict[str, Union[bool, str, int]]:
        """Zero value (False / "" / 0) for every declared identifier."""
        return {i: DEFAULT_VALUES[k] for i, k in self.elements.items()}

    def usage(self) -> str:
        """Render the schema as ``-[text]``, or "" for an empty schema."""
        if self.text:
            return f"-[{self.text}]"
        return ""


def split_schema(text: str) -> List[str]:
    """Split schema text into trimmed, non-empty elements."""
    pieces = (piece.strip() for piece in text.split(","))
    return [piece for piece in pieces if piece]


def parse_schema_element(element: str, schema_text: str) -> Tuple[str, ArgumentKind]:
    """Parse one trimmed schema element into (identifier, kind).

    Raises:
        SchemaError: if the identifier is not a letter or the suffix is unknown.
    """
    element_id = element[0]
    element_tail = element[1:]

    if not is_identifier(element_id):
        raise SchemaError(
            f"Bad character {element_id} in Args format: {schema_text}",
            code=SchemaErrorCode.BAD_CHARACTER,
            schema_text=schema_text,
            element=element,
            element_id=element_id,
        )

    for suffix, kind in SUFFIX_KINDS:
        if element_tail == suffix:
            return element_id, kind

    raise SchemaError(
        f"Argument {element_id} has invalid format: {element_tail}",
        code=SchemaErrorCode.INVALID_FORMAT,
        schema_text=schema_text,
        element=element,
        element_id=element_id,
    )


def compile_schema(text: str) -> Schema:
    """
    Compile schema text into a Schema.

    A redeclared identifier takes the kind of its last declaration.

    Args:
        text: Schema text, e.g. ``"l,p#,d*"``

    Returns:
        Compiled Schema

    Raises:
        SchemaError: on a non-letter identifier or an unrecognized type suffix
    """
    elements: Dict[str, ArgumentKind] = {}
    for element in split_schema(text):
        element_id, kind = parse_schema_element(element, text)
        previous = elements.get(element_id)
        if previous is not None:
            logger.warning(
                "schema_identifier_redeclared",
                identifier=element_id,
                previous_kind=previous.value,
                kind=kind.value,
            )
        elements[element_id] = kind

    return Schema(text=text, elements=elements)
