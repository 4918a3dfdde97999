"""Token scanning against a compiled Schema.

Single pass over the tokens with an explicit cursor. Only tokens starting with
``-`` are inspected; every character after the dash is an independent flag, so
``-lx`` is the same as ``-l -x``. String and integer flags consume the next
token in the sequence as their companion value.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from tersargs._internal.log import get_logger
from tersargs.codes import ArgumentKind, ErrorCode
from tersargs.errors import NoErrorToReport
from tersargs.kernel.messages import issue_message, unexpected_arguments_message
from tersargs.kernel.schema import Schema, freeze_mapping

logger = get_logger(__name__)

# Signed base-10 ASCII digits, nothing else (no whitespace, no underscores).
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

FLAG_PREFIX = "-"


class ArgumentIssue(BaseModel):
    """A single recoverable scan error."""

    code: ErrorCode
    argument: str  # Flag character the issue is about
    parameter: Optional[str] = None  # Offending companion text (INVALID_INTEGER only)

    model_config = ConfigDict(frozen=True)

    @property
    def message(self) -> str:
        return issue_message(self.code, self.argument, self.parameter)


class ParseResult(BaseModel):
    """Outcome of scanning tokens against a schema. Read-only."""

    values: Mapping[str, Union[bool, str, int]]  # Read-only; pre-seeded for every declared identifier
    found: Tuple[str, ...] = ()  # Distinct flags seen, first-seen order
    unexpected: Tuple[str, ...] = ()  # Distinct undeclared characters, first-seen order
    positionals: Tuple[str, ...] = ()  # Non-dash tokens not consumed as companion values
    issues: Tuple[ArgumentIssue, ...] = ()  # Every recoverable error, encounter order
    valid: bool = True

    model_config = ConfigDict(frozen=True)

    @field_validator("values")
    @classmethod
    def validate_values(cls, v: Mapping[str, Union[bool, str, int]]) -> Mapping[str, Union[bool, str, int]]:
        return freeze_mapping(v)

    @field_serializer("values")
    def serialize_values(self, v: Mapping[str, Union[bool, str, int]]) -> Dict[str, Union[bool, str, int]]:
        return dict(v)

    @property
    def last_issue(self) -> Optional[ArgumentIssue]:
        return self.issues[-1] if self.issues else None

    @property
    def error_code(self) -> ErrorCode:
        issue = self.last_issue
        return issue.code if issue else ErrorCode.OK

    @property
    def error_argument(self) -> Optional[str]:
        issue = self.last_issue
        return issue.argument if issue else None

    @property
    def error_parameter(self) -> Optional[str]:
        issue = self.last_issue
        return issue.parameter if issue else None

    def _render(self, issue: ArgumentIssue) -> str:
        if issue.code == ErrorCode.UNEXPECTED_ARGUMENT:
            return unexpected_arguments_message(self.unexpected)
        return issue.message

    def error_message(self) -> str:
        """
        Message for the most recent issue.

        An UNEXPECTED_ARGUMENT message lists every unexpected character seen
        during the scan, not only the last one.

        Raises:
            NoErrorToReport: if the scan recorded no issues
        """
        issue = self.last_issue
        if issue is None:
            raise NoErrorToReport("No error to report: the arguments are valid")
        return self._render(issue)

    def error_messages(self) -> List[str]:
        """Messages for every issue, in encounter order.

        Unexpected characters are reported once, in a single aggregated message
        placed where the first of them was seen.
        """
        messages: List[str] = []
        unexpected_reported = False
        for issue in self.issues:
            if issue.code == ErrorCode.UNEXPECTED_ARGUMENT:
                if unexpected_reported:
                    continue
                unexpected_reported = True
            messages.append(self._render(issue))
        return messages


@dataclass
class ScanContext:
    """Mutable accumulator for a single scan."""

    schema: Schema
    tokens: Tuple[str, ...]
    cursor: int = 0
    values: Dict[str, Union[bool, str, int]] = field(default_factory=dict)
    found: Dict[str, None] = field(default_factory=dict)  # dict as ordered set
    unexpected: Dict[str, None] = field(default_factory=dict)
    positionals: List[str] = field(default_factory=list)
    issues: List[ArgumentIssue] = field(default_factory=list)

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def current(self) -> str:
        return self.tokens[self.cursor]

    def take_companion(self) -> Optional[str]:
        """Advance the cursor and return that token, or None if none is left."""
        if self.cursor + 1 >= len(self.tokens):
            return None
        self.cursor += 1
        return self.tokens[self.cursor]

    def report(self, code: ErrorCode, argument: str, parameter: Optional[str] = None) -> None:
        self.issues.append(ArgumentIssue(code=code, argument=argument, parameter=parameter))

    def freeze(self) -> ParseResult:
        return ParseResult(
            values=dict(self.values),
            found=tuple(self.found),
            unexpected=tuple(self.unexpected),
            positionals=tuple(self.positionals),
            issues=tuple(self.issues),
            valid=not self.issues,
        )


def parse_integer(text: str) -> Optional[int]:
    """Coerce text to int, or None if it is not a plain base-10 integer."""
    if INTEGER_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def _set_string(ctx: ScanContext, flag: str) -> None:
    parameter = ctx.take_companion()
    if parameter is None:
        ctx.report(ErrorCode.MISSING_STRING, flag)
        return
    ctx.values[flag] = parameter


def _set_integer(ctx: ScanContext, flag: str) -> None:
    parameter = ctx.take_companion()
    if parameter is None:
        ctx.report(ErrorCode.MISSING_INTEGER, flag)
        return
    value = parse_integer(parameter)
    if value is None:
        ctx.report(ErrorCode.INVALID_INTEGER, flag, parameter)
        return
    ctx.values[flag] = value


def _scan_element(ctx: ScanContext, flag: str) -> None:
    kind = ctx.schema.kind_of(flag)
    if kind is None:
        ctx.unexpected.setdefault(flag, None)
        ctx.report(ErrorCode.UNEXPECTED_ARGUMENT, flag)
        return

    ctx.found.setdefault(flag, None)
    if kind == ArgumentKind.BOOLEAN:
        ctx.values[flag] = True
    elif kind == ArgumentKind.STRING:
        _set_string(ctx, flag)
    elif kind == ArgumentKind.INTEGER:
        _set_integer(ctx, flag)


def scan(schema: Schema, tokens: List[str]) -> ParseResult:
    """
    Scan tokens against schema.

    Args:
        schema: Compiled schema
        tokens: Raw command-line tokens (without the program name)

    Returns:
        Frozen ParseResult; never raises for bad input
    """
    ctx = ScanContext(schema=schema, tokens=tuple(tokens), values=schema.default_values())

    while not ctx.at_end():
        token = ctx.current()
        if token.startswith(FLAG_PREFIX):
            for flag in token[len(FLAG_PREFIX):]:
                _scan_element(ctx, flag)
        else:
            ctx.positionals.append(token)
        ctx.cursor += 1

    result = ctx.freeze()
    logger.debug(
        "tokens_scanned",
        token_count=len(ctx.tokens),
        found=list(result.found),
        unexpected=list(result.unexpected),
        issue_count=len(result.issues),
        valid=result.valid,
    )
    return result
