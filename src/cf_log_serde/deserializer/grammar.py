"""
Column grammars for CloudFront access log lines.

A grammar is an ordered list of field descriptors. Lines are whitespace
delimited: every token but the last is a maximal run of non-whitespace
characters, and the last token is the remainder of the line, so it may
itself contain whitespace.

Two historical layouts exist:

    current (18 columns):
        date time x-edge-location sc-bytes c-ip cs-method cs(Host)
        cs-uri-stem sc-status cs(Referer) cs(User-Agent) cs-uri-query
        cs(Cookie) x-edge-result-type x-edge-request-id x-host-header
        cs-protocol cs-bytes

    legacy (15 columns, before 2013-10-21):
        the same, ending at x-edge-request-id

Adapted from Amazon's cloudfront-loganalyzer expressions.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ..config.constants import CURRENT_W3C_FIELDS, LEGACY_W3C_FIELDS, SENTINEL
from .record import FIELD_NAMES

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class FieldKind(Enum):
    """Value types a column can be coerced to."""

    STRING = "string"
    INTEGER = "int"


def nullify_sentinel(value: str) -> Optional[str]:
    """Turn the "-" sentinel into None, keep anything else verbatim."""
    return None if value == SENTINEL else value


def to_optional_int(value: str) -> Optional[int]:
    """
    Convert a column to an int, treating the "-" sentinel as None.

    Only an optional sign followed by ASCII digits is accepted, so values
    such as "1_000" or " 12" are rejected even though int() would take them.

    Raises:
        ValueError: If the value is neither the sentinel nor a base-10 integer
    """
    if value == SENTINEL:
        return None
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError(f"invalid literal for base-10 integer: {value!r}")
    return int(value)


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One positional column of a grammar.

    Attributes:
        name: LogRecord attribute the column is assigned to
        w3c_name: CloudFront's name for the column
        kind: Target value type
        nullable: Whether "-" means absent for this column
    """

    name: str
    w3c_name: str
    kind: FieldKind = FieldKind.STRING
    nullable: bool = False

    def coerce(self, raw: str) -> Union[str, int, None]:
        """
        Convert a captured token to the field's value.

        Raises:
            ValueError: If an integer column holds a non-numeric token
        """
        if self.kind is FieldKind.INTEGER:
            if raw == SENTINEL and not self.nullable:
                raise ValueError(f"column '{self.name}' does not allow {SENTINEL!r}")
            return to_optional_int(raw)
        if self.nullable:
            return nullify_sentinel(raw)
        return raw


@dataclass(frozen=True)
class Grammar:
    """
    A named, ordered column layout with its compiled line expression.
    """

    name: str
    fields: tuple[FieldDescriptor, ...]
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.fields:
            raise ValueError(f"Grammar '{self.name}' needs at least one field")
        object.__setattr__(self, "pattern", self._compile(len(self.fields)))

    @staticmethod
    def _compile(field_count: int) -> re.Pattern:
        # ASCII whitespace only; NBSP and other Unicode spaces stay inside tokens
        token = r"(\S+)\s+"
        return re.compile(r"\s*" + token * (field_count - 1) + r"(.+)", re.ASCII)

    def match(self, line: str) -> Optional[tuple[str, ...]]:
        """
        Split a line into this grammar's tokens.

        Returns:
            Tuple of raw tokens in field order, or None if the line does not fit
        """
        m = self.pattern.fullmatch(line)
        if m is None:
            return None
        return m.groups()


# Columns whose "-" means absent; user_agent keeps a literal dash
_NULLABLE_STRINGS = frozenset(
    ["referrer", "query_string", "cookie", "host_header", "protocol"]
)
_INTEGERS = frozenset(["bytes_sent", "http_status", "bytes"])


def _descriptors(w3c_names: list[str]) -> tuple[FieldDescriptor, ...]:
    descriptors = []
    for name, w3c_name in zip(FIELD_NAMES, w3c_names):
        if name in _INTEGERS:
            descriptors.append(
                FieldDescriptor(name, w3c_name, FieldKind.INTEGER, nullable=True)
            )
        else:
            descriptors.append(
                FieldDescriptor(name, w3c_name, nullable=name in _NULLABLE_STRINGS)
            )
    return tuple(descriptors)


CURRENT_GRAMMAR = Grammar("current", _descriptors(CURRENT_W3C_FIELDS))
LEGACY_GRAMMAR = Grammar("legacy", _descriptors(LEGACY_W3C_FIELDS))

# Tried in order; the first grammar that matches wins
GRAMMARS: tuple[Grammar, ...] = (CURRENT_GRAMMAR, LEGACY_GRAMMAR)
