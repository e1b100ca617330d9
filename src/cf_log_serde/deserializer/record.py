"""
Record model for a deserialized CloudFront access log line.

LogRecord is a flat, mutable value object. The parser can fill a fresh
instance per line or overwrite one instance in place when the caller opts
into reuse.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

from ..config.constants import COLUMN_NAMES, SENTINEL

# Attribute names aligned with COLUMN_NAMES
FIELD_NAMES = [
    "date",
    "time",
    "edge_location",
    "bytes_sent",
    "ip_address",
    "operation",
    "domain",
    "object",
    "http_status",
    "referrer",
    "user_agent",
    "query_string",
    "cookie",
    "result_type",
    "request_id",
    "host_header",
    "protocol",
    "bytes",
]

FIELD_TO_COLUMN = dict(zip(FIELD_NAMES, COLUMN_NAMES))


@dataclass
class LogRecord:
    """
    One CloudFront access log row.

    Fields always populated after a successful parse:
        date, time, edge_location, ip_address, operation, domain, object,
        user_agent, result_type, request_id

    Nullable fields (None when the log wrote "-"):
        bytes_sent, http_status, referrer, query_string, cookie

    Current-format only (None after a legacy parse on a fresh or reset record):
        host_header, protocol, bytes

    grammar_name records which grammar populated the record; it is not a
    column.
    """

    date: Optional[str] = None
    time: Optional[str] = None
    edge_location: Optional[str] = None
    bytes_sent: Optional[int] = None
    ip_address: Optional[str] = None
    operation: Optional[str] = None
    domain: Optional[str] = None
    object: Optional[str] = None
    http_status: Optional[int] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    query_string: Optional[str] = None
    cookie: Optional[str] = None
    result_type: Optional[str] = None
    request_id: Optional[str] = None
    host_header: Optional[str] = None
    protocol: Optional[str] = None
    bytes: Optional[int] = None

    grammar_name: Optional[str] = None

    def reset(self) -> None:
        """Clear every field back to absent."""
        for f in fields(self):
            setattr(self, f.name, None)

    def to_row(self) -> list[Any]:
        """Return the 18 column values in column order."""
        return [getattr(self, name) for name in FIELD_NAMES]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary representation keyed by column name.

        Returns:
            Dictionary with all 18 columns, absent values as None
        """
        return {FIELD_TO_COLUMN[name]: getattr(self, name) for name in FIELD_NAMES}

    def to_line(self, delimiter: str = "\t") -> str:
        """
        Re-serialize the record as a log line.

        Absent values are written back as "-". A record populated by the
        legacy grammar is written with its 15 columns so that a request id
        containing whitespace stays the final, greedy column.

        Args:
            delimiter: Column separator (CloudFront uses tabs)

        Returns:
            Log line that parses back to the same field values
        """
        from .grammar import LEGACY_GRAMMAR

        names = FIELD_NAMES
        if self.grammar_name == LEGACY_GRAMMAR.name:
            names = FIELD_NAMES[: len(LEGACY_GRAMMAR.fields)]

        values = []
        for name in names:
            value = getattr(self, name)
            values.append(SENTINEL if value is None else str(value))
        return delimiter.join(values)
