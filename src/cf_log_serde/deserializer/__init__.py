"""
CloudFront access log deserialization.

Provides the line parser, the record model, the column grammars and the
row-format plugin a host query engine loads.

Usage:
    from cf_log_serde.deserializer import LogLineParser, ParseError

    parser = LogLineParser()
    try:
        record = parser.parse(line)
    except ParseError as e:
        handle_bad_row(e.line_content)
    else:
        if record is not None:
            print(record.date, record.http_status)
"""

from .exceptions import ParseError, SerDeConfigError, SerDeError
from .frames import records_to_dataframe
from .grammar import (
    CURRENT_GRAMMAR,
    GRAMMARS,
    LEGACY_GRAMMAR,
    FieldDescriptor,
    FieldKind,
    Grammar,
    nullify_sentinel,
    to_optional_int,
)
from .parser import LogLineParser, parse_line
from .record import FIELD_NAMES, LogRecord
from .serde import COLUMN_TYPES, CloudFrontDeserializer, DeserializerStats

__all__ = [
    # Record model
    "LogRecord",
    "FIELD_NAMES",
    # Grammars
    "Grammar",
    "FieldDescriptor",
    "FieldKind",
    "CURRENT_GRAMMAR",
    "LEGACY_GRAMMAR",
    "GRAMMARS",
    "nullify_sentinel",
    "to_optional_int",
    # Parser
    "LogLineParser",
    "parse_line",
    # Host plugin
    "CloudFrontDeserializer",
    "DeserializerStats",
    "COLUMN_TYPES",
    # DataFrames
    "records_to_dataframe",
    # Exceptions
    "SerDeError",
    "ParseError",
    "SerDeConfigError",
]
