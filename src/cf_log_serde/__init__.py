"""
Deserializer for AWS CloudFront access log lines.
"""

from .deserializer import (
    CloudFrontDeserializer,
    LogLineParser,
    LogRecord,
    ParseError,
    SerDeConfigError,
    SerDeError,
    parse_line,
)

__all__ = [
    "CloudFrontDeserializer",
    "LogLineParser",
    "LogRecord",
    "ParseError",
    "SerDeConfigError",
    "SerDeError",
    "parse_line",
]
