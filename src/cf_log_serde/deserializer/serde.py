"""
Row-format plugin entry point for host query engines.

CloudFrontDeserializer exposes the CloudFront columns with their types and
turns each line the host hands over into a row list, reusing a single
LogRecord between calls.

Usage:
    serde = CloudFrontDeserializer()
    serde.initialize({"columns": ",".join(COLUMN_NAMES)})
    for line in host_lines:
        row = serde.deserialize(line)
        if row is not None:
            materialize(row)
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..config.constants import COLUMN_NAMES, TABLE_PROPERTY_PREFIX
from ..config.settings import DeserializerSettings, get_settings
from .exceptions import ParseError, SerDeConfigError
from .grammar import CURRENT_GRAMMAR, LEGACY_GRAMMAR, FieldKind
from .parser import LogLineParser
from .record import LogRecord

logger = logging.getLogger(__name__)

# Host column types, aligned with COLUMN_NAMES
COLUMN_TYPES = [
    "int" if descriptor.kind is FieldKind.INTEGER else "string"
    for descriptor in CURRENT_GRAMMAR.fields
]


@dataclass
class DeserializerStats:
    """Counters for one deserializer instance."""

    rows_parsed: int = 0
    rows_skipped: int = 0
    legacy_rows: int = 0
    parse_errors: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for reporting."""
        return {
            "rows_parsed": self.rows_parsed,
            "rows_skipped": self.rows_skipped,
            "legacy_rows": self.legacy_rows,
            "parse_errors": self.parse_errors,
        }


class CloudFrontDeserializer:
    """
    Deserializer for CloudFront access log tables.

    Not thread-safe: the returned row is rebuilt from one reused record, so
    each row-reading pipeline needs its own instance.
    """

    COLUMN_NAMES = COLUMN_NAMES
    COLUMN_TYPES = COLUMN_TYPES

    def __init__(self, settings: Optional[DeserializerSettings] = None):
        self.stats = DeserializerStats()
        self._record = LogRecord()
        self._configure(settings or get_settings())

    def _configure(self, settings: DeserializerSettings) -> None:
        self.settings = settings
        self._parser = LogLineParser(settings=settings)

    def initialize(self, properties: Mapping[str, Any]) -> None:
        """
        Configure the deserializer from host table properties.

        Settings are read from keys prefixed with "cf_log_serde." (for
        example "cf_log_serde.max_line_length") and override the values
        from get_settings(). When a "columns" property
        is present it must declare exactly the CloudFront columns.

        Args:
            properties: Table properties supplied by the host

        Raises:
            SerDeConfigError: If the column declaration or a setting is invalid
        """
        columns = properties.get("columns")
        if columns:
            declared = [c.strip() for c in str(columns).split(",") if c.strip()]
            if len(declared) != len(COLUMN_NAMES):
                raise SerDeConfigError(
                    f"Table must declare {len(COLUMN_NAMES)} columns, "
                    f"got {len(declared)}",
                    key="columns",
                    value=columns,
                )

        # Table properties win over the file/environment settings
        config = get_settings().to_dict()
        config.update(
            {
                key[len(TABLE_PROPERTY_PREFIX) :]: value
                for key, value in properties.items()
                if key.startswith(TABLE_PROPERTY_PREFIX)
            }
        )
        self._configure(DeserializerSettings.from_dict(config))
        logger.debug(f"Deserializer initialized with {self.settings.to_dict()}")

    def deserialize(self, line: str) -> Optional[list[Any]]:
        """
        Deserialize one line into a row.

        Args:
            line: One log line

        Returns:
            List of column values in COLUMN_NAMES order, or None for header lines

        Raises:
            ParseError: If the line cannot be parsed
        """
        try:
            populated = self._parser.parse_into(self._record, line)
        except ParseError:
            self.stats.parse_errors += 1
            raise

        if not populated:
            self.stats.rows_skipped += 1
            return None

        self.stats.rows_parsed += 1
        if self._record.grammar_name == LEGACY_GRAMMAR.name:
            self.stats.legacy_rows += 1
        return self._record.to_row()

    def reset_stats(self) -> None:
        """Zero the counters."""
        self.stats = DeserializerStats()
