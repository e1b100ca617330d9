"""
CloudFront access log line parser.

Turns one raw log line into a LogRecord, tells the caller to skip W3C
header lines, or raises ParseError.

Usage:
    parser = LogLineParser()
    record = parser.parse(line)          # fresh record, None for headers

    # Hot path: reuse one record across lines
    record = LogRecord()
    for line in lines:
        if parser.parse_into(record, line):
            emit(record.to_row())
"""

import logging
from typing import Callable, Optional, Sequence

from ..config.constants import HEADER_PREFIXES
from ..config.settings import DeserializerSettings, get_settings
from .exceptions import ParseError
from .grammar import GRAMMARS, LEGACY_GRAMMAR, Grammar
from .record import LogRecord

logger = logging.getLogger(__name__)

LegacyMatchCallback = Callable[[str], None]


class LogLineParser:
    """
    Stateless CloudFront line parser.

    Grammars are tried in order (current first, legacy as fallback) and the
    first match wins. There is no dispatch by date.

    An instance holds no per-line state and may be shared by sequential
    callers; a LogRecord passed to parse_into must not be read by another
    thread while it is being filled.
    """

    def __init__(
        self,
        settings: Optional[DeserializerSettings] = None,
        on_legacy_match: Optional[LegacyMatchCallback] = None,
        grammars: Sequence[Grammar] = GRAMMARS,
    ):
        """
        Initialize the parser.

        Args:
            settings: Deserializer settings (get_settings() when omitted)
            on_legacy_match: Called with the line whenever the legacy grammar matches
            grammars: Grammars to try, in order
        """
        self.settings = settings or get_settings()
        self.on_legacy_match = on_legacy_match
        self.grammars = tuple(grammars)

    @staticmethod
    def is_header(line: str) -> bool:
        """Check if the line is a #Version: or #Fields: directive."""
        return line.startswith(HEADER_PREFIXES)

    def parse(self, line: str) -> Optional[LogRecord]:
        """
        Parse a line into a new LogRecord.

        Args:
            line: One log line, optionally with its line terminator

        Returns:
            Populated LogRecord, or None if the line is a header to skip

        Raises:
            ParseError: If the line cannot be parsed
        """
        record = LogRecord()
        if not self.parse_into(record, line):
            return None
        return record

    def parse_into(self, record: LogRecord, line: str) -> bool:
        """
        Parse a line by overwriting an existing LogRecord in place.

        After a ParseError the record's contents are undefined and must not
        be read.

        Args:
            record: Record to fill
            line: One log line, optionally with its line terminator

        Returns:
            True if the record was populated, False if the line is a header

        Raises:
            ParseError: If the line cannot be parsed
        """
        line = _strip_terminator(line)

        if self.is_header(line):
            logger.debug(f"Skipping header line: {line[:40]!r}")
            return False

        max_length = self.settings.max_line_length
        if max_length and len(line) > max_length:
            raise ParseError(
                f"Row exceeds max_line_length of {max_length} characters",
                line_content=line,
            )

        try:
            grammar, tokens = self._match(line)
            if self.settings.clear_unmatched_fields:
                record.reset()
            for descriptor, raw in zip(grammar.fields, tokens):
                setattr(record, descriptor.name, descriptor.coerce(raw))
            record.grammar_name = grammar.name
        except ParseError:
            raise
        except Exception as e:
            raise ParseError(
                "Could not parse row", line_content=line, cause=e
            ) from e

        return True

    def _match(self, line: str) -> tuple[Grammar, tuple[str, ...]]:
        """Return the first grammar matching the line with its tokens."""
        for grammar in self.grammars:
            tokens = grammar.match(line)
            if tokens is None:
                continue
            if grammar is LEGACY_GRAMMAR:
                self._legacy_matched(line)
            return grammar, tokens

        names = " or ".join(g.name for g in self.grammars)
        raise ParseError(
            f"Row didn't match {names} patterns", line_content=line
        )

    def _legacy_matched(self, line: str) -> None:
        if self.settings.log_legacy_fallback:
            logger.debug("old log format")
        if self.on_legacy_match is not None:
            self.on_legacy_match(line)


def _strip_terminator(line: str) -> str:
    """Drop one trailing \\n, \\r\\n or \\r."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def parse_line(
    line: str, settings: Optional[DeserializerSettings] = None
) -> Optional[LogRecord]:
    """
    Parse one CloudFront log line into a new LogRecord.

    Convenience function for one-off parsing.

    Args:
        line: One log line
        settings: Optional settings (get_settings() when omitted)

    Returns:
        LogRecord, or None for header lines

    Raises:
        ParseError: If the line cannot be parsed
    """
    return LogLineParser(settings=settings).parse(line)
