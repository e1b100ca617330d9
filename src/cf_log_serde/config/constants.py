"""
Constants for CloudFront access log deserialization.
"""

# =============================================================================
# Log File Conventions
# =============================================================================

# CloudFront log files open with W3C directives; these rows carry no data
HEADER_PREFIXES = ("#Version:", "#Fields:")

# CloudFront writes a single dash for "not applicable"
SENTINEL = "-"

# =============================================================================
# Column Layouts
# =============================================================================

# W3C field names in the order CloudFront writes them (current layout)
CURRENT_W3C_FIELDS = [
    "date",
    "time",
    "x-edge-location",
    "sc-bytes",
    "c-ip",
    "cs-method",
    "cs(Host)",
    "cs-uri-stem",
    "sc-status",
    "cs(Referer)",
    "cs(User-Agent)",
    "cs-uri-query",
    "cs(Cookie)",
    "x-edge-result-type",
    "x-edge-request-id",
    "x-host-header",
    "cs-protocol",
    "cs-bytes",
]

# Logs written before 2013-10-21 stop after x-edge-request-id
LEGACY_W3C_FIELDS = CURRENT_W3C_FIELDS[:15]

# Column names exposed to the host engine, aligned with CURRENT_W3C_FIELDS
COLUMN_NAMES = [
    "dt",
    "tm",
    "edgelocation",
    "bytessent",
    "ipaddress",
    "operation",
    "domain",
    "object",
    "httpstatus",
    "referrer",
    "useragent",
    "querystring",
    "cookie",
    "resulttype",
    "requestid",
    "hostheader",
    "protocol",
    "bytes",
]

# =============================================================================
# Settings
# =============================================================================

ENV_CLEAR_UNMATCHED_FIELDS = "CF_SERDE_CLEAR_UNMATCHED_FIELDS"
ENV_LOG_LEGACY_FALLBACK = "CF_SERDE_LOG_LEGACY_FALLBACK"
ENV_MAX_LINE_LENGTH = "CF_SERDE_MAX_LINE_LENGTH"

# Prefix for settings passed as host table properties
TABLE_PROPERTY_PREFIX = "cf_log_serde."

# Section holding deserializer settings in a YAML config file
CONFIG_SECTION = "deserializer"
