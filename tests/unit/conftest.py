"""
Pytest configuration and shared fixtures for unit tests.
"""

import pytest

from cf_log_serde.config import clear_settings_cache

CURRENT_COLUMNS = [
    "2014-05-23",
    "01:13:11",
    "FRA2",
    "182",
    "192.0.2.1",
    "GET",
    "d111111abcdef8.cloudfront.net",
    "/view/my/file.html",
    "200",
    "www.displaymyfiles.com",
    "Mozilla/4.0%20(compatible;%20MSIE%205.0b1;%20Mac_PowerPC)",
    "-",
    "-",
    "Hit",
    "xGN7KWpVEmB9Dp7ctcVFQC4E-nrcOcEKS1BhFa",
    "d111111abcdef8.cloudfront.net",
    "http",
    "2390282",
]

LEGACY_COLUMNS = [
    "2012-05-25",
    "22:01:30",
    "AMS1",
    "4448",
    "192.0.2.199",
    "GET",
    "d2zbgu7qk1sb3y.cloudfront.net",
    "/images/logo.png",
    "304",
    "-",
    "Mozilla/5.0%20(Windows%20NT%206.1)",
    "utm_source=test",
    "session=abc123",
    "RefreshHit",
    "4Ja2fkg8PK1j0P3Wq2Ff-bmf4p0LUzVCZ4wS",
]


@pytest.fixture
def current_columns():
    """Raw tokens of an 18-column line."""
    return list(CURRENT_COLUMNS)


@pytest.fixture
def current_line():
    """An 18-column CloudFront line, tab-separated."""
    return "\t".join(CURRENT_COLUMNS)


@pytest.fixture
def legacy_columns():
    """Raw tokens of a 15-column line."""
    return list(LEGACY_COLUMNS)


@pytest.fixture
def legacy_line():
    """A 15-column CloudFront line written before 2013-10-21."""
    return "\t".join(LEGACY_COLUMNS)


@pytest.fixture(autouse=True)
def _fresh_settings_cache(monkeypatch, tmp_path):
    """Keep get_settings() from leaking between tests or reading the host setup."""
    for key in (
        "CF_SERDE_CLEAR_UNMATCHED_FIELDS",
        "CF_SERDE_LOG_LEGACY_FALLBACK",
        "CF_SERDE_MAX_LINE_LENGTH",
    ):
        monkeypatch.delenv(key, raising=False)
    # Default config file path is relative to the working directory
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()
