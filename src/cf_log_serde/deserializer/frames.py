"""
DataFrame materialization for parsed records.
"""

from typing import Iterable

import pandas as pd

from ..config.constants import COLUMN_NAMES
from .grammar import CURRENT_GRAMMAR, FieldKind
from .record import LogRecord

# Nullable integer dtype keeps absent values as <NA> instead of float NaN
_DTYPES = {
    column: ("Int64" if descriptor.kind is FieldKind.INTEGER else "object")
    for column, descriptor in zip(COLUMN_NAMES, CURRENT_GRAMMAR.fields)
}


def records_to_dataframe(records: Iterable[LogRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record.

    Args:
        records: Parsed LogRecord objects

    Returns:
        DataFrame with the 18 CloudFront columns in order
    """
    rows = [record.to_row() for record in records]
    df = pd.DataFrame(rows, columns=COLUMN_NAMES)
    return df.astype(_DTYPES)
