"""Column type inference for Level 2.

Classifies a column's values into one of four semantic types using ratio
and cardinality heuristics. Each value is first placed in a bucket
(number, date or string); the bucket counts then decide the column type.
"""

import logging
import math
import re
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

from dateutil import parser as date_parser

from level1_ingestion.cells import CellValue, is_missing
from settings.schema import InferenceThresholds

logger = logging.getLogger(__name__)


class ColumnType(str, Enum):
    """Semantic column types."""

    NUMBER = "number"
    DATE = "date"
    CATEGORY = "category"
    STRING = "string"


class ValueBucket(str, Enum):
    """Per-value classification used to vote on a column type."""

    NUMBER = "number"
    DATE = "date"
    STRING = "string"


DATE_PATTERNS = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII), "%Y-%m-%d"),
    (re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII), "%m/%d/%Y"),
    (re.compile(r"^\d{2}-\d{2}-\d{4}$", re.ASCII), "%m-%d-%Y"),
    (re.compile(r"^\d{4}/\d{2}/\d{2}$", re.ASCII), "%Y/%m/%d"),
)

_NUMERIC_TEXT = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$", re.ASCII)
_HAS_DIGIT = re.compile(r"\d", re.ASCII)
_FIRST_DEFAULT = datetime(2000, 1, 1)
_SECOND_DEFAULT = datetime(2004, 3, 3)


def is_numeric_value(value: CellValue) -> bool:
    """True for finite numbers and text that converts fully to a finite number.

    Booleans are not numbers.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str) and _NUMERIC_TEXT.match(value):
        return math.isfinite(float(value))
    return False


def match_date_pattern(text: str) -> Optional[str]:
    """Return the strptime format of the fixed date layout ``text`` uses, if any."""
    for pattern, date_format in DATE_PATTERNS:
        if pattern.match(text):
            return date_format
    return None


def is_date_value(value: CellValue) -> bool:
    """True for text that parses to a valid calendar date.

    Text in one of the fixed layouts (YYYY-MM-DD, MM/DD/YYYY, MM-DD-YYYY,
    YYYY/MM/DD) must be a real date in that layout, so ``2024-02-30`` and
    ``13/01/2024`` are rejected. Other text must be accepted by the generic
    date parser and supply at least two of year, month and day, so clock
    times (``10:30``) and ordinals (``1st``) are not dates. Text without any
    digit is never a date.
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _HAS_DIGIT.search(text):
        return False

    date_format = match_date_pattern(text)
    try:
        if date_format is not None:
            datetime.strptime(text, date_format)
            return True
        return _parsed_date_components(text) >= 2
    except (ValueError, OverflowError):
        return False


def _parsed_date_components(text: str) -> int:
    # Fields absent from the text come from the default; a field that agrees
    # under two defaults differing in year, month and day was supplied.
    # Leap years and 31-day months keep any supplied day in range.
    first = date_parser.parse(text, default=_FIRST_DEFAULT)
    second = date_parser.parse(text, default=_SECOND_DEFAULT)
    return sum(
        (first.year == second.year, first.month == second.month, first.day == second.day)
    )


def classify_value(value: CellValue) -> ValueBucket:
    """Place a single non-missing value in the number, date or string bucket."""
    if is_numeric_value(value):
        return ValueBucket.NUMBER
    if is_date_value(value):
        return ValueBucket.DATE
    return ValueBucket.STRING


def _distinct_count(values: Sequence[CellValue]) -> int:
    # bool hashes equal to 0/1, keep them apart from numbers
    return len({(isinstance(value, bool), value) for value in values})


def infer_column_type(
    values: Sequence[CellValue], thresholds: Optional[InferenceThresholds] = None
) -> ColumnType:
    """Infer the semantic type of a column.

    Only non-missing values take part. Rules are applied in order and the
    first match wins:

    1. number if the numeric share reaches ``number_ratio``
    2. date if the date share reaches ``date_ratio``
    3. category if the distinct count is below
       ``min(category_max_distinct, total * category_distinct_ratio)`` and at
       least one value is plain text
    4. string otherwise

    A column with no values at all is a string column.

    Args:
        values: Column values in row order
        thresholds: Heuristic thresholds (defaults used when omitted)

    Returns:
        Inferred ColumnType
    """
    thresholds = thresholds or InferenceThresholds()
    present = [value for value in values if not is_missing(value)]
    if not present:
        return ColumnType.STRING

    counts = {bucket: 0 for bucket in ValueBucket}
    for value in present:
        counts[classify_value(value)] += 1

    total = len(present)
    if counts[ValueBucket.NUMBER] / total >= thresholds.number_ratio:
        return ColumnType.NUMBER

    if counts[ValueBucket.DATE] / total >= thresholds.date_ratio:
        return ColumnType.DATE

    distinct = _distinct_count(present)
    if distinct < thresholds.category_limit(total) and counts[ValueBucket.STRING] > 0:
        return ColumnType.CATEGORY

    return ColumnType.STRING


def infer_column_types(
    columns: Sequence[Sequence[CellValue]], thresholds: Optional[InferenceThresholds] = None
) -> list[ColumnType]:
    """Infer the type of every column independently."""
    inferred = [infer_column_type(values, thresholds) for values in columns]
    logger.debug(f"Inferred column types: {[column_type.value for column_type in inferred]}")
    return inferred
