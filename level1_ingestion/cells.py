"""Cell values and coercion rules.

Decoded cells are plain Python scalars: numbers (int/float), text (str),
booleans and None. Library-specific values coming out of pandas or numpy
(NaN, numpy scalars, timestamps) are normalized here before they reach the
rest of the pipeline.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Union

import numpy as np
import pandas as pd

CellValue = Union[int, float, str, bool, None]

# Largest integer a double represents exactly; bigger literals stay text.
MAX_SAFE_INTEGER = 2**53 - 1

_NUMBER_LITERAL = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$", re.ASCII)
_TRUE_LITERALS = {"true", "TRUE", "True"}
_FALSE_LITERALS = {"false", "FALSE", "False"}


def coerce_text_cell(text: str) -> CellValue:
    """Apply dynamic typing to a single delimited-text field.

    Empty fields become None, boolean literals become bool and number
    literals become int or float. Anything else is returned unchanged.
    """
    if text == "":
        return None
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    if _NUMBER_LITERAL.match(text):
        stripped = text.strip()
        if "." in stripped or "e" in stripped or "E" in stripped:
            number: Union[int, float] = float(stripped)
        else:
            number = int(stripped)
        if abs(number) < MAX_SAFE_INTEGER:
            return number
    return text


def normalize_cell(value: Any) -> CellValue:
    """Convert a value produced by pandas/numpy into a plain cell value."""
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        return None if math.isnan(value) else float(value)
    if isinstance(value, str):
        return value
    if value is pd.NaT:
        return None
    if isinstance(value, datetime):
        if (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def is_missing(value: CellValue) -> bool:
    """True for cells that count as absent: None and the empty string."""
    return value is None or (isinstance(value, str) and value == "")
