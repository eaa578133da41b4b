# classifier.py — Column type classification
# Maps pandas dtypes to a closed tag set and decides numerical vs categorical
"""
classifier.py — Column Type Classifier

Every column is reduced to a DTypeTag, then to exactly one decision:

    Numerical            integer / float tags (no unique-count scan)
    Categorical          string, categorical and enum tags, or an OTHER
                         column whose unique count is within the threshold
    CategoricalOverflow  OTHER column with more unique values than the
                         threshold; only the count is reported

The tag set is closed: a tag that is neither numerical, categorical nor
OTHER is rejected instead of silently falling through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

import pandas as pd


logger = logging.getLogger(__name__)


# =============================================================================
# TYPE TAGS
# =============================================================================

class DTypeTag(Enum):
    """Declared column type, independent of the engine's dtype objects."""
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT16 = "float16"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    CATEGORICAL = "categorical"
    ENUM = "enum"
    OTHER = "other"


NUMERICAL_TAGS = frozenset({
    DTypeTag.UINT8, DTypeTag.UINT16, DTypeTag.UINT32, DTypeTag.UINT64,
    DTypeTag.INT8, DTypeTag.INT16, DTypeTag.INT32, DTypeTag.INT64,
    DTypeTag.FLOAT16, DTypeTag.FLOAT32, DTypeTag.FLOAT64,
})
CATEGORICAL_TAGS = frozenset({DTypeTag.STRING, DTypeTag.CATEGORICAL, DTypeTag.ENUM})

_INTEGER_TAGS = {
    (False, 8): DTypeTag.UINT8,
    (False, 16): DTypeTag.UINT16,
    (False, 32): DTypeTag.UINT32,
    (False, 64): DTypeTag.UINT64,
    (True, 8): DTypeTag.INT8,
    (True, 16): DTypeTag.INT16,
    (True, 32): DTypeTag.INT32,
    (True, 64): DTypeTag.INT64,
}
_FLOAT_TAGS = {
    16: DTypeTag.FLOAT16,
    32: DTypeTag.FLOAT32,
    64: DTypeTag.FLOAT64,
}


def _bit_width(dtype) -> int:
    # Nullable extension dtypes (Int64, Float32, ...) expose their numpy twin
    numpy_dtype = getattr(dtype, "numpy_dtype", dtype)
    return int(numpy_dtype.itemsize) * 8


def dtype_tag(series: pd.Series) -> DTypeTag:
    """
    Map a pandas Series dtype to a DTypeTag.

    - Ordered categoricals are ENUM (fixed, declared category set),
      unordered ones CATEGORICAL.
    - object columns count as STRING only when every non-null value is a str.
    - bool, datetime, timedelta, mixed objects etc. are OTHER.
    """
    dtype = series.dtype

    if isinstance(dtype, pd.CategoricalDtype):
        return DTypeTag.ENUM if dtype.ordered else DTypeTag.CATEGORICAL

    if pd.api.types.is_bool_dtype(dtype):
        return DTypeTag.OTHER

    if pd.api.types.is_integer_dtype(dtype):
        signed = pd.api.types.is_signed_integer_dtype(dtype)
        return _INTEGER_TAGS.get((signed, _bit_width(dtype)), DTypeTag.OTHER)

    if pd.api.types.is_float_dtype(dtype):
        return _FLOAT_TAGS.get(_bit_width(dtype), DTypeTag.OTHER)

    if isinstance(dtype, pd.StringDtype):
        return DTypeTag.STRING

    if dtype == object:
        inferred = pd.api.types.infer_dtype(series, skipna=True)
        if inferred in ("string", "empty"):
            return DTypeTag.STRING

    return DTypeTag.OTHER


# =============================================================================
# DECISIONS
# =============================================================================

@dataclass(frozen=True)
class Numerical:
    """Column gets descriptive statistics."""
    pass


@dataclass(frozen=True)
class Categorical:
    """
    Column gets a frequency table.

    unique_count is filled in when the classifier already had to scan the
    column (OTHER tags), so the statistics step can reuse it.
    """
    threshold: int
    unique_count: int | None = None


@dataclass(frozen=True)
class CategoricalOverflow:
    """Too many unique values; only the count is reported."""
    unique_count: int


ClassificationDecision = Union[Numerical, Categorical, CategoricalOverflow]


def classify(
    tag: DTypeTag,
    unique_count_fn: Callable[[], int],
    threshold: int,
) -> ClassificationDecision:
    """
    Decide how a column is summarized.

    Args:
        tag: Column type tag from dtype_tag()
        unique_count_fn: Zero-argument probe returning the unique-value count;
            only called for OTHER tags. Expected to raise StatisticsError
            (naming the column) on failure, which propagates unchanged.
        threshold: Max unique count for an OTHER column to be categorical

    Returns:
        Numerical, Categorical or CategoricalOverflow
    """
    if tag in NUMERICAL_TAGS:
        return Numerical()

    if tag in CATEGORICAL_TAGS:
        return Categorical(threshold=threshold)

    if tag is DTypeTag.OTHER:
        unique_count = unique_count_fn()
        if unique_count <= threshold:
            return Categorical(threshold=threshold, unique_count=unique_count)
        logger.debug(
            "Unique count %d exceeds threshold %d; reporting count only",
            unique_count, threshold,
        )
        return CategoricalOverflow(unique_count=unique_count)

    raise ValueError(f"Unclassified dtype tag: {tag!r}")
