"""Pandera contracts for tabular score/label input."""
from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pandera as pa
from pandera import Check, Column, DataFrameSchema

__all__ = ["score_label_schema", "ScoreLabelSchema", "normalize_labels", "validate_or_raise"]

logger = logging.getLogger(__name__)

_TRUE = {"true", "t", "yes", "y", "1", "1.0", "active"}
_FALSE = {"false", "f", "no", "n", "0", "0.0", "inactive", "decoy"}
_NUMERIC = {0: False, 1: True}


def score_label_schema(
    score_col: str = "score", label_col: str = "label", name_col: str | None = None
) -> DataFrameSchema:
    """Schema with a finite float score column and a boolean label column."""
    columns = {
        score_col: Column(
            pa.Float64,
            Check(lambda s: np.isfinite(s), error="score must be finite"),
            nullable=False,
        ),
        label_col: Column(pa.Bool, nullable=False),
    }
    if name_col is not None:
        columns[name_col] = Column(pa.String, nullable=False)
    return DataFrameSchema(columns, coerce=True)


ScoreLabelSchema = score_label_schema()


def normalize_labels(labels: pd.Series) -> pd.Series:
    """Map label cells to a nullable ``"boolean"`` series.

    Numeric labels must be 0 or 1 and strings one of ``"true"``, ``"0"``,
    ``"decoy"``...; anything else, blank cells included, becomes ``NA`` so
    that schema validation rejects it.
    """
    if pd.api.types.is_bool_dtype(labels):
        return labels
    if pd.api.types.is_numeric_dtype(labels):
        mapped = labels.map(lambda v: _NUMERIC.get(v, pd.NA))
    else:
        lowered = labels.astype(str).str.strip().str.lower()
        mapped = lowered.map(lambda v: True if v in _TRUE else (False if v in _FALSE else pd.NA))
    return mapped.astype("boolean")


def validate_or_raise(df: pd.DataFrame, schema: DataFrameSchema, name: str) -> pd.DataFrame:
    """Validate ``df`` against ``schema``; log and re-raise on failure."""
    try:
        return schema.validate(df)
    except pa.errors.SchemaError as exc:
        logger.error("table %r failed validation: %s", name, exc)
        raise
