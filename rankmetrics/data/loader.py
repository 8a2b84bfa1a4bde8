"""Load score tables into score/label records or arrays."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from ..eval.arrays import ScoreLabelArray
from ..io.persist import load_df
from .contracts import normalize_labels, score_label_schema, validate_or_raise
from .scorable import ScoreLabel

__all__ = ["load_table", "clean_frame", "records_from_frame", "arrays_from_frame"]

logger = logging.getLogger(__name__)


def load_table(path: str | Path) -> pd.DataFrame:
    """Read a ``.csv``, ``.tsv`` or ``.parquet`` score table."""
    df = load_df(path)
    logger.info("loaded %d rows from %s", len(df), path)
    return df


def clean_frame(
    df: pd.DataFrame,
    score_col: str = "score",
    label_col: str = "label",
    name_col: str | None = None,
) -> pd.DataFrame:
    """Select, normalise and validate the score/label (and name) columns.

    Raises
    ------
    KeyError
        If a requested column is missing.
    pandera.errors.SchemaError
        If scores are not finite or labels are not boolean-like.
    """
    cols = [score_col, label_col] + ([name_col] if name_col else [])
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise KeyError(f"Missing required columns: {missing}")
    out = df[cols].copy()
    out[label_col] = normalize_labels(out[label_col])
    schema = score_label_schema(score_col, label_col, name_col)
    return validate_or_raise(out, schema, "score_labels")


def records_from_frame(
    df: pd.DataFrame,
    score_col: str = "score",
    label_col: str = "label",
    name_col: str | None = None,
) -> List[ScoreLabel]:
    """Build :class:`ScoreLabel` records in table order."""
    clean = clean_frame(df, score_col, label_col, name_col)
    names = clean[name_col].tolist() if name_col else [""] * len(clean)
    return [
        ScoreLabel(score=float(s), label=bool(l), name=str(n))
        for s, l, n in zip(clean[score_col].tolist(), clean[label_col].tolist(), names)
    ]


def arrays_from_frame(
    df: pd.DataFrame, score_col: str = "score", label_col: str = "label"
) -> ScoreLabelArray:
    clean = clean_frame(df, score_col, label_col)
    return ScoreLabelArray(clean[score_col].to_numpy(), clean[label_col].to_numpy())
