from __future__ import annotations

from pathlib import Path
import json
import math
import pandas as pd


def ensure_dir(path: str | Path) -> Path:
    """Ensure that the directory for *path* exists.

    If *path* is a directory, it is created directly. If it is a file path,
    the parent directory is created. Returns the resolved directory path.
    """
    p = Path(path)
    directory = p if p.suffix == "" else p.parent
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def load_df(path: str | Path) -> pd.DataFrame:
    """Load a score table from *path* based on its suffix."""
    p = Path(path)
    if p.suffix == ".parquet":
        return pd.read_parquet(p)
    elif p.suffix == ".csv":
        return pd.read_csv(p)
    elif p.suffix == ".tsv":
        return pd.read_csv(p, sep="\t")
    else:
        raise ValueError(f"Unsupported dataframe format: {p.suffix}")


def json_safe(obj: object) -> object:
    """Replace NaN and infinite floats in nested dicts/lists with ``None``."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {k: json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [json_safe(v) for v in obj]
    return obj


def save_json(obj: object, path: str | Path) -> None:
    """Write *obj* as strict JSON; undefined metrics become ``null``."""
    p = Path(path)
    ensure_dir(p)
    with open(p, "w", encoding="utf-8") as fh:
        json.dump(json_safe(obj), fh, indent=2, sort_keys=True, allow_nan=False)

