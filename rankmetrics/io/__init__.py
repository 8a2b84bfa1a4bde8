"""IO helpers for rankmetrics."""

from .persist import ensure_dir, json_safe, load_df, save_json  # noqa: F401
