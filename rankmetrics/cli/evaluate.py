"""Command-line entry point computing ranking metrics for a score table."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd
from omegaconf import OmegaConf

from rankmetrics.config import load_config, save_config
from rankmetrics.data.loader import load_table, records_from_frame
from rankmetrics.eval.report import performance_report
from rankmetrics.eval.report_html import generate_report_html
from rankmetrics.io.persist import json_safe, save_json
from rankmetrics.online.top_keeper import TopKeeper
from rankmetrics.utils import mlflow_utils as mlf

logger = logging.getLogger(__name__)

_TOP_K_FROM_CONFIG = -1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Compute ROC/PR/early-recognition metrics for a score table"
    )
    ap.add_argument("table", type=Path, help="CSV, TSV or parquet file with scores and labels")
    ap.add_argument("--config", type=Path, default=None, help="YAML overriding the defaults")
    ap.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Config override, e.g. metrics.bedroc_alpha=50 (repeatable)",
    )
    ap.add_argument(
        "--top-k",
        nargs="?",
        type=int,
        const=_TOP_K_FROM_CONFIG,
        default=None,
        metavar="K",
        help="Also list the K best scored names (K defaults to top_k.k)",
    )
    ap.add_argument("--html", type=Path, default=None, help="Write plots to this HTML file")
    ap.add_argument("--json", type=Path, default=None, help="Write the report to this JSON file")
    ap.add_argument("--mlflow", action="store_true", help="Log the report to MLflow")
    ap.add_argument("--log-level", default="WARNING", help="Logging level")
    return ap


def run(args: argparse.Namespace) -> dict:
    cfg = load_config(args.config, args.overrides)
    if args.top_k is not None and args.top_k != _TOP_K_FROM_CONFIG:
        cfg.top_k.k = args.top_k
    if args.mlflow:
        cfg.tracking.enabled = True

    df: pd.DataFrame = load_table(args.table)
    cols = cfg.columns
    items = records_from_frame(df, cols.score, cols.label, cols.name)
    report = performance_report(items, cfg)
    out: dict = {"report": report}

    if args.top_k is not None:
        keeper = TopKeeper(cfg.top_k.k)
        for i, sl in enumerate(items):
            keeper.add(sl.name or str(i), sl.score)
        out["top_k"] = [{"name": n, "score": s} for s, n in keeper.high_scores_first()]

    if args.json is not None:
        save_json(out, args.json)
        save_config(cfg, args.json.with_suffix(".config.yaml"))
    if args.html is not None:
        generate_report_html(args.html, items, report)

    if cfg.tracking.enabled:
        with mlf.tracked_run(cfg.tracking.experiment, run_name=cfg.tracking.run_name):
            mlf.log_report(
                report,
                params={"table": str(args.table), **OmegaConf.to_container(cfg.metrics)},
                artifacts=[str(args.html)] if args.html is not None else [],
            )
    return out


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        out = run(args)
    except Exception as exc:
        logger.debug("evaluation failed", exc_info=True)
        print("[ERROR] Evaluation failed:", exc, file=sys.stderr)
        return 1
    print(json.dumps(json_safe(out), indent=2, allow_nan=False))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
