"""MLflow tracking of evaluation reports."""
from __future__ import annotations

import logging
import math
import os
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, Optional

import mlflow

logger = logging.getLogger(__name__)


@contextmanager
def tracked_run(
    exp_name: str,
    run_name: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None,
    tracking_uri: Optional[str] = None,
) -> Iterator[str]:
    """Open an MLflow run for the duration of the block and yield its id.

    The tracking URI defaults to ``$MLFLOW_TRACKING_URI`` and then ``mlruns``.
    """
    uri = tracking_uri or os.getenv("MLFLOW_TRACKING_URI", "mlruns")
    mlflow.set_tracking_uri(uri)
    mlflow.set_experiment(exp_name)
    with mlflow.start_run(run_name=run_name, tags=tags) as run:
        logger.info("tracking evaluation in MLflow run %s (%s)", run.info.run_id, uri)
        yield run.info.run_id


def log_report(
    report: Dict[str, float],
    params: Optional[Dict[str, object]] = None,
    artifacts: Iterable[str] = (),
) -> None:
    """Log a performance report to the active run.

    Undefined (NaN) metrics are skipped so they do not show up as zeros in
    the MLflow UI.  Outside of a run this is a no-op.
    """
    if mlflow.active_run() is None:
        logger.debug("no active MLflow run, report not logged")
        return
    if params:
        mlflow.log_params(params)
    defined = {k: float(v) for k, v in report.items() if not math.isnan(v)}
    skipped = sorted(set(report) - set(defined))
    if skipped:
        logger.info("not logging undefined metrics: %s", ", ".join(skipped))
    mlflow.log_metrics(defined)
    for path in artifacts:
        mlflow.log_artifact(path)
