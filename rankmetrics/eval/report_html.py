"""Plotly figures and a standalone HTML report for ranking performance."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import plotly.graph_objects as go

from ..data.scorable import Scorable
from .curves import cumulated_actives_curve, iter_roc_points, pr_curve
from .ranking import rank_order_by_score

__all__ = ["roc_figure", "pr_figure", "cumulated_actives_figure", "generate_report_html"]


def roc_figure(score_labels: Iterable[Scorable], title: str = "ROC curve") -> go.Figure:
    points = list(iter_roc_points(rank_order_by_score(score_labels)))
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=[p[0] for p in points], y=[p[1] for p in points], mode="lines", name="ROC"))
    fig.add_trace(
        go.Scatter(x=[0, 1], y=[0, 1], mode="lines", name="random", line={"dash": "dash"})
    )
    fig.update_layout(title=title, xaxis_title="FPR", yaxis_title="TPR")
    return fig


def pr_figure(score_labels: Iterable[Scorable], title: str = "Precision-recall curve") -> go.Figure:
    points = pr_curve(score_labels)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=[p[0] for p in points], y=[p[1] for p in points], mode="lines+markers", name="PR"))
    fig.update_layout(title=title, xaxis_title="recall", yaxis_title="precision")
    return fig


def cumulated_actives_figure(
    score_labels: Iterable[Scorable], title: str = "Cumulated actives"
) -> go.Figure:
    curve = cumulated_actives_curve(rank_order_by_score(score_labels))
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=list(range(1, len(curve) + 1)), y=curve, mode="lines", name="actives"))
    fig.update_layout(title=title, xaxis_title="rank", yaxis_title="actives found")
    return fig


def _metrics_table(report: Dict[str, float]) -> str:
    rows = "".join(f"<tr><td>{k}</td><td>{v:.6g}</td></tr>" for k, v in report.items())
    return f"<table><tr><th>metric</th><th>value</th></tr>{rows}</table>"


def generate_report_html(
    out_path: str | Path,
    score_labels: Iterable[Scorable],
    report: Dict[str, float] | None = None,
) -> str:
    """Write ROC, PR and cumulated-actives plots (plus metrics) to ``out_path``."""
    items = list(score_labels)
    figures: List[go.Figure] = [
        roc_figure(items),
        pr_figure(items),
        cumulated_actives_figure(items),
    ]
    parts = ["<html><head><meta charset='utf-8'><title>Ranking report</title></head><body>"]
    if report:
        parts.append(_metrics_table(report))
    for i, fig in enumerate(figures):
        parts.append(fig.to_html(full_html=False, include_plotlyjs="cdn" if i == 0 else False))
    parts.append("</body></html>")
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(parts), encoding="utf-8")
    return str(path)
