from __future__ import annotations

from .platt import (
    CurveFitPlattFitter,
    LogisticPlattFitter,
    PlattFitter,
    PlattParams,
    apply_platt,
    platt_probability,
    platt_scale,
)

__all__ = [
    "PlattParams",
    "PlattFitter",
    "LogisticPlattFitter",
    "CurveFitPlattFitter",
    "platt_probability",
    "apply_platt",
    "platt_scale",
]
