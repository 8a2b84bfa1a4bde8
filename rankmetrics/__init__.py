"""Classification and regression performance metrics for ranked datasets."""
from __future__ import annotations

from .data.scorable import Projected, Scorable, ScoreLabel, project
from .eval import *  # noqa: F401,F403
from .eval import __all__ as _eval_all
from .online.top_keeper import TopKeeper

__version__ = "0.1.0"

__all__ = ["Scorable", "ScoreLabel", "Projected", "project", "TopKeeper", *_eval_all]
