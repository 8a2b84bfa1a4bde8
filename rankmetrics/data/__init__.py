from __future__ import annotations

from .scorable import Projected, Scorable, ScoreLabel, project

__all__ = ["Scorable", "ScoreLabel", "Projected", "project"]
