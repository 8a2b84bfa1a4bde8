"""Configuration defaults and loading with OmegaConf."""
from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Sequence

import yaml
from omegaconf import DictConfig, OmegaConf

__all__ = ["DEFAULT_CONFIG", "load_config", "save_config"]

DEFAULT_CONFIG = files("rankmetrics.config") / "default.yaml"


def load_config(
    path: str | Path | None = None, overrides: Sequence[str] | None = None
) -> DictConfig:
    """Load the defaults, merged with an optional YAML file and dotlist overrides.

    Parameters
    ----------
    path:
        User YAML whose keys override the packaged defaults.
    overrides:
        ``key=value`` strings, e.g. ``["metrics.bedroc_alpha=50"]``.
    """
    with DEFAULT_CONFIG.open("r", encoding="utf-8") as fh:
        cfg = OmegaConf.create(yaml.safe_load(fh))
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(str(path)))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    return cfg


def save_config(cfg: DictConfig, path: str | Path) -> None:
    """Write the resolved configuration as YAML."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as fh:
        yaml.safe_dump(OmegaConf.to_container(cfg, resolve=True), fh, sort_keys=True)
