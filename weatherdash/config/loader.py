"""YAML config loader."""

import hashlib
from pathlib import Path

import yaml

from weatherdash.config.schema import DashboardConfig


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file gives the defaults.
    """
    if path is None:
        return DashboardConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return DashboardConfig(**raw)


def config_hash(config: DashboardConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]
