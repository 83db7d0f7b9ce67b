"""CLI configuration."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .data import Dictionary


class SolverConfig(BaseModel):
    """
    Settings shared by the CLI subcommands.

    Example config.yaml:
        dictionary: wordle
        grid_columns: 10
        verbose: true
    """
    dictionary: Dictionary = Dictionary.COMMON
    grid_columns: int = Field(14, ge=1)
    words_file: Optional[Path] = None
    verbose: bool = False


def load_config(config_path: str) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SolverConfig(**data)
