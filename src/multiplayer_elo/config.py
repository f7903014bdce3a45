"""Configuration for Multiplayer ELO.

This module provides the LedgerConfig class for customizing rating
behavior: the starting rating, the K-factor numerator, the logistic
scale, and the size of the recent-finish window.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .models import RECENT_WINDOW, STARTING_RATING


class LedgerConfig(BaseModel):
    """Configuration for a Ledger.

    Attributes:
        starting_rating: Rating assigned on registration and on reset.
        base_k_factor: Numerator of the per-contest K-factor,
            ``K = base_k_factor // (participants - 1)``.
        rating_scale: Logistic divisor used in the expected score.
        recent_window: Number of recent finishing positions kept per player.
    """

    starting_rating: int = Field(default=STARTING_RATING, ge=0)
    base_k_factor: int = Field(default=32, ge=1)
    rating_scale: float = Field(default=400.0, gt=0)
    recent_window: int = Field(default=RECENT_WINDOW, ge=1, le=100)

    @classmethod
    def from_yaml(cls, path: str | Path) -> LedgerConfig:
        """Load configuration from a YAML file.

        The settings may sit at the top level or under a ``ledger`` key.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            LedgerConfig instance.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            ValueError: If the YAML is invalid.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file: expected dict, got {type(data).__name__}")

        # Handle nested 'ledger' section
        if "ledger" in data:
            data = data["ledger"] or {}
            if not isinstance(data, dict):
                raise ValueError(
                    f"Invalid 'ledger' section: expected dict, got {type(data).__name__}"
                )

        return cls(**data)
