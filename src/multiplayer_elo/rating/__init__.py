"""Rating module for Multiplayer ELO.

This module provides the all-pairs ELO rating engine and the aggregator
that folds contest results into player statistics.

Components:
    - MultiplayerELO: Computes per-participant rating deltas for a contest
    - StatsAggregator: Applies a contest outcome to a player's rating and stats

Example:
    ```python
    from multiplayer_elo.rating import MultiplayerELO

    deltas = MultiplayerELO().compute_deltas([1000, 1000, 1000], [1, 2, 3])
    # [16, 0, -16]
    ```
"""

from .elo import MultiplayerELO
from .stats import StatsAggregator

__all__ = [
    "MultiplayerELO",
    "StatsAggregator",
]
